from connect_four.events import Event, EventTimerTick


def test_event_members():
    names = [Event(member.value).name for member in Event]
    assert names == ["PLAYER_CHANGE", "TIMEOUT", "END"]


def test_timer_tick_members():
    names = [EventTimerTick(member.value).name for member in EventTimerTick]
    assert names == ["START", "END"]


def test_lookup_by_value_round_trip():
    for member in Event:
        assert Event(member.value) is member
    for member in EventTimerTick:
        assert EventTimerTick(member.value) is member


def test_end_events_are_distinct_types():
    game_end = Event(Event.END.value)
    tick_end = EventTimerTick(EventTimerTick.END.value)
    assert game_end is Event.END
    assert tick_end is EventTimerTick.END
    assert game_end != tick_end