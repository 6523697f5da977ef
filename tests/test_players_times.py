import pytest

from connect_four.players_times import (
    START_TIME_MINUTES,
    START_TIME_SECONDS,
    Player,
    PlayerTimes,
    PlayersTimes,
)


@pytest.fixture
def times():
    return PlayersTimes("alice", "bob")


def test_initial_state(times):
    assert times.current_player is Player.PLAYER1
    assert times.current_player_id() == 1
    assert times.timer_player_1.name_player == "alice"
    assert times.timer_player_2.name_player == "bob"
    for timer in (times.timer_player_1, times.timer_player_2):
        assert timer.minutes == START_TIME_MINUTES
        assert timer.seconds == START_TIME_SECONDS


def test_player_times_defaults():
    timer = PlayerTimes("carol")
    assert (timer.minutes, timer.seconds) == (START_TIME_MINUTES, START_TIME_SECONDS)


def test_first_tick_borrows_a_minute(times):
    assert times.tick_time() is False
    assert times.timer_player_1.minutes == START_TIME_MINUTES - 1
    assert times.timer_player_1.seconds == 59.0


def test_tick_only_affects_running_clock(times):
    times.tick_time()
    assert times.timer_player_2.minutes == START_TIME_MINUTES
    assert times.timer_player_2.seconds == START_TIME_SECONDS


def test_tick_after_change_affects_player_two(times):
    times.change_player()
    times.tick_time()
    assert times.timer_player_1.minutes == START_TIME_MINUTES
    assert times.timer_player_2.minutes == START_TIME_MINUTES - 1


def test_plain_second_decrement(times):
    times.timer_player_1.minutes = 1.0
    times.timer_player_1.seconds = 30.0
    assert times.tick_time() is False
    assert times.timer_player_1.seconds == 29.0
    assert times.timer_player_1.minutes == 1.0


def test_time_runs_out(times):
    times.timer_player_1.minutes = 0.0
    times.timer_player_1.seconds = 2.0
    assert times.tick_time() is False
    assert times.tick_time() is True


def test_reaching_zero_seconds_with_minutes_left(times):
    times.timer_player_1.minutes = 1.0
    times.timer_player_1.seconds = 1.0
    assert times.tick_time() is False
    assert times.timer_player_1.minutes == 0.0
    assert times.timer_player_1.seconds == 59.0


def test_full_countdown_ends(times):
    ticks = 0
    while not times.tick_time():
        ticks += 1
        assert ticks < 1000
    assert times.timer_player_1.minutes == 0.0
    assert times.timer_player_1.seconds <= 0.0


def test_change_player_toggles(times):
    times.change_player()
    assert times.current_player is Player.PLAYER2
    assert times.current_player_id() == 2
    times.change_player()
    assert times.current_player is Player.PLAYER1
    assert times.current_player_id() == 1


def test_current_player_name_is_opponent(times):
    assert times.current_player_name() == "bob"
    times.change_player()
    assert times.current_player_name() == "alice"