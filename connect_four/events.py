"""Events exchanged between the game, the timer and the tick counter."""

from enum import Enum, auto


class Event(Enum):
    """Messages passed between the game manager and the timer manager."""

    PLAYER_CHANGE = auto()
    TIMEOUT = auto()
    END = auto()


class EventTimerTick(Enum):
    """Messages sent to the tick counter."""

    START = auto()
    END = auto()