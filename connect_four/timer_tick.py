"""Background counter that emits one tick per elapsed second."""

import queue
import time
from enum import Enum, auto

from .events import EventTimerTick

DELAY = 1.0


class Tick(Enum):
    """Signal that one second has elapsed."""

    TICK = auto()


def run(rx_timer: queue.Queue, tx_timer: queue.Queue, delay: float = DELAY) -> None:
    """Wait for a start, then put a tick on ``tx_timer`` every ``delay`` seconds.

    Stops when an end event arrives on ``rx_timer``; an end received before
    the start stops the counter without any tick.
    """
    end_game = rx_timer.get() is EventTimerTick.END
    while not end_game:
        time.sleep(delay)
        tx_timer.put(Tick.TICK)
        try:
            event = rx_timer.get_nowait()
        except queue.Empty:
            continue
        if event is EventTimerTick.END:
            end_game = True