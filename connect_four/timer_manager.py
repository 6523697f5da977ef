"""Timer side of the game: player clocks, tick counter and timer window."""

import queue
import threading

import pygame

from . import timer_tick
from .events import Event, EventTimerTick
from .players_times import PlayersTimes
from .timer_graphics import TimerGraphics
from .timer_tick import Tick


class TimerManager:
    """Counts down the running player's clock and draws the timer window."""

    def __init__(
        self,
        name_player_1: str,
        name_player_2: str,
        tx_game_manager: queue.Queue,
        delay: float = timer_tick.DELAY,
    ) -> None:
        self.tx_tick: queue.Queue = queue.Queue()
        self.rx_tick: queue.Queue = queue.Queue()
        self._tick_thread = threading.Thread(
            target=timer_tick.run,
            args=(self.tx_tick, self.rx_tick, delay),
            daemon=True,
        )
        self._tick_thread.start()
        self.timer_graphics = TimerGraphics(name_player_1, name_player_2)
        self.players_times = PlayersTimes(name_player_1, name_player_2)
        self.tx_game_manager = tx_game_manager
        self._end_game = False

    def start(self) -> None:
        """Tell the tick counter to start counting."""
        self.tx_tick.put(EventTimerTick.START)

    def poll_tick(self) -> bool:
        """Count a pending tick, if any; return whether one was counted.

        When the running player's time is up, the timeout is signalled and
        the game is marked as ended.
        """
        try:
            tick = self.rx_tick.get_nowait()
        except queue.Empty:
            return False
        if tick is not Tick.TICK:
            return False
        if self.players_times.tick_time():
            self.timeout()
            self._end_game = True
        return True

    def run(self, surface: pygame.Surface) -> None:
        """Count a pending tick and redraw the timer window on ``surface``."""
        self.poll_tick()
        times = self.players_times
        self.timer_graphics.update_window(
            surface,
            times.timer_player_1.minutes,
            times.timer_player_1.seconds,
            times.timer_player_2.minutes,
            times.timer_player_2.seconds,
            times.current_player_id(),
        )

    def change_player(self) -> None:
        """Switch the running clock to the other player."""
        self.players_times.change_player()

    def is_end_game(self) -> bool:
        """Whether the game has ended."""
        return self._end_game

    def timeout(self) -> None:
        """Announce the winner on time and stop the game and the tick counter."""
        winner = self.players_times.current_player_name()
        print(f"Timeout !! Félicitations au vainqueur : {winner} !! ")
        print("Saisissez n'importe quoi pour quitter")
        self.tx_game_manager.put(Event.TIMEOUT)
        self.tx_tick.put(EventTimerTick.END)

    def end_game(self) -> None:
        """End the game as reported by the game manager."""
        self._end_game = True
        self.tx_tick.put(EventTimerTick.END)

    def destroy(self) -> None:
        """Make sure the tick counter stops."""
        self.tx_tick.put(EventTimerTick.END)