"""Entry point: console game in one thread, timer window in the main one."""

import argparse
import queue
import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass

import pygame

from .errors import ChannelRecvError, Connect4Error
from .events import Event
from .game_manager import GameManager
from .timer_manager import TimerManager

WINDOW_SIZE = 500
FRAMES_PER_SECOND = 60


@dataclass(frozen=True)
class WindowConfig:
    """Settings of the timer window."""

    title: str = "Timer"
    width: int = WINDOW_SIZE
    height: int = WINDOW_SIZE
    resizable: bool = True


def init_game_manager(
    tx_timer: queue.Queue,
    rx_game_manager: queue.Queue,
    tx_player_names: queue.Queue,
    read: Callable[[], str] = input,
) -> threading.Thread:
    """Start the game manager in its own thread and return that thread."""

    def play() -> None:
        try:
            GameManager(tx_timer, rx_game_manager, tx_player_names, read).run_game()
        except Connect4Error:
            pass

    thread = threading.Thread(target=play, name="game-manager", daemon=True)
    thread.start()
    return thread


def _receive_name(names: queue.Queue, game_thread: threading.Thread) -> str:
    while True:
        try:
            return names.get(timeout=0.1)
        except queue.Empty:
            if not game_thread.is_alive() and names.empty():
                raise ChannelRecvError() from None


def _run(config: WindowConfig) -> None:
    rx_timer: queue.Queue = queue.Queue()
    rx_game_manager: queue.Queue = queue.Queue()
    player_names: queue.Queue = queue.Queue()

    game_thread = init_game_manager(rx_timer, rx_game_manager, player_names)
    name_player_1 = _receive_name(player_names, game_thread)
    name_player_2 = _receive_name(player_names, game_thread)

    pygame.display.init()
    pygame.font.init()
    try:
        flags = pygame.RESIZABLE if config.resizable else 0
        pygame.display.set_mode((config.width, config.height), flags)
        pygame.display.set_caption(config.title)

        timer_manager = TimerManager(name_player_1, name_player_2, rx_game_manager)
        timer_manager.start()
        clock = pygame.time.Clock()

        while not timer_manager.is_end_game():
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                timer_manager.destroy()
                return
            timer_manager.run(pygame.display.get_surface())

            try:
                event = rx_timer.get_nowait()
            except queue.Empty:
                event = None
            if event is Event.PLAYER_CHANGE:
                timer_manager.change_player()
            elif event is Event.END:
                timer_manager.end_game()

            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)

        timer_manager.destroy()
    finally:
        pygame.display.quit()

    game_thread.join()


def main(argv: list[str] | None = None) -> int:
    """Play a game of Connect Four with a timer window."""
    parser = argparse.ArgumentParser(
        prog="connect_four",
        description="Two-player Connect Four in the console with a timer window.",
    )
    parser.parse_args(argv)
    try:
        _run(WindowConfig())
    except Connect4Error as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())