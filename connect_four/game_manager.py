"""Console side of the game: turns, end of game and talking to the timer."""

import queue
from collections.abc import Callable

from .events import Event
from .game_data import GameData


class GameManager:
    """Runs the turns of a game and keeps the timer informed."""

    def __init__(
        self,
        tx_timer: queue.Queue,
        rx_timer: queue.Queue,
        tx_player_names: queue.Queue,
        read: Callable[[], str] = input,
    ) -> None:
        self.game_data = GameData.from_input(read)
        self._read = read
        tx_player_names.put(self.game_data.player_name(1))
        tx_player_names.put(self.game_data.player_name(2))
        self.tx_timer = tx_timer
        self.rx_timer = rx_timer

    def run_game(self) -> None:
        """Play turns until the game is won, drawn or the timer runs out."""
        data = self.game_data
        while not data.game_over:
            data.play_game(self._read)

            try:
                event = self.rx_timer.get_nowait()
            except queue.Empty:
                event = None
            if event is Event.TIMEOUT:
                self.timeout()
                return

            if data.is_game_draw():
                print("Game draw - Endgame")
                self.end_game()

            if data.is_game_over():
                data.game_over = True
                data.current_player = 1 - data.current_player
                self.end_game()
            else:
                self.tx_timer.put(Event.PLAYER_CHANGE)

        self.destroy()

    def timeout(self) -> None:
        """Stop the game because the timer reported that time is up."""
        print("Merci d'avoir joué, aurevoir !")
        self.game_data.timeout()

    def end_game(self) -> None:
        """Tell the timer that the game is over."""
        self.tx_timer.put(Event.END)

    def destroy(self) -> None:
        """Show the final grid and the winner."""
        self.game_data.display()
        print(f"Le gagnant est : {self.game_data.current_player_name()} ")
        print("Fin du jeu !")