"""State of a game: grid, players, current player and whether it is over."""

from __future__ import annotations

from collections.abc import Callable

from .errors import ColumnFullError, InvalidInputError
from .grid import EMPTY, create_grid, display_grid
from .players import IdPlayer, Player, get_column_choice, set_player_names

ROWS = 6
COLS = 7
ALIGN = 4


def _clear_screen() -> None:
    print("\x1b[2J\x1b[H", end="", flush=True)


class GameData:
    """Grid, the two players, whose turn it is and whether the game is over."""

    def __init__(self, player1_name: str, player2_name: str) -> None:
        self.grid = create_grid(ROWS, COLS)
        self.players = [
            Player(player1_name, IdPlayer.PLAYER1, "X"),
            Player(player2_name, IdPlayer.PLAYER2, "O"),
        ]
        self.current_player = 0
        self.game_over = False

    @classmethod
    def from_input(cls, read: Callable[[], str] = input) -> GameData:
        """Ask both players for their names and start a game."""
        return cls(*set_player_names(read))

    def current_player_name(self) -> str:
        """Name of the player whose turn it is."""
        return self.players[self.current_player].name

    def player_name(self, n_player: int) -> str:
        """Name of player 1 when ``n_player`` is 1, otherwise of player 2."""
        return self.players[0 if n_player == 1 else 1].name

    def display(self) -> None:
        """Print the grid."""
        display_grid(self.grid)

    def make_move(self, column: int) -> None:
        """Drop the current player's token in ``column`` and pass the turn."""
        if not 0 <= column < len(self.grid[0]):
            self.display()
            raise InvalidInputError()
        row = next((r for r in reversed(self.grid) if r[column] == EMPTY), None)
        if row is None:
            raise ColumnFullError()
        row[column] = self.players[self.current_player].symbol[0]
        self.current_player = 1 - self.current_player

    def play_game(self, read: Callable[[], str] = input) -> None:
        """Show the grid, ask the current player for a column and play it."""
        player = self.players[self.current_player]
        self.display()
        print(f"C'est à {player.name} de jouer ({player.symbol}).")
        self.make_move(get_column_choice(read))
        _clear_screen()

    def _cell(self, row: int, col: int) -> str:
        # Cells outside the grid count as empty.
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[0]):
            return self.grid[row][col]
        return EMPTY

    def is_game_over(self) -> bool:
        """Whether a winning alignment is found on the grid."""
        symbols = {player.symbol[0] for player in self.players}
        rows, cols = len(self.grid), len(self.grid[0])

        for row in self.grid:
            first = next((cell for cell in row if cell != EMPTY), None)
            if first is not None and any(
                all(cell == first for cell in row[start:start + ALIGN])
                for start in range(len(row) - ALIGN + 1)
            ):
                return True

        for col in range(cols):
            for top in range(rows - 3):
                if all(self.grid[top + k][col] in symbols for k in range(ALIGN)):
                    return True

        for row in range(rows - 3):
            for col in range(cols - 3):
                if all(
                    self._cell(row + i + j, col + i + j) in symbols
                    or self._cell(row + i + j, col + 3 - i - j) in symbols
                    for i in range(ALIGN)
                    for j in range(ALIGN)
                ):
                    return True

        return False

    def is_game_draw(self) -> bool:
        """Whether every cell of the grid is taken."""
        return all(cell != EMPTY for row in self.grid for cell in row)

    def timeout(self) -> None:
        """End the game because the current player ran out of time."""
        self.game_over = True