"""Players and the console prompts that ask them for input."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

MIN_COLUMN = 1
MAX_COLUMN = 7


class IdPlayer(Enum):
    """Identifier of each of the two players."""

    PLAYER1 = auto()
    PLAYER2 = auto()


@dataclass
class Player:
    """A player: name, identifier and the symbol of its tokens."""

    name: str
    id: IdPlayer
    symbol: str


def input_player_name(player_number: int, read: Callable[[], str] = input) -> str:
    """Ask for a player's name until a non-empty one is given."""
    while True:
        print(f"Entrez le nom du joueur {player_number} :\n")
        name = read().strip()
        if name:
            return name
        print("Le nom ne peut pas être vide. Veuillez entrer un nom valide.")


def set_player_names(read: Callable[[], str] = input) -> tuple[str, str]:
    """Ask both players for their names."""
    player1_name = input_player_name(1, read)
    print()
    player2_name = input_player_name(2, read)
    print()
    return player1_name, player2_name


def _parse_column(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    column = int(digits)
    return column if MIN_COLUMN <= column <= MAX_COLUMN else None


def get_column_choice(read: Callable[[], str] = input) -> int:
    """Ask for a column number from 1 to 7 and return it zero-based."""
    while True:
        print("Entrez le numéro de la colonne où vous souhaitez placer votre pièce : ")
        column = _parse_column(read().strip())
        if column is not None:
            return column - 1
        print("La réponse n'est pas valide. Veuillez entrer un chiffre entre 1 et 7.")