"""Remaining thinking time of both players."""

from dataclasses import dataclass
from enum import Enum, auto

START_TIME_MINUTES = 3.0
START_TIME_SECONDS = 0.0


class Player(Enum):
    """The two players whose clock can be running."""

    PLAYER1 = auto()
    PLAYER2 = auto()


@dataclass
class PlayerTimes:
    """Name of a player and the minutes and seconds it has left."""

    name_player: str
    minutes: float = START_TIME_MINUTES
    seconds: float = START_TIME_SECONDS


class PlayersTimes:
    """Clocks of both players and which of them is running."""

    def __init__(self, name_player_1: str, name_player_2: str) -> None:
        self.current_player = Player.PLAYER1
        self.timer_player_1 = PlayerTimes(name_player_1)
        self.timer_player_2 = PlayerTimes(name_player_2)

    def _current_timer(self) -> PlayerTimes:
        if self.current_player is Player.PLAYER2:
            return self.timer_player_2
        return self.timer_player_1

    def tick_time(self) -> bool:
        """Take one second off the running clock; return True once time is up."""
        timer = self._current_timer()
        timer.seconds -= 1.0
        if timer.seconds <= 0.0:
            if timer.minutes > 0.0:
                timer.minutes -= 1.0
                timer.seconds = 59.0
            else:
                return True
        return False

    def current_player_id(self) -> int:
        """1 when player 1's clock is running, otherwise 2."""
        return 1 if self.current_player is Player.PLAYER1 else 2

    def change_player(self) -> None:
        """Switch the running clock to the other player."""
        self.current_player = (
            Player.PLAYER2 if self.current_player is Player.PLAYER1 else Player.PLAYER1
        )

    def current_player_name(self) -> str:
        """Name of the opponent of the running player, who wins on a timeout."""
        if self.current_player is Player.PLAYER1:
            return self.timer_player_2.name_player
        return self.timer_player_1.name_player