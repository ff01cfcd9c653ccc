"""Game record model."""

import enum
import secrets
from dataclasses import dataclass
from typing import Tuple

BOARD_SIZE = 9
EMPTY_CELL = "-"


class Mark(str, enum.Enum):
    """A player's symbol on the board."""
    X = "X"  # Always moves first
    O = "O"

    @property
    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


class Winner(str, enum.Enum):
    """Outcome of a game."""
    NONE = ""         # Still in progress
    X = "X"
    O = "O"
    DRAW = "draw"

    @classmethod
    def for_mark(cls, mark: Mark) -> "Winner":
        return cls(mark.value)


def generate_game_id() -> str:
    """Generate a random game identifier (e.g., "g-9f86d081884c7d65")."""
    return f"g-{secrets.token_hex(8)}"


@dataclass(frozen=True)
class Game:
    """
    A single match.

    Records are immutable: every move produces a new Game that replaces the
    previous one in the store, so a reader always sees a whole record.
    """

    id: str
    board: Tuple[str, ...] = (EMPTY_CELL,) * BOARD_SIZE
    turn: Mark = Mark.X
    winner: Winner = Winner.NONE

    def __post_init__(self) -> None:
        if len(self.board) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(self.board)}")

    @property
    def is_finished(self) -> bool:
        return self.winner is not Winner.NONE

    @property
    def board_string(self) -> str:
        """Board as a 9-char string, "-" for empty cells."""
        return "".join(self.board)

    def to_dict(self) -> dict:
        return {
            "game_id": self.id,
            "board": self.board_string,
            "turn": self.turn.value,
            "winner": self.winner.value,
        }

    def __repr__(self) -> str:
        return f"<Game {self.id} {self.board_string} turn={self.turn.value} winner={self.winner.value or '-'}>"
