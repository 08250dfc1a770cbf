"""Defines what can occupy a square"""

from enum import Enum
from typing import Self

EMPTY_SYMBOLS = ("-", ".", " ")


class Mark(Enum):
    EMPTY = " "
    X = "X"
    O = "O"  # noqa: E741

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, character: str) -> Self:
        # compact layouts may use any of the EMPTY_SYMBOLS for an open square
        if character in EMPTY_SYMBOLS:
            return cls.EMPTY
        return cls(character)

    def opponent(self) -> Self:
        if self == Mark.EMPTY:
            raise ValueError("An empty square has no opponent.")
        return Mark.O if self == Mark.X else Mark.X


# X always moves first
TURN_ORDER: tuple[Mark, Mark] = (Mark.X, Mark.O)


def player_for_turn(turn: int) -> Mark:
    """Whose turn it is after `turn` completed moves."""
    return TURN_ORDER[turn % 2]
