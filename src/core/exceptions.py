"""
Exceptions raised by the domain layer and handled by the service layer.

Only ParseError and IllegalMoveError are expected during normal play. Both are recoverable: the game is left untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.tictactoe.game import Game
    from src.tictactoe.square import Square


class GameError(Exception):
    """Base class for everything this package raises on purpose."""


class ParseError(GameError):
    """Text could not be read as one of the nine squares."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Cannot interpret {text!r} as a square. Expected A-C followed by 1-3 (ex: B2)."
        )
        self.text = text


class IllegalMoveError(GameError):
    """Attempted to play to a square that is already occupied."""

    def __init__(self, square: Square, game: Game) -> None:
        super().__init__(f"Square {square.to_label()} is already occupied.")
        self.square = square
        # the game as it was before the attempt, so callers can carry on
        self.game = game


class BoardStateError(GameError):
    pass


class GameStateError(GameError):
    pass


class InputClosedError(GameError):
    """The terminal reached end of input before the game was over."""
