"""
Boundary layer data model.

The service converts a Game into this model before handing it to a view, so the view never touches domain objects.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameModel:
    """Transport-safe representation of a tic-tac-toe game."""

    layout: str  # nine characters in reading order A1..C3, '-' for empty
    turn: int
    status: str
    winner: Optional[str] = None
