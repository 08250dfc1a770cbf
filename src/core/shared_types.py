"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    TIED = "tied"


class Outcome(StrEnum):
    """Terminal result of a game: one of the players won, or nobody did."""

    X = "X"
    O = "O"  # noqa: E741
    TIE = "tie"
