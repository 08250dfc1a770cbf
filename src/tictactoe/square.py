"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import ParseError

ROWS = ("A", "B", "C")
COLUMNS = (1, 2, 3)


@dataclass(frozen=True)
class Square:
    row: str
    column: int

    @classmethod
    def from_label(cls, label: str) -> Square:
        """Labels 'A1' - 'C3'. Case-sensitive and exact: the caller is responsible for stripping whitespace."""
        if len(label) != 2 or label[0] not in ROWS or label[1] not in "123":
            raise ParseError(label)
        return cls(label[0], int(label[1]))

    def to_label(self) -> str:
        return f"{self.row}{self.column}"


# reading order: A1, A2, A3, B1, ... C3
SQUARES: tuple[Square, ...] = tuple(
    Square(row, column) for row in ROWS for column in COLUMNS
)
