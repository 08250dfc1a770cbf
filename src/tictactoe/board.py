"""The Game board implements all rules that only depend on the position (which marks sit on which squares)"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Self

from src.core.exceptions import BoardStateError
from src.tictactoe.marks import Mark
from src.tictactoe.square import SQUARES, Square

Line = tuple[Square, Square, Square]


def _line(*labels: str) -> Line:
    first, second, third = (Square.from_label(label) for label in labels)
    return (first, second, third)


# Order matters: the first complete line wins. Rows, then columns, then the two diagonals.
WINNING_LINES: tuple[Line, ...] = (
    _line("A1", "A2", "A3"),
    _line("B1", "B2", "B3"),
    _line("C1", "C2", "C3"),
    _line("A1", "B1", "C1"),
    _line("A2", "B2", "C2"),
    _line("A3", "B3", "C3"),
    _line("A1", "B2", "C3"),
    _line("A3", "B2", "C1"),
)


@dataclass(frozen=True)
class Board:
    position: Mapping[Square, Mark]

    def __post_init__(self) -> None:
        if set(self.position) != set(SQUARES):
            raise BoardStateError(
                f"A board needs exactly the squares {', '.join(sq.to_label() for sq in SQUARES)}. "
                f"Got: {', '.join(sorted(str(key) for key in self.position))}"
            )
        # own copy, read-only: nobody holding the original dict can change this board
        object.__setattr__(
            self,
            "position",
            MappingProxyType({square: self.position[square] for square in SQUARES}),
        )

    def __hash__(self) -> int:
        # the read-only mapping itself is not hashable
        return hash(tuple(self.position.items()))

    @classmethod
    def empty(cls) -> Self:
        return cls({square: Mark.EMPTY for square in SQUARES})

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from a compact layout string.

        Nine characters, one per square in reading order (A1, A2, A3, B1, ..., C3).
        ex. 'XO--X---O' means:
        * X on A1 and B2
        * O on A2 and C3
        * everything else is empty ('-', '.' and ' ' are all read as empty)
        """
        if len(layout) != len(SQUARES):
            raise BoardStateError(
                f"Layout must have {len(SQUARES)} characters, got {len(layout)}: {layout!r}"
            )
        try:
            marks = [Mark.from_symbol(character) for character in layout]
        except ValueError as e:
            raise BoardStateError(f"Invalid character in layout {layout!r}") from e
        return cls(dict(zip(SQUARES, marks)))

    def to_layout(self) -> str:
        return "".join(
            "-" if mark == Mark.EMPTY else mark.symbol
            for mark in self.position.values()
        )

    @staticmethod
    def parse(text: str) -> Square:
        """Read a square label like 'B2'. Raises ParseError for anything else."""
        return Square.from_label(text)

    def mark(self, square: Square) -> Mark:
        return self.position[square]

    def empty_squares(self) -> list[Square]:
        return [square for square, mark in self.position.items() if mark == Mark.EMPTY]

    def count_marks(self) -> int:
        """Number of occupied squares"""
        return len(SQUARES) - len(self.empty_squares())

    def place(self, square: Square, mark: Mark) -> Self:
        """Return a new board with `mark` on `square`. This board is left as is."""
        position = dict(self.position)
        position[square] = mark
        return type(self)(position)

    def winner(self) -> Optional[Mark]:
        for line in WINNING_LINES:
            line_winner = self._line_winner(line)
            if line_winner is not None:
                return line_winner
        return None

    def is_full(self) -> bool:
        return all(mark != Mark.EMPTY for mark in self.position.values())

    def _line_winner(self, line: Line) -> Optional[Mark]:
        """The mark occupying all three squares of the line, if any"""
        first, *rest = (self.mark(square) for square in line)
        if first != Mark.EMPTY and all(mark == first for mark in rest):
            return first
        return None
