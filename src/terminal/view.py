"""
Viewing a tic-tac-toe game via the terminal: printing the board and reading moves.

Any object that follows the GameView protocol can be handed to the service instead.
"""

import logging
from typing import Protocol

from src.core.exceptions import InputClosedError
from src.core.shared_types import Status
from src.terminal.models import GameResponse, MoveRequest
from src.tictactoe.square import SQUARES

logger = logging.getLogger(__name__)

CELL_PLACEHOLDER = "~"
VIEW_TEMPLATE = """\
    1     2     3
       |     |
A   ~  |  ~  |  ~
  _____|_____|_____
       |     |
B   ~  |  ~  |  ~
  _____|_____|_____
       |     |
C   ~  |  ~  |  ~
       |     |
"""
PROMPT = ">> "


class GameView(Protocol):
    """Everything the service needs from a user interface"""

    def get_move(self, response: GameResponse) -> MoveRequest:
        """Ask the player whose turn it is for the square they want to play."""
        ...

    def on_unrecognized_input(self, text: str) -> None: ...

    def on_illegal_move(self, square_label: str) -> None: ...

    def on_game_over(self, response: GameResponse) -> None: ...


def get_board_str(board: dict[str, str]) -> str:
    """Fill in the template with the symbols on the board, labels 'A1'...'C3' in reading order."""
    board_str = VIEW_TEMPLATE
    for square in SQUARES:
        symbol = board.get(square.to_label(), " ")
        board_str = board_str.replace(CELL_PLACEHOLDER, symbol, 1)
    return board_str.rstrip()


class TerminalView:
    """Reads from stdin with input(), writes to stdout with print()."""

    def get_move(self, response: GameResponse) -> MoveRequest:
        print(f"It's {response.player_to_move}'s turn, play your move!")
        print(get_board_str(response.board))
        try:
            text = input(PROMPT)
        except EOFError as e:
            raise InputClosedError("No more input to read a move from.") from e
        return MoveRequest(square=text)

    def on_unrecognized_input(self, text: str) -> None:
        logger.warning("Unrecognized square: %r", text)
        print(
            "Input square was not recognized, please input a square in the format A-C|1-3 (ex: B2)."
        )

    def on_illegal_move(self, square_label: str) -> None:
        logger.warning("Square %s is already occupied", square_label)
        print(
            f"Attempted to play to square {square_label}, which is already occupied. Please try another move."
        )

    def on_game_over(self, response: GameResponse) -> None:
        print(get_board_str(response.board))
        if response.status == Status.TIED:
            print("It's a tie! Good game 🤝")
        else:
            print(f"{response.winner} wins! Congrats!")
