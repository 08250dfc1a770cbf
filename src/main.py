"""Entry point: play one game of tic-tac-toe in the terminal."""

import logging

from src.core.config import LOG_FORMAT, LOG_LEVEL
from src.core.exceptions import InputClosedError
from src.services.tictactoe_service import TicTacToeService
from src.terminal.view import TerminalView

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    service = TicTacToeService(TerminalView())
    try:
        service.play()
    except InputClosedError:
        logger.info("Input closed before the game was finished")
        print("\nNo more input, game abandoned.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
