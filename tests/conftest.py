"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.tictactoe.board import Board
from src.tictactoe.game import Game
from src.tictactoe.marks import Mark
from src.tictactoe.square import Square


@pytest.fixture
def new_game() -> Game:
    return Game.new()


@pytest.fixture
def play_moves() -> Callable[[list[str]], Game]:
    """Call the inner function with a list of square labels to get the game after those moves (X first)"""

    def _play(labels: list[str]) -> Game:
        return Game.new().apply_moves([Square.from_label(label) for label in labels])

    return _play


@pytest.fixture
def board_from_marks() -> Callable[..., Board]:
    """Call the inner function with keyword arguments like A1='X', B2='O'. Unnamed squares stay empty."""

    def _create_board(**marks: str) -> Board:
        board = Board.empty()
        for label, symbol in marks.items():
            board = board.place(Square.from_label(label), Mark.from_symbol(symbol))
        return board

    return _create_board
