"""Unit tests for /src/terminal/models.py"""

import pytest
from pydantic import ValidationError

from src.core.shared_types import Status
from src.terminal.models import GameResponse, MoveRequest


@pytest.mark.parametrize("text", ["B2", " B2", "B2\n", "\tB2  "])
def test_move_request_strips_whitespace(text: str) -> None:
    assert MoveRequest(square=text).square == "B2"


def test_move_request_does_not_validate_square() -> None:
    """Whether the text is a square is for the domain to decide"""
    assert MoveRequest(square="D9").square == "D9"


def test_move_request_needs_text() -> None:
    with pytest.raises(ValidationError):
        MoveRequest(square=None)  # type: ignore[arg-type]


def test_game_response_status_from_string() -> None:
    response = GameResponse(
        board={"A1": "X"}, player_to_move="O", status="in progress"
    )
    assert response.status == Status.IN_PROGRESS
    assert response.winner is None


def test_game_response_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        GameResponse(board={}, player_to_move="X", status="checkmate")
