"""Requests and Response models exchanged between the service and a view"""

from typing import Any, Optional

from pydantic import BaseModel, field_validator

from src.core.shared_types import Status

SquareLabel = str
Symbol = str


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    square: str

    @field_validator("square", mode="before")
    @classmethod
    def strip_whitespace(cls, value: Any) -> Any:
        # terminal input arrives with a trailing newline / stray spaces. Parsing the square itself is left to the domain.
        if isinstance(value, str):
            return value.strip()
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    board: dict[SquareLabel, Symbol]
    player_to_move: Symbol
    status: Status
    winner: Optional[Symbol] = None
