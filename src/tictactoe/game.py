"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns turn order and move legality, and decides when the game is over.

Game (like Board) is an immutable value: every accepted move returns a new Game, a rejected move leaves the old one usable.
"""

from dataclasses import dataclass, replace
from typing import Optional, Self

from src.core.exceptions import BoardStateError, GameStateError, IllegalMoveError
from src.core.models import GameModel
from src.core.shared_types import Outcome, Status
from src.tictactoe.board import Board
from src.tictactoe.marks import Mark, player_for_turn
from src.tictactoe.square import Square

OUTCOME_FOR_MARK: dict[Mark, Outcome] = {Mark.X: Outcome.X, Mark.O: Outcome.O}


@dataclass(frozen=True)
class Game:
    board: Board
    turn: int  # number of completed moves

    def __post_init__(self) -> None:
        # X moves first, so X has either as many marks as O or exactly one more
        x_count = sum(1 for mark in self.board.position.values() if mark == Mark.X)
        o_count = sum(1 for mark in self.board.position.values() if mark == Mark.O)
        if x_count + o_count != self.turn or x_count - o_count not in (0, 1):
            raise GameStateError(
                f"Layout {self.board.to_layout()!r} cannot be reached in {self.turn} turns."
            )

    @classmethod
    def new(cls) -> Self:
        return cls(board=Board.empty(), turn=0)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information a view/service actually has"""
        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status: {model.status!r}. \nPick one from {', '.join(status.value for status in Status)}"
            )
        try:
            board = Board.from_layout(model.layout)
        except BoardStateError as e:
            raise GameStateError(f"Invalid layout: {model.layout!r}") from e

        game = cls(board=board, turn=model.turn)
        if game.status != Status(model.status):
            raise GameStateError(
                f"Status {model.status!r} does not match the board. Expected {game.status.value!r}."
            )
        expected_winner = game.winner.symbol if game.winner else None
        if model.winner != expected_winner:
            raise GameStateError(
                f"Winner {model.winner!r} does not match the board. Expected {expected_winner!r}."
            )
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the service layer uses"""
        winner = self.winner
        return GameModel(
            layout=self.board.to_layout(),
            turn=self.turn,
            status=self.status.value,
            winner=winner.symbol if winner else None,
        )

    @property
    def player_to_move(self) -> Mark:
        return player_for_turn(self.turn)

    @property
    def status(self) -> Status:
        outcome = self.result()
        if outcome is None:
            return Status.IN_PROGRESS
        if outcome == Outcome.TIE:
            return Status.TIED
        return Status.WON

    @property
    def winner(self) -> Optional[Mark]:
        """Only set once a player completed a line"""
        return self.board.winner()

    def apply_move(self, square: Square) -> Self:
        """
        Place the current player's mark on `square` and pass the turn.
        ----
        An occupied square is never overwritten: IllegalMoveError is raised and carries this (unchanged) game.

        NOTE: Playing on after the game is over is not blocked here. Stopping the loop is the controller's job.
        """
        if self.board.mark(square) != Mark.EMPTY:
            raise IllegalMoveError(square, self)
        return replace(
            self,
            board=self.board.place(square, self.player_to_move),
            turn=self.turn + 1,
        )

    def apply_moves(self, squares: list[Square]) -> Self:
        """convenience method to play out a sequence of moves (if you quickly want a game in a given position)"""
        game = self
        for square in squares:
            game = game.apply_move(square)
        return game

    def result(self) -> Optional[Outcome]:
        """
        The game is over when either
        1. a player has three in a row (checked first: a full board with a line is a win, not a tie)
        2. all squares are filled
        None while the game is still in progress.
        """
        winner = self.board.winner()
        if winner is not None:
            return OUTCOME_FOR_MARK[winner]
        if self.board.is_full():
            return Outcome.TIE
        return None
