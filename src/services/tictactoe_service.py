"""Orchestration of communication between a view and the game logic: the turn loop."""

import logging
from typing import Optional

from src.core.exceptions import IllegalMoveError, ParseError
from src.core.models import GameModel
from src.core.shared_types import Status
from src.terminal.models import GameResponse
from src.terminal.view import GameView
from src.tictactoe.board import Board
from src.tictactoe.game import Game
from src.tictactoe.marks import player_for_turn

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Plays a game of tic-tac-toe against any GameView."""

    def __init__(self, view: GameView) -> None:
        self.view = view

    def play(self, game: Optional[Game] = None) -> Game:
        """
        Play out a game from the given state (a new game by default) until it is won or tied.
        ----
        Returns the final game. InputClosedError from the view is not handled here.
        """
        game = game if game is not None else Game.new()
        logger.info("Starting game at turn %d", game.turn)

        while game.result() is None:
            game = self.handle_turn(game)

        response = self.build_response(game)
        logger.info("Game over after %d turns: %s", game.turn, game.result())
        self.view.on_game_over(response)
        return game

    def handle_turn(self, game: Game) -> Game:
        """Ask for one move. Bad input or an occupied square is reported and the same game is returned."""
        request = self.view.get_move(self.build_response(game))

        try:
            square = Board.parse(request.square)
        except ParseError:
            self.view.on_unrecognized_input(request.square)
            return game

        try:
            new_game = game.apply_move(square)
        except IllegalMoveError as e:
            self.view.on_illegal_move(e.square.to_label())
            return e.game

        logger.debug(
            "%s played %s", game.player_to_move.symbol, square.to_label()
        )
        return new_game

    def build_response(self, game: Game) -> GameResponse:
        """Convert a Game to a GameResponse via the transport model."""
        return self._create_game_response(game.to_model())

    # -- Internal helpers --
    def _create_game_response(self, model: GameModel) -> GameResponse:
        board = Board.from_layout(model.layout)
        return GameResponse(
            board={
                square.to_label(): mark.symbol
                for square, mark in board.position.items()
            },
            player_to_move=player_for_turn(model.turn).symbol,
            status=Status(model.status),
            winner=model.winner,
        )
