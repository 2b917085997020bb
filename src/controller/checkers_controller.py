"""Orchestration between the user interface (View) and the game rules (Game)."""

import logging
from typing import Iterator, Optional

from src.checkers.game import Game
from src.checkers.moves import Move
from src.checkers.player import Player
from src.checkers.position import Position
from src.checkers.square import Square
from src.controller.scheduler import Scheduler
from src.controller.view import View
from src.core.config import Settings
from src.core.exceptions import MoveRejectedError
from src.core.shared_types import GameType, MoveError

logger = logging.getLogger(__name__)

MOVE_UNDONE_MESSAGE = "Move undone"
DRAW_MESSAGE = "Neither player can move: the game is a draw"


class CheckersController:
    """Turns clicks on the board into moves, and keeps the view in sync with the game."""

    def __init__(
        self,
        game: Game,
        view: View,
        scheduler: Scheduler,
        settings: Optional[Settings] = None,
    ) -> None:
        self.game = game
        self.view = view
        self.scheduler = scheduler
        self.settings = settings or Settings()
        self.selected: Optional[Square] = None
        self.ai_move_pending = False

    # -- VIEW ENTRYPOINTS --
    def start(self) -> None:
        """Show the starting position. If the AI has the opening move, let it play."""
        self.view.render(self.game.board)
        if self.game.is_ai_turn:
            self._schedule_ai_move()

    def on_square_clicked(self, position: Position) -> None:
        """
        Selection logic
        ----

        * Nothing selected yet: clicking one of your own pieces selects it and highlights where it can go.
        * Something selected:
            - clicking your own piece again deselects it, clicking another one of your pieces switches the selection
            - clicking a highlighted square plays the move
            - clicking anything else clears the selection

        Clicks are ignored while the AI is thinking and once the game is over.
        """
        if self.ai_move_pending or self.game.is_game_finished:
            return

        clicked = self.game.board.get_square(position)
        if self.selected is None:
            if clicked is not None and self._is_own_piece(clicked):
                self._select_square(clicked)
            else:
                self.view.log_error(MoveError.WRONG_TURN_OR_OWNERSHIP.message)
            return

        if clicked is None:
            self._deselect_square()
            return

        if self._is_own_piece(clicked):
            if clicked.position == self.selected.position:
                self._deselect_square()
            else:
                self._select_square(clicked)
            return

        move = next(
            (
                move
                for move in self._moves_from(self.selected)
                if move.to_square.position == position
            ),
            None,
        )
        self._deselect_square()
        if move is not None:
            self.make_move(move)

    def make_move(self, move: Move) -> None:
        """Play the move. On success refresh the view, then check for the end of the game or hand over to the AI."""
        try:
            self.game.make_move(move)
        except MoveRejectedError as err:
            self.view.log_error(err.kind.message)
            return

        self.view.render(self.game.board)
        if self._announce_if_finished():
            return
        if self.game.is_ai_turn:
            self._schedule_ai_move()

    def undo_move(self) -> None:
        """
        Take back moves.
        ----

        Against the AI both the AI's reply and the player's own move are taken back. If the game had ended on the
        player's move, that leaves the AI on turn, so its reply is played again.
        Not allowed while the AI is still thinking.
        """
        if self.ai_move_pending:
            self.view.log_error(MoveError.AI_TURN_PENDING.message)
            return

        if not self.can_undo:
            self.view.log_error(MoveError.NO_MOVES_TO_UNDO.message)
            return

        self._deselect_square()
        moves_to_undo = 2 if self.game.mode == GameType.PVAI else 1
        for _ in range(moves_to_undo):
            self.game.undo_move()

        self.view.render(self.game.board)
        self.view.log_error(MOVE_UNDONE_MESSAGE)
        if self.game.is_ai_turn:
            self._schedule_ai_move()
        else:
            self.view.enable_input()

    # -- QUERIES FOR THE VIEW --
    @property
    def can_undo(self) -> bool:
        """Against the AI at least two moves (the player's and the AI's reply) must have been played."""
        if self.game.mode == GameType.PVAI:
            return len(self.game.moves) >= 2
        return len(self.game.moves) > 0

    @property
    def current_player(self) -> Player:
        return self.game.current_turn

    @property
    def players(self) -> tuple[Player, Player]:
        return self.game.players

    def get_square(self, position: Position) -> Optional[Square]:
        return self.game.board.get_square(position)

    def squares_with_positions(self) -> Iterator[tuple[Position, Square]]:
        return self.game.board.squares_with_positions()

    # -- INTERNAL HELPERS --
    def _is_own_piece(self, square: Square) -> bool:
        return (
            square.piece is not None
            and square.piece.color == self.game.current_turn.color
        )

    def _moves_from(self, square: Square) -> list[Move]:
        """Legal moves of the selected piece. Mandatory capture applies: if another piece must capture, this list is empty."""
        return [
            move
            for move in self.game.legal_moves()
            if move.from_square.position == square.position
        ]

    def _select_square(self, square: Square) -> None:
        self.selected = square
        destinations = [move.to_square.position for move in self._moves_from(square)]
        self.view.highlight_squares(destinations)
        logger.debug("Selected piece on %s", square.position.to_notation())

    def _deselect_square(self) -> None:
        self.selected = None
        self.view.highlight_squares([])
        self.view.render(self.game.board)

    def _announce_if_finished(self) -> bool:
        if not self.game.is_game_finished:
            return False
        winner = self.game.winner
        self.view.disable_input()
        if winner is not None:
            self.view.show_winner(winner.name)
        else:
            self.view.log_error(DRAW_MESSAGE)
        return True

    def _schedule_ai_move(self) -> None:
        """Block the board while the AI 'thinks'. The move is made when the scheduler calls back."""
        self.view.disable_input()
        self.ai_move_pending = True
        logger.debug(
            "AI move scheduled in %.2f seconds", self.settings.ai_thinking_delay
        )
        self.scheduler.call_later(self.settings.ai_thinking_delay, self._play_ai_move)

    def _play_ai_move(self) -> None:
        try:
            move = self.game.make_ai_move()
        finally:
            self.ai_move_pending = False
            self.view.enable_input()
        if move is not None:
            logger.info("AI played %s", move.to_notation())
        self.view.render(self.game.board)
        self._announce_if_finished()
