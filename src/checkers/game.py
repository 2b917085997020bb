"""
The Game class is the entrypoint into the domain layer for the controller.
It is responsible for orchestrating the rules of a turn: whose turn it is, which moves were played,
when the game is over, and playing the moves of the AI opponent.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.moves import Move, is_promotion_move
from src.checkers.pieces import ColorType
from src.checkers.player import AIPlayer, HumanPlayer, Player
from src.core.config import Settings
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    WrongTurnOrOwnershipError,
)
from src.core.shared_types import GameType, Status

logger = logging.getLogger(__name__)


@dataclass
class Game:
    board: Board
    players: tuple[Player, Player]
    mode: GameType
    current_turn: Player
    moves: list[Move]  # most recent move first

    @classmethod
    def new_game(
        cls,
        player1: str,
        player2: Optional[str] = None,
        rng: Optional[random.Random] = None,
        settings: Optional[Settings] = None,
    ) -> Self:
        """
        Start a game from the standard starting position.
        ----

        * Two names: Player vs Player
        * Only one name: Player vs AI, the second player is the computer.

        Colors are handed out at random. LIGHT always opens the game.
        """
        if not player1 or (player2 is not None and not player2):
            raise GameStateError("Cannot create new game. Player names cannot be empty.")

        settings = settings or Settings()
        colors = [ColorType.LIGHT, ColorType.DARK]
        (rng or random.Random()).shuffle(colors)

        first = HumanPlayer(player1, colors[0])
        if player2 is None:
            mode = GameType.PVAI
            second: Player = AIPlayer(settings.ai_player_name, colors[1])
        else:
            mode = GameType.PVP
            second = HumanPlayer(player2, colors[1])

        opening_player = first if first.color == ColorType.LIGHT else second
        logger.info(
            "New %s game: %s (%s) against %s (%s)",
            mode,
            first.name,
            first.color.name,
            second.name,
            second.color.name,
        )
        return cls(
            board=Board.new(),
            players=(first, second),
            mode=mode,
            current_turn=opening_player,
            moves=[],
        )

    # --- DOMAIN LAYER API CALLED BY THE CONTROLLER ---
    @property
    def ai_player(self) -> Optional[AIPlayer]:
        return next(
            (player for player in self.players if isinstance(player, AIPlayer)), None
        )

    @property
    def is_ai_turn(self) -> bool:
        return self.mode == GameType.PVAI and isinstance(self.current_turn, AIPlayer)

    @property
    def is_game_finished(self) -> bool:
        """Over as soon as one of the players cannot move anymore (no matter how many pieces are left)."""
        return any(not self._has_legal_move(player) for player in self.players)

    @property
    def winner(self) -> Optional[Player]:
        """
        The player that can still move while the opponent cannot.
        None while both can move, and also when neither can.
        """
        first, second = self.players
        first_can_move = self._has_legal_move(first)
        second_can_move = self._has_legal_move(second)
        if first_can_move and not second_can_move:
            return first
        if second_can_move and not first_can_move:
            return second
        return None

    @property
    def status(self) -> Status:
        if not self.is_game_finished:
            return Status.IN_PROGRESS
        return Status.WON if self.winner is not None else Status.DRAW

    def opponent_of(self, player: Player) -> Player:
        first, second = self.players
        return second if player == first else first

    def legal_moves(self, player: Optional[Player] = None) -> list[Move]:
        """All moves (mandatory capture applied) for the given player, by default the one whose turn it is."""
        return self.board.all_possible_moves(player or self.current_turn)

    def make_move(self, move: Move) -> Move:
        """
        Attempt to make a move
        -----

        1. it must be the turn of the player making the move, and the piece must be theirs
        2. the board must accept the move
        3. record the move (with capture and promotion filled in) in front of the history
        4. hand the turn to the opponent

        Returns the move as it was recorded.
        """
        self._assert_your_turn(move)

        # Store move info before update
        accepted_move = self._create_accepted_move(move)

        if not self.board.move_piece(move):
            logger.warning("Illegal move %s by %s", move.to_notation(), move.player.name)
            raise IllegalMoveError(f"Move not allowed: {move.to_notation()}")

        self.moves.insert(0, accepted_move)
        self.current_turn = self.opponent_of(self.current_turn)
        logger.info(
            "%s played %s%s",
            accepted_move.player.name,
            accepted_move.to_notation(),
            " (promotion)" if accepted_move.is_promotion else "",
        )
        return accepted_move

    def undo_move(self) -> bool:
        """Take back the most recent move. The player who made it is on turn again."""
        if not self.moves:
            return False

        last_move = self.moves[0]
        if not self.board.undo_move_piece(last_move):
            logger.warning(
                "History out of sync with the board, cannot undo %s",
                last_move.to_notation(),
            )
            return False

        self.moves.pop(0)
        self.current_turn = last_move.player
        logger.info("Undid %s", last_move.to_notation())
        return True

    def make_ai_move(self) -> Optional[Move]:
        """
        Placeholder policy: play the first legal move (captures first, by the mandatory capture rule).

        Does nothing unless it is the AI's turn in a Player vs AI game.
        """
        if not self.is_ai_turn:
            return None

        candidates = self.legal_moves(self.current_turn)
        if not candidates:
            # only reachable once the game is over
            return None
        return self.make_move(candidates[0])

    # -- PRIVATE HELPERS ---
    def _assert_your_turn(self, move: Move) -> None:
        """You can only move your own pieces, and only when it is your turn."""
        if move.player != self.current_turn:
            logger.warning(
                "%s tried to move while it is %s's turn",
                move.player.name,
                self.current_turn.name,
            )
            raise WrongTurnOrOwnershipError(
                f"It is not your turn. Waiting for player {self.current_turn.name} to make a move first."
            )

        piece = self.board.get_piece(move.from_square.position)
        if piece is None or piece.color != self.current_turn.color:
            raise WrongTurnOrOwnershipError(
                f"No piece of {self.current_turn.name} on {move.from_square.position.to_notation()}"
            )

    def _create_accepted_move(self, move: Move) -> Move:
        """Snapshot of the squares involved before the board gets updated."""
        from_square = self.board.get_square(move.from_square.position)
        to_square = self.board.get_square(move.to_square.position)
        # for the typechecker: ownership was checked before, so there is a piece to move
        assert from_square is not None and from_square.piece is not None
        if to_square is None:
            return move

        piece = from_square.piece
        return replace(
            move,
            from_square=from_square,
            to_square=to_square,
            captured=self.board.get_capturable_piece_between(
                from_square, to_square, piece
            ),
            is_promotion=is_promotion_move(piece, to_square.position),
        )

    def _has_legal_move(self, player: Player) -> bool:
        return len(self.board.all_possible_moves(player)) > 0
