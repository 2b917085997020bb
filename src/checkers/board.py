"""The Game board implements all rules that affect where pieces stand and where they may go"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.checkers.layout import (
    EMPTY_LAYOUT,
    STARTING_LAYOUT,
    parse_layout,
    row_to_layout,
)
from src.checkers.moves import (
    MOVEMENT_RULES,
    CandidateDestinationsFn,
    Move,
    can_capture,
    follows_direction_rule,
    is_jump,
    is_promotion_move,
    is_step,
)
from src.checkers.pieces import ColorType, Piece
from src.checkers.player import Player
from src.checkers.position import BOARD_DIMENSIONS, Position
from src.checkers.square import Square
from src.core.exceptions import GameStateError

logger = logging.getLogger(__name__)


@dataclass
class Board:
    squares: dict[Position, Square]

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from a layout string (see src/checkers/layout.py for the notation)."""
        placement = parse_layout(layout)
        return cls(
            {
                position: Square(position, piece)
                for position, piece in placement.items()
            }
        )

    @classmethod
    def new(cls) -> Self:
        """12 Men per side on the dark squares: DARK on rows 0-2, LIGHT on rows 5-7."""
        return cls.from_layout(STARTING_LAYOUT)

    @classmethod
    def empty(cls) -> Self:
        return cls.from_layout(EMPTY_LAYOUT)

    def to_layout(self) -> str:
        """Rows are separated by slashes, starting at row 0."""
        return "/".join(
            row_to_layout([square.piece for square in row]) for row in self.rows()
        )

    # -- LOOKUPS --
    def get_square(self, position: Position) -> Optional[Square]:
        if not position.is_within_bounds():
            return None
        return self.squares[position]

    def get_piece(self, position: Position) -> Optional[Piece]:
        square = self.get_square(position)
        return square.piece if square is not None else None

    def __iter__(self) -> Iterator[Square]:
        """All squares, row by row"""
        return iter(self.squares.values())

    def squares_with_positions(self) -> Iterator[tuple[Position, Square]]:
        return iter(self.squares.items())

    def rows(self) -> list[list[Square]]:
        """2D view of the grid: rows()[row][col]"""
        num_rows, num_cols = BOARD_DIMENSIONS
        return [
            [self.squares[Position(row, col)] for col in range(num_cols)]
            for row in range(num_rows)
        ]

    def pieces_of(self, color: ColorType) -> list[Square]:
        """Squares holding a piece of the given color"""
        return [
            square
            for square in self
            if square.piece is not None and square.piece.color == color
        ]

    def count_pieces(self) -> dict[ColorType, int]:
        return {color: len(self.pieces_of(color)) for color in ColorType}

    # -- SETTING UP POSITIONS --
    def place_piece(self, piece: Piece, position: Position) -> None:
        square = self.get_square(position)
        if square is None or not square.is_playable:
            raise GameStateError(
                f"Pieces can only be placed on the dark squares of the board, not on {position}"
            )
        self._replace(position, piece)

    def remove_piece(self, position: Position) -> None:
        self._replace(position, None)

    # -- MOVE GENERATION --
    def possible_moves(self, from_square: Square) -> list[Square]:
        """Destinations (steps and jumps) the piece on the square can reach by its movement rule."""
        square = self.get_square(from_square.position)
        if square is None or square.piece is None:
            return []
        movement_rule: CandidateDestinationsFn = MOVEMENT_RULES[square.piece.type]
        return movement_rule(square, self)

    def possible_moves_from_square(
        self, player: Player, from_square: Square
    ) -> list[Move]:
        """The destinations of `possible_moves()`, as moves tagged with their capture and promotion."""
        square = self.get_square(from_square.position)
        if (
            square is None
            or square.piece is None
            or square.piece.color != player.color
        ):
            return []

        piece = square.piece
        return [
            Move(
                from_square=square,
                to_square=destination,
                player=player,
                captured=self.get_capturable_piece_between(square, destination, piece),
                is_promotion=is_promotion_move(piece, destination.position),
            )
            for destination in self.possible_moves(square)
        ]

    def all_possible_moves(self, player: Player) -> list[Move]:
        """
        Every move the player can make
        ----

        Mandatory capture rule: as soon as a single capture is available, only the captures are returned.
        No preference between several captures is made.
        """
        candidate_moves: list[Move] = []
        for square in self.pieces_of(player.color):
            candidate_moves.extend(self.possible_moves_from_square(player, square))

        captures = [move for move in candidate_moves if move.is_capture]
        return captures if captures else candidate_moves

    def get_capturable_piece_between(
        self, from_square: Square, to_square: Square, moving_piece: Piece
    ) -> Optional[Square]:
        """
        The square jumped over when going from `from_square` to `to_square`,
        provided it holds a piece the moving piece is allowed to capture and the landing square is free.
        """
        from_position = from_square.position
        to_position = to_square.position
        if not is_jump(from_position, to_position):
            return None

        landing = self.get_square(to_position)
        if landing is None or not landing.is_empty:
            return None

        jumped = self.get_square(from_position.midpoint(to_position))
        if jumped is None or jumped.piece is None:
            return None
        if not can_capture(moving_piece, jumped.piece):
            return None
        return jumped

    # -- MOVE / UNDO --
    def move_piece(self, move: Move) -> bool:
        """
        Validate, then update the position on the board.
        ----

        1. there must be a piece on the starting square
        2. the target square must be on the board, dark and empty
        3. the geometry must fit the piece's movement rule (a step, or a jump, in an allowed direction)
        4. a jump must go over a piece that can be captured (a Man cannot capture a King)

        Returns False (and leaves the board untouched) if any of these fails.
        """
        from_position = move.from_square.position
        to_position = move.to_square.position

        from_square = self.get_square(from_position)
        if from_square is None or from_square.piece is None:
            return self._reject(move, "no piece on the starting square")
        piece = from_square.piece

        to_square = self.get_square(to_position)
        if to_square is None or not to_square.is_playable or not to_square.is_empty:
            return self._reject(move, "target square is not a free dark square")

        stepping = is_step(from_position, to_position)
        if not (stepping or is_jump(from_position, to_position)):
            return self._reject(move, "not a diagonal step or jump")

        if not follows_direction_rule(piece, from_position, to_position):
            return self._reject(
                move, f"a {piece.type.display_name} cannot move backward"
            )

        captured: Optional[Square] = None
        if stepping:
            if move.captured is not None:
                return self._reject(move, "a single step cannot capture")
        else:
            captured = self.get_capturable_piece_between(from_square, to_square, piece)
            if captured is None:
                return self._reject(move, "nothing to capture on the jumped square")
            if (
                move.captured is not None
                and move.captured.position != captured.position
            ):
                return self._reject(move, "captured square does not match the jump")

        self._replace(from_position, None)
        if captured is not None:
            self._replace(captured.position, None)
        landing_piece = (
            piece.promoted() if is_promotion_move(piece, to_position) else piece
        )
        self._replace(to_position, landing_piece)
        return True

    def undo_move_piece(self, move: Move) -> bool:
        """
        Inverse of `move_piece()`
        ----

        Puts the piece back on its starting square (as a Man again if the move promoted it),
        and returns the captured piece to the square it was taken from.
        """
        to_square = self.get_square(move.to_square.position)
        if to_square is None or to_square.piece is None:
            logger.debug(
                "Cannot undo %s: no piece on the target square", move.to_notation()
            )
            return False

        piece = to_square.piece
        restored_piece = piece.demoted() if move.is_promotion else piece
        self._replace(move.to_square.position, None)
        self._replace(move.from_square.position, restored_piece)
        if move.captured is not None:
            self._replace(move.captured.position, move.captured.piece)
        return True

    # -- INTERNAL HELPERS --
    def _replace(self, position: Position, piece: Optional[Piece]) -> None:
        """Squares are immutable: swap in a new one instead of changing it."""
        self.squares[position] = self.squares[position].with_piece(piece)

    def _reject(self, move: Move, reason: str) -> bool:
        logger.debug("Rejected move %s: %s", move.to_notation(), reason)
        return False
