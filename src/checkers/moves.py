"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the destinations each piece type can reach.

A Man only looks forward, a King looks along all four diagonals. In both cases a destination is either
a single diagonal step onto an empty square, or a jump over an adjacent opponent piece onto the empty square behind it.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.checkers.pieces import ColorType, Piece, PieceType
from src.checkers.player import Player
from src.checkers.position import Position
from src.checkers.square import Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def get_square(self, position: Position) -> Optional[Square]: ...


Vector = tuple[int, int]

ALL_DIAGONALS: list[Vector] = [(1, -1), (1, 1), (-1, -1), (-1, 1)]


@dataclass(frozen=True)
class Move:
    """
    A move of a single piece, including (at most) one capture.

    The squares are snapshots taken when the move was created: `captured` still holds the piece that
    gets removed, which is what allows the move to be undone later.
    """

    from_square: Square
    to_square: Square
    player: Player
    captured: Optional[Square] = None
    is_promotion: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def moving_piece(self) -> Optional[Piece]:
        return self.from_square.piece

    def to_notation(self) -> str:
        """
        ex.
        * "21-32": the piece on row 2, column 1 steps to row 3, column 2
        * "32x54": the piece on (3, 2) jumps to (5, 4), capturing whatever stood on (4, 3)
        """
        separator = "x" if self.is_capture else "-"
        return f"{self.from_square.position.to_notation()}{separator}{self.to_square.position.to_notation()}"


# --- MOVEMENT RULES ---
def can_capture(moving_piece: Piece, target: Piece) -> bool:
    """Only opponent pieces can be taken, and a Man is not allowed to take a King."""
    if target.color == moving_piece.color:
        return False
    if moving_piece.type == PieceType.MAN and target.type == PieceType.KING:
        return False
    return True


def diagonal_destinations(
    square: Square, board: Board, directions: list[Vector]
) -> list[Square]:
    """
    For every direction: a step onto the adjacent square if it is empty,
    otherwise a jump over it if it holds a piece we are allowed to capture and the square behind it is empty.
    """
    moving_piece = square.piece
    if moving_piece is None:
        return []

    destinations: list[Square] = []
    for d_row, d_col in directions:
        neighbour = board.get_square(square.position.offset(d_row, d_col))
        if neighbour is None:
            continue

        if neighbour.is_empty:
            destinations.append(neighbour)
            continue

        # occupied: only interesting when it can be jumped over
        assert neighbour.piece is not None
        if not can_capture(moving_piece, neighbour.piece):
            continue
        landing = board.get_square(square.position.offset(2 * d_row, 2 * d_col))
        if landing is not None and landing.is_empty:
            destinations.append(landing)

    return destinations


def forward_diagonals(color: ColorType) -> list[Vector]:
    return [(color.forward, -1), (color.forward, 1)]


def candidate_man_destinations(square: Square, board: Board) -> list[Square]:
    """A Man moves and captures diagonally forward only. Never backward."""
    assert square.piece is not None
    return diagonal_destinations(square, board, forward_diagonals(square.piece.color))


def candidate_king_destinations(square: Square, board: Board) -> list[Square]:
    """The King moves and captures a single step along any of the four diagonals."""
    return diagonal_destinations(square, board, ALL_DIAGONALS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateDestinationsFn = Callable[[Square, Board], list[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateDestinationsFn] = {
    PieceType.MAN: candidate_man_destinations,
    PieceType.KING: candidate_king_destinations,
}


# -- GEOMETRY CHECKS (used when validating a move handed in from outside) --
def is_step(from_position: Position, to_position: Position) -> bool:
    return (
        abs(to_position.row - from_position.row) == 1
        and abs(to_position.col - from_position.col) == 1
    )


def is_jump(from_position: Position, to_position: Position) -> bool:
    return (
        abs(to_position.row - from_position.row) == 2
        and abs(to_position.col - from_position.col) == 2
    )


def follows_direction_rule(
    piece: Piece, from_position: Position, to_position: Position
) -> bool:
    """Kings go anywhere diagonally, a Man only in its forward direction."""
    if piece.type == PieceType.KING:
        return True
    row_direction = 1 if to_position.row > from_position.row else -1
    return row_direction == piece.color.forward


def is_promotion_move(piece: Piece, to_position: Position) -> bool:
    """check if a Man reaches the row farthest away from its starting side"""
    return piece.is_man and to_position.row == piece.color.promotion_row
