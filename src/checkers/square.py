"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from src.checkers.pieces import ColorType, Piece
from src.checkers.position import Position


def square_color(position: Position) -> ColorType:
    """LIGHT if the sum of row and column is even, DARK otherwise"""
    return (
        ColorType.LIGHT if (position.row + position.col) % 2 == 0 else ColorType.DARK
    )


@dataclass(frozen=True)
class Square:
    position: Position
    piece: Optional[Piece] = None

    @property
    def color(self) -> ColorType:
        return square_color(self.position)

    @property
    def is_playable(self) -> bool:
        """Pieces only ever stand on (and move across) the DARK squares."""
        return self.color == ColorType.DARK

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    @property
    def contains_man(self) -> bool:
        return self.piece is not None and self.piece.is_man

    @property
    def contains_king(self) -> bool:
        return self.piece is not None and self.piece.is_king

    def with_piece(self, piece: Optional[Piece]) -> Square:
        """Squares are never changed in place. The Board swaps in the copy returned here."""
        return replace(self, piece=piece)
