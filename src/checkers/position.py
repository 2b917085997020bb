"""
Coordinates on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers board is always 8x8: (rows, columns)
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Position:
    """(row, col), both counted from 0. Row 0 is the DARK player's home row."""

    row: int
    col: int

    @classmethod
    def from_notation(cls, notation: str) -> Position:
        """Two digits: '50' is row 5, column 0"""
        return cls(int(notation[0]), int(notation[1]))

    def to_notation(self) -> str:
        return f"{self.row}{self.col}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def midpoint(self, other: Position) -> Position:
        """Only meaningful when both positions are two diagonal steps apart."""
        return Position((self.row + other.row) // 2, (self.col + other.col) // 2)
