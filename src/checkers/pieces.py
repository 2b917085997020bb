"""Defines the checkers pieces and the two colors"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from src.checkers.position import BOARD_DIMENSIONS


class PieceType(Enum):
    MAN = "Man"
    KING = "King"

    @property
    def display_name(self) -> str:
        return self.value


class ColorType(Enum):
    LIGHT = auto()
    DARK = auto()

    @property
    def opponent(self) -> ColorType:
        return ColorType.DARK if self == ColorType.LIGHT else ColorType.LIGHT

    @property
    def forward(self) -> int:
        """Row direction a Man of this color moves in: DARK moves down the board (increasing row), LIGHT moves up."""
        return 1 if self == ColorType.DARK else -1

    @property
    def promotion_row(self) -> int:
        """The row farthest from where this color starts"""
        return BOARD_DIMENSIONS[0] - 1 if self == ColorType.DARK else 0


# Single characters used in board layout strings: lower case for Men, upper case for Kings
LAYOUT_TO_COLOR: dict[str, ColorType] = {
    "d": ColorType.DARK,
    "l": ColorType.LIGHT,
}

COLOR_TO_LAYOUT: dict[ColorType, str] = {
    value: key for key, value in LAYOUT_TO_COLOR.items()
}


@dataclass(frozen=True)
class Piece:
    color: ColorType
    type: PieceType = PieceType.MAN

    @classmethod
    def man(cls, color: ColorType) -> Piece:
        return cls(color, PieceType.MAN)

    @classmethod
    def king(cls, color: ColorType) -> Piece:
        return cls(color, PieceType.KING)

    @classmethod
    def from_layout(cls, character: str) -> Piece:
        # lower case: Man, upper case: King
        piece_type = PieceType.KING if character.isupper() else PieceType.MAN
        color = LAYOUT_TO_COLOR[character.lower()]
        return cls(color, piece_type)

    def to_layout(self) -> str:
        character = COLOR_TO_LAYOUT[self.color]
        return character.upper() if self.is_king else character

    @property
    def is_man(self) -> bool:
        return self.type == PieceType.MAN

    @property
    def is_king(self) -> bool:
        return self.type == PieceType.KING

    def promoted(self) -> Piece:
        """A Man reaching the far row gets replaced by a King of the same color."""
        return Piece(self.color, PieceType.KING)

    def demoted(self) -> Piece:
        """Reverse of promotion, needed to undo a promoting move."""
        return Piece(self.color, PieceType.MAN)
