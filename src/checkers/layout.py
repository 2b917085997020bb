"""
Text encoding of the piece placement on a board.
----

Works like the board part of a FEN string in chess:

* rows are separated by slashes and listed from row 0 (DARK's home row) down to row 7 (LIGHT's home row)
* every row is read from column 0 to column 7
* "d" / "l" denote a DARK / LIGHT Man, "D" / "L" a DARK / LIGHT King
* a digit denotes that many consecutive empty squares

ex) The starting position:
1d1d1d1d/d1d1d1d1/1d1d1d1d/8/8/l1l1l1l1/1l1l1l1l/l1l1l1l1
"""

from typing import Optional

from src.checkers.pieces import LAYOUT_TO_COLOR, ColorType, Piece
from src.checkers.position import BOARD_DIMENSIONS, Position
from src.checkers.square import square_color
from src.core.exceptions import InvalidLayoutError

STARTING_LAYOUT = "1d1d1d1d/d1d1d1d1/1d1d1d1d/8/8/l1l1l1l1/1l1l1l1l/l1l1l1l1"
EMPTY_LAYOUT = "/".join(["8"] * BOARD_DIMENSIONS[0])

# runs of empty squares: plain ASCII digits only, a row has at most 8 squares
EMPTY_RUN_DIGITS = "12345678"


def is_valid_layout(layout: str) -> bool:
    """Right amount of rows/columns, only known characters, and no piece on a LIGHT square."""
    num_rows, num_cols = BOARD_DIMENSIONS
    row_layouts = layout.split("/")
    if len(row_layouts) != num_rows:
        return False

    for row, row_layout in enumerate(row_layouts):
        col = 0
        for character in row_layout:
            if character in EMPTY_RUN_DIGITS:
                col += int(character)
            elif character.lower() in LAYOUT_TO_COLOR:
                # pieces are never placed on the non-playable squares
                if square_color(Position(row, col)) != ColorType.DARK:
                    return False
                col += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if col != num_cols:
            return False
    return True


def parse_layout(layout: str) -> dict[Position, Optional[Piece]]:
    """Every position of the board, mapped to the piece standing on it (or None)."""
    if not is_valid_layout(layout):
        raise InvalidLayoutError(
            f"Cannot interpret supplied string as board layout: {layout}"
        )

    placement: dict[Position, Optional[Piece]] = {}
    for row, row_layout in enumerate(layout.split("/")):
        col = 0
        for character in row_layout:
            if character in EMPTY_RUN_DIGITS:
                for _ in range(int(character)):
                    placement[Position(row, col)] = None
                    col += 1
            else:
                placement[Position(row, col)] = Piece.from_layout(character)
                col += 1
    return placement


def row_to_layout(pieces: list[Optional[Piece]]) -> str:
    """Layout string of a single row"""
    characters: list[str] = []
    empty_count = 0
    for piece in pieces:
        if piece is None:
            empty_count += 1
            continue
        if empty_count > 0:
            characters.append(str(empty_count))
            empty_count = 0
        characters.append(piece.to_layout())

    # if the entire row is empty, then we still place this number in the string
    if empty_count > 0:
        characters.append(str(empty_count))
    return "".join(characters)
