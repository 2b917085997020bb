"""
Type definitions used across layers
"""

from enum import StrEnum


class GameType(StrEnum):
    PVP = "Player vs Player"
    PVAI = "Player vs AI"


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAW = "draw"


class MoveError(StrEnum):
    """Reasons a request can be turned down. The values are the messages shown to the user."""

    WRONG_TURN_OR_OWNERSHIP = "The selected piece is not yours or the square is empty!"
    ILLEGAL_DESTINATION = "Illegal move!"
    NO_MOVES_TO_UNDO = "No moves to undo!"
    AI_TURN_PENDING = "Wait for the AI to finish its turn before undoing!"

    @property
    def message(self) -> str:
        return self.value
