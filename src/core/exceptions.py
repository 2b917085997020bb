"""Custom exceptions. Everything raised on purpose by the domain layer derives from GameError."""

from src.core.shared_types import MoveError


class GameError(Exception):
    """Top-level error for anything going wrong while playing a game."""


class GameStateError(GameError):
    """The game cannot be created or continued in the requested way."""


class InvalidLayoutError(GameError):
    """A board layout string could not be parsed."""


class MoveRejectedError(GameError):
    """A move was refused. The `kind` tells the caller why."""

    kind: MoveError = MoveError.ILLEGAL_DESTINATION

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.message)


class WrongTurnOrOwnershipError(MoveRejectedError):
    kind = MoveError.WRONG_TURN_OR_OWNERSHIP


class IllegalMoveError(MoveRejectedError):
    kind = MoveError.ILLEGAL_DESTINATION
