"""The two kinds of players. Only the AI dispatch in Game cares which one it is dealing with."""

from dataclasses import dataclass

from src.checkers.pieces import ColorType


@dataclass(frozen=True)
class HumanPlayer:
    name: str
    color: ColorType


@dataclass(frozen=True)
class AIPlayer:
    name: str
    color: ColorType


Player = HumanPlayer | AIPlayer
