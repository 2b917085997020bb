"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

import random
from typing import Callable
from unittest.mock import Mock

import pytest

from src.checkers.board import Board
from src.checkers.game import Game
from src.checkers.pieces import ColorType, Piece
from src.checkers.player import HumanPlayer
from src.checkers.position import Position
from src.core.config import Settings
from src.core.shared_types import GameType


@pytest.fixture
def no_shuffle() -> Mock:
    """Random source that keeps the colors in order: the first player named gets LIGHT (and opens the game)."""
    return Mock(spec=random.Random)


@pytest.fixture
def dark_player() -> HumanPlayer:
    return HumanPlayer("Alice", ColorType.DARK)


@pytest.fixture
def light_player() -> HumanPlayer:
    return HumanPlayer("Bob", ColorType.LIGHT)


@pytest.fixture
def pvp_game(no_shuffle: Mock) -> Game:
    """Alice plays LIGHT and moves first, Bob plays DARK."""
    return Game.new_game("Alice", "Bob", rng=no_shuffle)


@pytest.fixture
def game_from_layout() -> Callable[[str, ColorType], Game]:
    """Call the inner function with a layout and the color to move to get a Player vs Player game in that position."""

    def _create_game(layout: str, to_move: ColorType = ColorType.LIGHT) -> Game:
        light = HumanPlayer("Bob", ColorType.LIGHT)
        dark = HumanPlayer("Alice", ColorType.DARK)
        return Game(
            board=Board.from_layout(layout),
            players=(light, dark),
            mode=GameType.PVP,
            current_turn=light if to_move == ColorType.LIGHT else dark,
            moves=[],
        )

    return _create_game


@pytest.fixture
def instant_settings() -> Settings:
    return Settings(ai_thinking_delay=0)


@pytest.fixture
def board_with_pieces() -> Callable[[dict[Position, Piece]], Board]:
    """Call the inner function with the pieces to place on an otherwise empty board"""

    def _create_board(pieces: dict[Position, Piece]) -> Board:
        board = Board.empty()
        for position, piece in pieces.items():
            board.place_piece(piece, position)
        return board

    return _create_board
