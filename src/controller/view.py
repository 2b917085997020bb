"""Protocol for the user interface. Any rendering toolkit can implement this to be driven by the controller."""

from typing import Protocol

from src.checkers.board import Board
from src.checkers.position import Position


class View(Protocol):
    """Everything the controller needs from the screen"""

    def render(self, board: Board) -> None:
        """Redraw all squares from the current piece placement."""
        ...

    def highlight_squares(self, positions: list[Position]) -> None:
        """Mark candidate destinations. An empty list clears the highlights."""
        ...

    def log_error(self, message: str) -> None:
        """Show a status/failure message to the user."""
        ...

    def show_winner(self, name: str) -> None: ...

    def disable_input(self) -> None: ...

    def enable_input(self) -> None: ...
