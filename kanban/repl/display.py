"""
FILE: kanban/repl/display.py
PURPOSE: Display functions for the board
EXPORTS:
  - display_board() - Render a board snapshot
  - BoardRenderer - Store observer that renders every published snapshot
DEPENDENCIES:
  - rich (formatted output)
  - kanban.formatting (BoardFormatter)
NOTES:
  - Avoids circular imports by accepting a console as parameter
"""

from rich.console import Console

from ..core.models import BoardSnapshot
from ..formatting import BoardFormatter

# Create console instance here to avoid circular import
console = Console()


def display_board(snapshot: BoardSnapshot, console_instance: Console = None, raw: bool = False) -> None:
    """
    Display the board as a table.

    Args:
        snapshot: Board snapshot to display
        console_instance: Optional Rich console instance (defaults to module console)
        raw: Plain text output (no colors)
    """
    if console_instance is None:
        console_instance = console
    console_instance.print(BoardFormatter.create_table(snapshot, raw=raw))


class BoardRenderer:
    """Observer that redraws the board after each change."""

    def __init__(self, console_instance: Console = None):
        self.console = console_instance or console
        self.enabled = True

    def __call__(self, snapshot: BoardSnapshot) -> None:
        if self.enabled:
            display_board(snapshot, self.console)
