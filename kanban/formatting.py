"""
FILE: kanban/formatting.py
PURPOSE: Shared formatting utilities for CLI and REPL output
EXPORTS:
  - BoardFormatter: Class for rendering board snapshots
  - readable_text_color: Pick black or white text for a background
DEPENDENCIES:
  - rich (for table formatting)
  - kanban.core.models (BoardSnapshot, ColumnSnapshot, TaskSnapshot)
NOTES:
  - Centralized formatting logic for consistency
  - Used by both CLI and REPL
  - Indices shown are the 0-based positions commands expect
"""

from rich.table import Table
from rich.text import Text

from .core.colors import Color
from .core.models import BoardSnapshot, ColumnSnapshot, TaskSnapshot


def readable_text_color(background: Color) -> str:
    """Return a text color (black/white) that contrasts with the given background."""
    # ITU-R BT.709 luminance
    luminance = 0.2126 * background.red + 0.7152 * background.green + 0.0722 * background.blue
    return "#202124" if luminance > 0.6 else "#FFFFFF"


class BoardFormatter:
    """Centralized board display formatting."""

    @staticmethod
    def column_header(index: int, column: ColumnSnapshot) -> Text:
        fg = readable_text_color(column.color)
        header = Text(f" {index}: {column.name} ", style=f"bold {fg} on {column.color.to_hex()}")
        header.append(f" ({len(column.tasks)})", style="dim")
        return header

    @staticmethod
    def task_cell(index: int, task: TaskSnapshot, raw: bool = False) -> Text:
        mark = "[x]" if task.done else "[ ]"
        if raw:
            return Text(f"{index} {mark} {task.title}")

        cell = Text(f"{index} ", style="cyan")
        cell.append(mark + " ", style="green" if task.done else "dim")
        title_style = f"{readable_text_color(task.color)} on {task.color.to_hex()}"
        if task.done:
            title_style += " strike"
        cell.append(task.title, style=title_style)
        return cell

    @staticmethod
    def create_table(snapshot: BoardSnapshot, title: str = "Board", raw: bool = False) -> Table:
        """
        Create Rich table with one table column per board column.

        Args:
            snapshot: Board to display
            title: Table title
            raw: Plain text cells (no colors)

        Returns:
            Rich Table object ready for display
        """
        table = Table(title=title, show_header=True, expand=True)
        for index, column in enumerate(snapshot.columns):
            if raw:
                table.add_column(Text(f"{index}: {column.name}"))
            else:
                table.add_column(BoardFormatter.column_header(index, column))

        depth = max((len(column.tasks) for column in snapshot.columns), default=0)
        for row in range(depth):
            cells = []
            for column in snapshot.columns:
                if row < len(column.tasks):
                    cells.append(BoardFormatter.task_cell(row, column.tasks[row], raw))
                else:
                    cells.append("")
            table.add_row(*cells)

        if depth == 0:
            table.caption = "No tasks yet"
        return table
