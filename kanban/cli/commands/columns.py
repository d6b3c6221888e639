"""
FILE: kanban/cli/commands/columns.py
PURPOSE: Column commands (col-add, col-rm, col-rename, col-color)
"""

from typing import Optional

import typer
from rich.markup import escape

from ..main import app, console, board_session, print_board
from ...core import service


@app.command("col-add")
def col_add(
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Append a new column to the board.

    Example:
        kanban col-add
    """
    with board_session() as store:
        index = store.add_column()

    if raw:
        console.print(str(index))
    else:
        console.print(f"[green]✓ Added column [bold]{index}[/bold][/green]")
        print_board(store)


@app.command("col-rm")
def col_rm(
    index: int = typer.Argument(..., help="Column index"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Remove a column and its tasks. The last column is never removed.

    Example:
        kanban col-rm 3
    """
    with board_session() as store:
        removed = store.remove_column(index)

    if not removed:
        console.print("[yellow]Kept the last column:[/yellow] a board needs at least one column")
        return

    if raw:
        console.print(f"removed {index}")
    else:
        console.print(f"[green]✓ Removed column [bold]{index}[/bold][/green]")
        print_board(store)


@app.command("col-rename")
def col_rename(
    index: int = typer.Argument(..., help="Column index"),
    name: str = typer.Argument(..., help="New name"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Rename a column.

    Example:
        kanban col-rename 1 "Doing"
    """
    with board_session() as store:
        store.rename_column(index, name)

    if raw:
        console.print(f"{index}: {escape(name)}")
    else:
        console.print(f"[green]✓ Renamed column [bold]{index}[/bold]:[/green] {escape(name)}")
        print_board(store)


@app.command("col-color")
def col_color(
    index: int = typer.Argument(..., help="Column index"),
    value: Optional[str] = typer.Argument(None, help="Color name or #RRGGBB (default: random)"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Recolor a column.

    Example:
        kanban col-color 0 cyan
        kanban col-color 0
    """
    with board_session() as store:
        new_color = service.color_or_random(value)
        store.recolor_column(index, new_color)

    if raw:
        console.print(f"{index}: {new_color.to_hex()}")
    else:
        console.print(f"[green]✓ Column [bold]{index}[/bold] is now[/green] {new_color.to_hex()}")
        print_board(store)
