"""
FILE: kanban/cli/commands/tasks.py
PURPOSE: Task commands (add, done, edit, color, mv)
"""

from typing import Optional

import typer
from rich.markup import escape

from ..main import app, console, board_session, print_board
from ...core import service


@app.command()
def add(
    column: int = typer.Argument(..., help="Column index"),
    title: Optional[str] = typer.Argument(None, help="Task title (default: 'New task')"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Add a task to the end of a column.

    Example:
        kanban add 0
        kanban add 0 "Write documentation"
    """
    with board_session() as store:
        index = store.add_task(column, title)

    task = store.snapshot().columns[column].tasks[index]
    if raw:
        console.print(f"{column} {index}: {escape(task.title)}")
    else:
        console.print(f"[green]✓ Added task [bold]{column}/{index}[/bold]:[/green] {escape(task.title)}")
        print_board(store)


@app.command()
def done(
    column: int = typer.Argument(..., help="Column index"),
    task: int = typer.Argument(..., help="Task index within the column"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Toggle a task's done flag.

    Example:
        kanban done 0 2
    """
    with board_session() as store:
        is_done = store.toggle_task(column, task)

    state = "done" if is_done else "not done"
    if raw:
        console.print(f"{column} {task}: {state}")
    else:
        console.print(f"[green]✓ Task [bold]{column}/{task}[/bold] marked {state}[/green]")
        print_board(store)


@app.command()
def edit(
    column: int = typer.Argument(..., help="Column index"),
    task: int = typer.Argument(..., help="Task index within the column"),
    title: str = typer.Argument(..., help="New title"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Rename a task.

    Example:
        kanban edit 1 0 "Review pull requests"
    """
    with board_session() as store:
        store.rename_task(column, task, title)

    if raw:
        console.print(f"{column} {task}: {escape(title)}")
    else:
        console.print(f"[green]✓ Renamed task [bold]{column}/{task}[/bold]:[/green] {escape(title)}")
        print_board(store)


@app.command()
def color(
    column: int = typer.Argument(..., help="Column index"),
    task: int = typer.Argument(..., help="Task index within the column"),
    value: Optional[str] = typer.Argument(None, help="Color name or #RRGGBB (default: random)"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Recolor a task.

    Example:
        kanban color 0 1 yellow
        kanban color 0 1 "#FF8800"
        kanban color 0 1            # pick a random palette color
    """
    with board_session() as store:
        new_color = service.color_or_random(value)
        store.recolor_task(column, task, new_color)

    if raw:
        console.print(f"{column} {task}: {new_color.to_hex()}")
    else:
        console.print(f"[green]✓ Task [bold]{column}/{task}[/bold] is now[/green] {new_color.to_hex()}")
        print_board(store)


@app.command()
def mv(
    column: int = typer.Argument(..., help="Column index"),
    task: int = typer.Argument(..., help="Task index within the column"),
    to_column: int = typer.Argument(..., help="Destination column index"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Move a task to the end of another column.

    Example:
        kanban mv 0 0 2
    """
    with board_session() as store:
        moved = store.move_task(column, task, to_column)

    if not moved:
        console.print(f"[yellow]Nothing moved:[/yellow] destination {to_column} is the same column or does not exist")
        return

    if raw:
        console.print(f"{column} {task} -> {to_column}")
    else:
        console.print(f"[green]✓ Moved task [bold]{column}/{task}[/bold] to column {to_column}[/green]")
        print_board(store)
