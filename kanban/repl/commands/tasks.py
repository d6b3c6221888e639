"""
FILE: kanban/repl/commands/tasks.py
PURPOSE: Task command handlers for REPL (add, done, edit, color, mv)
"""

from rich.markup import escape

from ..main import console, repl_context
from ..parser import ParseResult, parse_index
from ...core import service
from ...core.exceptions import KanbanError


def _usage(text: str) -> None:
    console.print(f"[red]Error:[/red] Usage: {escape(text)}")


def handle_add_command(result: ParseResult) -> None:
    """
    Handle 'add' command - add a task to a column.

    Usage:
        add 0                  # Task titled "New task" in column 0
        add 0 Buy milk         # Task with a title (quotes optional)
    """
    if not result.args:
        _usage("add <column> [title]")
        return

    try:
        column = parse_index(result.args[0], "column")
        title = result.rest(1) or None
        index = repl_context.store.add_task(column, title)
        console.print(f"[green]✓ Added task {column}/{index}[/green]")
    except KanbanError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_done_command(result: ParseResult) -> None:
    """
    Handle 'done' command - toggle a task's done flag.

    Usage:
        done 0 2
    """
    if len(result.args) < 2:
        _usage("done <column> <task>")
        return

    try:
        column = parse_index(result.args[0], "column")
        task = parse_index(result.args[1], "task")
        is_done = repl_context.store.toggle_task(column, task)
        state = "done" if is_done else "not done"
        console.print(f"[green]✓ Task {column}/{task} marked {state}[/green]")
    except KanbanError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_edit_command(result: ParseResult) -> None:
    """
    Handle 'edit' command - rename a task.

    Usage:
        edit 0 2 New title
        edit 0 2 ""            # Empty titles are allowed
    """
    if len(result.args) < 3:
        _usage("edit <column> <task> <title>")
        return

    try:
        column = parse_index(result.args[0], "column")
        task = parse_index(result.args[1], "task")
        repl_context.store.rename_task(column, task, result.rest(2))
        console.print(f"[green]✓ Renamed task {column}/{task}[/green]")
    except KanbanError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_color_command(result: ParseResult) -> None:
    """
    Handle 'color' command - recolor a task.

    Usage:
        color 0 2 yellow
        color 0 2 #FF8800
        color 0 2              # Random palette color
    """
    if len(result.args) < 2:
        _usage("color <column> <task> [color]")
        return

    try:
        column = parse_index(result.args[0], "column")
        task = parse_index(result.args[1], "task")
        new_color = service.color_or_random(result.rest(2))
        repl_context.store.recolor_task(column, task, new_color)
        console.print(f"[green]✓ Task {column}/{task} is now {new_color.to_hex()}[/green]")
    except KanbanError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_mv_command(result: ParseResult) -> None:
    """
    Handle 'mv' command - move a task to the end of another column.

    Usage:
        mv 0 0 2               # First task of column 0 to column 2
    """
    if len(result.args) < 3:
        _usage("mv <column> <task> <to_column>")
        return

    try:
        column = parse_index(result.args[0], "column")
        task = parse_index(result.args[1], "task")
        to_column = parse_index(result.args[2], "column")
        if repl_context.store.move_task(column, task, to_column):
            console.print(f"[green]✓ Moved task {column}/{task} to column {to_column}[/green]")
        else:
            console.print(f"[yellow]Nothing moved:[/yellow] column {to_column} is the same column or does not exist")
    except KanbanError as e:
        console.print(f"[red]Error:[/red] {e}")
