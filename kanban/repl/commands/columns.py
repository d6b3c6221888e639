"""
FILE: kanban/repl/commands/columns.py
PURPOSE: Column command handlers for REPL (col add|rm|rename|color)
"""

from rich.markup import escape

from ..main import console, repl_context
from ..parser import ParseResult, parse_index
from ...core import service
from ...core.exceptions import KanbanError


def handle_col_add_command(result: ParseResult) -> None:
    """Handle 'col add' - append a column."""
    index = repl_context.store.add_column()
    console.print(f"[green]✓ Added column {index}[/green]")


def handle_col_rm_command(result: ParseResult) -> None:
    """Handle 'col rm <index>' - remove a column and its tasks."""
    if len(result.args) < 2:
        console.print("[red]Error:[/red] Usage: col rm <index>")
        return

    try:
        index = parse_index(result.args[1], "column")
        if repl_context.store.remove_column(index):
            console.print(f"[green]✓ Removed column {index}[/green]")
        else:
            console.print("[yellow]Kept the last column:[/yellow] a board needs at least one column")
    except KanbanError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_col_rename_command(result: ParseResult) -> None:
    """Handle 'col rename <index> <name>' - rename a column."""
    if len(result.args) < 3:
        console.print("[red]Error:[/red] Usage: col rename <index> <name>")
        return

    try:
        index = parse_index(result.args[1], "column")
        repl_context.store.rename_column(index, result.rest(2))
        console.print(f"[green]✓ Renamed column {index}[/green]")
    except KanbanError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_col_color_command(result: ParseResult) -> None:
    """Handle 'col color <index> [color]' - recolor a column."""
    if len(result.args) < 2:
        console.print("[red]Error:[/red] Usage: " + escape("col color <index> [color]"))
        return

    try:
        index = parse_index(result.args[1], "column")
        new_color = service.color_or_random(result.rest(2))
        repl_context.store.recolor_column(index, new_color)
        console.print(f"[green]✓ Column {index} is now {new_color.to_hex()}[/green]")
    except KanbanError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_col_command(result: ParseResult) -> None:
    """
    Handle 'col' command - dispatch to column subcommands.

    Usage:
        col add
        col rm 3
        col rename 1 In review
        col color 0 cyan
    """
    subcommands = {
        "add": handle_col_add_command,
        "rm": handle_col_rm_command,
        "rename": handle_col_rename_command,
        "color": handle_col_color_command,
    }

    if not result.args:
        console.print("[red]Error:[/red] Usage: " + escape("col add | rm <i> | rename <i> <name> | color <i> [color]"))
        return

    handler = subcommands.get(result.args[0].lower())
    if handler is None:
        console.print(f"[red]Unknown col subcommand:[/red] {result.args[0]}")
        console.print(f"[dim]Available: {', '.join(subcommands)}[/dim]")
        return
    handler(result)
