"""
FILE: kanban/repl/commands/system.py
PURPOSE: System command handlers for REPL (show, save, load, help, clear)
"""

from rich.markup import escape

from ..main import console, repl_context
from ..parser import ParseResult
from ..display import display_board
from ...core.exceptions import KanbanError


def handle_show_command(result: ParseResult) -> None:
    """
    Handle 'show' command - draw the board.

    Usage:
        show
        show --raw             # No colors
    """
    display_board(repl_context.store.snapshot(), console, raw=bool(result.flags.get("raw")))


def handle_save_command(result: ParseResult) -> None:
    """Handle 'save' command - write the board to storage."""
    try:
        repl_context.save()
        console.print("[green]✓ Board saved[/green]")
    except (KanbanError, OSError) as e:
        console.print(f"[red]Error:[/red] Could not save: {e}")


def handle_load_command(result: ParseResult) -> None:
    """
    Handle 'load' command - replace the board with the last save.

    Unsaved edits are discarded. A malformed save leaves the board as is.
    """
    try:
        if repl_context.load():
            console.print("[green]✓ Board loaded[/green]")
        else:
            console.print("[yellow]Nothing saved yet[/yellow]")
    except KanbanError as e:
        console.print(f"[red]Error:[/red] Could not load: {e}")


def handle_clear_command(result: ParseResult) -> None:
    """Handle 'clear' command - clear the screen."""
    console.clear()


def handle_help_command(result: ParseResult) -> None:
    """Handle 'help' command - show available commands."""
    console.print("\n[bold cyan]Kanban REPL[/bold cyan]\n")
    console.print("[dim]Columns and tasks are addressed by the numbers shown on the board.[/dim]\n")

    sections = [
        ("Tasks", [
            ("add <col> [title]", "Add a task to a column"),
            ("done <col> <task>", "Toggle a task's done flag"),
            ("edit <col> <task> <title>", "Rename a task"),
            ("color <col> <task> [color]", "Recolor a task (random if omitted)"),
            ("mv <col> <task> <to>", "Move a task to another column"),
        ]),
        ("Columns", [
            ("col add", "Append a column"),
            ("col rm <i>", "Remove a column and its tasks"),
            ("col rename <i> <name>", "Rename a column"),
            ("col color <i> [color]", "Recolor a column (random if omitted)"),
        ]),
        ("Board", [
            ("show", "Draw the board"),
            ("save", "Save the board"),
            ("load", "Replace the board with the last save"),
            ("clear", "Clear the screen"),
            ("help", "Show this help message"),
            ("exit / quit", "Leave the REPL"),
        ]),
    ]

    for title, commands in sections:
        console.print(f"[bold]{title}:[/bold]")
        for usage, description in commands:
            console.print(f"  [green]{escape(f'{usage:28}')}[/green] {description}")
        console.print()

    console.print("[dim]Colors: names like red, cyan, lightgray or #RRGGBB[/dim]")
