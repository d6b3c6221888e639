"""
FILE: kanban/cli/commands/system.py
PURPOSE: System commands (show, version, repl, export, import)
"""

from pathlib import Path

import typer

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, error_console, board_session, print_board, __version__
from ...core import service
from ...core.exceptions import KanbanError


@app.command()
def show(
    json_output: bool = typer.Option(False, "--json", help="Output the saved JSON document"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Show the board.

    Example:
        kanban show
        kanban show --json
    """
    try:
        store = service.open_store()
    except KanbanError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        # Plain print so Rich markup never touches titles
        print(store.serialize())
    else:
        print_board(store, raw=raw)


@app.command()
def version():
    """Show kanban version."""
    console.print(f"kanban v{__version__}")


@app.command()
def repl():
    """Launch the interactive board editor."""
    from ...repl import main as repl_main
    repl_main()


@app.command()
def export(
    path: Path = typer.Argument(..., help="File to write the board JSON to"),
):
    """
    Write the saved board to a JSON file.

    Example:
        kanban export board.json
    """
    try:
        store = service.open_store()
    except KanbanError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        service.export_board(store, path)
    except OSError as e:
        error_console.print(f"[red]Error:[/red] Cannot write {path}: {e}")
        raise typer.Exit(1)
    console.print(f"[green]✓ Exported board to[/green] {path}")


@app.command("import")
def import_(
    path: Path = typer.Argument(..., help="Board JSON file to load"),
):
    """
    Replace the saved board with a JSON file.

    Example:
        kanban import board.json
    """
    with board_session() as store:
        service.import_board(store, path)
    console.print(f"[green]✓ Imported board from[/green] {path}")
    print_board(store)
