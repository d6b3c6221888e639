"""
FILE: kanban/cli/main.py
PURPOSE: Typer-based CLI for one-shot board editing commands
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - board_session() - Load, yield and save the board for one command
  - print_board() - Render the board
  - show() / version() / repl() / export() / import_() - System commands
  - col_add() / col_rm() / col_rename() / col_color() - Column commands
  - add() / done() / edit() / color() / mv() - Task commands
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - kanban.core.service (load/save helpers)
  - kanban.core.exceptions (error handling)
  - kanban.repl (interactive mode)
NOTES:
  - Every mutating command loads the saved board, applies one change and saves
  - Indices are 0-based, as shown by `kanban show`
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
"""

import sys
from contextlib import contextmanager

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console

from ..core import service, storage
from ..core.exceptions import KanbanError
from ..core.store import BoardStore
from ..formatting import BoardFormatter
from ..logging_utils import configure_logging

# Typer app setup
app = typer.Typer(
    name="kanban",
    help="Single-user kanban board in the terminal",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.1.0"


@app.callback(invoke_without_command=True)
def default_command(ctx: typer.Context):
    """
    Default callback - sets up logging and launches the REPL when no
    command is specified.
    """
    configure_logging(storage.STORAGE_DIR / "kanban.log")
    if ctx.invoked_subcommand is None:
        from ..repl import main as repl_main
        try:
            repl_main()
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


def print_board(store: BoardStore, raw: bool = False) -> None:
    """Render the current board."""
    console.print(BoardFormatter.create_table(store.snapshot(), raw=raw))


@contextmanager
def board_session():
    """
    Open the saved board for a single command.

    The board is saved only if the block finishes without error. Kanban
    errors are printed and turned into exit code 1.
    """
    try:
        store = service.open_store()
        yield store
        service.commit(store)
    except KanbanError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    # System commands
    show,
    version,
    repl,
    export,
    import_,
    # Column commands
    col_add,
    col_rm,
    col_rename,
    col_color,
    # Task commands
    add,
    done,
    edit,
    color,
    mv,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
