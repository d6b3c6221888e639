"""
FILE: kanban/repl/main.py
PURPOSE: Interactive REPL for editing the board with prompt-toolkit
EXPORTS:
  - REPLContext - Session state (store, storage, unsaved flag)
  - repl_context - Module-level session context
  - execute_command() - Dispatch one parsed command
  - run_repl() - Main REPL loop
  - main() - Entry point for REPL mode
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - kanban.core.store (BoardStore)
  - kanban.core.storage (default_storage)
  - kanban.repl.parser (command parsing)
  - kanban.repl.completer (autocomplete)
NOTES:
  - Edits stay in memory until 'save'; 'load' replaces the board with the saved one
  - The board is redrawn by a store observer after every change
  - Bottom toolbar shows column/task counts and rotating tips
  - Ctrl+D or "exit"/"quit" to exit; unsaved changes need a second "exit"
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional

# Fix Windows console encoding for Unicode characters
# Only wrap if not already wrapped to prevent issues
if sys.platform == "win32":
    import io
    if not isinstance(sys.stdout, io.TextIOWrapper) or sys.stdout.encoding != 'utf-8':
        try:
            sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
        except (AttributeError, ValueError):
            pass  # Already wrapped or unavailable

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.formatted_text import HTML
from rich.console import Console

from ..core import storage as storage_module
from ..core.models import BoardSnapshot
from ..core.store import BoardStore
from ..logging_utils import configure_logging
from .parser import parse_command, ParseResult
from .completer import create_completer
from .display import BoardRenderer

logger = logging.getLogger(__name__)

# Rich console for formatted output
console = Console()


# --- REPL Context (Session State) ---


@dataclass
class REPLContext:
    """
    State of one REPL session.

    Attributes:
        store: The board being edited
        storage: Key-value storage for save/load (None = on-disk default)
        renderer: Observer that draws the board after changes (None = silent)
        unsaved: True when the board changed since the last save/load
        exit_warned: True after an exit was refused because of unsaved changes
    """
    store: BoardStore = field(default_factory=BoardStore)
    storage: Optional[object] = None
    renderer: Optional[Callable[[BoardSnapshot], None]] = None
    unsaved: bool = False
    exit_warned: bool = False

    def __post_init__(self):
        self._unsubscribe = self.store.subscribe(self._on_change)

    def _on_change(self, snapshot: BoardSnapshot) -> None:
        self.unsaved = True
        self.exit_warned = False
        if self.renderer is not None:
            self.renderer(snapshot)

    def reset(self, store: Optional[BoardStore] = None, storage=None) -> None:
        """Start over with a new store (and optionally new storage)."""
        self._unsubscribe()
        self.store = store if store is not None else BoardStore()
        self.storage = storage
        self.unsaved = False
        self.exit_warned = False
        self._unsubscribe = self.store.subscribe(self._on_change)

    def get_storage(self):
        if self.storage is None:
            return storage_module.default_storage()
        return self.storage

    def save(self) -> None:
        self.store.save(self.get_storage())
        self.unsaved = False
        self.exit_warned = False

    def load(self) -> bool:
        """
        Replace the board with the saved one.

        Returns:
            False if nothing has been saved yet (board unchanged)
        """
        loaded = self.store.load(self.get_storage())
        if loaded:
            self.unsaved = False
            self.exit_warned = False
        return loaded

    def get_prompt(self) -> str:
        """Prompt like "kanban> ", or "kanban*> " with unsaved changes."""
        return "kanban*> " if self.unsaved else "kanban> "


# Global REPL context (persists during session, resets on restart)
repl_context = REPLContext()


def format_prompt() -> HTML:
    """Formatted prompt with a yellow marker for unsaved changes."""
    if repl_context.unsaved:
        return HTML("<b>kanban<ansiyellow>*</ansiyellow>&gt; </b>")
    return HTML("<b>kanban&gt; </b>")


# Rotating tips for bottom toolbar
_TOOLBAR_TIPS = [
    "Tip: 'save' writes the board, 'load' restores the last save",
    "Tip: 'mv <col> <task> <to>' moves a task to another column",
    "Tip: 'color <col> <task>' without a color picks one for you",
    "Tip: 'col add' appends a column, 'col rm <i>' removes one",
    "Tip: Press Ctrl+D or type 'exit' to quit",
    "Tip: Type 'help' to see all available commands",
]
_tip_index = 0


def get_bottom_toolbar() -> HTML:
    """Bottom toolbar with board counts and a rotating tip."""
    snapshot = repl_context.store.snapshot()
    total = sum(len(column.tasks) for column in snapshot.columns)
    done = sum(1 for column in snapshot.columns for task in column.tasks if task.done)
    tip = _TOOLBAR_TIPS[_tip_index % len(_TOOLBAR_TIPS)]
    stats = f"{len(snapshot.columns)} columns | {total} tasks | {done} done"
    return HTML(f"<style bg='#444444' fg='#ffffff'> {stats} | {tip} </style>")


# Import command handlers from command modules
from .commands import (
    # Task handlers
    handle_add_command,
    handle_done_command,
    handle_edit_command,
    handle_color_command,
    handle_mv_command,
    # Column handlers
    handle_col_command,
    # System handlers
    handle_show_command,
    handle_save_command,
    handle_load_command,
    handle_help_command,
    handle_clear_command,
)


def execute_command(result: ParseResult) -> bool:
    """
    Execute a parsed command.

    Args:
        result: Parsed command from parser

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()

    if command in ("exit", "quit"):
        if repl_context.unsaved and not repl_context.exit_warned:
            repl_context.exit_warned = True
            console.print("[yellow]Unsaved changes.[/yellow] Type 'save', or 'exit' again to discard them.")
            return True
        console.print("[dim]Goodbye![/dim]")
        return False

    # Empty command (just Enter pressed)
    if not command:
        return True

    handlers = {
        "add": handle_add_command,
        "done": handle_done_command,
        "edit": handle_edit_command,
        "color": handle_color_command,
        "mv": handle_mv_command,
        "col": handle_col_command,
        "show": handle_show_command,
        "ls": handle_show_command,
        "save": handle_save_command,
        "load": handle_load_command,
        "help": handle_help_command,
        "clear": handle_clear_command,
    }

    handler = handlers.get(command)
    if handler:
        handler(result)
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl() -> None:
    """
    Main REPL loop.

    Sets up prompt_toolkit session with:
    - Command history (in-memory, not persisted)
    - Autocomplete (commands, column subcommands, color names)
    - Custom prompt formatting

    Exits on:
    - Ctrl+D (EOFError)
    - "exit" or "quit" commands
    """
    global _tip_index

    has_tty = sys.stdin.isatty() and sys.stdout.isatty()
    session = None
    use_simple_input = not has_tty

    if has_tty:
        try:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(),
                complete_while_typing=True,
                bottom_toolbar=get_bottom_toolbar,
            )
        except Exception as e:
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    repl_context.renderer = BoardRenderer(console)

    console.print("[bold cyan]Kanban REPL[/bold cyan] - Type 'help' for commands, 'load' for your saved board, 'exit' to quit")
    if use_simple_input:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()
    handle_show_command(ParseResult(command="show"))
    console.print()

    while True:
        try:
            if use_simple_input or session is None:
                user_input = input(repl_context.get_prompt())
            else:
                user_input = session.prompt(format_prompt())

            result = parse_command(user_input)
            if not execute_command(result):
                break

            _tip_index += 1

        except KeyboardInterrupt:
            console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
            continue
        except EOFError:
            console.print()
            if repl_context.unsaved:
                console.print("[yellow]Unsaved changes discarded.[/yellow]")
            console.print("[dim]Goodbye![/dim]")
            break
        except Exception as e:
            # Unexpected error - show but don't crash
            logger.exception("Unexpected error in REPL")
            console.print(f"[red]Unexpected error:[/red] {e}")


def main() -> None:
    """
    Entry point for REPL mode.

    Called when user runs: kanban repl
    """
    configure_logging(storage_module.STORAGE_DIR / "kanban.log")
    try:
        run_repl()
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
