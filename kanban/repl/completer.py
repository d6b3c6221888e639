"""
FILE: kanban/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - KanbanCompleter (Completer for command/arg completion)
  - create_completer() -> KanbanCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - kanban.core.constants (NAMED_COLORS)
NOTES:
  - Suggests command names when at start of line
  - Suggests column subcommands after "col"
  - Suggests color names in the color position of "color" and "col color"
  - Case-insensitive matching
"""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.constants import NAMED_COLORS


class KanbanCompleter(Completer):
    """
    Custom completer for the kanban REPL.

    Provides context-aware autocomplete:
    - Command names at start of input
    - Column subcommands after "col"
    - Palette color names where a color is expected
    """

    COMMANDS = [
        "add", "done", "edit", "color", "mv", "col", "show", "ls",
        "save", "load", "help", "clear", "exit", "quit",
    ]

    COL_SUBCOMMANDS = ["add", "rm", "rename", "color"]

    COLOR_NAMES = sorted(NAMED_COLORS)

    COMMAND_FLAGS = {
        "show": ["--raw"],
        "ls": ["--raw"],
    }

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Logic:
            1. If at start or only whitespace -> suggest commands
            2. If command is "col" -> suggest subcommands
            3. If a color argument is being typed -> suggest color names
            4. If typing "--" -> suggest flags for the command
        """
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        at_new_word = text_before_cursor.endswith(" ")

        # Case 1: typing the command itself
        if not words or (not at_new_word and len(words) == 1):
            yield from self._complete(self.COMMANDS, words[0] if words else "")
            return

        command = words[0].lower()
        # Index of the word being typed (0 = command)
        position = len(words) if at_new_word else len(words) - 1
        current = "" if at_new_word else words[-1]

        # Case 2: "col" subcommands
        if command == "col" and position == 1:
            yield from self._complete(self.COL_SUBCOMMANDS, current)
            return

        # Case 3: color names ("color <col> <task> _", "col color <i> _")
        if command == "color" and position == 3:
            yield from self._complete(self.COLOR_NAMES, current)
            return
        if command == "col" and len(words) >= 2 and words[1].lower() == "color" and position == 3:
            yield from self._complete(self.COLOR_NAMES, current)
            return

        # Case 4: flags
        if current.startswith("--"):
            yield from self._complete(self.COMMAND_FLAGS.get(command, []), current)

    def _complete(self, options, word: str) -> Iterable[Completion]:
        """Yield options starting with word (case-insensitive)."""
        word_lower = word.lower()
        for option in options:
            if option.lower().startswith(word_lower):
                yield Completion(option, start_position=-len(word))


def create_completer() -> KanbanCompleter:
    """
    Create and return a KanbanCompleter instance.

    Returns:
        Configured KanbanCompleter for use with PromptSession
    """
    return KanbanCompleter()
