"""
FILE: kanban/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
  - parse_index(value, label) -> int
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
  - kanban.core.exceptions (InvalidInputError)
NOTES:
  - Handles quoted strings: add 0 "task with spaces"
  - Supports flags: --raw
  - Preserves argument order for positional args
  - Case-insensitive command names
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List

from ..core.exceptions import InvalidInputError


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "add", "mv", "col")
        args: Positional arguments (e.g., ["0", "Buy milk"])
        flags: Flag arguments as dict (e.g., {"raw": True})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, str | bool] = field(default_factory=dict)
    raw_input: str = ""

    def rest(self, start: int) -> str:
        """Join positional args from start on (for unquoted titles)."""
        return " ".join(self.args[start:])


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command("add 0 Buy milk")
        ParseResult(command="add", args=["0", "Buy", "milk"], flags={})

        >>> parse_command('col rename 1 "In review"')
        ParseResult(command="col", args=["rename", "1", "In review"], flags={})

        >>> parse_command("show --raw")
        ParseResult(command="show", args=[], flags={"raw": True})

    Notes:
        - Command is always the first token (case-insensitive)
        - Flags start with -- and take the next token as value unless it is
          another flag
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", raw_input=input_str)

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        # Unclosed quote: fall back to plain whitespace split
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", raw_input=input_str)

    args = []
    flags = {}
    remaining = iter(tokens[1:])
    pending_flag = None

    for token in remaining:
        if token.startswith("--") and len(token) > 2:
            if pending_flag:
                flags[pending_flag] = True
            pending_flag = token[2:]
        elif pending_flag:
            flags[pending_flag] = token
            pending_flag = None
        else:
            args.append(token)

    if pending_flag:
        flags[pending_flag] = True

    return ParseResult(
        command=tokens[0].lower(),
        args=args,
        flags=flags,
        raw_input=input_str,
    )


def parse_index(value: str, label: str = "index") -> int:
    """
    Convert a positional argument to a board index.

    Raises:
        InvalidInputError: If value is not a non-negative integer
    """
    try:
        index = int(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid {label} '{value}': expected a number")
    if index < 0:
        raise InvalidInputError(f"Invalid {label} '{value}': must be 0 or greater")
    return index
