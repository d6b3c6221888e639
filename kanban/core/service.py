"""
FILE: kanban/core/service.py
PURPOSE: Helpers shared by the CLI and REPL for opening and persisting boards
EXPORTS:
  - open_store(storage) -> BoardStore
  - commit(store, storage) -> None
  - export_board(store, path) -> None
  - import_board(store, path) -> None
  - parse_color(text) -> Color
  - color_or_random(text) -> Color
DEPENDENCIES:
  - pathlib (stdlib)
  - kanban.core.store (BoardStore)
  - kanban.core.storage (default_storage)
  - kanban.core.colors (parse_color, random_color)
NOTES:
  - storage=None means the default on-disk storage
  - Import validates the whole file before replacing the board
"""

import logging
from pathlib import Path
from typing import Optional

from . import storage as storage_module
from .colors import Color, parse_color, random_color
from .exceptions import InvalidInputError
from .store import BoardStore

logger = logging.getLogger(__name__)


def open_store(storage=None) -> BoardStore:
    """
    Create a store holding the saved board, or the default board.

    Args:
        storage: Key-value storage (defaults to on-disk storage)

    Raises:
        ParseError: If the saved board is malformed
    """
    if storage is None:
        storage = storage_module.default_storage()
    store = BoardStore()
    store.load(storage)
    return store


def commit(store: BoardStore, storage=None) -> None:
    """Persist the store's board."""
    if storage is None:
        storage = storage_module.default_storage()
    store.save(storage)


def export_board(store: BoardStore, path: Path) -> None:
    """Write the serialized board to a file."""
    Path(path).write_text(store.serialize(), encoding="utf-8")
    logger.info("Exported board to %s", path)


def import_board(store: BoardStore, path: Path) -> None:
    """
    Replace the board with the contents of a file.

    Raises:
        InvalidInputError: If the file cannot be read
        ParseError: If the file is not a valid board
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Cannot read {path}: {e}")
    store.deserialize(text)
    logger.info("Imported board from %s", path)


def color_or_random(text: Optional[str]) -> Color:
    """Parse a color argument; no argument means a random palette color."""
    if text is None or not text.strip():
        return random_color()
    return parse_color(text)


__all__ = [
    "open_store",
    "commit",
    "export_board",
    "import_board",
    "parse_color",
    "color_or_random",
]
