"""
FILE: kanban/core/store.py
PURPOSE: Single source of truth for board state and its mutations
EXPORTS:
  - BoardStore (class)
  - Observer (callback type)
DEPENDENCIES:
  - threading (re-entrant lock)
  - logging (stdlib)
  - kanban.core.models (Board, Column, Task, BoardSnapshot)
  - kanban.core.exceptions (ColumnNotFoundError, TaskNotFoundError)
NOTES:
  - All addressing is positional (0-based); negative indices are invalid
  - The board always keeps at least one column
  - Every effective mutation publishes a BoardSnapshot to observers
  - No-op calls (last-column remove, same-column move) publish nothing
  - Every operation is all-or-nothing
"""

import logging
import threading
from typing import Callable, List, Optional

from .colors import Color
from .constants import STORAGE_NAMESPACE, STATE_KEY
from .exceptions import ColumnNotFoundError, TaskNotFoundError
from .models import Board, BoardSnapshot, Column, Task

logger = logging.getLogger(__name__)

Observer = Callable[[BoardSnapshot], None]


class BoardStore:
    """
    Owns the in-memory Board and applies every mutation to it.

    Access is serialized with a re-entrant lock, so an observer may call
    back into the store while it is being notified.
    """

    def __init__(self, board: Optional[Board] = None):
        self._board = board if board is not None else Board.default()
        if not self._board.columns:
            self._board.columns.append(Column())
        self._observers: List[Observer] = []
        self._lock = threading.RLock()

    # --- Observers ---

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register an observer for board snapshots.

        Returns:
            Callable that removes the observer again
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def snapshot(self) -> BoardSnapshot:
        with self._lock:
            return self._board.snapshot()

    def _publish(self) -> None:
        snapshot = self._board.snapshot()
        for observer in list(self._observers):
            observer(snapshot)

    # --- Lookups ---

    @property
    def column_count(self) -> int:
        return len(self._board.columns)

    def task_count(self, column_index: int) -> int:
        with self._lock:
            return len(self._column(column_index).tasks)

    def _column(self, index: int) -> Column:
        if not 0 <= index < len(self._board.columns):
            raise ColumnNotFoundError(index)
        return self._board.columns[index]

    def _task(self, column_index: int, task_index: int) -> Task:
        column = self._column(column_index)
        if not 0 <= task_index < len(column.tasks):
            raise TaskNotFoundError(column_index, task_index)
        return column.tasks[task_index]

    # --- Column operations ---

    def add_column(self) -> int:
        """Append a default column. Returns its index."""
        with self._lock:
            self._board.columns.append(Column())
            index = len(self._board.columns) - 1
            logger.debug("Added column %d", index)
            self._publish()
            return index

    def remove_column(self, index: int) -> bool:
        """
        Remove the column at index, unless it is the last one.

        Returns:
            True if removed, False if the board has a single column

        Raises:
            ColumnNotFoundError: If index is out of range
        """
        with self._lock:
            self._column(index)
            if len(self._board.columns) <= 1:
                logger.debug("Refused to remove the last column")
                return False
            del self._board.columns[index]
            logger.debug("Removed column %d", index)
            self._publish()
            return True

    def rename_column(self, index: int, new_name: str) -> None:
        with self._lock:
            self._column(index).name = new_name
            self._publish()

    def recolor_column(self, index: int, color: Color) -> None:
        with self._lock:
            self._column(index).color = color
            self._publish()

    # --- Task operations ---

    def add_task(self, column_index: int, title: Optional[str] = None) -> int:
        """
        Append a new task (not done, default color) to a column.

        Args:
            column_index: Column to append to
            title: Task title (defaults to "New task")

        Returns:
            Index of the new task
        """
        with self._lock:
            tasks = self._column(column_index).tasks
            tasks.append(Task() if title is None else Task(title=title))
            logger.debug("Added task to column %d", column_index)
            self._publish()
            return len(tasks) - 1

    def toggle_task(self, column_index: int, task_index: int) -> bool:
        """Flip a task's done flag. Returns the new value."""
        with self._lock:
            task = self._task(column_index, task_index)
            task.done = not task.done
            self._publish()
            return task.done

    def rename_task(self, column_index: int, task_index: int, new_title: str) -> None:
        with self._lock:
            self._task(column_index, task_index).title = new_title
            self._publish()

    def recolor_task(self, column_index: int, task_index: int, color: Color) -> None:
        with self._lock:
            self._task(column_index, task_index).color = color
            self._publish()

    def move_task(self, from_column: int, from_index: int, to_column: int) -> bool:
        """
        Move a task to the end of another column.

        Args:
            from_column: Source column index
            from_index: Task index within the source column
            to_column: Destination column index

        Returns:
            True if moved; False (nothing changed) when the destination
            is the source column or is not a valid column index

        Raises:
            ColumnNotFoundError / TaskNotFoundError: If the source is invalid

        Notes:
            - The destination is checked before anything is removed
        """
        with self._lock:
            if from_column == to_column or not 0 <= to_column < len(self._board.columns):
                return False
            self._task(from_column, from_index)
            task = self._board.columns[from_column].tasks.pop(from_index)
            self._board.columns[to_column].tasks.append(task)
            logger.debug(
                "Moved task %d from column %d to column %d",
                from_index, from_column, to_column,
            )
            self._publish()
            return True

    # --- Serialization ---

    def serialize(self) -> str:
        """Encode the whole board as JSON text."""
        with self._lock:
            return self._board.to_json()

    def deserialize(self, text: str) -> None:
        """
        Replace the board with one decoded from text.

        Raises:
            ParseError: If text is malformed (board is left unchanged)

        Notes:
            - An empty column array is repaired to a single default column
        """
        board = Board.from_json(text)
        if not board.columns:
            logger.warning("Loaded board has no columns; adding a default column")
            board.columns.append(Column())
        with self._lock:
            self._board = board
            self._publish()

    # --- Persistence ---

    def save(self, storage) -> None:
        """Write the serialized board to storage, replacing any previous save."""
        with self._lock:
            text = self.serialize()
            storage.put(STORAGE_NAMESPACE, STATE_KEY, text)
            logger.info("Saved board with %d columns", len(self._board.columns))

    def load(self, storage) -> bool:
        """
        Replace the board with the saved one, if any.

        Returns:
            True if a saved board was loaded, False if nothing was saved

        Raises:
            ParseError: If the saved text is malformed
        """
        text = storage.get(STORAGE_NAMESPACE, STATE_KEY)
        if text is None:
            logger.info("No saved board found")
            return False
        self.deserialize(text)
        logger.info("Loaded board with %d columns", self.column_count)
        return True
