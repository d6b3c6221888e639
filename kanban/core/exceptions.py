"""
FILE: kanban/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - KanbanError (base exception)
  - ParseError
  - ColumnNotFoundError
  - TaskNotFoundError
  - InvalidInputError
  - StorageError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from KanbanError for easy catching
  - Index errors also inherit from IndexError
  - Store raises these, UI layers catch and display
"""


class KanbanError(Exception):
    """Base exception for all kanban errors."""
    pass


class ParseError(KanbanError):
    """Persisted board text could not be decoded."""

    def __init__(self, message: str):
        super().__init__(f"Invalid board data: {message}")


class ColumnNotFoundError(KanbanError, IndexError):
    """Column index is out of range."""

    def __init__(self, column_index: int):
        self.column_index = column_index
        super().__init__(f"Column {column_index} not found")


class TaskNotFoundError(KanbanError, IndexError):
    """Task index is out of range within its column."""

    def __init__(self, column_index: int, task_index: int):
        self.column_index = column_index
        self.task_index = task_index
        super().__init__(f"Task {task_index} not found in column {column_index}")


class InvalidInputError(KanbanError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)


class StorageError(KanbanError):
    """Key-value storage could not be read."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")
