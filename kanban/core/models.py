"""
FILE: kanban/core/models.py
PURPOSE: Domain models for the board, its columns and tasks
EXPORTS:
  - Task (dataclass)
  - Column (dataclass)
  - Board (dataclass)
  - TaskSnapshot, ColumnSnapshot, BoardSnapshot (frozen dataclasses)
DEPENDENCIES:
  - dataclasses (stdlib)
  - json (stdlib)
  - typing (stdlib)
  - kanban.core.colors (Color)
NOTES:
  - All models have from_dict() for persisted data conversion
  - All models have to_dict(); Board also has to_json()
  - from_dict() raises ParseError on any structural problem
  - Snapshots hold tuples so observers cannot mutate the board
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
import json

from .colors import Color
from .constants import (
    DEFAULT_COLUMNS,
    DEFAULT_COLUMN_NAME,
    DEFAULT_TASK_TITLE,
    DEFAULT_COLUMN_COLOR,
    DEFAULT_TASK_COLOR,
    FIELD_NAME,
    FIELD_COLOR,
    FIELD_TASKS,
    FIELD_TITLE,
    FIELD_DONE,
)
from .exceptions import ParseError


def _require(data: Dict[str, Any], key: str, kind: type, where: str):
    """Fetch a required field of an exact JSON type."""
    if key not in data:
        raise ParseError(f"{where} is missing '{key}'")
    value = data[key]
    # bool is an int subclass; compare types exactly
    if type(value) is not kind:
        raise ParseError(f"{where} field '{key}' must be {kind.__name__}")
    return value


@dataclass(frozen=True)
class TaskSnapshot:
    title: str
    done: bool
    color: Color


@dataclass(frozen=True)
class ColumnSnapshot:
    name: str
    color: Color
    tasks: Tuple[TaskSnapshot, ...] = ()


@dataclass(frozen=True)
class BoardSnapshot:
    """Immutable point-in-time copy of a Board handed to observers."""

    columns: Tuple[ColumnSnapshot, ...] = ()

    def to_dict(self) -> List[Dict[str, Any]]:
        return [
            {
                FIELD_NAME: column.name,
                FIELD_COLOR: column.color.to_hex(),
                FIELD_TASKS: [
                    {
                        FIELD_TITLE: task.title,
                        FIELD_DONE: task.done,
                        FIELD_COLOR: task.color.to_hex(),
                    }
                    for task in column.tasks
                ],
            }
            for column in self.columns
        ]


@dataclass
class Task:
    """A titled, colored, completable unit of work."""

    title: str = DEFAULT_TASK_TITLE
    done: bool = False
    color: Color = field(default_factory=lambda: Color.from_hex(DEFAULT_TASK_COLOR))

    @classmethod
    def from_dict(cls, data: Any, where: str = "task") -> "Task":
        """Convert a persisted task object to Task."""
        if not isinstance(data, dict):
            raise ParseError(f"{where} must be an object")
        return cls(
            title=_require(data, FIELD_TITLE, str, where),
            done=_require(data, FIELD_DONE, bool, where),
            color=Color.from_hex(_require(data, FIELD_COLOR, str, where)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            FIELD_TITLE: self.title,
            FIELD_DONE: self.done,
            FIELD_COLOR: self.color.to_hex(),
        }

    def snapshot(self) -> TaskSnapshot:
        return TaskSnapshot(self.title, self.done, self.color)


@dataclass
class Column:
    """A named, colored, ordered list of tasks."""

    name: str = DEFAULT_COLUMN_NAME
    color: Color = field(default_factory=lambda: Color.from_hex(DEFAULT_COLUMN_COLOR))
    tasks: List[Task] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, where: str = "column") -> "Column":
        """Convert a persisted column object to Column."""
        if not isinstance(data, dict):
            raise ParseError(f"{where} must be an object")
        raw_tasks = _require(data, FIELD_TASKS, list, where)
        return cls(
            name=_require(data, FIELD_NAME, str, where),
            color=Color.from_hex(_require(data, FIELD_COLOR, str, where)),
            tasks=[
                Task.from_dict(raw, f"{where} task {i}")
                for i, raw in enumerate(raw_tasks)
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            FIELD_NAME: self.name,
            FIELD_COLOR: self.color.to_hex(),
            FIELD_TASKS: [task.to_dict() for task in self.tasks],
        }

    def snapshot(self) -> ColumnSnapshot:
        return ColumnSnapshot(
            self.name, self.color, tuple(task.snapshot() for task in self.tasks)
        )


@dataclass
class Board:
    """The full kanban state: ordered columns of ordered tasks."""

    columns: List[Column] = field(default_factory=list)

    @classmethod
    def default(cls) -> "Board":
        """Fresh board with the standard three columns."""
        return cls(columns=[Column(name=name) for name in DEFAULT_COLUMNS])

    @classmethod
    def from_dict(cls, data: Any) -> "Board":
        """
        Convert the persisted top-level array to Board.

        Raises:
            ParseError: If data is not a list of valid column objects
        """
        if not isinstance(data, list):
            raise ParseError("top level must be an array of columns")
        return cls(
            columns=[Column.from_dict(raw, f"column {i}") for i, raw in enumerate(data)]
        )

    @classmethod
    def from_json(cls, text: str) -> "Board":
        """Decode JSON text to Board, raising ParseError on any failure."""
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise ParseError(str(e))
        except RecursionError:
            raise ParseError("nesting too deep")
        return cls.from_dict(data)

    def to_dict(self) -> List[Dict[str, Any]]:
        return [column.to_dict() for column in self.columns]

    def to_json(self) -> str:
        """Serialize board to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(tuple(column.snapshot() for column in self.columns))
