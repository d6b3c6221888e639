"""
FILE: kanban/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - DEFAULT_COLUMNS: Column names of a fresh board
  - DEFAULT_COLUMN_NAME / DEFAULT_TASK_TITLE: Labels for new items
  - DEFAULT_COLUMN_COLOR / DEFAULT_TASK_COLOR: Hex colors for new items
  - NAMED_COLORS: Palette accepted by color inputs
  - RANDOM_PALETTE: Palette names used by random_color()
  - STORAGE_NAMESPACE / STATE_KEY: Slot the board is saved under
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Centralized constants to avoid magic strings
  - Colors are stored as hex here and parsed by kanban.core.colors
"""

# Board defaults
DEFAULT_COLUMNS = ("To Do", "In Progress", "Done")
DEFAULT_COLUMN_NAME = "New column"
DEFAULT_TASK_TITLE = "New task"

# Named palette (uppercase hex, no alpha)
NAMED_COLORS = {
    "white": "#FFFFFF",
    "black": "#000000",
    "lightgray": "#CCCCCC",
    "gray": "#888888",
    "darkgray": "#444444",
    "red": "#FF0000",
    "green": "#00FF00",
    "blue": "#0000FF",
    "yellow": "#FFFF00",
    "cyan": "#00FFFF",
    "magenta": "#FF00FF",
}

DEFAULT_COLUMN_COLOR = NAMED_COLORS["lightgray"]
DEFAULT_TASK_COLOR = NAMED_COLORS["white"]

# Colors handed out by the "pick a color for me" action
RANDOM_PALETTE = ("yellow", "green", "cyan", "magenta", "red", "gray", "lightgray")

# Persistence slot
STORAGE_NAMESPACE = "kanban"
STATE_KEY = "state"

# JSON field names of the persisted format
FIELD_NAME = "name"
FIELD_COLOR = "color"
FIELD_TASKS = "tasks"
FIELD_TITLE = "title"
FIELD_DONE = "isDone"
