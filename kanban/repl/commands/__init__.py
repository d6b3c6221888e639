"""
FILE: kanban/repl/commands/__init__.py
PURPOSE: REPL command handler modules
"""

# Export all command handlers for easy importing
from .tasks import (
    handle_add_command,
    handle_done_command,
    handle_edit_command,
    handle_color_command,
    handle_mv_command,
)
from .columns import (
    handle_col_command,
)
from .system import (
    handle_show_command,
    handle_save_command,
    handle_load_command,
    handle_help_command,
    handle_clear_command,
)

__all__ = [
    "handle_add_command",
    "handle_done_command",
    "handle_edit_command",
    "handle_color_command",
    "handle_mv_command",
    "handle_col_command",
    "handle_show_command",
    "handle_save_command",
    "handle_load_command",
    "handle_help_command",
    "handle_clear_command",
]
