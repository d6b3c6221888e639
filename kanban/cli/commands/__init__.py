"""
FILE: kanban/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .tasks import (
    add,
    done,
    edit,
    color,
    mv,
)
from .columns import (
    col_add,
    col_rm,
    col_rename,
    col_color,
)
from .system import (
    show,
    version,
    repl,
    export,
    import_,
)

__all__ = [
    "add",
    "done",
    "edit",
    "color",
    "mv",
    "col_add",
    "col_rm",
    "col_rename",
    "col_color",
    "show",
    "version",
    "repl",
    "export",
    "import_",
]
