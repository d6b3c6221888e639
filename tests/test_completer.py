"""Quick test of completer functionality."""

# Path setup handled by conftest.py
from kanban.repl.completer import create_completer
from prompt_toolkit.document import Document


def complete(text: str):
    completer = create_completer()
    doc = Document(text, cursor_position=len(text))
    return [c.text for c in completer.get_completions(doc, None)]


def test_command_completion():
    """Test that commands are suggested at the start of the line."""
    assert "mv" in complete("m")
    assert "save" in complete("SA")
    assert set(complete("")) >= {"add", "done", "col", "load", "exit"}


def test_col_subcommand_completion():
    """Test that column subcommands are suggested after 'col'."""
    assert complete("col ") == ["add", "rm", "rename", "color"]
    assert complete("col re") == ["rename"]


def test_color_name_completion():
    """Test that palette names are suggested where a color is expected."""
    assert "cyan" in complete("color 0 1 ")
    assert complete("color 0 1 ma") == ["magenta"]
    assert complete("col color 2 light") == ["lightgray"]


def test_no_color_names_before_color_position():
    assert complete("color 0 ") == []
    assert complete("col rename 1 ") == []


def test_flag_completion():
    assert complete("show --") == ["--raw"]
    assert complete("add 0 --") == []
