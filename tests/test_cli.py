"""
Test suite for the one-shot CLI

Each command loads the saved board, applies one change and saves it.
"""

import json

import pytest
from typer.testing import CliRunner

from kanban.cli.main import app
from kanban.core import storage


runner = CliRunner()


# Every test gets its own storage directory
pytestmark = pytest.mark.usefixtures("temp_storage_dir")


def saved_board():
    """Board as currently saved on disk."""
    result = runner.invoke(app, ["show", "--json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_show_default_board():
    result = runner.invoke(app, ["show", "--raw"])

    assert result.exit_code == 0
    assert "To Do" in result.output
    assert "In Progress" in result.output
    assert "Done" in result.output


def test_add_task_is_saved():
    result = runner.invoke(app, ["add", "0", "Write docs"])

    assert result.exit_code == 0, result.output
    board = saved_board()
    assert board[0]["tasks"] == [{"title": "Write docs", "isDone": False, "color": "#FFFFFF"}]


def test_add_task_default_title():
    runner.invoke(app, ["add", "1"])

    assert saved_board()[1]["tasks"][0]["title"] == "New task"


def test_done_toggles():
    runner.invoke(app, ["add", "0"])
    result = runner.invoke(app, ["done", "0", "0", "--raw"])

    assert result.exit_code == 0
    assert "done" in result.output
    assert saved_board()[0]["tasks"][0]["isDone"] is True

    runner.invoke(app, ["done", "0", "0"])
    assert saved_board()[0]["tasks"][0]["isDone"] is False


def test_edit_and_color_task():
    runner.invoke(app, ["add", "0"])
    runner.invoke(app, ["edit", "0", "0", "Renamed"])
    result = runner.invoke(app, ["color", "0", "0", "yellow"])

    assert result.exit_code == 0
    task = saved_board()[0]["tasks"][0]
    assert task["title"] == "Renamed"
    assert task["color"] == "#FFFF00"


def test_color_without_value_picks_palette_color():
    runner.invoke(app, ["add", "0"])
    result = runner.invoke(app, ["color", "0", "0", "--raw"])

    assert result.exit_code == 0
    assert saved_board()[0]["tasks"][0]["color"] != ""


def test_bad_color_is_error():
    runner.invoke(app, ["add", "0"])
    result = runner.invoke(app, ["color", "0", "0", "not-a-color"])

    assert result.exit_code == 1
    assert "Invalid color" in result.output
    assert saved_board()[0]["tasks"][0]["color"] == "#FFFFFF"


def test_mv_moves_task():
    runner.invoke(app, ["add", "0", "Moving"])
    result = runner.invoke(app, ["mv", "0", "0", "2"])

    assert result.exit_code == 0
    board = saved_board()
    assert board[0]["tasks"] == []
    assert board[2]["tasks"][0]["title"] == "Moving"


def test_mv_same_column_is_noop():
    runner.invoke(app, ["add", "0", "Staying"])
    result = runner.invoke(app, ["mv", "0", "0", "0"])

    assert result.exit_code == 0
    assert "Nothing moved" in result.output
    assert saved_board()[0]["tasks"][0]["title"] == "Staying"


def test_missing_task_is_error_and_not_saved(temp_storage_dir):
    result = runner.invoke(app, ["done", "0", "3"])

    assert result.exit_code == 1
    assert "Task 3 not found in column 0" in result.output
    assert not (temp_storage_dir / "kanban.json").exists()


def test_column_commands():
    runner.invoke(app, ["col-add"])
    runner.invoke(app, ["col-rename", "3", "Review"])
    runner.invoke(app, ["col-color", "3", "#123456"])
    runner.invoke(app, ["col-rm", "0"])

    board = saved_board()
    assert [c["name"] for c in board] == ["In Progress", "Done", "Review"]
    assert board[2]["color"] == "#123456"


def test_col_rm_keeps_last_column():
    runner.invoke(app, ["col-rm", "0"])
    runner.invoke(app, ["col-rm", "0"])
    result = runner.invoke(app, ["col-rm", "0"])

    assert result.exit_code == 0
    assert "Kept the last column" in result.output
    assert [c["name"] for c in saved_board()] == ["Done"]


def test_col_rm_out_of_range():
    result = runner.invoke(app, ["col-rm", "9"])

    assert result.exit_code == 1
    assert "Column 9 not found" in result.output


def test_export_then_import(tmp_path):
    runner.invoke(app, ["add", "0", "Exported task"])
    path = tmp_path / "board.json"

    result = runner.invoke(app, ["export", str(path)])
    assert result.exit_code == 0
    assert json.loads(path.read_text(encoding="utf-8"))[0]["tasks"][0]["title"] == "Exported task"

    runner.invoke(app, ["col-rm", "0"])
    result = runner.invoke(app, ["import", str(path)])

    assert result.exit_code == 0
    assert saved_board()[0]["tasks"][0]["title"] == "Exported task"


def test_import_malformed_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("not json", encoding="utf-8")

    result = runner.invoke(app, ["import", str(path)])

    assert result.exit_code == 1
    assert "Invalid board data" in result.output
    assert len(saved_board()) == 3


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "kanban v" in result.output


def test_export_does_not_save_board(temp_storage_dir, tmp_path):
    path = tmp_path / "board.json"
    result = runner.invoke(app, ["export", str(path)])

    assert result.exit_code == 0, result.output
    assert len(json.loads(path.read_text(encoding="utf-8"))) == 3
    assert not (temp_storage_dir / "kanban.json").exists()


def test_commands_work_when_log_directory_is_unwritable(monkeypatch, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.setattr(storage, "STORAGE_DIR", blocker / "kanban_home")

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0, result.output
    assert "kanban v" in result.output
