"""Shared pytest configuration and fixtures for tests."""

import sys
import io
from pathlib import Path

import pytest

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from kanban.core import storage


@pytest.fixture
def temp_storage_dir(monkeypatch, tmp_path):
    """Point on-disk storage (and the log file) at a temporary directory."""
    data_dir = tmp_path / "kanban_home"
    monkeypatch.setattr(storage, "STORAGE_DIR", data_dir)
    yield data_dir
