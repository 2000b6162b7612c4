# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todolist.cli.bootstrap import create_initial_state
from todolist.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than the real Settings,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="todolist-test",
        log_level="WARNING",
        # Paths (tmp per test run)
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "todos.txt",
        # Plain output unless a test opts in
        color=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState loaded from the (initially missing) tmp task file."""
    return create_initial_state(settings=settings)
