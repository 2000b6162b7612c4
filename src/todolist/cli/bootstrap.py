# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- resolves the backing file and terminal colour switch,
- loads the task list into AppState and saves it back on shutdown.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..config import get_settings, use_color
from ..core.state import AppState
from ..tasks.task_file import load_tasks, save_tasks

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load the task list.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    Raises PersistenceError when an existing task file cannot be read.
    """
    if settings is None:
        settings = get_settings()

    tasks_path = Path(settings.tasks_path)
    tasks = load_tasks(tasks_path)

    state = AppState(
        settings=settings,
        tasks=tasks,
        tasks_path=tasks_path,
        color=use_color(settings),
    )
    logger.debug("State ready tasks=%d file=%s color=%s", len(tasks), tasks_path, state.color)
    return state


def save_state(state: AppState, emit: Callable[[str], None] | None = None) -> None:
    """Persist the task list. PersistenceError propagates to the caller."""
    if emit is not None:
        emit(f"Saving TODO items to: {state.tasks_path}")
    save_tasks(state.tasks, state.tasks_path)
