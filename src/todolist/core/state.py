# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..tasks.task_store import TaskList


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: object

    tasks: TaskList
    tasks_path: Path
    color: bool = False
