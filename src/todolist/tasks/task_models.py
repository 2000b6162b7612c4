# src/todolist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    """
    A single todo item.

    A task has no identity of its own: it is addressed by its position in the TaskList.
    """

    description: str
    completed: bool = False
