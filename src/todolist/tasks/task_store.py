# src/todolist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

from .task_models import Task

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskList:
    """
    Ordered in-memory task store.

    Insertion order is both display order and file order.
    All positional arguments are 1-based (as shown to the user); the command
    interpreter validates them before calling in, so an out-of-range index here
    is a programming error and raises IndexError.
    """

    tasks: list[Task] = field(default_factory=list)

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> TaskList:
        return cls(tasks=list(tasks))

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # ---- low-level helpers ----

    def _offset(self, index: int) -> int:
        # Guard against 0/negative values: list[-1] would silently hit the last task.
        if not 1 <= index <= len(self.tasks):
            raise IndexError(f"task number {index} out of range 1..{len(self.tasks)}")
        return index - 1

    # ---- public API ----

    def add(self, task: Task) -> int:
        """Append a task and return its 1-based position."""
        self.tasks.append(task)
        logger.debug("Task added pos=%d", len(self.tasks))
        return len(self.tasks)

    def update(self, index: int, description: str) -> None:
        self.tasks[self._offset(index)].description = description
        logger.debug("Task updated pos=%d", index)

    def toggle(self, index: int) -> bool:
        """Flip the completion flag and return the new value."""
        task = self.tasks[self._offset(index)]
        task.completed = not task.completed
        logger.debug("Task toggled pos=%d completed=%s", index, task.completed)
        return task.completed

    def delete(self, index: int) -> Task:
        """Remove the task at `index`; later tasks shift down by one position."""
        removed = self.tasks.pop(self._offset(index))
        logger.debug("Task deleted pos=%d remaining=%d", index, len(self.tasks))
        return removed

    def list_tasks(self) -> list[tuple[int, Task]]:
        """Read-only snapshot of (position, task) pairs for rendering."""
        return [(pos, replace(task)) for pos, task in enumerate(self.tasks, start=1)]
