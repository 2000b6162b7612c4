# src/todolist/tasks/task_file.py

"""
Flat-file persistence for the task list.

File format, one task per line:

    <flag> <description>

where <flag> is "0" or "1", followed by exactly one space and the raw description.
There is no header, no count and no escaping, so descriptions cannot contain newlines.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from .task_models import Task
from .task_store import TaskList

logger = logging.getLogger(__name__)

FLAG_DONE = "1"
FLAG_OPEN = "0"
SEPARATOR = " "

# Bytes that are not valid UTF-8 survive a load/save cycle unchanged.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


class PersistenceError(RuntimeError):
    """Reading or writing the backing file failed."""

    def __init__(self, action: str, path: Path, cause: OSError | UnicodeError) -> None:
        reason = getattr(cause, "strerror", None) or cause
        super().__init__(f"could not {action} {path}: {reason}")
        self.action = action
        self.path = path
        self.cause = cause


def format_line(task: Task) -> str:
    flag = FLAG_DONE if task.completed else FLAG_OPEN
    return f"{flag}{SEPARATOR}{task.description}"


def parse_line(line: str) -> Task | None:
    """
    Parse one line of the backing file.

    Lenient: any flag other than "1" reads as not completed.
    Returns None for lines that do not yield a non-empty description.
    """
    line = line.rstrip("\r\n")
    flag, sep, description = line.partition(SEPARATOR)
    if not sep or not description:
        return None
    return Task(description=description, completed=flag == FLAG_DONE)


def load_tasks(path: str | Path) -> TaskList:
    """Load tasks from `path`. A missing file is an empty list, not an error."""
    path = Path(path)
    tasks = TaskList()
    dropped = 0

    try:
        with path.open("r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as fh:
            for line in fh:
                task = parse_line(line)
                if task is None:
                    dropped += 1
                    continue
                tasks.add(task)
    except FileNotFoundError:
        logger.info("No task file at %s, starting with an empty list.", path)
        return TaskList()
    except (OSError, UnicodeError) as e:
        raise PersistenceError("read", path, e) from e

    if dropped:
        logger.debug("Dropped %d unparseable line(s) from %s", dropped, path)
    logger.info("Loaded %d task(s) from %s", len(tasks), path)
    return tasks


def _target_mode(path: Path) -> int:
    """Mode of the existing file, or what a plain open() would create under the current umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_tasks(tasks: TaskList, path: str | Path) -> None:
    """
    Write all tasks to `path`, replacing previous contents.

    The data goes to a temporary file in the same directory first and is then moved
    over the target, so a failed save never leaves a half-written task file behind.
    """
    path = Path(path)
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n") as fh:
            for task in tasks:
                fh.write(format_line(task) + "\n")
        # mkstemp creates the file 0600; keep the permissions the task file would otherwise have.
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, UnicodeError) as e:
        raise PersistenceError("write", path, e) from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.debug("Could not remove temporary file %s", tmp_name, exc_info=True)

    logger.info("Saved %d task(s) to %s", len(tasks), path)
