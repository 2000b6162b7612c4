# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command interpreter.

Handlers talk to a ConsoleIO instead of stdin/stdout directly,
so tests can feed scripted input and capture output.
"""

from typing import Protocol


class ConsoleIO(Protocol):
    """Line-oriented console: one prompt, one line back."""

    def read_line(self, prompt: str) -> str:
        """Show `prompt` and return the next line without its newline. Raises EOFError."""
        ...

    def emit(self, text: str) -> None:
        """Write `text` followed by a newline."""
        ...
