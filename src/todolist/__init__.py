"""
Interactive command-line todo list.

Components:
- tasks/: task model, in-memory TaskList and the flat-file persistence
- cli/: command interpreter, bootstrap (composition root) and entry point
- connectors/: terminal I/O and the interactive read-eval-print loop
"""

__version__ = "0.1.0"
