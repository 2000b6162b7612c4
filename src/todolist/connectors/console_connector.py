# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import Command, command_prompt
from ..cli.commands import registry as command_registry
from ..core.ports import ConsoleIO
from ..core.state import AppState

logger = logging.getLogger(__name__)


class TerminalIO:
    """ConsoleIO over the process stdin/stdout."""

    def read_line(self, prompt: str) -> str:
        # input() raises EOFError at end of input; the loop treats it as quit.
        return input(prompt)

    def emit(self, text: str) -> None:
        print(text, flush=True)


def run_console_loop(state: AppState, io: ConsoleIO | None = None) -> None:
    """
    Read-eval-print loop: print help once, then dispatch commands until quit.

    End of input and Ctrl+C count as quit. The caller saves the list afterwards.
    """
    io = io or TerminalIO()
    logger.info("Console loop started (tasks=%d, file=%s).", len(state.tasks), state.tasks_path)
    io.emit(command_registry.build_help())

    prompt = command_prompt(color=state.color)

    while True:
        try:
            line = io.read_line(prompt)
            command = command_registry.handle(state, io, line)
        except (EOFError, KeyboardInterrupt) as e:
            logger.info("Console %s received, exiting.", type(e).__name__)
            io.emit("")
            command_registry.handle(state, io, Command.QUIT.value)
            break
        except Exception:
            logger.exception("Command handler crashed.")
            io.emit("Internal error while handling a command.")
            continue

        if command is Command.QUIT:
            logger.info("Console quit command received.")
            break

    logger.info("Console loop finished.")
