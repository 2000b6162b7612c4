# src/todolist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from ..core.ports import ConsoleIO
from ..core.state import AppState
from ..tasks.task_file import PersistenceError
from ..tasks.task_models import Task
from ..tasks.task_store import TaskList
from .bootstrap import save_state

logger = logging.getLogger(__name__)

BOLD = "\033[1m"
STRIKEOUT = "\033[9m"
BLUE = "\033[34m"
RESET = "\033[0m"

CHECKBOX_DONE = "✅"
CHECKBOX_OPEN = "  "

TASK_NUMBER_PROMPT = "Task number: "
DESCRIPTION_PROMPT = "Task description: "


class Command(StrEnum):
    HELP = "help"
    ADD = "add"
    UPDATE = "update"
    TOGGLE = "toggle"
    DELETE = "delete"
    LIST = "list"
    SAVE = "save"
    QUIT = "quit"
    INVALID = "invalid"

    @property
    def short(self) -> str:
        return self.value[0]


def parse_command(text: str) -> Command:
    """
    Map one input line to a Command.

    Case-sensitive, whole-line match against the full word or its first letter.
    """
    for cmd in Command:
        if cmd is Command.INVALID:
            continue
        if text == cmd.value or text == cmd.short:
            return cmd
    return Command.INVALID


CommandHandler = Callable[[AppState, ConsoleIO], str | None]


class CommandRegistry:
    """Maps commands to handlers and keeps their one-line help."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}
        self._help: dict[Command, str] = {}

    def register(self, command: Command, handler: CommandHandler, help_text: str) -> None:
        self._handlers[command] = handler
        self._help[command] = help_text

    def handle(self, state: AppState, io: ConsoleIO, line: str) -> Command:
        """
        Parse `line`, run the matching handler and emit its reply.
        Returns the parsed command so the caller can stop on QUIT.
        """
        command = parse_command(line)
        handler = self._handlers.get(command)
        if handler is None:
            handler = self._handlers[Command.INVALID]

        reply = handler(state, io)
        if reply is not None:
            io.emit(reply)
        return command

    def build_help(self) -> str:
        lines = ["Available commands:", ""]
        for command, help_text in self._help.items():
            if command is Command.INVALID:
                continue
            label = f"({command.short}){command.value[1:]}"
            lines.append(f" {label:<10} - {help_text}")
        lines.append("")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- prompts ----


def parse_task_number(raw: str) -> int:
    """Plain ASCII digits with an optional leading minus. Rejects "1_0", "+3" and non-ASCII digits."""
    text = raw.strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"{raw!r} is not a whole number.")
    return int(text)


def request_task_number(io: ConsoleIO, task_count: int) -> int:
    """
    Ask for a 1-based task number until a valid one is entered.

    There is no cancel keyword; end of input raises EOFError out of here.
    """
    while True:
        raw = io.read_line(TASK_NUMBER_PROMPT)
        try:
            number = parse_task_number(raw)
        except ValueError as e:
            io.emit(f"Invalid input. {e} Please try again.")
            continue

        if 1 <= number <= task_count:
            return number

        io.emit("Invalid input. Please try again.")


def request_description(io: ConsoleIO) -> str:
    return io.read_line(DESCRIPTION_PROMPT)


# ---- rendering ----


def format_task(position: int, task: Task, *, color: bool = False) -> str:
    checkbox = CHECKBOX_DONE if task.completed else CHECKBOX_OPEN
    description = task.description
    if task.completed and color:
        description = f"{STRIKEOUT}{description}{RESET}"
    return f"{position}. {checkbox} {description}"


def format_task_list(tasks: TaskList, *, color: bool = False) -> str:
    lines = [f"{len(tasks)} tasks:", "=" * 24, ""]
    for position, task in tasks.list_tasks():
        lines.append(format_task(position, task, color=color))
    lines.append("")
    return "\n".join(lines)


def command_prompt(*, color: bool = False) -> str:
    text = "Command (type help for showing help): "
    if color:
        return f"{BOLD}{BLUE}{text}{RESET}"
    return text


# ---- handlers ----


def _pick_task(state: AppState, io: ConsoleIO) -> int | None:
    if not len(state.tasks):
        io.emit("No tasks yet. Use (a)dd to create one.")
        return None
    return request_task_number(io, len(state.tasks))


def cmd_help(state: AppState, io: ConsoleIO) -> str:
    return registry.build_help()


def cmd_add(state: AppState, io: ConsoleIO) -> None:
    description = request_description(io)
    state.tasks.add(Task(description=description))


def cmd_update(state: AppState, io: ConsoleIO) -> None:
    number = _pick_task(state, io)
    if number is not None:
        state.tasks.update(number, request_description(io))
    return None


def cmd_toggle(state: AppState, io: ConsoleIO) -> None:
    number = _pick_task(state, io)
    if number is not None:
        state.tasks.toggle(number)
    return None


def cmd_delete(state: AppState, io: ConsoleIO) -> None:
    number = _pick_task(state, io)
    if number is not None:
        state.tasks.delete(number)
    return None


def cmd_list(state: AppState, io: ConsoleIO) -> str:
    return format_task_list(state.tasks, color=state.color)


def cmd_save(state: AppState, io: ConsoleIO) -> str | None:
    try:
        save_state(state, emit=io.emit)
    except PersistenceError as e:
        logger.error("Save failed: %s", e)
        return f"Persistence failure: {e}"
    return None


def cmd_quit(state: AppState, io: ConsoleIO) -> str:
    return "Quitting. I'm done!"


def cmd_invalid(state: AppState, io: ConsoleIO) -> str:
    return "Invalid input! Please type help for getting list of commands."


registry.register(Command.HELP, cmd_help, help_text="prints this help")
registry.register(Command.ADD, cmd_add, help_text="adds a new task")
registry.register(Command.UPDATE, cmd_update, help_text="updates an existing task")
registry.register(
    Command.TOGGLE, cmd_toggle, help_text="toggles the completion state of a task"
)
registry.register(Command.DELETE, cmd_delete, help_text="delete a task")
registry.register(Command.LIST, cmd_list, help_text="lists all tasks")
registry.register(
    Command.SAVE,
    cmd_save,
    help_text="saves the task list to disk (automatic save at program exit, too)",
)
registry.register(Command.QUIT, cmd_quit, help_text="quits this program")
registry.register(Command.INVALID, cmd_invalid, help_text="")
