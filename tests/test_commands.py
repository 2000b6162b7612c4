# tests/test_commands.py

from __future__ import annotations

import pytest

from todolist.cli.commands import (
    CHECKBOX_DONE,
    RESET,
    STRIKEOUT,
    Command,
    CommandRegistry,
    format_task,
    format_task_list,
    parse_command,
    parse_task_number,
    registry,
    request_task_number,
)
from todolist.tasks.task_models import Task
from todolist.tasks.task_store import TaskList

from .fakes import ScriptedConsole


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("h", Command.HELP),
        ("help", Command.HELP),
        ("a", Command.ADD),
        ("add", Command.ADD),
        ("u", Command.UPDATE),
        ("update", Command.UPDATE),
        ("t", Command.TOGGLE),
        ("toggle", Command.TOGGLE),
        ("d", Command.DELETE),
        ("delete", Command.DELETE),
        ("l", Command.LIST),
        ("list", Command.LIST),
        ("s", Command.SAVE),
        ("save", Command.SAVE),
        ("q", Command.QUIT),
        ("quit", Command.QUIT),
    ],
)
def test_parse_command_short_and_full_forms(text: str, expected: Command) -> None:
    assert parse_command(text) is expected


@pytest.mark.parametrize("text", ["", "H", "Quit", " a", "a ", "ad", "invalid", "i", "x", "/help"])
def test_parse_command_is_exact_and_case_sensitive(text: str) -> None:
    assert parse_command(text) is Command.INVALID


def test_request_task_number_accepts_in_range_value() -> None:
    io = ScriptedConsole(["2"])
    assert request_task_number(io, 3) == 2
    assert io.prompts == ["Task number: "]
    assert io.output == []


def test_request_task_number_reprompts_until_valid() -> None:
    io = ScriptedConsole(["0", "4", "abc", "", "-1", "3"])

    assert request_task_number(io, 3) == 3

    assert len(io.prompts) == 6
    assert io.output[0] == "Invalid input. Please try again."
    assert io.output[1] == "Invalid input. Please try again."
    # parse failures carry the reason
    assert io.output[2] == "Invalid input. 'abc' is not a whole number. Please try again."
    assert io.output[3] == "Invalid input. '' is not a whole number. Please try again."
    assert io.output[4] == "Invalid input. Please try again."


@pytest.mark.parametrize("count", [1, 5])
def test_request_task_number_accepts_bounds(count: int) -> None:
    assert request_task_number(ScriptedConsole(["1"]), count) == 1
    assert request_task_number(ScriptedConsole([str(count)]), count) == count


@pytest.mark.parametrize("raw", ["1_0", "+3", "\u0663", "1.0", "0x1", "--1", "- 1"])
def test_parse_task_number_rejects_loose_integer_forms(raw: str) -> None:
    with pytest.raises(ValueError, match="not a whole number"):
        parse_task_number(raw)


def test_parse_task_number_accepts_plain_digits() -> None:
    assert parse_task_number("7") == 7
    assert parse_task_number(" 12 ") == 12
    assert parse_task_number("-1") == -1


def test_request_task_number_does_not_read_underscored_digits() -> None:
    io = ScriptedConsole(["1_0", "1"])

    assert request_task_number(io, 10) == 1
    assert io.output == ["Invalid input. '1_0' is not a whole number. Please try again."]


def test_request_task_number_propagates_eof() -> None:
    io = ScriptedConsole(["nope"])
    with pytest.raises(EOFError):
        request_task_number(io, 2)


def test_format_task_checkbox_and_strikeout() -> None:
    assert format_task(1, Task("Buy milk")) == "1.    Buy milk"
    assert format_task(2, Task("Walk dog", completed=True)) == f"2. {CHECKBOX_DONE} Walk dog"
    assert (
        format_task(2, Task("Walk dog", completed=True), color=True)
        == f"2. {CHECKBOX_DONE} {STRIKEOUT}Walk dog{RESET}"
    )
    # open tasks are never struck through
    assert STRIKEOUT not in format_task(1, Task("Buy milk"), color=True)


def test_format_task_list_header_and_rows() -> None:
    tasks = TaskList.from_tasks([Task("Buy milk"), Task("Walk dog")])
    lines = format_task_list(tasks).split("\n")

    assert lines[0] == "2 tasks:"
    assert set(lines[1]) == {"="}
    assert lines[2] == ""
    assert lines[3:5] == ["1.    Buy milk", "2.    Walk dog"]


def test_help_lists_every_command() -> None:
    text = registry.build_help()

    assert text.startswith("Available commands:")
    assert " (h)elp     - prints this help" in text
    assert " (u)pdate   - updates an existing task" in text
    for cmd in Command:
        if cmd is Command.INVALID:
            continue
        assert f"({cmd.short}){cmd.value[1:]}" in text
    assert "invalid" not in text


def test_registry_handle_emits_reply_and_returns_command(state) -> None:
    io = ScriptedConsole()

    assert registry.handle(state, io, "bogus") is Command.INVALID
    assert io.output == ["Invalid input! Please type help for getting list of commands."]

    assert registry.handle(state, io, "q") is Command.QUIT
    assert io.output[-1] == "Quitting. I'm done!"


def test_custom_registry_falls_back_to_invalid_handler(state) -> None:
    reg = CommandRegistry()
    called: list[str] = []
    reg.register(Command.INVALID, lambda s, io: called.append("invalid") or "nope", "")
    reg.register(Command.HELP, lambda s, io: called.append("help") or None, "help")

    io = ScriptedConsole()
    assert reg.handle(state, io, "add") is Command.ADD
    assert reg.handle(state, io, "h") is Command.HELP
    assert called == ["invalid", "help"]
    assert io.output == ["nope"]


@pytest.mark.parametrize("line", ["u", "t", "d"])
def test_index_commands_on_empty_list_do_not_prompt(state, line: str) -> None:
    io = ScriptedConsole()

    registry.handle(state, io, line)

    assert io.prompts == []
    assert io.output == ["No tasks yet. Use (a)dd to create one."]


def test_update_prompts_for_number_then_description(state) -> None:
    state.tasks.add(Task("old", completed=True))
    io = ScriptedConsole(["7", "1", "new text"])

    registry.handle(state, io, "update")

    assert io.prompts == ["Task number: ", "Task number: ", "Task description: "]
    assert list(state.tasks) == [Task("new text", completed=True)]


def test_save_command_writes_file(state, settings) -> None:
    state.tasks.add(Task("Buy milk"))
    io = ScriptedConsole()

    assert registry.handle(state, io, "s") is Command.SAVE

    assert io.output == [f"Saving TODO items to: {settings.tasks_path}"]
    assert settings.tasks_path.read_text(encoding="utf-8") == "0 Buy milk\n"


def test_save_command_reports_persistence_failure(state) -> None:
    state.tasks_path.mkdir()
    io = ScriptedConsole()

    assert registry.handle(state, io, "save") is Command.SAVE

    assert io.output[-1].startswith("Persistence failure: could not write")
