"""Tests for command line parsing."""

import pytest

from duke_cli.errors import (
    MalformedClauseCount,
    MissingDescription,
    MissingRequiredClause,
    UnrecognizedCommand,
)
from duke_cli.parser import (
    UNRECOGNIZED_REPLY,
    AddCommand,
    CommandKind,
    ListCommand,
    StatusCommand,
    parse_command,
)
from duke_cli.task import TaskKind


class TestParseCommand:
    """Test classification of input lines."""

    def test_list(self):
        command = parse_command("list")
        assert isinstance(command, ListCommand)
        assert command.kind == CommandKind.LIST

    def test_list_must_match_exactly(self):
        for line in ("list ", " list", "LIST", "list all"):
            with pytest.raises(UnrecognizedCommand):
                parse_command(line)

    def test_mark_keeps_raw_index_text(self):
        command = parse_command("mark 2")
        assert command == StatusCommand(kind=CommandKind.MARK, index_text=" 2")
        assert command.mark_as_done is True

    def test_unmark(self):
        command = parse_command("unmark 1")
        assert command.kind == CommandKind.UNMARK
        assert command.index_text == " 1"
        assert command.mark_as_done is False

    def test_mark_prefix_without_space(self):
        """Index validation is deferred to the task list."""
        assert parse_command("mark").index_text == ""
        assert parse_command("markabc").index_text == "abc"

    def test_todo(self):
        command = parse_command("todo read book")
        assert command == AddCommand(kind=CommandKind.TODO, description="read book")
        assert command.task_kind == TaskKind.TODO

    def test_todo_requires_description(self):
        with pytest.raises(MissingDescription):
            parse_command("todo    ")

    def test_todo_without_space_is_unrecognized(self):
        with pytest.raises(UnrecognizedCommand):
            parse_command("todo")

    def test_deadline(self):
        command = parse_command("deadline return book /by 2019-12-02")
        assert command.kind == CommandKind.DEADLINE
        assert command.description == "return book"
        assert command.raw_date == "2019-12-02"

    def test_deadline_build_task(self):
        task = parse_command("deadline return book /by Sunday").build_task()
        assert task.kind == TaskKind.DEADLINE
        assert task.display_line() == "[D][ ] return book (by: Sunday)"

    def test_deadline_missing_clause(self):
        with pytest.raises(MissingRequiredClause) as exc:
            parse_command("deadline oops")
        assert exc.value.message == "Please include the deadline for your task"

    @pytest.mark.parametrize("line", [
        "deadline return book /by ",
        "deadline  /by 2019-12-02",
        "deadline a /by b /by c",
        "deadline    /by    ",
    ])
    def test_deadline_malformed_clause(self, line):
        with pytest.raises(MalformedClauseCount) as exc:
            parse_command(line)
        assert exc.value.message == "Please include the description and deadline for your task"

    def test_event(self):
        command = parse_command("event project meeting /at Mon 2-4pm")
        assert command.kind == CommandKind.EVENT
        assert command.task_kind == TaskKind.EVENT
        assert command.description == "project meeting"
        assert command.raw_date == "Mon 2-4pm"

    def test_event_uses_its_own_separator(self):
        with pytest.raises(MissingRequiredClause) as exc:
            parse_command("event party /by Friday")
        assert exc.value.message == "Please include the event date"

    def test_event_malformed_clause(self):
        with pytest.raises(MalformedClauseCount) as exc:
            parse_command("event party /at ")
        assert exc.value.message == "Please include the description and time of your event"

    @pytest.mark.parametrize("line", ["", "hello", "delete 1", "bye now", "Todo read"])
    def test_unrecognized(self, line):
        with pytest.raises(UnrecognizedCommand) as exc:
            parse_command(line)
        assert exc.value.message == UNRECOGNIZED_REPLY
        assert exc.value.line == line

    def test_unrecognized_suggests_known_commands(self):
        with pytest.raises(UnrecognizedCommand) as exc:
            parse_command("remove 1")
        assert exc.value.suggestions == [
            "list", "mark", "unmark", "todo", "deadline", "event", "bye",
        ]

    def test_other_errors_have_no_suggestions(self):
        with pytest.raises(MissingRequiredClause) as exc:
            parse_command("deadline oops")
        assert exc.value.suggestions == []
