"""Command parsing for Duke.

Turns one raw input line into a typed command. Parsing never touches the
task list, so every shape check here runs before any mutation happens.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import (
    MalformedClauseCount,
    MissingDescription,
    MissingRequiredClause,
    UnrecognizedCommand,
)
from .task import Task, TaskKind

UNRECOGNIZED_REPLY = "Hmm, I don't understand what that means. Can you explain again?"
MISSING_DESCRIPTION_REPLY = "Please include the description of your task"


class CommandKind(Enum):
    """Every command the interpreter understands."""
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


@dataclass(frozen=True)
class ListCommand:
    kind: CommandKind = CommandKind.LIST


@dataclass(frozen=True)
class StatusCommand:
    """Mark or unmark; the index text is validated by the task list."""
    kind: CommandKind
    index_text: str

    @property
    def mark_as_done(self) -> bool:
        return self.kind is CommandKind.MARK


@dataclass(frozen=True)
class AddCommand:
    kind: CommandKind
    description: str
    raw_date: Optional[str] = None

    @property
    def task_kind(self) -> TaskKind:
        return ADD_TASK_KINDS[self.kind]

    def build_task(self) -> Task:
        """Build the new task this command describes."""
        return Task(self.task_kind, self.description, raw_date=self.raw_date)


Command = Union[ListCommand, StatusCommand, AddCommand]

ADD_TASK_KINDS = {
    CommandKind.TODO: TaskKind.TODO,
    CommandKind.DEADLINE: TaskKind.DEADLINE,
    CommandKind.EVENT: TaskKind.EVENT,
}


@dataclass(frozen=True)
class ClauseRule:
    """How a dated task splits its description from its date text."""
    separator: str
    missing_message: str
    malformed_message: str


CLAUSE_RULES = {
    CommandKind.DEADLINE: ClauseRule(
        separator=" /by ",
        missing_message="Please include the deadline for your task",
        malformed_message="Please include the description and deadline for your task",
    ),
    CommandKind.EVENT: ClauseRule(
        separator=" /at ",
        missing_message="Please include the event date",
        malformed_message="Please include the description and time of your event",
    ),
}

KNOWN_COMMANDS = [kind.value for kind in CommandKind] + ["bye"]

# Prefix matched for each add command, tried in this order after list/mark
ADD_PREFIXES = (
    (CommandKind.TODO, "todo "),
    (CommandKind.DEADLINE, "deadline "),
    (CommandKind.EVENT, "event "),
)


def parse_command(line: str) -> Command:
    """Classify ``line`` into a command.

    Shapes are matched in a fixed priority order: ``list``, ``mark``/``unmark``,
    ``todo``, ``deadline``, ``event``.

    Raises:
        MissingRequiredClause: A deadline/event lacks its separator.
        MalformedClauseCount: The separator did not split into two parts.
        MissingDescription: A todo has no description.
        UnrecognizedCommand: Nothing matched.
    """
    if line == CommandKind.LIST.value:
        return ListCommand()

    for kind in (CommandKind.MARK, CommandKind.UNMARK):
        if line.startswith(kind.value):
            return StatusCommand(kind=kind, index_text=line[len(kind.value):])

    for kind, prefix in ADD_PREFIXES:
        if line.startswith(prefix):
            return _parse_add(kind, line[len(prefix):])

    raise UnrecognizedCommand(UNRECOGNIZED_REPLY, line=line, suggestions=list(KNOWN_COMMANDS))


def _parse_add(kind: CommandKind, remainder: str) -> AddCommand:
    rule = CLAUSE_RULES.get(kind)
    if rule is None:
        if not remainder.strip():
            raise MissingDescription(MISSING_DESCRIPTION_REPLY)
        return AddCommand(kind=kind, description=remainder)

    if rule.separator not in remainder:
        raise MissingRequiredClause(rule.missing_message)

    parts = remainder.split(rule.separator)
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise MalformedClauseCount(rule.malformed_message)

    description, raw_date = parts
    return AddCommand(kind=kind, description=description, raw_date=raw_date)
