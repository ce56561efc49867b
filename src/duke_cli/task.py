"""Task data model for Duke.

A task is a single dataclass tagged by ``TaskKind`` rather than a class
hierarchy. Deadlines and events carry the raw date text the user typed plus
an optional structured date when the text is in a recognized format.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .dates import DateStructure, StructuredDate, parse_date


class TaskKind(Enum):
    """Task variants, valued by their display tag."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


# Label shown before the raw date text, e.g. "(by: Sunday)"
DATE_LABELS = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}

DONE_MARK = "X"
PENDING_MARK = " "


@dataclass
class Task:
    """A to-do, deadline or event."""

    kind: TaskKind
    description: str
    is_done: bool = False
    raw_date: Optional[str] = None
    parsed_date: Optional[StructuredDate] = field(default=None, init=False)

    def __post_init__(self):
        if self.kind in DATE_LABELS and self.raw_date:
            self.parsed_date = parse_date(self.raw_date)

    def __setattr__(self, name, value):
        if name == "kind" and "kind" in self.__dict__:
            raise AttributeError("Task kind cannot be changed after construction")
        super().__setattr__(name, value)

    @classmethod
    def todo(cls, description: str, is_done: bool = False) -> "Task":
        return cls(TaskKind.TODO, description, is_done)

    @classmethod
    def deadline(cls, description: str, by: str, is_done: bool = False) -> "Task":
        return cls(TaskKind.DEADLINE, description, is_done, raw_date=by)

    @classmethod
    def event(cls, description: str, at: str, is_done: bool = False) -> "Task":
        return cls(TaskKind.EVENT, description, is_done, raw_date=at)

    @property
    def type_tag(self) -> str:
        return self.kind.value

    @property
    def date_structure(self) -> Optional[DateStructure]:
        """Format the date clause was recognized as, or None if unparsed."""
        if self.parsed_date is None:
            return None
        return self.parsed_date.structure

    def set_done(self, value: bool) -> None:
        self.is_done = value

    def display_line(self) -> str:
        """Render the task as ``[type][status] description``.

        Dated tasks always show the raw text the user typed, even when it
        was parsed into a structured date.
        """
        status = DONE_MARK if self.is_done else PENDING_MARK
        text = self.description
        label = DATE_LABELS.get(self.kind)
        if label is not None:
            text = f"{text} ({label}: {self.raw_date})"
        return f"[{self.type_tag}][{status}] {text}"

    def __str__(self) -> str:
        return self.display_line()
