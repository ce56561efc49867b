"""User-recoverable errors raised while interpreting a command.

Every error carries the reply text shown to the user. None of them is fatal:
the session turns them into a reply and keeps reading input.
"""

from typing import List, Optional


class TaskInputError(Exception):
    """Base class for errors caused by what the user typed."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(message)


class MissingRequiredClause(TaskInputError):
    """A deadline or event is missing its ``/by`` or ``/at`` clause."""


class MalformedClauseCount(TaskInputError):
    """Splitting on the separator did not give exactly two non-empty parts."""


class MissingDescription(TaskInputError):
    """A task was added without any description text."""


class EmptyCollection(TaskInputError):
    """A status change was requested before any task exists."""


class NotAnInteger(TaskInputError):
    """The mark/unmark argument is not an index."""


class IndexOutOfRange(TaskInputError):
    """The mark/unmark index does not point at an existing task."""

    def __init__(self, message: str, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(message)


class NoOpChange(TaskInputError):
    """The task is already in the requested state."""


class UnrecognizedCommand(TaskInputError):
    """The input matches none of the known command shapes."""

    def __init__(self, message: str, line: str, suggestions: Optional[List[str]] = None):
        self.line = line
        super().__init__(message, suggestions)
