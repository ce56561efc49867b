"""Command interpreter session: one reply per input line."""

import logging
from typing import Optional

from .errors import TaskInputError
from .parser import AddCommand, Command, CommandKind, StatusCommand, parse_command
from .task_list import TaskList

logger = logging.getLogger(__name__)

TERMINATING_WORD = "bye"


class Session:
    """Interprets command lines against a task list owned by the session.

    Built once at program start; every line is processed to completion and
    either fully applies or leaves the task list untouched.
    """

    def __init__(self, tasks: Optional[TaskList] = None):
        self.tasks = tasks if tasks is not None else TaskList()

    @staticmethod
    def is_terminating(line: str) -> bool:
        """Whether ``line`` ends the session. Exact, case-sensitive match."""
        return line == TERMINATING_WORD

    def handle(self, line: str) -> str:
        """Run one command line and return the reply text."""
        try:
            command = parse_command(line)
            logger.debug("Dispatching %s for %r", command.kind.name, line)
            return self._dispatch(command)
        except TaskInputError as e:
            logger.info("Rejected %r: %s (%s)", line, type(e).__name__, e.message.splitlines()[0])
            if e.suggestions:
                logger.debug("Known commands: %s", ", ".join(e.suggestions))
            return e.message

    def _dispatch(self, command: Command) -> str:
        if command.kind is CommandKind.LIST:
            return self.tasks.list()
        if isinstance(command, StatusCommand):
            return self.tasks.update_status(command.index_text, command.mark_as_done)
        if isinstance(command, AddCommand):
            return self.tasks.add(command.build_task())
        raise ValueError(f"Unhandled command kind: {command.kind}")
