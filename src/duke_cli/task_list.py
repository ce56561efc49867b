"""Ordered task collection with 1-based indexing."""

import re
import logging
from typing import Iterator, List

from .errors import EmptyCollection, IndexOutOfRange, NoOpChange, NotAnInteger
from .task import Task

logger = logging.getLogger(__name__)

EMPTY_LIST_REPLY = "You have no pending task. Add one now?"
EMPTY_COLLECTION_REPLY = "You do not have any ongoing task. Add one first?"
NOT_AN_INTEGER_REPLY = "Please provide the index of the task that you wish to update."
NOT_FOUND_REPLY = "Task is not found. Please provide a valid index."
NO_CHANGES_REPLY = "There are no changes to be made!"
MARKED_REPLY = "Nice! I've marked this task as done:"
UNMARKED_REPLY = "Ok, I've marked this task as not done yet:"

INDEX_RE = re.compile(r"[+-]?[0-9]+")


class TaskList:
    """Owns the session's tasks in insertion order.

    Indices are positional and 1-based; the list is never reordered or
    compacted, so an index keeps pointing at the same task.
    """

    def __init__(self):
        self._tasks: List[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def get(self, index: int) -> Task:
        """Return the task at 1-based ``index``."""
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfRange(NOT_FOUND_REPLY, index=index, size=len(self._tasks))
        return self._tasks[index - 1]

    def add(self, task: Task) -> str:
        """Append ``task`` and return the confirmation reply."""
        self._tasks.append(task)
        count = len(self._tasks)
        logger.info("Added task %d: %s", count, task.display_line())
        noun = "task" if count == 1 else "tasks"
        return (
            "Roger. I will add this to your list:\n"
            f"\t{task.display_line()}\n"
            f"You currently have {count} {noun} in your list."
        )

    def list(self) -> str:
        """Enumerate every task, one numbered line each."""
        if not self._tasks:
            return EMPTY_LIST_REPLY
        return "\n".join(
            f"{position}.{task.display_line()}"
            for position, task in enumerate(self._tasks, start=1)
        )

    def update_status(self, raw_index_text: str, mark_as_done: bool) -> str:
        """Mark or unmark the task at the index given in ``raw_index_text``.

        Raises:
            EmptyCollection: No task exists yet; the index is not inspected.
            NotAnInteger: ``raw_index_text`` is not an integer.
            IndexOutOfRange: The index is outside ``[1, len(self)]``.
            NoOpChange: The task is already in the requested state.
        """
        if not self._tasks:
            raise EmptyCollection(EMPTY_COLLECTION_REPLY)

        index_text = raw_index_text.strip()
        if not INDEX_RE.fullmatch(index_text):
            raise NotAnInteger(NOT_AN_INTEGER_REPLY)
        index = int(index_text)

        try:
            task = self.get(index)
        except IndexOutOfRange as e:
            raise IndexOutOfRange(f"{e.message}\n{self.list()}", index=e.index, size=e.size) from e

        if task.is_done == mark_as_done:
            raise NoOpChange(f"{NO_CHANGES_REPLY}\n{self.list()}")

        task.set_done(mark_as_done)
        logger.info("Task %d marked %s", index, "done" if mark_as_done else "not done")
        header = MARKED_REPLY if mark_as_done else UNMARKED_REPLY
        return f"{header}\n\t{task.display_line()}"
