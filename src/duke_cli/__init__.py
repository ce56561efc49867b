"""Duke - an interactive command-line task tracker."""

__version__ = "0.2.0"
__author__ = "Duke Team"

from .dates import DateStructure, StructuredDate, parse_date
from .task import Task, TaskKind
from .task_list import TaskList
from .session import Session

__all__ = [
    "DateStructure",
    "StructuredDate",
    "parse_date",
    "Task",
    "TaskKind",
    "TaskList",
    "Session",
    "__version__",
]
