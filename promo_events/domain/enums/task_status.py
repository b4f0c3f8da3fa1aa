"""Task workflow status."""

from enum import Enum


class TaskStatus(str, Enum):
    """Task status: TODO → IN_PROGRESS → DONE, and DONE → TODO on reopen."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
