"""Task domain errors.

Error constants returned in Failure results by Task state transitions.
These are NOT exceptions.

Usage:
    from promo_events.domain.errors import TaskError

    match task.assign_to("u-1", assigned_by="lead"):
        case Failure(error=TaskError.TASK_COMPLETED):
            ...
"""


class TaskError:
    """Task error constants.

    Error Categories:
        - Status errors: TASK_COMPLETED, ALREADY_COMPLETED, NOT_COMPLETED,
          NOT_TODO
        - Assignment errors: NOT_ASSIGNED, NOT_ASSIGNEE
        - Validation errors: INVALID_TITLE
    """

    # Status errors
    TASK_COMPLETED = "Cannot modify a completed task"
    ALREADY_COMPLETED = "Task is already completed"
    NOT_COMPLETED = "Can only reopen completed tasks"
    NOT_TODO = "Can only start tasks that are in TODO status"

    # Assignment errors
    NOT_ASSIGNED = "Task must be assigned before starting"
    NOT_ASSIGNEE = "Only the assigned user can perform this action"

    # Validation errors
    INVALID_TITLE = "Task title must be a non-empty string"
