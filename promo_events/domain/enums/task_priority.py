"""Task priority levels.

Priority escalation moves a task one level up and stops at CRITICAL. Open
tasks escalate automatically once they are older than the threshold for
their current level.
"""

from enum import Enum

# Age (days) a task may reach at each level before it escalates
_ESCALATION_THRESHOLD_DAYS = {"low": 30, "medium": 14, "high": 7}


class TaskPriority(str, Enum):
    """Task priority levels, lowest to highest."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """Numeric rank (1 = LOW, 4 = CRITICAL)."""
        return list(TaskPriority).index(self) + 1

    def escalate(self) -> "TaskPriority":
        """Return the next priority level (CRITICAL stays CRITICAL)."""
        levels = list(TaskPriority)
        return levels[min(self.rank, len(levels) - 1)]

    def is_higher_than(self, other: "TaskPriority") -> bool:
        """Check if this level ranks above other."""
        return self.rank > other.rank

    def should_escalate(self, age_in_days: int) -> bool:
        """Check if a task this old has outgrown its priority.

        Args:
            age_in_days: Task age in whole days (rounded up).

        Returns:
            True if the age exceeds the level's threshold. CRITICAL never
            escalates.
        """
        threshold = _ESCALATION_THRESHOLD_DAYS.get(self.value)
        return threshold is not None and age_in_days > threshold
