from __future__ import annotations

from enum import Enum
from typing import Optional


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Single source for the rank used by the SQL sort and the in-memory sort.
PRIORITY_RANK = {
    Priority.HIGH.value: 3,
    Priority.MEDIUM.value: 2,
    Priority.LOW.value: 1,
}
DEFAULT_RANK = PRIORITY_RANK[Priority.MEDIUM.value]


def priority_rank(priority: Optional[str]) -> int:
    """Unknown or missing priorities rank as Medium."""
    if isinstance(priority, Priority):
        priority = priority.value
    return PRIORITY_RANK.get(priority or "", DEFAULT_RANK)
