"""Todo domain model."""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class Todo:
    """A single todo item.

    ``completed_at`` is a millisecond epoch timestamp, set only while
    the todo is completed.
    """
    id: str
    text: str
    completed: bool = False
    completed_at: int | None = None


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)
