"""Text formatting for values and due dates."""

from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Optional

from .config import DEFAULT_DATE_FORMAT, DisplayConfig

if TYPE_CHECKING:
    from .task_heap import TaskNode


def format_date(value: datetime, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a date as ``MM/dd/yyyy HH:mm`` unless another pattern is given."""
    return value.strftime(fmt)


def parse_date(text: str, fmt: str = DEFAULT_DATE_FORMAT) -> datetime:
    """Parse a date written with :func:`format_date`'s pattern."""
    return datetime.strptime(text.strip(), fmt)


def format_value(value: Any, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Render any value for display; dates use the date pattern."""
    if isinstance(value, (datetime, date)):
        return format_date(value, fmt)
    return f"{value}"


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def is_late(due: datetime, now: Optional[datetime] = None) -> bool:
    """
    Check if ``due`` is before ``now`` (the current time by default).

    Aware and naive datetimes may be mixed; aware ones are compared in
    local time.
    """
    if now is None:
        now = datetime.now()
    return to_local_naive(due) < to_local_naive(now)


def describe_task(task: "TaskNode", now: Optional[datetime] = None, config: Optional[DisplayConfig] = None) -> str:
    """Single-line summary: ``[LATE: ]<task>, Due: <date>``."""
    config = config or DisplayConfig()
    text = f"{task.task}, Due: {format_date(task.due_date, config.date_format)}"
    if is_late(task.due_date, now):
        return f"{config.late_prefix}{text}"
    return text
