"""Task entries and the array-backed min-heap that orders them by due date."""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from .config import DisplayConfig
from .formatting import describe_task, is_late, to_local_naive

logger = logging.getLogger(__name__)


class TaskNode(BaseModel):
    """
    A to-do entry in the heap.

    Ordering looks at the due date only: an earlier due date is smaller and
    comes out of the heap first. Equality needs both the due date and the
    task label to match. Aware due dates are stored as naive local time so
    any two entries can be compared.
    """

    task: str = Field(..., min_length=1, description="Task label")
    due_date: datetime = Field(..., description="When the task is due")

    # Insertion order, set by the heap to break due-date ties FIFO
    _sequence: int = PrivateAttr(default=0)

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime) -> datetime:
        return to_local_naive(value)

    @property
    def sort_key(self) -> Tuple[datetime, int]:
        return (self.due_date, self._sequence)

    def is_late(self, now: Optional[datetime] = None) -> bool:
        """Check if the task is past its due date."""
        return is_late(self.due_date, now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskNode):
            return NotImplemented
        return self.due_date == other.due_date and self.task == other.task

    def __lt__(self, other: "TaskNode") -> bool:
        return self.due_date < other.due_date

    def __le__(self, other: "TaskNode") -> bool:
        return self.due_date <= other.due_date

    def __gt__(self, other: "TaskNode") -> bool:
        return self.due_date > other.due_date

    def __ge__(self, other: "TaskNode") -> bool:
        return self.due_date >= other.due_date

    def __str__(self) -> str:
        return describe_task(self)

    def __repr__(self) -> str:
        return f"TaskNode(task='{self.task}', due_date={self.due_date.isoformat()})"


class MinHeap:
    """
    Binary min-heap of tasks stored in a zero-indexed list.

    For index ``i`` the children live at ``2i + 1`` and ``2i + 2`` and the
    parent at ``(i - 1) // 2``. Every parent's key is no larger than its
    children's keys, where the key is ``(due_date, insertion order)``.
    """

    def __init__(self):
        self.storage: List[TaskNode] = []
        self._counter = 0

    @property
    def size(self) -> int:
        return len(self.storage)

    def is_empty(self) -> bool:
        return not self.storage

    def add(self, task: str, due_date: datetime) -> TaskNode:
        """Add a task and restore heap order."""
        node = TaskNode(task=task, due_date=due_date)
        node._sequence = self._counter
        self._counter += 1

        self.storage.append(node)
        self._sift_up(self.size - 1)
        logger.debug("Added task %r due %s (%d outstanding)", task, due_date.isoformat(), self.size)
        return node

    def peek(self) -> Optional[TaskNode]:
        """Return the next task without removing it, or None if empty."""
        if self.is_empty():
            return None
        return self.storage[0]

    def extract_min(self) -> Optional[TaskNode]:
        """Remove and return the task due soonest, or None if empty."""
        if self.is_empty():
            logger.debug("extract_min on empty heap")
            return None

        last = self.size - 1
        self._swap(0, last)
        node = self.storage.pop()
        self._sift_down(0)
        logger.debug("Finished task %r (%d outstanding)", node.task, self.size)
        return node

    # Aliases matching the to-do list vocabulary
    get_task = peek
    finish_task = extract_min

    def tasks(self) -> List[TaskNode]:
        """Copy of the entries in storage order (not sorted)."""
        return list(self.storage)

    def is_valid(self) -> bool:
        """Check the heap property at every parent."""
        for index in range(self.size):
            for child in (self._left(index), self._right(index)):
                if self._exists(child) and self._less(child, index):
                    return False
        return True

    def describe(self, now: Optional[datetime] = None, config: Optional[DisplayConfig] = None) -> str:
        """Outstanding count followed by one numbered line per entry."""
        lines = [f"Total outstanding tasks: {self.size}"]
        for number, node in enumerate(self.storage, start=1):
            lines.append(f"{number}: {describe_task(node, now, config)}")
        return "\n".join(lines)

    def _sift_up(self, index: int) -> None:
        while index > 0 and self._less(index, self._parent(index)):
            parent = self._parent(index)
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        while True:
            smallest = self._smaller_child(index)
            if smallest is None or not self._less(smallest, index):
                return
            self._swap(index, smallest)
            index = smallest

    def _smaller_child(self, index: int) -> Optional[int]:
        left, right = self._left(index), self._right(index)
        if not self._exists(left):
            return None
        if self._exists(right) and self._less(right, left):
            return right
        return left

    def _less(self, i: int, j: int) -> bool:
        return self.storage[i].sort_key < self.storage[j].sort_key

    def _swap(self, i: int, j: int) -> None:
        self.storage[i], self.storage[j] = self.storage[j], self.storage[i]

    def _exists(self, index: int) -> bool:
        return index < self.size

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __str__(self) -> str:
        return self.describe()
