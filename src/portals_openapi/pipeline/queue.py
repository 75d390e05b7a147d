"""FIFO of parent groups still owed child records."""

from collections import deque

from portals_openapi.errors import CorrelationError
from portals_openapi.parser.base import ParentContext


class ParentQueue:
    """Parent contexts in source order, consumed one child record at a time.

    Parents that declare no children are never enqueued: they own no records
    and would otherwise sit at the head with nothing left to consume.
    """

    def __init__(self, parents: list[ParentContext]):
        self._parents = deque(p.model_copy() for p in parents if p.remaining > 0)

    def __len__(self) -> int:
        return len(self._parents)

    @property
    def pending(self) -> int:
        """Total number of child records still expected."""
        return sum(p.remaining for p in self._parents)

    def head(self) -> ParentContext:
        if not self._parents:
            raise CorrelationError("no parent context available")
        return self._parents[0]

    def consume(self) -> bool:
        """Account for one child record of the head parent.

        Returns True when that was the head's last record and it was dequeued.
        """
        parent = self.head()
        parent.remaining -= 1
        if parent.remaining == 0:
            self._parents.popleft()
            return True
        return False
