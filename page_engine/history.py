"""Linear undo/redo history for editor sessions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class HistoryState(Generic[T]):
    """Snapshot of a history: past (top at the tail), present, future (top at the head)."""

    present: T
    past: List[T] = field(default_factory=list)
    future: List[T] = field(default_factory=list)


class History(Generic[T]):
    """
    Bounded linear history buffer.

    Values are stored as given. Callers must treat them as immutable,
    otherwise mutating the present also rewrites the past.
    """

    def __init__(self, initial: T, limit: Optional[int] = None) -> None:
        if limit is not None and limit < 1:
            raise ValueError("limit must be None or >= 1")
        self.limit = limit
        self._past: List[T] = []
        self._present: T = initial
        self._future: List[T] = []

    @property
    def present(self) -> T:
        return self._present

    @property
    def state(self) -> HistoryState[T]:
        return HistoryState(
            present=self._present,
            past=list(self._past),
            future=list(self._future),
        )

    @property
    def can_undo(self) -> bool:
        return len(self._past) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._future) > 0

    def set(self, value: T) -> None:
        self._past.append(self._present)
        if self.limit is not None:
            # Only set() grows the total, so trimming here keeps the bound.
            overflow = len(self._past) - self.limit
            if overflow > 0:
                del self._past[:overflow]
        self._present = value
        self._future.clear()

    def undo(self) -> bool:
        if not self._past:
            return False
        self._future.insert(0, self._present)
        self._present = self._past.pop()
        logger.debug("undo: %d past, %d future", len(self._past), len(self._future))
        return True

    def redo(self) -> bool:
        if not self._future:
            return False
        self._past.append(self._present)
        self._present = self._future.pop(0)
        logger.debug("redo: %d past, %d future", len(self._past), len(self._future))
        return True

    def reset(self, value: T) -> None:
        self._past.clear()
        self._future.clear()
        self._present = value

    def __repr__(self) -> str:
        return f"<History past={len(self._past)} future={len(self._future)}>"
