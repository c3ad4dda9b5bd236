"""
In-memory snapshot of every entity of one type.

The pool never mutates a published snapshot.  ``refresh`` loads the
full table into a new tuple and swaps the reference in one assignment,
so a reader holding the old tuple keeps a complete view and a reader
arriving afterwards gets the complete new one.  Reloads are serialised
with a lock; reads take no lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Iterable, Tuple, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CachePool(Generic[T]):
    """Wholesale-refreshed, read-only view over a loader's results."""

    def __init__(self, name: str, loader: Callable[[], Iterable[T]]) -> None:
        self.name = name
        self._loader = loader
        self._lock = threading.Lock()
        self._snapshot: Tuple[T, ...] = ()

    def refresh(self) -> None:
        """Reload everything from the loader and publish it.

        If the loader raises, the previous snapshot stays in place and
        the exception propagates.
        """
        with self._lock:
            snapshot = tuple(self._loader())
            self._snapshot = snapshot
        logger.debug("Refreshed %s cache (%d entries)", self.name, len(snapshot))

    def snapshot(self) -> Tuple[T, ...]:
        return self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)
