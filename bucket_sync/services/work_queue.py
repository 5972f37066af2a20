"""
Shared work cursor handed out to upload workers.
"""
import threading
from typing import Optional


class WorkQueue:
    """
    A next-index counter over a fixed number of items.

    Each index in ``range(size)`` is returned by ``claim`` exactly once,
    whichever thread asks for it.
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("size cannot be negative")
        self.size = size
        self._next = 0
        self._lock = threading.Lock()

    def claim(self) -> Optional[int]:
        """Return the next unclaimed index, or None once all are taken."""
        with self._lock:
            if self._next >= self.size:
                return None
            index = self._next
            self._next += 1
            return index

    @property
    def claimed(self) -> int:
        with self._lock:
            return self._next
