"""Process-wide numeric task identifiers.

Every task gets an integer handle that the scheduler uses as its vertex key.
Handles are strictly increasing and never reused within a process.
"""

from __future__ import annotations

import threading


class IdAllocator:
    """Thread-safe monotonic counter."""

    def __init__(self, start: int = 1):
        self._lock = threading.Lock()
        self._next = start

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def reset(self, start: int = 1) -> None:
        if self is _default:
            raise RuntimeError("The shared allocator cannot be reset")
        with self._lock:
            self._next = start


_default = IdAllocator()


def default_allocator() -> IdAllocator:
    return _default


def alloc_id() -> int:
    return _default.next()
