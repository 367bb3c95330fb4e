"""
Identifier generators injected into the stores.

Both generators are safe to share between threads; the API serves requests
from a worker thread pool.
"""

import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional


class IdGenerator(ABC):
    """Produces unique integer identifiers."""

    @abstractmethod
    def next_id(self) -> int:
        pass


class CounterIdGenerator(IdGenerator):
    """Monotonic counter starting at ``start``."""

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError("start must be at least 1")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value


class TimestampIdGenerator(IdGenerator):
    """
    Millisecond timestamps, bumped by one when two ids are requested within
    the same millisecond so results stay strictly increasing.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = int(self._clock() * 1000)
            if value <= self._last:
                value = self._last + 1
            self._last = value
        return value
