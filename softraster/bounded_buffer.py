"""A thread-safe FIFO queue of limited capacity."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class BoundedBuffer(Generic[T]):
    """Producers block while full, consumers block while empty."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[T] = deque()
        self._condition = threading.Condition()

    def __len__(self) -> int:
        with self._condition:
            return len(self._items)

    def add(self, item: T) -> None:
        with self._condition:
            self._condition.wait_for(lambda: len(self._items) < self.capacity)
            self._items.append(item)
            self._condition.notify_all()

    def remove(self) -> T:
        with self._condition:
            self._condition.wait_for(lambda: len(self._items) > 0)
            item = self._items.popleft()
            self._condition.notify_all()
            return item

    def wait_until_empty(self) -> None:
        with self._condition:
            self._condition.wait_for(lambda: not self._items)