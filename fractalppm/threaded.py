"""A lock-protected vector and a number grid computed by worker threads."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable
from typing import Generic, TypeVar

from .numbergrid import NumberGrid

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ThreadedVector(Generic[T]):
    """A list whose operations are safe to call from several threads."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._lock = threading.Lock()
        self._data: list[T] = list(values)

    def push(self, *args: T) -> None:
        """Append every argument to the back, in order."""
        with self._lock:
            self._data.extend(args)

    def pop(self, count: int = 1) -> list[T]:
        """Remove up to count values from the back and return them, last first."""
        with self._lock:
            n = min(max(count, 0), len(self._data))
            if n == 0:
                return []
            taken = self._data[-n:]
            del self._data[-n:]
        taken.reverse()
        return taken

    def peek(self, count: int = 1) -> list[T]:
        """Up to count values from the back, last first, without removing them."""
        with self._lock:
            return self._data[::-1][: max(count, 0)]

    def clear(self) -> None:
        """Remove every value."""
        with self._lock:
            self._data.clear()

    def resize(self, size: int, fill: T | None = None) -> None:
        """Grow with fill values or shrink from the back to the given size."""
        if size < 0:
            raise ValueError("size must not be negative")
        with self._lock:
            if size < len(self._data):
                del self._data[size:]
            else:
                self._data.extend([fill] * (size - len(self._data)))  # type: ignore[list-item]

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __getitem__(self, index: int) -> T:
        with self._lock:
            return self._data[index]


class ThreadedGrid(NumberGrid):
    """A number grid whose rows are calculated by one thread per CPU."""

    def __init__(self, height: int = 300, width: int = 400) -> None:
        super().__init__(height, width)
        self._jobs: ThreadedVector[int] = ThreadedVector()

    def calculate_all_numbers(self) -> None:
        """Queue every row and let worker threads calculate them."""
        self._jobs.push(*range(self.height))
        threads: list[threading.Thread] = []
        for _ in range(os.cpu_count() or 1):
            thread = threading.Thread(target=self.worker, daemon=True)
            try:
                thread.start()
            except RuntimeError:
                logger.warning("there was a thread error")
                continue
            threads.append(thread)
        for thread in threads:
            thread.join()
        if not threads:
            self.worker()

    def worker(self) -> None:
        """Take rows from the job queue and calculate them until it is empty."""
        while len(self._jobs) > 0:
            for row in self._jobs.pop(1):
                self._calculate_row(row)