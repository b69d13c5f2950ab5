"""A counting semaphore with a timed acquire."""

from __future__ import annotations

import threading


class Semaphore:
    """Counting semaphore guarding free and used buffer slots."""

    def __init__(self, count: int = 0) -> None:
        if count < 0:
            raise ValueError("semaphore count cannot be negative")
        self._count = count
        self._cond = threading.Condition()

    def release(self) -> None:
        """Increase the count and wake one waiter."""
        with self._cond:
            self._count += 1
            self._cond.notify()

    def acquire(self) -> None:
        """Block until the count is positive, then take one."""
        with self._cond:
            while self._count == 0:
                self._cond.wait()
            self._count -= 1

    def try_acquire(self, delay_ms: int) -> bool:
        """Wait at most delay_ms milliseconds once; return whether one was taken."""
        with self._cond:
            if self._count == 0:
                self._cond.wait(timeout=max(delay_ms, 0) / 1000.0)
            if self._count == 0:
                return False
            self._count -= 1
            return True