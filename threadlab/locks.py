"""Reader-writer lock and spin lock primitives."""

from __future__ import annotations

import threading
import time


class RWLock:
    """A lock held by many readers at once or by a single writer.

    Readers take precedence: a new reader enters whenever no writer holds
    the lock, even while a writer is waiting.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    def acquire_read(self) -> None:
        """Block until no writer holds the lock, then take a read hold."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writer)
            self._readers += 1

    def release_read(self) -> None:
        """Give up one read hold."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read() without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        """Block until the lock is free, then take it exclusively."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            self._writer = True

    def release_write(self) -> None:
        """Give up the exclusive hold."""
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() without a matching acquire_write()")
            self._writer = False
            self._cond.notify_all()

    def read_locked(self) -> bool:
        """Whether at least one reader holds the lock."""
        with self._cond:
            return self._readers > 0

    def write_locked(self) -> bool:
        """Whether a writer holds the lock."""
        with self._cond:
            return self._writer


class SpinLock:
    """A lock that busy-waits, yielding the processor between attempts."""

    def __init__(self) -> None:
        self._flag = threading.Lock()

    def acquire(self) -> bool:
        """Spin until the lock is taken."""
        while not self._flag.acquire(blocking=False):
            time.sleep(0)
        return True

    def release(self) -> None:
        """Release the lock; raises RuntimeError if it is not held."""
        self._flag.release()

    def locked(self) -> bool:
        """Whether the lock is currently held."""
        return self._flag.locked()

    def __enter__(self) -> SpinLock:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()