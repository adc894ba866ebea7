"""
This module contains the definition of a multiple-readers/single-writer
lock.
"""

from contextlib import contextmanager
from threading import Condition, Lock


class ReadWriteLock:
    """
    A lock that allows either any number of concurrent readers or a
    single writer.

    Writers that are waiting for the lock take precedence over readers
    that arrive later, i.e. a continuous stream of readers cannot
    starve a writer. The lock is not reentrant.

    Use as
     >>> lock = ReadWriteLock()
     >>> with lock.read():
     ...     ...
     >>> with lock.write():
     ...     ...
    """

    def __init__(self) -> None:
        self._condition = Condition(Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        """Blocks until shared access is granted."""
        with self._condition:
            while self._writer or self._waiting_writers > 0:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        """Releases shared access."""
        with self._condition:
            if self._readers == 0:
                raise RuntimeError("Cannot release un-acquired read-lock.")
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        """Blocks until exclusive access is granted."""
        with self._condition:
            self._waiting_writers += 1
            acquired = False
            try:
                while self._writer or self._readers > 0:
                    self._condition.wait()
                acquired = True
            finally:
                self._waiting_writers -= 1
                if not acquired:
                    # readers may be waiting on this writer only
                    self._condition.notify_all()
            self._writer = True

    def release_write(self) -> None:
        """Releases exclusive access."""
        with self._condition:
            if not self._writer:
                raise RuntimeError("Cannot release un-acquired write-lock.")
            self._writer = False
            self._condition.notify_all()

    @contextmanager
    def read(self):
        """Context manager for shared access."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self):
        """Context manager for exclusive access."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
