"""A reusable barrier that holds threads until all of them arrive."""

from __future__ import annotations

import threading


class ThreadBarrier:
    """Blocks callers of :meth:`wait` until ``total_thread_count`` are waiting."""

    def __init__(self, total_thread_count: int) -> None:
        self.total_thread_count = total_thread_count
        self._waiting = 0
        self._should_wait = False
        self._should_end = False
        self._condition = threading.Condition()

    def wait(self) -> None:
        """Wait for the other threads, or return at once once ended."""
        with self._condition:
            if self._should_end:
                return
            self._waiting += 1
            self._should_wait = True
            if self._waiting == self.total_thread_count:
                self.release()
            else:
                self._condition.wait_for(
                    lambda: not self._should_wait or self._should_end
                )
            self._waiting -= 1

    def release(self) -> None:
        """Let every waiting thread continue."""
        with self._condition:
            self._should_wait = False
            self._condition.notify_all()

    def end(self) -> None:
        """Release waiting threads and make later waits return at once."""
        with self._condition:
            self._should_end = True
            self.release()