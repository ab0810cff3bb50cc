"""Double and triple buffers that swap whole values between owners."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class DoubleBuffer(Generic[T]):
    """Holds a ``current`` and a ``final`` value that can be exchanged."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self.current: T = factory()
        self.final: T = factory()

    def swap(self) -> None:
        self.current, self.final = self.final, self.current


class TripleBuffer(Generic[T]):
    """Holds ``current``, ``staging`` and ``final`` values rotated by ``swap``."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self.current: T = factory()
        self.staging: T = factory()
        self.final: T = factory()

    def swap(self) -> None:
        """Exchange current with staging, then current with final."""
        self.current, self.staging = self.staging, self.current
        self.current, self.final = self.final, self.current