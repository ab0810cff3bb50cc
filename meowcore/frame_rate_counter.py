"""Frame timing: delta time, a smoothed frame rate and a frame-rate cap."""

from __future__ import annotations

import time
from typing import Callable


class FrameRateCounter:
    """Measures frame durations against a monotonic clock in seconds."""

    def __init__(
        self,
        frame_rate: float,
        sample_size: int = 100,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if frame_rate <= 0:
            raise ValueError("frame_rate must be positive")
        if sample_size < 1:
            raise ValueError("sample_size must be at least 1")
        self._clock = clock
        self.sample_size = sample_size
        self._frame_times = [0.0] * sample_size
        self._index = 0
        self._accumulated_time = 0.0
        self._frame_start = clock()
        self.target_frame_time = 1.0 / frame_rate
        self.previous_time = clock()
        self.delta_time = 0.0

    def calculate(self) -> None:
        """Close the current frame: record its length and start a new one."""
        frame_end = self._clock()
        delta = frame_end - self._frame_start

        self._accumulated_time += delta - self._frame_times[self._index]
        self._frame_times[self._index] = delta
        self._index = (self._index + 1) % self.sample_size

        self.delta_time = delta
        self._frame_start = self._clock()

    def lock_frame_rate(self) -> None:
        """Busy-wait until the current frame has lasted the target frame time."""
        frame_end = self._clock()
        while frame_end - self._frame_start < self.target_frame_time:
            frame_end = self._clock()
        self.previous_time = frame_end

    def frame_rate(self) -> float:
        """Frames per second averaged over the sample window, or 0.0."""
        average = self._accumulated_time / self.sample_size
        return 1.0 / average if average > 0.0 else 0.0