"""Launching and shutting down an external profiler process."""

from __future__ import annotations

import signal
import subprocess
import threading
from types import FrameType
from typing import Any, Sequence

DEFAULT_PROFILER_PATH = "dependencies/profiler/build/unix/Tracy-release"

_HANDLED_SIGNAL_NAMES = ("SIGINT", "SIGTERM", "SIGQUIT")


def _handled_signals() -> list[signal.Signals]:
    return [
        getattr(signal, name)
        for name in _HANDLED_SIGNAL_NAMES
        if hasattr(signal, name)
    ]


class ProfilerProcess:
    """A profiler started as a child process and stopped on demand.

    While the child runs, interrupt, termination and quit signals are
    routed to a handler that terminates it, so it does not outlive its
    parent. The previous handlers come back when the process is closed.
    """

    def __init__(
        self,
        path: str = DEFAULT_PROFILER_PATH,
        args: Sequence[str] = (),
        handle_signals: bool = True,
    ) -> None:
        self.path = path
        self.args = tuple(args)
        self.handle_signals = handle_signals
        self._process: subprocess.Popen[bytes] | None = None
        self._previous_handlers: dict[signal.Signals, Any] = {}

    def __enter__(self) -> ProfilerProcess:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def running(self) -> bool:
        return self._process is not None and self._process.poll() is None

    @property
    def pid(self) -> int | None:
        return None if self._process is None else self._process.pid

    @property
    def returncode(self) -> int | None:
        return None if self._process is None else self._process.poll()

    def open(self) -> None:
        """Start the profiler; raises ``OSError`` if it cannot be started."""
        if self.running:
            raise RuntimeError("profiler is already running")
        self._install_handlers()
        try:
            self._process = subprocess.Popen([self.path, *self.args])
        except OSError:
            self._restore_handlers()
            raise

    def close(self) -> None:
        """Terminate the profiler, wait for it, and restore signal handlers."""
        self._terminate()
        self._restore_handlers()

    def _terminate(self) -> None:
        process = self._process
        if process is None:
            return
        if process.poll() is None:
            process.terminate()
        process.wait()

    def _handle_signal(self, signum: int, frame: FrameType | None) -> None:
        self._terminate()

    def _install_handlers(self) -> None:
        if not self.handle_signals or self._previous_handlers:
            return
        if threading.current_thread() is not threading.main_thread():
            return
        for signum in _handled_signals():
            self._previous_handlers[signum] = signal.signal(
                signum, self._handle_signal
            )

    def _restore_handlers(self) -> None:
        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)
        self._previous_handlers.clear()