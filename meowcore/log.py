"""Tagged console logging."""

from __future__ import annotations

import sys

EXCEPTION_SEPARATOR = " Exception message was: "


def log(tag: str, message: object, error: BaseException | None = None) -> None:
    """Write ``tag: message`` to standard output.

    When ``error`` is given, its text is appended to the message.
    Nothing is written when Python runs with optimisations (``-O``).
    """
    if not __debug__:
        return
    text = str(message)
    if error is not None:
        text = f"{text}{EXCEPTION_SEPARATOR}{error}"
    sys.stdout.write(f"{tag}: {text}\n")
    sys.stdout.flush()