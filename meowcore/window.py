"""Window dimensions and the platform rules that decide them."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass

_UINT32_LIMIT = 2**32

DEFAULT_WINDOW_SIZE_WIDTH = 1000
DEFAULT_WINDOW_SIZE_HEIGHT = 500


@dataclass(frozen=True)
class WindowSize:
    """Width and height of a window or drawing surface, in pixels."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, not {type(value).__name__}")
            if not 0 <= value < _UINT32_LIMIT:
                raise ValueError(f"{name} {value} is outside the unsigned 32-bit range")


class Platform(enum.Enum):
    IOS = "ios"
    ANDROID = "android"
    WINDOWS = "windows"
    MAC = "mac"
    EMSCRIPTEN = "emscripten"


class UnsupportedPlatformError(RuntimeError):
    """Raised when the running system is not one the engine targets."""


_SYS_PLATFORMS = {
    "emscripten": Platform.EMSCRIPTEN,
    "ios": Platform.IOS,
    "darwin": Platform.MAC,
    "android": Platform.ANDROID,
    "win32": Platform.WINDOWS,
    "cygwin": Platform.WINDOWS,
}


def current_platform() -> Platform:
    """Return the platform the interpreter is running on."""
    platform = _SYS_PLATFORMS.get(sys.platform)
    if platform is not None:
        return platform
    if hasattr(sys, "getandroidapilevel"):
        return Platform.ANDROID
    raise UnsupportedPlatformError(f"unsupported platform: {sys.platform}")


def should_display_full_screen(platform: Platform | None = None) -> bool:
    """Mobile platforms run full screen; desktop and web run windowed."""
    if platform is None:
        platform = current_platform()
    return platform in (Platform.IOS, Platform.ANDROID)


def initial_window_size(
    platform: Platform | None = None, desktop_size: WindowSize | None = None
) -> WindowSize:
    """Size of the window to open first.

    Mobile platforms use the whole display and the web uses its canvas; for
    those ``desktop_size`` gives that size. Other platforms get a fixed window.
    """
    if platform is None:
        platform = current_platform()
    if platform in (Platform.IOS, Platform.ANDROID, Platform.EMSCRIPTEN):
        if desktop_size is None:
            raise ValueError(f"{platform.value} needs the display size")
        return desktop_size
    return WindowSize(DEFAULT_WINDOW_SIZE_WIDTH, DEFAULT_WINDOW_SIZE_HEIGHT)