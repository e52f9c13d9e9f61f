"""Translate a saved monitor preference into window placement and back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional, Protocol, Sequence

from loguru import logger

from remonitor.store import NO_MONITOR, PlacementConfig

MonitorHandle = Hashable


@dataclass(frozen=True)
class VideoMode:
    """Active resolution of a monitor."""

    width: int
    height: int
    refresh_rate: int = 0


class WindowBackend(Protocol):
    """Windowing queries and commands used for placement.

    Monitor handles are opaque: they are compared by equality and handed
    back to the backend, nothing else.
    """

    def monitors(self) -> Sequence[Optional[MonitorHandle]]: ...

    def primary_monitor(self) -> Optional[MonitorHandle]: ...

    def monitor_position(self, monitor: MonitorHandle) -> Optional[tuple[int, int]]: ...

    def video_mode(self, monitor: MonitorHandle) -> Optional[VideoMode]: ...

    def window_size(self) -> tuple[int, int]: ...

    def window_monitor(self) -> Optional[MonitorHandle]: ...

    def is_fullscreen(self) -> bool: ...

    def toggle_fullscreen(self) -> None: ...

    def set_window_position(self, x: int, y: int) -> None: ...


def center_offset(monitor_size: tuple[int, int], window_size: tuple[int, int]) -> tuple[int, int]:
    """Offset that centers the window, clamped so it never goes negative."""
    mw, mh = monitor_size
    ww, wh = window_size
    return max(0, (mw - ww) // 2), max(0, (mh - wh) // 2)


def centered_position(
    origin: tuple[int, int],
    monitor_size: tuple[int, int],
    window_size: tuple[int, int],
) -> tuple[int, int]:
    """Top-left corner of the window centered on a monitor, in desktop coordinates."""
    dx, dy = center_offset(monitor_size, window_size)
    return origin[0] + dx, origin[1] + dy


def resolve_monitor(
    monitors: Sequence[Optional[MonitorHandle]],
    index: int,
    primary: Optional[MonitorHandle],
) -> Optional[MonitorHandle]:
    """Pick the monitor for a saved index.

    Falls back to the primary monitor, then to the first enumerated one.
    Returns ``None`` when nothing is connected.
    """
    if not monitors:
        return None
    if 0 <= index < len(monitors):
        handle = monitors[index]
        if handle is not None:
            return handle
    if primary is not None:
        return primary
    return monitors[0]


def index_of_monitor(
    monitors: Sequence[Optional[MonitorHandle]],
    handle: Optional[MonitorHandle],
) -> int:
    if handle is None:
        return NO_MONITOR
    for i, candidate in enumerate(monitors):
        if candidate is not None and candidate == handle:
            return i
    return NO_MONITOR


class MonitorPlacer:
    """Moves the window onto the remembered monitor and reads its current one."""

    def __init__(self, backend: WindowBackend) -> None:
        self._backend = backend

    def restore(self, config: PlacementConfig | None) -> bool:
        """Center the window on the saved monitor, re-entering fullscreen if requested.

        When the monitor has no position or video mode the window is left
        windowed; fullscreen is not re-entered in that case.

        Returns True when the window was moved.
        """
        if config is None:
            return False

        backend = self._backend
        monitors = list(backend.monitors() or [])
        target = resolve_monitor(monitors, config.monitor_index, backend.primary_monitor())
        if target is None:
            logger.debug("No monitors reported; leaving window in place")
            return False

        # The window cannot be moved across monitors while fullscreen.
        if backend.is_fullscreen():
            backend.toggle_fullscreen()

        origin = backend.monitor_position(target)
        mode = backend.video_mode(target)
        if origin is None or mode is None:
            logger.debug("Monitor {} has no position or video mode", target)
            return False

        x, y = centered_position(origin, (mode.width, mode.height), backend.window_size())
        backend.set_window_position(x, y)
        logger.debug("Moved window to {},{} on monitor {}", x, y, target)

        if config.fullscreen and not backend.is_fullscreen():
            backend.toggle_fullscreen()
        return True

    def capture(self) -> PlacementConfig:
        """Build a placement record from the window's current state."""
        backend = self._backend
        fullscreen = bool(backend.is_fullscreen())
        index = index_of_monitor(list(backend.monitors() or []), backend.window_monitor())
        return PlacementConfig(monitor_index=index, fullscreen=fullscreen)
