"""Tk/customtkinter window backend with monitors from screeninfo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger
from screeninfo import Monitor, get_monitors
from screeninfo.common import ScreenInfoError

from remonitor.backends import Rect, best_overlap
from remonitor.placement import VideoMode


@dataclass(frozen=True)
class ScreenHandle:
    """Identity of one screeninfo monitor."""

    name: str | None
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def of(cls, monitor: Monitor) -> ScreenHandle:
        return cls(monitor.name, monitor.x, monitor.y, monitor.width, monitor.height)

    @property
    def rect(self) -> Rect:
        return self.x, self.y, self.width, self.height


def list_monitors() -> list[Monitor]:
    """Return connected monitors, or an empty list when none can be enumerated."""
    try:
        return list(get_monitors())
    except ScreenInfoError as exc:
        logger.warning("Failed to enumerate monitors: {}", exc)
        return []


class TkBackend:
    """Placement queries and commands for a Tk root window."""

    def __init__(self, root: Any) -> None:
        self._root = root

    def _screens(self) -> list[Monitor]:
        return list_monitors()

    def monitors(self) -> list[Optional[ScreenHandle]]:
        return [ScreenHandle.of(m) for m in self._screens()]

    def primary_monitor(self) -> Optional[ScreenHandle]:
        for monitor in self._screens():
            if monitor.is_primary:
                return ScreenHandle.of(monitor)
        return None

    def monitor_position(self, monitor: ScreenHandle) -> Optional[tuple[int, int]]:
        return monitor.x, monitor.y

    def video_mode(self, monitor: ScreenHandle) -> Optional[VideoMode]:
        if monitor.width <= 0 or monitor.height <= 0:
            return None
        return VideoMode(width=monitor.width, height=monitor.height)

    def window_size(self) -> tuple[int, int]:
        root = self._root
        root.update_idletasks()
        return int(root.winfo_width()), int(root.winfo_height())

    def window_monitor(self) -> Optional[ScreenHandle]:
        root = self._root
        width, height = self.window_size()
        rect = (int(root.winfo_x()), int(root.winfo_y()), width, height)
        return best_overlap(rect, [(handle, handle.rect) for handle in self.monitors() if handle])

    def is_fullscreen(self) -> bool:
        return bool(int(self._root.attributes("-fullscreen")))

    def toggle_fullscreen(self) -> None:
        self._root.attributes("-fullscreen", not self.is_fullscreen())
        self._root.update_idletasks()

    def set_window_position(self, x: int, y: int) -> None:
        self._root.geometry(f"+{x}+{y}")
        self._root.update_idletasks()
