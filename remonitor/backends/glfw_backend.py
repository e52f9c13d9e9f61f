"""GLFW window backend."""

from __future__ import annotations

import ctypes
from typing import Any, Optional

import glfw
from loguru import logger

from remonitor.backends import Rect, best_overlap
from remonitor.placement import VideoMode


def _address(pointer: Any) -> Optional[int]:
    """Stable integer identity for a GLFW pointer; ``None`` for NULL."""
    if not pointer:
        return None
    return ctypes.cast(pointer, ctypes.c_void_p).value


class GLFWBackend:
    """Placement queries and commands for one GLFW window.

    Monitor handles are the addresses of the ``GLFWmonitor`` pointers, so two
    enumerations of the same display compare equal.
    """

    def __init__(self, window: Any) -> None:
        self._window = window
        self._pointers: dict[int, Any] = {}
        self._windowed_rect: Rect | None = None

    def _remember(self, pointer: Any) -> Optional[int]:
        address = _address(pointer)
        if address is not None:
            self._pointers[address] = pointer
        return address

    def _pointer(self, handle: int) -> Any:
        pointer = self._pointers.get(handle)
        if pointer is None:
            self.monitors()
            pointer = self._pointers.get(handle)
        return pointer

    def monitors(self) -> list[Optional[int]]:
        return [self._remember(pointer) for pointer in glfw.get_monitors() or []]

    def primary_monitor(self) -> Optional[int]:
        return self._remember(glfw.get_primary_monitor())

    def monitor_position(self, monitor: int) -> Optional[tuple[int, int]]:
        pointer = self._pointer(monitor)
        if pointer is None:
            return None
        x, y = glfw.get_monitor_pos(pointer)
        return int(x), int(y)

    def video_mode(self, monitor: int) -> Optional[VideoMode]:
        pointer = self._pointer(monitor)
        if pointer is None:
            return None
        try:
            mode = glfw.get_video_mode(pointer)
        except ValueError:
            # NULL video mode
            return None
        if mode is None:
            return None
        return VideoMode(width=int(mode.size.width), height=int(mode.size.height), refresh_rate=int(mode.refresh_rate))

    def window_size(self) -> tuple[int, int]:
        width, height = glfw.get_window_size(self._window)
        return int(width), int(height)

    def _window_rect(self) -> Rect:
        x, y = glfw.get_window_pos(self._window)
        width, height = self.window_size()
        return int(x), int(y), width, height

    def _monitor_rects(self) -> list[tuple[int, Rect]]:
        rects: list[tuple[int, Rect]] = []
        for handle in self.monitors():
            if handle is None:
                continue
            origin = self.monitor_position(handle)
            mode = self.video_mode(handle)
            if origin is None or mode is None:
                continue
            rects.append((handle, (origin[0], origin[1], mode.width, mode.height)))
        return rects

    def window_monitor(self) -> Optional[int]:
        """Fullscreen monitor, else the monitor holding most of the window."""
        fullscreen_on = self._remember(glfw.get_window_monitor(self._window))
        if fullscreen_on is not None:
            return fullscreen_on
        return best_overlap(self._window_rect(), self._monitor_rects())

    def is_fullscreen(self) -> bool:
        return _address(glfw.get_window_monitor(self._window)) is not None

    def _default_windowed_rect(self) -> Rect:
        """Half of the fullscreen monitor, centered, for windows that started fullscreen."""
        width, height = self.window_size()
        x, y = 0, 0
        monitor = self._remember(glfw.get_window_monitor(self._window))
        if monitor is not None:
            origin = self.monitor_position(monitor)
            mode = self.video_mode(monitor)
            if mode is not None:
                width, height = mode.width, mode.height
            if origin is not None:
                x, y = origin
        width, height = max(1, width // 2), max(1, height // 2)
        return x + width // 2, y + height // 2, width, height

    def toggle_fullscreen(self) -> None:
        if self.is_fullscreen():
            x, y, width, height = self._windowed_rect or self._default_windowed_rect()
            glfw.set_window_monitor(self._window, None, x, y, width, height, 0)
            logger.debug("Left fullscreen, restored {}x{}+{}+{}", width, height, x, y)
            return

        monitor = self.window_monitor()
        if monitor is None:
            monitor = self.primary_monitor()
        mode = self.video_mode(monitor) if monitor is not None else None
        if monitor is None or mode is None:
            logger.debug("No monitor to enter fullscreen on")
            return
        self._windowed_rect = self._window_rect()
        glfw.set_window_monitor(
            self._window, self._pointer(monitor), 0, 0, mode.width, mode.height, mode.refresh_rate
        )
        logger.debug("Entered fullscreen on monitor {}", monitor)

    def set_window_position(self, x: int, y: int) -> None:
        glfw.set_window_pos(self._window, x, y)
