"""Shared fixtures: an in-memory windowing backend that records what happens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from remonitor.placement import VideoMode


@dataclass
class FakeMonitor:
    name: str
    x: int
    y: int
    width: int
    height: int


@dataclass
class FakeBackend:
    """Single window over a configurable set of monitors.

    ``history`` collects ``(fullscreen, position)`` snapshots after every
    command so tests can assert the sequence of window states.
    """

    screens: list[Optional[FakeMonitor]] = field(default_factory=list)
    primary: Optional[str] = None
    size: tuple[int, int] = (800, 600)
    position: tuple[int, int] = (0, 0)
    fullscreen: bool = False
    current: Optional[str] = None
    modes_missing: set[str] = field(default_factory=set)
    history: list[tuple[bool, tuple[int, int]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.history.append((self.fullscreen, self.position))

    def _by_name(self, name: str) -> FakeMonitor:
        for screen in self.screens:
            if screen is not None and screen.name == name:
                return screen
        raise KeyError(name)

    def monitors(self):
        return [s.name if s is not None else None for s in self.screens]

    def primary_monitor(self):
        return self.primary

    def monitor_position(self, monitor):
        screen = self._by_name(monitor)
        return screen.x, screen.y

    def video_mode(self, monitor):
        if monitor in self.modes_missing:
            return None
        screen = self._by_name(monitor)
        return VideoMode(screen.width, screen.height)

    def window_size(self):
        return self.size

    def window_monitor(self):
        if self.current is not None:
            return self.current
        wx, wy = self.position
        for screen in self.screens:
            if screen is None:
                continue
            if screen.x <= wx < screen.x + screen.width and screen.y <= wy < screen.y + screen.height:
                return screen.name
        return None

    def is_fullscreen(self):
        return self.fullscreen

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen
        self.history.append((self.fullscreen, self.position))

    def set_window_position(self, x, y):
        self.position = (x, y)
        self.history.append((self.fullscreen, self.position))


@pytest.fixture
def three_monitors() -> list[FakeMonitor]:
    return [
        FakeMonitor("left", 0, 0, 1920, 1080),
        FakeMonitor("middle", 1920, 0, 2560, 1440),
        FakeMonitor("right", 4480, 0, 1280, 1024),
    ]


@pytest.fixture
def backend(three_monitors) -> FakeBackend:
    return FakeBackend(screens=three_monitors, primary="left")


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("REMONITOR_CONFIG_DIR", str(tmp_path / "cfg"))
    return tmp_path / "cfg" / "remonitor.json"
