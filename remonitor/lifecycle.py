"""Lifecycle signals and the restore/capture hooks bound to them."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable

from loguru import logger

from remonitor.placement import MonitorPlacer, WindowBackend
from remonitor.store import ConfigStore

STARTED = "started"
STOPPING = "stopping"

EventHandler = Callable[[object], None]


class LifecycleHub:
    """In-process pub/sub for the two application lifecycle signals.

    Each signal is delivered at most once per run.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._fired: set[str] = set()

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        self._handlers[event_name].append(handler)

    def publish(self, event_name: str, payload: object = None) -> None:
        if event_name in self._fired:
            logger.debug("Lifecycle event {!r} already fired; ignoring", event_name)
            return
        self._fired.add(event_name)
        for handler in list(self._handlers.get(event_name, [])):
            handler(payload)

    def fired(self, event_name: str) -> bool:
        return event_name in self._fired


class ReMonitor:
    """Restores placement on start and records it on stop."""

    def __init__(self, store: ConfigStore, placer: MonitorPlacer) -> None:
        self.store = store
        self.placer = placer

    def attach(self, hub: LifecycleHub) -> None:
        hub.subscribe(STARTED, self.on_started)
        hub.subscribe(STOPPING, self.on_stopping)

    def on_started(self, _payload: object = None) -> None:
        config = self.store.load()
        try:
            self.placer.restore(config)
        except Exception as exc:
            logger.warning("Failed to restore window placement: {}", exc)

    def on_stopping(self, _payload: object = None) -> None:
        try:
            config = self.placer.capture()
        except Exception as exc:
            logger.warning("Failed to read window placement: {}", exc)
            return
        self.store.save(config)


def install(hub: LifecycleHub, backend: WindowBackend, store: ConfigStore | None = None) -> ReMonitor:
    """Wire placement persistence for ``backend`` onto ``hub``."""
    remonitor = ReMonitor(store or ConfigStore(), MonitorPlacer(backend))
    remonitor.attach(hub)
    return remonitor
