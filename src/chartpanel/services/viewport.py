"""Viewport resize notification (Qt glue).

Translates Qt resize events of a host window into
``ChartEvent.VIEWPORT_RESIZED`` publications on the EventBus, which is the
only resize signal the headless chart core listens to.

Each watched window gets its own event filter; ``release`` removes it again so
no filter outlives the chart panel that asked for it.
"""

from __future__ import annotations

import logging
from typing import Dict

from PyQt6.QtCore import QEvent, QObject

from .event_bus import ChartEvent, EventBus

log = logging.getLogger(__name__)

__all__ = ["ViewportResizeNotifier"]


class _ResizeFilter(QObject):  # pragma: no cover - trivial Qt glue
    def __init__(self, parent: QObject, notifier: "ViewportResizeNotifier"):
        super().__init__(parent)
        self._notifier = notifier

    def eventFilter(self, watched, event):  # type: ignore[override]
        if event.type() == QEvent.Type.Resize:
            self._notifier.notify(watched)
        return False


class ViewportResizeNotifier:
    """Publishes resize signals for watched top-level windows."""

    def __init__(self, bus: EventBus):
        self._bus = bus
        self._filters: Dict[int, _ResizeFilter] = {}

    def watch(self, window: QObject) -> None:
        wid = id(window)
        if wid in self._filters:
            return
        filt = _ResizeFilter(window, self)
        window.installEventFilter(filt)
        self._filters[wid] = filt

    def release(self, window: QObject) -> None:
        filt = self._filters.pop(id(window), None)
        if filt is None:
            return
        window.removeEventFilter(filt)
        filt.deleteLater()

    def watching(self, window: QObject) -> bool:
        return id(window) in self._filters

    def notify(self, window) -> None:
        size = window.size()
        log.debug("viewport resized to %sx%s", size.width(), size.height())
        self._bus.publish(
            ChartEvent.VIEWPORT_RESIZED,
            {"object": window, "width": size.width(), "height": size.height()},
        )
