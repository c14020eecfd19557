"""Responsive width provider.

Owns the measured container element and its last measured width, and
republishes that width to observers whenever a viewport resize changes it.

Lifecycle:
    provider.attach_element(widget)   # anything exposing width()
    provider.mount()                  # subscribe to VIEWPORT_RESIZED + measure once
    ...
    provider.unmount()                # release the subscription

``with provider:`` does the mount/unmount pair as a scoped resource.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Protocol

from chartpanel.services import ChartEvent, Event, EventBus, Subscription, get_event_bus

log = logging.getLogger(__name__)

__all__ = ["MeasurableElement", "ResponsiveWidthProvider"]

WidthListener = Callable[[float], None]


class MeasurableElement(Protocol):  # pragma: no cover - structural only
    def width(self) -> float: ...


class ResponsiveWidthProvider:
    def __init__(self, bus: EventBus | None = None) -> None:
        self._bus = bus or get_event_bus()
        self._element: Optional[MeasurableElement] = None
        self._width: float = 0
        self._resize_sub: Optional[Subscription] = None
        self._listeners: List[Subscription] = []

    # State ------------------------------------------------------------
    @property
    def width(self) -> float:
        return self._width

    @property
    def element(self) -> Optional[MeasurableElement]:
        return self._element

    @property
    def mounted(self) -> bool:
        return self._resize_sub is not None

    def attach_element(self, element: Optional[MeasurableElement]) -> None:
        self._element = element

    # Lifecycle --------------------------------------------------------
    def mount(self) -> None:
        if self._resize_sub is not None:
            return
        self._resize_sub = self._bus.subscribe(ChartEvent.VIEWPORT_RESIZED, self._on_resize)
        # A resize may never arrive before first paint
        self.update_width()

    def unmount(self) -> None:
        if self._resize_sub is None:
            return
        self._bus.unsubscribe(self._resize_sub)
        self._resize_sub = None

    def __enter__(self) -> "ResponsiveWidthProvider":
        self.mount()
        return self

    def __exit__(self, *exc: Any) -> None:
        self.unmount()

    # Measurement ------------------------------------------------------
    def _on_resize(self, _evt: Event) -> None:
        self.update_width()

    def update_width(self) -> None:
        """Re-measure the element; ignored until mounted and after unmount."""
        if self._element is None or self._resize_sub is None:
            return
        width = float(self._element.width())
        if width == self._width:
            return
        log.debug("container width %s -> %s", self._width, width)
        self._width = width
        for sub in list(self._listeners):
            if sub.active:
                sub.handler(width)
        self._bus.publish(ChartEvent.WIDTH_CHANGED, {"object": self, "width": width})

    # Observation ------------------------------------------------------
    def observe(self, listener: WidthListener) -> Subscription:
        """Call ``listener(width)`` now and after every width change."""
        sub = Subscription(event=ChartEvent.WIDTH_CHANGED.value, handler=listener, once=False)
        self._listeners.append(sub)
        listener(self._width)
        return sub

    def release(self, sub: Subscription) -> None:
        sub.cancel()
        self._listeners = [s for s in self._listeners if s is not sub]

    def render(self, child: Callable[[float], Any]) -> Any:
        return child(self._width)
