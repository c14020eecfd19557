"""Shared services for the chart host: event bus, locator, log capture."""

from __future__ import annotations

from .event_bus import ChartEvent, Event, EventBus, Subscription
from .service_locator import services


def get_event_bus() -> EventBus:
    """Return the shared bus, registering one on first use."""
    bus = services.try_get("event_bus")
    if bus is None:
        bus = EventBus()
        services.register("event_bus", bus)
    return bus


__all__ = ["ChartEvent", "Event", "EventBus", "Subscription", "get_event_bus", "services"]
