"""Service locator for chart-wide shared objects.

Holds the process-wide event bus ("event_bus"), palette manager
("chart_palette") and logging service ("logging_service") so the chart core
can find them without threading every collaborator through each constructor.
Anything looked up here can also be passed explicitly; tests use
``override_context`` to swap instances temporarily.

Usage:
    from chartpanel.services.service_locator import services
    services.register("event_bus", EventBus())
    bus = services.try_get("event_bus")
"""

from __future__ import annotations

from contextlib import contextmanager
from threading import RLock
from typing import Any, Dict, Generator

__all__ = ["ServiceLocator", "services", "ServiceAlreadyRegisteredError"]

_MISSING = object()


class ServiceAlreadyRegisteredError(RuntimeError):
    """Raised when registering an existing key without allow_override."""


class ServiceLocator:
    """Thread-safe keyed registry of shared chart services."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._values: Dict[str, Any] = {}

    def register(self, key: str, value: Any, *, allow_override: bool = False) -> None:
        with self._lock:
            if key in self._values and not allow_override:
                raise ServiceAlreadyRegisteredError(f"Service '{key}' already registered")
            self._values[key] = value

    def try_get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def unregister(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    @contextmanager
    def override_context(self, **overrides: Any) -> Generator[None, None, None]:
        """Swap services for the duration of the block, restoring on exit."""
        with self._lock:
            previous = {key: self._values.get(key, _MISSING) for key in overrides}
            self._values.update(overrides)
        try:
            yield
        finally:
            with self._lock:
                for key, prior in previous.items():
                    if prior is _MISSING:
                        self._values.pop(key, None)
                    else:
                        self._values[key] = prior


services = ServiceLocator()
