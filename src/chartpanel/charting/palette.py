"""Theme-aware chart palette.

Supplies the default chart theme (role -> colour) and ordinal series colours.
Hosts that build items with ``color_accessor(i)`` get live colour lookups:
after a ``ChartEvent.THEME_CHANGED`` the next render picks up the new palette
without rebuilding the items.

Roles:
 - background.plot / background.figure
 - axis.text / axis.line
 - grid.line
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping

from chartpanel.services import ChartEvent, EventBus, services

SERIES_FALLBACK = [
    "#4E79A7",
    "#F28E2B",
    "#E15759",
    "#76B7B2",
    "#59A14F",
    "#EDC948",
    "#B07AA1",
    "#FF9DA7",
]

DEFAULT_THEME: Mapping[str, str] = {
    "background.plot": "#2F353C",
    "background.figure": "#2F353C",
    "axis.text": "#FFFFFF",
    "axis.line": "#8A8F94",
    "grid.line": "#444B52",
}


@dataclass
class ChartPaletteManager:
    """Current theme roles plus series colours; refreshed on theme change."""

    _roles: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_THEME))
    _series_colors: List[str] = field(default_factory=lambda: list(SERIES_FALLBACK))

    def __post_init__(self) -> None:
        bus = services.try_get("event_bus")
        if isinstance(bus, EventBus):
            bus.subscribe(ChartEvent.THEME_CHANGED, self._on_theme_changed)

    # Public API ------------------------------------------------------
    def color_for_series(self, index: int) -> str:
        index = max(index, 0)
        return self._series_colors[index % len(self._series_colors)]

    def color_accessor(self, index: int) -> Callable[[], str]:
        return lambda: self.color_for_series(index)

    def theme(self) -> Dict[str, str]:
        return dict(self._roles)

    def apply(self, overrides: Mapping[str, str]) -> None:
        """Merge role overrides; ``series.N`` keys replace series colours."""
        for key, value in overrides.items():
            if key.startswith("series."):
                idx = int(key.split(".", 1)[1])
                if 0 <= idx < len(self._series_colors):
                    self._series_colors[idx] = value
            else:
                self._roles[key] = value

    def _on_theme_changed(self, evt) -> None:
        if isinstance(evt.payload, Mapping):
            self.apply(evt.payload)


def get_chart_palette_manager() -> ChartPaletteManager:
    mgr = services.try_get("chart_palette")
    if mgr is None:
        mgr = ChartPaletteManager()
        services.register("chart_palette", mgr)
    return mgr


__all__ = ["ChartPaletteManager", "DEFAULT_THEME", "SERIES_FALLBACK", "get_chart_palette_manager"]
