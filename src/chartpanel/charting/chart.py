"""Chart: the multi-series, unit-grouped chart renderer.

Holds the host-supplied props and renders them at whatever width its
container currently has. Y axes and legend entries are recomputed on every
access since item colours are live accessors.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence

from chartpanel.services import Subscription
from chartpanel.settings import DEFAULT_CHART_HEIGHT

from .compose import (
    compose_chart,
    default_render_legends,
    default_render_x_axis,
    default_render_y_axis,
    effective_width,
)
from .derive import derive_legends, derive_y_axes
from .palette import DEFAULT_THEME
from .registry import ItemRendererRegistry, LineRenderer
from .sized import ResponsiveWidthProvider
from .types import ChartItem, LegendEntry, RenderResult, XAxisSpec, YAxis

__all__ = ["Chart"]


class Chart:
    def __init__(
        self,
        chart_items: Sequence[ChartItem],
        x_axis: Optional[XAxisSpec],
        *,
        width: Optional[float] = None,
        height: float = DEFAULT_CHART_HEIGHT,
        domain: Any = None,
        container: Any = None,
        theme: Any = DEFAULT_THEME,
        render_legends: Callable[[List[LegendEntry], float], Any] = default_render_legends,
        render_x_axis: Callable[[str], Any] = default_render_x_axis,
        render_y_axis: Callable[[YAxis, int, int], Any] = default_render_y_axis,
        render_line: LineRenderer | None = None,
        registry: ItemRendererRegistry | None = None,
    ) -> None:
        self.chart_items = chart_items
        self.x_axis = x_axis
        self.width = width
        self.height = height
        self.domain = domain
        self.container = container
        self.theme = theme
        self.render_legends = render_legends
        self.render_x_axis = render_x_axis
        self.render_y_axis = render_y_axis
        self.render_line = render_line
        self.registry = registry

    @property
    def y_axes(self) -> List[YAxis]:
        return derive_y_axes(self.chart_items)

    @property
    def legends(self) -> List[LegendEntry]:
        return derive_legends(self.chart_items)

    def render(self, parent_width: float = 0) -> RenderResult:
        return compose_chart(
            effective_width(self.width, parent_width),
            self.height,
            self.chart_items,
            self.x_axis,
            domain=self.domain,
            theme=self.theme,
            container=self.container,
            render_legends=self.render_legends,
            render_x_axis=self.render_x_axis,
            render_y_axis=self.render_y_axis,
            render_line=self.render_line,
            registry=self.registry,
        )

    def follow(
        self, provider: ResponsiveWidthProvider, sink: Callable[[RenderResult], None]
    ) -> Subscription:
        """Re-render into ``sink`` now and whenever the provider's width changes."""
        return provider.observe(lambda w: sink(self.render(w)))
