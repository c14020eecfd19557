"""Chart composition and its guard ladder.

``compose_chart`` turns the host's props into a ``ComposedChart`` (legend,
x axis, y axes, item drawings in draw order), an ``EmptyPlaceholder`` when no
item has any points, or None when there is no x axis to draw against.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence

from chartpanel.settings import CHART_MIN_WIDTH, Y_AXIS_OFFSET

from .derive import derive_legends, derive_y_axes
from .palette import DEFAULT_THEME
from .registry import ItemRendererRegistry, LineRenderer, item_registry
from .types import (
    AxisSpec,
    ChartItem,
    ComposedChart,
    EmptyPlaceholder,
    LegendBlock,
    LegendEntry,
    RenderResult,
    XAxisSpec,
    YAxis,
)

log = logging.getLogger(__name__)

__all__ = [
    "compose_chart",
    "default_render_legends",
    "default_render_x_axis",
    "default_render_y_axis",
    "effective_width",
    "has_data",
]


def effective_width(width: Optional[float], measured: float) -> float:
    """Explicit width wins unless falsy; never below CHART_MIN_WIDTH."""
    return max(CHART_MIN_WIDTH, width or measured)


def has_data(chart_items: Sequence[ChartItem]) -> bool:
    return any(len(item.points) > 0 for item in chart_items)


def default_render_legends(legends: List[LegendEntry], width: float) -> LegendBlock:
    return LegendBlock(entries=legends, x=width / 2, width=width)


def default_render_x_axis(label: str) -> AxisSpec:
    return AxisSpec(label=label)


def default_render_y_axis(axis: YAxis, index: int, count: int) -> AxisSpec:
    # First axis on the left, the rest stacked outward on the right
    if index == 0:
        return AxisSpec(label=axis.units, dependent=True, color=axis.color, units=axis.units)
    return AxisSpec(
        label=axis.units,
        dependent=True,
        color=axis.color,
        units=axis.units,
        placement="right",
        offset=(index - 1) * Y_AXIS_OFFSET,
    )


def compose_chart(
    width: float,
    height: float,
    chart_items: Sequence[ChartItem],
    x_axis: Optional[XAxisSpec],
    *,
    domain: Any = None,
    theme: Any = DEFAULT_THEME,
    container: Any = None,
    render_legends: Callable[[List[LegendEntry], float], Any] = default_render_legends,
    render_x_axis: Callable[[str], Any] = default_render_x_axis,
    render_y_axis: Callable[[YAxis, int, int], Any] = default_render_y_axis,
    render_line: LineRenderer | None = None,
    registry: ItemRendererRegistry | None = None,
) -> RenderResult:
    if not x_axis:
        return None
    if not has_data(chart_items):
        log.debug("no points across %d chart items; rendering placeholder", len(chart_items))
        return EmptyPlaceholder(height=height)

    registry = registry or item_registry
    y_axes = derive_y_axes(chart_items)
    drawings = [
        registry.render(item, chart_items, i, render_line=render_line)
        for i, item in enumerate(chart_items)
    ]
    return ComposedChart(
        width=width,
        height=height,
        legend=render_legends(derive_legends(chart_items), width),
        x_axis=render_x_axis(x_axis.units),
        y_axes=[render_y_axis(axis, i, len(y_axes)) for i, axis in enumerate(y_axes)],
        drawings=[d for d in drawings if d is not None],
        scale=x_axis.scale,
        domain=domain,
        theme=theme,
        container=container,
    )
