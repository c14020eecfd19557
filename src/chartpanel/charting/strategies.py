"""Built-in drawing strategies, one per chart item type.

A strategy only decides what to draw for a single item (points, colours,
coordinate space); turning a ``DrawingOp`` into pixels is the backend's job.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from matplotlib.dates import date2num

from chartpanel.settings import SELECTED_MOMENT_COLOR

from .types import ChartItem, ChartItemType, DrawingOp, Point

__all__ = [
    "render_line",
    "render_moment_lines",
    "render_moment_points",
    "find_basis_item",
    "x_as_float",
]

# Moment points without a basis series sit at mid-height of the plot
_UNSNAPPED_Y = 0.5


def x_as_float(x: Any) -> float:
    """Numeric position of an x value; dates use matplotlib date numbers."""
    if isinstance(x, (datetime, date, np.datetime64)):
        return float(date2num(x))
    return float(x)


def render_line(item: ChartItem, index: int) -> DrawingOp:
    color = item.get_color()
    points = [{**p, "units": item.units, "name": item.name} for p in item.points]
    return DrawingOp(
        kind=ChartItemType.LINE.value,
        index=index,
        units=item.units,
        name=item.name,
        points=points,
        color=color,
        label_color=color,
    )


def render_moment_lines(item: ChartItem, index: int) -> DrawingOp:
    """Vertical markers spanning the plot height at each moment."""
    points = [{**p, "y": 1.0} for p in item.points]
    return DrawingOp(
        kind=ChartItemType.MOMENT_LINES.value,
        index=index,
        units=item.units,
        name=item.name,
        points=points,
        color=item.get_color(),
        highlight_color=SELECTED_MOMENT_COLOR,
        y_coords="axes",
    )


def find_basis_item(item: ChartItem, chart_items: Sequence[ChartItem]) -> Optional[ChartItem]:
    """First non-empty line series sharing the item's units."""
    for other in chart_items:
        if other is item:
            continue
        if other.type == ChartItemType.LINE.value and other.units == item.units and other.points:
            return other
    return None


def _snap(points: Sequence[Point], basis: Sequence[Point]) -> List[Dict[str, Any]]:
    basis_x = np.asarray([x_as_float(b["x"]) for b in basis], dtype=float)
    snapped: List[Dict[str, Any]] = []
    for p in points:
        nearest = basis[int(np.abs(basis_x - x_as_float(p["x"])).argmin())]
        snapped.append({**p, "y": nearest["y"]})
    return snapped


def render_moment_points(
    item: ChartItem, chart_items: Sequence[ChartItem], index: int
) -> DrawingOp:
    """Discrete markers, placed on the value of a sibling line where one exists."""
    basis = find_basis_item(item, chart_items)
    if basis is not None:
        points = _snap(item.points, basis.points)
        y_coords = "data"
    else:
        points = [{**p, "y": _UNSNAPPED_Y} for p in item.points]
        y_coords = "axes"
    return DrawingOp(
        kind=ChartItemType.MOMENT_POINTS.value,
        index=index,
        units=item.units,
        name=item.name,
        points=points,
        color=item.get_color(),
        highlight_color=SELECTED_MOMENT_COLOR,
        y_coords=y_coords,
    )
