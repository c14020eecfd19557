"""Per-render view-model derivation (y axes and legend entries).

Both functions are pure over the current item list and query colours through
``get_color()`` on every call, so results must not be kept across renders.
"""

from __future__ import annotations

from typing import List, Sequence

from .types import ChartItem, LegendEntry, YAxis

__all__ = ["derive_y_axes", "derive_legends"]


def derive_y_axes(chart_items: Sequence[ChartItem]) -> List[YAxis]:
    """One axis per distinct unit, in first-seen order.

    The first item carrying a unit decides that axis's colour.
    """
    seen: set[str] = set()
    axes: List[YAxis] = []
    for item in chart_items:
        if item.units in seen:
            continue
        seen.add(item.units)
        axes.append(YAxis(units=item.units, color=item.get_color()))
    return axes


def derive_legends(chart_items: Sequence[ChartItem]) -> List[LegendEntry]:
    # Legend is per series, not per unit
    return [LegendEntry(name=item.name, color=item.get_color()) for item in chart_items]
