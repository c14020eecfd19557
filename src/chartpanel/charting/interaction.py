"""Hover tooltips for composed charts.

``PointTooltipContainer`` is meant to be passed as a chart's ``container``
prop. The Qt host calls it with the canvas and the composed chart once the
figure is drawn; it then annotates the point nearest to the cursor with the
series name and units carried on each line point.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional, Sequence

import numpy as np

from .strategies import x_as_float
from .types import ChartItemType, ComposedChart, DrawingOp

__all__ = ["PointTooltipContainer", "format_tooltip", "nearest_annotated_point"]


def nearest_annotated_point(
    drawings: Sequence[Any], x: float, y: float, *, max_distance: float = math.inf
) -> Optional[Dict[str, Any]]:
    """Closest line point to (x, y) in data space, or None.

    Only line drawings are considered; their points carry ``units``/``name``.
    """
    best: Optional[Dict[str, Any]] = None
    best_dist = max_distance
    for op in drawings:
        if not isinstance(op, DrawingOp) or op.kind != ChartItemType.LINE.value or not op.points:
            continue
        xs = np.asarray([x_as_float(p["x"]) for p in op.points])
        ys = np.asarray([float(p["y"]) for p in op.points])
        dists = np.hypot(xs - x, ys - y)
        i = int(dists.argmin())
        if dists[i] < best_dist:
            best_dist = float(dists[i])
            best = op.points[i]
    return best


def format_tooltip(point: Dict[str, Any]) -> str:
    return f"{point['name']}\n{point['y']} {point['units']}"


class PointTooltipContainer:
    """Hover annotation wiring; ``pixel_radius`` bounds how far the cursor may be."""

    def __init__(self, pixel_radius: float = 12) -> None:
        self.pixel_radius = pixel_radius

    def __call__(self, canvas, composed: ComposedChart) -> None:  # pragma: no cover - GUI wiring
        fig = canvas.figure
        axes_by_units = getattr(fig, "_cp_axes_by_units", {})
        if not axes_by_units:
            return
        top = fig.axes[-1]
        annot = top.annotate(
            "",
            xy=(0, 0),
            xycoords="figure pixels",
            xytext=(10, 10),
            textcoords="offset points",
            bbox={"boxstyle": "round", "fc": "w", "alpha": 0.8},
        )
        annot.set_visible(False)

        def _hide():
            if annot.get_visible():
                annot.set_visible(False)
                canvas.draw_idle()

        def _update(event):
            if event.inaxes is None:
                _hide()
                return
            found = None
            for units, ax in axes_by_units.items():
                dx, dy = ax.transData.inverted().transform((event.x, event.y))
                point = nearest_annotated_point(composed.drawings_for(units), dx, dy)
                if point is None:
                    continue
                px, py = ax.transData.transform((x_as_float(point["x"]), float(point["y"])))
                dist = math.hypot(px - event.x, py - event.y)
                if dist <= self.pixel_radius and (found is None or dist < found[0]):
                    found = (dist, point, (px, py))
            if found is None:
                _hide()
                return
            _dist, point, xy = found
            annot.xy = xy
            annot.set_text(format_tooltip(point))
            annot.set_visible(True)
            canvas.draw_idle()

        canvas.mpl_connect("motion_notify_event", _update)
