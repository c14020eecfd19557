"""Chart export helper.

Accepts either a matplotlib figure or a Qt canvas wrapping one, so callers
holding a ChartWidget's canvas do not need to unwrap it themselves.
"""
from __future__ import annotations

from .backends import MatplotlibChartBackend


def export_chart(chart, path: str, *, format: str = "png", dpi: int = 120) -> None:
    """Write a rendered chart to ``path``.

    Args:
        chart: Figure, or a canvas exposing ``.figure``.
        path: Destination file path (existing directory required).
        format: 'png' or 'svg'.
        dpi: Raster resolution for PNG.
    """
    fig = getattr(chart, "figure", chart)
    MatplotlibChartBackend().export_figure(fig, path, format=format, dpi=dpi)
