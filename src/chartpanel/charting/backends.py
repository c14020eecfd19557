"""Matplotlib drawing backend.

Realises a ``ComposedChart`` as a headless ``matplotlib.figure.Figure``; the
Qt layer wraps the figure in a canvas. Only this module draws with matplotlib; the
composition core never touches a Figure.

Layering follows the composed order: axes first, then drawings in item order
(later items on top via increasing zorder). Elements returned by host render
overrides that are not one of the core value types are drawn by calling them
as ``element(figure, axes_by_units)`` when callable, and ignored otherwise.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from matplotlib.figure import Figure
from matplotlib.patches import Patch

from chartpanel.settings import DEFAULT_DPI

from .responsive import apply_responsive_rules, legend_columns
from .types import (
    AxisSpec,
    ChartItemType,
    ComposedChart,
    DrawingOp,
    EmptyPlaceholder,
    LegendBlock,
)

log = logging.getLogger(__name__)

_AXIS_SCALES = {"linear", "log", "symlog", "logit"}
_EXPORT_FORMATS = {"png", "svg"}


def _color_kwargs(color: str | None) -> Dict[str, str]:
    # matplotlib rejects color=None on text artists
    return {"color": color} if color else {}


def _point_colors(op: DrawingOp) -> list[str]:
    highlight = op.highlight_color or op.color
    return [highlight if p.get("is_selected") else op.color for p in op.points]


class MatplotlibChartBackend:
    def __init__(self, dpi: int = DEFAULT_DPI) -> None:
        self.dpi = dpi

    def _new_figure(self, width: float, height: float) -> Figure:
        return Figure(figsize=(width / self.dpi, height / self.dpi), dpi=self.dpi)

    # --- composed chart ------------------------------------------------
    def draw(self, composed: ComposedChart) -> Figure:
        fig = self._new_figure(composed.width, composed.height)
        theme: Mapping[str, str] = composed.theme if isinstance(composed.theme, Mapping) else {}
        host = fig.add_subplot(111)
        axes_by_units: Dict[str, Any] = {}

        if isinstance(composed.x_axis, AxisSpec):
            host.set_xlabel(composed.x_axis.label, **_color_kwargs(theme.get("axis.text")))
        if composed.scale in _AXIS_SCALES:
            host.set_xscale(composed.scale)

        dependent = [a for a in composed.y_axes if isinstance(a, AxisSpec)]
        for i, spec in enumerate(dependent):
            ax = host if i == 0 else host.twinx()
            if ax is not host:
                self._place_axis(ax, spec)
            color = spec.color or theme.get("axis.text")
            ax.set_ylabel(spec.label, **_color_kwargs(color))
            if color:
                ax.tick_params(axis="y", colors=color)
            axes_by_units.setdefault(spec.units or spec.label, ax)

        for zorder, op in enumerate(composed.drawings, start=2):
            if isinstance(op, DrawingOp):
                self._draw_op(host, axes_by_units.get(op.units, host), op, zorder)
            elif callable(op):
                op(fig, axes_by_units)

        for element in (composed.legend, composed.x_axis, *composed.y_axes):
            if callable(element):
                element(fig, axes_by_units)

        if isinstance(composed.domain, Mapping):
            if composed.domain.get("x") is not None:
                host.set_xlim(*composed.domain["x"])
            if composed.domain.get("y") is not None:
                host.set_ylim(*composed.domain["y"])

        self._apply_theme(fig, theme)
        if isinstance(composed.legend, LegendBlock) and composed.legend.entries:
            self._draw_legend(fig, composed.legend)
        apply_responsive_rules(fig, composed.width)
        fig._cp_axes_by_units = axes_by_units  # type: ignore[attr-defined]
        return fig

    def _place_axis(self, ax, spec: AxisSpec) -> None:
        if spec.placement == "left":
            ax.yaxis.tick_left()
            ax.yaxis.set_label_position("left")
            ax.spines["left"].set_position(("axes", -spec.offset))
        else:
            ax.spines["right"].set_position(("axes", 1 + spec.offset))

    def _draw_op(self, host, ax, op: DrawingOp, zorder: int) -> None:
        xs = [p["x"] for p in op.points]
        if op.kind == ChartItemType.LINE.value:
            ys = [p["y"] for p in op.points]
            (line,) = ax.plot(xs, ys, color=op.color, label=op.name, zorder=zorder)
            line.set_gid(op.key)
        elif op.kind == ChartItemType.MOMENT_LINES.value:
            if xs:
                host.vlines(
                    xs, 0, 1,
                    transform=host.get_xaxis_transform(),
                    colors=_point_colors(op),
                    linewidth=1,
                    zorder=zorder,
                ).set_gid(op.key)
        elif op.kind == ChartItemType.MOMENT_POINTS.value:
            if not xs:
                return
            target = host if op.y_coords == "axes" else ax
            transform = host.get_xaxis_transform() if op.y_coords == "axes" else ax.transData
            target.scatter(
                xs,
                [p["y"] for p in op.points],
                c=_point_colors(op),
                edgecolors="white",
                transform=transform,
                zorder=zorder,
            ).set_gid(op.key)
        else:
            log.debug("no matplotlib drawing for op kind %r", op.kind)

    def _draw_legend(self, fig: Figure, legend: LegendBlock) -> None:
        handles = [Patch(facecolor=e.color, label=e.name) for e in legend.entries]
        fig.legend(
            handles=handles,
            loc="upper center",
            ncol=legend_columns(legend.width, len(handles)) if legend.orientation == "horizontal" else 1,
            frameon=False,
            labelcolor=[e.label_color for e in legend.entries],
        )

    def _apply_theme(self, fig: Figure, theme: Mapping[str, str]) -> None:
        if "background.figure" in theme:
            fig.set_facecolor(theme["background.figure"])
        for ax in fig.axes:
            if "background.plot" in theme and ax is fig.axes[0]:
                ax.set_facecolor(theme["background.plot"])
            if "axis.text" in theme:
                ax.tick_params(axis="x", colors=theme["axis.text"])
            if "axis.line" in theme:
                for spine in ax.spines.values():
                    spine.set_color(theme["axis.line"])
        if "grid.line" in theme and fig.axes:
            fig.axes[0].grid(True, color=theme["grid.line"], linewidth=0.5)

    # --- empty state -------------------------------------------------
    def draw_placeholder(self, placeholder: EmptyPlaceholder, width: float) -> Figure:
        fig = self._new_figure(width, placeholder.height)
        fig.text(0.5, 0.5, placeholder.message, ha="center", va="center")
        return fig

    # --- export ------------------------------------------------------
    def export_figure(self, fig: Figure, path: str, *, format: str = "png", dpi: int | None = None) -> None:
        fmt = format.lower()
        if fmt not in _EXPORT_FORMATS:
            raise ValueError("format must be 'png' or 'svg'")
        fig.savefig(path, format=fmt, dpi=(dpi or self.dpi) if fmt == "png" else None)
