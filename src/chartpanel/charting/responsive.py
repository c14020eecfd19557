"""Responsive legend layout.

Rules:
    - The legend wraps into as many columns as fit the chart width, each
      column budgeted LEGEND_COLUMN_WIDTH px, at least one column.
    - X tick labels are thinned to every second tick when the chart is narrow
      and the axis carries more than MAX_XTICKS_DENSE ticks.

The decisions are attached to the figure as ``_cp_responsive`` so callers can
inspect them without re-deriving.
"""

from __future__ import annotations

from typing import Any, Dict

LEGEND_COLUMN_WIDTH = 120  # px per legend entry column
NARROW_WIDTH = 450  # px; below this dense x ticks are thinned
MAX_XTICKS_DENSE = 14


def legend_columns(width: float, entries: int) -> int:
    if entries <= 0:
        return 1
    return max(1, min(entries, int(width // LEGEND_COLUMN_WIDTH)))


def apply_responsive_rules(fig: Any, width: float) -> Dict[str, Any]:
    meta: Dict[str, Any] = {"x_ticks_reduced": False}
    if width < NARROW_WIDTH and fig.axes:
        ax = fig.axes[0]
        ticks = ax.get_xticks()
        if len(ticks) > MAX_XTICKS_DENSE:
            ax.set_xticks(ticks[::2])
            meta["x_ticks_reduced"] = True
    fig._cp_responsive = meta  # type: ignore[attr-defined]
    return meta
