"""Global configuration and constants for chart composition."""

from __future__ import annotations

import logging
import os
from typing import Final


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Narrower charts trip a degenerate layout in the drawing layer (axes collapse)
CHART_MIN_WIDTH: Final = 110
DEFAULT_CHART_HEIGHT: Final = 110
DEFAULT_DPI: Final = 100

NO_DATA_MESSAGE: Final = "No data available"

LEGEND_SWATCH_SHAPE: Final = "square"
LEGEND_LABEL_COLOR: Final = "white"
SELECTED_MOMENT_COLOR: Final = "gold"

# Outward offset (axes fraction) between stacked right-hand y axes
Y_AXIS_OFFSET: Final = 0.12

STRICT_ITEM_TYPES: Final = _env_flag("CHARTPANEL_STRICT_ITEM_TYPES")
LOG_LEVEL: Final = os.environ.get("CHARTPANEL_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    logger = logging.getLogger("chartpanel")
    resolved = logging.getLevelName(level.upper() if level else LOG_LEVEL)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logger.setLevel(resolved)
    return logger
