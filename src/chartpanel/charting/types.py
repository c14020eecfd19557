"""Core charting types.

Chart items are supplied by the host and only ever read here. Everything else
in this module is a derived, per-render value object describing *what* the
drawing layer has to draw.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence, Union

from chartpanel.settings import LEGEND_LABEL_COLOR, LEGEND_SWATCH_SHAPE, NO_DATA_MESSAGE

Point = Mapping[str, Any]


class ChartItemType(str, Enum):
    LINE = "line"
    MOMENT_LINES = "momentLines"
    MOMENT_POINTS = "momentPoints"


class ChartItem(Protocol):  # pragma: no cover - structural only
    """One data series plus its drawing-type tag and colour accessor."""

    type: str
    units: str
    name: str
    points: Sequence[Point]

    def get_color(self) -> str: ...


@dataclass
class SeriesItem:
    """Plain ChartItem implementation for hosts without their own item model.

    Attributes:
        type: Drawing type tag ('line', 'momentLines', 'momentPoints', ...).
        units: Measurement unit; items with equal units share a y axis.
        name: Legend / tooltip label.
        points: Point mappings, at least ``x`` (and ``y`` for lines).
        color: Fixed colour, or a zero-argument callable returning one.
    """

    type: str
    units: str
    name: str
    points: Sequence[Point] = field(default_factory=list)
    color: str | Callable[[], str] = "#4E79A7"

    def get_color(self) -> str:
        return self.color() if callable(self.color) else self.color


@dataclass(frozen=True)
class XAxisSpec:
    units: str
    scale: Optional[str] = None


@dataclass(frozen=True)
class YAxis:
    units: str
    color: str


@dataclass(frozen=True)
class LegendEntry:
    name: str
    color: str
    symbol_type: str = LEGEND_SWATCH_SHAPE
    label_color: str = LEGEND_LABEL_COLOR


@dataclass(frozen=True)
class LegendBlock:
    entries: List[LegendEntry]
    x: float
    width: float
    orientation: str = "horizontal"
    center_title: bool = True


@dataclass(frozen=True)
class AxisSpec:
    """One axis the drawing layer should render.

    ``dependent`` axes carry values (y); the independent axis is x.
    ``units`` ties a dependent axis to the series drawn against it;
    ``placement``/``offset`` position stacked dependent axes.
    """

    label: str
    dependent: bool = False
    color: Optional[str] = None
    units: Optional[str] = None
    placement: str = "left"
    offset: float = 0.0


@dataclass(frozen=True)
class DrawingOp:
    """Drawing instruction for one chart item.

    ``y_coords`` is 'data' when point y values are in the units' value space
    and 'axes' when they are fractions of the plot height.
    """

    kind: str
    index: int
    units: str
    name: str
    points: List[Dict[str, Any]]
    color: str
    label_color: Optional[str] = None
    highlight_color: Optional[str] = None
    y_coords: str = "data"

    @property
    def key(self) -> str:
        return f"{self.kind}-{self.index}"


@dataclass(frozen=True)
class EmptyPlaceholder:
    height: float
    message: str = NO_DATA_MESSAGE


@dataclass
class ComposedChart:
    """Everything needed to draw one chart, layered bottom to top."""

    width: float
    height: float
    legend: Any
    x_axis: Any
    y_axes: List[Any]
    drawings: List[Any]
    scale: Optional[str] = None
    domain: Any = None
    theme: Any = None
    container: Any = None

    def drawings_for(self, units: str) -> List[DrawingOp]:
        return [d for d in self.drawings if isinstance(d, DrawingOp) and d.units == units]


RenderResult = Union[ComposedChart, EmptyPlaceholder, None]
