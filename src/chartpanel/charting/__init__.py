"""Unit-grouped, multi-series chart core.

The host supplies chart items (series with a drawing-type tag, units, name,
points and a colour accessor). The core groups series onto one y axis per
unit, derives legend entries, dispatches each item to its drawing strategy
and composes the result at the container's current width:

    provider = ResponsiveWidthProvider()
    provider.attach_element(widget)
    chart = Chart(items, XAxisSpec(units="date", scale="time"))
    chart.follow(provider, sink)
    provider.mount()

Drawing itself is delegated to ``MatplotlibChartBackend``.
"""

from .backends import MatplotlibChartBackend  # noqa: F401
from .chart import Chart  # noqa: F401
from .compose import compose_chart, effective_width  # noqa: F401
from .derive import derive_legends, derive_y_axes  # noqa: F401
from .registry import (  # noqa: F401
    ItemRendererRegistry,
    UnknownChartItemTypeError,
    create_item_registry,
    item_registry,
    register_item_type,
    render_item,
)
from .sized import ResponsiveWidthProvider  # noqa: F401
from .types import (  # noqa: F401
    AxisSpec,
    ChartItem,
    ChartItemType,
    ComposedChart,
    DrawingOp,
    EmptyPlaceholder,
    LegendBlock,
    LegendEntry,
    SeriesItem,
    XAxisSpec,
    YAxis,
)
