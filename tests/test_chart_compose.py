"""Tests for chart composition and its empty-state guard."""

from __future__ import annotations

import pytest

from chartpanel.charting import (
    AxisSpec,
    ComposedChart,
    DrawingOp,
    EmptyPlaceholder,
    LegendBlock,
    XAxisSpec,
    compose_chart,
    effective_width,
)
from chartpanel.charting.palette import DEFAULT_THEME

X = XAxisSpec(units="date", scale="time")


def _example_items(make_item):
    return [
        make_item(units="m", name="A", points=[{"x": 0, "y": 1}]),
        make_item(units="m", name="B", points=[{"x": 0, "y": 2}]),
        make_item(type="momentLines", units="m", name="C", points=[{"x": 0}]),
    ]


def test_shared_unit_example(make_item):
    composed = compose_chart(400, 110, _example_items(make_item), X)
    assert isinstance(composed, ComposedChart)
    assert [a.label for a in composed.y_axes] == ["m"]
    assert len(composed.legend.entries) == 3
    assert [d.kind for d in composed.drawings] == ["line", "line", "momentLines"]
    assert composed.scale == "time"


def test_missing_x_axis_renders_nothing(make_item):
    assert compose_chart(400, 110, _example_items(make_item), None) is None
    assert compose_chart(400, 110, [], None) is None


def test_all_empty_points_render_placeholder(make_item):
    items = [make_item(name="A"), make_item(type="momentPoints", name="B")]
    result = compose_chart(400, 250, items, X)
    assert result == EmptyPlaceholder(height=250)
    assert result.message == "No data available"


def test_no_items_render_placeholder():
    assert isinstance(compose_chart(400, 110, [], X), EmptyPlaceholder)


def test_unknown_type_counts_for_axes_and_legend_but_not_drawings(make_item):
    items = [
        make_item(units="m", name="A", points=[{"x": 0, "y": 1}]),
        make_item(type="unknownKind", units="s", name="U", points=[{"x": 1, "y": 1}]),
    ]
    composed = compose_chart(400, 110, items, X)
    assert [a.label for a in composed.y_axes] == ["m", "s"]
    assert [e.name for e in composed.legend.entries] == ["A", "U"]
    assert [d.name for d in composed.drawings] == ["A"]


def test_unknown_type_alone_still_counts_as_data(make_item):
    items = [make_item(type="unknownKind", points=[{"x": 0, "y": 1}])]
    composed = compose_chart(400, 110, items, X)
    assert isinstance(composed, ComposedChart)
    assert composed.drawings == []


def test_default_legend_and_axes(make_item):
    items = [
        make_item(units="m", name="A", points=[{"x": 0, "y": 1}], color="red"),
        make_item(units="kW", name="B", points=[{"x": 0, "y": 1}], color="blue"),
        make_item(units="%", name="C", points=[{"x": 0, "y": 1}], color="green"),
    ]
    composed = compose_chart(300, 110, items, X)
    assert composed.legend == LegendBlock(entries=composed.legend.entries, x=150, width=300)
    assert composed.x_axis == AxisSpec(label="date")
    left, right1, right2 = composed.y_axes
    assert (left.placement, left.color, left.dependent) == ("left", "red", True)
    assert (right1.placement, right1.offset) == ("right", 0.0)
    assert right2.placement == "right" and right2.offset == pytest.approx(0.12)


def test_overrides_receive_index_and_count(make_item):
    items = [
        make_item(units="m", points=[{"x": 0, "y": 1}]),
        make_item(units="kW", points=[{"x": 0, "y": 1}]),
    ]
    composed = compose_chart(
        500,
        110,
        items,
        X,
        render_legends=lambda legends, width: ("legend", len(legends), width),
        render_x_axis=lambda label: ("x", label),
        render_y_axis=lambda axis, i, n: ("y", axis.units, i, n),
    )
    assert composed.legend == ("legend", 2, 500)
    assert composed.x_axis == ("x", "date")
    assert composed.y_axes == [("y", "m", 0, 2), ("y", "kW", 1, 2)]


def test_drawings_keep_item_order_and_index(make_item):
    items = [
        make_item(type="momentPoints", name="P", points=[{"x": 0}]),
        make_item(name="L", points=[{"x": 0, "y": 1}]),
    ]
    composed = compose_chart(400, 110, items, X)
    assert [(d.name, d.index) for d in composed.drawings] == [("P", 0), ("L", 1)]
    assert all(isinstance(d, DrawingOp) for d in composed.drawings)


def test_pass_through_props_untouched(make_item):
    domain = {"x": (0, 10)}
    theme = object()
    container = object()
    composed = compose_chart(
        400, 110, _example_items(make_item), X, domain=domain, theme=theme, container=container
    )
    assert composed.domain is domain
    assert composed.theme is theme
    assert composed.container is container


def test_theme_defaults_to_chart_theme(make_item):
    composed = compose_chart(400, 110, _example_items(make_item), X)
    assert composed.theme is DEFAULT_THEME


@pytest.mark.parametrize(
    "supplied,measured,expected",
    [
        (None, 0, 110),
        (0, 0, 110),
        (None, 50, 110),
        (None, 640, 640),
        (0, 640, 640),
        (300, 640, 300),
        (90, 640, 110),
        (800, 0, 800),
    ],
)
def test_effective_width_floor(supplied, measured, expected):
    assert effective_width(supplied, measured) == expected
