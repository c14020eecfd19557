"""Tests for nearest-point lookup behind hover tooltips."""

from __future__ import annotations

from datetime import datetime

from matplotlib.dates import date2num

from chartpanel.charting import XAxisSpec, compose_chart
from chartpanel.charting.interaction import format_tooltip, nearest_annotated_point


def _drawings(make_item):
    items = [
        make_item(units="m", name="Level", points=[{"x": 0, "y": 0}, {"x": 10, "y": 10}]),
        make_item(units="m", name="Depth", points=[{"x": 5, "y": 2}]),
        make_item(type="momentLines", units="m", name="Alarms", points=[{"x": 6}]),
    ]
    return compose_chart(400, 110, items, XAxisSpec(units="t"), render_legends=lambda *_: None).drawings


def test_nearest_point_attributed_to_series(make_item):
    point = nearest_annotated_point(_drawings(make_item), 5.5, 2.5)
    assert (point["name"], point["units"]) == ("Depth", "m")


def test_moment_drawings_ignored(make_item):
    point = nearest_annotated_point(_drawings(make_item), 6, 1)
    assert point["name"] in {"Level", "Depth"}


def test_max_distance_limits_match(make_item):
    assert nearest_annotated_point(_drawings(make_item), 100, 100, max_distance=1) is None


def test_datetime_points(make_item):
    t = datetime(2024, 3, 1)
    items = [make_item(name="T", points=[{"x": t, "y": 4}])]
    drawings = compose_chart(400, 110, items, XAxisSpec(units="date")).drawings
    point = nearest_annotated_point(drawings, date2num(t), 4)
    assert point["x"] == t


def test_format_tooltip():
    assert format_tooltip({"name": "Level", "y": 3, "units": "m"}) == "Level\n3 m"
