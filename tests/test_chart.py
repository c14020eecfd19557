"""Tests for the Chart renderer bound to a width provider."""

from __future__ import annotations

from chartpanel.charting import (
    Chart,
    ComposedChart,
    EmptyPlaceholder,
    ResponsiveWidthProvider,
    XAxisSpec,
)
from chartpanel.charting.palette import DEFAULT_THEME
from chartpanel.services import ChartEvent


class _FakeElement:
    def __init__(self, width):
        self.w = width

    def width(self):
        return self.w


def _items(make_item):
    return [
        make_item(units="m", name="A", points=[{"x": 0, "y": 1}]),
        make_item(units="kW", name="B", points=[{"x": 0, "y": 2}]),
    ]


def test_defaults(make_item):
    chart = Chart(_items(make_item), XAxisSpec(units="time"))
    assert chart.height == 110
    assert chart.theme is DEFAULT_THEME
    result = chart.render()
    assert isinstance(result, ComposedChart)
    assert result.width == 110  # measured 0, floor applies


def test_y_axes_and_legends_properties(make_item):
    chart = Chart(_items(make_item), XAxisSpec(units="time"))
    assert [a.units for a in chart.y_axes] == ["m", "kW"]
    assert [e.name for e in chart.legends] == ["A", "B"]


def test_explicit_width_wins_over_measured(make_item):
    chart = Chart(_items(make_item), XAxisSpec(units="time"), width=250)
    assert chart.render(900).width == 250


def test_height_reaches_placeholder(make_item):
    chart = Chart([make_item()], XAxisSpec(units="time"), height=222)
    assert chart.render(500) == EmptyPlaceholder(height=222)


def test_follow_rerenders_on_resize(bus, make_item):
    el = _FakeElement(400)
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(el)
    chart = Chart(_items(make_item), XAxisSpec(units="time"))
    rendered = []
    chart.follow(provider, rendered.append)
    provider.mount()
    el.w = 60
    bus.publish(ChartEvent.VIEWPORT_RESIZED)
    assert [r.width for r in rendered] == [110, 400, 110]


def test_follow_stops_after_unmount(bus, make_item):
    el = _FakeElement(400)
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(el)
    chart = Chart(_items(make_item), XAxisSpec(units="time"))
    rendered = []
    chart.follow(provider, rendered.append)
    with provider:
        pass
    el.w = 800
    bus.publish(ChartEvent.VIEWPORT_RESIZED)
    assert len(rendered) == 2


def test_item_changes_picked_up_on_next_render(make_item):
    chart = Chart([], XAxisSpec(units="time"))
    assert isinstance(chart.render(300), EmptyPlaceholder)
    chart.chart_items = _items(make_item)
    assert isinstance(chart.render(300), ComposedChart)


def test_custom_registry_used(make_item):
    from chartpanel.charting import create_item_registry

    registry = create_item_registry()
    registry.register("bars", lambda item, index: ("bars", index), "Bars")
    items = [make_item(type="bars", points=[{"x": 0, "y": 1}])]
    chart = Chart(items, XAxisSpec(units="time"), registry=registry)
    assert chart.render(300).drawings == [("bars", 0)]
