"""Tests for ResponsiveWidthProvider lifecycle and width publication."""

from __future__ import annotations

from chartpanel.charting import ResponsiveWidthProvider
from chartpanel.services import ChartEvent


class _FakeElement:
    def __init__(self, width):
        self.w = width

    def width(self):
        return self.w


def test_initial_width_zero_and_no_element(bus):
    provider = ResponsiveWidthProvider(bus)
    assert provider.width == 0
    provider.update_width()  # no element attached: no-op
    assert provider.width == 0


def test_mount_measures_once_and_subscribes(bus):
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(_FakeElement(480))
    provider.mount()
    assert provider.width == 480
    assert provider.mounted
    assert bus.subscriber_count(ChartEvent.VIEWPORT_RESIZED) == 1


def test_mount_is_idempotent(bus):
    provider = ResponsiveWidthProvider(bus)
    provider.mount()
    provider.mount()
    assert bus.subscriber_count(ChartEvent.VIEWPORT_RESIZED) == 1


def test_resize_republishes_width(bus):
    el = _FakeElement(300)
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(el)
    seen = []
    provider.observe(seen.append)
    provider.mount()
    el.w = 520
    bus.publish(ChartEvent.VIEWPORT_RESIZED, {"width": 1024})
    el.w = 200
    bus.publish(ChartEvent.VIEWPORT_RESIZED)
    assert seen == [0, 300, 520, 200]


def test_unchanged_width_does_not_notify(bus):
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(_FakeElement(300))
    seen = []
    provider.observe(seen.append)
    provider.mount()
    bus.publish(ChartEvent.VIEWPORT_RESIZED)
    assert seen == [0, 300]


def test_resize_before_element_attached_is_noop(bus):
    provider = ResponsiveWidthProvider(bus)
    provider.mount()
    bus.publish(ChartEvent.VIEWPORT_RESIZED)
    assert provider.width == 0
    assert bus.errors == []


def test_width_changed_event_published(bus):
    events = []
    bus.subscribe(ChartEvent.WIDTH_CHANGED, lambda e: events.append(e.payload["width"]))
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(_FakeElement(333))
    provider.mount()
    assert events == [333]


def test_unmount_detaches_listener(bus):
    el = _FakeElement(300)
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(el)
    provider.mount()
    provider.unmount()
    assert bus.subscriber_count(ChartEvent.VIEWPORT_RESIZED) == 0
    el.w = 900
    bus.publish(ChartEvent.VIEWPORT_RESIZED)
    assert provider.width == 300
    assert not provider.mounted


def test_context_manager_scopes_subscription(bus):
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(_FakeElement(150))
    with provider as p:
        assert p.width == 150
        assert bus.subscriber_count(ChartEvent.VIEWPORT_RESIZED) == 1
    assert bus.subscriber_count(ChartEvent.VIEWPORT_RESIZED) == 0


def test_released_observer_not_called(bus):
    el = _FakeElement(100)
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(el)
    seen = []
    sub = provider.observe(seen.append)
    provider.release(sub)
    provider.mount()
    assert seen == [0]


def test_render_calls_child_with_current_width(bus):
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(_FakeElement(410))
    provider.mount()
    assert provider.render(lambda width: f"w={width:g}") == "w=410"


def test_uses_shared_bus_by_default(bus):
    provider = ResponsiveWidthProvider()
    provider.mount()
    assert bus.subscriber_count(ChartEvent.VIEWPORT_RESIZED) == 1


def test_update_width_ignored_after_unmount(bus):
    el = _FakeElement(300)
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(el)
    seen = []
    provider.observe(seen.append)
    provider.mount()
    provider.unmount()
    el.w = 800
    provider.update_width()
    assert provider.width == 300
    assert seen == [0, 300]


def test_update_width_waits_for_mount(bus):
    provider = ResponsiveWidthProvider(bus)
    provider.attach_element(_FakeElement(250))
    provider.update_width()
    assert provider.width == 0
    provider.mount()
    assert provider.width == 250
