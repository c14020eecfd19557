"""Chart item renderer registry.

Maps an item's ``type`` tag to the strategy that knows how to draw it. Only
strategies registered with ``needs_siblings=True`` receive the full item list;
everything else sees just its own item and index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from chartpanel.settings import STRICT_ITEM_TYPES

from .strategies import render_line, render_moment_lines, render_moment_points
from .types import ChartItem, ChartItemType

log = logging.getLogger(__name__)

LineRenderer = Callable[[ChartItem, int], Any]


class UnknownChartItemTypeError(KeyError):
    """Raised in strict mode for an item type with no registered renderer."""


@dataclass
class ItemRenderer:
    """Metadata for a registered item type."""

    item_type: str
    strategy: Callable[..., Any]
    description: str
    needs_siblings: bool = False
    plugin_id: Optional[str] = None


class ItemRendererPluginProtocol(Protocol):  # pragma: no cover - structural only
    """Plugins contribute extra item types through a registrar."""

    id: str

    def register(self, registrar: "ItemRendererRegistrar") -> None: ...


class ItemRendererRegistrar:
    """Helper passed to plugins so their registrations are attributed."""

    def __init__(self, registry: "ItemRendererRegistry", plugin_id: str) -> None:
        self._registry = registry
        self._plugin_id = plugin_id

    def register(
        self, item_type: str, strategy, description: str, *, needs_siblings: bool = False
    ) -> None:
        self._registry.register(
            item_type,
            strategy,
            description,
            needs_siblings=needs_siblings,
            plugin_id=self._plugin_id,
        )


class ItemRendererRegistry:
    def __init__(self, *, strict: bool = STRICT_ITEM_TYPES) -> None:
        self._renderers: Dict[str, ItemRenderer] = {}
        self._plugins: set[str] = set()
        self.strict = strict

    def register(
        self,
        item_type: str | ChartItemType,
        strategy,
        description: str,
        *,
        needs_siblings: bool = False,
        plugin_id: str | None = None,
    ) -> None:
        key = item_type.value if isinstance(item_type, ChartItemType) else item_type
        if key in self._renderers:
            raise ValueError(f"Item type already registered: {key}")
        self._renderers[key] = ItemRenderer(key, strategy, description, needs_siblings, plugin_id)

    def register_plugin(self, plugin: ItemRendererPluginProtocol) -> None:
        if plugin.id in self._plugins:
            raise ValueError(f"Plugin already registered: {plugin.id}")
        plugin.register(ItemRendererRegistrar(self, plugin.id))
        self._plugins.add(plugin.id)

    def list_types(self) -> Dict[str, str]:
        return {k: v.description for k, v in self._renderers.items()}

    def render(
        self,
        item: ChartItem,
        chart_items: Sequence[ChartItem],
        index: int,
        *,
        render_line: LineRenderer | None = None,
    ) -> Any:
        """Return the drawing for ``item`` or None when nothing should be drawn.

        A ``render_line`` override replaces the line strategy for every
        line-typed item rendered through this call.
        """
        if item.type == ChartItemType.LINE.value and render_line is not None:
            return render_line(item, index)
        renderer = self._renderers.get(item.type)
        if renderer is None:
            if self.strict:
                raise UnknownChartItemTypeError(item.type)
            log.debug("skipping chart item %r with unknown type %r", item.name, item.type)
            return None
        if renderer.needs_siblings:
            return renderer.strategy(item, chart_items, index)
        return renderer.strategy(item, index)


def _bootstrap(registry: ItemRendererRegistry) -> ItemRendererRegistry:
    registry.register(ChartItemType.LINE, render_line, "Continuous line series")
    registry.register(
        ChartItemType.MOMENT_LINES, render_moment_lines, "Vertical markers at instantaneous events"
    )
    registry.register(
        ChartItemType.MOMENT_POINTS,
        render_moment_points,
        "Event markers placed on a sibling line series",
        needs_siblings=True,
    )
    return registry


def create_item_registry(*, strict: bool = STRICT_ITEM_TYPES) -> ItemRendererRegistry:
    """Fresh registry pre-loaded with the built-in item types."""
    return _bootstrap(ItemRendererRegistry(strict=strict))


item_registry = create_item_registry()


def register_item_type(item_type: str, strategy, description: str, *, needs_siblings: bool = False) -> None:
    item_registry.register(item_type, strategy, description, needs_siblings=needs_siblings)


def render_item(
    item: ChartItem,
    chart_items: Sequence[ChartItem],
    index: int,
    *,
    render_line: LineRenderer | None = None,
) -> Any:
    return item_registry.render(item, chart_items, index, render_line=render_line)
