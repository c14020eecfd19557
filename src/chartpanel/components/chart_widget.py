"""Qt host for a Chart.

ChartWidget is the measured container: it attaches itself to a
ResponsiveWidthProvider, mounts it on construction and re-renders the chart
whenever its width changes. The rendered outcome replaces the widget's single
child:

    ComposedChart     -> FigureCanvasQTAgg of the matplotlib figure
    EmptyPlaceholder  -> EmptyStateWidget("no_chart_data") at the chart height
    None              -> no child
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from chartpanel.charting import Chart, ChartItem, MatplotlibChartBackend, ResponsiveWidthProvider
from chartpanel.charting.types import ComposedChart, EmptyPlaceholder, RenderResult
from chartpanel.services import EventBus

from .empty_state import EmptyStateWidget

log = logging.getLogger(__name__)

__all__ = ["ChartWidget"]


class ChartWidget(QWidget):
    def __init__(
        self,
        chart: Chart,
        parent: Optional[QWidget] = None,
        *,
        bus: EventBus | None = None,
        backend: MatplotlibChartBackend | None = None,
    ):
        super().__init__(parent)
        self._chart = chart
        self._backend = backend or MatplotlibChartBackend()
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._content: Optional[QWidget] = None
        self.last_result: RenderResult = None

        self._provider = ResponsiveWidthProvider(bus)
        self._provider.attach_element(self)
        self._render_sub = chart.follow(self._provider, self._show)
        self._provider.mount()

    # API --------------------------------------------------------------
    @property
    def provider(self) -> ResponsiveWidthProvider:
        return self._provider

    @property
    def content(self) -> Optional[QWidget]:
        return self._content

    def set_chart_items(self, chart_items: Sequence[ChartItem]) -> None:
        self._chart.chart_items = chart_items
        self.refresh()

    def refresh(self) -> None:
        self._show(self._chart.render(self._provider.width))

    def dispose(self) -> None:
        """Release the resize subscription and render listener."""
        self._provider.release(self._render_sub)
        self._provider.unmount()

    # Qt events ----------------------------------------------------------
    def resizeEvent(self, event):  # type: ignore[override]
        super().resizeEvent(event)
        if self._provider.mounted:
            self._provider.update_width()

    def closeEvent(self, event):  # type: ignore[override]
        self.dispose()
        super().closeEvent(event)

    # Rendering ----------------------------------------------------------
    def _show(self, result: RenderResult) -> None:
        self.last_result = result
        if self._content is not None:
            self._layout.removeWidget(self._content)
            self._content.setParent(None)
            self._content.deleteLater()
            self._content = None
        if isinstance(result, EmptyPlaceholder):
            self._content = EmptyStateWidget("no_chart_data", result.height, message=result.message)
        elif isinstance(result, ComposedChart):
            canvas = FigureCanvasQTAgg(self._backend.draw(result))
            canvas.setMinimumSize(1, 1)
            if callable(result.container):
                result.container(canvas, result)
            self._content = canvas
        else:
            log.debug("chart rendered nothing (no x axis)")
            return
        self._layout.addWidget(self._content)
