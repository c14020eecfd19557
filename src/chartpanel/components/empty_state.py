"""Empty state templates and widget for chart panels.

Keeps the "nothing to draw" wording in one registry so every chart host shows
the same message; the widget renders one template at a fixed height so the
panel does not jump when data arrives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from chartpanel.settings import NO_DATA_MESSAGE

__all__ = [
    "EmptyStateTemplate",
    "EmptyStateRegistry",
    "empty_state_registry",
    "EmptyStateWidget",
]


@dataclass
class EmptyStateTemplate:
    key: str
    title: str
    description: str = ""


class EmptyStateRegistry:
    def __init__(self):
        self._templates: Dict[str, EmptyStateTemplate] = {}
        self.register(EmptyStateTemplate("no_chart_data", NO_DATA_MESSAGE))

    def register(self, template: EmptyStateTemplate) -> None:
        self._templates[template.key] = template

    def get(self, key: str) -> Optional[EmptyStateTemplate]:
        return self._templates.get(key)


empty_state_registry = EmptyStateRegistry()


class EmptyStateWidget(QWidget):
    """Centered message sized to the chart height it stands in for."""

    def __init__(
        self,
        template_key: str,
        height: float,
        parent: Optional[QWidget] = None,
        *,
        message: Optional[str] = None,
    ):
        super().__init__(parent)
        self.setObjectName("chartNoData")
        template = empty_state_registry.get(template_key) or EmptyStateTemplate(
            template_key, NO_DATA_MESSAGE
        )
        self._template = template
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.title_label = QLabel(message or template.title)
        self.title_label.setObjectName("emptyStateTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label)
        if template.description:
            desc = QLabel(template.description)
            desc.setObjectName("emptyStateDesc")
            desc.setWordWrap(True)
            layout.addWidget(desc)
        self.setFixedHeight(int(height))

    def template_key(self) -> str:
        return self._template.key
