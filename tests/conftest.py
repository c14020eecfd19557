# Shared fixtures. Provides a fallback 'qtbot' fixture when pytest-qt is not
# installed so widget tests still run headless; pytest-qt's fixture wins when present.

import os
import sys
import contextlib

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from chartpanel.services import EventBus, services  # noqa: E402

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover

    @pytest.fixture
    def qtbot():  # type: ignore
        QApplication = pytest.importorskip("PyQt6.QtWidgets").QApplication
        app = QApplication.instance() or QApplication(sys.argv)  # noqa: F841
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

            @contextlib.contextmanager
            def waitSignal(self, *args, **kwargs):  # no-op stub
                yield

        yield Bot()
        for w in widgets:
            w.close()


@pytest.fixture
def bus():
    """Fresh EventBus registered as the shared bus for the test."""
    fresh = EventBus()
    with services.override_context(event_bus=fresh):
        yield fresh


@pytest.fixture
def make_item():
    from chartpanel.charting import SeriesItem

    def _make(type="line", units="m", name="A", points=None, color="#123456"):
        return SeriesItem(type=type, units=units, name=name, points=points or [], color=color)

    return _make
