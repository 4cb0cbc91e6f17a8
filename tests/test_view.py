"""Smoke tests for the Qt front-end (skipped when Qt is unavailable)."""
import pytest

QtWidgets = pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("pyqtgraph")

from projectilemotion.model.snapshot import QuantityView
from projectilemotion.model.variables import PolarRole, Role
from projectilemotion.view.main_window import (
    DERIVED_COLOR, UNKNOWN_TEXT, USER_COLOR, MainWindow, cell_color, cell_text
)


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def window(qapp, engine):
    win = MainWindow(engine)
    yield win
    win.close()


def test_cell_helpers():
    assert cell_text(QuantityView(0.0, False, False)) == UNKNOWN_TEXT
    assert cell_text(QuantityView(2.5, True, True)) == "2.5"
    assert cell_color(QuantityView(2.5, True, True)) == USER_COLOR
    assert cell_color(QuantityView(2.5, True, False)) == DERIVED_COLOR


def test_initial_grid(window):
    assert window.table.item(Role.P0.value, 0).text() == "0"
    assert window.table.item(Role.T.value, 1).text() == UNKNOWN_TEXT
    assert not window.btn_graph.isEnabled()


def test_editing_a_cell_resolves(window):
    window.table.item(Role.T.value, 0).setText("3")
    assert window.engine.state.x.is_user_set(Role.T)
    assert window.table.item(Role.T.value, 1).text() == "3"


def test_refresh_after_engine_edits(window):
    window.engine.set_launch_speed(20.0)
    window.engine.set_launch_angle(30.0)
    window.refresh(window.engine.set_value("Y", "pf", 0.0))
    assert window.polar_edits[PolarRole.LAUNCH_SPEED].text() == "20"
    assert window.lbl_tof.text().endswith(" s")
    assert window.btn_graph.isEnabled()


def test_reset(window):
    window.engine.set_value("X", "t", 1.0)
    window.on_reset()
    assert window.table.item(Role.T.value, 0).text() == UNKNOWN_TEXT
