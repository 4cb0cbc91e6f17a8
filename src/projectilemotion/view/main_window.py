"""
Main Application Window
=======================
The value grid, the polar inputs and the summary read-outs.

Why is this file needed?
------------------------
1. Layout: It shows the 7x2 grid of axis variables next to the polar fields.
2. Routing: Every edit is forwarded to the KinematicsEngine; the window then
   redraws itself from the returned snapshot. It holds no physics.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout,
    QTableWidget, QTableWidgetItem, QLineEdit, QLabel, QPushButton, QHeaderView
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QBrush, QColor

from projectilemotion.controller.engine import KinematicsEngine
from projectilemotion.model.snapshot import QuantityView, Snapshot
from projectilemotion.model.variables import Axis, PolarRole, Role
from projectilemotion.utils import format_value
from projectilemotion.view.dialogs.trajectory_plot_dialog import TrajectoryPlotDialog

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Projectile Motion"

USER_COLOR = QColor("#000000")
DERIVED_COLOR = QColor("#1f4fbf")
UNKNOWN_COLOR = QColor("#808080")
UNKNOWN_TEXT = "?"

POLAR_FIELDS = (
    (PolarRole.LAUNCH_SPEED, "Vi:", "m/s"),
    (PolarRole.LAUNCH_ANGLE, "Ang:", "deg"),
    (PolarRole.FINAL_SPEED, "Vf:", "m/s"),
)


def cell_text(view: QuantityView) -> str:
    return format_value(view.value) if view.known else UNKNOWN_TEXT


def cell_color(view: QuantityView) -> QColor:
    if not view.known:
        return UNKNOWN_COLOR
    return DERIVED_COLOR if view.derived else USER_COLOR


class MainWindow(QMainWindow):
    def __init__(self, engine: Optional[KinematicsEngine] = None) -> None:
        super().__init__()
        self.engine = engine or KinematicsEngine()
        self._refreshing = False

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(760, 420)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QHBoxLayout(main_widget)

        # --- LEFT: Axis grid ---
        self.table = QTableWidget(len(Role), len(Axis))
        self.table.setHorizontalHeaderLabels([axis.value for axis in Axis])
        self.table.setVerticalHeaderLabels([role.label for role in Role])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.itemChanged.connect(self.on_cell_edited)
        main_layout.addWidget(self.table, stretch=3)

        # --- RIGHT: Polar inputs, summary, actions ---
        right = QVBoxLayout()
        main_layout.addLayout(right, stretch=2)

        grp_polar = QGroupBox("Launch / Landing")
        form = QFormLayout(grp_polar)
        self.polar_edits: Dict[PolarRole, QLineEdit] = {}
        for which, label, unit in POLAR_FIELDS:
            edit = QLineEdit()
            edit.setPlaceholderText(UNKNOWN_TEXT)
            edit.editingFinished.connect(lambda w=which: self.on_polar_edited(w))
            row = QHBoxLayout()
            row.addWidget(edit)
            row.addWidget(QLabel(unit))
            form.addRow(label, row)
            self.polar_edits[which] = edit
        right.addWidget(grp_polar)

        grp_summary = QGroupBox("Summary")
        summary_form = QFormLayout(grp_summary)
        self.lbl_max_height = QLabel()
        self.lbl_tof = QLabel()
        self.lbl_range = QLabel()
        summary_form.addRow("MaxH:", self.lbl_max_height)
        summary_form.addRow("ToF:", self.lbl_tof)
        summary_form.addRow("Range:", self.lbl_range)
        right.addWidget(grp_summary)

        self.lbl_equations = QLabel()
        self.lbl_equations.setStyleSheet("color: gray;")
        right.addWidget(self.lbl_equations)

        btn_row = QHBoxLayout()
        self.btn_clear = QPushButton("Clear Cell")
        self.btn_clear.clicked.connect(self.on_clear_cell)
        self.btn_reset = QPushButton("Reset")
        self.btn_reset.clicked.connect(self.on_reset)
        self.btn_graph = QPushButton("Graph")
        self.btn_graph.clicked.connect(self.on_show_graph)
        for btn in (self.btn_clear, self.btn_reset, self.btn_graph):
            btn_row.addWidget(btn)
        right.addLayout(btn_row)
        right.addStretch()

        self._create_actions()
        self.refresh(self.engine.snapshot())

    def _create_actions(self) -> None:
        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.on_reset)

        self.act_graph = QAction("Graph", self)
        self.act_graph.setShortcut("Ctrl+G")
        self.act_graph.triggered.connect(self.on_show_graph)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        menu = self.menuBar().addMenu("Problem")
        menu.addAction(self.act_reset)
        menu.addAction(self.act_graph)
        menu.addSeparator()
        menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_cell_edited(self, item: QTableWidgetItem) -> None:
        if self._refreshing:
            return
        role, axis = Role(item.row()), list(Axis)[item.column()]
        self.refresh(self.engine.enter_text(axis, role, item.text()))

    def on_polar_edited(self, which: PolarRole) -> None:
        if self._refreshing:
            return
        edit = self.polar_edits[which]
        if not edit.isModified():
            return
        edit.setModified(False)
        self.refresh(self.engine.enter_polar_text(which, edit.text()))

    def on_clear_cell(self) -> None:
        item = self.table.currentItem()
        if item is None:
            return
        self.refresh(self.engine.clear_value(list(Axis)[item.column()], Role(item.row())))

    def on_reset(self) -> None:
        self.refresh(self.engine.reset())

    def on_show_graph(self) -> None:
        trajectory = self.engine.trajectory()
        if trajectory is None:
            logger.info("Graph requested but the trajectory is underdetermined.")
            self.statusBar().showMessage("Trajectory needs v0, a and a positive t on both axes.", 4000)
            return
        TrajectoryPlotDialog(trajectory, self).exec()

    # --- RENDERING ---

    def refresh(self, snap: Snapshot) -> None:
        self._refreshing = True
        try:
            for col, axis in enumerate(Axis):
                axis_view = snap.axis(axis.value)
                for role in Role:
                    self._render_cell(role.value, col, axis_view[role.label])

            for which, edit in self.polar_edits.items():
                view = snap.polar[which.value]
                edit.setText(format_value(view.value) if view.known else "")
                edit.setStyleSheet(f"color: {cell_color(view).name()};")
                edit.setToolTip(view.derived_by or "")
                edit.setModified(False)

            summary = snap.summary
            self.lbl_max_height.setText(self._summary_text(summary.max_height, "m"))
            self.lbl_tof.setText(self._summary_text(summary.time_of_flight, "s"))
            self.lbl_range.setText(self._summary_text(summary.range, "m"))

            lines = [
                f"{name}: {rule}"
                for name, rule in (("X", snap.x.last_rule), ("Y", snap.y.last_rule))
                if rule
            ]
            self.lbl_equations.setText("Eq:\n" + "\n".join(lines) if lines else "")
            self.btn_graph.setEnabled(self.engine.trajectory(samples=2) is not None)
        finally:
            self._refreshing = False

    def _render_cell(self, row: int, col: int, view: QuantityView) -> None:
        item = self.table.item(row, col)
        if item is None:
            item = QTableWidgetItem()
            item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.table.setItem(row, col, item)
        item.setText(cell_text(view))
        item.setForeground(QBrush(cell_color(view)))
        item.setToolTip(view.derived_by or ("entered" if view.user_set else ""))

    @staticmethod
    def _summary_text(value: Optional[float], unit: str) -> str:
        return f"{format_value(value)} {unit}" if value is not None else "-"
