"""Dialog for plotting the projectile trajectory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pyqtgraph as pg
from PySide6.QtWidgets import QDialog, QVBoxLayout, QPushButton, QWidget

from projectilemotion.analysis.derived import plot_bounds

if TYPE_CHECKING:
    from projectilemotion.analysis.derived import Trajectory


logger = logging.getLogger(__name__)


class TrajectoryPlotDialog(QDialog):
    """Shows y(x) over the time of flight with the launch point marked."""

    PATH_COLOR = '#1f77b4'
    START_COLOR = '#d62728'

    def __init__(self, trajectory: Trajectory, parent: QWidget | None = None) -> None:
        """Initialize the trajectory plot dialog.

        Args:
            trajectory: Sampled trajectory to draw
            parent: Parent widget
        """
        super().__init__(parent)
        self.trajectory = trajectory

        self.setWindowTitle("Trajectory")
        self.resize(800, 550)

        layout = QVBoxLayout(self)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setLabel('bottom', 'x [m]', color='black')
        self.plot_widget.setLabel('left', 'y [m]', color='black')
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        layout.addWidget(self.plot_widget)

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        layout.addWidget(close_btn)

        self._update_plot()

    def _update_plot(self) -> None:
        self.plot_widget.clear()

        traj = self.trajectory
        self.plot_widget.plot(traj.x, traj.y, pen=pg.mkPen(color=self.PATH_COLOR, width=2))

        x0, y0 = traj.start
        self.plot_widget.plot(
            [x0], [y0],
            pen=None,
            symbol='o',
            symbolSize=10,
            symbolBrush=self.START_COLOR,
            symbolPen=None,
        )

        x_min, x_max, y_min, y_max = plot_bounds(traj)
        self.plot_widget.setXRange(x_min, x_max, padding=0)
        self.plot_widget.setYRange(y_min, y_max, padding=0)
        logger.debug(f"Plotted {len(traj.t)} trajectory samples.")
