"""
Application Initialization
==========================
This module constructs the engine and the window and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the KinematicsEngine (which owns the ProblemState).
2. Instantiates the Main Window (View), passing the engine in.
3. Prevents circular import errors by being the orchestrator.
"""
from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from projectilemotion.controller.engine import KinematicsEngine
from projectilemotion.logging_config import setup_logging
from projectilemotion.view.main_window import MainWindow, VISIBLE_APP_NAME

import pyqtgraph as pg

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")

APP_ID = "projectile-motion"


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance() or QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def main() -> int:
    # 1. Setup Logging (level from PROJECTILE_LOG_LEVEL, INFO by default)
    setup_logging(log_file=os.environ.get("PROJECTILE_LOG_FILE") or None)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the engine (model + solvers)
    engine = KinematicsEngine()

    # 4. Initialize the Main Window, passing the engine
    window = MainWindow(engine)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
