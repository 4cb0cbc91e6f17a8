"""
Configuration & Global Constants
================================
This module serves as the central registry for physical constants and the
bounds used by the deduction engine.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (gravity, loop bounds, epsilons)
   from being scattered throughout the solver code.
2. Overrides: A few values can be tuned through environment variables
   without touching the code (useful for classroom setups that prefer
   g = 9.8 or 10).

Supported env vars:
    PROJECTILE_GRAVITY    (float, m/s^2, positive)
    PROJECTILE_LOG_LEVEL  (DEBUG, INFO, WARNING, ...)

Exports:
    GRAVITY (float): Magnitude of the gravitational acceleration.
    SOLVER_MAX_PASSES (int): Upper bound on fixed-point passes per axis.
    COUPLING_MAX_ROUNDS (int): Upper bound on cross-axis coupling rounds.
    ROOT_EPSILON (float): Smallest time accepted as the "larger" root.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def _get_float(name: str) -> Optional[float]:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return None
    try:
        return float(v)
    except ValueError:
        logger.warning(f"Invalid float for {name}: {v!r}, using default.")
        return None


def get_gravity(default: float = 9.81) -> float:
    """Return the gravity magnitude, honouring PROJECTILE_GRAVITY if valid."""
    g = _get_float("PROJECTILE_GRAVITY")
    if g is None or g <= 0:
        return default
    return g


def get_log_level(default: int = logging.INFO) -> int:
    """Return the logging level named by PROJECTILE_LOG_LEVEL."""
    name = os.getenv("PROJECTILE_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    logger.warning(f"Unknown log level {name!r}, using default.")
    return default


# Global Constants
GRAVITY: float = get_gravity()

# Seven variables per axis; every pass either grows the known set or stops.
VARIABLE_COUNT: int = 7
SOLVER_MAX_PASSES: int = 20

COUPLING_MAX_ROUNDS: int = 10

ROOT_EPSILON: float = 0.001

TRAJECTORY_SAMPLES: int = 101
PLOT_MARGIN: float = 0.1
PLOT_MIN_EXTENT: float = 1.0
