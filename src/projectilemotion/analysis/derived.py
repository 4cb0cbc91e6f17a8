"""
Derived Quantities
==================
Read-only summary values computed from a solved ProblemState.

None of these functions modify the state. Missing inputs give None, which
the view shows as an empty read-out.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np

from projectilemotion import config
from projectilemotion.model.state import ProblemState
from projectilemotion.model.variables import AxisState, Role

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Trajectory:
    """Sampled 2D trajectory."""
    t: npt.NDArray[np.float64]
    x: npt.NDArray[np.float64]
    y: npt.NDArray[np.float64]

    @property
    def start(self) -> Tuple[float, float]:
        return float(self.x[0]), float(self.y[0])


def _initial_position(axis: AxisState) -> float:
    return axis.value(Role.P0) if axis.is_known(Role.P0) else 0.0


def position(axis: AxisState, t: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Evaluate p(t) = p0 + v0 t + a t^2 / 2 for one axis.

    Unknown p0, v0 or a are taken as zero; callers check knowledge first.
    """
    t = np.asarray(t, dtype=np.float64)
    p0 = _initial_position(axis)
    v0 = axis.value(Role.V0) if axis.is_known(Role.V0) else 0.0
    a = axis.value(Role.A) if axis.is_known(Role.A) else 0.0
    return p0 + v0 * t + 0.5 * a * t * t


def max_height(state: ProblemState) -> Optional[float]:
    """
    Highest vertical position reached.

    Needs the vertical v0 and a. With a downward acceleration and an upward
    launch the vertex at t* = -v0/a is evaluated; otherwise the projectile
    never climbs and the initial height is the maximum.
    """
    y = state.y
    if not (y.is_known(Role.V0) and y.is_known(Role.A)):
        return None
    v0, a = y.value(Role.V0), y.value(Role.A)
    if a < 0 and v0 > 0:
        t_vertex = -v0 / a
        return float(position(y, t_vertex))
    return _initial_position(y)


def time_of_flight(state: ProblemState) -> Optional[float]:
    """Elapsed time, read from the X axis (both axes share it)."""
    if state.x.is_known(Role.T):
        return state.x.value(Role.T)
    return None


def horizontal_range(state: ProblemState) -> Optional[float]:
    """Horizontal displacement over the flight."""
    if state.x.is_known(Role.D):
        return state.x.value(Role.D)
    return None


def can_sample_trajectory(state: ProblemState) -> bool:
    return (
        all(axis.is_known(Role.V0) and axis.is_known(Role.A) for axis in (state.x, state.y))
        and state.x.is_known(Role.T)
        and state.x.value(Role.T) > 0
    )


def sample_trajectory(state: ProblemState, samples: int = config.TRAJECTORY_SAMPLES) -> Optional[Trajectory]:
    """
    Sample both axes over [0, time of flight].

    Args:
        state: Solved problem state.
        samples: Number of sample points (including both end points).

    Returns:
        The sampled trajectory, or None if the motion is not fully determined.
    """
    if not can_sample_trajectory(state):
        return None
    t = np.linspace(0.0, state.x.value(Role.T), max(samples, 2))
    return Trajectory(t=t, x=position(state.x, t), y=position(state.y, t))


def plot_bounds(
    trajectory: Trajectory,
    margin: float = config.PLOT_MARGIN,
    min_extent: float = config.PLOT_MIN_EXTENT,
) -> Tuple[float, float, float, float]:
    """
    Axis limits for plotting a trajectory.

    Each extent is at least `min_extent` and padded by `margin` on both sides.

    Returns:
        (x_min, x_max, y_min, y_max)
    """
    bounds = []
    for values in (trajectory.x, trajectory.y):
        lo, hi = float(np.min(values)), float(np.max(values))
        extent = max(hi - lo, min_extent)
        bounds.extend((lo - extent * margin, hi + extent * margin))
    return bounds[0], bounds[1], bounds[2], bounds[3]
