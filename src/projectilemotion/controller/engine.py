"""
Kinematics Engine
=================
The single entry point used by front-ends.

Why is this file needed?
------------------------
1. It owns the ProblemState (no module-level storage), so several engines
   can live side by side, e.g. in tests.
2. Every edit (set / clear / reset) triggers exactly one full resolve, so
   callers always read a consistent snapshot.
3. It converts keystroke text into numbers leniently; malformed input never
   raises.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from projectilemotion.analysis import derived
from projectilemotion.model.snapshot import AxisView, QuantityView, Snapshot, SummaryView
from projectilemotion.model.state import ProblemState
from projectilemotion.model.variables import Axis, PolarRole, Role
from projectilemotion.solvers.coordinator import CoordinatorReport, CrossAxisCoordinator
from projectilemotion.utils import parse_number

logger = logging.getLogger(__name__)

AxisLike = Union[Axis, str]
RoleLike = Union[Role, str]
PolarLike = Union[PolarRole, str]


def _as_axis(axis: AxisLike) -> Axis:
    return axis if isinstance(axis, Axis) else Axis(axis.upper())


def _as_role(role: RoleLike) -> Role:
    return role if isinstance(role, Role) else Role.from_label(role)


def _as_polar(which: PolarLike) -> PolarRole:
    return which if isinstance(which, PolarRole) else PolarRole(which)


class KinematicsEngine:
    """
    Facade over the deduction engine.

    Axis and role arguments accept either the enums or their short names
    ("X"/"Y", "p0".."t"); unknown names raise ValueError.
    """

    def __init__(
        self,
        state: Optional[ProblemState] = None,
        coordinator: Optional[CrossAxisCoordinator] = None,
    ) -> None:
        self.state = state or ProblemState()
        self.coordinator = coordinator or CrossAxisCoordinator()
        self.report: CoordinatorReport = self.coordinator.resolve_all(self.state)

    # --- EDITS ---

    def resolve(self) -> Snapshot:
        self.report = self.coordinator.resolve_all(self.state)
        return self.snapshot()

    def set_value(self, axis: AxisLike, role: RoleLike, value: float) -> Snapshot:
        axis, role = _as_axis(axis), _as_role(role)
        self.state.axis(axis)[role].set_user(value)
        logger.debug(f"Set {axis.value}.{role.label} = {value!r}")
        return self.resolve()

    def clear_value(self, axis: AxisLike, role: RoleLike) -> Snapshot:
        axis, role = _as_axis(axis), _as_role(role)
        self.state.axis(axis)[role].clear()
        logger.debug(f"Cleared {axis.value}.{role.label}")
        return self.resolve()

    def set_polar(self, which: PolarLike, value: Optional[float]) -> Snapshot:
        """Set a polar quantity; None clears it."""
        which = _as_polar(which)
        if value is None:
            return self.clear_polar(which)
        self.state.polar(which).set_user(value)
        logger.debug(f"Set {which.value} = {value!r}")
        return self.resolve()

    def clear_polar(self, which: PolarLike) -> Snapshot:
        which = _as_polar(which)
        self.state.polar(which).clear()
        logger.debug(f"Cleared {which.value}")
        return self.resolve()

    def set_launch_speed(self, value: Optional[float]) -> Snapshot:
        return self.set_polar(PolarRole.LAUNCH_SPEED, value)

    def set_launch_angle(self, value: Optional[float]) -> Snapshot:
        return self.set_polar(PolarRole.LAUNCH_ANGLE, value)

    def set_final_speed(self, value: Optional[float]) -> Snapshot:
        return self.set_polar(PolarRole.FINAL_SPEED, value)

    def clear_launch_speed(self) -> Snapshot:
        return self.clear_polar(PolarRole.LAUNCH_SPEED)

    def clear_launch_angle(self) -> Snapshot:
        return self.clear_polar(PolarRole.LAUNCH_ANGLE)

    def clear_final_speed(self) -> Snapshot:
        return self.clear_polar(PolarRole.FINAL_SPEED)

    def reset(self) -> Snapshot:
        self.state.reset()
        return self.resolve()

    # --- TEXT ENTRY ---

    def enter_text(self, axis: AxisLike, role: RoleLike, text: str) -> Snapshot:
        """Apply typed text to an axis cell; text without a number clears it."""
        value = parse_number(text)
        if value is None:
            return self.clear_value(axis, role)
        return self.set_value(axis, role, value)

    def enter_polar_text(self, which: PolarLike, text: str) -> Snapshot:
        return self.set_polar(which, parse_number(text))

    # --- READ ---

    def snapshot(self) -> Snapshot:
        return Snapshot(
            x=self._axis_view(Axis.X),
            y=self._axis_view(Axis.Y),
            polar={
                which.value: self._polar_view(which)
                for which in PolarRole
            },
            summary=SummaryView(
                max_height=derived.max_height(self.state),
                time_of_flight=derived.time_of_flight(self.state),
                range=derived.horizontal_range(self.state),
            ),
        )

    def trajectory(self, samples: Optional[int] = None) -> Optional[derived.Trajectory]:
        if samples is None:
            return derived.sample_trajectory(self.state)
        return derived.sample_trajectory(self.state, samples=samples)

    def _axis_view(self, axis: Axis) -> AxisView:
        derivations = self.report.derivations[axis]
        variables = {}
        for role, var in self.state.axis(axis):
            source = derivations.get(role) if var.known and not var.user_set else None
            variables[role.label] = QuantityView(
                value=var.value,
                known=var.known,
                user_set=var.user_set,
                derived_by=str(source) if source is not None else None,
            )
        last_rule = self.report.last_rule[axis]
        return AxisView(
            axis=axis.value,
            variables=variables,
            last_rule=str(last_rule) if last_rule is not None else None,
        )

    def _polar_view(self, which: PolarRole) -> QuantityView:
        quantity = self.state.polar(which)
        source = self.report.polar_derivations.get(which)
        return QuantityView(
            value=quantity.value,
            known=quantity.known,
            user_set=quantity.user_set,
            derived_by=str(source) if source is not None and not quantity.user_set else None,
        )
