"""
Problem State (Data Model)
==========================
This module defines the central data structure for one projectile problem.

Why is this file needed?
------------------------
1. State Management: It holds both axes and the polar inputs in one place.
   The engine owns exactly one instance and passes it to the solvers.
2. Defaults: It knows the start-up configuration (launch from the origin,
   no horizontal acceleration, gravity on the vertical axis) and can
   restore it on request.
3. Decoupling: Views read snapshots of this object; the engine writes it.

Classes:
    ProblemState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterator, Tuple, Union

from projectilemotion import config
from projectilemotion.model.variables import (
    Axis, AxisState, FinalVelocityMagnitude, LaunchVector, PolarQuantity, PolarRole, Role, Variable
)

logger = logging.getLogger(__name__)


def _default_axis(axis: Axis) -> AxisState:
    state = AxisState(axis=axis)
    state[Role.P0].set_user(0.0)
    if axis is Axis.X:
        state[Role.A].set_user(0.0)
    else:
        state[Role.A].set_user(-config.GRAVITY)
    return state


@dataclass
class ProblemState:
    """
    Holds the two axes and the polar quantities of the problem.
    Pass this instance to the coordinator; do not share it between engines.
    """
    x: AxisState = field(default_factory=lambda: _default_axis(Axis.X))
    y: AxisState = field(default_factory=lambda: _default_axis(Axis.Y))
    launch: LaunchVector = field(default_factory=LaunchVector)
    final: FinalVelocityMagnitude = field(default_factory=FinalVelocityMagnitude)

    def axis(self, axis: Axis) -> AxisState:
        return self.x if axis is Axis.X else self.y

    def polar(self, which: PolarRole) -> PolarQuantity:
        if which is PolarRole.LAUNCH_SPEED:
            return self.launch.speed
        if which is PolarRole.LAUNCH_ANGLE:
            return self.launch.angle
        return self.final.speed

    def iter_quantities(self) -> Iterator[Tuple[Union[Tuple[Axis, Role], PolarRole], Variable]]:
        """Yield every variable and polar quantity with its key."""
        for axis_state in (self.x, self.y):
            for role, var in axis_state:
                yield (axis_state.axis, role), var
        for which in PolarRole:
            yield which, self.polar(which)

    def forget_derived(self) -> None:
        """Clear every non-user-set value and knowledge flag."""
        for _, quantity in self.iter_quantities():
            quantity.forget()

    def reset(self) -> None:
        """Restore the start-up defaults."""
        self.x = _default_axis(Axis.X)
        self.y = _default_axis(Axis.Y)
        self.launch = LaunchVector()
        self.final = FinalVelocityMagnitude()
        logger.info("Problem state has been reset.")
