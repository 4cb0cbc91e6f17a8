"""
Kinematic Variables
===================
Defines the per-axis variable set and the polar quantities entered by the user.

Classes:
    Axis: Horizontal (X) or vertical (Y) component of the motion.
    Role: The 7 kinematic roles of one axis, in display order.
    Variable: A (value, known, user_set) triple.
    AxisState: The 7 Variables of one axis.
    PolarQuantity: A single polar scalar (speed, angle, final speed).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Iterator, Tuple


class Axis(Enum):
    X = "X"
    Y = "Y"


class Role(IntEnum):
    """Kinematic roles; the integer order is the grid row order."""
    P0 = 0
    PF = 1
    V0 = 2
    VF = 3
    A = 4
    D = 5
    T = 6

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> Role:
        """Look up a role by its short label ("p0", "vf", ...)."""
        for role, text in _ROLE_LABELS.items():
            if text == label.strip().lower():
                return role
        raise ValueError(f"Unknown kinematic role '{label}'.")


_ROLE_LABELS: Dict[Role, str] = {
    Role.P0: "p0",
    Role.PF: "pf",
    Role.V0: "v0",
    Role.VF: "vf",
    Role.A: "a",
    Role.D: "d",
    Role.T: "t",
}


@dataclass
class Variable:
    value: float = 0.0
    known: bool = False
    user_set: bool = False

    def set_user(self, value: float) -> None:
        self.value = float(value)
        self.known = True
        self.user_set = True

    def set_derived(self, value: float) -> None:
        """Store a derived value. User-entered values are never overwritten."""
        if self.user_set:
            return
        self.value = float(value)
        self.known = True

    def clear(self) -> None:
        self.value = 0.0
        self.known = False
        self.user_set = False

    def forget(self) -> None:
        """Drop derived knowledge, keeping user input intact."""
        if not self.user_set:
            self.value = 0.0
            self.known = False

    def as_tuple(self) -> Tuple[float, bool, bool]:
        return self.value, self.known, self.user_set


@dataclass
class AxisState:
    """
    Holds the 7 kinematic variables of one axis, indexed by Role.
    """
    axis: Axis
    variables: Dict[Role, Variable] = field(
        default_factory=lambda: {role: Variable() for role in Role}
    )

    def __getitem__(self, role: Role) -> Variable:
        return self.variables[role]

    def __iter__(self) -> Iterator[Tuple[Role, Variable]]:
        for role in Role:
            yield role, self.variables[role]

    def value(self, role: Role) -> float:
        return self.variables[role].value

    def is_known(self, role: Role) -> bool:
        return self.variables[role].known

    def is_user_set(self, role: Role) -> bool:
        return self.variables[role].user_set

    def known_roles(self) -> frozenset[Role]:
        return frozenset(role for role, var in self if var.known)

    def copy(self) -> AxisState:
        return AxisState(
            axis=self.axis,
            variables={role: Variable(*var.as_tuple()) for role, var in self}
        )


class PolarRole(Enum):
    LAUNCH_SPEED = "launch_speed"
    LAUNCH_ANGLE = "launch_angle"
    FINAL_SPEED = "final_speed"


@dataclass
class PolarQuantity(Variable):
    """One polar scalar; shares the knowledge semantics of Variable."""


@dataclass
class LaunchVector:
    """Polar form of the initial velocity (angle in degrees from horizontal)."""
    speed: PolarQuantity = field(default_factory=PolarQuantity)
    angle: PolarQuantity = field(default_factory=PolarQuantity)


@dataclass
class FinalVelocityMagnitude:
    """Polar magnitude of the final velocity."""
    speed: PolarQuantity = field(default_factory=PolarQuantity)
