"""
Kinematic Rule Table
====================
The fixed set of constant-acceleration relations used by the axis solver.

Each rule derives one output variable from a set of input variables. A rule
returns None when its guard fails (zero denominator, negative discriminant,
negative time); that is not an error, the value is simply not derivable yet.

The order of RULES is significant: the solver evaluates them in this order
on every pass.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Callable, Mapping, Optional, Tuple

from projectilemotion import config
from projectilemotion.model.variables import Role
from projectilemotion.utils import sign

P0, PF, V0, VF, A, D, T = Role.P0, Role.PF, Role.V0, Role.VF, Role.A, Role.D, Role.T

Values = Mapping[Role, float]


@dataclass(frozen=True)
class Rule:
    """
    A single derivation rule.

    Attributes:
        number: Stable rule id (1-based, in evaluation order).
        label: Human readable equation, shown next to derived values.
        output: The role this rule derives.
        inputs: Roles that must all be known before the rule may fire.
        compute: Guarded evaluation; returns None if the guard fails.
        needs_nonzero_accel: True for rules that only apply when a != 0.
    """
    number: int
    label: str
    output: Role
    inputs: Tuple[Role, ...]
    compute: Callable[[Values], Optional[float]]
    needs_nonzero_accel: bool = False

    def __str__(self) -> str:
        return f"#{self.number} {self.label}"


def _non_negative(t: float) -> Optional[float]:
    return t if t >= 0 else None


def select_root(t1: float, t2: float) -> Optional[float]:
    """
    Root selection policy for quadratic-in-time rules.

    Prefer the larger root when it is meaningfully positive (so a launch that
    returns to its starting height reports the landing time, not t = 0);
    otherwise accept the smaller root if it is not negative.

    Note:
        This assumes a forward-in-time, level-ground trajectory. It is a
        scenario convention, not a general law.
    """
    t_max, t_min = max(t1, t2), min(t1, t2)
    if t_max > config.ROOT_EPSILON:
        return t_max
    if t_min >= 0:
        return t_min
    return None


# --- position / displacement ---

def _d_from_positions(v: Values) -> Optional[float]:
    return v[PF] - v[P0]


def _pf_from_displacement(v: Values) -> Optional[float]:
    return v[P0] + v[D]


def _p0_from_displacement(v: Values) -> Optional[float]:
    return v[PF] - v[D]


# --- v = v0 + a t ---

def _t_from_velocities(v: Values) -> Optional[float]:
    if v[A] == 0:
        return None
    return _non_negative((v[VF] - v[V0]) / v[A])


def _vf_equals_v0(v: Values) -> Optional[float]:
    return v[V0] if v[A] == 0 else None


def _v0_equals_vf(v: Values) -> Optional[float]:
    return v[VF] if v[A] == 0 else None


def _vf_from_time(v: Values) -> Optional[float]:
    return v[V0] + v[A] * v[T]


def _v0_from_time(v: Values) -> Optional[float]:
    return v[VF] - v[A] * v[T]


def _a_from_velocities(v: Values) -> Optional[float]:
    if v[T] == 0:
        return None
    return (v[VF] - v[V0]) / v[T]


# --- d = v0 t + a t^2 / 2 ---

def _d_from_v0(v: Values) -> Optional[float]:
    t = v[T]
    return v[V0] * t + 0.5 * v[A] * t * t


def _v0_from_d(v: Values) -> Optional[float]:
    t = v[T]
    if t == 0:
        return None
    return (v[D] - 0.5 * v[A] * t * t) / t


def _a_from_d_v0(v: Values) -> Optional[float]:
    t = v[T]
    if t == 0:
        return None
    return 2.0 * (v[D] - v[V0] * t) / (t * t)


# --- d = (v0 + vf) t / 2 ---

def _d_from_mean_velocity(v: Values) -> Optional[float]:
    return (v[V0] + v[VF]) * v[T] / 2.0


def _t_from_mean_velocity(v: Values) -> Optional[float]:
    total = v[V0] + v[VF]
    if total == 0:
        return None
    return _non_negative(2.0 * v[D] / total)


def _v0_from_mean_velocity(v: Values) -> Optional[float]:
    if v[T] == 0:
        return None
    return 2.0 * v[D] / v[T] - v[VF]


def _vf_from_mean_velocity(v: Values) -> Optional[float]:
    if v[T] == 0:
        return None
    return 2.0 * v[D] / v[T] - v[V0]


# --- d = vf t - a t^2 / 2 ---

def _d_from_vf(v: Values) -> Optional[float]:
    t = v[T]
    return v[VF] * t - 0.5 * v[A] * t * t


def _vf_from_d(v: Values) -> Optional[float]:
    t = v[T]
    if t == 0:
        return None
    return (v[D] + 0.5 * v[A] * t * t) / t


def _a_from_d_vf(v: Values) -> Optional[float]:
    t = v[T]
    if t == 0:
        return None
    return 2.0 * (v[VF] * t - v[D]) / (t * t)


# --- quadratics in t ---

def _t_quadratic_vf(v: Values) -> Optional[float]:
    a, vf, d = v[A], v[VF], v[D]
    if a == 0:
        if vf == 0:
            return None
        return _non_negative(d / vf)
    # a/2 t^2 - vf t + d = 0
    disc = vf * vf - 2.0 * a * d
    if disc < 0:
        return None
    root = math.sqrt(disc)
    return select_root((vf + root) / a, (vf - root) / a)


def _t_quadratic_v0(v: Values) -> Optional[float]:
    a, v0, d = v[A], v[V0], v[D]
    if a == 0:
        if v0 == 0:
            return None
        return _non_negative(d / v0)
    # a/2 t^2 + v0 t - d = 0
    disc = v0 * v0 + 2.0 * a * d
    if disc < 0:
        return None
    root = math.sqrt(disc)
    return select_root((-v0 + root) / a, (-v0 - root) / a)


# --- vf^2 = v0^2 + 2 a d ---

def _vf_from_squares(v: Values) -> Optional[float]:
    v0, a, d = v[V0], v[A], v[D]
    rhs = v0 * v0 + 2.0 * a * d
    if rhs < 0:
        return None
    magnitude = math.sqrt(rhs)
    return magnitude * (sign(v0) if v0 != 0 else sign(a * d))


def _v0_from_squares(v: Values) -> Optional[float]:
    vf, a, d = v[VF], v[A], v[D]
    rhs = vf * vf - 2.0 * a * d
    if rhs < 0:
        return None
    magnitude = math.sqrt(rhs)
    return magnitude * (sign(vf) if vf != 0 else sign(-(a * d)))


def _a_from_squares(v: Values) -> Optional[float]:
    if v[D] == 0:
        return None
    return (v[VF] ** 2 - v[V0] ** 2) / (2.0 * v[D])


def _d_from_squares(v: Values) -> Optional[float]:
    if v[A] == 0:
        return None
    return (v[VF] ** 2 - v[V0] ** 2) / (2.0 * v[A])


RULES: Tuple[Rule, ...] = (
    Rule(1, "d=pf-p0", D, (P0, PF), _d_from_positions),
    Rule(2, "pf=p0+d", PF, (P0, D), _pf_from_displacement),
    Rule(3, "p0=pf-d", P0, (PF, D), _p0_from_displacement),
    Rule(4, "t=(vf-v0)/a", T, (V0, VF, A), _t_from_velocities, needs_nonzero_accel=True),
    Rule(5, "vf=v0 (a=0)", VF, (V0, A), _vf_equals_v0),
    Rule(6, "v0=vf (a=0)", V0, (VF, A), _v0_equals_vf),
    Rule(7, "vf=v0+at", VF, (V0, A, T), _vf_from_time),
    Rule(8, "v0=vf-at", V0, (VF, A, T), _v0_from_time),
    Rule(9, "a=(vf-v0)/t", A, (V0, VF, T), _a_from_velocities),
    Rule(10, "d=v0t+.5at2", D, (V0, A, T), _d_from_v0),
    Rule(11, "v0=(d-.5at2)/t", V0, (D, A, T), _v0_from_d),
    Rule(12, "a=2(d-v0t)/t2", A, (D, V0, T), _a_from_d_v0),
    Rule(13, "d=(v0+vf)t/2", D, (V0, VF, T), _d_from_mean_velocity),
    Rule(14, "t=2d/(v0+vf)", T, (D, V0, VF), _t_from_mean_velocity),
    Rule(15, "v0=2d/t-vf", V0, (D, T, VF), _v0_from_mean_velocity),
    Rule(16, "vf=2d/t-v0", VF, (D, T, V0), _vf_from_mean_velocity),
    Rule(17, "d=vft-.5at2", D, (VF, A, T), _d_from_vf),
    Rule(18, "vf=(d+.5at2)/t", VF, (D, A, T), _vf_from_d),
    Rule(19, "a=2(vft-d)/t2", A, (VF, D, T), _a_from_d_vf),
    Rule(20, "t:quadratic(vf)", T, (D, VF, A), _t_quadratic_vf),
    Rule(21, "t:quadratic(v0)", T, (D, V0, A), _t_quadratic_v0),
    Rule(22, "vf2=v02+2ad", VF, (V0, A, D), _vf_from_squares),
    Rule(23, "v02=vf2-2ad", V0, (VF, A, D), _v0_from_squares),
    Rule(24, "a=(vf2-v02)/2d", A, (VF, V0, D), _a_from_squares),
    Rule(25, "d=(vf2-v02)/2a", D, (VF, V0, A), _d_from_squares, needs_nonzero_accel=True),
)

RULES_BY_NUMBER = {rule.number: rule for rule in RULES}
