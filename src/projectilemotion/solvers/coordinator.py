"""
Cross-Axis Coordinator
======================
Couples the two 1D problems into one projectile problem.

Why is this file needed?
------------------------
The axis solver only sees one axis. The physics links the axes in three
places that the coordinator handles:
1. The launch vector (speed, angle) seeds both initial velocities.
2. The final speed links both final velocities.
3. The elapsed time is shared by both axes.

Classes:
    Derivation: Where a derived value came from (rule or seeding step).
    CoordinatorReport: Attribution and bookkeeping of one resolve_all call.
    CrossAxisCoordinator: Runs the full resolve on a ProblemState.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Dict, Optional

from projectilemotion import config
from projectilemotion.model.state import ProblemState
from projectilemotion.model.variables import Axis, AxisState, PolarRole, Role
from projectilemotion.solvers.axis_solver import AxisSolver
from projectilemotion.solvers.rules import Rule
from projectilemotion.utils import deg_to_rad, rad_to_deg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Derivation:
    label: str
    rule_number: Optional[int] = None

    @classmethod
    def from_rule(cls, rule: Rule) -> Derivation:
        return cls(label=rule.label, rule_number=rule.number)

    def __str__(self) -> str:
        if self.rule_number is None:
            return self.label
        return f"#{self.rule_number} {self.label}"


LAUNCH_X = Derivation("v0=|v|cos(ang)")
LAUNCH_Y = Derivation("v0=|v|sin(ang)")
FINAL_SPEED_X = Derivation("vf=+sqrt(|vf|2-vfy2)")
FINAL_SPEED_Y = Derivation("vf=-sqrt(|vf|2-vfx2)")
SHARED_TIME = Derivation("t=t(other axis)")
LAUNCH_SPEED = Derivation("|v|=sqrt(v0x2+v0y2)")
LAUNCH_ANGLE = Derivation("ang=atan2(v0y,v0x)")
FINAL_SPEED = Derivation("|vf|=sqrt(vfx2+vfy2)")


@dataclass
class CoordinatorReport:
    derivations: Dict[Axis, Dict[Role, Derivation]] = field(
        default_factory=lambda: {Axis.X: {}, Axis.Y: {}}
    )
    polar_derivations: Dict[PolarRole, Derivation] = field(default_factory=dict)
    last_rule: Dict[Axis, Optional[Rule]] = field(
        default_factory=lambda: {Axis.X: None, Axis.Y: None}
    )
    rounds: int = 0


class CrossAxisCoordinator:
    """
    Drives both axis solvers to a joint fixed point.
    """

    def __init__(
        self,
        solver: Optional[AxisSolver] = None,
        max_rounds: int = config.COUPLING_MAX_ROUNDS,
    ) -> None:
        self.solver = solver or AxisSolver()
        self.max_rounds = max_rounds

    def resolve_all(self, state: ProblemState) -> CoordinatorReport:
        """
        Recompute every derivable quantity of `state` from its user-set inputs.

        Args:
            state: The problem state, mutated in place.

        Returns:
            Attribution of every derived value.
        """
        report = CoordinatorReport()

        # 1. Derived knowledge is never sticky
        state.forget_derived()

        self._seed_launch_vector(state, report)
        self._seed_final_speed(state, report)
        self._seed_shared_time(state, report)
        self._couple_axes(state, report)
        self._back_derive_polar(state, report)

        logger.debug(
            f"Resolved in {report.rounds} round(s): "
            f"X known={sorted(r.label for r in state.x.known_roles())}, "
            f"Y known={sorted(r.label for r in state.y.known_roles())}"
        )
        return report

    @staticmethod
    def _seed_launch_vector(state: ProblemState, report: CoordinatorReport) -> None:
        speed, angle = state.launch.speed, state.launch.angle
        if not (speed.user_set and angle.user_set):
            return
        theta = deg_to_rad(angle.value)
        for axis, component, derivation in (
            (Axis.X, speed.value * math.cos(theta), LAUNCH_X),
            (Axis.Y, speed.value * math.sin(theta), LAUNCH_Y),
        ):
            v0 = state.axis(axis)[Role.V0]
            if not v0.user_set:
                v0.set_derived(component)
                report.derivations[axis][Role.V0] = derivation

    @staticmethod
    def _seed_final_speed(state: ProblemState, report: CoordinatorReport) -> None:
        """
        Split the final speed into its missing component.

        The vertical component is assumed to point down (descending branch)
        and the horizontal one forward. Only one branch applies per call.
        """
        final = state.final.speed
        if not final.user_set:
            return
        vf_x, vf_y = state.x[Role.VF], state.y[Role.VF]

        if vf_x.known and not vf_y.user_set:
            radicand = final.value ** 2 - vf_x.value ** 2
            if radicand >= 0:
                vf_y.set_derived(-math.sqrt(radicand))
                report.derivations[Axis.Y][Role.VF] = FINAL_SPEED_Y
        elif vf_y.known and not vf_x.user_set:
            radicand = final.value ** 2 - vf_y.value ** 2
            if radicand >= 0:
                vf_x.set_derived(math.sqrt(radicand))
                report.derivations[Axis.X][Role.VF] = FINAL_SPEED_X

    @staticmethod
    def _seed_shared_time(state: ProblemState, report: CoordinatorReport) -> None:
        t_x, t_y = state.x[Role.T], state.y[Role.T]
        if t_x.user_set and not t_y.user_set:
            t_y.set_derived(t_x.value)
            report.derivations[Axis.Y][Role.T] = SHARED_TIME
        elif t_y.user_set and not t_x.user_set:
            t_x.set_derived(t_y.value)
            report.derivations[Axis.X][Role.T] = SHARED_TIME

    @staticmethod
    def _share_time(source: AxisState, target: AxisState, report: CoordinatorReport) -> bool:
        if source[Role.T].known and not target[Role.T].known:
            target[Role.T].set_derived(source[Role.T].value)
            report.derivations[target.axis][Role.T] = SHARED_TIME
            return True
        return False

    def _solve_axis(self, axis_state: AxisState, report: CoordinatorReport) -> bool:
        result = self.solver.resolve(axis_state)
        for role, rule in result.derivations.items():
            report.derivations[axis_state.axis][role] = Derivation.from_rule(rule)
        if result.last_rule is not None:
            report.last_rule[axis_state.axis] = result.last_rule
        return result.changed

    def _couple_axes(self, state: ProblemState, report: CoordinatorReport) -> None:
        """Alternate X and Y solves until a whole round derives nothing."""
        for _ in range(self.max_rounds):
            report.rounds += 1
            changed = self._solve_axis(state.x, report)
            changed |= self._share_time(state.x, state.y, report)
            changed |= self._solve_axis(state.y, report)
            changed |= self._share_time(state.y, state.x, report)
            if not changed:
                break
        else:
            logger.warning(f"Axis coupling did not settle within {self.max_rounds} rounds.")

    @staticmethod
    def _back_derive_polar(state: ProblemState, report: CoordinatorReport) -> None:
        v0_x, v0_y = state.x[Role.V0], state.y[Role.V0]
        if v0_x.known and v0_y.known:
            if not state.launch.speed.known:
                state.launch.speed.set_derived(math.hypot(v0_x.value, v0_y.value))
                report.polar_derivations[PolarRole.LAUNCH_SPEED] = LAUNCH_SPEED
            if not state.launch.angle.known:
                state.launch.angle.set_derived(rad_to_deg(math.atan2(v0_y.value, v0_x.value)))
                report.polar_derivations[PolarRole.LAUNCH_ANGLE] = LAUNCH_ANGLE

        vf_x, vf_y = state.x[Role.VF], state.y[Role.VF]
        if vf_x.known and vf_y.known and not state.final.speed.known:
            state.final.speed.set_derived(math.hypot(vf_x.value, vf_y.value))
            report.polar_derivations[PolarRole.FINAL_SPEED] = FINAL_SPEED
