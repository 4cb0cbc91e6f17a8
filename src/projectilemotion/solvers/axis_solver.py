from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from projectilemotion import config
from projectilemotion.model.variables import AxisState, Role
from projectilemotion.solvers.rules import RULES, Rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PassRecord:
    """What happened during one pass over the rule table."""
    fired: Tuple[int, ...]
    known_count: int


@dataclass
class SolveResult:
    """
    Outcome of AxisSolver.resolve.

    Attributes:
        state: The (mutated) axis state.
        last_rule: Last rule that fired, or None if nothing was derivable.
        derivations: Rule that produced each newly derived variable.
        passes: Per-pass trace; the final pass is the one that fired nothing
            (unless the pass bound was hit).
    """
    state: AxisState
    last_rule: Optional[Rule] = None
    derivations: Dict[Role, Rule] = field(default_factory=dict)
    passes: List[PassRecord] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.derivations)


class AxisSolver:
    """
    Fixed-point rule engine for one axis.
    """

    def __init__(
        self,
        rules: Sequence[Rule] = RULES,
        max_passes: int = config.SOLVER_MAX_PASSES,
    ) -> None:
        """
        Initialize the solver.

        Args:
            rules: Rule table, evaluated in the given order on every pass.
            max_passes: Upper bound on passes; at least twice the variable
                count so every variable gets a chance to be derived.
        """
        self.rules = tuple(rules)
        self.max_passes = max(max_passes, 2 * config.VARIABLE_COUNT)

    def resolve(self, state: AxisState) -> SolveResult:
        """
        Derive as many unknown variables of `state` as the rules permit.

        Values are worked on in a local copy; after convergence derived values
        are written back and marked known. User-set variables are left untouched.

        Args:
            state: Axis state; its current `known` flags are the starting point.

        Returns:
            SolveResult with the updated state and per-variable attribution.
        """
        values: Dict[Role, float] = {role: var.value for role, var in state}
        known: Dict[Role, bool] = {role: var.known for role, var in state}
        result = SolveResult(state=state)

        for _ in range(self.max_passes):
            fired: List[int] = []
            for rule in self.rules:
                if known[rule.output]:
                    continue
                if not all(known[role] for role in rule.inputs):
                    continue
                value = rule.compute(values)
                if value is None or not math.isfinite(value):
                    continue

                values[rule.output] = value
                known[rule.output] = True
                result.derivations[rule.output] = rule
                result.last_rule = rule
                fired.append(rule.number)
                logger.debug(f"{state.axis.value}: {rule} -> {rule.output.label}={value:g}")

            result.passes.append(PassRecord(fired=tuple(fired), known_count=sum(known.values())))
            if not fired:
                break

        for role, var in state:
            if not var.user_set and known[role]:
                var.value = values[role]
                var.known = True

        return result
