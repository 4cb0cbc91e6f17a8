from projectilemotion.solvers.axis_solver import AxisSolver, SolveResult
from projectilemotion.solvers.coordinator import CoordinatorReport, CrossAxisCoordinator, Derivation
from projectilemotion.solvers.rules import RULES, Rule

__all__ = [
    "AxisSolver",
    "SolveResult",
    "CoordinatorReport",
    "CrossAxisCoordinator",
    "Derivation",
    "RULES",
    "Rule",
]
