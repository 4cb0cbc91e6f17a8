"""Tests for projectilemotion.solvers.axis_solver."""
import pytest

from projectilemotion.model.variables import Axis, Role
from projectilemotion.solvers.axis_solver import AxisSolver
from projectilemotion.solvers.rules import RULES_BY_NUMBER


@pytest.fixture
def solver():
    return AxisSolver()


def test_empty_axis_derives_nothing(solver, make_axis):
    result = solver.resolve(make_axis())
    assert result.last_rule is None
    assert result.derivations == {}
    assert len(result.passes) == 1
    assert not result.state.known_roles()


def test_zero_acceleration_never_uses_nonzero_guarded_rules(solver, make_axis):
    result = solver.resolve(make_axis(Axis.X, d=100.0, t=10.0, a=0.0))
    state = result.state

    assert state.value(Role.V0) == pytest.approx(10.0)
    assert state.value(Role.VF) == pytest.approx(10.0)
    fired = [number for record in result.passes for number in record.fired]
    assert fired
    assert not any(RULES_BY_NUMBER[number].needs_nonzero_accel for number in fired)


def test_constant_velocity_copies_v0(solver, make_axis):
    result = solver.resolve(make_axis(Axis.X, v0=4.0, a=0.0))
    assert result.state.value(Role.VF) == pytest.approx(4.0)
    assert result.derivations[Role.VF].number == 5


def test_quadratic_time_skips_trivial_root(solver, make_axis):
    result = solver.resolve(make_axis(Axis.Y, v0=5.0, a=-9.81, d=0.0))
    assert result.state.is_known(Role.T)
    assert result.state.value(Role.T) == pytest.approx(1.019, abs=1e-3)
    assert result.derivations[Role.T].number == 21


def test_position_chain(solver, make_axis):
    # released from rest 20 m above the landing point
    result = solver.resolve(make_axis(Axis.Y, p0=20.0, pf=0.0, v0=0.0, a=-9.81))
    state = result.state
    assert state.value(Role.D) == pytest.approx(-20.0)
    assert state.value(Role.T) == pytest.approx((2 * 20.0 / 9.81) ** 0.5)
    assert result.derivations[Role.D].number == 1
    assert state.known_roles() == frozenset(Role)


def test_user_values_are_never_overwritten(solver, make_axis):
    # deliberately inconsistent: pf - p0 != d
    axis = make_axis(Axis.X, p0=0.0, pf=10.0, d=5.0)
    result = solver.resolve(axis)
    assert axis.value(Role.PF) == 10.0
    assert axis.value(Role.D) == 5.0
    assert Role.PF not in result.derivations
    assert Role.D not in result.derivations


def test_derived_values_are_not_marked_user_set(solver, make_axis):
    axis = make_axis(Axis.X, v0=4.0, a=0.0)
    solver.resolve(axis)
    assert axis[Role.VF].known
    assert not axis[Role.VF].user_set


def test_known_set_grows_monotonically(solver, make_axis):
    result = solver.resolve(make_axis(Axis.Y, p0=0.0, pf=0.0, v0=10.0, a=-9.81))
    counts = [record.known_count for record in result.passes]
    assert counts == sorted(counts)
    assert result.passes[-1].fired == ()
    assert len(result.passes) <= solver.max_passes


def test_attribution_is_per_variable(solver, make_axis):
    result = solver.resolve(make_axis(Axis.Y, p0=0.0, pf=0.0, v0=10.0, a=-9.81))
    assert result.derivations[Role.D].number == 1
    assert result.derivations[Role.T].number == 21
    assert result.last_rule in result.derivations.values()


def test_pass_bound_covers_every_variable():
    assert AxisSolver(max_passes=3).max_passes >= 14


def test_resolve_is_idempotent(solver, make_axis):
    axis = make_axis(Axis.Y, p0=0.0, pf=0.0, v0=10.0, a=-9.81)
    solver.resolve(axis)
    before = axis.copy()
    second = solver.resolve(axis)
    assert axis == before
    assert not second.changed
