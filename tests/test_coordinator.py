"""Tests for projectilemotion.solvers.coordinator."""
import copy

import pytest

from projectilemotion.model.variables import Axis, PolarRole, Role
from projectilemotion.solvers.coordinator import (
    FINAL_SPEED_X, FINAL_SPEED_Y, LAUNCH_X, SHARED_TIME, CrossAxisCoordinator
)


@pytest.fixture
def coordinator():
    return CrossAxisCoordinator()


@pytest.fixture
def launched(state):
    """20 m/s at 30 degrees over level ground."""
    state.launch.speed.set_user(20.0)
    state.launch.angle.set_user(30.0)
    state.y[Role.PF].set_user(0.0)
    return state


def test_launch_vector_seeds_both_axes(coordinator, launched):
    report = coordinator.resolve_all(launched)
    assert launched.x.value(Role.V0) == pytest.approx(17.3205, abs=1e-3)
    assert launched.y.value(Role.V0) == pytest.approx(10.0, abs=1e-9)
    assert not launched.x[Role.V0].user_set
    assert report.derivations[Axis.X][Role.V0] == LAUNCH_X


def test_launch_vector_keeps_user_component(coordinator, state):
    state.launch.speed.set_user(20.0)
    state.launch.angle.set_user(30.0)
    state.x[Role.V0].set_user(5.0)
    coordinator.resolve_all(state)
    assert state.x.value(Role.V0) == 5.0
    assert state.y.value(Role.V0) == pytest.approx(10.0)


def test_time_is_shared_between_axes(coordinator, launched):
    report = coordinator.resolve_all(launched)
    assert launched.y.value(Role.T) == pytest.approx(2.039, abs=1e-3)
    assert launched.x.value(Role.T) == launched.y.value(Role.T)
    assert report.derivations[Axis.X][Role.T] == SHARED_TIME
    assert launched.x.value(Role.D) == pytest.approx(35.31, abs=1e-2)


def test_user_time_is_copied_to_other_axis(coordinator, state):
    state.x[Role.T].set_user(3.0)
    coordinator.resolve_all(state)
    assert state.y.is_known(Role.T)
    assert not state.y.is_user_set(Role.T)
    assert state.y.value(Role.T) == 3.0


def test_final_speed_descending_branch(coordinator, state):
    state.final.speed.set_user(25.0)
    state.x[Role.VF].set_user(15.0)
    report = coordinator.resolve_all(state)
    assert state.y.value(Role.VF) == pytest.approx(-20.0)
    assert report.derivations[Axis.Y][Role.VF] == FINAL_SPEED_Y


def test_final_speed_forward_branch(coordinator, state):
    state.final.speed.set_user(25.0)
    state.y[Role.VF].set_user(-20.0)
    report = coordinator.resolve_all(state)
    assert state.x.value(Role.VF) == pytest.approx(15.0)
    assert report.derivations[Axis.X][Role.VF] == FINAL_SPEED_X


def test_final_speed_smaller_than_component(coordinator, state):
    state.final.speed.set_user(10.0)
    state.x[Role.VF].set_user(15.0)
    coordinator.resolve_all(state)
    assert not state.y.is_known(Role.VF)


def test_polar_back_derivation(coordinator, state):
    state.x[Role.V0].set_user(3.0)
    state.y[Role.V0].set_user(4.0)
    report = coordinator.resolve_all(state)
    assert state.launch.speed.value == pytest.approx(5.0)
    assert state.launch.angle.value == pytest.approx(53.1301, abs=1e-4)
    assert not state.launch.speed.user_set
    assert PolarRole.LAUNCH_ANGLE in report.polar_derivations


def test_final_speed_back_derivation(coordinator, launched):
    coordinator.resolve_all(launched)
    assert launched.final.speed.known
    assert launched.final.speed.value == pytest.approx(20.0)


def test_derived_knowledge_is_not_sticky(coordinator, state):
    state.x[Role.T].set_user(2.0)
    coordinator.resolve_all(state)
    assert state.y.is_known(Role.T)

    state.x[Role.T].clear()
    coordinator.resolve_all(state)
    assert not state.y.is_known(Role.T)
    assert state.y.value(Role.T) == 0.0


def test_alternate_chain_keeps_value_known(coordinator, state):
    # both axes independently imply t = 2 s
    state.x[Role.V0].set_user(10.0)
    state.x[Role.D].set_user(20.0)
    state.y[Role.V0].set_user(9.81)
    state.y[Role.PF].set_user(0.0)
    coordinator.resolve_all(state)
    assert state.y.value(Role.T) == pytest.approx(2.0)

    state.y[Role.PF].clear()
    coordinator.resolve_all(state)
    assert state.y.is_known(Role.T)
    assert state.y.value(Role.T) == pytest.approx(2.0)


def test_resolve_all_is_idempotent(coordinator, launched):
    coordinator.resolve_all(launched)
    first = copy.deepcopy(launched)
    coordinator.resolve_all(launched)
    assert launched == first


def test_coupling_runs_until_settled(launched):
    single_round = CrossAxisCoordinator(max_rounds=1)
    single_round.resolve_all(launched)
    # X only learns t after Y has been solved, so one round is not enough
    assert not launched.x.is_known(Role.D)

    report = CrossAxisCoordinator().resolve_all(launched)
    assert launched.x.is_known(Role.D)
    assert 2 <= report.rounds <= 10


def test_last_rule_per_axis(coordinator, launched):
    report = coordinator.resolve_all(launched)
    assert report.last_rule[Axis.X] is not None
    assert report.last_rule[Axis.Y] is not None
