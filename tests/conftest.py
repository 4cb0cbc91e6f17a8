"""Shared fixtures for the projectilemotion tests."""
import os

import pytest

# GUI smoke tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from projectilemotion.controller.engine import KinematicsEngine
from projectilemotion.model.state import ProblemState
from projectilemotion.model.variables import Axis, AxisState, Role


@pytest.fixture
def engine():
    return KinematicsEngine()


@pytest.fixture
def state():
    return ProblemState()


@pytest.fixture
def make_axis():
    """Build a bare axis state with the given user-set values."""
    def _make(axis=Axis.Y, **values):
        axis_state = AxisState(axis=axis)
        for label, value in values.items():
            axis_state[Role.from_label(label)].set_user(value)
        return axis_state
    return _make


@pytest.fixture
def check_user_set_known():
    """Assert user_set implies known for every quantity of a state."""
    def _check(problem_state):
        for key, quantity in problem_state.iter_quantities():
            if quantity.user_set:
                assert quantity.known, f"{key} is user-set but not known"
    return _check
