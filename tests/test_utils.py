"""Tests for projectilemotion.utils."""
import math

import pytest

from projectilemotion.utils import deg_to_rad, format_value, parse_number, rad_to_deg


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12.5", 12.5),
        ("  -3 ", -3.0),
        ("-.5", -0.5),
        ("1e3", 1000.0),
        ("12.5abc", 12.5),
        ("3.4.5", 3.4),
        ("7-", 7.0),
        ("2,5", 2.5),
        ("1e", 1.0),
    ],
)
def test_parse_number_prefix(text, expected):
    assert parse_number(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", [None, "", "   ", "-", ".", "abc", "1e999"])
def test_parse_number_unset(text):
    assert parse_number(text) is None


def test_parse_number_warns_on_coercion(caplog):
    with caplog.at_level("WARNING", logger="projectilemotion.utils"):
        parse_number("4x")
    assert "Coerced" in caplog.text


def test_angle_conversion():
    assert deg_to_rad(180.0) == pytest.approx(math.pi)
    assert rad_to_deg(math.pi / 2) == pytest.approx(90.0)


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, "0"), (-0.0, "0"), (10.0, "10"), (17.320508075688775, "17.320508"), (-9.81, "-9.81")],
)
def test_format_value(value, expected):
    assert format_value(value) == expected
