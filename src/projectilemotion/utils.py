from __future__ import annotations

import logging
import math
import re
from typing import Optional

logger = logging.getLogger(__name__)

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# sign, digits with at most one decimal point, optional exponent
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * DEG_TO_RAD


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * RAD_TO_DEG


def sign(value: float) -> float:
    """Return -1.0 for negative values and 1.0 otherwise (zero counts as positive)."""
    return -1.0 if value < 0 else 1.0


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Best-effort conversion of typed text into a float.

    Malformed input never raises. The longest leading numeric prefix is
    used ("12.5abc" -> 12.5, "3.4.5" -> 3.4, "-.5" -> -0.5). Text without
    any numeric prefix ("", "-", "abc") yields None, meaning "unset".

    Args:
        text: Raw text as typed by the user.

    Returns:
        The parsed value, or None if nothing numeric could be recovered.
    """
    if text is None:
        return None
    stripped = text.strip().replace("−", "-").replace(",", ".")
    if not stripped:
        return None

    match = _NUMERIC_PREFIX.match(stripped)
    if match is None:
        logger.warning(f"Could not parse {text!r} as a number, treating as unset.")
        return None

    value = float(match.group(0))
    if not math.isfinite(value):
        logger.warning(f"Parsed {text!r} to a non-finite value, treating as unset.")
        return None
    if match.end() != len(stripped):
        logger.warning(f"Coerced {text!r} to {value!r} (trailing characters ignored).")
    return value


def format_value(value: float, significant: int = 8) -> str:
    """Format a value for a narrow display cell."""
    if value == 0:
        return "0"
    text = f"{value:.{significant}g}"
    if "e" not in text and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
