"""
Read-only views of the problem state for rendering collaborators.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class QuantityView:
    value: float
    known: bool
    user_set: bool
    derived_by: Optional[str] = None

    @property
    def derived(self) -> bool:
        return self.known and not self.user_set


@dataclass(frozen=True)
class AxisView:
    axis: str
    variables: Dict[str, QuantityView]
    last_rule: Optional[str] = None

    def __getitem__(self, label: str) -> QuantityView:
        return self.variables[label]


@dataclass(frozen=True)
class SummaryView:
    max_height: Optional[float]
    time_of_flight: Optional[float]
    range: Optional[float]


@dataclass(frozen=True)
class Snapshot:
    """
    Complete, immutable picture of the problem after a resolve.

    Keys are the short labels used on screen: "p0".."t" for axis variables,
    "launch_speed", "launch_angle" and "final_speed" for the polar values.
    """
    x: AxisView
    y: AxisView
    polar: Dict[str, QuantityView]
    summary: SummaryView

    def axis(self, name: str) -> AxisView:
        return self.x if name.upper() == "X" else self.y
