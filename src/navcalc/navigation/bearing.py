"""Bearing corrections: compass to true, relative to absolute."""

from __future__ import annotations

from navcalc.calc.angles import normalize_angle, safe_decimals


def calculate_true_bearing(compass_bearing: float, variation: float) -> float:
    """True bearing from a compass bearing and the bearing compass variation."""
    return normalize_angle(safe_decimals(compass_bearing + variation))


def calculate_true_relative_bearing(
    observed_relative_bearing: float, instrumental_error: float
) -> float:
    """Relative bearing corrected for the instrument's own error, in [0, 360)."""
    return normalize_angle(safe_decimals(observed_relative_bearing + instrumental_error))


def calculate_bearing_from_relative_bearing(relative_bearing: float, cape: float) -> float:
    """Absolute bearing of an object seen at ``relative_bearing`` off the bow."""
    return normalize_angle(safe_decimals(relative_bearing + cape))
