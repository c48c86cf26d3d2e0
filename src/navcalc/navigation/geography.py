"""Nautical miles <-> degrees of latitude (one degree of latitude is 60 nm)."""

from __future__ import annotations

NAUTICAL_MILES_PER_LATITUDE_DEGREE = 60


def convert_nautical_miles_to_latitude_degrees(nautical_miles: float) -> float:
    return nautical_miles / NAUTICAL_MILES_PER_LATITUDE_DEGREE


def convert_latitude_degrees_to_nautical_miles(degrees: float) -> float:
    return degrees * NAUTICAL_MILES_PER_LATITUDE_DEGREE
