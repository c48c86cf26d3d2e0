"""Route composition: declination, compass variation, capes and current drift.

Vocabulary:
    background route/speed -- track and speed over the ground
    surface route/speed    -- track and speed through the water
    true cape              -- true heading, before wind drift is applied
    cape compass           -- heading read on the magnetic compass
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Union

from navcalc.calc.angles import (
    calculate_coordinates_when_applying_force,
    degrees_to_radians,
    invert_angle_axis,
    normalize_angle,
    radians_to_degrees,
    round_fixed,
    safe_decimals,
)
from navcalc.models import CurrentDriftInput, DeclinationReference, Position
from navcalc.navigation.geography import (
    convert_latitude_degrees_to_nautical_miles,
    convert_nautical_miles_to_latitude_degrees,
)
from navcalc.navigation.wind import get_wind_drift_sign

logger = logging.getLogger(__name__)

DriftParams = Union[CurrentDriftInput, Mapping[str, Any]]


class InvalidYearRangeError(ValueError):
    """Raised when a declination is requested for a year before its reference year."""


def calculate_declinaison(
    declinaison: float,
    annual_declinaison_delta: float,
    start_year: int,
    current_year: int,
) -> float:
    """Magnetic declination for ``current_year``, rounded to 2 decimals.

    Args:
        declinaison: Declination in degrees at ``start_year``.
        annual_declinaison_delta: Yearly change in arc-minutes.
        start_year: Year the chart declination was recorded.
        current_year: Year to compute the declination for.

    Raises:
        InvalidYearRangeError: If ``current_year`` is before ``start_year``.
    """
    if current_year < start_year:
        raise InvalidYearRangeError(
            "The current year must be greater than the initial year"
        )

    years = current_year - start_year
    return round_fixed(
        safe_decimals(declinaison + annual_declinaison_delta * years / 60), 2
    )


def declinaison_for_year(reference: DeclinationReference, year: int) -> float:
    """Declination for ``year`` from a chart reference."""
    return calculate_declinaison(
        reference.declination, reference.annual_delta_minutes, reference.start_year, year
    )


def _compass_variation(declinaison: float, deviation: float) -> float:
    return safe_decimals(declinaison + deviation)


def calculate_route_compass_variation(declinaison: float, deviation: float) -> float:
    """Variation to apply when steering: declination + steering compass deviation."""
    return _compass_variation(declinaison, deviation)


def calculate_bearing_compass_variation(declinaison: float, deviation: float) -> float:
    """Variation to apply to a bearing: declination + bearing compass deviation."""
    return _compass_variation(declinaison, deviation)


def calculate_true_cape_from_cape_compass(cape_compass: float, variation: float) -> float:
    return normalize_angle(safe_decimals(cape_compass + variation))


def calculate_cape_compass(true_cape: float, variation: float) -> float:
    return normalize_angle(safe_decimals(true_cape - variation))


def calculate_true_cape(
    surface_route: float, wind_drift: float, wind_direction: float
) -> float:
    """Heading to hold so that wind drift brings the boat onto ``surface_route``."""
    sign = get_wind_drift_sign(wind_direction, surface_route)
    return normalize_angle(safe_decimals(surface_route - sign * wind_drift))


def calculate_surface_route_from_true_cape(
    true_cape: float, wind_drift: float, wind_direction: float
) -> float:
    """Track through the water obtained when holding ``true_cape`` under wind."""
    sign = get_wind_drift_sign(wind_direction, true_cape)
    return normalize_angle(safe_decimals(true_cape + sign * wind_drift))


def calculate_surface_route(
    background_route: float,
    current_direction: float,
    current_strength: float,
    surface_speed: float,
) -> float:
    """Route through the water needed to make good ``background_route``.

    Solves the current triangle with the law of sines. A current direction
    or strength of 0 means no current; a boat with no speed simply goes
    with the current. When the current is too strong for the boat to hold
    the track, there is no solution and NaN is returned.
    """
    if current_direction == 0 or current_strength == 0:
        return background_route

    if surface_speed == 0:
        return current_direction

    ratio = (
        current_strength
        * math.sin(degrees_to_radians(background_route - current_direction))
        / surface_speed
    )
    if not -1 <= ratio <= 1:
        logger.warning(
            "Current %.2fkt from %.0f is too strong to hold %.0f at %.2fkt",
            current_strength, current_direction, background_route, surface_speed,
        )
        return math.nan

    correction = radians_to_degrees(math.asin(ratio))
    return round_fixed(normalize_angle(background_route + correction), 1)


def _drift_input(params: DriftParams) -> CurrentDriftInput:
    if isinstance(params, CurrentDriftInput):
        return params
    return CurrentDriftInput.model_validate(params)


def _project(start: Position, speed_kt: float, compass_direction: float) -> Position:
    # One hour of travel, in planar degrees.
    return calculate_coordinates_when_applying_force(
        start.x,
        start.y,
        convert_nautical_miles_to_latitude_degrees(speed_kt),
        invert_angle_axis(compass_direction),
    )


def calculate_background_route(params: DriftParams) -> float:
    """Track over the ground from a surface route and a current, to 0.1 degree.

    The surface vector then the current vector are laid end to end from the
    start position; the result is the compass bearing of the displacement.
    """
    p = _drift_input(params)

    if p.surface_speed == 0 and p.current_strength == 0:
        return 0

    if p.surface_speed == 0:
        return p.current_direction

    if p.current_direction == 0 or p.current_strength == 0:
        return p.surface_route

    origin = Position(x=p.longitude, y=p.latitude)
    after_surface = _project(origin, p.surface_speed, p.surface_route)
    after_current = _project(after_surface, p.current_strength, p.current_direction)

    dx = after_current.x - origin.x
    dy = after_current.y - origin.y
    # atan2(dx, dy): bearing measured from north (+y) turning towards east (+x)
    bearing = radians_to_degrees(math.atan2(dx, dy))

    # 0.1 first so 359.96 wraps to 0, again after the wrap drops fmod noise
    return round_fixed(normalize_angle(round_fixed(safe_decimals(bearing), 1)), 1)


def calculate_background_speed(params: DriftParams) -> float:
    """Speed over the ground in knots, to 0.01 kt."""
    p = _drift_input(params)

    origin = Position(x=p.longitude, y=p.latitude)
    after_current = _project(origin, p.current_strength, p.current_direction)
    after_surface = _project(after_current, p.surface_speed, p.surface_route)

    distance_nm = convert_latitude_degrees_to_nautical_miles(
        math.sqrt(
            (after_surface.x - origin.x) ** 2 + (after_surface.y - origin.y) ** 2
        )
    )
    return round_fixed(safe_decimals(distance_nm), 2)
