"""Wind drift magnitude and side."""

from __future__ import annotations

import math
from typing import Optional

from navcalc.calc.angles import add_angle, are_angles_close, round_fixed, safe_decimals
from navcalc.models import BoatEdge


def calculate_wind_drift(
    wind_speed: float, boat_speed: float, drift_coefficient: float
) -> float:
    """Wind drift angle in degrees, rounded to 2 decimals.

    drift = wind_speed * drift_coefficient / boat_speed, or 0 for a boat
    making no way. The sign follows the signs of the inputs.
    """
    if boat_speed == 0:
        return 0

    return round_fixed(safe_decimals(wind_speed * drift_coefficient / boat_speed), 2)


def get_wind_drift_sign(wind_direction: float, boat_direction: float) -> int:
    """Side the wind pushes the boat towards, as a sign.

    0 = wind from the bow or the stern (no lateral drift)
    -1 = wind from starboard
    1 = wind from port
    """
    if are_angles_close(wind_direction, boat_direction) or are_angles_close(
        wind_direction, add_angle(boat_direction, -180)
    ):
        return 0

    if boat_direction >= 180:
        if wind_direction > boat_direction or wind_direction <= boat_direction - 180:
            return -1
        return 1

    if wind_direction < boat_direction or wind_direction >= boat_direction + 180:
        return 1
    return -1


def wind_side(wind_direction: float, boat_direction: float) -> Optional[BoatEdge]:
    """Edge of the boat the wind is coming from, or None for an undefined heading."""
    if math.isnan(wind_direction) or math.isnan(boat_direction):
        return None
    sign = get_wind_drift_sign(wind_direction, boat_direction)
    if sign == -1:
        return BoatEdge.STARBOARD
    if sign == 1:
        return BoatEdge.PORT
    if are_angles_close(wind_direction, boat_direction):
        return BoatEdge.BOW
    return BoatEdge.STERN
