"""Passage solver: from the track to make good back to the compass heading.

Chains the navigation formulas the way they are worked on a chart:

    background route + current  -> surface route
    surface route + wind drift  -> true cape
    true cape + variation       -> cape compass
"""

from __future__ import annotations

import logging

from navcalc.models import BoatProfile, PassageInput, PassageSolution
from navcalc.navigation.route import (
    calculate_cape_compass,
    calculate_route_compass_variation,
    calculate_surface_route,
    calculate_true_cape,
)
from navcalc.navigation.wind import calculate_wind_drift, wind_side

logger = logging.getLogger(__name__)


def solve_passage(
    passage: PassageInput, boat: BoatProfile | None = None
) -> PassageSolution:
    """Compute surface route, true cape and compass heading for a passage.

    When ``boat`` is given, its drift coefficient and deviation replace the
    ones in ``passage``.
    """
    if boat is not None:
        passage = passage.model_copy(
            update={
                "drift_coefficient": boat.drift_coefficient,
                "deviation": boat.deviation,
            }
        )

    surface_route = calculate_surface_route(
        passage.background_route,
        passage.current_direction,
        passage.current_strength,
        passage.surface_speed,
    )
    logger.debug(
        "Surface route %s for background route %s (current %s/%skt)",
        surface_route, passage.background_route,
        passage.current_direction, passage.current_strength,
    )

    wind_drift = calculate_wind_drift(
        passage.wind_speed, passage.surface_speed, passage.drift_coefficient
    )
    true_cape = calculate_true_cape(surface_route, wind_drift, passage.wind_direction)
    logger.debug("Wind drift %s -> true cape %s", wind_drift, true_cape)

    variation = calculate_route_compass_variation(passage.declinaison, passage.deviation)
    cape_compass = calculate_cape_compass(true_cape, variation)
    logger.debug("Variation %s -> cape compass %s", variation, cape_compass)

    return PassageSolution(
        background_route=passage.background_route,
        surface_route=surface_route,
        wind_drift=wind_drift,
        wind_side=wind_side(passage.wind_direction, surface_route),
        true_cape=true_cape,
        variation=variation,
        cape_compass=cape_compass,
        boat_name=boat.name if boat else None,
    )
