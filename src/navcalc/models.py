"""Pydantic v2 models for navcalc."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BoatEdge(str, Enum):
    """Edges of a boat, seen from the helm facing forward."""

    BOW = "bow"
    STERN = "stern"
    PORT = "port"
    STARBOARD = "starboard"


class GeographyDirection(str, Enum):
    """The four cardinal directions."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class Position(BaseModel):
    """A point on the local planar approximation (x ~ longitude, y ~ latitude)."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class CurrentDriftInput(BaseModel):
    """Start position, surface vector and current vector for a drift problem.

    Speeds and strengths are in knots, directions are compass degrees.
    Accepts both snake_case names and the camelCase keys used by form payloads.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    longitude: float
    latitude: float
    surface_route: float = Field(alias="surfaceRoute")
    surface_speed: float = Field(alias="surfaceSpeed")
    current_direction: float = Field(alias="currentDirection")
    current_strength: float = Field(alias="currentStrength")


class DeclinationReference(BaseModel):
    """Magnetic declination as printed on a chart, with its yearly drift.

    ``annual_delta_minutes`` is in arc-minutes per year.
    """

    model_config = ConfigDict(frozen=True)

    declination: float
    annual_delta_minutes: float = 0.0
    start_year: int


class BoatProfile(BaseModel):
    """A boat definition loaded from config."""

    name: str
    drift_coefficient: float = 1.0
    deviation: float = 0.0  # compass deviation, degrees


# --- Passage solver models ---


class PassageInput(BaseModel):
    """Everything needed to turn a desired ground track into a compass heading."""

    background_route: float
    current_direction: float = 0.0
    current_strength: float = 0.0
    surface_speed: float
    wind_speed: float = 0.0
    wind_direction: float = 0.0
    drift_coefficient: float = 1.0
    declinaison: float = 0.0
    deviation: float = 0.0


class PassageSolution(BaseModel):
    """Result of solving a passage, from ground track back to compass heading."""

    background_route: float
    surface_route: float
    wind_drift: float
    wind_side: Optional[BoatEdge] = None
    true_cape: float
    variation: float
    cape_compass: float
    boat_name: Optional[str] = None
