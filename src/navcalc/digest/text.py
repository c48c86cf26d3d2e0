"""Plain text formatting of navigation results."""

from __future__ import annotations

import math

from navcalc.models import PassageSolution

SEPARATOR = "=" * 40


def _deg(value: float) -> str:
    if math.isnan(value):
        return "n/a"
    return f"{value:g}°"


def format_wind_drift(drift: float) -> str:
    """One-line wind drift result."""
    return f"Wind drift: {_deg(drift)}"


def format_declination(declination: float, year: int) -> str:
    """One-line declination result."""
    return f"Declination {year}: {_deg(declination)}"


def format_solution(solution: PassageSolution) -> str:
    """Format a solved passage, one quantity per line."""
    lines: list[str] = []

    lines.append(SEPARATOR)
    if solution.boat_name:
        lines.append(f"  {solution.boat_name}")
    lines.append(f"  Background route: {_deg(solution.background_route)}")
    lines.append(SEPARATOR)

    lines.append(f"  Surface route:    {_deg(solution.surface_route)}")
    drift_line = f"  Wind drift:       {_deg(solution.wind_drift)}"
    if solution.wind_side is not None:
        drift_line += f" (wind from {solution.wind_side.value})"
    lines.append(drift_line)
    lines.append(f"  True cape:        {_deg(solution.true_cape)}")
    lines.append(f"  Variation:        {_deg(solution.variation)}")
    lines.append(f"  Cape compass:     {_deg(solution.cape_compass)}")

    lines.append(SEPARATOR)
    return "\n".join(lines)


def format_ground_track(background_route: float, background_speed: float) -> str:
    """Track and speed over the ground."""
    return (
        f"Background route: {_deg(background_route)}  "
        f"Background speed: {background_speed:g}kt"
    )
