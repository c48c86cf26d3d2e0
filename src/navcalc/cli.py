"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from navcalc.config import list_boats, load_boat
from navcalc.digest.text import (
    format_declination,
    format_ground_track,
    format_solution,
    format_wind_drift,
)
from navcalc.models import (
    BoatProfile,
    CurrentDriftInput,
    DeclinationReference,
    PassageInput,
)
from navcalc.navigation.route import (
    InvalidYearRangeError,
    calculate_background_route,
    calculate_background_speed,
    declinaison_for_year,
)
from navcalc.navigation.wind import calculate_wind_drift
from navcalc.solver import solve_passage

logger = logging.getLogger(__name__)


def _resolve_boat(name: str | None) -> BoatProfile | None:
    """Load the boat named on the command line or in NAVCALC_BOAT, if any."""
    boat_name = name or os.environ.get("NAVCALC_BOAT")
    if not boat_name:
        return None
    try:
        boat = load_boat(boat_name)
    except (KeyError, FileNotFoundError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    logger.debug("Using boat profile %s", boat)
    return boat


def run_drift(args: argparse.Namespace) -> None:
    coefficient = args.coefficient
    if coefficient is None:
        boat = _resolve_boat(args.boat)
        coefficient = boat.drift_coefficient if boat else 1.0

    drift = calculate_wind_drift(args.wind_speed, args.boat_speed, coefficient)
    print(format_wind_drift(drift))


def run_declination(args: argparse.Namespace) -> None:
    reference = DeclinationReference(
        declination=args.declination,
        annual_delta_minutes=args.delta,
        start_year=args.start_year,
    )
    try:
        declination = declinaison_for_year(reference, args.year)
    except InvalidYearRangeError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    print(format_declination(declination, args.year))


def run_ground(args: argparse.Namespace) -> None:
    params = CurrentDriftInput(
        longitude=args.lon,
        latitude=args.lat,
        surface_route=args.surface_route,
        surface_speed=args.surface_speed,
        current_direction=args.current_direction,
        current_strength=args.current_strength,
    )
    print(
        format_ground_track(
            calculate_background_route(params), calculate_background_speed(params)
        )
    )


def run_solve(args: argparse.Namespace) -> None:
    passage = PassageInput(
        background_route=args.background_route,
        current_direction=args.current_direction,
        current_strength=args.current_strength,
        surface_speed=args.surface_speed,
        wind_speed=args.wind_speed,
        wind_direction=args.wind_direction,
        drift_coefficient=args.coefficient,
        declinaison=args.declination,
        deviation=args.deviation,
    )
    solution = solve_passage(passage, boat=_resolve_boat(args.boat))
    print(format_solution(solution))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="navcalc",
        description="Dead-reckoning navigation calculator",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # drift subcommand
    drift_parser = subparsers.add_parser("drift", help="Wind drift angle")
    drift_parser.add_argument("--wind-speed", type=float, required=True, help="Wind speed (kt)")
    drift_parser.add_argument("--boat-speed", type=float, required=True, help="Boat speed (kt)")
    drift_parser.add_argument(
        "--coefficient", type=float, default=None,
        help="Drift coefficient (default: from boat profile, else 1.0)",
    )
    drift_parser.add_argument("--boat", help="Boat profile from boats.yaml (or NAVCALC_BOAT)")

    # declination subcommand
    decl_parser = subparsers.add_parser(
        "declination", help="Magnetic declination for a given year"
    )
    decl_parser.add_argument(
        "--declination", type=float, required=True, help="Chart declination (degrees)"
    )
    decl_parser.add_argument(
        "--delta", type=float, default=0.0, help="Annual change (arc-minutes/year)"
    )
    decl_parser.add_argument("--start-year", type=int, required=True, help="Chart year")
    decl_parser.add_argument("--year", type=int, required=True, help="Year to compute")

    # ground subcommand
    ground_parser = subparsers.add_parser(
        "ground", help="Track and speed over the ground under a current"
    )
    ground_parser.add_argument("--lat", type=float, default=0.0, help="Start latitude")
    ground_parser.add_argument("--lon", type=float, default=0.0, help="Start longitude")
    ground_parser.add_argument("--surface-route", type=float, required=True)
    ground_parser.add_argument("--surface-speed", type=float, required=True)
    ground_parser.add_argument("--current-direction", type=float, default=0.0)
    ground_parser.add_argument("--current-strength", type=float, default=0.0)

    # solve subcommand
    solve_parser = subparsers.add_parser(
        "solve", help="Compass heading to steer for a track to make good"
    )
    solve_parser.add_argument("--background-route", type=float, required=True)
    solve_parser.add_argument("--surface-speed", type=float, required=True)
    solve_parser.add_argument("--current-direction", type=float, default=0.0)
    solve_parser.add_argument("--current-strength", type=float, default=0.0)
    solve_parser.add_argument("--wind-speed", type=float, default=0.0)
    solve_parser.add_argument("--wind-direction", type=float, default=0.0)
    solve_parser.add_argument("--coefficient", type=float, default=1.0)
    solve_parser.add_argument("--declination", type=float, default=0.0)
    solve_parser.add_argument("--deviation", type=float, default=0.0)
    solve_parser.add_argument(
        "--boat", help="Boat profile (overrides --coefficient and --deviation)"
    )

    # boats subcommand
    subparsers.add_parser("boats", help="List configured boat profiles")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "boats":
        for name in list_boats():
            print(f"  {name}")
    elif args.command == "drift":
        run_drift(args)
    elif args.command == "declination":
        run_declination(args)
    elif args.command == "ground":
        run_ground(args)
    elif args.command == "solve":
        run_solve(args)


if __name__ == "__main__":
    main()
