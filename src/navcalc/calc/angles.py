"""Angle arithmetic and scalar primitives shared by every navigation formula.

Angles are in degrees unless a name says radians. Compass angles start at
north and turn clockwise; "mathematical" angles start on the +x axis and
turn counter-clockwise. ``invert_angle_axis`` converts between the two.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from navcalc.models import Position

SAFE_DECIMALS_FACTOR = 10**14  # 14 decimals supported
CLOSE_ANGLE_TOLERANCE_DEG = 5
FIXED_POINT_LIMIT = 1e21


def safe_decimals(number: float) -> float:
    """Round to 14 decimal places to drop floating-point accumulation noise.

    Ties on the scaled value round up (toward +infinity). NaN, infinities and
    values too large to scale pass through unchanged.
    """
    if not math.isfinite(number):
        return number
    scaled = number * SAFE_DECIMALS_FACTOR
    if not math.isfinite(scaled):
        return number
    rounded = math.floor(scaled)
    if scaled - rounded >= 0.5:
        rounded += 1
    return rounded / SAFE_DECIMALS_FACTOR


def round_fixed(number: float, digits: int) -> float:
    """Round to a fixed number of decimals, ties away from zero.

    The decision is made on the exact binary value of ``number``, so
    ``round_fixed(1.005, 2)`` is 1.0 (1.005 is stored as 1.00499...).
    Magnitudes of 1e21 and above have no fractional part and come back as is.
    """
    if not math.isfinite(number) or abs(number) >= FIXED_POINT_LIMIT:
        return number
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(number).quantize(quantum, rounding=ROUND_HALF_UP))


def _trunc_mod(angle: float, divisor: float) -> float:
    # Truncating modulo: the result carries the sign of ``angle``.
    return math.fmod(angle, divisor)


def add_angle(angle: float, value: float) -> float:
    """Add ``value`` to ``angle`` and wrap the result into [0, 360)."""
    return _trunc_mod(_trunc_mod(angle + value, 360) + 360, 360)


def normalize_angle(angle: float, allow_negative: bool = False) -> float:
    """Wrap an angle into [0, 360).

    With ``allow_negative`` the angle is only reduced by truncating modulo,
    so the result lies in (-360, 360) and keeps the sign of the input,
    negative zero included: ``normalize_angle(-1080, True)`` is ``-0.0``.
    """
    if allow_negative:
        return _trunc_mod(angle, 360)
    return _trunc_mod(_trunc_mod(angle, 360) + 360, 360)


def are_angles_close(angle1: float, angle2: float) -> bool:
    """True when two angles are within 5 degrees, across the 0/360 seam too."""
    distance = abs(angle1 - angle2)
    return (
        distance <= CLOSE_ANGLE_TOLERANCE_DEG
        or 360 - distance <= CLOSE_ANGLE_TOLERANCE_DEG
    )


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


def radians_to_degrees(radians: float) -> float:
    return radians * (180 / math.pi)


def cot(x: float) -> float:
    """Cotangent of ``x`` radians. Poles give a signed infinity, not an error."""
    tangent = math.tan(x)
    if tangent == 0:
        return math.copysign(math.inf, tangent)
    return 1 / tangent


def arcctg(x: float) -> float:
    """Inverse cotangent, in radians within (0, pi)."""
    return math.pi / 2 - math.atan(x)


def invert_angle_axis(angle: float) -> float:
    """Swap between compass and mathematical angle conventions (90 - angle).

    No wrapping is applied; callers normalize when they need to.
    """
    return 90 - angle


def calculate_coordinates_when_applying_force(
    x: float, y: float, force: float, angle: float
) -> Position:
    """Move from (x, y) by ``force`` along a mathematical ``angle`` in degrees.

    A negative force moves in the opposite direction. Both coordinates go
    through ``safe_decimals`` so later comparisons are not thrown off by
    floating-point noise.
    """
    radians = degrees_to_radians(angle)
    return Position(
        x=safe_decimals(x + force * math.cos(radians)),
        y=safe_decimals(y + force * math.sin(radians)),
    )
