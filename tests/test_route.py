"""Tests for route composition: declination, variation, capes and current."""

from __future__ import annotations

import logging
import math

import pytest

from navcalc.models import CurrentDriftInput, DeclinationReference
from navcalc.navigation.route import (
    InvalidYearRangeError,
    calculate_background_route,
    calculate_background_speed,
    calculate_bearing_compass_variation,
    calculate_cape_compass,
    calculate_declinaison,
    calculate_route_compass_variation,
    calculate_surface_route,
    calculate_surface_route_from_true_cape,
    calculate_true_cape,
    calculate_true_cape_from_cape_compass,
    declinaison_for_year,
)


class TestCalculateDeclinaison:
    def test_specific_year(self):
        assert calculate_declinaison(10.6, -8, 2000, 2015) == 8.6

    def test_year_before_start_raises(self):
        with pytest.raises(InvalidYearRangeError, match="greater than the initial year"):
            calculate_declinaison(10, 0.1, 2000, 1999)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            calculate_declinaison(10, 0.1, 2000, 1999)

    def test_zero_delta(self):
        assert calculate_declinaison(10, 0, 2000, 2023) == 10

    def test_same_year(self):
        assert calculate_declinaison(-4.17, 8, 2024, 2024) == -4.17

    def test_positive_delta_negative_declination(self):
        assert calculate_declinaison(-4.17, 8, 2000, 2024) == -0.97

    def test_negative_delta_negative_declination(self):
        assert calculate_declinaison(-4.17, -8, 2000, 2014) == -6.04

    def test_negative_delta_positive_declination(self):
        assert calculate_declinaison(4.17, -8, 2000, 2024) == 0.97

    def test_huge_declination_is_not_rounded(self):
        assert calculate_declinaison(1e27, 0, 2000, 2001) == pytest.approx(1e27)


class TestDeclinaisonForYear:
    def test_from_reference(self):
        ref = DeclinationReference(declination=10.6, annual_delta_minutes=-8, start_year=2000)
        assert declinaison_for_year(ref, 2015) == 8.6
        assert declinaison_for_year(ref, 2000) == 10.6

    def test_reference_is_not_mutated(self):
        ref = DeclinationReference(declination=4.17, annual_delta_minutes=-8, start_year=2000)
        assert declinaison_for_year(ref, 2024) == 0.97
        assert ref.declination == 4.17
        assert ref.start_year == 2000

    def test_before_reference_year(self):
        ref = DeclinationReference(declination=10, annual_delta_minutes=0.1, start_year=2000)
        with pytest.raises(InvalidYearRangeError):
            declinaison_for_year(ref, 1999)


@pytest.mark.parametrize(
    "declinaison,deviation,expected",
    [(5, 2, 7), (0, 2, 2), (5, 0, 5), (-5, 2, -3), (5, -2, 3), (-5, -2, -7), (0.1, 0.2, 0.3)],
)
def test_compass_variations(declinaison, deviation, expected):
    assert calculate_bearing_compass_variation(declinaison, deviation) == expected
    assert calculate_route_compass_variation(declinaison, deviation) == expected


class TestCapeCompass:
    def test_true_cape_from_cape_compass(self):
        assert calculate_true_cape_from_cape_compass(100, 10) == 110
        assert calculate_true_cape_from_cape_compass(100, -10) == 90
        assert calculate_true_cape_from_cape_compass(100, 0) == 100
        assert calculate_true_cape_from_cape_compass(355, 10) == 5

    def test_cape_compass(self):
        assert calculate_cape_compass(120, 5) == 115
        assert calculate_cape_compass(5, 10) == 355

    @pytest.mark.parametrize("cape", [0, 12.5, 179, 359.9])
    def test_inverse(self, cape):
        compass = calculate_cape_compass(cape, -7.5)
        assert calculate_true_cape_from_cape_compass(compass, -7.5) == pytest.approx(cape)


class TestTrueCape:
    def test_wind_from_starboard(self):
        assert calculate_true_cape(45, 10, 90) == 55

    def test_wind_from_port(self):
        assert calculate_true_cape(45, 10, 270) == 35

    def test_no_drift(self):
        assert calculate_true_cape(45, 0, 90) == 45

    def test_north(self):
        assert calculate_true_cape(0, 10, 90) == 10

    def test_wind_on_the_bow_has_no_effect(self):
        assert calculate_true_cape(45, 10, 47) == 45


class TestSurfaceRouteFromTrueCape:
    def test_wind_from_starboard(self):
        assert calculate_surface_route_from_true_cape(45, 10, 90) == 35

    def test_wind_from_port(self):
        assert calculate_surface_route_from_true_cape(45, 10, 270) == 55

    def test_no_drift(self):
        assert calculate_surface_route_from_true_cape(45, 0, 90) == 45

    def test_wraps_below_zero(self):
        assert calculate_surface_route_from_true_cape(0, 10, 90) == 350

    def test_wraps_above_360(self):
        assert calculate_surface_route_from_true_cape(355, 10, 270) == 5


class TestSurfaceRoute:
    def test_with_current(self):
        assert calculate_surface_route(186, 160, 0.9, 5) == 190.5

    def test_with_current_second(self):
        assert calculate_surface_route(302, 200, 0.8, 5) == 311

    def test_zero_current_direction(self):
        assert calculate_surface_route(45, 0, 5, 20) == 45

    def test_zero_current_strength(self):
        assert calculate_surface_route(45, 10, 0, 20) == 45

    def test_zero_surface_speed(self):
        assert calculate_surface_route(45, 10, 5, 0) == 10

    def test_current_too_strong(self, caplog):
        with caplog.at_level(logging.WARNING, logger="navcalc.navigation.route"):
            result = calculate_surface_route(90, 180, 10, 1)
        assert math.isnan(result)
        assert "too strong" in caplog.text


class TestBackgroundSpeed:
    def test_with_current(self, quiberon_drift):
        assert calculate_background_speed(quiberon_drift) == 3.99

    def test_with_current_second(self):
        params = {
            "longitude": -3.05583333333,
            "latitude": 47.5191666667,
            "currentDirection": 120,
            "currentStrength": 1.4,
            "surfaceRoute": 144,
            "surfaceSpeed": 4.2,
        }
        assert calculate_background_speed(params) == 5.51

    def test_zero_current(self):
        params = CurrentDriftInput(
            longitude=-73.935242, latitude=40.73061,
            surface_route=180, surface_speed=10,
            current_direction=90, current_strength=0,
        )
        assert calculate_background_speed(params) == pytest.approx(10, abs=0.01)

    def test_zero_surface_speed(self):
        params = CurrentDriftInput(
            longitude=-73.935242, latitude=40.73061,
            surface_route=180, surface_speed=0,
            current_direction=90, current_strength=5,
        )
        assert calculate_background_speed(params) == pytest.approx(5, abs=0.01)

    def test_both_zero(self):
        params = CurrentDriftInput(
            longitude=-73.935242, latitude=40.73061,
            surface_route=180, surface_speed=0,
            current_direction=90, current_strength=0,
        )
        assert calculate_background_speed(params) == 0


BACKGROUND_ROUTE_CASES = [
    # (longitude, latitude, surface_route, surface_speed, current_direction, current_strength, expected)
    (-2.92, 47.5036666667, 147, 2.5, 155, 1.5, 150),
    (-2.9708333333, 47.4375, 273, 2, 8, 1, 300.5),
    (-3.05925, 47.2875, 354, 3.2, 308, 1.4, 340.4),
    (-3.1016666667, 47.3808333333, 334, 4.8, 128, 0.7, 338.2),
    (-2.7525, 47.36, 311, 5, 200, 0.8, 302),
    (-2.6475, 47.3991666667, 191, 5, 160, 0.9, 186.4),
    (-2.9933333333, 47.5383333333, 154.5, 4.5, 180, 1.2, 159.8),
    (-2.9916666667, 47.5316666667, 142.5, 4, 250, 1.2, 160),
    (-2.5916666667, 47.3541666667, 355, 4, 74, 1.1, 9.4),
    (-3.04583333333, 47.4016666667, 177, 4.8, 82, 1.2, 162.7),
    (-3.04583333333, 47.4016666667, 191.1, 5, 74, 1, 180),
    (-3.04583333333, 47.4016666667, 348.9, 5, 74, 1, 0),
]


class TestBackgroundRoute:
    @pytest.mark.parametrize(
        "longitude,latitude,surface_route,surface_speed,current_direction,current_strength,expected",
        BACKGROUND_ROUTE_CASES,
    )
    def test_with_current(
        self, longitude, latitude, surface_route, surface_speed,
        current_direction, current_strength, expected,
    ):
        result = calculate_background_route(
            CurrentDriftInput(
                longitude=longitude,
                latitude=latitude,
                surface_route=surface_route,
                surface_speed=surface_speed,
                current_direction=current_direction,
                current_strength=current_strength,
            )
        )
        assert result == expected

    def test_result_in_range(self):
        for case in BACKGROUND_ROUTE_CASES:
            lon, lat, route, speed, cdir, cstr, _ = case
            result = calculate_background_route(
                {
                    "longitude": lon, "latitude": lat,
                    "surface_route": route, "surface_speed": speed,
                    "current_direction": cdir, "current_strength": cstr,
                }
            )
            assert 0 <= result < 360

    def test_no_wrap_noise_after_normalizing(self):
        for case in BACKGROUND_ROUTE_CASES:
            lon, lat, route, speed, cdir, cstr, _ = case
            result = calculate_background_route(
                CurrentDriftInput(
                    longitude=lon, latitude=lat,
                    surface_route=route, surface_speed=speed,
                    current_direction=cdir, current_strength=cstr,
                )
            )
            assert repr(result) == repr(round(result, 1))

    def test_accepts_camel_case_mapping(self):
        params = {
            "longitude": -2.92,
            "latitude": 47.5036666667,
            "surfaceRoute": 147,
            "surfaceSpeed": 2.5,
            "currentDirection": 155,
            "currentStrength": 1.5,
        }
        assert calculate_background_route(params) == 150

    def test_zero_surface_speed(self):
        params = CurrentDriftInput(
            longitude=-2.9708333333, latitude=47.4375,
            surface_route=144, surface_speed=0,
            current_direction=120, current_strength=1.4,
        )
        assert calculate_background_route(params) == 120

    def test_zero_current_strength(self):
        params = CurrentDriftInput(
            longitude=-2.9708333333, latitude=47.4375,
            surface_route=144, surface_speed=4.2,
            current_direction=120, current_strength=0,
        )
        assert calculate_background_route(params) == 144

    def test_zero_speed_and_current(self):
        params = CurrentDriftInput(
            longitude=-2.9708333333, latitude=47.4375,
            surface_route=144, surface_speed=0,
            current_direction=120, current_strength=0,
        )
        assert calculate_background_route(params) == 0

    def test_round_trip_with_surface_route(self):
        """The surface route found for a track gives that track back, to 0.5 degree."""
        surface_route = calculate_surface_route(186, 160, 0.9, 5)
        background = calculate_background_route(
            CurrentDriftInput(
                longitude=-2.6475, latitude=47.3991666667,
                surface_route=surface_route, surface_speed=5,
                current_direction=160, current_strength=0.9,
            )
        )
        assert background == pytest.approx(186, abs=0.5)
