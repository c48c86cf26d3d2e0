"""Shared test fixtures."""

from __future__ import annotations

import pytest

from navcalc.models import CurrentDriftInput, PassageInput

BOATS_YAML = """\
boats:
  dinghy:
    name: Test Dinghy
    drift_coefficient: 2.0
    deviation: -2.0
  keelboat:
    name: Test Keelboat
    drift_coefficient: 0.5
"""


@pytest.fixture
def quiberon_drift():
    """Current drift problem off Quiberon (~4 kt over the ground to 150)."""
    return CurrentDriftInput(
        longitude=-2.92,
        latitude=47.5036666667,
        surface_route=147,
        surface_speed=2.5,
        current_direction=155,
        current_strength=1.5,
    )


@pytest.fixture
def sample_passage():
    """Passage to make good 150 with a 1.5 kt current setting 155."""
    return PassageInput(
        background_route=150,
        current_direction=155,
        current_strength=1.5,
        surface_speed=2.5,
        wind_speed=12.5,
        wind_direction=0,
        drift_coefficient=1.0,
        declinaison=4,
        deviation=8,
    )


@pytest.fixture
def boats_config_dir(tmp_path):
    """Config directory holding a two-boat boats.yaml."""
    (tmp_path / "boats.yaml").write_text(BOATS_YAML)
    return tmp_path
