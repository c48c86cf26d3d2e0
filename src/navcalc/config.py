"""Boat profile loading from YAML."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from navcalc.models import BoatProfile

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"


def _config_dir(config_dir: Path | None) -> Path:
    if config_dir is not None:
        return config_dir
    env_dir = os.environ.get("NAVCALC_CONFIG_DIR")
    return Path(env_dir) if env_dir else CONFIG_DIR


def _load_boats(config_dir: Path | None) -> dict:
    boats_file = _config_dir(config_dir) / "boats.yaml"

    with open(boats_file) as f:
        data = yaml.safe_load(f) or {}

    return data.get("boats", {}) or {}


def load_boat(name: str, config_dir: Path | None = None) -> BoatProfile:
    """Load a named boat profile from boats.yaml.

    Args:
        name: Boat key in boats.yaml.
        config_dir: Override for config directory (testing). Falls back to
            NAVCALC_CONFIG_DIR, then the repository config/ directory.
    """
    boats = _load_boats(config_dir)
    if name not in boats:
        available = ", ".join(boats.keys())
        raise KeyError(f"Boat '{name}' not found. Available: {available}")

    b = boats[name] or {}
    return BoatProfile(
        name=b.get("name", name),
        drift_coefficient=b.get("drift_coefficient", 1.0),
        deviation=b.get("deviation", 0.0),
    )


def list_boats(config_dir: Path | None = None) -> list[str]:
    """List available boat names."""
    return list(_load_boats(config_dir).keys())
