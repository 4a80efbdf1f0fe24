"""Shared test fixtures – a typical 600 W LED over a small canopy."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from packages.core.types import CalcOptions, LightSource, PlaneSpec

# ~600 W LED at 2.7 μmol/J
LED_600W_PPF = 1600.0


def _make_source(
    id: str = "led-1",
    x: float = 0.6,
    y: float = 0.6,
    z: float = 0.91,
    ppf: float = LED_600W_PPF,
    beam_angle: float = 120.0,
    **kwargs,
) -> LightSource:
    return LightSource(id=id, x=x, y=y, z=z, ppf=ppf, beam_angle=beam_angle, **kwargs)


@pytest.fixture()
def led_600w() -> LightSource:
    """One 120° fixture, 0.91 m (3 ft) above the centre of a 1.2 m canopy."""
    return _make_source()


@pytest.fixture()
def canopy_plane() -> PlaneSpec:
    """A 1.2 m × 1.2 m canopy (about a 4 ft × 4 ft tent)."""
    return PlaneSpec(width=1.2, length=1.2, resolution=0.1)


@pytest.fixture()
def room_plane() -> PlaneSpec:
    """A 4 m × 6 m room at 0.5 m sampling."""
    return PlaneSpec(width=4.0, length=6.0, resolution=0.5)


@pytest.fixture()
def options() -> CalcOptions:
    return CalcOptions(photoperiod_hours=12)


@pytest.fixture()
def layout_dict() -> dict:
    """A two-fixture room with a small catalog and design targets."""
    return {
        "name": "veg-room",
        "plane": {"width": 2.4, "length": 1.2, "resolution": 0.2},
        "fixtures": {
            "bar-600": {
                "ppf": LED_600W_PPF,
                "beam_angle": 120,
                "wattage": 600,
                "spectrum": {"blue": 0.18, "green": 0.1, "red": 0.72},
            }
        },
        "sources": [
            {"id": "a", "x": 0.6, "y": 0.6, "z": 0.91, "fixture": "bar-600"},
            {"id": "b", "x": 1.8, "y": 0.6, "z": 0.91, "fixture": "bar-600", "dimming": 50},
        ],
        "options": {"photoperiod_hours": 18},
        "targets": {"ppfd": 500, "dli": 10},
    }


@pytest.fixture()
def layout_file(tmp_path: Path, layout_dict: dict) -> Path:
    path = tmp_path / "veg-room.json"
    path.write_text(json.dumps(layout_dict))
    return path
