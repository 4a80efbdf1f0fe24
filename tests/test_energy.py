"""Tests for the energy summary."""

from __future__ import annotations

import pytest

from packages.core.types import LightSource
from packages.photometry.energy import summarize_energy


def _source(id: str, **kw) -> LightSource:
    base = dict(x=0, y=0, z=1, ppf=1600.0, beam_angle=120.0, wattage=600.0)
    base.update(kw)
    return LightSource(id=id, **base)


class TestSummarizeEnergy:
    def test_dimming_and_disabled(self):
        sources = [
            _source("a"),
            _source("b", dimming=50.0),
            _source("c", enabled=False),
        ]
        summary = summarize_energy(sources, photoperiod_hours=18)
        assert summary.total_wattage == pytest.approx(900.0)
        assert summary.total_ppf == pytest.approx(2400.0)
        assert summary.efficacy == pytest.approx(2400 / 900)
        assert summary.daily_kwh == pytest.approx(16.2)
        assert summary.annual_kwh == pytest.approx(16.2 * 365)

    def test_unknown_wattage(self):
        summary = summarize_energy([_source("a", wattage=None)], photoperiod_hours=12)
        assert summary.total_ppf == pytest.approx(1600.0)
        assert summary.total_wattage == 0.0
        assert summary.efficacy == 0.0
