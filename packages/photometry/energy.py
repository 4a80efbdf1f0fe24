"""Electrical load of a fixture layout."""

from __future__ import annotations

from collections.abc import Sequence

from packages.core.types import EnergySummary, LightSource


def summarize_energy(sources: Sequence[LightSource], photoperiod_hours: float) -> EnergySummary:
    """Total wattage, PPF, and efficacy of the enabled sources.

    Dimming scales both PPF and wattage.  Sources without a known wattage
    count towards PPF but not towards efficacy.
    """
    total_w = 0.0
    total_ppf = 0.0
    rated_ppf = 0.0  # PPF of sources with a known wattage
    for s in sources:
        if not s.enabled:
            continue
        total_ppf += s.effective_ppf
        if s.wattage is not None:
            total_w += s.wattage * s.dimming / 100.0
            rated_ppf += s.effective_ppf

    daily_kwh = total_w * photoperiod_hours / 1000.0
    return EnergySummary(
        total_wattage=total_w,
        total_ppf=total_ppf,
        efficacy=rated_ppf / total_w if total_w > 0 else 0.0,
        daily_kwh=daily_kwh,
        annual_kwh=daily_kwh * 365,
    )
