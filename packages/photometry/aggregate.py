"""Field statistics, uniformity ratios, and DLI."""

from __future__ import annotations

import numpy as np

SECONDS_PER_HOUR = 3600
MICROMOL_PER_MOL = 1_000_000


def daily_light_integral(average_ppfd: float, photoperiod_hours: float) -> float:
    """Convert μmol/m²/s held for *photoperiod_hours* into mol/m²/day."""
    return average_ppfd * photoperiod_hours * SECONDS_PER_HOUR / MICROMOL_PER_MOL


def _ratio(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return float(min(1.0, max(0.0, numerator / denominator)))


def summarize_field(values: np.ndarray) -> dict:
    """Return min / max / average PPFD and both uniformity ratios.

    ``uniformity`` is min / average (the horticultural convention);
    ``uniformity_min_max`` is min / max.  Both are clamped to [0, 1] and
    are 0 for an all-dark field.
    """
    lo = float(values.min())
    hi = float(values.max())
    avg = float(values.mean())
    return {
        "min_ppfd": lo,
        "max_ppfd": hi,
        "average_ppfd": avg,
        "uniformity": _ratio(lo, avg),
        "uniformity_min_max": _ratio(lo, hi),
    }
