"""Compare a coverage result against PPFD / DLI / uniformity targets."""

from __future__ import annotations

from typing import Optional

from packages.core.types import CalculationResult, Impact, Recommendation, RecommendationKind

# Below 90 % of target → add light; above 120 % → dim.
LOW_BAND = 0.9
HIGH_BAND = 1.2


def coverage_percent(result: CalculationResult, target_ppfd: float) -> float:
    """Average PPFD as a percentage of *target_ppfd*."""
    if target_ppfd <= 0:
        return 0.0
    return result.average_ppfd / target_ppfd * 100.0


def _band_checks(label: str, unit: str, actual: float, target: float) -> list[Recommendation]:
    out: list[Recommendation] = []
    if actual < target * LOW_BAND:
        out.append(
            Recommendation(
                kind=RecommendationKind.SUGGESTION,
                message=(
                    f"Average {label} ({actual:.1f} {unit}) is below target ({target:g} {unit}). "
                    "Add more fixtures or increase dimming levels."
                ),
                impact=Impact.HIGH,
            )
        )
    elif actual > target * HIGH_BAND:
        out.append(
            Recommendation(
                kind=RecommendationKind.OPTIMIZATION,
                message=(
                    f"Average {label} exceeds target by {(actual / target - 1) * 100:.1f}%. "
                    "Consider dimming fixtures to save energy."
                ),
                impact=Impact.MEDIUM,
            )
        )
    return out


def evaluate_targets(
    result: CalculationResult,
    *,
    target_ppfd: Optional[float] = None,
    target_dli: Optional[float] = None,
    min_uniformity: float = 0.7,
) -> list[Recommendation]:
    """Return recommendations for uniformity and any targets that are set."""
    recs: list[Recommendation] = []
    if result.uniformity < min_uniformity:
        recs.append(
            Recommendation(
                kind=RecommendationKind.WARNING,
                message=(
                    f"Light uniformity is {result.uniformity * 100:.1f}%. "
                    "Consider redistributing fixtures for better coverage."
                ),
                impact=Impact.HIGH,
            )
        )
    if target_ppfd:
        recs.extend(_band_checks("PPFD", "μmol/m²/s", result.average_ppfd, target_ppfd))
    if target_dli:
        recs.extend(_band_checks("DLI", "mol/m²/day", result.dli, target_dli))
    for warning in result.warnings:
        recs.append(
            Recommendation(
                kind=RecommendationKind.WARNING,
                message=warning.message,
                impact=Impact.LOW,
            )
        )
    return recs
