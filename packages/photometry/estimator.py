"""Photometric coverage estimator: light sources + plane → PPFD field + DLI."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

import numpy as np

from packages.core.types import CalcOptions, CalculationResult, LightSource, PlaneSpec
from packages.photometry.aggregate import daily_light_integral, summarize_field
from packages.photometry.calibration import check_calibration, confidence_for
from packages.photometry.grid import build_grid, to_sample_grid
from packages.photometry.radiometry import source_contributions
from packages.photometry.validate import to_metres, validate_inputs

logger = logging.getLogger(__name__)


def compute_field(
    sources: Sequence[LightSource],
    xs: np.ndarray,
    ys: np.ndarray,
    options: CalcOptions,
) -> np.ndarray:
    """Sum every source's contribution at each ``(xs[k], ys[k])``.

    Disabled sources are skipped; the reflectance bonus is applied to the
    summed field.
    """
    active = [s for s in sources if s.enabled]
    if not active:
        return np.zeros(len(xs))

    points = np.column_stack((xs, ys))
    positions = np.array([[s.x, s.y, s.z] for s in active], dtype=np.float64)
    ppf = np.array([s.effective_ppf for s in active], dtype=np.float64)
    beams = np.array([s.beam_angle for s in active], dtype=np.float64)

    contributions = source_contributions(points, positions, ppf, beams, options)
    return contributions.sum(axis=1) * (1.0 + options.reflectance)


def compute_coverage(
    sources: Sequence[LightSource],
    plane: PlaneSpec,
    options: Optional[CalcOptions] = None,
) -> CalculationResult:
    """Estimate the PPFD distribution over *plane* and derive the DLI.

    1. Validate inputs (raises :class:`~packages.core.errors.InvalidInputError`).
    2. Normalise feet to metres.
    3. Sample the plane at cell centres.
    4. Superpose the concentrated-disk contribution of every enabled source.
    5. Aggregate min / max / average / uniformity and the DLI.

    Sources with beam angles outside the calibrated range still produce a
    result, with a :class:`~packages.core.types.ConfigurationWarning` each and
    ``confidence`` lowered to ``reduced``.
    """
    options = options or CalcOptions()
    validate_inputs(sources, plane, options)
    sources, plane = to_metres(sources, plane)

    xs, ys, nx, ny = build_grid(plane.width, plane.length, plane.resolution)
    logger.debug(
        "Sampling %dx%d grid for %d sources (%.2f x %.2f m)",
        nx, ny, len(sources), plane.width, plane.length,
    )
    values = compute_field(sources, xs, ys, options)

    stats = summarize_field(values)
    warnings = check_calibration([s for s in sources if s.enabled], options)
    return CalculationResult(
        **stats,
        photoperiod_hours=options.photoperiod_hours,
        dli=daily_light_integral(stats["average_ppfd"], options.photoperiod_hours),
        grid=to_sample_grid(
            xs, ys, values, width=plane.width, length=plane.length, nx=nx, ny=ny
        ),
        warnings=warnings,
        confidence=confidence_for(warnings),
    )
