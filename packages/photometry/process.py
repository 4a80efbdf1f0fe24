"""End-to-end run: load a layout → estimate coverage → report JSON."""

from __future__ import annotations

import logging
from pathlib import Path

from packages.core.types import CoverageReport, Layout
from packages.photometry.energy import summarize_energy
from packages.photometry.estimator import compute_coverage
from packages.photometry.loader import load_layout, resolve_sources
from packages.photometry.recommend import evaluate_targets

logger = logging.getLogger(__name__)


def build_report(layout: Layout) -> CoverageReport:
    """Run the estimator on an in-memory layout.

    1. Resolve placements against the fixture catalog.
    2. Compute the PPFD field and DLI.
    3. Check design targets.
    4. Summarise the electrical load.
    """
    sources = resolve_sources(layout)
    logger.info("Estimating coverage for %d sources …", len(sources))
    result = compute_coverage(sources, layout.plane, layout.options)
    logger.info(
        "Average PPFD %.1f μmol/m²/s, uniformity %.2f, DLI %.2f mol/m²/day",
        result.average_ppfd, result.uniformity, result.dli,
    )
    for warning in result.warnings:
        logger.warning("%s", warning.message)

    recommendations = evaluate_targets(
        result,
        target_ppfd=layout.targets.ppfd,
        target_dli=layout.targets.dli,
        min_uniformity=layout.targets.min_uniformity,
    )
    energy = summarize_energy(sources, layout.options.photoperiod_hours)
    return CoverageReport(
        name=layout.name,
        result=result,
        recommendations=recommendations,
        energy=energy,
    )


def run_layout(input_path: str | Path, *, photoperiod_hours: float | None = None) -> CoverageReport:
    """Load a layout file and build its coverage report.

    *photoperiod_hours* overrides the layout's own option when given.
    """
    input_path = Path(input_path)
    logger.info("Loading %s …", input_path.name)
    layout = load_layout(input_path)
    if not layout.name:
        layout.name = input_path.stem
    if photoperiod_hours is not None:
        layout.options = layout.options.model_copy(
            update={"photoperiod_hours": photoperiod_hours}
        )
    return build_report(layout)


def run_layout_to_json(
    input_path: str | Path,
    output_path: str | Path | None = None,
    **kwargs,
) -> str:
    """Run the estimator and write the report to a JSON file.

    Returns the JSON string.
    """
    report = run_layout(input_path, **kwargs)
    json_str = report.model_dump_json(indent=2)

    if output_path is None:
        output_path = Path(input_path).with_suffix(".coverage.json")
    Path(output_path).write_text(json_str)
    logger.info("Wrote coverage report → %s", output_path)
    return json_str
