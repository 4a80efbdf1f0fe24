"""CLI entry-point for the coverage estimator."""

from __future__ import annotations

import logging

import click

from packages.core.types import CoverageReport
from packages.photometry.aggregate import daily_light_integral
from packages.photometry.export import write_grid_ply
from packages.photometry.process import run_layout_to_json


@click.group()
def main():
    """Photometric coverage estimator (PPFD / DLI)."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(name)s | %(message)s",
    )


@main.command()
@click.argument("layout_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o", "--output", "output_file", default=None,
    help="Output JSON path (default: <layout>.coverage.json).",
)
@click.option("--ply", "ply_file", default=None, help="Also write the PPFD grid as a PLY cloud.")
@click.option("--photoperiod", type=float, default=None, help="Override the photoperiod (hours).")
def coverage(
    layout_file: str, output_file: str | None, ply_file: str | None, photoperiod: float | None,
):
    """Estimate PPFD coverage for a layout file and print the report JSON."""
    try:
        json_str = run_layout_to_json(
            layout_file, output_path=output_file, photoperiod_hours=photoperiod
        )
    except ValueError as e:
        # InvalidInputError, unsupported formats, and pydantic ValidationError
        raise click.ClickException(str(e)) from e

    if ply_file:
        report = CoverageReport.model_validate_json(json_str)
        write_grid_ply(report.result.grid, ply_file)
    click.echo(json_str)


@main.command()
@click.argument("ppfd", type=float)
@click.argument("hours", type=click.FloatRange(min=0, max=24, min_open=True))
def dli(ppfd: float, hours: float):
    """Convert an average PPFD and photoperiod to a DLI (mol/m²/day)."""
    click.echo(f"{daily_light_integral(ppfd, hours):.2f}")


if __name__ == "__main__":
    main()
