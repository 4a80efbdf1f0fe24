"""FastAPI application for the coverage estimator.

Accepts layout documents (plane, placements, optional fixture catalog),
runs the estimator, and returns the report JSON, the flat grid arrays a
viewer needs for a heat-map, or the grid as a binary PLY cloud.
"""

from __future__ import annotations

import json
import logging

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from packages.core.errors import InvalidInputError
from packages.core.types import CoverageReport, Layout
from packages.photometry.aggregate import daily_light_integral
from packages.photometry.export import grid_ply_bytes
from packages.photometry.process import build_report

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Coverage Estimator API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # permissive for local development; tighten for production
    allow_methods=["*"],
    allow_headers=["*"],
)


def _run(layout: Layout) -> CoverageReport:
    """Build a report, mapping input errors to HTTP 400."""
    logger.info(f"⚙️  Estimating coverage for {len(layout.sources)} placements...")
    try:
        report = build_report(layout)
    except InvalidInputError as e:
        logger.info(f"❌ Rejected layout: {e}")
        raise HTTPException(400, str(e))
    logger.info(
        f"✅ Average PPFD {report.result.average_ppfd:.0f}, "
        f"uniformity {report.result.uniformity:.2f}"
    )
    return report


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/coverage")
def coverage(layout: Layout):
    """Return the full coverage report (result, recommendations, energy)."""
    report = _run(layout)
    return JSONResponse(content=json.loads(report.model_dump_json()))


@app.post("/coverage/grid")
def coverage_grid(layout: Layout):
    """Return the sampled field as flat arrays for a heat-map viewer.

    ``positions`` is ``[x, y, z, ...]`` with z = 0, ready for a Three.js
    BufferGeometry; ``values`` holds the PPFD at each point.
    """
    grid = _run(layout).result.grid
    positions: list[float] = []
    for x, y in zip(grid.x, grid.y):
        positions.extend((x, y, 0.0))
    logger.info(f"📊 Sending {grid.point_count:,} grid points to viewer")
    return {
        "count": grid.point_count,
        "nx": grid.nx,
        "ny": grid.ny,
        "positions": positions,
        "values": grid.ppfd,
        "max": max(grid.ppfd),
    }


@app.post("/coverage/ply")
def coverage_ply(layout: Layout):
    """Return the sampled field as a binary PLY vertex cloud."""
    grid = _run(layout).result.grid
    return Response(content=grid_ply_bytes(grid), media_type="application/octet-stream")


@app.get("/dli")
def dli(
    ppfd: float = Query(..., ge=0),
    hours: float = Query(..., gt=0, le=24),
):
    """Convert an average PPFD and photoperiod into a DLI."""
    return {"ppfd": ppfd, "hours": hours, "dli": daily_light_integral(ppfd, hours)}
