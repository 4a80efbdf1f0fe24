"""Write a sampled PPFD grid as a PLY vertex cloud for 3-D viewers.

Each grid point becomes a vertex at z = 0 carrying its ``ppfd`` value and a
heat-map colour (green = low, red = high, relative to the grid maximum).
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
from plyfile import PlyData, PlyElement

from packages.core.types import SampleGrid

logger = logging.getLogger(__name__)


def heatmap_colors(values: np.ndarray) -> np.ndarray:
    """Map PPFD values to ``(N, 3)`` uint8 RGB, green (low) → red (high)."""
    peak = float(values.max()) if len(values) else 0.0
    t = values / peak if peak > 0 else np.zeros_like(values)
    t = np.clip(t, 0.0, 1.0)
    rgb = np.column_stack((t, 1.0 - t, np.zeros_like(t)))
    return np.round(rgb * 255).astype(np.uint8)


def grid_to_ply(grid: SampleGrid) -> PlyData:
    values = np.asarray(grid.ppfd, dtype=np.float64)
    colors = heatmap_colors(values)
    dtype = [
        ("x", "f4"), ("y", "f4"), ("z", "f4"), ("ppfd", "f4"),
        ("red", "u1"), ("green", "u1"), ("blue", "u1"),
    ]
    structured = np.empty(len(values), dtype=dtype)
    structured["x"] = grid.x
    structured["y"] = grid.y
    structured["z"] = 0.0
    structured["ppfd"] = values
    structured["red"] = colors[:, 0]
    structured["green"] = colors[:, 1]
    structured["blue"] = colors[:, 2]
    el = PlyElement.describe(structured, "vertex")
    return PlyData([el], text=False)


def write_grid_ply(grid: SampleGrid, path: str | Path) -> Path:
    """Write *grid* to a binary PLY file and return its path."""
    path = Path(path)
    grid_to_ply(grid).write(str(path))
    logger.info("Wrote %d grid points → %s", grid.point_count, path)
    return path


def grid_ply_bytes(grid: SampleGrid) -> bytes:
    buf = io.BytesIO()
    grid_to_ply(grid).write(buf)
    return buf.getvalue()
