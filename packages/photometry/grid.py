"""Uniform cell-centre sampling grid over the target plane."""

from __future__ import annotations

import math

import numpy as np

from packages.core.types import SampleGrid

# Guards ceil() against 3.0 / 0.1 == 30.000000000000004.
_CEIL_EPS = 1e-9


def grid_shape(width: float, length: float, resolution: float) -> tuple[int, int]:
    """Return ``(nx, ny)`` = ``(ceil(width / res), ceil(length / res))``."""
    nx = max(1, math.ceil(width / resolution - _CEIL_EPS))
    ny = max(1, math.ceil(length / resolution - _CEIL_EPS))
    return nx, ny


def build_grid(
    width: float, length: float, resolution: float
) -> tuple[np.ndarray, np.ndarray, int, int]:
    """Sample the plane at cell centres.

    The cell size is stretched so the cells tile the plane exactly, which
    keeps the sample points symmetric about the plane centre.

    Returns ``(xs, ys, nx, ny)`` where *xs* and *ys* are flat arrays of
    length ``nx * ny`` ordered x-fastest.
    """
    nx, ny = grid_shape(width, length, resolution)
    dx = width / nx
    dy = length / ny
    cx = (np.arange(nx) + 0.5) * dx
    cy = (np.arange(ny) + 0.5) * dy
    gx, gy = np.meshgrid(cx, cy)  # shape (ny, nx)
    return gx.ravel(), gy.ravel(), nx, ny


def to_sample_grid(
    xs: np.ndarray,
    ys: np.ndarray,
    values: np.ndarray,
    *,
    width: float,
    length: float,
    nx: int,
    ny: int,
) -> SampleGrid:
    """Pack flat arrays into a :class:`SampleGrid`."""
    return SampleGrid(
        nx=nx,
        ny=ny,
        spacing_x=width / nx,
        spacing_y=length / ny,
        x=xs.tolist(),
        y=ys.tolist(),
        ppfd=values.tolist(),
    )
