"""Tests for PLY grid export."""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
from plyfile import PlyData

from packages.photometry.estimator import compute_coverage
from packages.photometry.export import grid_ply_bytes, heatmap_colors, write_grid_ply


class TestHeatmapColors:
    def test_low_green_high_red(self):
        colors = heatmap_colors(np.array([0.0, 50.0, 100.0]))
        np.testing.assert_array_equal(colors[0], [0, 255, 0])
        np.testing.assert_array_equal(colors[-1], [255, 0, 0])
        assert colors.dtype == np.uint8

    def test_dark_field(self):
        colors = heatmap_colors(np.zeros(3))
        np.testing.assert_array_equal(colors[:, 0], 0)


class TestWriteGridPly:
    def test_round_trip(self, led_600w, room_plane, tmp_path: Path):
        grid = compute_coverage([led_600w], room_plane).grid
        path = write_grid_ply(grid, tmp_path / "grid.ply")

        vertex = PlyData.read(str(path))["vertex"]
        assert vertex.count == grid.point_count
        np.testing.assert_allclose(vertex["ppfd"], grid.ppfd, rtol=1e-5)
        np.testing.assert_allclose(vertex["x"], grid.x, atol=1e-5)
        assert np.all(vertex["z"] == 0)
        brightest = int(np.argmax(vertex["ppfd"]))
        assert vertex["red"][brightest] == 255

    def test_bytes(self, led_600w, canopy_plane):
        grid = compute_coverage([led_600w], canopy_plane).grid
        ply = PlyData.read(io.BytesIO(grid_ply_bytes(grid)))
        assert ply["vertex"].count == 144
