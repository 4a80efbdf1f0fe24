"""Tests for the plane sampling grid."""

from __future__ import annotations

import math

import numpy as np

from packages.photometry.grid import build_grid, grid_shape


class TestGridShape:
    def test_exact_division(self):
        assert grid_shape(4.0, 6.0, 0.5) == (8, 12)

    def test_partial_cells_round_up(self):
        assert grid_shape(1.0, 1.0, 0.3) == (4, 4)

    def test_float_noise_does_not_add_a_column(self):
        # 3.0 / 0.1 == 30.000000000000004
        assert grid_shape(3.0, 1.2, 0.1) == (30, 12)


class TestBuildGrid:
    def test_point_count_matches_ceil_product(self):
        width, length, res = 2.5, 1.7, 0.4
        xs, ys, nx, ny = build_grid(width, length, res)
        expected = math.ceil(width / res) * math.ceil(length / res)
        assert nx * ny == expected
        assert len(xs) == len(ys) == expected

    def test_cell_centres_inside_plane(self):
        xs, ys, _, _ = build_grid(2.0, 3.0, 0.5)
        assert xs.min() > 0 and xs.max() < 2.0
        assert ys.min() > 0 and ys.max() < 3.0

    def test_symmetric_about_centre(self):
        xs, ys, nx, ny = build_grid(3.0, 3.0, 0.25)
        np.testing.assert_allclose(np.sort(xs), np.sort(3.0 - xs))
        np.testing.assert_allclose(np.sort(ys), np.sort(3.0 - ys))

    def test_x_fastest_ordering(self):
        xs, ys, nx, ny = build_grid(2.0, 1.0, 0.5)
        assert (nx, ny) == (4, 2)
        np.testing.assert_allclose(xs[:nx], [0.25, 0.75, 1.25, 1.75])
        assert np.all(ys[:nx] == ys[0])
