"""Tests for field statistics and DLI."""

from __future__ import annotations

import numpy as np
import pytest

from packages.photometry.aggregate import daily_light_integral, summarize_field


class TestDailyLightIntegral:
    def test_reference_value(self):
        assert daily_light_integral(600, 12) == pytest.approx(25.92)

    def test_zero_ppfd(self):
        assert daily_light_integral(0, 18) == 0


class TestSummarizeField:
    def test_ratios(self):
        stats = summarize_field(np.array([100.0, 200.0, 300.0]))
        assert stats["min_ppfd"] == 100.0
        assert stats["max_ppfd"] == 300.0
        assert stats["average_ppfd"] == pytest.approx(200.0)
        assert stats["uniformity"] == pytest.approx(0.5)
        assert stats["uniformity_min_max"] == pytest.approx(1 / 3)

    def test_flat_field_is_perfectly_uniform(self):
        stats = summarize_field(np.full(7, 491.7))
        assert stats["uniformity"] == pytest.approx(1.0)
        assert stats["uniformity_min_max"] == 1.0

    def test_dark_field(self):
        stats = summarize_field(np.zeros(4))
        assert stats["uniformity"] == 0.0
        assert stats["uniformity_min_max"] == 0.0
