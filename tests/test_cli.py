"""Tests for the click CLI."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from packages.photometry.cli import main


class TestDliCommand:
    def test_dli(self):
        result = CliRunner().invoke(main, ["dli", "600", "12"])
        assert result.exit_code == 0
        assert result.output.strip().endswith("25.92")

    def test_rejects_long_photoperiod(self):
        result = CliRunner().invoke(main, ["dli", "600", "30"])
        assert result.exit_code != 0


class TestCoverageCommand:
    def test_writes_report_and_ply(self, layout_file: Path, tmp_path: Path):
        out = tmp_path / "out.json"
        ply = tmp_path / "grid.ply"
        result = CliRunner().invoke(
            main, ["coverage", str(layout_file), "-o", str(out), "--ply", str(ply)]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text())
        assert data["name"] == "veg-room"
        assert ply.exists()

    def test_invalid_layout(self, tmp_path: Path, layout_dict: dict):
        layout_dict["sources"][0]["z"] = -1
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(layout_dict))
        result = CliRunner().invoke(main, ["coverage", str(path)])
        assert result.exit_code == 1
        assert "mounting height" in result.output

    def test_default_output_next_to_layout(self, layout_file: Path):
        result = CliRunner().invoke(main, ["coverage", str(layout_file)])
        assert result.exit_code == 0, result.output
        assert layout_file.with_suffix(".coverage.json").exists()

    def test_unsupported_format(self, tmp_path: Path):
        path = tmp_path / "layout.yaml"
        path.write_text("plane: {}")
        result = CliRunner().invoke(main, ["coverage", str(path)])
        assert result.exit_code == 1
        assert "Unsupported" in result.output
        assert "Traceback" not in result.output

    def test_malformed_layout(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"sources": []}))
        result = CliRunner().invoke(main, ["coverage", str(path)])
        assert result.exit_code == 1
        assert "plane" in result.output
