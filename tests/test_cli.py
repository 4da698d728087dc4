"""
Tests for the command-line interface.
"""

import json
import subprocess
import sys
import pytest

from isospline.cli.calculate import main


class TestCLIEntryPoints:
    """Test that the CLI entry point declared in pyproject.toml is importable."""

    def test_entry_point_importable(self):
        assert callable(main)

    def test_entry_point_via_subprocess(self):
        result = subprocess.run(
            [sys.executable, "-m", "isospline.cli.calculate", "--help"],
            capture_output=True,
            text=True
        )
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_default_run_via_subprocess(self):
        result = subprocess.run(
            [sys.executable, "-m", "isospline.cli.calculate"],
            capture_output=True,
            text=True
        )
        assert result.returncode == 0
        assert "40.000000" in result.stdout


class TestCLIReports:

    def test_summary_default(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "ISO 4156-1:2021 Involute Spline" in out
        assert "Pitch diameter (D):      40.000000 mm" in out

    def test_markdown(self, capsys):
        assert main(["--module", "1", "--teeth", "48", "--pressure-angle", "37.5",
                     "--root-type", "fillet", "--tolerance-class", "4", "--length", "25",
                     "--format", "markdown"]) == 0
        out = capsys.readouterr().out
        assert "# Involute Spline Specification" in out
        assert "| Pitch Diameter (D) | 48.000000 mm |" in out

    def test_json(self, capsys):
        assert main(["--format", "json", "--external-deviation", "-10"]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["input"]["external_deviation_um"] == -10.0
        assert data["validation"]["valid"] is True

    def test_output_file(self, tmp_path, capsys):
        path = tmp_path / "report.json"
        assert main(["--format", "json", "-o", str(path)]) == 0

        data = json.loads(path.read_text())
        assert data["geometry"]["pitch_diameter_mm"] == pytest.approx(40.0)
        assert capsys.readouterr().out == ""


class TestCLIInputFile:

    def test_input_file(self, input_json_file, capsys):
        assert main(["--input", str(input_json_file), "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["input"]["module_mm"] == 3.0
        assert data["input"]["root_type"] == "fillet"
        assert data["input"]["tolerance_class"] == 6

    def test_flags_override_file(self, input_json_file, capsys):
        assert main(["--input", str(input_json_file), "--tolerance-class", "4",
                     "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["input"]["tolerance_class"] == 4
        assert data["input"]["module_mm"] == 3.0

    def test_missing_input_file(self, tmp_path, capsys):
        assert main(["--input", str(tmp_path / "missing.json")]) == 1
        assert "Error: File not found" in capsys.readouterr().err

    def test_invalid_json_file(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("not valid json {")
        assert main(["--input", str(path)]) == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_non_object_input_file(self, tmp_path, capsys):
        path = tmp_path / "string.json"
        path.write_text(json.dumps("input"))
        assert main(["--input", str(path)]) == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestCLIErrors:

    def test_invalid_pressure_angle(self, capsys):
        assert main(["--pressure-angle", "40"]) == 1
        err = capsys.readouterr().err
        assert "Error: Pressure angle must be one of" in err

    def test_invalid_module(self, capsys):
        assert main(["--module", "0"]) == 1
        assert "Module" in capsys.readouterr().err

    def test_invalid_root_type_rejected_by_parser(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--root-type", "round"])
        assert exc_info.value.code == 2

    def test_strict_exit_code(self, capsys):
        assert main(["--external-deviation", "5000", "--strict"]) == 2
        assert "MAJOR_DIAMETER_INTERFERENCE" in capsys.readouterr().err

    def test_validation_errors_without_strict(self):
        assert main(["--external-deviation", "5000"]) == 0


class TestCLIProfile:

    def test_profile_json(self, tmp_path, capsys):
        path = tmp_path / "profile.json"
        assert main(["--profile-json", str(path), "--profile-points", "20"]) == 0

        data = json.loads(path.read_text())
        assert len(data["external"]["half_profile"]) == 21
        assert "Saved profile" in capsys.readouterr().err

    def test_invalid_profile_points(self, tmp_path, capsys):
        path = tmp_path / "profile.json"
        assert main(["--profile-json", str(path), "--profile-points", "5"]) == 1
        assert "Profile points" in capsys.readouterr().err
        assert not path.exists()


class TestCLICompare:

    def test_pressure_angle_table(self, capsys):
        assert main(["--module", "2", "--teeth", "24", "--compare", "pressure-angle"]) == 0
        out = capsys.readouterr().out

        assert out.startswith("Pressure angle comparison: m=2, z=24, class 5")
        assert "37.5" in out
        assert "48.000000" in out

    def test_tolerance_class_table(self, capsys):
        assert main(["--module", "3", "--compare", "tolerance-class"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()

        assert lines[0] == "Tolerance class comparison: m=3, z=20, α=30°"
        assert len(lines) == 2 + 2 + 4
