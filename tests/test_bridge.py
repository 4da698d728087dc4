"""
Tests for the JSON bridge.

The bridge has a single entry point: calculate(input_json) -> output_json
"""

import json
import pytest

from isospline.calculator.bridge import (
    calculate,
    CalculatorInputs,
    CalculatorOutput,
)


def _call(**inputs):
    return json.loads(calculate(json.dumps(inputs)))


class TestCalculatorInputs:

    def test_defaults(self):
        inputs = CalculatorInputs()
        assert inputs.module == 2.0
        assert inputs.num_teeth == 20
        assert inputs.root_type == "flat"
        assert inputs.include_profile is False
        assert inputs.profile_points == 100

    def test_root_type_normalized(self):
        assert CalculatorInputs(root_type="FILLET").root_type == "fillet"

    def test_unknown_keys_ignored(self):
        inputs = CalculatorInputs.model_validate({"module": 3, "colour": "blue"})
        assert inputs.module == 3.0


class TestCalculateSuccess:

    def test_default_call(self):
        output = _call()

        assert output["success"] is True
        assert output["error"] is None
        assert output["valid"] is True
        assert output["profile_json"] is None

        result = json.loads(output["result_json"])
        assert result["geometry"]["pitch_diameter_mm"] == pytest.approx(40.0)
        assert "validation" in result

    def test_display_formats(self):
        output = _call(module=1, num_teeth=48, pressure_angle=37.5, tolerance_class=4)
        assert "Pitch diameter (D):      48.000000 mm" in output["summary"]
        assert output["markdown"].startswith("# Involute Spline Specification")

    def test_messages(self):
        output = _call(module=2.2)
        codes = {m["code"] for m in output["messages"]}

        assert "MODULE_NON_STANDARD" in codes
        assert all(set(m) >= {"severity", "code", "message", "suggestion"} for m in output["messages"])

    def test_validation_errors_still_succeed(self):
        output = _call(external_deviation=5000)
        assert output["success"] is True
        assert output["valid"] is False

    def test_include_profile(self):
        output = _call(include_profile=True, profile_points=20)
        profile = json.loads(output["profile_json"])

        assert len(profile["external"]["half_profile"]) == 21
        assert len(profile["internal"]["full_profile"]) == 42

    def test_round_trips_through_output_model(self):
        output = CalculatorOutput.model_validate_json(calculate("{}"))
        assert output.success


class TestCalculateErrors:

    def test_invalid_json(self):
        output = json.loads(calculate("not json {"))

        assert output["success"] is False
        assert output["error"].startswith("Invalid JSON")
        assert output["error_code"] == "INVALID_JSON"

    @pytest.mark.parametrize("inputs,code", [
        ({"pressure_angle": 40}, "INVALID_PRESSURE_ANGLE"),
        ({"module": -2}, "INVALID_MODULE"),
        ({"num_teeth": 0}, "INVALID_TEETH_COUNT"),
        ({"root_type": "round"}, "INVALID_ROOT_TYPE"),
        ({"tolerance_class": 3}, "INVALID_TOLERANCE_CLASS"),
        ({"spline_length": 0}, "INVALID_SPLINE_LENGTH"),
        ({"form_clearance": -1}, "INVALID_FORM_CLEARANCE"),
        ({"include_profile": True, "profile_points": 5}, "INVALID_PROFILE_POINT_COUNT"),
        ({"num_teeth": 1}, "INVALID_TEETH_COUNT"),
        ({"num_teeth": 20.5}, "INVALID_TEETH_COUNT"),
        ({"tolerance_class": 4.5}, "INVALID_TOLERANCE_CLASS"),
        ({"include_profile": True, "profile_points": 20.5}, "INVALID_PROFILE_POINT_COUNT"),
    ])
    def test_input_errors(self, inputs, code):
        output = _call(**inputs)

        assert output["success"] is False
        assert output["error_code"] == code
        assert output["result_json"] is None

    def test_wrong_field_type(self):
        output = _call(num_teeth="many")

        assert output["success"] is False
        assert output["error_code"] == "INVALID_INPUT"

    def test_non_object_root(self):
        output = json.loads(calculate("[1, 2]"))
        assert output["success"] is False
        assert output["error_code"] == "INVALID_INPUT"

    def test_unexpected_failure_reported(self, monkeypatch):
        def broken(result):
            raise RuntimeError("boom")

        monkeypatch.setattr("isospline.calculator.bridge.validate_spline", broken)
        output = _call()

        assert output["success"] is False
        assert output["error"] == "boom"
        assert output["error_code"] == "INTERNAL_ERROR"

    def test_whole_float_values_accepted(self):
        output = _call(num_teeth=24.0, tolerance_class=6.0)
        result = json.loads(output["result_json"])

        assert output["success"] is True
        assert result["input"]["num_teeth"] == 24
        assert result["input"]["tolerance_class"] == 6
