"""
Pytest configuration and shared fixtures for isospline tests.
"""

import json
import pytest

from isospline.calculator import design_spline


# ─── Reference parameter sets ────────────────────────────────────────────


def _default_params():
    """Automotive transmission spline, all defaults."""
    return {
        "module": 2.0,
        "num_teeth": 20,
        "pressure_angle": 30.0,
        "root_type": "flat",
        "tolerance_class": 5,
        "spline_length": 50.0,
        "external_deviation": 0.0,
        "form_clearance": 0.1,
    }


def _aerospace_params():
    """Fine module, high tooth count, tight tolerances."""
    return {
        "module": 1.0,
        "num_teeth": 48,
        "pressure_angle": 37.5,
        "root_type": "fillet",
        "tolerance_class": 4,
        "spline_length": 25.0,
    }


def _industrial_params():
    """Large module, 45° pressure angle, relaxed tolerances."""
    return {
        "module": 6.0,
        "num_teeth": 16,
        "pressure_angle": 45.0,
        "root_type": "flat",
        "tolerance_class": 7,
        "spline_length": 150.0,
    }


@pytest.fixture
def default_params():
    return _default_params()


@pytest.fixture
def aerospace_params():
    return _aerospace_params()


# ─── Module-scoped results (pure functions, safe to share) ───────────────


@pytest.fixture(scope="module")
def default_result():
    """m=2, z=20, 30° flat, class 5, b=50."""
    return design_spline(**_default_params())


@pytest.fixture(scope="module")
def aerospace_result():
    """m=1, z=48, 37.5° fillet, class 4, b=25."""
    return design_spline(**_aerospace_params())


@pytest.fixture(scope="module")
def industrial_result():
    """m=6, z=16, 45° flat, class 7, b=150."""
    return design_spline(**_industrial_params())


@pytest.fixture(scope="module")
def many_teeth_result():
    """Above the complete-profile limit."""
    return design_spline(module=1.0, num_teeth=60)


# ─── Hand-computed reference values ──────────────────────────────────────


def tolerance_unit_um(x):
    """Reference tolerance unit, written out independently of the package."""
    if x <= 500:
        return 0.45 * x ** (1 / 3) + 0.001 * x
    return 0.004 * x + 2.1


@pytest.fixture
def reference_unit():
    return tolerance_unit_um


# ─── Files ───────────────────────────────────────────────────────────────


@pytest.fixture
def input_json_file(tmp_path):
    """JSON file with a partial set of input parameters."""
    json_file = tmp_path / "spline_input.json"
    json_file.write_text(json.dumps({
        "module_mm": 3.0,
        "num_teeth": 24,
        "pressure_angle_deg": 37.5,
        "root_type": "FILLET",
        "tolerance_class": 6,
    }))
    return json_file
