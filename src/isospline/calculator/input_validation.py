"""
Boundary checks for calculator and profile parameters.

Each check either returns the normalized value or raises the matching
SplineInputError subclass. Checks run before any derived value is computed,
so a rejected input never yields a partial result.
"""

from math import isfinite
from numbers import Real
from typing import Any, Dict, Union

from ..enums import RootType
from ..io import SplineInput
from .constants import (
    MIN_NUM_TEETH,
    MIN_PROFILE_POINTS,
    STANDARD_PRESSURE_ANGLES_DEG,
    TOLERANCE_CLASSES,
)
from .errors import (
    InvalidExternalDeviationError,
    InvalidFormClearanceError,
    InvalidModuleError,
    InvalidPressureAngleError,
    InvalidProfilePointCountError,
    InvalidRootTypeError,
    InvalidSplineLengthError,
    InvalidTeethCountError,
    InvalidToleranceClassError,
)


def _is_number(value: Any) -> bool:
    """True for finite real numbers; bool is not a number here"""
    return isinstance(value, Real) and not isinstance(value, bool) and isfinite(value)


def _is_whole_number(value: Any) -> bool:
    return _is_number(value) and float(value) == int(value)


def _positive(value: Any, error_class, name: str) -> float:
    if not _is_number(value) or value <= 0:
        raise error_class(f"{name} must be a positive number, got {value!r}", value)
    return float(value)


def check_module(value: Any) -> float:
    return _positive(value, InvalidModuleError, "Module")


def check_num_teeth(value: Any) -> int:
    if not _is_whole_number(value) or value <= 0:
        raise InvalidTeethCountError(
            f"Number of teeth must be a positive integer, got {value!r}", value
        )
    if value < MIN_NUM_TEETH:
        raise InvalidTeethCountError(
            f"Number of teeth must be at least {MIN_NUM_TEETH} so that the pitch "
            f"diameter exceeds the basic tooth thickness, got {value!r}",
            value
        )
    return int(value)


def check_pressure_angle(value: Any) -> float:
    if not _is_number(value) or float(value) not in STANDARD_PRESSURE_ANGLES_DEG:
        allowed = ", ".join(f"{a:g}" for a in STANDARD_PRESSURE_ANGLES_DEG)
        raise InvalidPressureAngleError(
            f"Pressure angle must be one of {allowed} degrees, got {value!r}", value
        )
    return float(value)


def check_root_type(value: Any) -> RootType:
    if isinstance(value, RootType):
        return value
    if isinstance(value, str):
        try:
            return RootType(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(r.value for r in RootType)
    raise InvalidRootTypeError(f"Root type must be one of {allowed}, got {value!r}", value)


def check_tolerance_class(value: Any) -> int:
    if not _is_whole_number(value) or int(value) not in TOLERANCE_CLASSES:
        allowed = ", ".join(str(c) for c in TOLERANCE_CLASSES)
        raise InvalidToleranceClassError(
            f"Tolerance class must be one of {allowed}, got {value!r}", value
        )
    return int(value)


def check_spline_length(value: Any) -> float:
    return _positive(value, InvalidSplineLengthError, "Spline length")


def check_external_deviation(value: Any) -> float:
    if not _is_number(value):
        raise InvalidExternalDeviationError(
            f"External deviation must be a finite number (µm), got {value!r}", value
        )
    return float(value)


def check_form_clearance(value: Any) -> float:
    return _positive(value, InvalidFormClearanceError, "Form clearance factor")


def check_profile_points(value: Any) -> int:
    if not _is_whole_number(value) or value < MIN_PROFILE_POINTS:
        raise InvalidProfilePointCountError(
            f"Profile points must be an integer greater than {MIN_PROFILE_POINTS - 1}, "
            f"got {value!r}",
            value
        )
    return int(value)


def check_spline_parameters(
    module: Any,
    num_teeth: Any,
    pressure_angle: Any,
    root_type: Any,
    tolerance_class: Any,
    spline_length: Any,
    external_deviation: Any,
    form_clearance: Any
) -> Dict[str, Union[float, int, RootType]]:
    """
    Check raw calculator parameters.

    Returns:
        Dict of normalized values keyed by SplineInput field name

    Raises:
        SplineInputError: The subclass naming the first invalid parameter
    """
    return {
        "module_mm": check_module(module),
        "num_teeth": check_num_teeth(num_teeth),
        "pressure_angle_deg": check_pressure_angle(pressure_angle),
        "root_type": check_root_type(root_type),
        "tolerance_class": check_tolerance_class(tolerance_class),
        "spline_length_mm": check_spline_length(spline_length),
        "external_deviation_um": check_external_deviation(external_deviation),
        "form_clearance_factor": check_form_clearance(form_clearance),
    }


def check_spline_input(spline_input: SplineInput) -> SplineInput:
    """Re-check a SplineInput that may have been built without the checks."""
    check_spline_parameters(
        module=spline_input.module_mm,
        num_teeth=spline_input.num_teeth,
        pressure_angle=spline_input.pressure_angle_deg,
        root_type=spline_input.root_type,
        tolerance_class=spline_input.tolerance_class,
        spline_length=spline_input.spline_length_mm,
        external_deviation=spline_input.external_deviation_um,
        form_clearance=spline_input.form_clearance_factor,
    )
    return spline_input
