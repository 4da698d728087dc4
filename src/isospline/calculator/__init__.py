"""
Involute Spline Calculator - ISO 4156-1:2021 calculations.

This module provides the calculator functions for involute splines.
All design functions return SplineResult models for type safety.

Example:
    >>> from isospline.calculator import design_spline, validate_spline, to_summary
    >>>
    >>> # Calculate parameters
    >>> result = design_spline(module=2.0, num_teeth=20, pressure_angle=30)
    >>>
    >>> # Check and report
    >>> validation = validate_spline(result)
    >>> print(to_summary(result, validation))
"""

from .core import (
    # Low-level calculation functions
    tolerance_unit,
    diameter_tolerance_factor,
    form_tooth_height_factor,
    calculate_geometry,
    calculate_tolerances,
    calculate_space_width,
    calculate_tooth_thickness,
    calculate_diameters,
    calculate_measurement,

    # High-level design functions (return SplineResult)
    calculate_spline,
    design_spline,
)

from .errors import (
    SplineInputError,
    InvalidModuleError,
    InvalidTeethCountError,
    InvalidPressureAngleError,
    InvalidRootTypeError,
    InvalidToleranceClassError,
    InvalidSplineLengthError,
    InvalidFormClearanceError,
    InvalidExternalDeviationError,
    InvalidProfilePointCountError,
)

from .input_validation import (
    check_spline_parameters,
    check_spline_input,
    check_profile_points,
)

from .validation import (
    # Validation
    validate_spline,
    is_standard_module,
    nearest_standard_module,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from ..enums import (
    # Type-safe enums
    RootType,
    SplineSide,
)

from .output import (
    # Output formatters
    to_json,
    to_markdown,
    to_summary,
    cad_dimensions,
    manufacturing_spec,
)

from .sweep import (
    # Sweeps and batch
    compare_pressure_angles,
    compare_tolerance_classes,
    calculate_batch,
    format_table,
)

# Convenience imports
from ..io import SplineInput, SplineResult


__all__ = [
    # Low-level
    "tolerance_unit",
    "diameter_tolerance_factor",
    "form_tooth_height_factor",
    "calculate_geometry",
    "calculate_tolerances",
    "calculate_space_width",
    "calculate_tooth_thickness",
    "calculate_diameters",
    "calculate_measurement",

    # High-level
    "calculate_spline",
    "design_spline",

    # Errors
    "SplineInputError",
    "InvalidModuleError",
    "InvalidTeethCountError",
    "InvalidPressureAngleError",
    "InvalidRootTypeError",
    "InvalidToleranceClassError",
    "InvalidSplineLengthError",
    "InvalidFormClearanceError",
    "InvalidExternalDeviationError",
    "InvalidProfilePointCountError",

    # Input checks
    "check_spline_parameters",
    "check_spline_input",
    "check_profile_points",

    # Validation
    "validate_spline",
    "is_standard_module",
    "nearest_standard_module",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Enums
    "RootType",
    "SplineSide",

    # Output
    "to_json",
    "to_markdown",
    "to_summary",
    "cad_dimensions",
    "manufacturing_spec",

    # Sweeps
    "compare_pressure_angles",
    "compare_tolerance_classes",
    "calculate_batch",
    "format_table",

    # Models
    "SplineInput",
    "SplineResult",
]
