"""
Input errors for the spline calculator.

Every rejected parameter maps to its own exception class so callers can
report precise diagnostics. All derive from SplineInputError (a ValueError)
and carry a stable machine-readable ``code``.
"""


class SplineInputError(ValueError):
    """Raised when a calculator or profile parameter is invalid."""

    code = "INVALID_INPUT"

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class InvalidModuleError(SplineInputError):
    """Module is not a positive number."""
    code = "INVALID_MODULE"


class InvalidTeethCountError(SplineInputError):
    """Teeth count is not a positive integer."""
    code = "INVALID_TEETH_COUNT"


class InvalidPressureAngleError(SplineInputError):
    """Pressure angle is not one of the standard values."""
    code = "INVALID_PRESSURE_ANGLE"


class InvalidRootTypeError(SplineInputError):
    """Root type is neither flat nor fillet."""
    code = "INVALID_ROOT_TYPE"


class InvalidToleranceClassError(SplineInputError):
    """Tolerance class has no factor table entry."""
    code = "INVALID_TOLERANCE_CLASS"


class InvalidSplineLengthError(SplineInputError):
    """Spline length is not a positive number."""
    code = "INVALID_SPLINE_LENGTH"


class InvalidFormClearanceError(SplineInputError):
    """Form clearance factor is not a positive number."""
    code = "INVALID_FORM_CLEARANCE"


class InvalidExternalDeviationError(SplineInputError):
    """Fundamental deviation is not a finite number."""
    code = "INVALID_EXTERNAL_DEVIATION"


class InvalidProfilePointCountError(SplineInputError):
    """Too few samples requested for an involute curve."""
    code = "INVALID_PROFILE_POINT_COUNT"
