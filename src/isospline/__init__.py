"""
isospline - ISO 4156-1:2021 involute spline calculator and profile generator.

Computes spline geometry, tolerances, limit diameters and measurement
dimensions, and derives 2D involute tooth profiles from the result.

Example:
    >>> from isospline.calculator import design_spline
    >>> from isospline.core import generate_profile
    >>>
    >>> # Calculate parameters
    >>> result = design_spline(module=2.0, num_teeth=20, pressure_angle=30)
    >>>
    >>> # Tooth profile coordinates
    >>> profile = generate_profile(result, points_per_curve=100)
    >>> len(profile.external.full_profile)
    202

Note: All imports are lazy-loaded. Importing the package does not import
Pydantic until a model or calculator function is accessed.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"RootType", "SplineSide"}

_CALCULATOR = {
    "calculate_spline",
    "design_spline",
    "validate_spline",
    "Severity",
    "ValidationMessage",
    "ValidationResult",
    "SplineInputError",
    "to_json",
    "to_markdown",
    "to_summary",
}

_IO = {
    "load_input_json",
    "load_result_json",
    "save_result_json",
    "save_profile_json",
    "SplineInput",
    "SplineResult",
    "ProfileData",
    "SideProfile",
}

_CORE = {
    "generate_profile",
    "involute",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    raise AttributeError(f"module 'isospline' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "RootType",
    "SplineSide",

    # Calculator (lazy loaded from calculator)
    "calculate_spline",
    "design_spline",
    "validate_spline",
    "Severity",
    "ValidationMessage",
    "ValidationResult",
    "SplineInputError",
    "to_json",
    "to_markdown",
    "to_summary",

    # IO (lazy loaded from io)
    "load_input_json",
    "load_result_json",
    "save_result_json",
    "save_profile_json",
    "SplineInput",
    "SplineResult",
    "ProfileData",
    "SideProfile",

    # Profile generation (lazy loaded from core)
    "generate_profile",
    "involute",
]
