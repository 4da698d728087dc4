"""
isospline IO - typed models, JSON loaders and exporters.

Example:
    >>> from isospline.io import save_result_json, load_result_json
    >>> from isospline.calculator import design_spline
    >>>
    >>> # Calculate
    >>> result = design_spline(module=2.0, num_teeth=20)
    >>>
    >>> # Save to JSON
    >>> save_result_json(result, "spline.json")
    >>>
    >>> # Load back
    >>> loaded = load_result_json("spline.json")
"""

# Import from loaders module
from .loaders import (
    load_input_json,
    load_result_json,
    save_result_json,
    save_profile_json,
    Point,
    SplineInput,
    SplineGeometry,
    SplineTolerances,
    LimitDimensions,
    Clearance,
    ExternalDiameters,
    InternalDiameters,
    Diameters,
    Measurement,
    SplineResult,
    SideProfile,
    ProfileData,
)

# Import from schema module
from .schema import (
    SCHEMA_VERSION,
    REQUIRED_SECTIONS,
    validate_json_schema,
)

__all__ = [
    # Loaders
    "load_input_json",
    "load_result_json",
    "save_result_json",
    "save_profile_json",

    # Models
    "Point",
    "SplineInput",
    "SplineGeometry",
    "SplineTolerances",
    "LimitDimensions",
    "Clearance",
    "ExternalDiameters",
    "InternalDiameters",
    "Diameters",
    "Measurement",
    "SplineResult",
    "SideProfile",
    "ProfileData",

    # Schema
    "SCHEMA_VERSION",
    "REQUIRED_SECTIONS",
    "validate_json_schema",
]
