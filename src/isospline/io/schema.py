"""
JSON document layout and validation for saved spline results.

The Pydantic models in loaders.py are the source of truth for field types
(see scripts/generate_schemas.py). This module provides the lightweight
structural checks run before a saved document is parsed.
"""

from typing import Any, Dict, List

SCHEMA_VERSION = "1.0"

REQUIRED_SECTIONS: List[str] = [
    "input",
    "geometry",
    "tolerances",
    "space_width",
    "tooth_thickness",
    "clearance",
    "diameters",
    "measurement",
]

VALID_ROOT_TYPES: List[str] = ["flat", "fillet"]


def validate_json_schema(data: Dict) -> Dict[str, Any]:
    """
    Validate a saved result document.

    Args:
        data: Parsed JSON data

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }

    Example:
        >>> result = validate_json_schema({"input": {}})
        >>> result["valid"]
        False
    """
    errors = []
    warnings = []

    if not isinstance(data, dict):
        return {
            "valid": False,
            "errors": ["Root must be a JSON object"],
            "warnings": [],
            "schema_version": "unknown",
        }

    # Check schema version
    schema_version = data.get("schema_version", "unknown")
    if schema_version == "unknown":
        warnings.append("Missing 'schema_version' field")
    elif schema_version != SCHEMA_VERSION:
        warnings.append(f"Schema version {schema_version} != current {SCHEMA_VERSION}")

    for section in REQUIRED_SECTIONS:
        if section not in data:
            errors.append(f"Missing required section: '{section}'")
        elif not isinstance(data[section], dict):
            errors.append(f"Section '{section}' must be an object")

    diameters = data.get("diameters")
    if isinstance(diameters, dict):
        for side in ["external", "internal"]:
            if side not in diameters:
                errors.append(f"Missing required section: 'diameters.{side}'")

    spline_input = data.get("input")
    if isinstance(spline_input, dict):
        root_type = spline_input.get("root_type")
        if root_type is not None and root_type not in VALID_ROOT_TYPES:
            errors.append(
                f"Invalid root_type value '{root_type}'. "
                f"Must be one of: {', '.join(VALID_ROOT_TYPES)}"
            )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version
    }
