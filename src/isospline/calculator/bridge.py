"""
JSON bridge for embedding the calculator.

Provides a single entry point taking and returning JSON strings, for
callers that cannot construct Python objects (browser runtimes, other
processes). Inputs are parsed through a Pydantic model before any
calculation.

Usage:
    from isospline.calculator.bridge import calculate
    output = json.loads(calculate('{"module": 2, "num_teeth": 20}'))
    result = json.loads(output["result_json"])
"""

import json
from typing import List, Optional

from typing_extensions import TypedDict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    DEFAULT_MODULE_MM,
    DEFAULT_NUM_TEETH,
    DEFAULT_PRESSURE_ANGLE_DEG,
    DEFAULT_ROOT_TYPE,
    DEFAULT_TOLERANCE_CLASS,
    DEFAULT_SPLINE_LENGTH_MM,
    DEFAULT_EXTERNAL_DEVIATION_UM,
    DEFAULT_FORM_CLEARANCE_FACTOR,
    DEFAULT_PROFILE_POINTS,
)
from .core import design_spline
from .errors import SplineInputError
from .validation import validate_spline
from .output import to_json, to_markdown, to_summary, format_messages
from ..core.profile import generate_profile


class ValidationMessageDict(TypedDict, total=False):
    """Validation message as sent back to the caller."""
    severity: str  # "error", "warning", "info"
    code: str  # e.g. "MODULE_NON_STANDARD"
    message: str
    suggestion: Optional[str]


# ============================================================================
# Input Model
# ============================================================================

class CalculatorInputs(BaseModel):
    """
    All inputs accepted by calculate().

    Unknown keys are ignored. Range checks are left to design_spline() so
    that out-of-range values report the specific error code.
    """
    model_config = ConfigDict(extra='ignore')

    module: float = DEFAULT_MODULE_MM
    num_teeth: float = DEFAULT_NUM_TEETH
    pressure_angle: float = DEFAULT_PRESSURE_ANGLE_DEG
    root_type: str = DEFAULT_ROOT_TYPE
    tolerance_class: float = DEFAULT_TOLERANCE_CLASS
    spline_length: float = DEFAULT_SPLINE_LENGTH_MM
    external_deviation: float = DEFAULT_EXTERNAL_DEVIATION_UM
    form_clearance: float = DEFAULT_FORM_CLEARANCE_FACTOR

    # Profile generation
    include_profile: bool = False
    profile_points: float = DEFAULT_PROFILE_POINTS

    @field_validator('root_type', mode='before')
    @classmethod
    def normalize_root_type(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v


# ============================================================================
# Output Model
# ============================================================================

class CalculatorOutput(BaseModel):
    """Output from calculate()."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None
    error_code: Optional[str] = None

    # Result data (JSON string for the caller to parse)
    result_json: Optional[str] = None

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None

    # Validation
    valid: bool = True
    messages: List[ValidationMessageDict] = Field(default_factory=list)

    # Profile coordinates, only when include_profile is set
    profile_json: Optional[str] = None


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for JSON callers.

    Args:
        input_json: JSON string with CalculatorInputs structure

    Returns:
        JSON string with CalculatorOutput structure. Failures are reported
        with success=false, never raised.
    """
    try:
        data = json.loads(input_json)
        inputs = CalculatorInputs.model_validate(data)

        result = design_spline(
            module=inputs.module,
            num_teeth=inputs.num_teeth,
            pressure_angle=inputs.pressure_angle,
            root_type=inputs.root_type,
            tolerance_class=inputs.tolerance_class,
            spline_length=inputs.spline_length,
            external_deviation=inputs.external_deviation,
            form_clearance=inputs.form_clearance
        )
        validation = validate_spline(result)

        profile_json = None
        if inputs.include_profile:
            profile = generate_profile(result, points_per_curve=inputs.profile_points)
            profile_json = profile.model_dump_json(exclude_none=True)

        output = CalculatorOutput(
            success=True,
            result_json=to_json(result, validation),
            summary=to_summary(result),
            markdown=to_markdown(result, validation),
            valid=validation.valid,
            messages=format_messages(validation.messages),
            profile_json=profile_json
        )

        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid JSON: {e}",
            error_code="INVALID_JSON"
        ).model_dump_json()

    except SplineInputError as e:
        return CalculatorOutput(
            success=False,
            error=str(e),
            error_code=e.code
        ).model_dump_json()

    except ValidationError as e:
        return CalculatorOutput(
            success=False,
            error=str(e),
            error_code=SplineInputError.code
        ).model_dump_json()

    except Exception as e:
        return CalculatorOutput(
            success=False,
            error=str(e),
            error_code="INTERNAL_ERROR"
        ).model_dump_json()
