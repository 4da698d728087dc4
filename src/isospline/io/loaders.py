"""
Typed parameter models and JSON input/output for involute splines.

SplineInput is the calculator's configuration record, SplineResult the
complete calculated data set and ProfileData the generated tooth profile.
All three are frozen Pydantic models: computed once, never mutated.

Uses Pydantic for automatic validation and enum coercion.
"""

import json
from pathlib import Path
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..enums import RootType, SplineSide
from .schema import SCHEMA_VERSION, validate_json_schema

Point = Tuple[float, float]


class SplineInput(BaseModel):
    """Spline parameters as entered by the designer."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    module_mm: float = 2.0
    num_teeth: int = 20
    pressure_angle_deg: float = 30.0  # 30, 37.5 or 45
    root_type: RootType = RootType.FLAT
    tolerance_class: int = 5  # 4 (tightest) to 7
    spline_length_mm: float = 50.0
    external_deviation_um: float = 0.0  # Fundamental deviation esv, any sign
    form_clearance_factor: float = 0.1  # Multiplied by module

    @field_validator('root_type', mode='before')
    @classmethod
    def coerce_root_type(cls, v):
        if isinstance(v, str):
            return RootType(v.lower())
        return v

    @property
    def form_clearance_mm(self) -> float:
        """Absolute form clearance cF (mm)"""
        return self.form_clearance_factor * self.module_mm


class SplineGeometry(BaseModel):
    """Basic geometry on the reference circles."""
    model_config = ConfigDict(frozen=True)

    pitch_diameter_mm: float
    base_diameter_mm: float
    circular_pitch_mm: float
    base_pitch_mm: float
    basic_space_width_mm: float
    basic_tooth_thickness_mm: float
    form_tooth_height_mm: float


class SplineTolerances(BaseModel):
    """Tolerance unit, total tolerance and its split, deviations."""
    model_config = ConfigDict(frozen=True)

    tolerance_unit_mm: float
    total_tolerance_mm: float  # T + λ
    machining_tolerance_mm: float  # T
    deviation_allowance_mm: float  # λ (refined)
    pitch_deviation_mm: float  # Fp
    profile_deviation_mm: float  # Fα
    helix_deviation_mm: float  # Fβ


class LimitDimensions(BaseModel):
    """Effective and actual limits of a space width or tooth thickness."""
    model_config = ConfigDict(frozen=True)

    effective_min_mm: float
    effective_max_mm: float
    actual_min_mm: float
    actual_max_mm: float


class Clearance(BaseModel):
    """Effective clearance limits and form clearance."""
    model_config = ConfigDict(frozen=True)

    effective_min_mm: float
    effective_max_mm: float
    form_mm: float


class ExternalDiameters(BaseModel):
    """Limit diameters of the external spline (shaft)."""
    model_config = ConfigDict(frozen=True)

    major_min_mm: float
    major_max_mm: float
    form_max_mm: float
    minor_max_mm: float


class InternalDiameters(BaseModel):
    """Limit diameters of the internal spline (hub)."""
    model_config = ConfigDict(frozen=True)

    major_min_mm: float
    form_min_mm: float
    minor_min_mm: float
    minor_max_mm: float


class Diameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    external: ExternalDiameters
    internal: InternalDiameters


class Measurement(BaseModel):
    """Ball/pin diameters and measurement over rollers."""
    model_config = ConfigDict(frozen=True)

    ball_pin_diameter_internal_mm: float
    ball_pin_diameter_external_mm: float
    over_rollers_internal_mm: float
    over_rollers_external_mm: float


class SplineResult(BaseModel):
    """Complete involute spline calculation result."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    input: SplineInput
    geometry: SplineGeometry
    tolerances: SplineTolerances
    space_width: LimitDimensions
    tooth_thickness: LimitDimensions
    clearance: Clearance
    diameters: Diameters
    measurement: Measurement


class SideProfile(BaseModel):
    """Tooth (external) or tooth space (internal) profile for one side."""
    model_config = ConfigDict(frozen=True)

    side: SplineSide
    half_profile: Tuple[Point, ...]  # Root point + involute flank
    full_profile: Tuple[Point, ...]  # Half profile + mirrored half
    complete_profile: Optional[Tuple[Point, ...]] = None  # All teeth, z <= 50 only

    # Radii the profile was derived from
    base_radius_mm: float
    pitch_radius_mm: float
    major_radius_mm: float
    form_radius_mm: float

    @field_validator('side', mode='before')
    @classmethod
    def coerce_side(cls, v):
        if isinstance(v, str):
            return SplineSide(v.lower())
        return v


class ProfileData(BaseModel):
    """External and internal profiles of one spline connection."""
    model_config = ConfigDict(frozen=True)

    num_teeth: int
    points_per_curve: int
    external: SideProfile
    internal: SideProfile

    @property
    def has_complete_profile(self) -> bool:
        return self.external.complete_profile is not None


def _read_json(filepath: Union[str, Path]) -> dict:
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, 'r') as f:
        return json.load(f)


def _write_json(data: dict, filepath: Union[str, Path]) -> None:
    with open(Path(filepath), 'w') as f:
        json.dump(data, f, indent=2)


def load_input_json(filepath: Union[str, Path]) -> SplineInput:
    """
    Load spline input parameters from JSON.

    Accepts either a bare parameter object or a saved result document,
    in which case its ``input`` section is used. Missing fields take
    the model defaults.

    Args:
        filepath: Path to JSON file

    Returns:
        SplineInput with all parameters

    Raises:
        FileNotFoundError: If file doesn't exist
        pydantic.ValidationError: If fields have the wrong type
    """
    data = _read_json(filepath)

    if isinstance(data, dict) and isinstance(data.get('input'), dict):
        data = data['input']

    return SplineInput.model_validate(data)


def save_result_json(result: SplineResult, filepath: Union[str, Path]) -> None:
    """
    Save a calculation result to a JSON file.

    Args:
        result: Calculated spline data
        filepath: Path to save JSON file
    """
    data = result.model_dump(mode='json')
    data['schema_version'] = SCHEMA_VERSION
    _write_json(data, filepath)


def load_result_json(filepath: Union[str, Path]) -> SplineResult:
    """
    Load a calculation result saved by save_result_json().

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If required sections are missing
        pydantic.ValidationError: If fields have the wrong type
    """
    data = _read_json(filepath)

    check = validate_json_schema(data)
    if not check["valid"]:
        raise ValueError(
            "Invalid spline JSON:\n  " + "\n  ".join(check["errors"])
        )

    return SplineResult.model_validate(data)


def save_profile_json(profile: ProfileData, filepath: Union[str, Path]) -> None:
    """
    Save profile coordinates to a JSON file.

    Points are written as [x, y] pairs. The complete profile is omitted
    when it was not generated.
    """
    data = profile.model_dump(mode='json', exclude_none=True)
    data['schema_version'] = SCHEMA_VERSION
    _write_json(data, filepath)
