"""
Involute Spline Calculator - Core Calculations

Pure closed-form functions for ISO 4156-1 involute splines.
Returns typed SplineResult models for type safety.

Reference standards:
- ISO 4156-1:2021 (straight cylindrical involute splines, metric module,
  side fit - generalities)
"""

import logging
from math import pi, tan, radians, cos, sqrt
from typing import Dict, Union

from ..enums import RootType
from ..io import (
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
)
from .constants import (
    TOLERANCE_UNIT_BREAKPOINT_MM,
    TOLERANCE_CLASS_FACTORS,
    INITIAL_DEVIATION_SHARE,
    DEVIATION_ALLOWANCE_FACTOR,
    PITCH_DEVIATION_CONSTANT_UM,
    PROFILE_DEVIATION_CONSTANT_UM,
    HELIX_DEVIATION_CONSTANT_UM,
    PROFILE_FORM_FACTOR,
    FORM_TOOTH_HEIGHT_FACTORS,
    INTERNAL_MAJOR_FACTORS,
    EXTERNAL_MAJOR_FACTORS,
    INTERNAL_FORM_TERMS,
    DIAMETER_TOLERANCE_BANDS,
    DIAMETER_TOLERANCE_FALLBACK,
    DEFAULT_MODULE_MM,
    DEFAULT_NUM_TEETH,
    DEFAULT_PRESSURE_ANGLE_DEG,
    DEFAULT_ROOT_TYPE,
    DEFAULT_TOLERANCE_CLASS,
    DEFAULT_SPLINE_LENGTH_MM,
    DEFAULT_EXTERNAL_DEVIATION_UM,
    DEFAULT_FORM_CLEARANCE_FACTOR,
)
from .input_validation import check_spline_input, check_spline_parameters

logger = logging.getLogger(__name__)


def tolerance_unit(size_mm: float) -> float:
    """
    ISO tolerance unit for a nominal size.

    i = 0.45·x^(1/3) + 0.001·x   for x <= 500 mm
    i = 0.004·x + 2.1            above

    Returns:
        Tolerance unit in µm
    """
    if size_mm <= TOLERANCE_UNIT_BREAKPOINT_MM:
        return 0.45 * size_mm ** (1 / 3) + 0.001 * size_mm
    return 0.004 * size_mm + 2.1


def diameter_tolerance_factor(module_mm: float) -> float:
    """Multiple of the tolerance unit applied to minor/major diameter limits"""
    for upper_bound, factor in DIAMETER_TOLERANCE_BANDS:
        if module_mm <= upper_bound:
            return factor
    return DIAMETER_TOLERANCE_FALLBACK


def form_tooth_height_factor(pressure_angle_deg: float, root_type: Union[RootType, str]) -> float:
    """Form tooth height as a multiple of module (ISO 4156-1 Table 2)"""
    if isinstance(root_type, RootType):
        root_type = root_type.value
    return FORM_TOOTH_HEIGHT_FACTORS[(float(pressure_angle_deg), root_type)]


def calculate_geometry(
    module_mm: float,
    num_teeth: int,
    pressure_angle_deg: float,
    root_type: RootType = RootType.FLAT
) -> Dict[str, float]:
    """
    Calculate basic geometry on the pitch and base circles.

    Args:
        module_mm: Module (mm)
        num_teeth: Number of teeth
        pressure_angle_deg: Pressure angle (degrees)
        root_type: Root form, selects the form tooth height at 30°

    Returns:
        Dict with keys matching SplineGeometry
    """
    alpha = radians(pressure_angle_deg)

    pitch_diameter = module_mm * num_teeth
    circular_pitch = module_mm * pi

    # Basic space width and tooth thickness are both half the circular pitch
    basic_space_width = 0.5 * pi * module_mm

    return {
        "pitch_diameter_mm": pitch_diameter,
        "base_diameter_mm": pitch_diameter * cos(alpha),
        "circular_pitch_mm": circular_pitch,
        "base_pitch_mm": circular_pitch * cos(alpha),
        "basic_space_width_mm": basic_space_width,
        "basic_tooth_thickness_mm": basic_space_width,
        "form_tooth_height_mm": form_tooth_height_factor(pressure_angle_deg, root_type) * module_mm,
    }


def calculate_tolerances(
    module_mm: float,
    num_teeth: int,
    tolerance_class: int,
    spline_length_mm: float,
    pitch_diameter_mm: float,
    basic_space_width_mm: float
) -> Dict[str, float]:
    """
    Calculate total tolerance, its split and the deviation allowance.

    Two-stage method:
    1. T + λ from the class factors; a nominal λ = 0.4·(T + λ) is used
       only to derive the machining tolerance T.
    2. λ is recomputed from the pitch, profile and helix deviations:
       λ = 0.6·sqrt(Fp² + Fα² + Fβ²)

    The refined λ is not constrained to sum with T to T + λ.

    Returns:
        Dict with keys matching SplineTolerances
    """
    factors = TOLERANCE_CLASS_FACTORS[tolerance_class]

    unit_d = tolerance_unit(pitch_diameter_mm)
    unit_e = tolerance_unit(basic_space_width_mm)

    # Total tolerance T + λ (µm → mm)
    total = (factors.machining * unit_d + factors.deviation * unit_e) / 1000

    # Initial split seeds T only
    initial_deviation = INITIAL_DEVIATION_SHARE * total
    machining = total - initial_deviation

    # Pitch deviation over half the circumference
    arc_length = pi * module_mm * num_teeth / 2
    pitch_deviation = (factors.pitch * arc_length + PITCH_DEVIATION_CONSTANT_UM) / 1000

    # Profile deviation
    form_factor = PROFILE_FORM_FACTOR * module_mm * num_teeth
    profile_deviation = (factors.profile * form_factor + PROFILE_DEVIATION_CONSTANT_UM) / 1000

    # Helix deviation over the spline length
    helix_deviation = (factors.helix * spline_length_mm + HELIX_DEVIATION_CONSTANT_UM) / 1000

    deviation_allowance = DEVIATION_ALLOWANCE_FACTOR * sqrt(
        pitch_deviation ** 2 + profile_deviation ** 2 + helix_deviation ** 2
    )

    logger.debug(
        f"Class {tolerance_class}: T+λ={total:.6f} T={machining:.6f} "
        f"λ_initial={initial_deviation:.6f} λ={deviation_allowance:.6f}"
    )

    return {
        "tolerance_unit_mm": unit_d / 1000,
        "total_tolerance_mm": total,
        "machining_tolerance_mm": machining,
        "deviation_allowance_mm": deviation_allowance,
        "pitch_deviation_mm": pitch_deviation,
        "profile_deviation_mm": profile_deviation,
        "helix_deviation_mm": helix_deviation,
    }


def calculate_space_width(
    basic_space_width_mm: float,
    machining_tolerance_mm: float,
    deviation_allowance_mm: float
) -> Dict[str, float]:
    """Internal spline space width limits (EVMIN, EVMAX, EMIN, EMAX)"""
    effective_min = basic_space_width_mm
    return {
        "effective_min_mm": effective_min,
        "effective_max_mm": effective_min + machining_tolerance_mm,
        "actual_min_mm": effective_min + deviation_allowance_mm,
        "actual_max_mm": effective_min + deviation_allowance_mm + machining_tolerance_mm,
    }


def calculate_tooth_thickness(
    basic_tooth_thickness_mm: float,
    machining_tolerance_mm: float,
    deviation_allowance_mm: float,
    external_deviation_um: float
) -> Dict[str, float]:
    """External spline tooth thickness limits (SVMAX, SVMIN, SMAX, SMIN)"""
    effective_max = basic_tooth_thickness_mm + external_deviation_um / 1000
    return {
        "effective_min_mm": effective_max - machining_tolerance_mm,
        "effective_max_mm": effective_max,
        "actual_min_mm": effective_max - (deviation_allowance_mm + machining_tolerance_mm),
        "actual_max_mm": effective_max - deviation_allowance_mm,
    }


def calculate_diameters(
    module_mm: float,
    num_teeth: int,
    pressure_angle_deg: float,
    root_type: Union[RootType, str],
    external_deviation_um: float,
    form_clearance_mm: float,
    tolerance_unit_mm: float
) -> Dict[str, Dict[str, float]]:
    """
    Calculate limit diameters of the internal and external splines.

    Coefficients depend on the pressure angle (and on the root type at 30°).

    Args:
        module_mm: Module (mm)
        num_teeth: Number of teeth
        pressure_angle_deg: 30, 37.5 or 45
        root_type: Root form
        external_deviation_um: Fundamental deviation esv (µm)
        form_clearance_mm: Absolute form clearance cF (mm)
        tolerance_unit_mm: Tolerance unit of the pitch diameter (mm)

    Returns:
        Dict with "external" and "internal" sub-dicts
    """
    if isinstance(root_type, RootType):
        root_type = root_type.value
    angle = float(pressure_angle_deg)
    alpha = radians(angle)
    mz = module_mm * num_teeth

    # Internal major (min) and its counterpart m·z − k·m·tan(α)
    k_internal = INTERNAL_MAJOR_FACTORS[(angle, root_type)]
    internal_major_min = mz + k_internal * module_mm
    external_minor_max = mz - k_internal * module_mm * tan(alpha)

    # External major (max)
    external_major_max = (
        mz + external_deviation_um / 1000
        + EXTERNAL_MAJOR_FACTORS[angle] * module_mm * tan(alpha)
    )

    diameter_tolerance = diameter_tolerance_factor(module_mm) * tolerance_unit_mm
    external_major_min = external_major_max - diameter_tolerance

    external_form_max = mz + 2 * form_clearance_mm

    form_terms = INTERNAL_FORM_TERMS[angle]
    internal_form_min = mz + form_terms.factor * form_clearance_mm + form_terms.offset_mm
    internal_minor_min = internal_form_min + 2 * form_clearance_mm
    internal_minor_max = internal_minor_min + diameter_tolerance

    return {
        "external": {
            "major_min_mm": external_major_min,
            "major_max_mm": external_major_max,
            "form_max_mm": external_form_max,
            "minor_max_mm": external_minor_max,
        },
        "internal": {
            "major_min_mm": internal_major_min,
            "form_min_mm": internal_form_min,
            "minor_min_mm": internal_minor_min,
            "minor_max_mm": internal_minor_max,
        },
    }


def calculate_measurement(
    pitch_diameter_mm: float,
    basic_space_width_mm: float,
    basic_tooth_thickness_mm: float
) -> Dict[str, float]:
    """
    Ball/pin diameters and measurement over rollers.

    Both over-roller values are based on the external ball/pin diameter.
    """
    radius = pitch_diameter_mm / 2
    ball_pin_external = 2 * sqrt(radius ** 2 - (basic_tooth_thickness_mm / 2) ** 2)
    ball_pin_internal = 2 * sqrt(radius ** 2 - (basic_space_width_mm / 2) ** 2)

    return {
        "ball_pin_diameter_internal_mm": ball_pin_internal,
        "ball_pin_diameter_external_mm": ball_pin_external,
        "over_rollers_internal_mm": basic_space_width_mm + ball_pin_external,
        "over_rollers_external_mm": basic_tooth_thickness_mm + ball_pin_external,
    }


def calculate_spline(spline_input: SplineInput) -> SplineResult:
    """
    Calculate all spline parameters for a SplineInput.

    This is the single point where calculation dicts become typed models.

    Raises:
        SplineInputError: If any input value is outside the standard's domain
    """
    check_spline_input(spline_input)

    m = spline_input.module_mm
    z = spline_input.num_teeth
    angle = spline_input.pressure_angle_deg
    cf = spline_input.form_clearance_mm

    geometry = calculate_geometry(m, z, angle, spline_input.root_type)

    tolerances = calculate_tolerances(
        module_mm=m,
        num_teeth=z,
        tolerance_class=spline_input.tolerance_class,
        spline_length_mm=spline_input.spline_length_mm,
        pitch_diameter_mm=geometry["pitch_diameter_mm"],
        basic_space_width_mm=geometry["basic_space_width_mm"]
    )

    space_width = calculate_space_width(
        geometry["basic_space_width_mm"],
        tolerances["machining_tolerance_mm"],
        tolerances["deviation_allowance_mm"]
    )
    tooth_thickness = calculate_tooth_thickness(
        geometry["basic_tooth_thickness_mm"],
        tolerances["machining_tolerance_mm"],
        tolerances["deviation_allowance_mm"],
        spline_input.external_deviation_um
    )

    # Effective clearance
    clearance = Clearance(
        effective_min_mm=space_width["effective_min_mm"] - tooth_thickness["effective_max_mm"],
        effective_max_mm=space_width["effective_max_mm"] - tooth_thickness["effective_min_mm"],
        form_mm=cf
    )

    diameters = calculate_diameters(
        module_mm=m,
        num_teeth=z,
        pressure_angle_deg=angle,
        root_type=spline_input.root_type,
        external_deviation_um=spline_input.external_deviation_um,
        form_clearance_mm=cf,
        tolerance_unit_mm=tolerances["tolerance_unit_mm"]
    )

    measurement = calculate_measurement(
        geometry["pitch_diameter_mm"],
        geometry["basic_space_width_mm"],
        geometry["basic_tooth_thickness_mm"]
    )

    logger.debug(
        f"Spline m={m} z={z} α={angle}° {spline_input.root_type.value}: "
        f"D={geometry['pitch_diameter_mm']:.6f} DB={geometry['base_diameter_mm']:.6f}"
    )

    return SplineResult(
        input=spline_input,
        geometry=SplineGeometry(**geometry),
        tolerances=SplineTolerances(**tolerances),
        space_width=LimitDimensions(**space_width),
        tooth_thickness=LimitDimensions(**tooth_thickness),
        clearance=clearance,
        diameters=Diameters(
            external=ExternalDiameters(**diameters["external"]),
            internal=InternalDiameters(**diameters["internal"])
        ),
        measurement=Measurement(**measurement)
    )


def design_spline(
    module: float = DEFAULT_MODULE_MM,
    num_teeth: int = DEFAULT_NUM_TEETH,
    pressure_angle: float = DEFAULT_PRESSURE_ANGLE_DEG,
    root_type: Union[RootType, str] = DEFAULT_ROOT_TYPE,
    tolerance_class: int = DEFAULT_TOLERANCE_CLASS,
    spline_length: float = DEFAULT_SPLINE_LENGTH_MM,
    external_deviation: float = DEFAULT_EXTERNAL_DEVIATION_UM,
    form_clearance: float = DEFAULT_FORM_CLEARANCE_FACTOR
) -> SplineResult:
    """
    Design an involute spline from its basic parameters.

    Args:
        module: Module (mm)
        num_teeth: Number of teeth
        pressure_angle: Pressure angle (degrees): 30, 37.5 or 45
        root_type: "flat" or "fillet" (or RootType)
        tolerance_class: Tolerance class 4, 5, 6 or 7
        spline_length: Spline length (mm)
        external_deviation: Fundamental deviation of the external spline (µm)
        form_clearance: Form clearance factor (× module)

    Returns:
        SplineResult with all calculated parameters

    Raises:
        SplineInputError: The subclass naming the first invalid parameter

    Example:
        >>> result = design_spline(module=2, num_teeth=20)
        >>> result.geometry.pitch_diameter_mm
        40.0
    """
    values = check_spline_parameters(
        module=module,
        num_teeth=num_teeth,
        pressure_angle=pressure_angle,
        root_type=root_type,
        tolerance_class=tolerance_class,
        spline_length=spline_length,
        external_deviation=external_deviation,
        form_clearance=form_clearance
    )
    return calculate_spline(SplineInput(**values))
