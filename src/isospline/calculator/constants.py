"""
Engineering constants for involute spline calculations.

This module centralizes all numerical constants used in the calculator and
validation modules. Each constant is documented with its source (ISO 4156
clause/table or the original calculator's defaults).

MODIFICATION GUIDELINES:
- Never change ISO 4156 constants without updating the standard reference
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_MM, _DEG, _UM)

Constants are grouped by category:
- ISO 4156-1 basic geometry: pressure angles, module series, form heights
- ISO 4156-1 tolerances: tolerance units and class factors
- ISO 4156-1 limit diameters: per-pressure-angle coefficients
- Defaults: input defaults and profile generation limits
"""

from typing import Dict, NamedTuple, Tuple

# =============================================================================
# ISO 4156-1 - Basic Geometry
# =============================================================================

# Standard pressure angles per ISO 4156-1 §4
STANDARD_PRESSURE_ANGLES_DEG: Tuple[float, ...] = (30.0, 37.5, 45.0)

# Tolerance classes covered by the class factor tables
TOLERANCE_CLASSES: Tuple[int, ...] = (4, 5, 6, 7)

# Preferred module series per ISO 4156-1 Table 1
STANDARD_MODULES_MM: Tuple[float, ...] = (
    0.25, 0.5, 0.75, 1.0, 1.25, 1.5, 1.75,
    2.0, 2.5, 3.0, 4.0, 5.0, 6.0, 8.0, 10.0
)

# Tooth count range covered by the standard's dimension tables
TEETH_COUNT_MIN: int = 6
TEETH_COUNT_MAX: int = 82

# Smallest tooth count whose pitch diameter exceeds the basic tooth thickness
# (m·z > π·m/2); below it the over-roller measurement is undefined
MIN_NUM_TEETH: int = 2

# Form tooth height factors (hs = factor × module), ISO 4156-1 Table 2
# Keyed by (pressure angle, root type); 37.5° and 45° ignore root type
FORM_TOOTH_HEIGHT_FACTORS: Dict[Tuple[float, str], float] = {
    (30.0, "flat"): 0.6,
    (30.0, "fillet"): 0.9,
    (37.5, "flat"): 0.7,
    (37.5, "fillet"): 0.7,
    (45.0, "flat"): 0.6,
    (45.0, "fillet"): 0.6,
}

# =============================================================================
# ISO 4156-1 - Tolerance Units and Class Factors
# =============================================================================

# Tolerance unit i = 0.45·x^(1/3) + 0.001·x up to this size, linear above
TOLERANCE_UNIT_BREAKPOINT_MM: float = 500.0


class ToleranceClassFactors(NamedTuple):
    """Multipliers for one tolerance class"""
    pitch: float          # FpL - total cumulative pitch deviation
    profile: float        # Falpha - total profile deviation
    helix: float          # Fbeta - total helix deviation
    machining: float      # T - applied to the pitch-diameter unit
    deviation: float      # Lambda - applied to the space-width unit


TOLERANCE_CLASS_FACTORS: Dict[int, ToleranceClassFactors] = {
    4: ToleranceClassFactors(pitch=2.5, profile=1.6, helix=0.8, machining=10.0, deviation=40.0),
    5: ToleranceClassFactors(pitch=3.55, profile=2.5, helix=5.0, machining=16.0, deviation=64.0),
    6: ToleranceClassFactors(pitch=5.0, profile=4.0, helix=12.5, machining=25.0, deviation=100.0),
    7: ToleranceClassFactors(pitch=7.1, profile=6.3, helix=20.0, machining=40.0, deviation=160.0),
}

# Nominal share of (T + λ) assumed for λ when seeding the machining tolerance
INITIAL_DEVIATION_SHARE: float = 0.4

# Refined λ = factor × sqrt(Fp² + Fα² + Fβ²)
DEVIATION_ALLOWANCE_FACTOR: float = 0.6

# Constant terms of the deviation formulas (µm)
PITCH_DEVIATION_CONSTANT_UM: float = 9.0
PROFILE_DEVIATION_CONSTANT_UM: float = 16.0
HELIX_DEVIATION_CONSTANT_UM: float = 4.0

# Profile form factor φf = factor × module × teeth
PROFILE_FORM_FACTOR: float = 0.0125

# =============================================================================
# ISO 4156-1 - Limit Diameters
# =============================================================================

# Internal major diameter (min) = m·z + k·m; same k for m·z − k·m·tan(α)
# Keyed by (pressure angle, root type)
INTERNAL_MAJOR_FACTORS: Dict[Tuple[float, str], float] = {
    (30.0, "flat"): 1.5,
    (30.0, "fillet"): 1.8,
    (37.5, "flat"): 1.4,
    (37.5, "fillet"): 1.4,
    (45.0, "flat"): 1.2,
    (45.0, "fillet"): 1.2,
}

# External major diameter (max) = m·z + esv + k·m·tan(α)
EXTERNAL_MAJOR_FACTORS: Dict[float, float] = {
    30.0: 1.5,
    37.5: 0.9,
    45.0: 0.8,
}


class FormDiameterTerms(NamedTuple):
    """Internal form diameter (min) = m·z + factor·cf + offset_mm"""
    factor: float
    offset_mm: float


# The 2 mm offset for 37.5° and 45° is a fixed length, not a module multiple
INTERNAL_FORM_TERMS: Dict[float, FormDiameterTerms] = {
    30.0: FormDiameterTerms(factor=1.2, offset_mm=0.0),
    37.5: FormDiameterTerms(factor=0.9, offset_mm=2.0),
    45.0: FormDiameterTerms(factor=0.8, offset_mm=2.0),
}

# Minor/major diameter tolerance = n × i, banded by module
# Sequence of (module upper bound, n); modules above the last bound use the fallback
DIAMETER_TOLERANCE_BANDS: Tuple[Tuple[float, float], ...] = (
    (0.75, 10.0),
    (2.0, 11.0),
)
DIAMETER_TOLERANCE_FALLBACK: float = 12.0

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_MODULE_MM: float = 2.0
DEFAULT_NUM_TEETH: int = 20
DEFAULT_PRESSURE_ANGLE_DEG: float = 30.0
DEFAULT_ROOT_TYPE: str = "flat"
DEFAULT_TOLERANCE_CLASS: int = 5
DEFAULT_SPLINE_LENGTH_MM: float = 50.0
DEFAULT_EXTERNAL_DEVIATION_UM: float = 0.0
DEFAULT_FORM_CLEARANCE_FACTOR: float = 0.1

# =============================================================================
# Profile Generation
# =============================================================================

# Fewer samples than this cannot represent an involute flank
MIN_PROFILE_POINTS: int = 11
DEFAULT_PROFILE_POINTS: int = 100

# Full-circle assembly is only generated up to this tooth count
COMPLETE_PROFILE_MAX_TEETH: int = 50
