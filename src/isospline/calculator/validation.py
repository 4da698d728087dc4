"""
Involute Spline Calculator - Validation Rules

Engineering validation based on:
- ISO 4156-1:2021 module series and tooth count range
- Fit checks between the internal and external members
- Profile generation limits

Input errors are raised by the calculator before anything is computed.
The rules here inspect a finished SplineResult and report findings
without raising.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum

from ..io import SplineResult
from .constants import (
    STANDARD_MODULES_MM,
    TEETH_COUNT_MIN,
    TEETH_COUNT_MAX,
    COMPLETE_PROFILE_MAX_TEETH,
)


def is_standard_module(module_mm: float, tolerance: float = 0.001) -> bool:
    """Check if module is in the ISO 4156-1 preferred series"""
    return any(abs(module_mm - m) < tolerance for m in STANDARD_MODULES_MM)


def nearest_standard_module(module_mm: float) -> float:
    """Find the nearest preferred module"""
    return min(STANDARD_MODULES_MM, key=lambda m: abs(m - module_mm))


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def validate_spline(result: SplineResult) -> ValidationResult:
    """
    Validate a calculated spline against engineering rules.

    Args:
        result: SplineResult from calculate_spline() or load_result_json()

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []

    messages.extend(_validate_tooth_thickness(result))  # Impossible geometry first
    messages.extend(_validate_major_diameters(result))
    messages.extend(_validate_module(result))
    messages.extend(_validate_teeth_count(result))
    messages.extend(_validate_clearance(result))
    messages.extend(_validate_deviation_allowance(result))
    messages.extend(_validate_profile_coverage(result))

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return ValidationResult(
        valid=not has_errors,
        messages=messages
    )


def _validate_tooth_thickness(result: SplineResult) -> List[ValidationMessage]:
    """Actual tooth thickness must stay positive"""
    messages = []
    actual_min = result.tooth_thickness.actual_min_mm

    if actual_min <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="TOOTH_THICKNESS_NON_POSITIVE",
            message=f"Minimum actual tooth thickness ({actual_min:.4f}mm) is not positive",
            suggestion="Shorten the spline, choose a tighter tolerance class or increase the module"
        ))

    return messages


def _validate_major_diameters(result: SplineResult) -> List[ValidationMessage]:
    """Hub major diameter must clear the shaft major diameter"""
    messages = []
    internal_major = result.diameters.internal.major_min_mm
    external_major = result.diameters.external.major_max_mm

    if internal_major <= external_major:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="MAJOR_DIAMETER_INTERFERENCE",
            message=(
                f"Internal major diameter ({internal_major:.3f}mm) does not clear "
                f"external major diameter ({external_major:.3f}mm)"
            ),
            suggestion="Reduce the external fundamental deviation"
        ))

    return messages


def _validate_module(result: SplineResult) -> List[ValidationMessage]:
    """Check module is in the preferred series"""
    messages = []
    module = result.input.module_mm

    if not is_standard_module(module):
        nearest = nearest_standard_module(module)
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="MODULE_NON_STANDARD",
            message=f"Module {module:.3f}mm is not in the ISO 4156-1 preferred series",
            suggestion=f"Consider using module {nearest}mm for standard tooling"
        ))

    return messages


def _validate_teeth_count(result: SplineResult) -> List[ValidationMessage]:
    messages = []
    num_teeth = result.input.num_teeth

    if not TEETH_COUNT_MIN <= num_teeth <= TEETH_COUNT_MAX:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="TEETH_COUNT_OUT_OF_RANGE",
            message=(
                f"{num_teeth} teeth is outside the tabulated range "
                f"{TEETH_COUNT_MIN}-{TEETH_COUNT_MAX}"
            ),
            suggestion="Verify limit dimensions against the standard's tables"
        ))

    return messages


def _validate_clearance(result: SplineResult) -> List[ValidationMessage]:
    messages = []
    clearance_min = result.clearance.effective_min_mm

    if clearance_min < 0:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="EFFECTIVE_CLEARANCE_NEGATIVE",
            message=f"Minimum effective clearance is {clearance_min * 1000:.1f}µm (interference fit)",
            suggestion="Use a negative external deviation for a clearance fit"
        ))

    return messages


def _validate_deviation_allowance(result: SplineResult) -> List[ValidationMessage]:
    """The refined λ is independent of the T + λ split"""
    messages = []
    tol = result.tolerances

    if tol.deviation_allowance_mm > tol.total_tolerance_mm:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="DEVIATION_ALLOWANCE_EXCEEDS_TOTAL",
            message=(
                f"Deviation allowance λ ({tol.deviation_allowance_mm:.4f}mm) exceeds "
                f"total tolerance T+λ ({tol.total_tolerance_mm:.4f}mm)"
            ),
            suggestion=None
        ))

    return messages


def _validate_profile_coverage(result: SplineResult) -> List[ValidationMessage]:
    messages = []
    num_teeth = result.input.num_teeth

    if num_teeth > COMPLETE_PROFILE_MAX_TEETH:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="COMPLETE_PROFILE_SKIPPED",
            message=(
                f"Complete profile is not generated above {COMPLETE_PROFILE_MAX_TEETH} teeth"
            ),
            suggestion="Use the single tooth profile and pattern it in CAD"
        ))

    return messages
