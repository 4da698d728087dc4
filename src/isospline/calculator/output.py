"""Output formatters for involute spline results.

Converts typed SplineResult models to JSON, Markdown and plain text, and
extracts the dimension sets handed to CAD and manufacturing.

Uses Pydantic's model_dump(mode='json') for serialization, including
enum-to-string conversion.
"""

import json
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from ..io import SplineResult
from ..io.schema import SCHEMA_VERSION

if TYPE_CHECKING:
    from .validation import ValidationResult, ValidationMessage


def _model_to_dict(model) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types."""
    return model.model_dump(mode='json')


def _message_to_dict(msg: "ValidationMessage") -> Dict[str, Any]:
    return {
        'severity': msg.severity.value,
        'code': msg.code,
        'message': msg.message,
        'suggestion': msg.suggestion
    }


def to_json(
    result: SplineResult,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2
) -> str:
    """Convert SplineResult to JSON string.

    Args:
        result: SplineResult from calculate_spline() or design_spline()
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, all result sections and optional validation
    """
    result_dict = _model_to_dict(result)
    result_dict['schema_version'] = SCHEMA_VERSION

    if validation:
        result_dict['validation'] = {
            'valid': validation.valid,
            'errors': [_message_to_dict(msg) for msg in validation.errors],
            'warnings': [_message_to_dict(msg) for msg in validation.warnings],
            'infos': [_message_to_dict(msg) for msg in validation.infos],
        }

    return json.dumps(result_dict, indent=indent)


def to_markdown(
    result: SplineResult,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert SplineResult to a markdown specification.

    Args:
        result: SplineResult from calculate_spline() or design_spline()
        validation: Optional validation results to include

    Returns:
        Markdown specification string
    """
    data = _model_to_dict(result)

    inp = data["input"]
    geo = data["geometry"]
    tol = data["tolerances"]
    sw = data["space_width"]
    tt = data["tooth_thickness"]
    clr = data["clearance"]
    ext = data["diameters"]["external"]
    intl = data["diameters"]["internal"]
    meas = data["measurement"]

    md = "# Involute Spline Specification (ISO 4156-1:2021)\n\n"

    md += "## Input Parameters\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Module (m) | {inp['module_mm']:.3f} mm |\n"
    md += f"| Number of Teeth (z) | {inp['num_teeth']} |\n"
    md += f"| Pressure Angle (α) | {inp['pressure_angle_deg']:.1f}° |\n"
    md += f"| Root Type | {inp['root_type']} |\n"
    md += f"| Tolerance Class | {inp['tolerance_class']} |\n"
    md += f"| Spline Length (b) | {inp['spline_length_mm']:.1f} mm |\n"
    md += f"| External Deviation (esv) | {inp['external_deviation_um']:.1f} µm |\n"
    md += f"| Form Clearance (cF) | {clr['form_mm']:.3f} mm |\n\n"

    md += "## Basic Geometry\n\n"
    md += "| Dimension | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Pitch Diameter (D) | {geo['pitch_diameter_mm']:.6f} mm |\n"
    md += f"| Base Diameter (DB) | {geo['base_diameter_mm']:.6f} mm |\n"
    md += f"| Circular Pitch (P) | {geo['circular_pitch_mm']:.6f} mm |\n"
    md += f"| Base Pitch (PB) | {geo['base_pitch_mm']:.6f} mm |\n"
    md += f"| Basic Space Width (E) | {geo['basic_space_width_mm']:.6f} mm |\n"
    md += f"| Basic Tooth Thickness (S) | {geo['basic_tooth_thickness_mm']:.6f} mm |\n"
    md += f"| Form Tooth Height (hs) | {geo['form_tooth_height_mm']:.6f} mm |\n\n"

    md += "## Tolerances\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Tolerance Unit (i) | {tol['tolerance_unit_mm']:.6f} mm |\n"
    md += f"| Total Tolerance (T+λ) | {tol['total_tolerance_mm']:.6f} mm |\n"
    md += f"| Machining Tolerance (T) | {tol['machining_tolerance_mm']:.6f} mm |\n"
    md += f"| Deviation Allowance (λ) | {tol['deviation_allowance_mm']:.6f} mm |\n"
    md += f"| Total Pitch Deviation (Fp) | {tol['pitch_deviation_mm']:.6f} mm |\n"
    md += f"| Total Profile Deviation (Fα) | {tol['profile_deviation_mm']:.6f} mm |\n"
    md += f"| Total Helix Deviation (Fβ) | {tol['helix_deviation_mm']:.6f} mm |\n\n"

    md += "## Space Width and Tooth Thickness\n\n"
    md += "| Limit | Space Width (internal) | Tooth Thickness (external) |\n"
    md += "|-------|------------------------|----------------------------|\n"
    md += f"| Effective min | {sw['effective_min_mm']:.6f} mm | {tt['effective_min_mm']:.6f} mm |\n"
    md += f"| Effective max | {sw['effective_max_mm']:.6f} mm | {tt['effective_max_mm']:.6f} mm |\n"
    md += f"| Actual min | {sw['actual_min_mm']:.6f} mm | {tt['actual_min_mm']:.6f} mm |\n"
    md += f"| Actual max | {sw['actual_max_mm']:.6f} mm | {tt['actual_max_mm']:.6f} mm |\n\n"

    md += f"Effective clearance: {clr['effective_min_mm']:.6f} to {clr['effective_max_mm']:.6f} mm\n\n"

    md += "## Diameters\n\n"
    md += "| Diameter | External (shaft) | Internal (hub) |\n"
    md += "|----------|------------------|----------------|\n"
    md += f"| Major | {ext['major_min_mm']:.6f} to {ext['major_max_mm']:.6f} mm | min {intl['major_min_mm']:.6f} mm |\n"
    md += f"| Form | max {ext['form_max_mm']:.6f} mm | min {intl['form_min_mm']:.6f} mm |\n"
    md += f"| Minor | max {ext['minor_max_mm']:.6f} mm | {intl['minor_min_mm']:.6f} to {intl['minor_max_mm']:.6f} mm |\n\n"

    md += "## Measurement\n\n"
    md += "| Dimension | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Ball/Pin Diameter (internal) | {meas['ball_pin_diameter_internal_mm']:.6f} mm |\n"
    md += f"| Ball/Pin Diameter (external) | {meas['ball_pin_diameter_external_mm']:.6f} mm |\n"
    md += f"| Over Rollers (internal) | {meas['over_rollers_internal_mm']:.6f} mm |\n"
    md += f"| Over Rollers (external) | {meas['over_rollers_external_mm']:.6f} mm |\n\n"

    if validation:
        md += "## Validation\n\n"
        if validation.valid:
            md += "**Status:** ✅ Design is valid\n\n"
        else:
            md += "**Status:** ❌ Design has errors\n\n"

        if validation.errors:
            md += "### Errors\n\n"
            for msg in validation.errors:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.warnings:
            md += "### Warnings\n\n"
            for msg in validation.warnings:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "## Notes\n\n"
    md += "- All dimensions in millimeters unless otherwise noted\n"
    md += "- Over-roller dimensions use the external ball/pin diameter for both members\n"
    md += "- Deviation allowance λ is derived from Fp, Fα and Fβ, independent of the T+λ split\n"
    md += "\n"

    md += "---\n"
    md += "*Generated by isospline*\n"

    return md


def to_summary(
    result: SplineResult,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert SplineResult to a formatted text report.

    Args:
        result: SplineResult from calculate_spline() or design_spline()
        validation: Optional validation results, appended as one line per finding

    Returns:
        Multi-line formatted summary string
    """
    data = _model_to_dict(result)

    inp = data["input"]
    geo = data["geometry"]
    tol = data["tolerances"]
    sw = data["space_width"]
    tt = data["tooth_thickness"]
    ext = data["diameters"]["external"]
    intl = data["diameters"]["internal"]

    lines = [
        "═══ ISO 4156-1:2021 Involute Spline ═══",
        "",
        "Input:",
        f"  Module (m):          {inp['module_mm']:.3f} mm",
        f"  Teeth (z):           {inp['num_teeth']}",
        f"  Pressure angle (α):  {inp['pressure_angle_deg']:.1f}°",
        f"  Root type:           {inp['root_type']}",
        f"  Tolerance class:     {inp['tolerance_class']}",
        f"  Spline length (b):   {inp['spline_length_mm']:.1f} mm",
        "",
        "Basic geometry:",
        f"  Pitch diameter (D):      {geo['pitch_diameter_mm']:.6f} mm",
        f"  Base diameter (DB):      {geo['base_diameter_mm']:.6f} mm",
        f"  Circular pitch (P):      {geo['circular_pitch_mm']:.6f} mm",
        f"  Base pitch (PB):         {geo['base_pitch_mm']:.6f} mm",
        f"  Form tooth height (hs):  {geo['form_tooth_height_mm']:.6f} mm",
        "",
        "Tolerances:",
        f"  Tolerance unit (i):        {tol['tolerance_unit_mm']:.6f} mm",
        f"  Total tolerance (T+λ):     {tol['total_tolerance_mm']:.6f} mm",
        f"  Machining tolerance (T):   {tol['machining_tolerance_mm']:.6f} mm",
        f"  Deviation allowance (λ):   {tol['deviation_allowance_mm']:.6f} mm",
        "",
        "Space widths:",
        f"  Basic (E):      {geo['basic_space_width_mm']:.6f} mm",
        f"  Effective:      {sw['effective_min_mm']:.6f} to {sw['effective_max_mm']:.6f} mm",
        f"  Actual:         {sw['actual_min_mm']:.6f} to {sw['actual_max_mm']:.6f} mm",
        "",
        "Tooth thickness:",
        f"  Basic (S):      {geo['basic_tooth_thickness_mm']:.6f} mm",
        f"  Effective:      {tt['effective_min_mm']:.6f} to {tt['effective_max_mm']:.6f} mm",
        f"  Actual:         {tt['actual_min_mm']:.6f} to {tt['actual_max_mm']:.6f} mm",
        "",
        "Key diameters:",
        f"  Internal major (min):  {intl['major_min_mm']:.6f} mm",
        f"  External major:        {ext['major_min_mm']:.6f} to {ext['major_max_mm']:.6f} mm",
        f"  Ball/pin (internal):   {data['measurement']['ball_pin_diameter_internal_mm']:.6f} mm",
    ]

    if validation and validation.messages:
        lines.extend(["", "Validation:"])
        for msg in validation.messages:
            lines.append(f"  [{msg.severity.value.upper()}] {msg.code}: {msg.message}")

    return "\n".join(lines)


def cad_dimensions(result: SplineResult) -> Dict[str, float]:
    """Dimensions needed to model the spline in CAD.

    The external minor diameter given here is the form diameter (DFEMAX),
    the diameter the involute flank must reach.
    """
    return {
        'pitch_diameter_mm': result.geometry.pitch_diameter_mm,
        'major_diameter_external_mm': result.diameters.external.major_max_mm,
        'minor_diameter_external_mm': result.diameters.external.form_max_mm,
        'major_diameter_internal_mm': result.diameters.internal.major_min_mm,
        'form_tooth_height_mm': result.geometry.form_tooth_height_mm,
        'pressure_angle_deg': result.input.pressure_angle_deg,
        'module_mm': result.input.module_mm,
        'num_teeth': result.input.num_teeth,
    }


def drawing_title(result: SplineResult) -> str:
    inp = result.input
    return (
        f"Involute Spline m{inp.module_mm:.1f} z{inp.num_teeth} "
        f"α{inp.pressure_angle_deg:.1f}° Class{inp.tolerance_class}"
    )


def manufacturing_spec(result: SplineResult) -> Dict[str, Any]:
    """Manufacturing summary: drawing title, stock to remove, tolerances, measurement.

    Material removal is measured on the diameter: external is the major
    diameter (max) above the pitch diameter, internal is the pitch diameter
    minus the internal major diameter (min), so it comes out negative.
    """
    pitch = result.geometry.pitch_diameter_mm
    return {
        'drawing_title': drawing_title(result),
        'material_removal': {
            'external_mm': result.diameters.external.major_max_mm - pitch,
            'internal_mm': pitch - result.diameters.internal.major_min_mm,
        },
        'tolerances': _model_to_dict(result.tolerances),
        'measurement': _model_to_dict(result.measurement),
    }


def format_messages(messages: List["ValidationMessage"]) -> List[Dict[str, Any]]:
    """Validation messages as JSON-compatible dicts"""
    return [_message_to_dict(msg) for msg in messages]
