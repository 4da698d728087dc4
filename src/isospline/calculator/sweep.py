"""
Parameter sweeps and batch calculation.

Each sweep runs design_spline() once per value and collects a row of
the parameters that change. Rows are plain dicts so they can be written
as JSON or printed with format_table().
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..enums import RootType
from ..io import SplineResult
from .constants import (
    STANDARD_PRESSURE_ANGLES_DEG,
    TOLERANCE_CLASSES,
    DEFAULT_ROOT_TYPE,
    DEFAULT_TOLERANCE_CLASS,
    DEFAULT_PRESSURE_ANGLE_DEG,
    DEFAULT_SPLINE_LENGTH_MM,
)
from .core import design_spline

logger = logging.getLogger(__name__)

# (row key, header, format spec)
Column = Tuple[str, str, str]

PRESSURE_ANGLE_COLUMNS: List[Column] = [
    ("pressure_angle_deg", "Angle (°)", ".1f"),
    ("pitch_diameter_mm", "Pitch Dia. (mm)", ".6f"),
    ("base_diameter_mm", "Base Dia. (mm)", ".6f"),
    ("external_major_max_mm", "Major Dia. (mm)", ".6f"),
    ("form_tooth_height_mm", "Form Height (mm)", ".6f"),
]

TOLERANCE_CLASS_COLUMNS: List[Column] = [
    ("tolerance_class", "Class", "d"),
    ("total_tolerance_mm", "Total Tol. (mm)", ".6f"),
    ("machining_tolerance_mm", "Mach. Tol. (mm)", ".6f"),
    ("deviation_allowance_mm", "Dev. Allow. (mm)", ".6f"),
    ("pitch_deviation_mm", "Pitch Dev. (mm)", ".6f"),
]

BATCH_COLUMNS: List[Column] = [
    ("label", "Application", "s"),
    ("module_mm", "Mod.", ".1f"),
    ("num_teeth", "Teeth", "d"),
    ("pressure_angle_deg", "Angle", ".1f"),
    ("tolerance_class", "Class", "d"),
    ("pitch_diameter_mm", "Pitch Dia.", ".6f"),
    ("external_major_max_mm", "Major Dia.", ".6f"),
]


def compare_pressure_angles(
    module: float,
    num_teeth: int,
    tolerance_class: int = DEFAULT_TOLERANCE_CLASS,
    pressure_angles: Iterable[float] = STANDARD_PRESSURE_ANGLES_DEG,
    root_type: Union[RootType, str] = DEFAULT_ROOT_TYPE,
    spline_length: float = DEFAULT_SPLINE_LENGTH_MM
) -> List[Dict[str, float]]:
    """
    Compare the standard pressure angles for the same module and tooth count.

    Returns:
        One row per angle with pitch, base, external major (max) diameter
        and form tooth height
    """
    rows = []
    for angle in pressure_angles:
        result = design_spline(
            module=module,
            num_teeth=num_teeth,
            pressure_angle=angle,
            root_type=root_type,
            tolerance_class=tolerance_class,
            spline_length=spline_length
        )
        rows.append({
            "pressure_angle_deg": result.input.pressure_angle_deg,
            "pitch_diameter_mm": result.geometry.pitch_diameter_mm,
            "base_diameter_mm": result.geometry.base_diameter_mm,
            "external_major_max_mm": result.diameters.external.major_max_mm,
            "form_tooth_height_mm": result.geometry.form_tooth_height_mm,
        })
    return rows


def compare_tolerance_classes(
    module: float,
    num_teeth: int,
    pressure_angle: float = DEFAULT_PRESSURE_ANGLE_DEG,
    tolerance_classes: Iterable[int] = TOLERANCE_CLASSES,
    root_type: Union[RootType, str] = DEFAULT_ROOT_TYPE,
    spline_length: float = DEFAULT_SPLINE_LENGTH_MM
) -> List[Dict[str, float]]:
    """
    Compare tolerance classes for the same geometry.

    Returns:
        One row per class with total, machining, deviation allowance and
        pitch deviation
    """
    rows = []
    for tolerance_class in tolerance_classes:
        result = design_spline(
            module=module,
            num_teeth=num_teeth,
            pressure_angle=pressure_angle,
            root_type=root_type,
            tolerance_class=tolerance_class,
            spline_length=spline_length
        )
        tol = result.tolerances
        rows.append({
            "tolerance_class": result.input.tolerance_class,
            "total_tolerance_mm": tol.total_tolerance_mm,
            "machining_tolerance_mm": tol.machining_tolerance_mm,
            "deviation_allowance_mm": tol.deviation_allowance_mm,
            "pitch_deviation_mm": tol.pitch_deviation_mm,
        })
    return rows


def calculate_batch(configs: Iterable[Mapping[str, Any]]) -> List[Tuple[str, SplineResult]]:
    """
    Calculate several splines in one pass.

    Args:
        configs: Mappings of design_spline() keyword arguments, each with
                 an optional "label"

    Returns:
        (label, result) pairs in input order. Unlabelled configs are
        numbered from 1.

    Raises:
        SplineInputError: On the first invalid config; earlier results are discarded
    """
    results = []
    for index, config in enumerate(configs, start=1):
        params = dict(config)
        label = str(params.pop("label", f"#{index}"))
        logger.debug(f"Batch {label}: {params}")
        results.append((label, design_spline(**params)))
    return results


def batch_rows(results: Sequence[Tuple[str, SplineResult]]) -> List[Dict[str, Any]]:
    """Summary rows for calculate_batch() output"""
    return [
        {
            "label": label,
            "module_mm": result.input.module_mm,
            "num_teeth": result.input.num_teeth,
            "pressure_angle_deg": result.input.pressure_angle_deg,
            "tolerance_class": result.input.tolerance_class,
            "pitch_diameter_mm": result.geometry.pitch_diameter_mm,
            "external_major_max_mm": result.diameters.external.major_max_mm,
        }
        for label, result in results
    ]


def format_table(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[Column],
    title: Optional[str] = None
) -> str:
    """
    Render rows as a fixed-width text table.

    Each column is as wide as its header or its widest value, whichever
    is larger.
    """
    cells = [
        [format(row[key], spec) for key, _, spec in columns]
        for row in rows
    ]
    widths = [
        max([len(header)] + [len(r[i]) for r in cells])
        for i, (_, header, _) in enumerate(columns)
    ]

    lines = []
    if title:
        lines.extend([title, ""])
    lines.append("  ".join(header.ljust(w) for (_, header, _), w in zip(columns, widths)).rstrip())
    lines.append("-" * (sum(widths) + 2 * (len(widths) - 1)))
    for r in cells:
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(r, widths)).rstrip())

    return "\n".join(lines)
