"""
Worked involute spline examples.

Basic, aerospace and heavy-duty splines, comparison tables, a batch run,
profile generation and an inspection sheet.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from isospline.calculator import (
    design_spline,
    validate_spline,
    to_summary,
    cad_dimensions,
    manufacturing_spec,
    compare_pressure_angles,
    compare_tolerance_classes,
    calculate_batch,
    format_table,
)
from isospline.calculator.sweep import (
    batch_rows,
    BATCH_COLUMNS,
    PRESSURE_ANGLE_COLUMNS,
    TOLERANCE_CLASS_COLUMNS,
)
from isospline.core import generate_profile

print("=" * 70)
print("ISO 4156-1:2021 INVOLUTE SPLINE EXAMPLES")
print("=" * 70)
print()

# 1. Standard automotive transmission spline (all defaults)
basic = design_spline()
print(to_summary(basic, validate_spline(basic)))
print()

# 2. High-precision aerospace spline
aerospace = design_spline(
    module=1.0,
    num_teeth=48,
    pressure_angle=37.5,
    root_type="fillet",
    tolerance_class=4,
    spline_length=25
)
print(to_summary(aerospace))
print()

# 3. Heavy-duty industrial spline
industrial = design_spline(
    module=6,
    num_teeth=16,
    pressure_angle=45,
    tolerance_class=7,
    spline_length=150
)
print(to_summary(industrial))
print()

# 4. Profile generation
profile_result = design_spline(module=2.5, num_teeth=20, root_type="fillet")
profile = generate_profile(profile_result, points_per_curve=150)
print(f"Profile: {len(profile.external.full_profile)} points per external tooth, "
      f"{len(profile.external.complete_profile)} around the circle")
print()

# 5. Pressure angle comparison
print(format_table(
    compare_pressure_angles(module=2, num_teeth=24, tolerance_class=5),
    PRESSURE_ANGLE_COLUMNS,
    title="Pressure angles for Module=2, Teeth=24, Class=5"
))
print()

# 6. Tolerance class comparison
print(format_table(
    compare_tolerance_classes(module=3, num_teeth=20, pressure_angle=30),
    TOLERANCE_CLASS_COLUMNS,
    title="Tolerance classes for Module=3, Teeth=20, Alpha=30°"
))
print()

# 7. Batch processing
batch = calculate_batch([
    {"label": "Precision Servo", "module": 1.5, "num_teeth": 32, "pressure_angle": 30, "tolerance_class": 4},
    {"label": "Automotive Diff", "module": 2.0, "num_teeth": 28, "pressure_angle": 37.5, "tolerance_class": 5},
    {"label": "Marine Gearbox", "module": 4.0, "num_teeth": 18, "pressure_angle": 45, "tolerance_class": 6},
    {"label": "Mining Equipment", "module": 8.0, "num_teeth": 12, "pressure_angle": 30, "tolerance_class": 7},
])
print(format_table(batch_rows(batch), BATCH_COLUMNS, title=f"Batch of {len(batch)} splines"))
print()

# 8. Inspection sheet
inspection = design_spline(module=2.5, num_teeth=20, pressure_angle=30, tolerance_class=5)
ext = inspection.diameters.external
print("Quality Control Inspection Sheet (m=2.5, z=20, α=30°, Class 5)")
print(f"  Pitch diameter:          {inspection.geometry.pitch_diameter_mm:.6f} mm")
print(f"  Base diameter:           {inspection.geometry.base_diameter_mm:.6f} mm")
print(f"  Shaft major diameter:    {ext.major_min_mm:.6f} to {ext.major_max_mm:.6f} mm")
print(f"  Tooth thickness:         {inspection.tooth_thickness.actual_min_mm:.6f} to "
      f"{inspection.tooth_thickness.actual_max_mm:.6f} mm")
print(f"  Hub major diameter (min): {inspection.diameters.internal.major_min_mm:.6f} mm")
print(f"  Space width:             {inspection.space_width.actual_min_mm:.6f} to "
      f"{inspection.space_width.actual_max_mm:.6f} mm")
print(f"  Over rollers (internal): {inspection.measurement.over_rollers_internal_mm:.6f} mm")
print()

# 9. CAD and manufacturing data
for key, value in cad_dimensions(basic).items():
    print(f"  {key}: {value}")
spec = manufacturing_spec(basic)
print(f"  Drawing title: {spec['drawing_title']}")
print(f"  External material removal: {spec['material_removal']['external_mm']:.6f} mm")
