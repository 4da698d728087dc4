"""
Tests for parameter sweeps and batch calculation.
"""

import pytest

from isospline.calculator import (
    compare_pressure_angles,
    compare_tolerance_classes,
    calculate_batch,
    format_table,
    design_spline,
    InvalidToleranceClassError,
)
from isospline.calculator.sweep import (
    batch_rows,
    BATCH_COLUMNS,
    PRESSURE_ANGLE_COLUMNS,
    TOLERANCE_CLASS_COLUMNS,
)


BATCH_CONFIGS = [
    {"label": "Precision Servo", "module": 1.5, "num_teeth": 32, "pressure_angle": 30, "tolerance_class": 4},
    {"label": "Automotive Diff", "module": 2.0, "num_teeth": 28, "pressure_angle": 37.5, "tolerance_class": 5},
    {"label": "Marine Gearbox", "module": 4.0, "num_teeth": 18, "pressure_angle": 45, "tolerance_class": 6},
    {"label": "Mining Equipment", "module": 8.0, "num_teeth": 12, "pressure_angle": 30, "tolerance_class": 7},
]


class TestComparePressureAngles:

    def test_rows(self):
        rows = compare_pressure_angles(module=2, num_teeth=24, tolerance_class=5)

        assert [r["pressure_angle_deg"] for r in rows] == [30.0, 37.5, 45.0]
        assert all(r["pitch_diameter_mm"] == pytest.approx(48.0) for r in rows)

    def test_base_diameter_decreases_with_angle(self):
        rows = compare_pressure_angles(module=2, num_teeth=24)
        bases = [r["base_diameter_mm"] for r in rows]
        assert bases == sorted(bases, reverse=True)

    def test_matches_single_calculation(self):
        rows = compare_pressure_angles(module=2, num_teeth=24)
        single = design_spline(module=2, num_teeth=24, pressure_angle=37.5)

        assert rows[1]["external_major_max_mm"] == single.diameters.external.major_max_mm
        assert rows[1]["form_tooth_height_mm"] == single.geometry.form_tooth_height_mm


class TestCompareToleranceClasses:

    def test_rows(self):
        rows = compare_tolerance_classes(module=3, num_teeth=20, pressure_angle=30)

        assert [r["tolerance_class"] for r in rows] == [4, 5, 6, 7]
        totals = [r["total_tolerance_mm"] for r in rows]
        assert totals == sorted(totals)

    def test_machining_share(self):
        for row in compare_tolerance_classes(module=3, num_teeth=20):
            assert row["machining_tolerance_mm"] == pytest.approx(0.6 * row["total_tolerance_mm"])

    def test_subset(self):
        rows = compare_tolerance_classes(module=3, num_teeth=20, tolerance_classes=[7, 4])
        assert [r["tolerance_class"] for r in rows] == [7, 4]


class TestCalculateBatch:

    def test_labels_and_order(self):
        results = calculate_batch(BATCH_CONFIGS)

        assert [label for label, _ in results] == [
            "Precision Servo", "Automotive Diff", "Marine Gearbox", "Mining Equipment"
        ]
        assert results[3][1].geometry.pitch_diameter_mm == pytest.approx(96.0)

    def test_default_labels(self):
        results = calculate_batch([{"module": 1.0}, {}])
        assert [label for label, _ in results] == ["#1", "#2"]
        assert results[1][1].input.module_mm == 2.0

    def test_configs_not_mutated(self):
        configs = [dict(c) for c in BATCH_CONFIGS]
        calculate_batch(configs)
        assert configs == BATCH_CONFIGS

    def test_invalid_config_raises(self):
        with pytest.raises(InvalidToleranceClassError):
            calculate_batch([{"module": 2.0}, {"tolerance_class": 9}])

    def test_batch_rows(self):
        rows = batch_rows(calculate_batch(BATCH_CONFIGS[:1]))
        assert rows[0]["label"] == "Precision Servo"
        assert rows[0]["pitch_diameter_mm"] == pytest.approx(48.0)


class TestFormatTable:

    def test_layout(self):
        rows = [{"a": 1, "b": 2.5}, {"a": 10, "b": 0.125}]
        table = format_table(rows, [("a", "A", "d"), ("b", "Bee", ".3f")])
        lines = table.splitlines()

        assert lines[0] == "A   Bee"
        assert lines[1] == "-" * 9
        assert lines[2] == "1   2.500"
        assert lines[3] == "10  0.125"

    def test_title(self):
        table = format_table([{"a": 1}], [("a", "A", "d")], title="Results")
        assert table.splitlines()[:2] == ["Results", ""]

    def test_standard_column_sets(self):
        angle_table = format_table(compare_pressure_angles(2, 24), PRESSURE_ANGLE_COLUMNS)
        class_table = format_table(compare_tolerance_classes(3, 20), TOLERANCE_CLASS_COLUMNS)
        batch_table = format_table(batch_rows(calculate_batch(BATCH_CONFIGS)), BATCH_COLUMNS)

        assert "37.5" in angle_table
        assert len(class_table.splitlines()) == 2 + 4
        assert "Mining Equipment" in batch_table
