"""
Tests for involute profile generation.
"""

import logging
import math
import pytest

from isospline.core import (
    involute,
    involute_curve,
    rotate_points,
    mirror_profile,
    pattern_profile,
    flank_offset_angle,
    generate_profile,
)
from isospline.calculator import InvalidProfilePointCountError
from isospline import ProfileData, SideProfile, SplineSide


def _radius(point):
    return math.hypot(point[0], point[1])


def _angle(point):
    return math.atan2(point[1], point[0])


class TestInvoluteFunction:

    def test_zero(self):
        assert involute(0.0) == 0.0

    def test_thirty_degrees(self):
        alpha = math.radians(30)
        assert involute(alpha) == pytest.approx(math.tan(alpha) - alpha)
        assert involute(alpha) == pytest.approx(0.0537514, rel=1e-5)


class TestInvoluteCurve:

    def test_starts_on_base_circle(self):
        points = involute_curve(10.0, 12.0, 20)
        assert points[0] == pytest.approx((10.0, 0.0))

    def test_ends_on_outer_circle(self):
        points = involute_curve(10.0, 12.0, 20)
        assert _radius(points[-1]) == pytest.approx(12.0)

    def test_radius_increases(self):
        radii = [_radius(p) for p in involute_curve(10.0, 12.0, 50)]
        assert radii == sorted(radii)

    def test_point_count(self):
        assert len(involute_curve(10.0, 12.0, 37)) == 37

    def test_outer_inside_base_collapses(self, caplog):
        with caplog.at_level(logging.WARNING, logger="isospline.core.profile"):
            points = involute_curve(10.0, 9.0, 15)

        assert len(points) == 15
        assert all(p == pytest.approx((10.0, 0.0)) for p in points)
        assert "base circle" in caplog.text


class TestPointTransforms:

    def test_rotate_quarter_turn(self):
        (x, y), = rotate_points([(1.0, 0.0)], math.pi / 2)
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(1.0)

    def test_mirror(self):
        half = [(1.0, 0.1), (2.0, 0.2), (3.0, 0.3)]
        assert mirror_profile(half) == [
            (1.0, 0.1), (2.0, 0.2), (3.0, 0.3),
            (3.0, -0.3), (2.0, -0.2), (1.0, -0.1),
        ]

    def test_pattern(self):
        complete = pattern_profile([(1.0, 0.0), (2.0, 0.0)], 4)
        assert len(complete) == 8
        assert complete[2] == pytest.approx((0.0, 1.0), abs=1e-12)
        assert complete[7] == pytest.approx((0.0, -2.0), abs=1e-12)

    def test_offset_angle_sign(self):
        theta = flank_offset_angle(20, 30.0, SplineSide.EXTERNAL)
        assert theta == pytest.approx(math.pi / 20 - involute(math.radians(30)))
        assert flank_offset_angle(20, 30.0, SplineSide.INTERNAL) == pytest.approx(-theta)


class TestGenerateProfile:
    """Profiles of the default spline (m=2, z=20, 30°)."""

    @pytest.fixture(scope="class")
    def profile(self, default_result):
        return generate_profile(default_result, points_per_curve=100)

    def test_returns_typed_profile(self, profile):
        assert isinstance(profile, ProfileData)
        assert isinstance(profile.external, SideProfile)
        assert profile.external.side == SplineSide.EXTERNAL
        assert profile.internal.side == SplineSide.INTERNAL
        assert profile.num_teeth == 20
        assert profile.points_per_curve == 100

    def test_lengths(self, profile):
        for side in (profile.external, profile.internal):
            assert len(side.half_profile) == 101
            assert len(side.full_profile) == 202

    def test_radii(self, profile, default_result):
        ext = profile.external
        intl = profile.internal

        assert ext.base_radius_mm == pytest.approx(default_result.geometry.base_diameter_mm / 2)
        assert ext.pitch_radius_mm == pytest.approx(20.0)
        assert ext.major_radius_mm == pytest.approx(default_result.diameters.external.major_max_mm / 2)
        assert ext.form_radius_mm == pytest.approx(20.2)
        assert intl.major_radius_mm == pytest.approx(21.5)
        assert intl.form_radius_mm == pytest.approx(20.12)

    def test_external_root_point_first(self, profile):
        ext = profile.external
        theta = flank_offset_angle(20, 30.0, SplineSide.EXTERNAL)

        assert _radius(ext.half_profile[0]) == pytest.approx(ext.form_radius_mm)
        assert _angle(ext.half_profile[0]) == pytest.approx(theta)
        assert _radius(ext.half_profile[1]) == pytest.approx(ext.base_radius_mm)
        assert _radius(ext.half_profile[-1]) == pytest.approx(ext.major_radius_mm)

    def test_internal_root_point_last(self, profile):
        intl = profile.internal
        theta = flank_offset_angle(20, 30.0, SplineSide.INTERNAL)

        assert _radius(intl.half_profile[-1]) == pytest.approx(intl.form_radius_mm)
        assert _angle(intl.half_profile[-1]) == pytest.approx(theta)
        assert _radius(intl.half_profile[0]) == pytest.approx(intl.base_radius_mm)
        assert _radius(intl.half_profile[-2]) == pytest.approx(intl.major_radius_mm)

    def test_mirror_property(self, profile):
        for side in (profile.external, profile.internal):
            half = side.half_profile
            full = side.full_profile
            n = len(half)
            for i, (x, y) in enumerate(half):
                assert full[i] == (x, y)
                assert full[2 * n - 1 - i] == (x, -y)

    def test_complete_profile(self, profile):
        assert profile.has_complete_profile
        for side in (profile.external, profile.internal):
            assert len(side.complete_profile) == 20 * len(side.full_profile)
            # First copy is the unrotated tooth
            assert side.complete_profile[:len(side.full_profile)] == side.full_profile

    def test_complete_profile_second_tooth_rotated(self, profile):
        full = profile.external.full_profile
        second = profile.external.complete_profile[len(full)]
        assert _angle(second) == pytest.approx(_angle(full[0]) + 2 * math.pi / 20)
        assert _radius(second) == pytest.approx(_radius(full[0]))

    def test_deterministic(self, default_result, profile):
        assert generate_profile(default_result, points_per_curve=100) == profile


class TestGenerateProfileLimits:

    def test_no_complete_profile_above_fifty_teeth(self, many_teeth_result, caplog):
        with caplog.at_level(logging.INFO, logger="isospline.core.profile"):
            profile = generate_profile(many_teeth_result, points_per_curve=20)

        assert not profile.has_complete_profile
        assert profile.external.complete_profile is None
        assert profile.internal.complete_profile is None
        assert "Skipping complete profile" in caplog.text

    def test_fifty_teeth_has_complete_profile(self):
        from isospline.calculator import design_spline
        profile = generate_profile(design_spline(module=1.0, num_teeth=50), points_per_curve=11)
        assert len(profile.external.complete_profile) == 50 * 24

    def test_minimum_points(self, default_result):
        profile = generate_profile(default_result, points_per_curve=11)
        assert len(profile.external.half_profile) == 12

    @pytest.mark.parametrize("points", [10, 0, 20.5, "100"])
    def test_invalid_points(self, default_result, points):
        with pytest.raises(InvalidProfilePointCountError):
            generate_profile(default_result, points_per_curve=points)

    @pytest.mark.parametrize("root", ["flat", "fillet"])
    def test_single_root_point_for_both_root_types(self, root):
        from isospline.calculator import design_spline
        profile = generate_profile(design_spline(root_type=root), points_per_curve=20)
        assert len(profile.external.half_profile) == 21
