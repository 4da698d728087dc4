"""
Involute tooth profile generation.

Derives 2D coordinates of one external tooth and one internal tooth space
from a calculated spline, and optionally patterns them around the full
circle. Points are (x, y) in mm about the spline axis.

The involute is parameterized by its roll angle u:
    x = rb·(cos u + u·sin u)
    y = rb·(sin u − u·cos u)
sampled from the base circle (u = 0) to the major radius R,
u_max = sqrt((R/rb)² − 1).
"""

import logging
from math import cos, pi, radians, sin, sqrt, tan
from typing import List, Optional, Sequence

from ..enums import SplineSide
from ..io import Point, ProfileData, SideProfile, SplineResult
from ..calculator.constants import COMPLETE_PROFILE_MAX_TEETH, DEFAULT_PROFILE_POINTS
from ..calculator.input_validation import check_profile_points

logger = logging.getLogger(__name__)


def involute(alpha_rad: float) -> float:
    """Involute function inv(α) = tan α − α"""
    return tan(alpha_rad) - alpha_rad


def involute_curve(base_radius: float, outer_radius: float, num_points: int) -> List[Point]:
    """
    Sample an involute from the base circle out to outer_radius.

    An outer radius on or inside the base circle collapses the curve to
    repeated copies of its start point.

    Args:
        base_radius: Base circle radius rb (mm)
        outer_radius: Radius where the curve ends (mm)
        num_points: Number of samples, both ends included

    Returns:
        List of (x, y) points from u = 0 to u_max
    """
    ratio = outer_radius / base_radius
    if ratio <= 1.0:
        logger.warning(
            f"Outer radius {outer_radius:.4f}mm is not outside the base circle "
            f"({base_radius:.4f}mm); involute collapses to a point"
        )
        u_max = 0.0
    else:
        u_max = sqrt(ratio ** 2 - 1)

    points = []
    for i in range(num_points):
        u = u_max * i / (num_points - 1)
        x = base_radius * (cos(u) + u * sin(u))
        y = base_radius * (sin(u) - u * cos(u))
        points.append((x, y))
    return points


def rotate_points(points: Sequence[Point], angle_rad: float) -> List[Point]:
    """Rotate points about the origin, counter-clockwise positive"""
    c = cos(angle_rad)
    s = sin(angle_rad)
    return [(x * c - y * s, x * s + y * c) for x, y in points]


def mirror_profile(half: Sequence[Point]) -> List[Point]:
    """Half profile followed by its reverse mirrored about the x axis"""
    return list(half) + [(x, -y) for x, y in reversed(half)]


def pattern_profile(profile: Sequence[Point], num_teeth: int) -> List[Point]:
    """Repeat a tooth profile num_teeth times around the circle"""
    pitch_angle = 2 * pi / num_teeth
    complete = []
    for k in range(num_teeth):
        complete.extend(rotate_points(profile, k * pitch_angle))
    return complete


def flank_offset_angle(num_teeth: int, pressure_angle_deg: float, side: SplineSide) -> float:
    """
    Rotation placing the involute flank on the tooth (external) or
    space (internal) centre line: ±(π/z − inv(α)).
    """
    theta = pi / num_teeth - involute(radians(pressure_angle_deg))
    if side == SplineSide.INTERNAL:
        return -theta
    return theta


def _side_profile(
    result: SplineResult,
    side: SplineSide,
    points_per_curve: int,
    with_complete: bool
) -> SideProfile:
    num_teeth = result.input.num_teeth
    base_radius = result.geometry.base_diameter_mm / 2

    if side == SplineSide.EXTERNAL:
        major_radius = result.diameters.external.major_max_mm / 2
        form_radius = result.diameters.external.form_max_mm / 2
    else:
        major_radius = result.diameters.internal.major_min_mm / 2
        form_radius = result.diameters.internal.form_min_mm / 2

    theta = flank_offset_angle(num_teeth, result.input.pressure_angle_deg, side)
    flank = rotate_points(involute_curve(base_radius, major_radius, points_per_curve), theta)

    # Root as a single point on the form circle, for both root types
    root_point = (form_radius * cos(theta), form_radius * sin(theta))
    if side == SplineSide.EXTERNAL:
        half = [root_point] + flank
    else:
        half = flank + [root_point]

    full = mirror_profile(half)
    complete: Optional[List[Point]] = pattern_profile(full, num_teeth) if with_complete else None

    return SideProfile(
        side=side,
        half_profile=tuple(half),
        full_profile=tuple(full),
        complete_profile=tuple(complete) if complete is not None else None,
        base_radius_mm=base_radius,
        pitch_radius_mm=result.geometry.pitch_diameter_mm / 2,
        major_radius_mm=major_radius,
        form_radius_mm=form_radius
    )


def generate_profile(
    result: SplineResult,
    points_per_curve: int = DEFAULT_PROFILE_POINTS
) -> ProfileData:
    """
    Generate external tooth and internal space profiles.

    Each half profile holds points_per_curve involute samples plus one
    root point; the full profile is twice that. Complete profiles are
    generated only up to 50 teeth.

    Args:
        result: SplineResult from calculate_spline() or design_spline()
        points_per_curve: Involute samples per flank (integer > 10)

    Returns:
        ProfileData with both sides

    Raises:
        InvalidProfilePointCountError: If points_per_curve is not an integer > 10
    """
    points_per_curve = check_profile_points(points_per_curve)
    num_teeth = result.input.num_teeth

    with_complete = num_teeth <= COMPLETE_PROFILE_MAX_TEETH
    if not with_complete:
        logger.info(
            f"Skipping complete profile: {num_teeth} teeth exceeds "
            f"{COMPLETE_PROFILE_MAX_TEETH}"
        )

    logger.debug(f"Generating profiles: z={num_teeth}, {points_per_curve} points per curve")

    return ProfileData(
        num_teeth=num_teeth,
        points_per_curve=points_per_curve,
        external=_side_profile(result, SplineSide.EXTERNAL, points_per_curve, with_complete),
        internal=_side_profile(result, SplineSide.INTERNAL, points_per_curve, with_complete)
    )
