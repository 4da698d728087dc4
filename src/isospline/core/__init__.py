"""
isospline Core - 2D involute profile generation.

Pure geometry from a calculated SplineResult. No plotting, no CAD export.

Example:
    >>> from isospline.calculator import design_spline
    >>> from isospline.core import generate_profile
    >>>
    >>> result = design_spline(module=2.5, num_teeth=20, root_type="fillet")
    >>> profile = generate_profile(result, points_per_curve=150)
    >>> profile.external.half_profile[0]  # Root point
"""

from .profile import (
    involute,
    involute_curve,
    rotate_points,
    mirror_profile,
    pattern_profile,
    flank_offset_angle,
    generate_profile,
)

__all__ = [
    "involute",
    "involute_curve",
    "rotate_points",
    "mirror_profile",
    "pattern_profile",
    "flank_offset_angle",
    "generate_profile",
]
