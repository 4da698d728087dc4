"""Type-safe enums for the involute spline calculator."""

from enum import Enum


class RootType(Enum):
    """Tooth root form per ISO 4156-1"""
    FLAT = "flat"
    FILLET = "fillet"


class SplineSide(Enum):
    """Which member of the spline connection"""
    EXTERNAL = "external"  # Shaft
    INTERNAL = "internal"  # Hub
