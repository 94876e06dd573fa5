"""Layout engine for tag clouds.

This module contains the geometry types and the spiral placement
algorithm for positioning tags around a center point.
"""

from tagcloud.layout.engine import CircularCloudLayouter, LayoutConfig
from tagcloud.layout.geometry import Point, Rectangle, Size, bounding_size
from tagcloud.layout.spiral import ArchimedeanSpiral

__all__ = [
    "ArchimedeanSpiral",
    "CircularCloudLayouter",
    "LayoutConfig",
    "Point",
    "Rectangle",
    "Size",
    "bounding_size",
]
