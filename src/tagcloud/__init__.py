"""tagcloud - circular tag cloud layout.

Places tag rectangles around a center point along an Archimedean
spiral and pulls each one toward the center without overlaps.
"""

__version__ = "0.1.0"

from tagcloud.errors import InvalidDimensionsError, PlacementExhaustedError, TagCloudError
from tagcloud.layout import CircularCloudLayouter, LayoutConfig, Point, Rectangle, Size

__all__ = [
    "CircularCloudLayouter",
    "InvalidDimensionsError",
    "LayoutConfig",
    "PlacementExhaustedError",
    "Point",
    "Rectangle",
    "Size",
    "TagCloudError",
]
