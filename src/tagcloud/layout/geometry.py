"""Integer points, sizes and rectangles for 2D tag layout."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """2D integer point."""

    x: int = 0
    y: int = 0

    def offset(self, dx: int, dy: int) -> "Point":
        """Create a new point shifted by the given amounts."""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Size:
    """Width and height of a tag.

    Attributes:
        width: Size along the X axis
        height: Size along the Y axis
    """

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle anchored at its top-left corner.

    The Y axis grows downwards, so ``bottom`` is ``top + height``.

    Attributes:
        x: Left edge
        y: Top edge
        width: Size along the X axis
        height: Size along the Y axis
    """

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_location(cls, location: Point, size: Size) -> "Rectangle":
        """Create a rectangle at a location with the given size."""
        return cls(x=location.x, y=location.y, width=size.width, height=size.height)

    @property
    def location(self) -> Point:
        """Top-left corner."""
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        """Width and height as a Size."""
        return Size(self.width, self.height)

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Point:
        """Point the layout keeps aligned with the cloud center.

        Placement offsets the anchor by ``+height // 2`` on Y, so the
        tracked center sits ``height // 2`` above the anchor.
        """
        return Point(self.left + self.width // 2, self.top - self.height // 2)

    def translate(self, dx: int, dy: int) -> "Rectangle":
        """Create a new rectangle translated by the given amounts."""
        return Rectangle(x=self.x + dx, y=self.y + dy, width=self.width, height=self.height)

    def intersects(self, other: "Rectangle") -> bool:
        """Check if this rectangle overlaps another with positive area.

        Rectangles that only share an edge do not intersect.

        Args:
            other: Rectangle to check intersection with

        Returns:
            True if the rectangles intersect, False otherwise
        """
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def intersects_any(self, others: Iterable["Rectangle"]) -> bool:
        """Check if this rectangle intersects any rectangle in ``others``."""
        return any(self.intersects(other) for other in others)

    def __repr__(self) -> str:
        """String representation."""
        return f"Rectangle(x={self.x}, y={self.y}, w={self.width}, h={self.height})"


def bounding_size(rectangles: Iterable[Rectangle]) -> Size:
    """Calculate the size of the box enclosing all rectangles.

    Args:
        rectangles: Iterable of rectangles

    Returns:
        Enclosing size, or an empty Size if there are no rectangles
    """
    rectangles = list(rectangles)
    if not rectangles:
        return Size()

    left = min(r.left for r in rectangles)
    right = max(r.right for r in rectangles)
    top = min(r.top for r in rectangles)
    bottom = max(r.bottom for r in rectangles)

    return Size(right - left, bottom - top)
