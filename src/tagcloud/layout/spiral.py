"""Archimedean spiral used to enumerate candidate tag locations."""

import math

from tagcloud.errors import ValidationError
from tagcloud.layout.geometry import Point


class ArchimedeanSpiral:
    """Infinite, non-restartable sequence of points spiraling out of a center.

    Each point lies at radius ``angle`` from the center, and the angle grows
    by ``step`` per point. Coordinates are truncated toward zero.

    Example:
        ```python
        spiral = ArchimedeanSpiral(Point(0, 0))
        spiral.next_point()  # Point(x=0, y=0)
        ```
    """

    def __init__(self, center: Point, step: float = 0.1) -> None:
        """Initialize the spiral.

        Args:
            center: Point the spiral starts from
            step: Angle increment in radians per point

        Raises:
            ValidationError: If step is not positive
        """
        if step <= 0:
            raise ValidationError("step", step, "positive angle increment")
        self._center = center
        self._step = step
        self._angle = 0.0

    @property
    def center(self) -> Point:
        return self._center

    @property
    def angle(self) -> float:
        """Angle of the next point to be produced."""
        return self._angle

    def next_point(self) -> Point:
        """Return the current spiral point and advance the angle."""
        angle = self._angle
        x = int(self._center.x + angle * math.cos(angle))
        y = int(self._center.y + angle * math.sin(angle))
        self._angle += self._step
        return Point(x, y)

    def __iter__(self) -> "ArchimedeanSpiral":
        return self

    def __next__(self) -> Point:
        return self.next_point()
