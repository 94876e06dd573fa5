"""Layout engine placing tags in a circular cloud."""

import logging
from dataclasses import dataclass

from tagcloud.errors import PlacementExhaustedError, ValidationError, validate_dimensions
from tagcloud.layout.geometry import Point, Rectangle, Size, bounding_size
from tagcloud.layout.spiral import ArchimedeanSpiral

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Configuration for the layout engine.

    Attributes:
        spiral_step: Angle increment of the candidate spiral, in radians
        max_attempts: Spiral points to try per tag before giving up
            (None searches until a free spot is found)
    """

    spiral_step: float = 0.1
    max_attempts: int | None = None

    def __post_init__(self) -> None:
        if self.spiral_step <= 0:
            raise ValidationError("spiral_step", self.spiral_step, "positive angle increment")
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValidationError("max_attempts", self.max_attempts, "positive integer or None")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class CircularCloudLayouter:
    """Places rectangles one at a time around a fixed center.

    Every new rectangle is put at the first spiral point where it does not
    intersect an already placed one, then pulled toward the center one
    step at a time while it stays free. Placed rectangles never move.

    Instances are not thread-safe: the spiral and the tag list are
    mutated by every placement.
    """

    def __init__(self, center: Point, config: LayoutConfig | None = None) -> None:
        """Initialize the layouter.

        Args:
            center: Center of the cloud
            config: Layout configuration (uses defaults if None)
        """
        self.config = config or LayoutConfig()
        self._center = center
        self._tags: list[Rectangle] = []
        self._spiral = ArchimedeanSpiral(center, step=self.config.spiral_step)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def tags(self) -> tuple[Rectangle, ...]:
        """Placed rectangles in placement order."""
        return tuple(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def put_next_rectangle(self, size: Size) -> Rectangle:
        """Place a rectangle of the given size.

        Args:
            size: Width and height of the tag

        Returns:
            The placed rectangle

        Raises:
            InvalidDimensionsError: If width or height is not positive
            PlacementExhaustedError: If ``config.max_attempts`` is set and
                no free spot was found within that many spiral points
        """
        validate_dimensions(size.width, size.height)

        rectangle, attempts = self._find_free_rectangle(size)
        placed = self._shift_to_center(rectangle)
        self._tags.append(placed)

        logger.debug(f"Placed tag #{len(self._tags)} {placed} after {attempts} attempts")
        return placed

    def size(self) -> Size:
        """Size of the box enclosing all placed tags (empty if none)."""
        return bounding_size(self._tags)

    def _find_free_rectangle(self, size: Size) -> tuple[Rectangle, int]:
        """Walk the spiral until a rectangle centered on it is free.

        Returns:
            The free rectangle and the number of spiral points tried
        """
        max_attempts = self.config.max_attempts
        attempts = 0

        while True:
            point = self._spiral.next_point()
            attempts += 1
            location = point.offset(-(size.width // 2), size.height // 2)
            rectangle = Rectangle.from_location(location, size)
            if not self._intersects_any(rectangle):
                return rectangle, attempts
            if max_attempts is not None and attempts >= max_attempts:
                raise PlacementExhaustedError(attempts)

    def _shift_to_center(self, rectangle: Rectangle) -> Rectangle:
        """Move a free rectangle toward the center while it stays free.

        Stops at the first blocked step, without looking for a detour.
        """
        steps = 0
        dx, dy = self._direction_to_center(rectangle)
        while (dx, dy) != (0, 0):
            shifted = rectangle.translate(dx, dy)
            if self._intersects_any(shifted):
                break
            rectangle = shifted
            steps += 1
            dx, dy = self._direction_to_center(rectangle)

        if steps:
            logger.debug(f"Shifted tag {steps} steps toward center")
        return rectangle

    def _direction_to_center(self, rectangle: Rectangle) -> tuple[int, int]:
        center = rectangle.center
        return _sign(self._center.x - center.x), _sign(self._center.y - center.y)

    def _intersects_any(self, rectangle: Rectangle) -> bool:
        return rectangle.intersects_any(self._tags)
