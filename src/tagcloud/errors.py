"""Error handling utilities for tagcloud.

Provides exception classes and validation helpers for
tag layout and export.
"""

from pathlib import Path


class TagCloudError(Exception):
    """Base exception for tagcloud errors."""

    pass


class ValidationError(TagCloudError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


class InvalidDimensionsError(ValidationError):
    """Exception raised when a tag has a non-positive width or height."""

    def __init__(self, width: int, height: int) -> None:
        """Initialize invalid dimensions error.

        Args:
            width: Requested width
            height: Requested height
        """
        self.width = width
        self.height = height
        super().__init__("size", (width, height), "positive integer width and height")


class LayoutError(TagCloudError):
    """Exception raised when layout calculation fails."""

    def __init__(self, reason: str) -> None:
        """Initialize layout error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Layout calculation failed: {reason}")


class PlacementExhaustedError(LayoutError):
    """Exception raised when no free spot is found within the attempt limit."""

    def __init__(self, attempts: int) -> None:
        """Initialize placement exhausted error.

        Args:
            attempts: Number of spiral points tried
        """
        self.attempts = attempts
        super().__init__(f"no free spot after {attempts} attempts")


class RenderError(TagCloudError):
    """Exception raised when rendering or export fails."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize render error.

        Args:
            path: Output path that could not be written
            reason: Reason for failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Rendering to {path} failed: {reason}")


def validate_dimensions(width: int, height: int) -> None:
    """Validate that both tag dimensions are positive integers.

    Args:
        width: Tag width
        height: Tag height

    Raises:
        InvalidDimensionsError: If either dimension is not an integer,
            or is zero or negative
    """
    for value in (width, height):
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise InvalidDimensionsError(width, height)
