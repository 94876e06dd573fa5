"""Image export for tag cloud layouts.

Draws placed tags as outlined rectangles with Pillow and writes
a markdown index linking the generated images.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw

from tagcloud.errors import RenderError, ValidationError
from tagcloud.layout.engine import CircularCloudLayouter
from tagcloud.layout.geometry import Rectangle

logger = logging.getLogger(__name__)


@dataclass
class VisualizerConfig:
    """Appearance of exported layout images.

    Attributes:
        image_width: Canvas width in pixels
        image_height: Canvas height in pixels
        background: Canvas fill color (any Pillow color spec)
        outline: Tag outline color
        line_width: Tag outline width in pixels
    """

    image_width: int = 700
    image_height: int = 700
    background: str = "white"
    outline: str = "blue"
    line_width: int = 2

    def __post_init__(self) -> None:
        if self.image_width <= 0 or self.image_height <= 0:
            raise ValidationError("image size", (self.image_width, self.image_height), "positive width and height")
        if self.line_width <= 0:
            raise ValidationError("line_width", self.line_width, "positive integer")


def _tags_of(layout: CircularCloudLayouter | Iterable[Rectangle]) -> list[Rectangle]:
    if isinstance(layout, CircularCloudLayouter):
        return list(layout.tags)
    return list(layout)


def render_layout(
    layout: CircularCloudLayouter | Iterable[Rectangle],
    config: VisualizerConfig | None = None,
) -> Image.Image:
    """Draw every tag of a layout onto a new image.

    Tags are drawn in canvas coordinates; anything outside the canvas
    is clipped.

    Args:
        layout: Layouter or rectangles to draw
        config: Image appearance (uses defaults if None)

    Returns:
        RGB image
    """
    config = config or VisualizerConfig()
    image = Image.new("RGB", (config.image_width, config.image_height), config.background)
    draw = ImageDraw.Draw(image)

    for tag in _tags_of(layout):
        draw.rectangle(
            [(tag.left, tag.top), (tag.right, tag.bottom)],
            outline=config.outline,
            width=config.line_width,
        )

    return image


def save_layout_image(
    layout: CircularCloudLayouter | Iterable[Rectangle],
    path: Path | str,
    config: VisualizerConfig | None = None,
) -> Path:
    """Render a layout and save it to a file.

    The image format is taken from the file suffix. Parent directories
    are created as needed.

    Args:
        layout: Layouter or rectangles to draw
        path: Output file path
        config: Image appearance (uses defaults if None)

    Returns:
        Path of the written file

    Raises:
        RenderError: If the file cannot be written
    """
    path = Path(path)
    image = render_layout(layout, config)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path)
    except (OSError, ValueError) as e:
        raise RenderError(path, str(e)) from e

    logger.info(f"Saved layout image to {path}")
    return path


def write_readme(path: Path | str, image_names: list[str]) -> Path:
    """Write a markdown index showing each layout image.

    Args:
        path: README file path
        image_names: Image file names, relative to the README

    Returns:
        Path of the written file

    Raises:
        RenderError: If the file cannot be written
    """
    path = Path(path)
    lines = ["# Layout Visualization", ""]
    for i, name in enumerate(image_names, start=1):
        lines += [f"## Layout {i}", f"![Layout {i}]({name})", ""]

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines), encoding="utf-8")
    except OSError as e:
        raise RenderError(path, str(e)) from e

    logger.info(f"Wrote layout index to {path}")
    return path
