"""Random tag sizes for sample clouds."""

import logging

import numpy as np

from tagcloud.errors import ValidationError
from tagcloud.layout.engine import CircularCloudLayouter
from tagcloud.layout.geometry import Size

logger = logging.getLogger(__name__)


def random_tag_sizes(
    count: int,
    seed: int | None = None,
    min_height: int = 20,
    max_height: int = 40,
) -> list[Size]:
    """Generate word-like tag sizes.

    Heights are drawn uniformly from ``[min_height, max_height)`` and
    widths are two to three times the height.

    Args:
        count: Number of sizes to generate
        seed: Seed for the random generator (random if None)
        min_height: Smallest height, inclusive
        max_height: Largest height, exclusive

    Returns:
        List of sizes

    Raises:
        ValidationError: If count is negative or the height range is empty
    """
    if count < 0:
        raise ValidationError("count", count, "non-negative integer")
    if min_height <= 0 or max_height <= min_height:
        raise ValidationError("height range", (min_height, max_height), "0 < min_height < max_height")

    rng = np.random.default_rng(seed)
    heights = rng.integers(min_height, max_height, size=count)
    factors = 2 + rng.random(count)
    widths = (heights * factors).astype(np.int64)

    return [Size(int(w), int(h)) for w, h in zip(widths, heights)]


def generate_layout(layouter: CircularCloudLayouter, sizes: list[Size]) -> CircularCloudLayouter:
    """Place every size on the layouter, in order.

    Args:
        layouter: Layouter to fill
        sizes: Tag sizes to place

    Returns:
        The same layouter
    """
    for size in sizes:
        layouter.put_next_rectangle(size)

    logger.debug(f"Generated layout with {len(sizes)} tags, cloud size {layouter.size()}")
    return layouter
