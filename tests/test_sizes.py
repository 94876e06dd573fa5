"""Unit tests for random tag sizes."""

import pytest

from tagcloud.errors import ValidationError
from tagcloud.layout.geometry import Size
from tagcloud.model.sizes import generate_layout, random_tag_sizes


def test_sizes_count_and_type():
    sizes = random_tag_sizes(50, seed=1)

    assert len(sizes) == 50
    assert all(isinstance(s, Size) for s in sizes)
    assert all(isinstance(s.width, int) and isinstance(s.height, int) for s in sizes)


def test_sizes_are_word_shaped():
    """Heights stay in range and widths are two to three heights."""
    for size in random_tag_sizes(500, seed=2):
        assert 20 <= size.height < 40
        assert 2 * size.height <= size.width < 3 * size.height


def test_custom_height_range():
    for size in random_tag_sizes(100, seed=3, min_height=5, max_height=6):
        assert size.height == 5
        assert 10 <= size.width < 15


def test_seed_makes_sizes_reproducible():
    assert random_tag_sizes(20, seed=42) == random_tag_sizes(20, seed=42)
    assert random_tag_sizes(20, seed=42) != random_tag_sizes(20, seed=43)


def test_zero_count():
    assert random_tag_sizes(0, seed=1) == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {"count": -1},
        {"count": 5, "min_height": 0},
        {"count": 5, "min_height": 30, "max_height": 30},
        {"count": 5, "min_height": 30, "max_height": 20},
    ],
)
def test_invalid_arguments_rejected(kwargs):
    with pytest.raises(ValidationError):
        random_tag_sizes(**kwargs)


def test_generate_layout_places_all_sizes(layouter):
    sizes = random_tag_sizes(15, seed=4)

    result = generate_layout(layouter, sizes)

    assert result is layouter
    assert [tag.size for tag in layouter.tags] == sizes
