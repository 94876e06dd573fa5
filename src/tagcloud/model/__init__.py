"""Model layer for tagcloud.

This module contains helpers for producing tag sizes and
filling a layouter with them.
"""

from tagcloud.model.sizes import generate_layout, random_tag_sizes

__all__ = ["generate_layout", "random_tag_sizes"]
