"""View layer for tagcloud.

This module contains image export for finished layouts.
"""

from tagcloud.view.visualizer import VisualizerConfig, render_layout, save_layout_image, write_readme

__all__ = ["VisualizerConfig", "render_layout", "save_layout_image", "write_readme"]
