"""Shared test fixtures for tagcloud tests.

Layouters created through ``make_layouter`` are drawn into
``failures/<test name>.png`` when the test using them fails.
"""

import re
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tagcloud.layout.engine import CircularCloudLayouter, LayoutConfig
from tagcloud.layout.geometry import Point
from tagcloud.view.visualizer import VisualizerConfig, save_layout_image

FAILURE_IMAGE_SIZE = 700


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture
def make_layouter(request):
    """Factory for layouters that are dumped as images on failure."""
    created: list[CircularCloudLayouter] = []

    def factory(center: Point = Point(0, 0), config: LayoutConfig | None = None) -> CircularCloudLayouter:
        layouter = CircularCloudLayouter(center, config)
        created.append(layouter)
        return layouter

    yield factory

    report = getattr(request.node, "rep_call", None)
    if report is None or not report.failed:
        return

    output_dir = Path(request.config.rootpath) / "failures"
    name = re.sub(r"[^\w.-]", "_", request.node.name)
    for i, layouter in enumerate(created):
        # Move the cloud center to the middle of the canvas
        dx = FAILURE_IMAGE_SIZE // 2 - layouter.center.x
        dy = FAILURE_IMAGE_SIZE // 2 - layouter.center.y
        tags = [tag.translate(dx, dy) for tag in layouter.tags]
        path = save_layout_image(
            tags,
            output_dir / f"{name}_{i}.png",
            VisualizerConfig(image_width=FAILURE_IMAGE_SIZE, image_height=FAILURE_IMAGE_SIZE),
        )
        print(f"Tag cloud visualization saved to file {path}")


@pytest.fixture
def layouter(make_layouter) -> CircularCloudLayouter:
    """Layouter centered on the origin."""
    return make_layouter()
