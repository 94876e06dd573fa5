"""Main entry point for tagcloud."""

import argparse
import logging
import sys
from pathlib import Path

from tagcloud.errors import TagCloudError
from tagcloud.layout.engine import CircularCloudLayouter, LayoutConfig
from tagcloud.layout.geometry import Point
from tagcloud.model.sizes import generate_layout, random_tag_sizes
from tagcloud.view.visualizer import VisualizerConfig, save_layout_image, write_readme

logger = logging.getLogger("tagcloud")


def non_negative_int(value: str) -> int:
    """Argparse type for tag counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"count must be non-negative, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="tagcloud",
        description="Tag cloud layout - render sample circular clouds of random tags",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--counts",
        type=non_negative_int,
        nargs="+",
        default=[25, 50, 100],
        metavar="N",
        help="Number of tags in each generated layout (default: 25 50 100)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("layouts"),
        help="Directory for images and README.md (default: layouts)",
    )
    parser.add_argument(
        "--center",
        type=int,
        nargs=2,
        default=[350, 350],
        metavar=("X", "Y"),
        help="Cloud center in image coordinates (default: 350 350)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=700,
        help="Image width in pixels (default: 700)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=700,
        help="Image height in pixels (default: 700)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random tag sizes (default: random)",
    )
    parser.add_argument(
        "--spiral-step",
        type=float,
        default=0.1,
        help="Spiral angle increment in radians (default: 0.1)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        metavar="N",
        help="Give up on a tag after N spiral points (default: no limit)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every placement",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        layout_config = LayoutConfig(spiral_step=args.spiral_step, max_attempts=args.max_attempts)
        visualizer_config = VisualizerConfig(image_width=args.width, image_height=args.height)
        center = Point(*args.center)

        # All layouts are built before any file is written
        layouters = []
        for i, count in enumerate(args.counts, start=1):
            seed = None if args.seed is None else args.seed + i
            layouter = generate_layout(CircularCloudLayouter(center, layout_config), random_tag_sizes(count, seed=seed))
            layouters.append(layouter)
            logger.info(f"Layout {i}: {count} tags, cloud size {layouter.size()}")

        image_names = []
        for i, layouter in enumerate(layouters, start=1):
            image_path = save_layout_image(layouter, args.output_dir / f"layout_{i}.png", visualizer_config)
            image_names.append(image_path.name)

        write_readme(args.output_dir / "README.md", image_names)
    except TagCloudError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
