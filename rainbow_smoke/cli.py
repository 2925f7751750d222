"""Command-line entry point.

Usage::

    rainbow-smoke 256 128 31 -o smoke.png --selection scan -v

Exit codes: 0 on success, 1 if the image cannot be written, 2 if the
parameters are rejected.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rainbow_smoke.config import DEFAULT_OUTPUT, DEFAULT_PROGRESS_INTERVAL, GrowthConfig
from rainbow_smoke.errors import ConfigurationError, EncodingError
from rainbow_smoke.growth import grow_from_config
from rainbow_smoke.renderer.image import save_image
from rainbow_smoke.selection import DEFAULT_SELECTION, SELECT_FN_REGISTRY

logger = logging.getLogger("rainbow_smoke")

EXIT_OK = 0
EXIT_ENCODING_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rainbow-smoke",
        description="Grow a smoke-like gradient image from a hue-sorted palette.",
    )
    parser.add_argument("width", type=int, help="Image width in pixels")
    parser.add_argument("height", type=int, help="Image height in pixels")
    parser.add_argument(
        "depth",
        type=int,
        help="Color depth; the palette holds (depth+1)^3 colors",
    )
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT, help="Output image path"
    )
    parser.add_argument(
        "--selection",
        default=DEFAULT_SELECTION,
        choices=sorted(SELECT_FN_REGISTRY),
        help="Frontier selection strategy",
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=DEFAULT_PROGRESS_INTERVAL,
        help="Iterations between progress reports",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors"
    )
    return parser


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def report_progress(iteration: int, total: int, frontier_size: int) -> None:
    logger.info("%d/%d done, %d elements in queue", iteration, total, frontier_size)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    config = GrowthConfig(
        width=args.width,
        height=args.height,
        depth=args.depth,
        selection=args.selection,
        progress_interval=args.progress_interval,
        output=args.output,
    )

    logger.info("Allocating memory...")
    try:
        canvas = grow_from_config(config, progress=report_progress)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIGURATION_ERROR
    logger.info("Done!")

    try:
        save_image(canvas, config.output)
    except EncodingError as exc:
        logger.error("%s", exc)
        return EXIT_ENCODING_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
