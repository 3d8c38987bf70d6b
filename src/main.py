# main.py
import argparse
import logging
import sys
from typing import List, Optional

from core.logging_config import setup_logging
from renderer.ppm import gradient_shader, write_image

logger = logging.getLogger("main")

IMAGE_WIDTH = 256
IMAGE_HEIGHT = 256


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a color gradient as a plain-text P3 image.")
    parser.add_argument("--width", type=positive_int, default=IMAGE_WIDTH, help="Image width in pixels")
    parser.add_argument("--height", type=positive_int, default=IMAGE_HEIGHT, help="Image height in pixels")
    parser.add_argument("--output", "-o", default=None, help="Output file path (default: stdout)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def render(stream, width: int, height: int) -> int:
    logger.info(f"Rendering {width}x{height} gradient")
    return write_image(stream, width, height, gradient_shader(width, height))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.output is None:
        count = render(sys.stdout, args.width, args.height)
    else:
        with open(args.output, "w", encoding="utf-8", newline="\n") as f:
            count = render(f, args.width, args.height)
        logger.info(f"Wrote {count} pixels to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
