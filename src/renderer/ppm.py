# renderer/ppm.py
import logging
from typing import Callable, TextIO

import numpy as np

from core.color import Color

logger = logging.getLogger(__name__)

MAGIC = "P3"
MAX_VALUE = 255

Shader = Callable[[int, int], Color]


def _check_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise ValueError(f"Image {name} must be a positive integer, got {value!r}")


def format_header(width: int, height: int) -> str:
    """
    Returns the plain-text raster header: magic token, dimensions and
    maximum channel value, one per line.
    """
    _check_dimensions(width, height)
    return f"{MAGIC}\n{width} {height}\n{MAX_VALUE}\n"


def write_header(stream: TextIO, width: int, height: int) -> None:
    stream.write(format_header(width, height))
    logger.debug(f"Wrote header for {width}x{height} image")


def write_pixel(stream: TextIO, color: Color) -> None:
    stream.write(f"{color}\n")


def write_image(stream: TextIO, width: int, height: int, shader: Shader) -> int:
    """
    Writes a full image. shader(row, col) is called in row-major order
    starting at the top-left pixel and must return a Color.
    Returns the number of pixels written.
    """
    write_header(stream, width, height)
    count = 0
    for row in range(height):
        for col in range(width):
            color = shader(row, col)
            if not isinstance(color, Color):
                raise TypeError(f"Shader returned {type(color).__name__} at ({row}, {col}), expected Color")
            write_pixel(stream, color)
            count += 1
    logger.debug(f"Wrote {count} pixels")
    return count


def write_buffer(stream: TextIO, buffer: np.ndarray) -> int:
    """
    Writes a (height, width, 3) float buffer of linear channel values,
    such as an accumulation buffer, as a full image.
    """
    buffer = np.asarray(buffer, dtype=np.float64)
    if buffer.ndim != 3 or buffer.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) buffer, got shape {buffer.shape}")
    height, width = buffer.shape[0], buffer.shape[1]

    def shader(row: int, col: int) -> Color:
        r, g, b = buffer[row, col]
        return Color(r, g, b)

    return write_image(stream, width, height, shader)


def gradient_shader(width: int, height: int) -> Shader:
    """
    Red ramps from top to bottom and green from left to right.
    """
    _check_dimensions(width, height)
    # Single-pixel axes would divide by zero.
    row_span = max(height - 1, 1)
    col_span = max(width - 1, 1)

    def shader(row: int, col: int) -> Color:
        return Color(row / row_span, col / col_span, 0.0)

    return shader
