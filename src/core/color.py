# core/color.py
import math
from typing import Tuple

from core.vector import Vector3

# Chosen so that a channel of exactly 1.0 truncates to 255 instead of 256.
COLOR_SCALE = 255.999
MAX_BYTE = 255


def quantize(channel: float) -> int:
    """
    Converts a normalized [0, 1] channel to an 8-bit value.

    The scaled value is truncated toward zero, never rounded, and then
    saturated into [0, 255]; NaN maps to 0. Out-of-range inputs are not
    rejected.
    """
    scaled = COLOR_SCALE * channel
    if math.isnan(scaled) or scaled <= 0.0:
        return 0
    if scaled >= MAX_BYTE:
        return MAX_BYTE
    return int(scaled)


class Color:
    """
    An RGB pixel intensity with channels nominally in [0, 1].
    Immutable: the underlying Vector3 is never handed out.
    """
    __slots__ = ("_rgb",)

    def __init__(self, r: float, g: float, b: float):
        object.__setattr__(self, "_rgb", Vector3(r, g, b))

    @classmethod
    def from_vector(cls, v: Vector3) -> "Color":
        return cls(v.x, v.y, v.z)

    @property
    def r(self) -> float:
        return self._rgb.x

    @property
    def g(self) -> float:
        return self._rgb.y

    @property
    def b(self) -> float:
        return self._rgb.z

    def to_vector(self) -> Vector3:
        return self._rgb.copy()

    def to_bytes(self) -> Tuple[int, int, int]:
        return quantize(self._rgb.x), quantize(self._rgb.y), quantize(self._rgb.z)

    def format(self) -> str:
        """
        Returns the pixel record "R G B" for a plain-text raster image.
        """
        r, g, b = self.to_bytes()
        return f"{r} {g} {b}"

    def __setattr__(self, name, value):
        raise AttributeError("Color is immutable")

    def __delattr__(self, name):
        raise AttributeError("Color is immutable")

    def __reduce__(self):
        # Rebuild through __init__ so pickle and copy never need setattr
        return (Color, (self.r, self.g, self.b))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb == other._rgb

    def __hash__(self) -> int:
        return hash((self._rgb.x, self._rgb.y, self._rgb.z))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
