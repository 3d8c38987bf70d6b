# core/vector.py
import math
from numbers import Real
from typing import Iterator, Sequence

import numpy as np


def _is_scalar(value) -> bool:
    # bool is an int subclass but never a meaningful scale factor
    return isinstance(value, Real) and not isinstance(value, bool)


def _component(value) -> float:
    if not _is_scalar(value):
        raise TypeError(f"Vector3 components must be real numbers, got {type(value).__name__}")
    return float(value)


class ZeroLengthVectorError(ZeroDivisionError):
    """
    Raised when a zero-length vector is asked for its direction.
    """


class Vector3:
    """
    A 3D vector of double-precision floats with value semantics.

    Every operation returns a new vector except the in-place family
    (add_in_place, subtract_in_place, scale_in_place, divide_in_place and
    the augmented operators), which mutate the receiver only and return it.
    The same type carries geometric vectors and RGB channel triples.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = _component(x)
        self.y = _component(y)
        self.z = _component(z)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector3":
        """
        Builds a vector from any 3-element sequence or numpy array,
        e.g. one pixel of an accumulation buffer.
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got shape {arr.shape}")
        return cls(arr[0], arr[1], arr[2])

    def to_array(self, dtype=np.float64) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    # Pure arithmetic

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, t: float) -> "Vector3":
        return Vector3(self.x * t, self.y * t, self.z * t)

    def divide(self, t: float) -> "Vector3":
        """
        Equivalent to scale(1.0 / t). A zero divisor raises ZeroDivisionError.
        """
        return self.scale(1.0 / t)

    def negate(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    # In-place arithmetic

    def add_in_place(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def subtract_in_place(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def scale_in_place(self, t: float) -> "Vector3":
        self.x *= t
        self.y *= t
        self.z *= t
        return self

    def divide_in_place(self, t: float) -> "Vector3":
        return self.scale_in_place(1.0 / t)

    # Products and norms

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def squared_length(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.squared_length())

    def unit(self) -> "Vector3":
        """
        Returns the vector scaled to length 1.
        Raises ZeroLengthVectorError for the zero vector, which has no direction.
        Very short vectors such as Vector3(1e-200, 0, 0) raise it too: their
        squared length underflows to 0.0 before the square root is taken.
        """
        l = self.length()
        if l == 0.0:
            raise ZeroLengthVectorError(f"Cannot normalize zero-length vector {self!r}")
        return self.divide(l)

    def isclose(self, other: "Vector3", rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        return (math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol) and
                math.isclose(self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol) and
                math.isclose(self.z, other.z, rel_tol=rel_tol, abs_tol=abs_tol))

    # Operator sugar over the named operations

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add_in_place(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __isub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract_in_place(other)

    def __mul__(self, other):
        # Scalar multiplication.
        if _is_scalar(other):
            return self.scale(other)
        # Element-wise multiplication, e.g. attenuating a color.
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __imul__(self, other):
        if _is_scalar(other):
            return self.scale_in_place(other)
        if isinstance(other, Vector3):
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
            return self
        return NotImplemented

    def __truediv__(self, t: float) -> "Vector3":
        if not _is_scalar(t):
            return NotImplemented
        return self.divide(t)

    def __itruediv__(self, t: float) -> "Vector3":
        if not _is_scalar(t):
            return NotImplemented
        return self.divide_in_place(t)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    # Mutable through the in-place family, so not hashable.
    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
