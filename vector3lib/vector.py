"""Single-precision 3D vector value type.

Components are stored as ``numpy.float32`` so results match the usual
graphics/game convention of 32-bit floats. Numeric edge cases are never
rejected: dividing by zero, normalizing a zero-length vector or feeding in
NaN/infinity simply propagates the IEEE-754 result.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
import numbers
from typing import Iterable, Iterator, Union

import numpy as np

Scalar = Union[numbers.Real, np.integer, np.floating]

DEFAULT_TOLERANCE = 1e-5


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, Vector3)


def _to_float32(value: object) -> np.float32:
    if not _is_scalar(value):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    # Narrowing may overflow to +/-inf, which is a valid component.
    try:
        with np.errstate(all="ignore"):
            return np.float32(value)
    except OverflowError:
        # Integers beyond the float64 range saturate like any other overflow.
        return np.float32(math.inf if value > 0 else -math.inf)


@dataclass(frozen=True, repr=False)
class Vector3:
    """Immutable 3D vector; every operation returns a new instance.

    Equality is the dataclass field comparison. Interpreters that compare the
    field tuples check identity first, so a NaN vector may equal itself, but
    two separately built NaN vectors never compare equal. Use
    :meth:`approx_equal` to match NaN slots explicitly.
    """

    x: np.float32
    y: np.float32
    z: np.float32

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _to_float32(self.x))
        object.__setattr__(self, "y", _to_float32(self.y))
        object.__setattr__(self, "z", _to_float32(self.z))

    def __repr__(self) -> str:
        return f"Vector3(x={float(self.x)!r}, y={float(self.y)!r}, z={float(self.z)!r})"

    def __iter__(self) -> Iterator[np.float32]:
        yield self.x
        yield self.y
        yield self.z

    # Miscellaneous helpers -------------------------------------------------

    def invert(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def negate(self) -> "Vector3":
        """Alias for :meth:`invert`."""
        return self.invert()

    def length(self) -> float:
        """Euclidean norm; NaN if any component is NaN, ``inf`` if any is infinite."""
        with np.errstate(all="ignore"):
            return float(np.sqrt(self.x * self.x + self.y * self.y + self.z * self.z))

    def norm(self) -> "Vector3":
        """Scale to unit length.

        There is no zero-length guard: the zero vector normalizes to
        ``(nan, nan, nan)``.
        """
        return self._divided_by(np.float32(self.length()))

    # Arithmetic ------------------------------------------------------------

    def add(self, other: Union["Vector3", Scalar]) -> "Vector3":
        if isinstance(other, Vector3):
            return self._combine(other.x, other.y, other.z, np.add)
        s = self._scalar_operand(other, "add")
        return self._combine(s, s, s, np.add)

    def sub(self, other: Union["Vector3", Scalar]) -> "Vector3":
        if isinstance(other, Vector3):
            return self._combine(other.x, other.y, other.z, np.subtract)
        s = self._scalar_operand(other, "subtract")
        return self._combine(s, s, s, np.subtract)

    def mul(self, scalar: Scalar) -> "Vector3":
        if isinstance(scalar, Vector3):
            raise TypeError("vector-by-vector multiplication is not supported")
        s = self._scalar_operand(scalar, "multiply")
        return self._combine(s, s, s, np.multiply)

    def div(self, scalar: Scalar) -> "Vector3":
        if isinstance(scalar, Vector3):
            raise TypeError("vector-by-vector division is not supported")
        return self._divided_by(self._scalar_operand(scalar, "divide"))

    # Operator sugar over the named methods ---------------------------------

    def __neg__(self) -> "Vector3":
        return self.invert()

    def __add__(self, other: object) -> "Vector3":
        if isinstance(other, Vector3) or _is_scalar(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: object) -> "Vector3":
        if _is_scalar(other):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Vector3":
        if isinstance(other, Vector3) or _is_scalar(other):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, other: object) -> "Vector3":
        if _is_scalar(other):
            return self.mul(other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Vector3":
        if _is_scalar(other):
            return self.div(other)
        return NotImplemented

    # Comparison and construction -------------------------------------------

    def approx_equal(self, other: "Vector3", tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Componentwise absolute comparison; NaN only matches NaN in the same slot."""
        for a, b in zip(self, other):
            a, b = float(a), float(b)
            if a == b or (a != a and b != b):
                continue
            if not abs(a - b) <= tolerance:
                return False
        return True

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def from_iter(values: Iterable[Scalar]) -> "Vector3":
        components = tuple(values)
        if len(components) != 3:
            raise ValueError(f"Vector3 requires exactly three components, got {len(components)}")
        x, y, z = components
        return Vector3(x, y, z)

    def _scalar_operand(self, value: object, verb: str) -> np.float32:
        if not _is_scalar(value):
            raise TypeError(f"cannot {verb} Vector3 and {type(value).__name__}")
        return _to_float32(value)

    def _divided_by(self, divisor: np.float32) -> "Vector3":
        return self._combine(divisor, divisor, divisor, np.divide)

    def _combine(self, ox: np.float32, oy: np.float32, oz: np.float32, op: np.ufunc) -> "Vector3":
        # IEEE-754 outcomes (inf, nan, overflow) are results, not warnings.
        with np.errstate(all="ignore"):
            return Vector3(op(self.x, ox), op(self.y, oy), op(self.z, oz))
