"""Complex number value type for the Descartes center equations.

The builtin ``complex`` would do the arithmetic, but the gasket keeps its
own small immutable type so the square root branch is pinned down explicitly
(polar form, principal root) and the components read as ``a`` and ``b``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Complex:
    a: float
    b: float = 0.0

    @classmethod
    def from_complex(cls, z: complex) -> "Complex":
        return cls(z.real, z.imag)

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.a + other.a, self.b + other.b)

    def sub(self, other: "Complex") -> "Complex":
        return Complex(self.a - other.a, self.b - other.b)

    def scale(self, value: float) -> "Complex":
        return Complex(self.a * value, self.b * value)

    def mult(self, other: "Complex") -> "Complex":
        # (ac - bd) + (ad + bc)i
        a = self.a * other.a - self.b * other.b
        b = self.a * other.b + other.a * self.b
        return Complex(a, b)

    def sqrt(self) -> "Complex":
        """Principal square root, computed in polar form.

        The half angle lies in (-pi/2, pi/2], so the real part of the result
        is never negative. Callers that need the other root negate it.
        """
        m = math.sqrt(math.hypot(self.a, self.b))
        angle = math.atan2(self.b, self.a) / 2
        return Complex(m * math.cos(angle), m * math.sin(angle))

    def conjugate(self) -> "Complex":
        return Complex(self.a, -self.b)

    def is_finite(self) -> bool:
        return math.isfinite(self.a) and math.isfinite(self.b)

    def __add__(self, other: "Complex") -> "Complex":
        return self.add(other)

    def __sub__(self, other: "Complex") -> "Complex":
        return self.sub(other)

    def __mul__(self, other: Union["Complex", float]) -> "Complex":
        if isinstance(other, Complex):
            return self.mult(other)
        return self.scale(other)

    def __rmul__(self, scalar: float) -> "Complex":
        return self.scale(scalar)

    def __truediv__(self, scalar: float) -> "Complex":
        return Complex(self.a / scalar, self.b / scalar)

    def __neg__(self) -> "Complex":
        return Complex(-self.a, -self.b)

    def __abs__(self) -> float:
        return math.hypot(self.a, self.b)

    def __complex__(self) -> complex:
        return complex(self.a, self.b)


ZERO = Complex(0.0, 0.0)

__all__ = ["Complex", "ZERO"]
