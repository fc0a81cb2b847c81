"""Complex arithmetic primitives used to evaluate H(jw).

Values are immutable; every operation returns a new ``Complex``. Division by
exactly zero follows floating-point semantics (inf/nan) instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from bodecalc.util.math import ieee_divide


@dataclass(frozen=True)
class Complex:
    real: float
    imag: float

    @classmethod
    def from_real(cls, value: float) -> "Complex":
        return cls(float(value), 0.0)

    @classmethod
    def imaginary(cls, value: float) -> "Complex":
        return cls(0.0, float(value))

    def is_zero(self) -> bool:
        return self.real == 0.0 and self.imag == 0.0


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.real + b.real, a.imag + b.imag)


def multiply(a: Complex, b: Complex) -> Complex:
    return Complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def divide(a: Complex, b: Complex) -> Complex:
    """Return a / b. A (0, 0) divisor yields nan/inf components."""
    denom = b.real * b.real + b.imag * b.imag
    return Complex(
        ieee_divide(a.real * b.real + a.imag * b.imag, denom),
        ieee_divide(a.imag * b.real - a.real * b.imag, denom),
    )


def power(base: Complex, n: int) -> Complex:
    """Raise ``base`` to a non-negative integer power by repeated multiplication."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"power exponent must be a non-negative integer, got {n!r}")
    if n == 0:
        return ONE
    if n == 1:
        return base
    result = ONE
    for _ in range(n):
        result = multiply(result, base)
    return result


def magnitude(c: Complex) -> float:
    return math.sqrt(c.real * c.real + c.imag * c.imag)


def phase_degrees(c: Complex) -> float:
    """Return the argument of ``c`` in degrees, in (-180, 180]; atan2(0, 0) is 0."""
    return math.atan2(c.imag, c.real) * 180.0 / math.pi
