import dataclasses
import math
import warnings

import pytest

from bodecalc.numeric.complex import (
    ONE,
    ZERO,
    Complex,
    add,
    divide,
    magnitude,
    multiply,
    phase_degrees,
    power,
)
from bodecalc.util.math import ieee_divide

PAIRS = [
    (Complex(1.0, 2.0), Complex(3.0, -4.0)),
    (Complex(-0.5, 0.25), Complex(0.0, 2.0)),
    (Complex(1e3, -7.0), Complex(-2.5, 1e-3)),
    (Complex(0.0, 0.0), Complex(1.0, 1.0)),
]


def test_add_and_multiply_follow_complex_arithmetic() -> None:
    a, b = Complex(1.0, 2.0), Complex(3.0, -4.0)
    assert add(a, b) == Complex(4.0, -2.0)
    assert multiply(a, b) == Complex(11.0, 2.0)
    assert multiply(Complex.imaginary(1.0), Complex.imaginary(1.0)) == Complex(-1.0, 0.0)


@pytest.mark.parametrize("a,b", PAIRS)
def test_divide_undoes_multiply(a: Complex, b: Complex) -> None:
    q = divide(multiply(a, b), b)
    assert q.real == pytest.approx(a.real, rel=1e-12, abs=1e-12)
    assert q.imag == pytest.approx(a.imag, rel=1e-12, abs=1e-12)


@pytest.mark.parametrize("a,b", PAIRS)
def test_magnitude_is_multiplicative(a: Complex, b: Complex) -> None:
    assert magnitude(multiply(a, b)) == pytest.approx(magnitude(a) * magnitude(b), rel=1e-12, abs=1e-12)


def test_divide_by_exact_zero_yields_nan_instead_of_raising() -> None:
    q = divide(Complex(1.0, 0.0), ZERO)
    assert math.isnan(q.real)
    assert math.isnan(q.imag)


def test_overflowing_quotient_is_infinite_without_warnings() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert ieee_divide(1e290, 1e-20) == math.inf
        q = divide(Complex(1e300, 0.0), Complex(1e-10, 0.0))
    assert q.real == math.inf
    assert q.imag == 0.0


def test_power_edge_exponents() -> None:
    base = Complex(0.0, 2.0)
    assert power(base, 0) == ONE
    assert power(base, 1) is base
    assert power(base, 2) == Complex(-4.0, 0.0)
    assert power(base, 3) == Complex(0.0, -8.0)


@pytest.mark.parametrize("n", [-1, 1.5, True])
def test_power_rejects_unsupported_exponents(n) -> None:
    with pytest.raises(ValueError):
        power(Complex(1.0, 1.0), n)


def test_magnitude_and_phase() -> None:
    assert magnitude(Complex(3.0, 4.0)) == 5.0
    assert phase_degrees(Complex(0.0, 1.0)) == pytest.approx(90.0)
    assert phase_degrees(Complex(1.0, -1.0)) == pytest.approx(-45.0)
    assert phase_degrees(Complex(-1.0, 0.0)) == pytest.approx(180.0)
    assert phase_degrees(ZERO) == 0.0


def test_complex_values_are_immutable() -> None:
    c = Complex(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.real = 5.0  # type: ignore[misc]
    assert c.is_zero() is False
    assert ZERO.is_zero() is True
