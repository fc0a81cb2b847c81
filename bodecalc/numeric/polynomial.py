"""Polynomial evaluation at s = jw and transfer-function label rendering."""

from __future__ import annotations

from typing import List, Sequence

from bodecalc.numeric.complex import ZERO, Complex, add, multiply, power


def evaluate_at_jw(coeffs: Sequence[float], omega: float) -> Complex:
    """Evaluate a real polynomial (highest power first) at s = j*omega.

    Terms are accumulated left to right so results are reproducible to the
    last bit for a given coefficient order.
    """
    s = Complex.imaginary(omega)
    result = ZERO
    n = len(coeffs)
    for i, coeff in enumerate(coeffs):
        term = multiply(power(s, n - 1 - i), Complex.from_real(coeff))
        result = add(result, term)
    return result


def format_coefficient(value: float) -> str:
    """Render a coefficient the way it was typed: ``1`` not ``1.0``."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_polynomial(coeffs: Sequence[float], var: str = "s") -> str:
    """Render ``[a_n, ..., a_0]`` as ``"a_n s^n + ... + a_0"``.

    Signs are not folded into the separator, so ``[1, -2]`` renders as
    ``"1s + -2"``.
    """
    n = len(coeffs)
    terms: List[str] = []
    for i, coeff in enumerate(coeffs):
        p = n - 1 - i
        text = format_coefficient(coeff)
        if p == 0:
            terms.append(text)
        elif p == 1:
            terms.append(f"{text}{var}")
        else:
            terms.append(f"{text}{var}^{p}")
    return " + ".join(terms)


def format_transfer_function(numerator: Sequence[float], denominator: Sequence[float]) -> str:
    return f"H(s) = ({format_polynomial(numerator)}) / ({format_polynomial(denominator)})"
