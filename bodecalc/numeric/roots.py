"""Closed-form roots for zero/pole display.

Only degrees 0-2 are solved. Higher degrees return an empty ``RootSet`` with
``supported=False`` so callers can tell "not computed" apart from "constant
polynomial, no roots".
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple, Union

from bodecalc.numeric.complex import Complex
from bodecalc.util.logging import get_logger
from bodecalc.util.math import finite_or_none, ieee_divide

logger = get_logger(__name__)

MAX_SUPPORTED_DEGREE = 2


@dataclass(frozen=True)
class RealRoot:
    value: float

    def as_complex(self) -> Tuple[Complex, ...]:
        return (Complex.from_real(self.value),)


@dataclass(frozen=True)
class ComplexPair:
    """Conjugate pair ``real +/- j*imag`` with ``imag = sqrt(-D) / (2a)``.

    ``imag_pos`` and ``imag_neg`` name the "+" and "-" branches of the
    quadratic formula, not signs: ``imag`` is negative when ``a < 0``.
    """

    real: float
    imag: float

    @property
    def imag_pos(self) -> float:
        return self.imag

    @property
    def imag_neg(self) -> float:
        return -self.imag

    def as_complex(self) -> Tuple[Complex, ...]:
        return (Complex(self.real, self.imag_pos), Complex(self.real, self.imag_neg))


Root = Union[RealRoot, ComplexPair]


@dataclass(frozen=True)
class RootSet:
    roots: Tuple[Root, ...] = ()
    degree: int = 0
    supported: bool = True

    def __len__(self) -> int:
        return len(self.as_complex())

    def as_complex(self) -> List[Complex]:
        out: List[Complex] = []
        for root in self.roots:
            out.extend(root.as_complex())
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {
            "degree": self.degree,
            "supported": self.supported,
            "roots": [
                {"real": finite_or_none(c.real), "imag": finite_or_none(c.imag)} for c in self.as_complex()
            ],
        }


def _linear(a: float, b: float) -> Tuple[Root, ...]:
    return (RealRoot(ieee_divide(-b, a)),)


def _quadratic(a: float, b: float, c: float) -> Tuple[Root, ...]:
    disc = b * b - 4.0 * a * c
    two_a = 2.0 * a
    if disc >= 0:
        sq = math.sqrt(disc)
        return (RealRoot(ieee_divide(-b + sq, two_a)), RealRoot(ieee_divide(-b - sq, two_a)))
    return (ComplexPair(ieee_divide(-b, two_a), ieee_divide(math.sqrt(-disc), two_a)),)


def find_roots(coeffs: Sequence[float]) -> RootSet:
    """Return the roots of a polynomial given highest power first."""
    degree = max(len(coeffs) - 1, 0)
    if len(coeffs) <= 1:
        return RootSet((), degree=degree, supported=True)
    if degree > MAX_SUPPORTED_DEGREE:
        logger.debug("Root finding skipped for degree %d polynomial", degree, extra={"degree": degree})
        return RootSet((), degree=degree, supported=False)
    if degree == 1:
        a, b = (float(x) for x in coeffs)
        return RootSet(_linear(a, b), degree=1)
    a, b, c = (float(x) for x in coeffs)
    return RootSet(_quadratic(a, b, c), degree=2)
