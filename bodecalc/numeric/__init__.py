"""Complex kernel, polynomial evaluation and closed-form root finding."""
from __future__ import annotations

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
from bodecalc.numeric.polynomial import (
    evaluate_at_jw,
    format_coefficient,
    format_polynomial,
    format_transfer_function,
)
from bodecalc.numeric.roots import ComplexPair, RealRoot, Root, RootSet, find_roots

__all__ = [
    "ONE",
    "ZERO",
    "Complex",
    "add",
    "divide",
    "magnitude",
    "multiply",
    "phase_degrees",
    "power",
    "evaluate_at_jw",
    "format_coefficient",
    "format_polynomial",
    "format_transfer_function",
    "ComplexPair",
    "RealRoot",
    "Root",
    "RootSet",
    "find_roots",
]
