"""Numeric helpers that keep IEEE-754 semantics instead of raising."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np


def ieee_divide(x: float, y: float) -> float:
    """Return x / y, yielding inf/nan on a zero divisor rather than raising."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(x) / np.float64(y))


def db20(x: float) -> float:
    """Return 20 * log10(x); 0 maps to -inf and nan passes through unclamped."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(20.0 * np.log10(np.float64(x)))


def finite_or_none(x: float) -> Optional[float]:
    """Map nan/inf to None so values survive strict JSON encoding."""
    x = float(x)
    return x if math.isfinite(x) else None
