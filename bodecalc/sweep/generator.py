"""Frequency sweep generation for Bode data and the decade summary table."""

from __future__ import annotations

import math
from typing import List

import numpy as np

DECADE_START = 0.001
DECADE_STOP = 100.0


class SweepConfigError(ValueError):
    """Raised when sweep bounds or point count are out of range."""


def validate_sweep(freq_min: float, freq_max: float, num_points: int) -> None:
    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)):
        raise SweepConfigError(f"num_points must be an integer, got {num_points!r}")
    if num_points < 2:
        raise SweepConfigError(f"num_points must be >= 2, got {num_points}")
    if not math.isfinite(freq_min) or freq_min <= 0:
        raise SweepConfigError(f"freq_min must be a positive finite value, got {freq_min}")
    if not math.isfinite(freq_max) or freq_max <= freq_min:
        raise SweepConfigError(f"freq_max must be finite and > freq_min ({freq_min}), got {freq_max}")


def log_sweep(freq_min: float, freq_max: float, num_points: int) -> np.ndarray:
    """Return ``num_points`` log-spaced angular frequencies from freq_min to freq_max."""
    validate_sweep(freq_min, freq_max, num_points)
    log_min = math.log10(freq_min)
    log_max = math.log10(freq_max)
    step = (log_max - log_min) / (num_points - 1)
    exponents = log_min + np.arange(int(num_points), dtype=np.float64) * step
    return np.power(10.0, exponents)


def decade_sweep() -> List[float]:
    """Return the fixed table frequencies 0.001, 0.01, ..., 100 rad/s."""
    omegas: List[float] = []
    omega = DECADE_START
    while omega <= DECADE_STOP:
        omegas.append(omega)
        omega *= 10
    return omegas
