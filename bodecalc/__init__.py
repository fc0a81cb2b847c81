"""
bodecalc — frequency response of rational transfer functions.

Evaluates H(s) = N(s)/D(s) along s = jw and returns Bode magnitude/phase
samples, a decade summary table, closed-form poles/zeros and a readable
label.

Usage:
    from bodecalc import compute_response
    result = compute_response("1", "1 0.1 0.01", 0.001, 100.0, 200)
    result.sweep_points[0].magnitude_db
"""
from __future__ import annotations

__version__ = "0.1.0"

from bodecalc.response.engine import compute_response, compute_response_for
from bodecalc.response.types import ResponsePoint, ResponseResult
from bodecalc.sweep.generator import SweepConfigError

__all__ = [
    "compute_response",
    "compute_response_for",
    "ResponsePoint",
    "ResponseResult",
    "SweepConfigError",
    "__version__",
]
