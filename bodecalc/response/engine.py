"""Frequency response evaluation of H(s) = N(s) / D(s) along s = jw."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from bodecalc.io.coefficients import parse_coefficients
from bodecalc.numeric.complex import Complex, divide, magnitude, phase_degrees
from bodecalc.numeric.polynomial import evaluate_at_jw, format_transfer_function
from bodecalc.numeric.roots import find_roots
from bodecalc.response.types import ResponsePoint, ResponseResult
from bodecalc.sweep.generator import decade_sweep, log_sweep
from bodecalc.util.logging import get_logger
from bodecalc.util.math import db20

logger = get_logger(__name__)


def transfer_at(numerator: Sequence[float], denominator: Sequence[float], omega: float) -> Complex:
    return divide(evaluate_at_jw(numerator, omega), evaluate_at_jw(denominator, omega))


def response_point(numerator: Sequence[float], denominator: Sequence[float], omega: float) -> ResponsePoint:
    """Evaluate one Bode sample. A pole exactly on ``omega`` gives nan/inf, not an error."""
    h = transfer_at(numerator, denominator, omega)
    return ResponsePoint(
        omega=float(omega),
        magnitude_db=db20(magnitude(h)),
        phase_deg=phase_degrees(h),
    )


def frequency_response(
    numerator: Sequence[float],
    denominator: Sequence[float],
    omegas: Iterable[float],
) -> List[ResponsePoint]:
    points = [response_point(numerator, denominator, float(w)) for w in omegas]
    non_finite = sum(1 for p in points if not p.is_finite)
    if non_finite:
        logger.warning(
            "%d of %d response points are non-finite (pole or zero on the sampled axis)",
            non_finite,
            len(points),
            extra={"non_finite": non_finite, "num_points": len(points)},
        )
    return points


def compute_response_for(
    numerator: Sequence[float],
    denominator: Sequence[float],
    freq_min: float,
    freq_max: float,
    num_points: int,
) -> ResponseResult:
    """Compute sweep, decade table, roots and label from parsed coefficients.

    Empty coefficient lists short-circuit to ``ResponseResult.no_data()``
    before the sweep parameters are validated.
    """
    if len(numerator) == 0 or len(denominator) == 0:
        logger.debug("No transfer function available; skipping computation")
        return ResponseResult.no_data()

    num = tuple(float(c) for c in numerator)
    den = tuple(float(c) for c in denominator)
    omegas = log_sweep(freq_min, freq_max, num_points)

    result = ResponseResult(
        numerator=num,
        denominator=den,
        sweep_points=tuple(frequency_response(num, den, omegas)),
        decade_points=tuple(frequency_response(num, den, decade_sweep())),
        numerator_roots=find_roots(num),
        denominator_roots=find_roots(den),
        transfer_function_label=format_transfer_function(num, den),
    )
    logger.debug(
        "Computed %s over %g..%g rad/s (%d points)",
        result.transfer_function_label,
        freq_min,
        freq_max,
        num_points,
        extra={"num_points": num_points},
    )
    return result


def compute_response(
    numerator_text: str,
    denominator_text: str,
    freq_min: float,
    freq_max: float,
    num_points: int,
) -> ResponseResult:
    """Parse coefficient text and compute the full Bode response."""
    return compute_response_for(
        parse_coefficients(numerator_text),
        parse_coefficients(denominator_text),
        freq_min,
        freq_max,
        num_points,
    )
