from __future__ import annotations

from bodecalc.response.engine import (
    compute_response,
    compute_response_for,
    frequency_response,
    response_point,
    transfer_at,
)
from bodecalc.response.types import ResponsePoint, ResponseResult

__all__ = [
    "compute_response",
    "compute_response_for",
    "frequency_response",
    "response_point",
    "transfer_at",
    "ResponsePoint",
    "ResponseResult",
]
