"""Free-text coefficient parsing.

Each whitespace-separated token contributes its leading decimal number, so
``"2abc"`` reads as 2 and ``"1,5"`` as 1. Tokens with no leading number, or
whose number is not finite, are dropped rather than reported; an empty
result means "no transfer function".
"""

from __future__ import annotations

import math
import re
from typing import List, Optional

from bodecalc.util.logging import get_logger

logger = get_logger(__name__)

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_coefficients(text: Optional[str]) -> List[float]:
    """Parse ``"1 0.1 0.01"`` into ``[1.0, 0.1, 0.01]`` (highest power first)."""
    if not text:
        return []
    coeffs: List[float] = []
    dropped: List[str] = []
    truncated: List[str] = []
    for token in str(text).split():
        match = _LEADING_NUMBER.match(token)
        if match is None:
            dropped.append(token)
            continue
        value = float(match.group(0))
        # "1e999" overflows to inf
        if not math.isfinite(value):
            dropped.append(token)
            continue
        if match.end() != len(token):
            truncated.append(token)
        coeffs.append(value)
    if truncated:
        logger.debug("Read leading number of %d coefficient token(s): %s", len(truncated), " ".join(truncated))
    if dropped:
        logger.debug("Dropped %d unparseable coefficient token(s): %s", len(dropped), " ".join(dropped))
    return coeffs
