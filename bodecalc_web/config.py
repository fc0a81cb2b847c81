"""
Configuration constants and environment parsing for bodecalc Web.

All BODECALC_* environment variables used by the web layer are parsed here and
exported as module-level constants. Blueprints import from this module rather
than reading os.environ directly.
"""
from __future__ import annotations

import os


def _int_env(name: str, default: int) -> int:
    """Parse an integer from environment, returning default on missing/invalid."""
    val = os.getenv(name)
    if not val:
        return default
    try:
        return max(2, int(float(val)))
    except (ValueError, OverflowError):
        return default


def _float_env(name: str, default: float) -> float:
    """Parse a float from environment, returning default on missing/invalid."""
    val = os.getenv(name)
    if not val:
        return default
    try:
        return float(val)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------
API_TOKEN: str = os.getenv("BODECALC_TOKEN", "")
"""Optional bearer token protecting /api/* endpoints."""


# ---------------------------------------------------------------------------
# Request limits & defaults
# ---------------------------------------------------------------------------
MAX_POINTS: int = _int_env("BODECALC_MAX_POINTS", 5000)
"""Upper bound on the sweep point count accepted per request."""

DEFAULT_PRESET: str = os.getenv("BODECALC_DEFAULT_PRESET", "default").strip().lower() or "default"
"""Preset that supplies values missing from a request."""

SLOW_REQUEST_MS: float = _float_env("BODECALC_SLOW_REQUEST_MS", 500.0)
"""Requests slower than this are logged at debug level."""


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------
ERROR_RING_MAX: int = _int_env("BODECALC_ERROR_RING_MAX", 100)
"""Number of captured request errors kept in memory."""
