"""
Chart data builders for bodecalc Web.

Turns response points into magnitude/phase series for a log-frequency line
chart. Points whose value is nan or infinite (a pole or zero sitting on a
sampled frequency) are left out of that series only.
"""
from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional, Sequence

from bodecalc.response.types import ResponsePoint


def _finite_range(values: Sequence[float]) -> Optional[Dict[str, float]]:
    """Return {"min", "max"} over the values, or None for an empty series."""
    if not values:
        return None
    return {"min": float(min(values)), "max": float(max(values))}


def bode_chart_series(points: Iterable[ResponsePoint]) -> Dict[str, Any]:
    """
    Build magnitude and phase series plus axis bounds.

    Args:
        points: Response points in sweep order.

    Returns:
        Dict with "magnitude" ([{omega, magnitude}]), "phase"
        ([{omega, phase}]), "skipped" counts and "bounds" per axis.
    """
    magnitude: List[Dict[str, float]] = []
    phase: List[Dict[str, float]] = []
    omegas: List[float] = []
    skipped = {"magnitude": 0, "phase": 0}

    for p in points:
        if not math.isfinite(p.omega):
            continue
        omegas.append(p.omega)
        if math.isfinite(p.magnitude_db):
            magnitude.append({"omega": p.omega, "magnitude": p.magnitude_db})
        else:
            skipped["magnitude"] += 1
        if math.isfinite(p.phase_deg):
            phase.append({"omega": p.omega, "phase": p.phase_deg})
        else:
            skipped["phase"] += 1

    return {
        "magnitude": magnitude,
        "phase": phase,
        "skipped": skipped,
        "bounds": {
            "omega": _finite_range(omegas),
            "magnitude": _finite_range([m["magnitude"] for m in magnitude]),
            "phase": _finite_range([ph["phase"] for ph in phase]),
        },
    }
