"""
Debug and observability API blueprint for bodecalc Web.

Provides endpoints for health checks, configuration info, and error tracking.
"""
from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from bodecalc import __version__
from bodecalc_web import config
from bodecalc_web.auth import require_auth

bp = Blueprint("api_debug", __name__)


@bp.get("/api/debug/health")
def api_debug_health():
    """Health check endpoint with version and active limits."""
    require_auth()
    health: Dict[str, Any] = {
        "status": "ok",
        "version": __version__,
        "max_points": config.MAX_POINTS,
        "default_preset": config.DEFAULT_PRESET,
        "errors_captured": len(current_app._error_ring),
    }
    return jsonify(health)


@bp.get("/api/debug/errors")
def api_debug_errors():
    """Return a copy of the captured error ring buffer, newest last."""
    require_auth()
    return jsonify({"errors": list(current_app._error_ring)})


@bp.post("/api/debug/errors/clear")
def api_debug_errors_clear():
    """Clear the error ring buffer."""
    require_auth()
    cleared = len(current_app._error_ring)
    current_app._error_ring.clear()
    return jsonify({"cleared": cleared})
