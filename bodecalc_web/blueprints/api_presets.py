"""
Preset API blueprint for bodecalc Web.

Lists the built-in transfer functions that fill in missing request values.
"""
from __future__ import annotations

from flask import Blueprint, jsonify

from bodecalc.io.presets import serialize_presets
from bodecalc_web import config
from bodecalc_web.auth import require_auth

bp = Blueprint("api_presets", __name__)


@bp.get("/api/presets")
def api_presets_list():
    """List built-in presets and the one used for missing values."""
    require_auth()
    payload = serialize_presets()
    payload["default"] = config.DEFAULT_PRESET
    return jsonify(payload)
