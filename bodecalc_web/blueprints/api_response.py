"""
Frequency response API blueprint for bodecalc Web.

GET reads parameters from the query string, POST from a JSON object. Keys:
num, den (coefficient text), min, max (rad/s), points, preset. Missing keys
fall back to the preset.
"""
from __future__ import annotations

import math
from typing import Any, Dict, Mapping

from flask import Blueprint, abort, jsonify, request

from bodecalc.io.export import result_payload
from bodecalc.io.presets import Preset, get_preset
from bodecalc.response.engine import compute_response
from bodecalc.sweep.generator import SweepConfigError
from bodecalc_web import config
from bodecalc_web.auth import require_auth
from bodecalc_web.charts import bode_chart_series

bp = Blueprint("api_response", __name__)


def _missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _text_param(source: Mapping[str, Any], key: str, default: str) -> str:
    value = source.get(key)
    if value is None:
        return default
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def _float_param(source: Mapping[str, Any], key: str, default: float) -> float:
    value = source.get(key)
    if _missing(value):
        return default
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be a number")
    try:
        out = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be a number, got {value!r}") from None
    if not math.isfinite(out):
        raise ValueError(f"'{key}' must be finite, got {value!r}")
    return out


def _int_param(source: Mapping[str, Any], key: str, default: int) -> int:
    value = source.get(key)
    if _missing(value):
        return default
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"'{key}' must be an integer, got {value!r}") from None


def _resolve_preset(source: Mapping[str, Any]) -> Preset:
    name = source.get("preset")
    if _missing(name):
        name = config.DEFAULT_PRESET
    preset = get_preset(str(name))
    if preset is None:
        abort(400, description=f"Unknown preset '{name}'")
    return preset


def _response_for(source: Mapping[str, Any]):
    preset = _resolve_preset(source)
    try:
        freq_min = _float_param(source, "min", preset.freq_min)
        freq_max = _float_param(source, "max", preset.freq_max)
        num_points = _int_param(source, "points", preset.num_points)
    except ValueError as exc:
        abort(400, description=str(exc))

    if num_points > config.MAX_POINTS:
        abort(400, description=f"'points' must be <= {config.MAX_POINTS}, got {num_points}")

    num_text = _text_param(source, "num", preset.numerator)
    den_text = _text_param(source, "den", preset.denominator)

    try:
        result = compute_response(num_text, den_text, freq_min, freq_max, num_points)
    except SweepConfigError as exc:
        return jsonify({"error": "invalid_sweep", "detail": str(exc)}), 400

    payload: Dict[str, Any] = result_payload(result)
    payload["params"] = {
        "num": num_text,
        "den": den_text,
        "min": freq_min,
        "max": freq_max,
        "points": num_points,
        "preset": preset.name,
    }
    payload["chart"] = bode_chart_series(result.sweep_points)
    return jsonify(payload)


@bp.get("/api/response")
def api_response_get():
    """Compute a response from query-string parameters."""
    require_auth()
    return _response_for(request.args)


@bp.post("/api/response")
def api_response_post():
    """Compute a response from a JSON object body."""
    require_auth()
    body = request.get_json(silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        abort(400, description="Request body must be a JSON object")
    return _response_for(body)
