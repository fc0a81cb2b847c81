"""
Application factory for bodecalc Web.

Wires together blueprints, error handling, and request middleware.
"""
from __future__ import annotations

import traceback as tb
from datetime import datetime, timezone
from time import perf_counter

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from bodecalc.util.logging import get_logger
from bodecalc_web import config

logger = get_logger(__name__)


def create_app() -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # ------------------------------------------------------------------
    # Error ring buffer (exposed via api_debug blueprint)
    # ------------------------------------------------------------------
    app._error_ring = []
    app._error_ring_max = config.ERROR_RING_MAX

    # ------------------------------------------------------------------
    # Request timing middleware
    # ------------------------------------------------------------------

    @app.before_request
    def log_request_start():
        request._start_time = perf_counter()

    @app.after_request
    def log_request_end(response):
        if hasattr(request, "_start_time"):
            duration_ms = (perf_counter() - request._start_time) * 1000
            if duration_ms > config.SLOW_REQUEST_MS or response.status_code >= 400:
                logger.debug(
                    "%s %s -> %d (%.1fms)",
                    request.method,
                    request.path,
                    response.status_code,
                    duration_ms,
                    extra={"path": request.path, "duration_ms": round(duration_ms, 1)},
                )
        return response

    # ------------------------------------------------------------------
    # HTTP errors -> JSON for the API
    # ------------------------------------------------------------------

    @app.errorhandler(HTTPException)
    def http_error_as_json(exc: HTTPException):
        if not request.path.startswith("/api/"):
            return exc
        body = {"error": (exc.name or "error").lower().replace(" ", "_"), "detail": exc.description}
        return jsonify(body), exc.code

    # ------------------------------------------------------------------
    # Global error handler -> ring buffer
    # ------------------------------------------------------------------

    @app.errorhandler(Exception)
    def capture_error_to_ring(exc):
        entry = {
            "ts": datetime.now(timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "path": request.path,
            "method": request.method,
            "error": str(exc),
            "type": type(exc).__name__,
            "traceback": tb.format_exc(),
        }
        app._error_ring.append(entry)
        while len(app._error_ring) > app._error_ring_max:
            app._error_ring.pop(0)
        logger.error("Unhandled error on %s %s: %s", request.method, request.path, exc, extra={"path": request.path})
        # Re-raise to let Flask handle normally
        raise exc

    # ------------------------------------------------------------------
    # Register blueprints
    # ------------------------------------------------------------------
    from bodecalc_web.blueprints.api_debug import bp as api_debug_bp
    from bodecalc_web.blueprints.api_presets import bp as api_presets_bp
    from bodecalc_web.blueprints.api_response import bp as api_response_bp

    app.register_blueprint(api_debug_bp)
    app.register_blueprint(api_presets_bp)
    app.register_blueprint(api_response_bp)

    return app
