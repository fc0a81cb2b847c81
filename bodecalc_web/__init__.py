"""
bodecalc Web — Flask JSON API for transfer-function frequency response.

This package provides the HTTP interface that:
- Parses coefficient text and sweep parameters from query strings or JSON
- Runs the bodecalc engine per request
- Returns Bode data, the decade table, poles/zeros and chart-ready series

Usage:
    from bodecalc_web import create_app
    app = create_app()
    app.run(host="127.0.0.1", port=8080)
"""
from __future__ import annotations

from bodecalc import __version__

from bodecalc_web.app import create_app

__all__ = ["create_app", "__version__"]
