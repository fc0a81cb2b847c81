#!/usr/bin/env python3
"""
bodecalc Web — Entry point.

Thin CLI shim that parses arguments and runs the Flask application.

Run:
    python bodecalc-web.py --host 127.0.0.1 --port 8080

Environment:
    BODECALC_TOKEN            Protect /api/* endpoints (optional)
    BODECALC_MAX_POINTS       Largest accepted sweep size (default 5000)
    BODECALC_DEFAULT_PRESET   Preset filling missing request values (default "default")
    BODECALC_LOG_LEVEL        Log level (default INFO)
"""
from __future__ import annotations

import argparse


def parse_args():
    ap = argparse.ArgumentParser(
        description="bodecalc Web — JSON API for transfer-function Bode data"
    )
    ap.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the web server (default: 127.0.0.1)",
    )
    ap.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Port to listen on (default: 8080)",
    )
    ap.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: BODECALC_LOG_LEVEL or INFO)",
    )
    return ap.parse_args()


def main():
    args = parse_args()

    from bodecalc.util.logging import configure_logging
    from bodecalc_web import create_app

    configure_logging(level=args.log_level)
    app = create_app()
    app.run(host=args.host, port=args.port, threaded=True)


if __name__ == "__main__":
    main()
