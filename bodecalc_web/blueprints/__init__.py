"""
Blueprints package for bodecalc Web.

This package contains Flask blueprints that organize routes by function:
- api_response: Frequency response computation (/api/response)
- api_presets: Built-in transfer-function presets (/api/presets)
- api_debug: Health and error tracking endpoints (/api/debug/*)
"""
from __future__ import annotations
