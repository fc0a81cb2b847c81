#!/usr/bin/env python3
"""bodecalc CLI entrypoint: compute Bode data for a transfer function."""

from __future__ import annotations

import argparse
import json
import sys
from typing import IO, Any, List, Optional, Set

from bodecalc.io.export import render_table, to_json, write_csv
from bodecalc.io.presets import DEFAULT_PRESET_NAME, get_preset, serialize_presets
from bodecalc.response.engine import compute_response
from bodecalc.response.types import ResponseResult
from bodecalc.sweep.generator import SweepConfigError
from bodecalc.util.exit_codes import ExitCode
from bodecalc.util.logging import configure_logging, get_logger, log_exception

logger = get_logger(__name__)


def run(args: argparse.Namespace) -> int:
    """Top-level CLI dispatcher; returns a process exit code."""
    configure_logging(level=args.log_level, json_file=args.log_json)

    if args.list_presets:
        _emit_presets_json()
        return ExitCode.SUCCESS

    try:
        result = compute_response(args.num, args.den, args.freq_min, args.freq_max, args.num_points)
    except SweepConfigError as exc:
        logger.error("Invalid sweep: %s", exc, extra={"error_type": "invalid_sweep"})
        return ExitCode.INVALID_ARGS

    if not result.has_data:
        logger.warning("No transfer function available: numerator=%r denominator=%r", args.num, args.den)
        return ExitCode.NO_DATA

    if args.output is None:
        _emit(result, args.format, sys.stdout)
        return ExitCode.SUCCESS

    try:
        with open(args.output, "w", encoding="utf-8", newline="") as fh:
            _emit(result, args.format, fh)
    except OSError:
        log_exception(logger, f"Failed to write {args.output}", error_type="output", path=args.output)
        return ExitCode.OUTPUT_ERROR
    logger.info("Wrote %s output to %s", args.format, args.output, extra={"path": args.output})
    return ExitCode.SUCCESS


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(
        description="Bode magnitude/phase, decade table and poles/zeros for H(s) = N(s)/D(s)",
        argument_default=argparse.SUPPRESS,
    )
    p.add_argument("--num", type=str, help='Numerator coefficients, highest power first (e.g., "1 2 1")')
    p.add_argument("--den", type=str, help='Denominator coefficients, highest power first (e.g., "1 0.1 0.01")')
    p.add_argument("--min", dest="freq_min", type=float, help="Lowest sweep frequency in rad/s (default 0.001)")
    p.add_argument("--max", dest="freq_max", type=float, help="Highest sweep frequency in rad/s (default 100)")
    p.add_argument("--points", dest="num_points", type=int, help="Number of log-spaced sweep points (default 200)")
    p.add_argument("--preset", type=str, help=f"Preset supplying unspecified values (default {DEFAULT_PRESET_NAME})")
    p.add_argument("--list-presets", dest="list_presets", action="store_true", help="Print built-in presets as JSON and exit")
    p.add_argument("--format", choices=["table", "json", "csv"], help="Output format (default table)")
    p.add_argument("--output", type=str, help="Write output to this path instead of stdout")
    p.add_argument("--log-level", dest="log_level", type=str, help="DEBUG, INFO, WARNING or ERROR (default from BODECALC_LOG_LEVEL)")
    p.add_argument("--log-json", dest="log_json", type=str, help="Append JSON-lines logs to this path")

    args = p.parse_args(argv)
    args._cli_overrides = set()

    _set_default(args, args._cli_overrides, "preset", DEFAULT_PRESET_NAME)
    _set_default(args, args._cli_overrides, "list_presets", False)
    _set_default(args, args._cli_overrides, "format", "table")
    _set_default(args, args._cli_overrides, "output", None)
    _set_default(args, args._cli_overrides, "log_level", None)
    _set_default(args, args._cli_overrides, "log_json", None)

    _apply_preset(args, p)

    delattr(args, "_cli_overrides")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    return run(parse_args(argv))


def _set_default(args: argparse.Namespace, overrides: Set[str], attr: str, value: Any) -> None:
    if hasattr(args, attr):
        overrides.add(attr)
    else:
        setattr(args, attr, value)


def _apply_preset(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    preset = get_preset(args.preset)
    if preset is None:
        parser.error(f"Unknown preset '{args.preset}'. Use --list-presets to inspect options.")

    def maybe_set(attr: str, value: Any) -> None:
        if not hasattr(args, attr):
            setattr(args, attr, value)

    maybe_set("num", preset.numerator)
    maybe_set("den", preset.denominator)
    maybe_set("freq_min", preset.freq_min)
    maybe_set("freq_max", preset.freq_max)
    maybe_set("num_points", preset.num_points)


def _emit(result: ResponseResult, fmt: str, fh: IO[str]) -> None:
    if fmt == "json":
        fh.write(to_json(result) + "\n")
    elif fmt == "csv":
        write_csv(result.sweep_points, fh)
    else:
        fh.write(render_table(result) + "\n")


def _emit_presets_json() -> None:
    print(json.dumps(serialize_presets(), indent=2, sort_keys=True))


if __name__ == "__main__":
    sys.exit(main())
