"""Text, CSV and JSON renderings of a computed response."""

from __future__ import annotations

import csv
import json
from typing import IO, Any, Dict, Iterable, List

from bodecalc.numeric.complex import Complex
from bodecalc.numeric.roots import ComplexPair, Root, RootSet
from bodecalc.response.types import ResponsePoint, ResponseResult

IMAG_EPS = 1e-10

CSV_FIELDS = ("omega", "magnitude_db", "phase_deg")


def _fixed(x: float, digits: int) -> str:
    # -0.0 + 0.0 is 0.0, so signed zeros print as "0.000"
    return f"{x + 0.0:.{digits}f}"


def format_complex(c: Complex) -> str:
    if abs(c.imag) < IMAG_EPS:
        return _fixed(c.real, 3)
    sign = "+" if c.imag >= 0 else "-"
    return f"{_fixed(c.real, 3)} {sign} {abs(c.imag):.3f}j"


def format_root(root: Root) -> List[str]:
    """Return display strings for a root; a conjugate pair yields two."""
    if isinstance(root, ComplexPair):
        return [format_complex(c) for c in root.as_complex()]
    return [_fixed(root.value, 3)]


def format_root_set(root_set: RootSet) -> List[str]:
    if not root_set.supported:
        return [f"not computed (degree {root_set.degree})"]
    out: List[str] = []
    for root in root_set.roots:
        out.extend(format_root(root))
    return out


def format_omega(omega: float) -> str:
    return f"{omega:.3f}" if omega < 1 else f"{omega:.1f}"


def format_table_row(point: ResponsePoint) -> Dict[str, str]:
    return {
        "omega": format_omega(point.omega),
        "k": _fixed(point.magnitude_db, 2),
        "phi": _fixed(point.phase_deg, 2) + "°",
    }


def result_payload(result: ResponseResult) -> Dict[str, Any]:
    """``ResponseResult.to_dict()`` plus the human-readable strings."""
    payload = result.to_dict()
    payload["formatted"] = {
        "table": [format_table_row(p) for p in result.decade_points],
        "zeros": format_root_set(result.numerator_roots),
        "poles": format_root_set(result.denominator_roots),
    }
    return payload


def to_json(result: ResponseResult, indent: int = 2) -> str:
    return json.dumps(result_payload(result), indent=indent, allow_nan=False)


def write_csv(points: Iterable[ResponsePoint], fh: IO[str]) -> int:
    writer = csv.writer(fh, lineterminator="\n")
    writer.writerow(CSV_FIELDS)
    count = 0
    for p in points:
        writer.writerow([repr(p.omega), repr(p.magnitude_db), repr(p.phase_deg)])
        count += 1
    return count


def render_table(result: ResponseResult) -> str:
    """Plain-text summary: label, zeros, poles and the decade table."""
    if not result.has_data:
        return "No transfer function available."
    lines = [f"Transfer function: {result.transfer_function_label}", ""]
    zeros = format_root_set(result.numerator_roots)
    poles = format_root_set(result.denominator_roots)
    lines.append("Zeros: " + (", ".join(zeros) if zeros else "none"))
    lines.append("Poles: " + (", ".join(poles) if poles else "none"))
    lines.append("")

    headers = ("ω (rad/s)", "K (dB)", "φ (degrees)")
    rows = [format_table_row(p) for p in result.decade_points]
    cells = [(r["omega"], r["k"], r["phi"]) for r in rows]
    widths = [max([len(h)] + [len(c[i]) for c in cells]) for i, h in enumerate(headers)]
    lines.append("  ".join(h.ljust(w) for h, w in zip(headers, widths)).rstrip())
    lines.append("  ".join("-" * w for w in widths))
    for c in cells:
        lines.append("  ".join(v.rjust(w) for v, w in zip(c, widths)))
    return "\n".join(lines)
