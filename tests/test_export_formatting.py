import io
import json
import math

from bodecalc import compute_response
from bodecalc.io.export import (
    format_complex,
    format_root_set,
    format_table_row,
    render_table,
    result_payload,
    to_json,
    write_csv,
)
from bodecalc.numeric.complex import Complex
from bodecalc.numeric.roots import find_roots
from bodecalc.response.types import ResponsePoint, ResponseResult


def test_complex_formatting() -> None:
    assert format_complex(Complex(0.0, 1.0)) == "0.000 + 1.000j"
    assert format_complex(Complex(-0.5, -0.866)) == "-0.500 - 0.866j"
    assert format_complex(Complex(2.0, 1e-12)) == "2.000"


def test_root_set_formatting() -> None:
    assert format_root_set(find_roots([1.0, 1.0])) == ["-1.000"]
    assert format_root_set(find_roots([1.0, 0.0, 1.0])) == ["0.000 + 1.000j", "0.000 - 1.000j"]
    assert format_root_set(find_roots([1.0, -3.0, 2.0])) == ["2.000", "1.000"]
    assert format_root_set(find_roots([2.0])) == []
    assert format_root_set(find_roots([1.0, 2.0, 3.0, 2.0, 1.0])) == ["not computed (degree 4)"]


def test_table_row_formatting() -> None:
    assert format_table_row(ResponsePoint(0.001, -3.0103, -45.0)) == {
        "omega": "0.001",
        "k": "-3.01",
        "phi": "-45.00°",
    }
    assert format_table_row(ResponsePoint(10.0, 0.5, 12.345))["omega"] == "10.0"


def test_render_table_lists_label_roots_and_decades() -> None:
    text = render_table(compute_response("1", "1 1", 0.001, 100.0, 10))
    lines = text.splitlines()
    assert lines[0] == "Transfer function: H(s) = (1) / (1s + 1)"
    assert "Zeros: none" in lines
    assert "Poles: -1.000" in lines
    assert any(line.startswith("ω (rad/s)") for line in lines)
    assert lines[-1].split() == ["100.0", "-40.00", "-89.43°"]
    assert len([line for line in lines if line.endswith("°")]) == 6


def test_render_table_without_data() -> None:
    assert render_table(ResponseResult.no_data()) == "No transfer function available."


def test_json_output_is_strict_and_nulls_non_finite_values() -> None:
    result = compute_response("0", "1 1", 0.1, 10.0, 3)
    payload = json.loads(to_json(result))
    assert payload["sweep"][0]["magnitude_db"] is None
    assert payload["sweep"][0]["phase_deg"] == 0.0
    assert payload["formatted"]["table"][0]["k"] == "-inf"


def test_result_payload_adds_formatted_section() -> None:
    payload = result_payload(compute_response("1", "1 0 1", 0.1, 10.0, 4))
    assert payload["formatted"]["zeros"] == []
    assert len(payload["formatted"]["poles"]) == 2
    assert len(payload["formatted"]["table"]) == 6


def test_csv_has_header_and_one_row_per_point() -> None:
    result = compute_response("1", "1 1", 0.01, 100.0, 7)
    buf = io.StringIO()
    assert write_csv(result.sweep_points, buf) == 7
    rows = buf.getvalue().splitlines()
    assert rows[0] == "omega,magnitude_db,phase_deg"
    assert len(rows) == 8
    omega, mag, phase = (float(x) for x in rows[1].split(","))
    assert math.isclose(omega, 0.01, rel_tol=1e-12)
    assert math.isclose(mag, result.sweep_points[0].magnitude_db)
    assert math.isclose(phase, result.sweep_points[0].phase_deg)
