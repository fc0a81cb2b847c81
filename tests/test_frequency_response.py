import math

import numpy as np
import pytest

from bodecalc import SweepConfigError, compute_response, compute_response_for
from bodecalc.numeric.roots import RealRoot
from bodecalc.response.engine import frequency_response, response_point, transfer_at


def _lead_magnitude_db(omega: float) -> float:
    return 20.0 * math.log10(math.sqrt(1.0 + omega**2) / math.sqrt(100.0 + omega**2))


def _lead_phase_deg(omega: float) -> float:
    return math.degrees(math.atan(omega) - math.atan(omega / 10.0))


def test_first_order_lowpass_corner() -> None:
    h = transfer_at([1.0], [1.0, 1.0], 1.0)
    assert h.real == pytest.approx(0.5)
    assert h.imag == pytest.approx(-0.5)

    point = response_point([1.0], [1.0, 1.0], 1.0)
    assert point.omega == 1.0
    assert point.magnitude_db == pytest.approx(-3.0103, abs=1e-4)
    assert point.phase_deg == pytest.approx(-45.0)


def test_lead_compensator_end_to_end() -> None:
    result = compute_response("1 1", "1 10", 0.001, 100.0, 5)
    assert result.has_data
    assert len(result.sweep_points) == 5

    omegas = [p.omega for p in result.sweep_points]
    assert omegas == pytest.approx([10 ** (-3 + 1.25 * i) for i in range(5)], rel=1e-12)

    for p in result.sweep_points:
        assert p.magnitude_db == pytest.approx(_lead_magnitude_db(p.omega), abs=1e-9)
        assert p.phase_deg == pytest.approx(_lead_phase_deg(p.omega), abs=1e-9)

    mags = [p.magnitude_db for p in result.sweep_points]
    assert all(b > a for a, b in zip(mags, mags[1:]))
    assert mags[0] == pytest.approx(-20.0, abs=1e-3)

    phases = [p.phase_deg for p in result.sweep_points]
    assert all(ph > 0 for ph in phases)
    peak = phases.index(max(phases))
    assert 0 < peak < len(phases) - 1
    assert phases[-1] < phases[peak]

    assert result.zeros.roots == (RealRoot(-1.0),)
    assert result.poles.roots == (RealRoot(-10.0),)
    assert result.transfer_function_label == "H(s) = (1s + 1) / (1s + 10)"


def test_decade_table_uses_fixed_frequencies() -> None:
    result = compute_response("1", "1 1", 5.0, 50.0, 3)
    assert [p.omega for p in result.decade_points] == [0.001, 0.01, 0.1, 1.0, 10.0, 100.0]
    assert result.decade_points[3].magnitude_db == pytest.approx(-3.0103, abs=1e-4)


@pytest.mark.parametrize("num,den", [("abc", "1 1"), ("1", ""), ("", "  "), ("x", "y")])
def test_empty_coefficients_short_circuit_to_no_data(num: str, den: str) -> None:
    result = compute_response(num, den, 0.001, 100.0, 10)
    assert result.has_data is False
    assert result.sweep_points == ()
    assert result.decade_points == ()
    assert result.transfer_function_label == ""
    assert result.zeros.roots == ()


def test_no_data_wins_over_invalid_sweep() -> None:
    result = compute_response("", "1 1", -1.0, -5.0, 0)
    assert result.has_data is False


def test_invalid_sweep_with_valid_coefficients_raises() -> None:
    with pytest.raises(SweepConfigError):
        compute_response("1", "1 1", 10.0, 1.0, 10)


def test_pole_on_sampled_frequency_propagates_nan() -> None:
    (point,) = frequency_response([1.0], [1.0, 0.0, 1.0], [1.0])
    assert math.isnan(point.magnitude_db)
    assert math.isnan(point.phase_deg)
    assert point.is_finite is False
    assert point.to_dict() == {"omega": 1.0, "magnitude_db": None, "phase_deg": None}


def test_zero_gain_gives_negative_infinity_db() -> None:
    point = response_point([0.0], [1.0, 1.0], 1.0)
    assert point.magnitude_db == -math.inf
    assert point.phase_deg == 0.0


def test_compute_from_parsed_coefficients_matches_text_entry() -> None:
    from_text = compute_response("1", "1 0.1 0.01", 0.001, 100.0, 20)
    from_lists = compute_response_for([1.0], [1.0, 0.1, 0.01], 0.001, 100.0, 20)
    assert from_text == from_lists
    assert from_text.denominator == (1.0, 0.1, 0.01)


def test_result_serializes_to_plain_types() -> None:
    payload = compute_response("1", "1 2 1", 0.1, 10.0, 3).to_dict()
    assert payload["has_data"] is True
    assert payload["transfer_function"] == "H(s) = (1) / (1s^2 + 2s + 1)"
    assert len(payload["sweep"]) == 3
    assert len(payload["table"]) == 6
    assert payload["poles"]["roots"] == [{"real": -1.0, "imag": 0.0}, {"real": -1.0, "imag": 0.0}]
    assert payload["zeros"] == {"degree": 0, "supported": True, "roots": []}


def test_numpy_coefficient_arrays_are_accepted() -> None:
    result = compute_response_for(np.array([1.0]), np.array([1.0, 1.0]), 0.1, 10.0, 3)
    assert result.has_data
    assert result.denominator == (1.0, 1.0)
    assert result.denominator_roots.roots == (RealRoot(-1.0),)
    assert not compute_response_for(np.array([]), np.array([1.0, 1.0]), 0.1, 10.0, 3).has_data
