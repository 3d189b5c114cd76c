import pytest

from fireflow.calculator import calculate, curve_table, format_summary, results_table
from fireflow.curve import FireFlowCurve


def _curve():
    return FireFlowCurve.from_test(65.0, 1500.0, 35.0, id="H-1")


def test_calculate_defaults():
    result = calculate(_curve())
    assert [p for p, _ in result.available_flows] == [20.0, 30.0, 40.0]
    assert [q for q, _ in result.pressures_at_flow] == [1000.0, 1500.0, 2000.0, 2500.0]
    assert result.available_flows[0][1] > 1500.0
    assert result.pressures_at_flow[1][1] == pytest.approx(35.0)


def test_available_flow_decreases_with_min_pressure():
    flows = [q for _, q in calculate(_curve()).available_flows]
    assert flows == sorted(flows, reverse=True)


def test_format_summary_field_test():
    lines = format_summary(calculate(_curve(), min_pressures=(20.0,), flows=(1500.0,)))
    assert lines[0] == "Test ID: H-1"
    assert "Static Pressure: 65.0 PSI" in lines
    assert "Test Flow: 1,500 GPM" in lines
    assert "Test Residual: 35.0 PSI" in lines
    assert "  At 1,500 GPM: 35.0 PSI" in lines
    assert "Status: Modified Test" not in lines


def test_format_summary_derived_curve():
    tilted = _curve().tilt(1e-6)
    lines = format_summary(calculate(tilted))
    assert "Test Data: Modified (No original test)" in lines
    assert lines[-1] == "Status: Modified Test"


def test_format_summary_no_available_flow():
    curve = _curve()
    rising = curve.tilt(-2 * curve.k)
    lines = format_summary(calculate(rising, min_pressures=(20.0,)))
    assert "  At 20 PSI: N/A GPM" in lines


def test_results_table():
    curve = _curve()
    df = results_table([calculate(curve), calculate(curve.shift(50.0))])
    assert len(df) == 2
    assert list(df["Curve"]) == ["H-1", "H-1*"]
    assert df.loc[0, "P @ 1500 GPM, PSI"] == pytest.approx(35.0)
    assert "AFF @ 20 PSI, GPM" in df.columns
    assert bool(df.loc[1, "Derived"])


def test_curve_table():
    df = curve_table(_curve(), max_flow=2000.0, num_points=20)
    assert len(df) == 21
    assert df["P, PSI"].iloc[0] == pytest.approx(65.0)
    assert df["Q, GPM"].iloc[-1] == pytest.approx(2000.0)
