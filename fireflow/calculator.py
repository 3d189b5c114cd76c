"""Сводка расчёта для выбранной кривой подачи."""

import pandas as pd
from pydantic import BaseModel, Field

from fireflow.curve import FireFlowCurve
from fireflow.helpers import format_number

DEFAULT_MIN_PRESSURES = (20.0, 30.0, 40.0)
DEFAULT_FLOWS = (1000.0, 1500.0, 2000.0, 2500.0)


class CalculationResult(BaseModel):
    """AFF и давления при заданных расходах для одной кривой."""

    id: str
    static_pressure: float
    test_flow: float | None = None
    test_residual: float | None = None
    k: float
    is_derived: bool = False
    available_flows: list[tuple[float, float]] = Field(
        default_factory=list, description="(мин. давление PSI, AFF GPM); nan, если расхода нет"
    )
    pressures_at_flow: list[tuple[float, float]] = Field(
        default_factory=list, description="(расход GPM, остаточное давление PSI)"
    )


def calculate(
    curve: FireFlowCurve,
    min_pressures: tuple[float, ...] = DEFAULT_MIN_PRESSURES,
    flows: tuple[float, ...] = DEFAULT_FLOWS,
) -> CalculationResult:
    """AFF при каждом минимальном давлении и давление NFF при каждом расходе.

    Args:
        curve: Кривая подачи.
        min_pressures: Минимально допустимые остаточные давления, PSI.
        flows: Требуемые расходы, GPM.

    Returns:
        CalculationResult; неконечные расходы остаются nan.
    """
    return CalculationResult(
        id=curve.id,
        static_pressure=curve.static_pressure,
        test_flow=curve.test_flow,
        test_residual=curve.test_residual,
        k=curve.k,
        is_derived=curve.is_derived,
        available_flows=[(p, curve.available_fire_flow(p)) for p in min_pressures],
        pressures_at_flow=[(q, curve.needed_fire_flow_pressure(q)) for q in flows],
    )


def format_summary(result: CalculationResult) -> list[str]:
    """Строки текста для блока расчётов."""
    lines = [
        f"Test ID: {result.id or 'Unnamed'}",
        f"Static Pressure: {format_number(result.static_pressure, 1)} PSI",
    ]
    if result.test_flow is not None and result.test_residual is not None:
        lines.append(f"Test Flow: {format_number(result.test_flow, 0)} GPM")
        lines.append(f"Test Residual: {format_number(result.test_residual, 1)} PSI")
    else:
        lines.append("Test Data: Modified (No original test)")
    lines.append(f"Friction Coefficient (k): {result.k:.4e}")

    lines.append("Available Fire Flow:")
    for pressure, flow in result.available_flows:
        lines.append(f"  At {format_number(pressure, 0)} PSI: {format_number(flow, 0)} GPM")

    lines.append("Pressure at Flow:")
    for flow, pressure in result.pressures_at_flow:
        lines.append(f"  At {format_number(flow, 0)} GPM: {format_number(pressure, 1)} PSI")

    if result.is_derived:
        lines.append("Status: Modified Test")
    return lines


def results_table(results: list[CalculationResult]) -> pd.DataFrame:
    """Строка на кривую: AFF при каждом минимальном давлении, давление при каждом расходе."""
    rows = []
    for r in results:
        row = {
            "Curve": r.id or "Unnamed",
            "Ps, PSI": r.static_pressure,
            "Qt, GPM": r.test_flow,
            "Pt, PSI": r.test_residual,
            "k": r.k,
            "Derived": r.is_derived,
        }
        for pressure, flow in r.available_flows:
            row[f"AFF @ {pressure:g} PSI, GPM"] = flow
        for flow, pressure in r.pressures_at_flow:
            row[f"P @ {flow:g} GPM, PSI"] = pressure
        rows.append(row)
    return pd.DataFrame(rows)


def curve_table(curve: FireFlowCurve, max_flow: float = 5000.0, num_points: int = 20) -> pd.DataFrame:
    """Табличная кривая подачи, строки при равномерных расходах."""
    flows, pressures = curve.generate_curve(max_flow=max_flow, num_points=num_points)
    return pd.DataFrame({"Q, GPM": flows, "P, PSI": pressures})
