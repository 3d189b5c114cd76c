"""Гидравлические функции: степенной закон кривой подачи, трение по Хазену-Вильямсу, отметки.

Используются моделью кривой, инструментами моделирования и графиком.
Все функции принимают скаляры или массивы numpy.
"""

import math

import numpy as np


# =============================================================================
# Кривая подачи P = Ps - k·Q^1.85
# =============================================================================

EXPONENT = 1.85


def pressure_at_flow(static_pressure: float, k: float, flow):
    """Остаточное давление при расходе, PSI: P = Ps - k·Q^1.85.

    Определено для Q >= 0; результат может быть отрицательным.
    """
    q = np.asarray(flow, dtype=float)
    p = static_pressure - k * q**EXPONENT
    return float(p) if p.ndim == 0 else p


def flow_at_pressure(static_pressure: float, k: float, pressure):
    """Расход при остаточном давлении, GPM: Q = ((Ps - P) / k)^(1/1.85).

    При P >= Ps расход равен 0. При k <= 0 такого расхода нет: вместо исключения
    возвращается nan или inf.
    """
    p = np.asarray(pressure, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        q = np.where(p >= static_pressure, 0.0, ((static_pressure - p) / k) ** (1.0 / EXPONENT))
    return float(q) if q.ndim == 0 else q


def friction_coefficient(static_pressure: float, test_flow: float, test_residual: float) -> float:
    """k = (Ps - Pt) / Qt^1.85."""
    return (static_pressure - test_residual) / test_flow**EXPONENT


# =============================================================================
# Хазен-Вильямс (американские единицы)
# =============================================================================

DEFAULT_C = 130.0


def unit_friction_slope(diameter: float, c: float = DEFAULT_C) -> float:
    """Удельный уклон трения k' на фут трубы.

    k' = 10.44 / C^1.85 / D^4.87 / 2.31, PSI/ft для Q^1.85 (Q в GPM).

    Args:
        diameter: Внутренний диаметр трубы, in.
        c: Коэффициент шероховатости Хазена-Вильямса.
    """
    return 10.44 / c**EXPONENT / diameter**4.87 / 2.31


def headloss(length: float, diameter: float, flow, c: float = DEFAULT_C):
    """Потери на трение по длине участка, PSI: h = L·k'·Q^1.85."""
    k = length * unit_friction_slope(diameter, c)
    return k * flow**EXPONENT


# =============================================================================
# Отметки
# =============================================================================

PSI_PER_FOOT = 0.433


def elevation_to_pressure(elevation_feet: float) -> float:
    """Изменение давления при перепаде отметок, PSI."""
    return elevation_feet * PSI_PER_FOOT


def pressure_to_elevation(psi: float) -> float:
    """Перепад отметок, эквивалентный изменению давления, ft."""
    return psi / PSI_PER_FOOT


# =============================================================================
# Форматирование
# =============================================================================


def format_number(value, decimals: int = 0) -> str:
    """Число с разделителями тысяч; None, nan и inf дают "N/A"."""
    if value is None:
        return "N/A"
    try:
        value = float(value)
    except (TypeError, ValueError):
        return "N/A"
    if not math.isfinite(value):
        return "N/A"
    return f"{value:,.{decimals}f}"
