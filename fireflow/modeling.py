"""Моделирование «что если» поверх tilt/shift: трение в трубе, отметки, варианты диаметров."""

import colorsys
import logging
import math
from typing import Literal

from fireflow.curve import FireFlowCurve
from fireflow.helpers import DEFAULT_C, elevation_to_pressure, unit_friction_slope

logger = logging.getLogger(__name__)

GOLDEN_ANGLE = 137.5


def pipe_friction_slope(length: float, diameter: float, c: float = DEFAULT_C) -> float:
    """Приращение k для участка трубы: Δk = L·k'(D, C).

    Raises:
        ValueError: D <= 0, C <= 0, L < 0 или нечисловое значение.
    """
    length, diameter, c = float(length), float(diameter), float(c)
    if not all(math.isfinite(v) for v in (length, diameter, c)):
        raise ValueError("Pipe length, diameter and C must be finite numbers")
    if diameter <= 0:
        raise ValueError(f"Pipe diameter must be positive, got {diameter:g}")
    if c <= 0:
        raise ValueError(f"Hazen-Williams C must be positive, got {c:g}")
    if length < 0:
        raise ValueError(f"Pipe length must not be negative, got {length:g}")
    return length * unit_friction_slope(diameter, c)


def tilt_by_pipe(
    curve: FireFlowCurve,
    length: float,
    diameter: float,
    c: float = DEFAULT_C,
    operation: Literal["add", "remove"] = "add",
    new_id: str | None = None,
) -> FireFlowCurve:
    """Добавить трение участка ниже точки испытания или убрать его выше по течению.

    Args:
        curve: Исходная кривая (не изменяется).
        length: Длина трубы, ft.
        diameter: Внутренний диаметр, in.
        c: Коэффициент Хазена-Вильямса.
        operation: "add" добавляет трение, "remove" убирает его.
        new_id: Id новой кривой, по умолчанию ``<id>*``.
    """
    if operation not in ("add", "remove"):
        raise ValueError(f"Unknown tilt operation: {operation!r}")

    slope = pipe_friction_slope(length, diameter, c)
    if operation == "remove":
        slope = -slope
    return curve.tilt(slope, new_id=new_id, category="model")


def shift_to_static(curve: FireFlowCurve, new_static: float, new_id: str | None = None) -> FireFlowCurve:
    """То же трение, новое статическое давление."""
    return curve.shift(new_static, new_id=new_id, category="model")


def shift_by_elevation(curve: FireFlowCurve, elevation_change: float, new_id: str | None = None) -> FireFlowCurve:
    """Статическое давление с поправкой на перепад отметок, ft.

    Положительный перепад = точка выше = давление ниже.
    """
    new_static = curve.static_pressure - elevation_to_pressure(elevation_change)
    return shift_to_static(curve, new_static, new_id=new_id)


def scenario_color(index: int) -> str:
    """hsl(index·137.5°, 60%, 45%) в hex."""
    hue = (index * GOLDEN_ANGLE) % 360
    r, g, b = colorsys.hls_to_rgb(hue / 360, 0.45, 0.60)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"


def what_if_pipe_sizes(
    curve: FireFlowCurve,
    length: float,
    diameters: list[float],
    c: float = DEFAULT_C,
) -> list[FireFlowCurve]:
    """По одному сценарию на каждый диаметр при той же длине участка."""
    if not diameters:
        raise ValueError("At least one pipe size is required")

    # Все диаметры проверяются до построения первого сценария
    slopes = [pipe_friction_slope(length, diameter, c) for diameter in diameters]

    scenarios = []
    for i, (diameter, slope) in enumerate(zip(diameters, slopes)):
        scenarios.append(
            curve.tilt(
                slope,
                new_id=f'{curve.id} ({float(diameter):g}")',
                category="scenario",
                color=scenario_color(i),
            )
        )
    logger.debug("Created %d what-if scenarios from %r", len(scenarios), curve.id)
    return scenarios


def parse_pipe_sizes(text: str) -> list[float]:
    """Диаметры через запятую; нечисловые и неположительные значения отбрасываются."""
    sizes = []
    for chunk in text.split(","):
        try:
            size = float(chunk.strip())
        except ValueError:
            continue
        if math.isfinite(size) and size > 0:
            sizes.append(size)
    return sizes
