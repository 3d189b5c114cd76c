"""Линии сетки и засечки графика N^1.85 в экранных пикселях.

Положения засечек считаются от целых индексов, поэтому основная засечка
не повторяется среди промежуточных из-за погрешности плавающей точки.
"""

import math
from dataclasses import dataclass
from typing import Literal

from fireflow.helpers import format_number
from .coords import PlotCoordinateSystem
from .styles import TICK_LENGTH

FLOW_DIVISIONS = 10
FLOW_MINOR_DIVISIONS = 100
PRESSURE_MAJOR_STEP = 10
PRESSURE_MEDIUM_STEP = 5

TickLength = Literal["major", "medium", "short"]


@dataclass(frozen=True)
class GridLine:
    orientation: Literal["vertical", "horizontal"]
    value: float
    x0: float
    y0: float
    x1: float
    y1: float


@dataclass(frozen=True)
class Tick:
    axis: Literal["flow", "pressure"]
    value: float
    position: float
    length: TickLength
    label: str | None = None

    @property
    def size(self) -> float:
        """Длина засечки, px."""
        return TICK_LENGTH[self.length]


def _pressure_steps(max_pressure: float) -> range:
    return range(0, int(math.floor(max_pressure)) + 1)


def flow_grid_lines(coords: PlotCoordinateSystem) -> list[GridLine]:
    """Вертикальные линии на 10 равных делениях расхода."""
    rect = coords.rect
    lines = []
    for i in range(1, FLOW_DIVISIONS + 1):
        flow = coords.max_flow * i / FLOW_DIVISIONS
        x = coords.forward_flow(flow)
        lines.append(GridLine("vertical", flow, x, rect.top, x, rect.bottom))
    return lines


def pressure_grid_lines(coords: PlotCoordinateSystem) -> list[GridLine]:
    """Горизонтальные линии через 10 PSI (ноль совпадает с рамкой)."""
    rect = coords.rect
    lines = []
    for p in _pressure_steps(coords.max_pressure):
        if p == 0 or p % PRESSURE_MAJOR_STEP:
            continue
        y = coords.forward_pressure(p)
        lines.append(GridLine("horizontal", float(p), rect.left, y, rect.right, y))
    return lines


def grid_lines(coords: PlotCoordinateSystem) -> list[GridLine]:
    return flow_grid_lines(coords) + pressure_grid_lines(coords)


def flow_ticks(coords: PlotCoordinateSystem) -> list[Tick]:
    """Основные засечки через 1/10 макс. расхода (с подписью), промежуточные через 1/100.

    Промежуточные на половине основного деления имеют длину "medium", прочие "short".
    """
    max_flow = coords.max_flow
    per_major = FLOW_MINOR_DIVISIONS // FLOW_DIVISIONS

    ticks = []
    for i in range(1, FLOW_MINOR_DIVISIONS + 1):
        flow = max_flow * i / FLOW_MINOR_DIVISIONS
        x = coords.forward_flow(flow)
        if i % per_major == 0:
            ticks.append(Tick("flow", flow, x, "major", format_number(flow, 0)))
        elif i % (per_major // 2) == 0:
            ticks.append(Tick("flow", flow, x, "medium"))
        else:
            ticks.append(Tick("flow", flow, x, "short"))
    return ticks


def pressure_ticks(coords: PlotCoordinateSystem) -> list[Tick]:
    """Основные засечки через 10 PSI от нуля (с подписью), промежуточные через 1 PSI.

    Промежуточные на кратных 5 имеют длину "medium", прочие "short".
    """
    ticks = []
    for p in _pressure_steps(coords.max_pressure):
        y = coords.forward_pressure(p)
        if p % PRESSURE_MAJOR_STEP == 0:
            ticks.append(Tick("pressure", float(p), y, "major", str(p)))
        elif p % PRESSURE_MEDIUM_STEP == 0:
            ticks.append(Tick("pressure", float(p), y, "medium"))
        else:
            ticks.append(Tick("pressure", float(p), y, "short"))
    return ticks


def tick_segments(coords: PlotCoordinateSystem, tick: Tick) -> list[tuple[float, float, float, float]]:
    """Засечка наружу с обеих сторон области построения: пары (x0, y0, x1, y1)."""
    rect = coords.rect
    size = tick.size
    if tick.axis == "flow":
        return [
            (tick.position, rect.bottom, tick.position, rect.bottom + size),
            (tick.position, rect.top, tick.position, rect.top - size),
        ]
    return [
        (rect.left, tick.position, rect.left - size, tick.position),
        (rect.right, tick.position, rect.right + size, tick.position),
    ]
