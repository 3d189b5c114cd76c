"""Дискретизация кривых подачи в экранные пути и их отрисовка."""

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
import plotly.graph_objects as go

from fireflow.curve import FireFlowCurve
from .coords import PlotCoordinateSystem
from .styles import CURVE_DASH, LABELS, LINE_WIDTH_CURVE, PRESSURE_OVERSCAN, TEST_POINT_RADIUS

DEFAULT_NUM_POINTS = 100


class CurveSample(NamedTuple):
    x: float
    y: float
    flow: float
    pressure: float


@dataclass
class CurvePath:
    """Экранная геометрия одной кривой.

    ``segments``: серии подряд идущих точек в допустимом диапазоне; точка вне
    диапазона всегда завершает серию, и ни один сегмент не проходит через неё.
    """

    curve_id: str
    color: str
    line_style: str
    segments: list[list[CurveSample]] = field(default_factory=list)
    test_point: tuple[float, float] | None = None

    def as_plotly(self) -> tuple[list, list, list]:
        """x, y и customdata с None между сегментами (plotly оставляет разрыв)."""
        xs, ys, data = [], [], []
        for i, segment in enumerate(self.segments):
            if i:
                xs.append(None)
                ys.append(None)
                data.append((None, None))
            for s in segment:
                xs.append(s.x)
                ys.append(s.y)
                data.append((s.flow, s.pressure))
        return xs, ys, data


def sample_curve(
    coords: PlotCoordinateSystem,
    curve: FireFlowCurve,
    num_points: int = DEFAULT_NUM_POINTS,
    overscan: float = 1.0,
) -> CurvePath | None:
    """P(Q) в num_points + 1 равномерных точках на [0, max_flow · overscan].

    Точка сохраняется при 0 <= P <= 1.2 · max_pressure. Для скрытой кривой
    возвращается None.
    """
    if not curve.visible:
        return None
    if num_points < 1:
        raise ValueError("num_points must be at least 1")

    flows = np.linspace(0.0, coords.max_flow * overscan, num_points + 1)
    pressures = curve.pressure_at_flow(flows)
    in_bounds = (pressures >= 0) & (pressures <= coords.max_pressure * PRESSURE_OVERSCAN)
    xs = coords.forward_flow(flows)
    ys = coords.forward_pressure(pressures)

    # Разбиение на серии по каждой точке вне диапазона
    segments = []
    current = []
    for x, y, q, p, ok in zip(xs, ys, flows, pressures, in_bounds):
        if ok:
            current.append(CurveSample(float(x), float(y), float(q), float(p)))
        elif current:
            segments.append(current)
            current = []
    if current:
        segments.append(current)

    test_point = None
    if curve.has_test_point and curve.show_point:
        test_point = (coords.forward_flow(curve.test_flow), coords.forward_pressure(curve.test_residual))

    return CurvePath(
        curve_id=curve.id,
        color=curve.color,
        line_style=curve.line_style,
        segments=segments,
        test_point=test_point,
    )


def plot_curves(graph, curves: list[FireFlowCurve]):
    """Нарисовать видимые кривые и их точки испытания."""
    for curve in curves:
        path = sample_curve(graph.coords, curve, overscan=graph.overscan)
        if path is None:
            continue

        xs, ys, data = path.as_plotly()
        graph.fig.add_trace(go.Scatter(
            x=xs, y=ys, mode="lines", name=path.curve_id or "Unnamed",
            connectgaps=False, customdata=data,
            line=dict(color=path.color, width=LINE_WIDTH_CURVE, dash=CURVE_DASH[path.line_style]),
            hovertemplate=LABELS["hover"] + "<extra>%{fullData.name}</extra>",
        ))

        if path.test_point is not None:
            _add_test_point(graph, curve, path)


def _add_test_point(graph, curve: FireFlowCurve, path: CurvePath):
    x, y = path.test_point
    graph.fig.add_trace(go.Scatter(
        x=[x], y=[y], mode="markers", showlegend=False,
        customdata=[(curve.test_flow, curve.test_residual)],
        marker=dict(
            size=2 * TEST_POINT_RADIUS,
            color=graph.colors["marker_fill"],
            line=dict(width=2, color=path.color),
        ),
        hovertemplate="Test point<br>" + LABELS["hover"] + "<extra>%{fullData.name}</extra>",
        name=path.curve_id,
    ))
