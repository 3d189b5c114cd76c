"""Размещение аннотаций (точки, надписи, опорные линии) и их отрисовка."""

from dataclasses import dataclass
from typing import Literal

import plotly.graph_objects as go

from fireflow.annotations import LabelAnnotation, LineAnnotation, PointAnnotation
from .coords import PlotCoordinateSystem
from .styles import (
    ANNOTATION_DASH,
    LABEL_FONT_FAMILY,
    LABEL_FONT_SIZE,
    LINE_LABEL_SIZE,
    LINE_WIDTH_CURVE,
    POINT_RADIUS,
)


@dataclass(frozen=True)
class PlacedPoint:
    annotation_id: str
    x: float
    y: float
    radius: float
    color: str
    text: str


@dataclass(frozen=True)
class PlacedLabel:
    annotation_id: str
    x: float
    y: float
    font_size: int
    color: str
    text: str


@dataclass(frozen=True)
class PlacedLine:
    annotation_id: str
    orientation: Literal["horizontal", "vertical"]
    x0: float
    y0: float
    x1: float
    y1: float
    dash: str
    color: str
    text: str


Placed = PlacedPoint | PlacedLabel | PlacedLine


def place_annotation(coords: PlotCoordinateSystem, annotation) -> Placed | None:
    """Экранная геометрия аннотации; None, если она скрыта или вне графика.

    Аннотации вне диапазона пропускаются, а не прижимаются к краю.
    """
    if not annotation.visible:
        return None

    rect = coords.rect

    if isinstance(annotation, LineAnnotation):
        if annotation.orientation == "horizontal":
            y = coords.forward_pressure(annotation.value)
            if not rect.top <= y <= rect.bottom:
                return None
            x0, y0, x1, y1 = rect.left, y, rect.right, y
        else:
            x = coords.forward_flow(annotation.value)
            if not rect.left <= x <= rect.right:
                return None
            x0, y0, x1, y1 = x, rect.top, x, rect.bottom
        return PlacedLine(
            annotation.id, annotation.orientation, x0, y0, x1, y1,
            ANNOTATION_DASH[annotation.line_style], annotation.color, annotation.text,
        )

    x = coords.forward_flow(annotation.Q)
    y = coords.forward_pressure(annotation.P)
    if not rect.contains(x, y):
        return None

    if isinstance(annotation, PointAnnotation):
        return PlacedPoint(annotation.id, x, y, POINT_RADIUS[annotation.size], annotation.color, annotation.text)
    if isinstance(annotation, LabelAnnotation):
        return PlacedLabel(annotation.id, x, y, LABEL_FONT_SIZE[annotation.font_size], annotation.color, annotation.text)
    raise TypeError(f"Unknown annotation type: {type(annotation).__name__}")


def place_annotations(coords: PlotCoordinateSystem, annotations: list) -> list[Placed]:
    placed = []
    for annotation in annotations:
        item = place_annotation(coords, annotation)
        if item is not None:
            placed.append(item)
    return placed


def add_annotations(graph, annotations: list):
    """Нарисовать все аннотации, попавшие в область построения."""
    for item in place_annotations(graph.coords, annotations):
        if isinstance(item, PlacedPoint):
            _add_point(graph, item)
        elif isinstance(item, PlacedLabel):
            _add_label(graph, item)
        else:
            _add_line(graph, item)


def _add_point(graph, item: PlacedPoint):
    graph.fig.add_trace(go.Scatter(
        x=[item.x], y=[item.y], mode="markers", showlegend=False, hoverinfo="skip",
        marker=dict(size=2 * item.radius, color=item.color, line=dict(width=2, color=graph.colors["point_outline"])),
    ))
    if item.text:
        graph.fig.add_annotation(
            x=item.x + item.radius + 4, y=item.y, text=f"<b>{item.text}</b>",
            showarrow=False, xanchor="left", yanchor="middle",
            font=dict(family=LABEL_FONT_FAMILY, size=12, color=item.color),
        )


def _add_label(graph, item: PlacedLabel):
    graph.fig.add_annotation(
        x=item.x + 2, y=item.y - 2, text=item.text,
        showarrow=False, xanchor="left", yanchor="bottom",
        font=dict(family=LABEL_FONT_FAMILY, size=item.font_size, color=item.color),
    )


def _add_line(graph, item: PlacedLine):
    graph.fig.add_shape(
        type="line", x0=item.x0, y0=item.y0, x1=item.x1, y1=item.y1,
        line=dict(color=item.color, width=LINE_WIDTH_CURVE, dash=item.dash),
    )
    if not item.text:
        return

    font = dict(family=LABEL_FONT_FAMILY, size=LINE_LABEL_SIZE, color=item.color)
    if item.orientation == "horizontal":
        graph.fig.add_annotation(
            x=item.x1 - 5, y=item.y0 - 3, text=f"<b>{item.text}</b>",
            showarrow=False, xanchor="right", yanchor="bottom", font=font,
        )
    else:
        graph.fig.add_annotation(
            x=item.x0 + 3, y=item.y0 + 5, text=f"<b>{item.text}</b>",
            showarrow=False, xanchor="left", yanchor="top", textangle=90, font=font,
        )
