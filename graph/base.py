"""Базовый класс: разметка фигуры в экранных пикселях, сетка, оси, заголовок, рамка."""

import datetime

import plotly.graph_objects as go

from .axes import flow_ticks, grid_lines, pressure_ticks, tick_segments
from .coords import PlotCoordinateSystem, ViewParams
from .styles import (
    AXIS_TITLE_SIZE,
    COLORS_DARK,
    COLORS_LIGHT,
    DATE_SIZE,
    FONT_FAMILY,
    FONT_SIZE,
    LABELS,
    LINE_WIDTH_AXIS,
    LINE_WIDTH_BORDER,
    LINE_WIDTH_GRID,
    TITLE_SIZE,
)


def _polyline(segments) -> tuple[list, list]:
    """Много отрезков одной трассой, разделённых None."""
    xs, ys = [], []
    for x0, y0, x1, y1 in segments:
        xs += [x0, x1, None]
        ys += [y0, y1, None]
    return xs, ys


class BaseGraph:
    """Каркас графика в пиксельных координатах.

    Оси фигуры plotly скрыты и занимают весь холст: x вправо, y вниз.
    Всё, что размещено через PlotCoordinateSystem, оказывается ровно там,
    где его нарисовал бы canvas.
    """

    def __init__(self, view: ViewParams | None = None, theme: str = "light"):
        self.theme = theme
        self.colors = COLORS_DARK if theme == "dark" else COLORS_LIGHT
        self.coords = PlotCoordinateSystem(view)
        self.fig: go.Figure | None = None

    def _new_figure(self) -> go.Figure:
        coords = self.coords
        fig = go.Figure()
        fig.update_layout(
            template=self.colors["template"],
            width=coords.width,
            height=coords.height,
            autosize=False,
            margin=dict(l=0, r=0, t=0, b=0),
            paper_bgcolor=self.colors["paper_bg"],
            plot_bgcolor=self.colors["paper_bg"],
            font=dict(family=FONT_FAMILY, size=FONT_SIZE, color=self.colors["text"]),
            showlegend=True,
            legend=dict(
                x=1.0, y=1.0, xanchor="right", yanchor="top",
                bgcolor=self.colors["legend_bg"],
                font=dict(size=FONT_SIZE, color=self.colors["text"]),
            ),
            hovermode="closest",
        )
        fig.update_xaxes(range=[0, coords.width], visible=False, fixedrange=True)
        fig.update_yaxes(range=[coords.height, 0], visible=False, fixedrange=True)
        return fig

    def _add_background(self):
        rect = self.coords.rect
        self.fig.add_shape(
            type="rect", x0=rect.left, y0=rect.top, x1=rect.right, y1=rect.bottom,
            fillcolor=self.colors["plot_bg"], line=dict(width=0), layer="below",
        )

    def _add_grid(self):
        lines = grid_lines(self.coords)
        xs, ys = _polyline((g.x0, g.y0, g.x1, g.y1) for g in lines)
        self.fig.add_trace(go.Scatter(
            x=xs, y=ys, mode="lines", showlegend=False, hoverinfo="skip",
            line=dict(color=self.colors["grid"], width=LINE_WIDTH_GRID),
        ))

    def _add_axes(self):
        """Засечки по четырём сторонам, подписи значений, названия осей."""
        coords = self.coords
        rect = coords.rect
        ticks = flow_ticks(coords) + pressure_ticks(coords)

        segments = [seg for tick in ticks for seg in tick_segments(coords, tick)]
        xs, ys = _polyline(segments)
        self.fig.add_trace(go.Scatter(
            x=xs, y=ys, mode="lines", showlegend=False, hoverinfo="skip",
            line=dict(color=self.colors["axis"], width=LINE_WIDTH_AXIS),
        ))

        for tick in ticks:
            if tick.label is None:
                continue
            if tick.axis == "flow":
                self.fig.add_annotation(
                    x=tick.position, y=rect.bottom + 14, text=tick.label,
                    showarrow=False, xanchor="center", yanchor="middle",
                )
            else:
                self.fig.add_annotation(
                    x=rect.left - 10, y=tick.position, text=tick.label,
                    showarrow=False, xanchor="right", yanchor="middle",
                )

        title_font = dict(family=FONT_FAMILY, size=AXIS_TITLE_SIZE, color=self.colors["text"])
        self.fig.add_annotation(
            x=rect.left + rect.width / 2, y=coords.height - 20, text=LABELS["flow_axis"],
            showarrow=False, xanchor="center", yanchor="top", font=title_font,
        )
        self.fig.add_annotation(
            x=15, y=rect.top + rect.height / 2, text=LABELS["pressure_axis"],
            showarrow=False, xanchor="center", yanchor="middle", textangle=-90, font=title_font,
        )

    def _add_title(self):
        view = self.coords.view
        if view.title:
            self.fig.add_annotation(
                x=self.coords.width / 2, y=10, text=f"<b>{view.title}</b>",
                showarrow=False, xanchor="center", yanchor="top",
                font=dict(family=FONT_FAMILY, size=TITLE_SIZE, color=self.colors["text"]),
            )
        if view.show_date:
            self.fig.add_annotation(
                x=self.coords.width - 10, y=10, text=datetime.date.today().strftime("%m/%d/%Y"),
                showarrow=False, xanchor="right", yanchor="top",
                font=dict(family=FONT_FAMILY, size=DATE_SIZE, color=self.colors["text"]),
            )

    def _add_border(self):
        rect = self.coords.rect
        self.fig.add_shape(
            type="rect", x0=rect.left, y0=rect.top, x1=rect.right, y1=rect.bottom,
            line=dict(color=self.colors["border"], width=LINE_WIDTH_BORDER),
            fillcolor="rgba(0,0,0,0)", layer="above",
        )

    def get_figure(self):
        """Последняя построенная фигура с размерами для экспорта."""
        if self.fig is not None:
            self.fig.update_layout(autosize=False, width=self.coords.width, height=self.coords.height)
        return self.fig
