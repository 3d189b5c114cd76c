"""График N^1.85 для противопожарного водоснабжения (в стиле NFPA 291)."""

import logging
from typing import Callable

from fireflow.curve import FireFlowCurve
from fireflow.helpers import format_number

from .annotations import add_annotations, place_annotations
from .base import BaseGraph
from .coords import PlotCoordinateSystem, ViewParams
from .curves import plot_curves, sample_curve

logger = logging.getLogger(__name__)

Listener = Callable[[object], None]


class N185Graph(BaseGraph):
    """График, владеющий системой координат, кривыми и аннотациями.

    Любое изменение (кривые, аннотации, параметры вида, размер области)
    вызывает одну синхронную перерисовку. Подписчики получают новую фигуру
    после каждой перерисовки. Запрос перерисовки во время текущей (например,
    подписчик меняет размер) выполняется сразу после неё, без вложенности.
    """

    def __init__(
        self,
        width: float = 1200,
        height: float = 800,
        view: ViewParams | None = None,
        theme: str = "light",
        overscan: float = 1.0,
    ):
        super().__init__(view=view, theme=theme)
        self.overscan = overscan
        self.curves: list[FireFlowCurve] = []
        self.annotations: list = []
        self._listeners: list[Listener] = []
        self._rendering = False
        self._pending = False
        self.resize(width, height)

    # --- Подписчики ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Подписаться на перерисовку; возвращает функцию отписки."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Изменение состояния ---

    def set_curves(self, curves: list[FireFlowCurve]):
        self.curves = list(curves)
        return self.render()

    def set_annotations(self, annotations: list):
        self.annotations = list(annotations)
        return self.render()

    def update(self, max_flow=None, max_pressure=None, title=None, show_date=None):
        """Заменить параметры вида и перерисовать."""
        self.coords.update(max_flow, max_pressure, title, show_date)
        return self.render()

    def resize(self, width: float, height: float):
        """Полный пересчёт геометрии и полная перерисовка."""
        self.coords.set_viewport(width, height)
        return self.render()

    # --- Отрисовка ---

    def render(self):
        """Перерисовать фигуру; None, пока у графика нет области построения."""
        if not self.coords.ready:
            logger.debug("Render skipped: coordinate system not ready")
            return None
        if self._rendering:
            self._pending = True
            return self.fig

        self._rendering = True
        try:
            while True:
                self._pending = False
                self.fig = self._draw()
                for listener in list(self._listeners):
                    listener(self.fig)
                if not self._pending:
                    break
        finally:
            self._rendering = False
        return self.fig

    def _draw(self):
        logger.debug(
            "Redraw %dx%d: %d curves, %d annotations",
            self.coords.width, self.coords.height, len(self.curves), len(self.annotations),
        )
        self.fig = self._new_figure()
        self._add_background()
        self._add_grid()
        self._add_axes()
        plot_curves(self, self.curves)
        add_annotations(self, self.annotations)
        self._add_title()
        self._add_border()
        return self.fig

    # --- Наведение ---

    def hover_readout(self, x: float, y: float) -> str | None:
        """Текст под указателем, None вне области построения."""
        point = self.coords.pointer_to_data(x, y)
        if point is None:
            return None
        flow, pressure = point
        return f"Q: {format_number(flow, 0)} GPM, P: {format_number(pressure, 1)} PSI"


__all__ = [
    "N185Graph",
    "PlotCoordinateSystem",
    "ViewParams",
    "sample_curve",
    "place_annotations",
]
