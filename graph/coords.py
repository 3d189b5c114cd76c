"""Преобразование координат данных <-> экрана для графика N^1.85.

Расход в масштабе Q^1.85 (кривые подачи становятся прямыми), давление
линейно и растёт вверх. Экранный y растёт вниз, как на canvas.
"""

import logging
from dataclasses import dataclass

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from fireflow.helpers import EXPONENT
from .styles import MARGIN

logger = logging.getLogger(__name__)


class ViewParams(BaseModel):
    """Видимая область и подписи графика."""

    model_config = ConfigDict(frozen=True)

    max_flow: float = Field(default=5000.0, gt=0, allow_inf_nan=False, description="Конец оси расхода, GPM")
    max_pressure: float = Field(default=100.0, gt=0, allow_inf_nan=False, description="Конец оси давления, PSI")
    title: str = ""
    show_date: bool = False


@dataclass(frozen=True)
class PlotRect:
    """Область построения в экранных пикселях."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


def _out(a: np.ndarray):
    return float(a) if a.ndim == 0 else a


class PlotCoordinateSystem:
    """Взаимно однозначное отображение (расход, давление) на область построения.

    Два состояния: не инициализирована до первого невырожденного размера,
    готова после него. Преобразования до этого момента дают RuntimeError.
    """

    def __init__(self, view: ViewParams | None = None, margin: dict | None = None):
        self.view = view or ViewParams()
        self.margin = {**MARGIN, **(margin or {})}
        self.width = 0.0
        self.height = 0.0
        self.rect: PlotRect | None = None

    @property
    def ready(self) -> bool:
        return self.rect is not None

    @property
    def max_flow(self) -> float:
        return self.view.max_flow

    @property
    def max_pressure(self) -> float:
        return self.view.max_pressure

    def set_viewport(self, width: float, height: float) -> bool:
        """Пересчитать область построения для холста width x height px.

        Returns:
            True, если система после вызова готова. Вырожденный размер до первого
            корректного оставляет её неинициализированной, после него это ошибка.
        """
        plot_width = width - self.margin["left"] - self.margin["right"]
        plot_height = height - self.margin["top"] - self.margin["bottom"]

        if plot_width <= 0 or plot_height <= 0:
            if self.ready:
                raise ValueError(f"Viewport {width}x{height} leaves no room for the plot area")
            logger.debug("Viewport %sx%s too small, coordinate system stays uninitialized", width, height)
            return False

        self.width = float(width)
        self.height = float(height)
        self.rect = PlotRect(
            left=float(self.margin["left"]),
            top=float(self.margin["top"]),
            width=float(plot_width),
            height=float(plot_height),
        )
        return True

    def update(
        self,
        max_flow: float | None = None,
        max_pressure: float | None = None,
        title: str | None = None,
        show_date: bool | None = None,
    ) -> ViewParams:
        """Заменить параметры вида за один шаг; пропущенные значения сохраняются.

        Новые параметры проверяются до каких-либо изменений.
        """
        current = self.view
        self.view = ViewParams(
            max_flow=current.max_flow if max_flow is None else max_flow,
            max_pressure=current.max_pressure if max_pressure is None else max_pressure,
            title=current.title if title is None else title,
            show_date=current.show_date if show_date is None else show_date,
        )
        return self.view

    def _require_rect(self) -> PlotRect:
        if self.rect is None:
            raise RuntimeError("Coordinate system has no plot area yet; call set_viewport() first")
        return self.rect

    # --- Прямые и обратные преобразования ---

    def forward_flow(self, flow):
        """x = left + (Q^1.85 / Qmax^1.85) · width."""
        rect = self._require_rect()
        q = np.asarray(flow, dtype=float)
        with np.errstate(invalid="ignore"):
            x = rect.left + (q**EXPONENT / self.max_flow**EXPONENT) * rect.width
        return _out(x)

    def inverse_flow(self, x):
        """Q = ((x - left) / width · Qmax^1.85)^(1/1.85)."""
        rect = self._require_rect()
        ratio = (np.asarray(x, dtype=float) - rect.left) / rect.width
        with np.errstate(invalid="ignore"):
            q = (ratio * self.max_flow**EXPONENT) ** (1.0 / EXPONENT)
        return _out(q)

    def forward_pressure(self, pressure):
        """y = top + height - (P / Pmax) · height."""
        rect = self._require_rect()
        p = np.asarray(pressure, dtype=float)
        return _out(rect.bottom - (p / self.max_pressure) * rect.height)

    def inverse_pressure(self, y):
        """P = (top + height - y) / height · Pmax."""
        rect = self._require_rect()
        ratio = (rect.bottom - np.asarray(y, dtype=float)) / rect.height
        return _out(ratio * self.max_pressure)

    # --- Попадание указателя ---

    def contains(self, x: float, y: float) -> bool:
        return self._require_rect().contains(x, y)

    def pointer_to_data(self, x: float, y: float) -> tuple[float, float] | None:
        """(Q, P) под указателем в области построения, None вне её."""
        if not self.contains(x, y):
            return None
        return self.inverse_flow(x), self.inverse_pressure(y)
