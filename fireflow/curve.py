"""Кривая подачи, построенная по одному испытанию гидранта (NFPA 291)."""

import logging
from typing import Literal

import numpy as np
from pydantic import BaseModel, Field, model_validator

from fireflow.helpers import flow_at_pressure, friction_coefficient, pressure_at_flow

logger = logging.getLogger(__name__)

# Пределы правдоподобия: значения за ними допустимы, но подозрительны
STATIC_ADVISORY_PSI = 100.0
RESIDUAL_ADVISORY_PSI = 20.0

LineStyle = Literal["solid", "dashed", "dotted", "dashdot"]
Category = Literal["field", "model", "scenario"]


class FireFlowCurve(BaseModel):
    """Кривая подачи P = Ps - k·Q^1.85.

    Строится либо по испытанию гидранта (статика, расход, остаточное
    давление), и тогда k подбирается при создании, либо по явному k для
    производных кривых без физического испытания.
    """

    id: str = ""
    static_pressure: float = Field(gt=0, allow_inf_nan=False, description="Статическое давление Ps, PSI")
    test_flow: float | None = Field(default=None, gt=0, allow_inf_nan=False, description="Расход при испытании Qt, GPM")
    test_residual: float | None = Field(
        default=None, gt=0, allow_inf_nan=False, description="Остаточное давление при испытании Pt, PSI"
    )
    k: float | None = Field(default=None, allow_inf_nan=False, description="Коэффициент трения")

    # Отображение
    color: str = "#142B6C"
    line_style: LineStyle = "solid"
    category: Category = "field"
    visible: bool = True
    show_point: bool = True

    # Происхождение: ссылка на родителя только по id
    is_derived: bool = False
    parent_id: str | None = None

    @model_validator(mode="after")
    def fit_friction_coefficient(self):
        """Проверить данные испытания и вычислить k, если он не задан."""
        has_flow = self.test_flow is not None
        has_residual = self.test_residual is not None
        if has_flow != has_residual:
            raise ValueError("Test flow and test residual must be given together")

        if has_flow:
            if self.static_pressure <= self.test_residual:
                raise ValueError("Static pressure must be greater than residual pressure")
            if self.k is None:
                self.k = friction_coefficient(self.static_pressure, self.test_flow, self.test_residual)
        elif self.k is None:
            raise ValueError("Friction coefficient k is required for a curve without test data")

        if self.static_pressure > STATIC_ADVISORY_PSI:
            logger.warning(
                "Curve %r: static %.1f PSI is greater than %.0f PSI. This may be unreasonable.",
                self.id, self.static_pressure, STATIC_ADVISORY_PSI,
            )
        if has_residual and self.test_residual < RESIDUAL_ADVISORY_PSI:
            logger.warning(
                "Curve %r: test residual %.1f PSI is less than %.0f PSI. This may be unreasonable.",
                self.id, self.test_residual, RESIDUAL_ADVISORY_PSI,
            )
        return self

    @classmethod
    def from_test(
        cls,
        static_pressure: float,
        test_flow: float,
        test_residual: float,
        id: str = "",
        **style,
    ) -> "FireFlowCurve":
        """Кривая по одному испытанию гидранта."""
        return cls(
            id=id,
            static_pressure=static_pressure,
            test_flow=test_flow,
            test_residual=test_residual,
            **style,
        )

    @property
    def has_test_point(self) -> bool:
        """Кривая опирается на физическую точку испытания."""
        return not self.is_derived and self.test_flow is not None and self.test_residual is not None

    # --- Вычисления ---

    def pressure_at_flow(self, flow):
        """P = Ps - k·Q^1.85, PSI. За расходом нулевого давления отрицательно."""
        return pressure_at_flow(self.static_pressure, self.k, flow)

    def flow_at_pressure(self, pressure):
        """Q = ((Ps - P) / k)^(1/1.85), GPM; 0 при P >= Ps, не конечно при k <= 0."""
        return flow_at_pressure(self.static_pressure, self.k, pressure)

    def available_fire_flow(self, min_pressure: float = 20.0):
        """AFF: расход при минимально допустимом остаточном давлении."""
        return self.flow_at_pressure(min_pressure)

    def needed_fire_flow_pressure(self, required_flow: float):
        """NFF: остаточное давление при требуемом расходе."""
        return self.pressure_at_flow(required_flow)

    def generate_curve(self, max_flow: float = 10000.0, num_points: int = 100) -> tuple[np.ndarray, np.ndarray]:
        """num_points + 1 равномерных точек (Q, P) от 0 до max_flow."""
        flows = np.linspace(0.0, max_flow, num_points + 1)
        return flows, self.pressure_at_flow(flows)

    # --- Производные кривые ---

    def tilt(self, friction_slope_delta: float, new_id: str | None = None, **style) -> "FireFlowCurve":
        """Производная кривая с добавленным (delta > 0) или снятым (delta < 0) трением.

        Статика сохраняется, k' = k + delta. Ключевые аргументы ``style``
        переопределяют поля отображения (color, line_style, category, ...).
        """
        return self._derive(new_id, k=self.k + friction_slope_delta, **style)

    def shift(self, new_static_pressure: float, new_id: str | None = None, **style) -> "FireFlowCurve":
        """Производная кривая с новым статическим давлением и тем же k."""
        return self._derive(new_id, static_pressure=new_static_pressure, **style)

    def _derive(self, new_id: str | None, **changes) -> "FireFlowCurve":
        data = self.model_dump(
            exclude={"id", "test_flow", "test_residual", "visible", "is_derived", "parent_id"}
        )
        data.update(changes)
        derived = type(self)(
            id=new_id if new_id is not None else f"{self.id}*",
            is_derived=True,
            parent_id=self.id,
            **data,
        )
        logger.debug("Derived curve %r from %r (k=%.4e, Ps=%.1f)", derived.id, self.id, derived.k, derived.static_pressure)
        return derived
