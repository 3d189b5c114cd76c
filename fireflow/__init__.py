"""Расчёт противопожарного водоснабжения по испытанию гидранта (NFPA 291).

Модули:
- helpers: Степенная кривая, трение по Хазену-Вильямсу, отметки, форматирование
- curve: FireFlowCurve (подбор, вычисление, tilt, shift)
- annotations: Аннотации: точки, надписи, опорные линии
- modeling: Трение в трубе, отметки и варианты диаметров «что если»
- calculator: Сводка AFF / давления при расходе
- records: Плоские записи и TOML-документ проекта

Использование:
    from fireflow import FireFlowCurve
    from fireflow.helpers import unit_friction_slope, headloss
"""

from . import helpers, modeling
from .annotations import Annotation, LabelAnnotation, LineAnnotation, PointAnnotation
from .curve import FireFlowCurve

__all__ = [
    "helpers",
    "modeling",
    "FireFlowCurve",
    "Annotation",
    "PointAnnotation",
    "LabelAnnotation",
    "LineAnnotation",
]
