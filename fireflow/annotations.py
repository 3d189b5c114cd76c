"""Аннотации в координатах данных: точки, надписи, опорные линии.

Чисто оформительские, без гидравлического смысла. По модели на каждый вид;
``Annotation``: размеченное объединение по полю ``type``.
"""

import uuid
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

Size = Literal["small", "medium", "large"]


def new_annotation_id() -> str:
    return f"ann-{uuid.uuid4().hex[:12]}"


class _AnnotationBase(BaseModel):
    id: str = Field(default_factory=new_annotation_id)
    text: str = ""
    visible: bool = True


class PointAnnotation(_AnnotationBase):
    """Закрашенный круг в (Q, P) с необязательной подписью справа."""

    type: Literal["point"] = "point"
    Q: float = Field(allow_inf_nan=False, description="Расход, GPM")
    P: float = Field(allow_inf_nan=False, description="Давление, PSI")
    color: str = "#ff0000"
    size: Size = "medium"


class LabelAnnotation(_AnnotationBase):
    """Свободный текст с привязкой к (Q, P)."""

    type: Literal["label"] = "label"
    Q: float = Field(allow_inf_nan=False, description="Расход, GPM")
    P: float = Field(allow_inf_nan=False, description="Давление, PSI")
    color: str = "#000000"
    font_size: Size = "medium"


class LineAnnotation(_AnnotationBase):
    """Опорная линия через весь график.

    Горизонтальная задаётся давлением, вертикальная расходом.
    """

    type: Literal["line"] = "line"
    orientation: Literal["horizontal", "vertical"] = "horizontal"
    value: float = Field(allow_inf_nan=False, description="PSI для горизонтальной, GPM для вертикальной")
    color: str = "#ff0000"
    line_style: Literal["solid", "dashed"] = "solid"

    @property
    def Q(self) -> float:
        return self.value if self.orientation == "vertical" else 0.0

    @property
    def P(self) -> float:
        return self.value if self.orientation == "horizontal" else 0.0


Annotation = Annotated[
    Union[PointAnnotation, LabelAnnotation, LineAnnotation],
    Field(discriminator="type"),
]

annotation_adapter = TypeAdapter(Annotation)


def parse_annotation(data: dict) -> PointAnnotation | LabelAnnotation | LineAnnotation:
    """Собрать модель аннотации нужного вида из словаря с ключом ``type``."""
    return annotation_adapter.validate_python(data)
