"""Плоские записи кривых и аннотаций, TOML-документ проекта.

Форма записи та же, что во внешнем обмене: ключи camelCase, null для
отсутствующих данных испытания. В TOML нет null, поэтому ``None`` при
записи отбрасываются и при чтении возвращаются как ``None``.
"""

import io
import tomllib

import tomli_w

from fireflow.annotations import LabelAnnotation, LineAnnotation, PointAnnotation, parse_annotation
from fireflow.curve import FireFlowCurve

GRAPH_DEFAULTS = {
    "max_flow": 5000.0,
    "max_pressure": 100.0,
    "title": "",
    "show_date": False,
    "width": 1200,
    "height": 800,
}


# --- Кривые ---


def curve_to_record(curve: FireFlowCurve) -> dict:
    return {
        "id": curve.id,
        "staticPressure": curve.static_pressure,
        "testFlow": curve.test_flow,
        "testResidual": curve.test_residual,
        "k": curve.k,
        "color": curve.color,
        "lineStyle": curve.line_style,
        "category": curve.category,
        "visible": curve.visible,
        "isDerived": curve.is_derived,
        "parentId": curve.parent_id,
    }


def curve_from_record(data: dict) -> FireFlowCurve:
    """Восстановить кривую; сохранённый k важнее вычисленного по испытанию."""
    fields = {
        "id": data.get("id", ""),
        "static_pressure": data.get("staticPressure"),
        "test_flow": data.get("testFlow"),
        "test_residual": data.get("testResidual"),
        "k": data.get("k"),
        "color": data.get("color"),
        "line_style": data.get("lineStyle"),
        "category": data.get("category"),
        "visible": data.get("visible"),
        "is_derived": data.get("isDerived"),
        "parent_id": data.get("parentId"),
    }
    # Отсутствующие поля отображения берутся из умолчаний модели
    optional = {"color", "line_style", "category", "visible", "is_derived"}
    return FireFlowCurve(**{k: v for k, v in fields.items() if not (k in optional and v is None)})


# --- Аннотации ---


def annotation_to_record(annotation: PointAnnotation | LabelAnnotation | LineAnnotation) -> dict:
    record = {
        "id": annotation.id,
        "type": annotation.type,
        "text": annotation.text,
        "color": annotation.color,
        "Q": annotation.Q,
        "P": annotation.P,
        "visible": annotation.visible,
    }
    if isinstance(annotation, PointAnnotation):
        record["sizeOrFontSizeOrLineStyle"] = annotation.size
        record["value"] = 0.0
    elif isinstance(annotation, LabelAnnotation):
        record["sizeOrFontSizeOrLineStyle"] = annotation.font_size
        record["value"] = 0.0
    else:
        record["sizeOrFontSizeOrLineStyle"] = annotation.line_style
        record["value"] = annotation.value
        record["lineType"] = annotation.orientation
    return record


def annotation_from_record(data: dict) -> PointAnnotation | LabelAnnotation | LineAnnotation:
    kind = data.get("type")
    style = data.get("sizeOrFontSizeOrLineStyle")
    fields = {
        "type": kind,
        "id": data.get("id"),
        "text": data.get("text"),
        "color": data.get("color"),
        "visible": data.get("visible"),
    }
    if kind == "line":
        fields["orientation"] = data.get("lineType")
        fields["value"] = data.get("value")
        fields["line_style"] = style
    else:
        fields["Q"] = data.get("Q")
        fields["P"] = data.get("P")
        fields["size" if kind == "point" else "font_size"] = style
    return parse_annotation({k: v for k, v in fields.items() if v is not None})


# --- Документ проекта ---


def _drop_none(record: dict) -> dict:
    return {k: v for k, v in record.items() if v is not None}


def export_toml(
    curves: list[FireFlowCurve],
    annotations: list,
    graph: dict | None = None,
    name: str = "Untitled Project",
) -> str:
    """Документ проекта в виде строки TOML."""
    doc = {
        "project": {"name": name},
        "graph": {**GRAPH_DEFAULTS, **(graph or {})},
        "curves": [_drop_none(curve_to_record(c)) for c in curves],
        "annotations": [_drop_none(annotation_to_record(a)) for a in annotations],
    }
    return tomli_w.dumps(doc)


def import_toml(content: bytes) -> dict:
    """Разобрать документ проекта.

    Returns:
        dict с ``name``, ``graph`` (с умолчаниями), ``curves``,
        ``annotations`` и исходным списком ``transforms``.
    """
    data = tomllib.load(io.BytesIO(content))

    curves = [curve_from_record(record) for record in data.get("curves", [])]
    annotations = [annotation_from_record(record) for record in data.get("annotations", [])]

    return {
        "name": data.get("project", {}).get("name", "Untitled Project"),
        "graph": {**GRAPH_DEFAULTS, **data.get("graph", {})},
        "curves": curves,
        "annotations": annotations,
        "transforms": data.get("transforms", []),
    }
