import argparse
import logging
import sys
import tomllib
from pathlib import Path

from pydantic import ValidationError

from fireflow.calculator import calculate, format_summary, results_table
from fireflow.curve import FireFlowCurve
from fireflow.helpers import DEFAULT_C
from fireflow.modeling import (
    parse_pipe_sizes,
    shift_by_elevation,
    shift_to_static,
    tilt_by_pipe,
    what_if_pipe_sizes,
)
from fireflow.records import import_toml
from graph import N185Graph, ViewParams

logger = logging.getLogger(__name__)

# Ошибки входных данных: сообщение в stderr и код 1 вместо трассировки
INPUT_ERRORS = (ValidationError, ValueError, TypeError, KeyError, OSError, tomllib.TOMLDecodeError)


def load_project(path: str) -> dict:
    """Загрузить проект из TOML."""
    with open(path, "rb") as f:
        return import_toml(f.read())


def apply_transform(curves: list[FireFlowCurve], transform: dict) -> list[FireFlowCurve]:
    """Новые кривые по одной записи [[transforms]].

    Исходная кривая ищется по id среди уже построенных, поэтому преобразование
    может опираться на результат предыдущего.
    """
    kind = transform.get("kind")
    source_id = transform.get("source", "")
    source = next((c for c in curves if c.id == source_id), None)
    if source is None:
        raise ValueError(f"Transform {kind!r}: no curve with id {source_id!r}")

    new_id = transform.get("id")
    if kind == "tilt_pipe":
        return [
            tilt_by_pipe(
                source,
                length=transform["length"],
                diameter=transform["diameter"],
                c=transform.get("c", DEFAULT_C),
                operation=transform.get("operation", "add"),
                new_id=new_id,
            )
        ]
    if kind == "shift_static":
        return [shift_to_static(source, transform["static"], new_id=new_id)]
    if kind == "shift_elevation":
        return [shift_by_elevation(source, transform["elevation"], new_id=new_id)]
    if kind == "what_if":
        sizes = transform.get("sizes", [])
        if isinstance(sizes, str):
            sizes = parse_pipe_sizes(sizes)
        return what_if_pipe_sizes(source, transform["length"], sizes, c=transform.get("c", DEFAULT_C))
    raise ValueError(f"Unknown transform kind: {kind!r}")


def build_graph(project: dict, curves: list[FireFlowCurve]) -> N185Graph:
    settings = project["graph"]
    view = ViewParams(
        max_flow=settings["max_flow"],
        max_pressure=settings["max_pressure"],
        title=settings["title"],
        show_date=settings["show_date"],
    )
    graph = N185Graph(width=settings["width"], height=settings["height"], view=view)
    if not graph.coords.ready:
        raise ValueError(
            f"Graph size {settings['width']}x{settings['height']} leaves no room for the plot area"
        )
    graph.set_curves(curves)
    graph.set_annotations(project["annotations"])
    return graph


def main(input_file: str = "input.toml", output: str | None = None, csv: str | None = None):
    """Загрузка → преобразования → сводка → график."""
    project = load_project(input_file)

    curves = list(project["curves"])
    for transform in project["transforms"]:
        curves += apply_transform(curves, transform)

    # Размеры графика проверяются до вывода сводки
    graph = build_graph(project, curves)

    print(f"Project: {project['name']}")
    results = [calculate(curve) for curve in curves]
    for result in results:
        print()
        for line in format_summary(result):
            print(line)

    if csv:
        results_table(results).to_csv(csv, index=False)
        print(f"\nTable: {csv}")

    fig = graph.get_figure()
    output_name = output or str(Path(input_file).with_suffix(".html"))
    fig.write_html(output_name)
    print(f"\nChart: {output_name}")
    logger.info("Wrote %s (%d curves, %d annotations)", output_name, len(curves), len(project["annotations"]))

    return curves


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Hydrant flow test curves on N^1.85 paper.")
    parser.add_argument("input", nargs="?", default="input.toml", help="Project TOML file")
    parser.add_argument("-o", "--output", help="HTML chart path (default: input path with .html)")
    parser.add_argument("--csv", help="Write the calculation summary table to this CSV file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def cli(argv=None) -> int:
    """Точка входа командной строки; возвращает код выхода."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        main(args.input, args.output, args.csv)
    except INPUT_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
