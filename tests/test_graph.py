import pytest

from fireflow.annotations import LineAnnotation, PointAnnotation
from fireflow.curve import FireFlowCurve
from graph import N185Graph, ViewParams


def _curve():
    return FireFlowCurve.from_test(65.0, 1500.0, 35.0, id="H-1")


def test_initial_render_in_pixel_space():
    graph = N185Graph(width=1200, height=800)
    fig = graph.get_figure()
    assert fig is not None
    assert tuple(fig.layout.xaxis.range) == (0, 1200)
    assert tuple(fig.layout.yaxis.range) == (800, 0)
    assert fig.layout.width == 1200


def test_no_figure_until_viewport_is_usable():
    graph = N185Graph(width=50, height=50)
    assert graph.fig is None
    assert graph.set_curves([_curve()]) is None
    assert graph.resize(900, 600) is not None


def test_curves_drawn_with_gaps():
    graph = N185Graph()
    fig = graph.set_curves([_curve(), _curve().shift(50.0, new_id="low")])
    traces = {t.name: t for t in fig.data if t.name in ("H-1", "low") and t.mode == "lines"}
    assert set(traces) == {"H-1", "low"}
    assert traces["H-1"].connectgaps is False


def test_hidden_curve_not_drawn():
    graph = N185Graph()
    fig = graph.set_curves([FireFlowCurve.from_test(65.0, 1500.0, 35.0, id="H-1", visible=False)])
    assert all(t.name != "H-1" for t in fig.data)


def test_annotations_outside_add_nothing():
    graph = N185Graph()
    base = graph.set_annotations([])
    shapes, notes = len(base.layout.shapes), len(base.layout.annotations)

    fig = graph.set_annotations([PointAnnotation(Q=9000.0, P=50.0, text="far")])
    assert len(fig.layout.shapes) == shapes
    assert len(fig.layout.annotations) == notes

    fig = graph.set_annotations([LineAnnotation(value=20.0, text="20 PSI")])
    assert len(fig.layout.shapes) == shapes + 1
    assert len(fig.layout.annotations) == notes + 1


def test_title_and_date():
    graph = N185Graph(view=ViewParams(title="Hydrant 12"))
    texts = [a.text for a in graph.fig.layout.annotations]
    assert "<b>Hydrant 12</b>" in texts

    fig = graph.update(show_date=True)
    assert len(fig.layout.annotations) == len(texts) + 1


def test_update_rejected_keeps_figure():
    graph = N185Graph()
    fig = graph.fig
    with pytest.raises(ValueError):
        graph.update(max_flow=0)
    assert graph.fig is fig
    assert graph.coords.max_flow == 5000.0


def test_listeners_notified_and_unsubscribed():
    graph = N185Graph()
    seen = []
    unsubscribe = graph.subscribe(seen.append)

    graph.set_curves([_curve()])
    graph.update(max_pressure=150.0)
    assert len(seen) == 2
    assert seen[-1] is graph.fig

    unsubscribe()
    graph.resize(1000, 700)
    assert len(seen) == 2


def test_resize_from_listener_is_queued():
    graph = N185Graph()
    widths = []

    def on_render(fig):
        widths.append(fig.layout.width)
        if len(widths) == 1:
            graph.resize(1000, 700)

    graph.subscribe(on_render)
    graph.set_curves([_curve()])
    assert widths == [1200, 1000]
    assert graph.fig.layout.width == 1000


def test_hover_readout():
    graph = N185Graph()
    coords = graph.coords
    text = graph.hover_readout(coords.forward_flow(1500.0), coords.forward_pressure(45.0))
    assert text == "Q: 1,500 GPM, P: 45.0 PSI"
    assert graph.hover_readout(5.0, 5.0) is None


def test_dark_theme():
    graph = N185Graph(theme="dark")
    assert graph.fig.layout.paper_bgcolor == "#0e1117"
