import numpy as np
import pytest
from pydantic import ValidationError

from graph.coords import PlotCoordinateSystem, ViewParams


def _coords(max_flow=5000.0, max_pressure=100.0):
    coords = PlotCoordinateSystem(ViewParams(max_flow=max_flow, max_pressure=max_pressure))
    coords.set_viewport(1200, 800)
    return coords


def test_plot_rect_from_margins():
    rect = _coords().rect
    assert (rect.left, rect.top, rect.width, rect.height) == (60, 60, 1110, 680)
    assert (rect.right, rect.bottom) == (1170, 740)


def test_transforms_before_viewport_raise():
    coords = PlotCoordinateSystem()
    assert not coords.ready
    with pytest.raises(RuntimeError):
        coords.forward_flow(1000.0)
    with pytest.raises(RuntimeError):
        coords.inverse_pressure(100.0)


def test_degenerate_viewport_before_ready_is_ignored():
    coords = PlotCoordinateSystem()
    assert coords.set_viewport(50, 50) is False
    assert not coords.ready
    assert coords.set_viewport(800, 600) is True
    assert coords.ready


def test_degenerate_viewport_after_ready_rejected():
    coords = _coords()
    rect = coords.rect
    with pytest.raises(ValueError):
        coords.set_viewport(80, 800)
    assert coords.rect == rect


def test_axis_ends():
    coords = _coords()
    assert coords.forward_flow(0.0) == pytest.approx(60.0)
    assert coords.forward_flow(5000.0) == pytest.approx(1170.0)
    assert coords.forward_pressure(0.0) == pytest.approx(740.0)
    assert coords.forward_pressure(100.0) == pytest.approx(60.0)


@pytest.mark.parametrize("flow", [1.0, 250.0, 1500.0, 4999.0, 5000.0, 7500.0])
def test_flow_round_trip(flow):
    coords = _coords()
    assert coords.inverse_flow(coords.forward_flow(flow)) == pytest.approx(flow, rel=1e-6)


@pytest.mark.parametrize("pressure", [0.5, 20.0, 65.0, 100.0, 119.0])
def test_pressure_round_trip(pressure):
    coords = _coords()
    assert coords.inverse_pressure(coords.forward_pressure(pressure)) == pytest.approx(pressure, rel=1e-6)


def test_flow_axis_is_nonlinear():
    coords = _coords()
    # Q^1.85 scale: half the flow is much less than half the width
    assert coords.forward_flow(2500.0) - 60.0 < 1110.0 / 2


def test_forward_transforms_monotonic():
    coords = _coords()
    xs = coords.forward_flow(np.linspace(0.0, 5000.0, 501))
    ys = coords.forward_pressure(np.linspace(0.0, 100.0, 501))
    assert np.all(np.diff(xs) > 0)
    assert np.all(np.diff(ys) < 0)


def test_update_replaces_view():
    coords = _coords()
    coords.update(title="Hydrant 12")
    view = coords.update(max_flow=10000.0)
    assert view.max_flow == 10000.0
    assert view.title == "Hydrant 12"
    assert coords.forward_flow(10000.0) == pytest.approx(1170.0)


@pytest.mark.parametrize("changes", [{"max_flow": -1.0}, {"max_pressure": 0.0}, {"max_flow": float("nan")}])
def test_failed_update_keeps_old_view(changes):
    coords = _coords()
    before = coords.view
    with pytest.raises(ValidationError):
        coords.update(**changes)
    assert coords.view is before


def test_pointer_to_data():
    coords = _coords()
    assert coords.pointer_to_data(10.0, 10.0) is None
    assert coords.pointer_to_data(1180.0, 400.0) is None

    flow, pressure = coords.pointer_to_data(coords.forward_flow(1500.0), coords.forward_pressure(40.0))
    assert flow == pytest.approx(1500.0)
    assert pressure == pytest.approx(40.0)


def test_pointer_on_edge_is_inside():
    coords = _coords()
    flow, pressure = coords.pointer_to_data(60.0, 740.0)
    assert flow == pytest.approx(0.0)
    assert pressure == pytest.approx(0.0)
