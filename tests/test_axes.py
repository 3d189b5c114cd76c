import pytest

from graph.axes import flow_ticks, grid_lines, pressure_ticks, tick_segments
from graph.coords import PlotCoordinateSystem, ViewParams


def _coords(max_flow=5000.0, max_pressure=100.0):
    coords = PlotCoordinateSystem(ViewParams(max_flow=max_flow, max_pressure=max_pressure))
    coords.set_viewport(1200, 800)
    return coords


def _count(ticks, length):
    return sum(1 for t in ticks if t.length == length)


@pytest.mark.parametrize("max_flow", [1000.0, 3000.0, 5000.0, 7300.0])
def test_flow_ticks_no_duplicates(max_flow):
    ticks = flow_ticks(_coords(max_flow=max_flow))
    positions = [round(t.position, 9) for t in ticks]
    assert len(positions) == len(set(positions)) == 100


def test_flow_tick_lengths_and_labels():
    ticks = flow_ticks(_coords())
    assert _count(ticks, "major") == 10
    assert _count(ticks, "medium") == 10
    assert _count(ticks, "short") == 80

    majors = [t for t in ticks if t.length == "major"]
    assert [t.label for t in majors[:3]] == ["500", "1,000", "1,500"]
    assert majors[-1].label == "5,000"
    assert all(t.label is None for t in ticks if t.length != "major")

    medium = [t.value for t in ticks if t.length == "medium"]
    assert medium[0] == pytest.approx(250.0)


def test_pressure_ticks():
    ticks = pressure_ticks(_coords())
    assert len(ticks) == 101
    assert _count(ticks, "major") == 11
    assert _count(ticks, "medium") == 10
    assert _count(ticks, "short") == 80
    assert [t.label for t in ticks if t.length == "major"][:3] == ["0", "10", "20"]


def test_pressure_ticks_partial_range():
    ticks = pressure_ticks(_coords(max_pressure=95.5))
    assert ticks[-1].value == 95.0
    assert _count(ticks, "major") == 10


def test_tick_sizes():
    ticks = flow_ticks(_coords())
    assert {t.length: t.size for t in ticks} == {"major": 6, "medium": 4, "short": 2}


def test_grid_lines():
    coords = _coords()
    lines = grid_lines(coords)
    vertical = [g for g in lines if g.orientation == "vertical"]
    horizontal = [g for g in lines if g.orientation == "horizontal"]
    assert len(vertical) == 10
    assert [g.value for g in horizontal] == [10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0, 80.0, 90.0, 100.0]
    assert vertical[-1].x0 == pytest.approx(coords.rect.right)
    assert all(g.y0 == coords.rect.top and g.y1 == coords.rect.bottom for g in vertical)


def test_tick_segments_mirrored():
    coords = _coords()
    rect = coords.rect
    tick = flow_ticks(coords)[9]
    bottom, top = tick_segments(coords, tick)
    assert bottom == (tick.position, rect.bottom, tick.position, rect.bottom + 6)
    assert top == (tick.position, rect.top, tick.position, rect.top - 6)

    tick = pressure_ticks(coords)[5]
    left, right = tick_segments(coords, tick)
    assert left == (rect.left, tick.position, rect.left - 4, tick.position)
    assert right == (rect.right, tick.position, rect.right + 4, tick.position)
