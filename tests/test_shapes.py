import pytest

from hex_geometry import Hex
from hex_geometry.shapes import flat_rectangle, hexagon, parallelogram, pointy_rectangle, triangle


def _distinct(coords):
    coords = list(coords)
    assert len(coords) == len(set(coords))
    return coords


def test_hexagon():
    coords = _distinct(hexagon(Hex(1, 1), 3))
    assert len(coords) == 37
    assert all(Hex(1, 1).distance_to(c) <= 3 for c in coords)


def test_parallelogram():
    coords = _distinct(parallelogram(Hex(0, 0), Hex(2, 3)))
    assert len(coords) == 12
    assert Hex(2, 3) in coords
    assert Hex(3, 0) not in coords


def test_triangle():
    coords = _distinct(triangle(3))
    assert len(coords) == 10
    assert all(c.x >= 0 and c.y >= 0 and c.x + c.y <= 3 for c in coords)
    assert list(triangle(0)) == [Hex.ZERO]
    with pytest.raises(ValueError):
        list(triangle(-1))


def test_rectangles():
    flat = _distinct(flat_rectangle(0, 3, 0, 2))
    pointy = _distinct(pointy_rectangle(-1, 2, 0, 4))
    assert len(flat) == 12
    assert len(pointy) == 20
    assert Hex.ZERO in flat
    assert Hex.ZERO in pointy
