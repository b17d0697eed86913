import math

import pytest

from hex_geometry import DiagonalDirection, Direction, Hex, HexLayout, HexOrientation
from hex_geometry.direction import ALL_DIAGONALS, ALL_DIRECTIONS


def test_direction_order_and_offsets():
    assert [d.index for d in ALL_DIRECTIONS] == [0, 1, 2, 3, 4, 5]
    assert Direction.TOP_RIGHT.offset == (1, -1)
    assert Direction.TOP.offset == (0, -1)
    assert Direction.BOTTOM.offset == (0, 1)
    assert DiagonalDirection.RIGHT.offset == (2, -1)
    assert DiagonalDirection.BOTTOM_RIGHT.offset == (1, 1)


@pytest.mark.parametrize("direction", list(Direction))
def test_direction_rotations(direction):
    assert direction.rotate_ccw(1).rotate_cw(1) is direction
    assert direction.clockwise().counter_clockwise() is direction

    rotated = direction
    for _ in range(6):
        rotated = rotated.clockwise()
    assert rotated is direction
    assert direction.rotate_cw(6) is direction
    assert direction.rotate_cw(2) is direction.clockwise().clockwise()


def test_clockwise_goes_down_the_index():
    assert Direction.TOP.clockwise() is Direction.TOP_RIGHT
    assert Direction.TOP_RIGHT.clockwise() is Direction.BOTTOM_RIGHT
    assert Direction.TOP.counter_clockwise() is Direction.TOP_LEFT


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_offsets_cancel(direction):
    dx, dy = direction.offset
    ox, oy = direction.opposite().offset
    assert (dx + ox, dy + oy) == (0, 0)
    assert direction.opposite().opposite() is direction


@pytest.mark.parametrize("diagonal", list(DiagonalDirection))
def test_diagonal_is_sum_of_adjacent_directions(diagonal):
    cw = diagonal.direction_cw()
    ccw = diagonal.direction_ccw()
    assert ccw is cw.counter_clockwise()
    assert diagonal.offset == (cw.offset[0] + ccw.offset[0], cw.offset[1] + ccw.offset[1])
    assert cw.diagonal_ccw() is diagonal
    assert ccw.diagonal_cw() is diagonal


def test_angles():
    assert Direction.TOP_RIGHT.angle_flat_degrees() == pytest.approx(30.0)
    assert Direction.TOP_RIGHT.angle_pointy_degrees() == pytest.approx(60.0)
    assert Direction.BOTTOM_RIGHT.angle_flat_degrees() == pytest.approx(330.0)
    assert DiagonalDirection.RIGHT.angle_flat() == pytest.approx(0.0)
    assert DiagonalDirection.RIGHT.angle_pointy() == pytest.approx(math.pi / 6)
    for direction in ALL_DIRECTIONS:
        assert direction.angle(HexOrientation.FLAT) == pytest.approx(direction.angle_flat())
        assert direction.angle(HexOrientation.POINTY) == pytest.approx(direction.angle_pointy())
    for diagonal in ALL_DIAGONALS:
        assert diagonal.angle_pointy() - diagonal.angle_flat() == pytest.approx(math.pi / 6)


@pytest.mark.parametrize("orientation", list(HexOrientation))
@pytest.mark.parametrize("direction", list(Direction))
def test_direction_angle_matches_world_position(orientation, direction):
    layout = HexLayout(orientation=orientation)
    x, y = layout.hex_to_world_pos(Hex.ZERO.neighbor(direction))
    angle = direction.angle(orientation)
    assert math.cos(angle) == pytest.approx(x / math.hypot(x, y), abs=1e-9)
    assert math.sin(angle) == pytest.approx(y / math.hypot(x, y), abs=1e-9)


def test_serialization_by_name():
    assert Direction["TOP_LEFT"] is Direction.TOP_LEFT
    assert DiagonalDirection[DiagonalDirection.LEFT.name] is DiagonalDirection.LEFT
    assert Direction.from_index(7) is Direction.TOP
