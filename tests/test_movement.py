from hex_geometry import Hex
from hex_geometry.algorithms import field_of_movement


def test_uniform_cost_matches_range():
    assert field_of_movement(Hex(2, 1), 2, lambda coord: 1) == set(Hex(2, 1).range(2))


def test_zero_budget():
    assert field_of_movement(Hex(2, 1), 0, lambda coord: 1) == {Hex(2, 1)}


def test_expensive_steps():
    assert field_of_movement(Hex.ZERO, 3, lambda coord: 2) == set(Hex.ZERO.range(1))


def test_impassable_hexes_are_excluded():
    blocked = Hex(1, 0)
    reachable = field_of_movement(Hex.ZERO, 1, lambda coord: None if coord == blocked else 1)
    assert reachable == set(Hex.ZERO.range(1)) - {blocked}


def test_wall_costs_a_detour():
    wall = {Hex(1, -1), Hex(1, 0), Hex(0, 1)}

    def cost(coord):
        return None if coord in wall else 1

    assert Hex(2, 0) not in field_of_movement(Hex.ZERO, 4, cost)
    assert Hex(2, 0) in field_of_movement(Hex.ZERO, 5, cost)
