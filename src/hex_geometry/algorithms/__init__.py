"""Graph searches over hex coordinates."""

from .fov import directional_fov, range_fov
from .movement import field_of_movement
from .pathfinding import a_star

__all__ = ["a_star", "range_fov", "directional_fov", "field_of_movement"]
