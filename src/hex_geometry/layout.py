"""Hex orientations and the layout bridging hex space and world space."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Final

from hex_geometry.config import SQRT_3
from hex_geometry.direction import ALL_DIRECTIONS, DIRECTION_ANGLE_OFFSET
from hex_geometry.hex import Hex

Vec2 = tuple[float, float]


@dataclass(frozen=True)
class HexOrientationData:
    """Constant transform data of an orientation."""

    forward_matrix: tuple[float, float, float, float]
    inverse_matrix: tuple[float, float, float, float]
    angle_offset: float


class HexOrientation(Enum):
    """Pointy topped or flat topped hexagons."""

    POINTY = "pointy"
    FLAT = "flat"

    @property
    def forward_matrix(self) -> tuple[float, float, float, float]:
        """Row-major 2x2 matrix from axial coordinates to unit world space."""

        return _ORIENTATION_DATA[self].forward_matrix

    @property
    def inverse_matrix(self) -> tuple[float, float, float, float]:
        return _ORIENTATION_DATA[self].inverse_matrix

    @property
    def angle_offset(self) -> float:
        """Rotation in radians of this orientation relative to ``FLAT``."""

        return _ORIENTATION_DATA[self].angle_offset

    def corner_angles(self) -> tuple[float, ...]:
        """Angles of the 6 hexagon corners, corner ``i`` opening the edge of ``Direction(i)``."""

        return _CORNER_ANGLES[self]


_ORIENTATION_DATA: Final[dict[HexOrientation, HexOrientationData]] = {
    HexOrientation.POINTY: HexOrientationData(
        forward_matrix=(SQRT_3, SQRT_3 / 2.0, 0.0, 3.0 / 2.0),
        inverse_matrix=(SQRT_3 / 3.0, -1.0 / 3.0, 0.0, 2.0 / 3.0),
        angle_offset=DIRECTION_ANGLE_OFFSET,
    ),
    HexOrientation.FLAT: HexOrientationData(
        forward_matrix=(3.0 / 2.0, 0.0, SQRT_3 / 2.0, SQRT_3),
        inverse_matrix=(2.0 / 3.0, 0.0, -1.0 / 3.0, SQRT_3 / 3.0),
        angle_offset=0.0,
    ),
}

_CORNER_ANGLES: Final[dict[HexOrientation, tuple[float, ...]]] = {
    orientation: tuple(
        direction.angle_flat() + data.angle_offset - DIRECTION_ANGLE_OFFSET for direction in ALL_DIRECTIONS
    )
    for orientation, data in _ORIENTATION_DATA.items()
}


@dataclass(frozen=True)
class HexLayout:
    """Maps hex coordinates to world/pixel positions and back.

    The transform is: orientation matrix, then ``hex_size`` scale, then the
    per-axis ``invert_x``/``invert_y`` sign, then the ``origin`` translation.
    By default the hex ``y`` axis points down in world space; set
    ``invert_y`` to keep it pointing up.

    A zero ``hex_size`` component is accepted and collapses every position
    onto ``origin``; the world to hex conversions need a non-zero size.
    """

    orientation: HexOrientation = HexOrientation.POINTY
    origin: Vec2 = (0.0, 0.0)
    hex_size: Vec2 = (1.0, 1.0)
    invert_x: bool = False
    invert_y: bool = False

    def axis_scale(self) -> Vec2:
        return (-1.0 if self.invert_x else 1.0, 1.0 if self.invert_y else -1.0)

    def hex_to_center_aligned_world_pos(self, coord: Hex) -> Vec2:
        """World position of ``coord`` ignoring ``origin``."""

        m = self.orientation.forward_matrix
        sx, sy = self.axis_scale()
        return (
            (m[0] * coord.x + m[1] * coord.y) * self.hex_size[0] * sx,
            (m[2] * coord.x + m[3] * coord.y) * self.hex_size[1] * sy,
        )

    def hex_to_world_pos(self, coord: Hex) -> Vec2:
        x, y = self.hex_to_center_aligned_world_pos(coord)
        return (x + self.origin[0], y + self.origin[1])

    def world_pos_to_fract_hex(self, pos: Vec2) -> Vec2:
        """Fractional axial coordinates of a world position."""

        m = self.orientation.inverse_matrix
        sx, sy = self.axis_scale()
        px = (pos[0] - self.origin[0]) * sx / self.hex_size[0]
        py = (pos[1] - self.origin[1]) * sy / self.hex_size[1]
        return (m[0] * px + m[1] * py, m[2] * px + m[3] * py)

    def world_pos_to_hex(self, pos: Vec2) -> Hex:
        return Hex.round(self.world_pos_to_fract_hex(pos))

    def center_aligned_hex_corners(self) -> list[Vec2]:
        """The 6 corners of a hexagon centered on ``(0, 0)``."""

        return [
            (self.hex_size[0] * math.cos(angle), self.hex_size[1] * math.sin(angle))
            for angle in self.orientation.corner_angles()
        ]

    def hex_corners(self, coord: Hex) -> list[Vec2]:
        """The 6 world space corners of ``coord``, in :class:`Direction` order."""

        cx, cy = self.hex_to_world_pos(coord)
        return [(cx + x, cy + y) for x, y in self.center_aligned_hex_corners()]

    def rect_size(self) -> Vec2:
        """Size of the bounding rectangle of a single hexagon."""

        if self.orientation is HexOrientation.POINTY:
            return (self.hex_size[0] * SQRT_3, self.hex_size[1] * 2.0)
        return (self.hex_size[0] * 2.0, self.hex_size[1] * SQRT_3)

    def scaled(self, factor: float) -> HexLayout:
        """Same layout with ``hex_size`` multiplied by ``factor``."""

        return replace(self, hex_size=(self.hex_size[0] * factor, self.hex_size[1] * factor))

    def as_dict(self) -> dict[str, object]:
        return {
            "orientation": self.orientation.name,
            "origin": [self.origin[0], self.origin[1]],
            "hex_size": [self.hex_size[0], self.hex_size[1]],
            "invert_x": self.invert_x,
            "invert_y": self.invert_y,
        }

    @classmethod
    def from_dict(cls, data: dict) -> HexLayout:
        try:
            orientation = HexOrientation[data["orientation"]]
        except KeyError as exc:
            raise ValueError(f"unknown hex orientation: {data.get('orientation')!r}") from exc
        origin = data.get("origin", (0.0, 0.0))
        hex_size = data.get("hex_size", (1.0, 1.0))
        return cls(
            orientation=orientation,
            origin=(float(origin[0]), float(origin[1])),
            hex_size=(float(hex_size[0]), float(hex_size[1])),
            invert_x=bool(data.get("invert_x", False)),
            invert_y=bool(data.get("invert_y", False)),
        )


def map_size(radius: int, orientation: HexOrientation, hex_size: float = 1.0) -> Vec2:
    """World size of a hexagonal map of ``radius`` with regular hexes of ``hex_size``."""

    radius = int(radius)
    if radius < 0:
        raise ValueError(f"map radius cannot be negative, got {radius}")
    long_side = hex_size * (3 * radius + 2)
    short_side = hex_size * SQRT_3 * (2 * radius + 1)
    if orientation is HexOrientation.POINTY:
        return short_side, long_side
    return long_side, short_side


def compute_best_fit_layout(
    map_radius: int,
    screen_width_px: int,
    screen_height_px: int,
    orientation: HexOrientation = HexOrientation.POINTY,
    margin_px: int = 0,
    invert_y: bool = False,
) -> HexLayout:
    """Largest regular layout fitting a map of ``map_radius`` centered on the screen."""

    available_width = int(screen_width_px) - 2 * int(margin_px)
    available_height = int(screen_height_px) - 2 * int(margin_px)
    if available_width < 1 or available_height < 1:
        raise ValueError("screen dimensions must leave positive drawable area")

    unit_width, unit_height = map_size(map_radius, orientation)
    size = min(available_width / unit_width, available_height / unit_height)
    return HexLayout(
        orientation=orientation,
        origin=(screen_width_px / 2.0, screen_height_px / 2.0),
        hex_size=(size, size),
        invert_y=invert_y,
    )


__all__ = [
    "Vec2",
    "HexOrientation",
    "HexOrientationData",
    "HexLayout",
    "map_size",
    "compute_best_fit_layout",
]
