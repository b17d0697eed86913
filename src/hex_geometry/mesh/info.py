"""Mesh buffers: parallel vertex, normal, UV and index arrays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import numpy as np

from hex_geometry.config import MAX_VERTEX_INDEX
from hex_geometry.hex import Hex
from hex_geometry.mesh.options import UVOptions
from hex_geometry.mesh.transform import Quat, Vec3

if TYPE_CHECKING:
    from hex_geometry.layout import HexLayout

# Faces are generated in the XZ plane, facing up
BASE_FACING: Final[Vec3] = (0.0, 1.0, 0.0)


def ring_connector_indices(count: int, flip: bool = False) -> np.ndarray:
    """Triangles joining an outer loop ``0..count`` to an inner loop ``count..2*count``.

    Each edge ``(v, n)`` of the outer loop yields the triangles ``(n', n, v)``
    and ``(v, v', n')`` where ``'`` marks the matching inner vertex; ``flip``
    reverses the winding of both.
    """

    indices: list[int] = []
    for v in range(count):
        n = (v + 1) % count
        triangles = ((n + count, n, v), (v, v + count, n + count))
        for triangle in triangles:
            indices.extend(reversed(triangle) if flip else triangle)
    return np.asarray(indices, dtype=np.uint16)


@dataclass(eq=False)
class MeshInfo:
    """Renderable mesh data.

    ``vertices`` and ``normals`` are ``(N, 3)`` float32 arrays, ``uvs`` is an
    ``(N, 2)`` float32 array and ``indices`` a flat uint16 array whose
    consecutive triples are counter clockwise triangles.
    """

    vertices: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    indices: np.ndarray

    def __post_init__(self):
        self.vertices = np.asarray(self.vertices, dtype=np.float32).reshape(-1, 3)
        self.normals = np.asarray(self.normals, dtype=np.float32).reshape(-1, 3)
        self.uvs = np.asarray(self.uvs, dtype=np.float32).reshape(-1, 2)
        self.indices = np.asarray(self.indices, dtype=np.uint16).reshape(-1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeshInfo):
            return NotImplemented
        return bool(
            np.array_equal(self.vertices, other.vertices)
            and np.array_equal(self.normals, other.normals)
            and np.array_equal(self.uvs, other.uvs)
            and np.array_equal(self.indices, other.indices)
        )

    @classmethod
    def empty(cls) -> MeshInfo:
        return cls(
            vertices=np.zeros((0, 3), dtype=np.float32),
            normals=np.zeros((0, 3), dtype=np.float32),
            uvs=np.zeros((0, 2), dtype=np.float32),
            indices=np.zeros(0, dtype=np.uint16),
        )

    # Primitive constructors

    @classmethod
    def quad(cls, corners: tuple[Vec3, Vec3], normal: Vec3, height: float) -> MeshInfo:
        """Vertical quad standing on its ``(left, right)`` bottom corners."""

        from hex_geometry.mesh.primitives import Quad

        return Quad.from_bottom(corners, normal, height).to_mesh()

    @classmethod
    def center_aligned_hexagonal_plane(cls, layout: HexLayout) -> MeshInfo:
        from hex_geometry.mesh.primitives import Hexagon

        return Hexagon.center_aligned(layout).to_mesh()

    @classmethod
    def hexagonal_plane(cls, layout: HexLayout, coord: Hex) -> MeshInfo:
        """Flat hexagon of ``coord`` at its world position."""

        x, y = layout.hex_to_world_pos(coord)
        return cls.center_aligned_hexagonal_plane(layout).with_offset((x, 0.0, y))

    @classmethod
    def center_aligned_hexagonal_outline(cls, inner_layout: HexLayout, outer_layout: HexLayout) -> MeshInfo:
        """Flat ring between the hexagons of ``inner_layout`` and ``outer_layout``.

        The 6 outer corners come first, then the 6 inner ones.
        """

        outer = outer_layout.center_aligned_hex_corners()
        inner = inner_layout.center_aligned_hex_corners()
        vertices = [(x, 0.0, y) for x, y in outer] + [(x, 0.0, y) for x, y in inner]

        ratio = 1.0
        if outer_layout.hex_size[0] != 0.0:
            ratio = inner_layout.hex_size[0] / outer_layout.hex_size[0]
        directions = [(np.cos(angle), np.sin(angle)) for angle in outer_layout.orientation.corner_angles()]
        uvs = [UVOptions.wrap_uv(d) for d in directions]
        uvs += [UVOptions.wrap_uv((dx * ratio, dy * ratio)) for dx, dy in directions]

        return cls(
            vertices=vertices,
            normals=[BASE_FACING] * 12,
            uvs=uvs,
            indices=ring_connector_indices(6),
        )

    # Counts

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def is_empty(self) -> bool:
        return len(self.vertices) == 0

    # Combination

    def copy(self) -> MeshInfo:
        return MeshInfo(self.vertices.copy(), self.normals.copy(), self.uvs.copy(), self.indices.copy())

    def merge_with(self, other: MeshInfo) -> MeshInfo:
        """Appends ``other`` in place, rebasing its indices past the current vertices.

        Returns ``self`` so merges can be chained.
        """

        base = self.vertex_count
        total = base + other.vertex_count
        if total - 1 > MAX_VERTEX_INDEX:
            raise ValueError(
                f"merged mesh would hold {total} vertices, more than 16-bit indices can address"
            )

        rebased = other.indices.astype(np.uint32) + base
        self.vertices = np.concatenate([self.vertices, other.vertices])
        self.normals = np.concatenate([self.normals, other.normals])
        self.uvs = np.concatenate([self.uvs, other.uvs])
        self.indices = np.concatenate([self.indices, rebased.astype(np.uint16)])
        return self

    def __add__(self, other: MeshInfo) -> MeshInfo:
        if not isinstance(other, MeshInfo):
            return NotImplemented
        return self.copy().merge_with(other)

    # Transforms, each returning a new mesh

    def with_offset(self, offset: Vec3) -> MeshInfo:
        result = self.copy()
        result.vertices += np.asarray(offset, dtype=np.float32)
        return result

    def rotated(self, rotation: Quat) -> MeshInfo:
        """Rotates vertices and normals."""

        matrix = rotation.to_matrix().T
        result = self.copy()
        result.vertices = (self.vertices.astype(np.float64) @ matrix).astype(np.float32)
        result.normals = (self.normals.astype(np.float64) @ matrix).astype(np.float32)
        return result

    def scaled(self, factor: Vec3 | float) -> MeshInfo:
        """Scales vertex positions only."""

        result = self.copy()
        result.vertices *= np.asarray(factor, dtype=np.float32)
        return result

    def with_uv_options(self, options: UVOptions) -> MeshInfo:
        result = self.copy()
        result.uvs = options.alter_uvs(self.uvs)
        return result

    # Output

    def validate(self):
        """Raises ``ValueError`` when the buffers are not a consistent mesh."""

        count = self.vertex_count
        if len(self.normals) != count or len(self.uvs) != count:
            raise ValueError(
                f"inconsistent mesh buffers: {count} vertices, {len(self.normals)} normals, {len(self.uvs)} uvs"
            )
        if len(self.indices) % 3 != 0:
            raise ValueError(f"index count {len(self.indices)} is not a multiple of 3")
        if len(self.indices) and int(self.indices.max()) >= count:
            raise ValueError(f"index {int(self.indices.max())} out of range for {count} vertices")

    def interleaved(self) -> np.ndarray:
        """``(N, 8)`` float32 buffer of position, normal and uv per vertex."""

        return np.hstack([self.vertices, self.normals, self.uvs]).astype(np.float32)

    def triangles(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)


__all__ = ["MeshInfo", "BASE_FACING", "ring_connector_indices"]
