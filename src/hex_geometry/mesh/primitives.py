"""Primitive faces: quads for column sides and hexagons for caps and planes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from hex_geometry.config import NORMAL_EPSILON
from hex_geometry.mesh.info import BASE_FACING, MeshInfo, ring_connector_indices
from hex_geometry.mesh.options import InsetMode, InsetOptions, UVOptions
from hex_geometry.mesh.transform import Vec2, Vec3

if TYPE_CHECKING:
    from hex_geometry.layout import HexLayout


def _unit_rows(vectors: np.ndarray) -> np.ndarray:
    lengths = np.linalg.norm(vectors, axis=1, keepdims=True)
    return np.divide(vectors, lengths, out=np.zeros_like(vectors), where=lengths >= NORMAL_EPSILON)


def _toward_centroid(points: np.ndarray, amount: float) -> np.ndarray:
    centroid = points.mean(axis=0)
    return points + (centroid - points) * amount


def _along_bisectors(points: np.ndarray, amount: float) -> np.ndarray:
    previous = np.roll(points, 1, axis=0)
    following = np.roll(points, -1, axis=0)
    bisectors = _unit_rows(following - points) + _unit_rows(previous - points)
    return points + _unit_rows(bisectors) * amount


@dataclass(eq=False)
class Face:
    """A closed loop of vertices with a fixed triangulation.

    ``positions`` and ``normals`` are ``(N, 3)``, ``uvs`` is ``(N, 2)`` and
    ``triangles`` is ``(T, 3)``. Subclasses pin ``N`` and ``T``.
    """

    positions: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    triangles: np.ndarray

    VERTEX_COUNT: ClassVar[int | None] = None
    TRIANGLE_COUNT: ClassVar[int | None] = None

    def __post_init__(self):
        self.positions = np.asarray(self.positions, dtype=np.float64)
        self.normals = np.asarray(self.normals, dtype=np.float64)
        self.uvs = np.asarray(self.uvs, dtype=np.float64)
        self.triangles = np.asarray(self.triangles, dtype=np.uint16)

        if self.positions.ndim != 2 or self.positions.shape[1] != 3:
            raise ValueError(f"face positions must be an (N, 3) array, got shape {self.positions.shape}")
        count = len(self.positions)
        if self.normals.shape != (count, 3):
            raise ValueError(f"face normals must have shape ({count}, 3), got {self.normals.shape}")
        if self.uvs.shape != (count, 2):
            raise ValueError(f"face uvs must have shape ({count}, 2), got {self.uvs.shape}")
        if self.triangles.ndim != 2 or self.triangles.shape[1] != 3:
            raise ValueError(f"face triangles must be a (T, 3) array, got shape {self.triangles.shape}")
        if self.VERTEX_COUNT is not None and count != self.VERTEX_COUNT:
            raise ValueError(f"{type(self).__name__} needs {self.VERTEX_COUNT} vertices, got {count}")
        if self.TRIANGLE_COUNT is not None and len(self.triangles) != self.TRIANGLE_COUNT:
            raise ValueError(
                f"{type(self).__name__} needs {self.TRIANGLE_COUNT} triangles, got {len(self.triangles)}"
            )
        if self.triangles.size and int(self.triangles.max()) >= count:
            raise ValueError(f"triangle index {int(self.triangles.max())} out of range for {count} vertices")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return bool(
            type(self) is type(other)
            and np.array_equal(self.positions, other.positions)
            and np.array_equal(self.normals, other.normals)
            and np.array_equal(self.uvs, other.uvs)
            and np.array_equal(self.triangles, other.triangles)
        )

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    def centroid(self) -> Vec3:
        x, y, z = self.positions.mean(axis=0)
        return (float(x), float(y), float(z))

    def uv_centroid(self) -> Vec2:
        u, v = self.uvs.mean(axis=0)
        return (float(u), float(v))

    def to_mesh(self) -> MeshInfo:
        return MeshInfo(
            vertices=self.positions,
            normals=self.normals,
            uvs=self.uvs,
            indices=self.triangles.reshape(-1),
        )

    def inset(self, options: InsetOptions) -> MeshInfo:
        """Shrinks a copy of the face and stitches it to the original boundary.

        The output holds the original ``N`` vertices followed by the ``N``
        inset ones. Its indices are the ``6 * N`` ring connector indices,
        then the inset face triangles when ``options.keep_inner_face`` is set.
        The original face triangles are dropped.
        """

        if options.mode is InsetMode.SCALE:
            inner_positions = _toward_centroid(self.positions, options.amount)
            inner_uvs = _toward_centroid(self.uvs, options.amount)
        else:
            inner_positions = _along_bisectors(self.positions, options.amount)
            inner_uvs = _along_bisectors(self.uvs, options.amount)

        count = self.vertex_count
        indices = [ring_connector_indices(count, flip=options.should_flip())]
        if options.keep_inner_face:
            indices.append(self.triangles.reshape(-1) + count)

        return MeshInfo(
            vertices=np.concatenate([self.positions, inner_positions]),
            normals=np.concatenate([self.normals, self.normals]),
            uvs=np.concatenate([self.uvs, inner_uvs]),
            indices=np.concatenate(indices),
        )


class Quad(Face):
    """4 vertices, 2 triangles."""

    VERTEX_COUNT = 4
    TRIANGLE_COUNT = 2

    @classmethod
    def from_bottom(cls, corners: tuple[Vec3, Vec3], normal: Vec3, height: float) -> Quad:
        """Vertical quad rising ``height`` above its ``(left, right)`` bottom corners.

        Vertex order is ``right, right + up, left + up, left``::

            2 - 1
            | \\ |
            3 - 0
        """

        left = np.asarray(corners[0], dtype=np.float64)
        right = np.asarray(corners[1], dtype=np.float64)
        up = np.asarray(BASE_FACING, dtype=np.float64) * height
        return cls(
            positions=[right, right + up, left + up, left],
            normals=[normal] * 4,
            uvs=[(1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)],
            triangles=[(2, 1, 0), (0, 3, 2)],
        )


class Hexagon(Face):
    """6 vertices, 4 triangles."""

    VERTEX_COUNT = 6
    TRIANGLE_COUNT = 4

    @classmethod
    def center_aligned(cls, layout: HexLayout) -> Hexagon:
        """Flat hexagon of ``layout`` centered on the origin, facing :data:`BASE_FACING`.

        UVs wrap the unit corner directions rather than the scaled corner
        positions, so every ``hex_size`` maps onto the full UV square.
        """

        corners = layout.center_aligned_hex_corners()
        uvs = [UVOptions.wrap_uv((np.cos(angle), np.sin(angle))) for angle in layout.orientation.corner_angles()]
        return cls(
            positions=[(x, 0.0, y) for x, y in corners],
            normals=[BASE_FACING] * 6,
            uvs=uvs,
            # Two end triangles, then the middle quad split in two
            triangles=[(0, 2, 1), (3, 5, 4), (0, 5, 3), (3, 2, 0)],
        )


__all__ = ["Face", "Quad", "Hexagon"]
