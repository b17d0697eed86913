"""Hexagonal column (prism) meshes."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from hex_geometry.hex import Hex
from hex_geometry.layout import HexLayout
from hex_geometry.mesh.builder import MeshPlacement
from hex_geometry.mesh.info import MeshInfo
from hex_geometry.mesh.options import InsetOptions, UVOptions
from hex_geometry.mesh.primitives import Hexagon, Quad
from hex_geometry.mesh.transform import Quat, Vec3, normalize_or_zero

logger = logging.getLogger(__name__)

# Half turn about X: keeps x and mirrors z, so the cap faces down
_BOTTOM_CAP_ROTATION = Quat.from_axis_angle((1.0, 0.0, 0.0), math.pi)


@dataclass(frozen=True)
class ColumnMeshBuilder(MeshPlacement):
    """Builds a hexagonal column of ``height`` standing on the XZ plane.

    The sides are ``subdivisions`` stacked rings of 6 quads; the top cap sits
    at ``height`` and the bottom cap faces down at ``0``.
    """

    layout: HexLayout
    height: float
    pos: Hex = Hex.ZERO
    offset: Vec3 | None = None
    rotation: Quat | None = None
    scale: Vec3 | None = None
    centered: bool = False
    subdivisions: int = 1
    top_face: bool = True
    bottom_face: bool = True
    sides_uv_options: UVOptions = UVOptions()
    caps_uv_options: UVOptions = UVOptions()
    caps_inset_options: InsetOptions | None = None

    def with_subdivisions(self, subdivisions: int) -> ColumnMeshBuilder:
        return replace(self, subdivisions=max(int(subdivisions), 1))

    def without_top_face(self) -> ColumnMeshBuilder:
        return replace(self, top_face=False)

    def without_bottom_face(self) -> ColumnMeshBuilder:
        return replace(self, bottom_face=False)

    def with_sides_uv_options(self, uv_options: UVOptions) -> ColumnMeshBuilder:
        return replace(self, sides_uv_options=uv_options)

    def with_caps_uv_options(self, uv_options: UVOptions) -> ColumnMeshBuilder:
        return replace(self, caps_uv_options=uv_options)

    def with_caps_inset_options(self, inset_options: InsetOptions) -> ColumnMeshBuilder:
        return replace(self, caps_inset_options=inset_options)

    def _sides(self) -> MeshInfo:
        subdivisions = max(self.subdivisions, 1)
        delta = self.height / subdivisions
        corners = self.layout.center_aligned_hex_corners()
        sides = MeshInfo.empty()
        for div in range(subdivisions):
            y = delta * div
            for i, (left_x, left_z) in enumerate(corners):
                right_x, right_z = corners[(i + 1) % 6]
                normal = normalize_or_zero((left_x + right_x, 0.0, left_z + right_z))
                quad = Quad.from_bottom(((left_x, y, left_z), (right_x, y, right_z)), normal, delta).to_mesh()
                # Each ring covers its own slice of the v range
                quad.uvs[:, 1] = (quad.uvs[:, 1] + div) / subdivisions
                sides.merge_with(quad)
        return sides.with_uv_options(self.sides_uv_options)

    def _cap(self) -> MeshInfo:
        face = Hexagon.center_aligned(self.layout)
        if self.caps_inset_options is not None:
            cap = face.inset(self.caps_inset_options)
        else:
            cap = face.to_mesh()
        return cap.with_uv_options(self.caps_uv_options)

    def build(self) -> MeshInfo:
        mesh = self._sides()
        if self.top_face or self.bottom_face:
            cap = self._cap()
            if self.top_face:
                mesh.merge_with(cap.with_offset((0.0, self.height, 0.0)))
            if self.bottom_face:
                mesh.merge_with(cap.rotated(_BOTTOM_CAP_ROTATION))
        mesh = self._place(mesh)
        logger.debug(
            "Built column mesh at %s (%d subdivisions): %d vertices, %d triangles",
            self.pos,
            self.subdivisions,
            mesh.vertex_count,
            mesh.triangle_count,
        )
        return mesh


__all__ = ["ColumnMeshBuilder"]
