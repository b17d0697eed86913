"""Flat hexagonal plane meshes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from hex_geometry.hex import Hex
from hex_geometry.layout import HexLayout
from hex_geometry.mesh.builder import MeshPlacement
from hex_geometry.mesh.info import MeshInfo
from hex_geometry.mesh.options import InsetOptions, UVOptions
from hex_geometry.mesh.primitives import Hexagon
from hex_geometry.mesh.transform import Quat, Vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaneMeshBuilder(MeshPlacement):
    """Builds the single hexagonal face of a hex, optionally inset."""

    layout: HexLayout
    pos: Hex = Hex.ZERO
    offset: Vec3 | None = None
    rotation: Quat | None = None
    scale: Vec3 | None = None
    centered: bool = False
    uv_options: UVOptions = UVOptions()
    inset_options: InsetOptions | None = None

    def with_uv_options(self, uv_options: UVOptions) -> PlaneMeshBuilder:
        return replace(self, uv_options=uv_options)

    def with_inset_options(self, inset_options: InsetOptions) -> PlaneMeshBuilder:
        return replace(self, inset_options=inset_options)

    def build(self) -> MeshInfo:
        face = Hexagon.center_aligned(self.layout)
        if self.inset_options is not None:
            mesh = face.inset(self.inset_options)
        else:
            mesh = face.to_mesh()
        mesh = self._place(mesh.with_uv_options(self.uv_options))
        logger.debug(
            "Built plane mesh at %s: %d vertices, %d triangles",
            self.pos,
            mesh.vertex_count,
            mesh.triangle_count,
        )
        return mesh


__all__ = ["PlaneMeshBuilder"]
