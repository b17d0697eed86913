"""Hexagonal outline (border ring) meshes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from hex_geometry.config import OUTLINE_SCALE
from hex_geometry.hex import Hex
from hex_geometry.layout import HexLayout
from hex_geometry.mesh.builder import MeshPlacement
from hex_geometry.mesh.info import MeshInfo
from hex_geometry.mesh.options import UVOptions
from hex_geometry.mesh.transform import Quat, Vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutlineMeshBuilder(MeshPlacement):
    """Builds the flat ring between a hex and the same hex scaled by ``OUTLINE_SCALE``."""

    layout: HexLayout
    pos: Hex = Hex.ZERO
    offset: Vec3 | None = None
    rotation: Quat | None = None
    scale: Vec3 | None = None
    centered: bool = False
    uv_options: UVOptions = UVOptions()

    def with_uv_options(self, uv_options: UVOptions) -> OutlineMeshBuilder:
        return replace(self, uv_options=uv_options)

    def build(self) -> MeshInfo:
        larger = self.layout.scaled(OUTLINE_SCALE)
        mesh = MeshInfo.center_aligned_hexagonal_outline(self.layout, larger)
        mesh = self._place(mesh.with_uv_options(self.uv_options))
        logger.debug("Built outline mesh at %s: %d vertices", self.pos, mesh.vertex_count)
        return mesh


__all__ = ["OutlineMeshBuilder"]
