"""Placement options shared by the mesh builders."""

from __future__ import annotations

import numbers
from dataclasses import replace

from hex_geometry.hex import Hex
from hex_geometry.mesh.info import BASE_FACING, MeshInfo
from hex_geometry.mesh.transform import Quat, Vec3, add, normalize


class MeshPlacement:
    """Fluent placement methods for frozen builder dataclasses.

    Builders declare the ``layout``, ``pos``, ``offset``, ``rotation``,
    ``scale`` and ``centered`` fields; every method returns a modified copy.
    """

    def at(self, pos: Hex):
        """Places the mesh on the hex ``pos``."""

        return replace(self, pos=pos)

    def facing(self, facing: Vec3):
        """Rotates the mesh so its up axis points along ``facing``."""

        unit = normalize(facing)
        return replace(self, rotation=Quat.from_rotation_arc(BASE_FACING, unit))

    def with_rotation(self, rotation: Quat):
        return replace(self, rotation=rotation)

    def with_offset(self, offset: Vec3):
        return replace(self, offset=(float(offset[0]), float(offset[1]), float(offset[2])))

    def with_scale(self, scale: Vec3 | float):
        if isinstance(scale, numbers.Real):
            scale = (scale, scale, scale)
        return replace(self, scale=(float(scale[0]), float(scale[1]), float(scale[2])))

    def center_aligned(self):
        """Ignores the layout origin when placing the mesh."""

        return replace(self, centered=True)

    def _place(self, mesh: MeshInfo) -> MeshInfo:
        # Scale, then rotate, then translate
        if self.centered:
            x, y = self.layout.hex_to_center_aligned_world_pos(self.pos)
        else:
            x, y = self.layout.hex_to_world_pos(self.pos)
        if self.scale is not None:
            mesh = mesh.scaled(self.scale)
        if self.rotation is not None:
            mesh = mesh.rotated(self.rotation)
        translation = (x, 0.0, y)
        if self.offset is not None:
            translation = add(translation, self.offset)
        return mesh.with_offset(translation)


__all__ = ["MeshPlacement"]
