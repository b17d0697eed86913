"""UV and inset configuration records consumed by the mesh builders."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from hex_geometry.config import DEFAULT_INSET_AMOUNT
from hex_geometry.mesh.transform import Vec2


@dataclass(frozen=True)
class UVOptions:
    """UV remapping applied to a built mesh: flip, then scale, then offset."""

    scale_factor: Vec2 = (1.0, 1.0)
    flip_u: bool = False
    flip_v: bool = False
    offset: Vec2 = (0.0, 0.0)

    @staticmethod
    def wrap_uv(v: Vec2) -> Vec2:
        """Maps a unit direction in ``[-1, 1]`` to the ``[0, 1]`` UV square."""

        return (v[0] / 2.0 + 0.5, v[1] / 2.0 + 0.5)

    def with_scale_factor(self, scale_factor: Vec2) -> UVOptions:
        return replace(self, scale_factor=(float(scale_factor[0]), float(scale_factor[1])))

    def with_flip_u(self) -> UVOptions:
        return replace(self, flip_u=not self.flip_u)

    def with_flip_v(self) -> UVOptions:
        return replace(self, flip_v=not self.flip_v)

    def with_offset(self, offset: Vec2) -> UVOptions:
        return replace(self, offset=(float(offset[0]), float(offset[1])))

    def is_identity(self) -> bool:
        return self == UVOptions()

    def alter_uv(self, uv: Vec2) -> Vec2:
        u, v = uv
        if self.flip_u:
            u = 1.0 - u
        if self.flip_v:
            v = 1.0 - v
        return (u * self.scale_factor[0] + self.offset[0], v * self.scale_factor[1] + self.offset[1])

    def alter_uvs(self, uvs: np.ndarray) -> np.ndarray:
        """Remapped copy of an ``(N, 2)`` UV array."""

        result = np.array(uvs, dtype=np.float32, copy=True).reshape(-1, 2)
        if self.flip_u:
            result[:, 0] = 1.0 - result[:, 0]
        if self.flip_v:
            result[:, 1] = 1.0 - result[:, 1]
        result *= np.asarray(self.scale_factor, dtype=np.float32)
        result += np.asarray(self.offset, dtype=np.float32)
        return result


class InsetMode(Enum):
    """How the inset boundary of a face is computed."""

    # Each vertex moves toward the face centroid by a fraction of the way
    SCALE = "scale"
    # Each vertex moves a fixed distance along the bisector of its edges
    DISTANCE = "distance"


@dataclass(frozen=True)
class InsetOptions:
    mode: InsetMode = InsetMode.SCALE
    amount: float = DEFAULT_INSET_AMOUNT
    keep_inner_face: bool = True

    @classmethod
    def scale(cls, amount: float, keep_inner_face: bool = True) -> InsetOptions:
        return cls(InsetMode.SCALE, float(amount), keep_inner_face)

    @classmethod
    def distance(cls, amount: float, keep_inner_face: bool = True) -> InsetOptions:
        return cls(InsetMode.DISTANCE, float(amount), keep_inner_face)

    def should_flip(self) -> bool:
        """Whether the inset boundary lies outside the original one."""

        return self.amount < 0.0


__all__ = ["UVOptions", "InsetMode", "InsetOptions"]
