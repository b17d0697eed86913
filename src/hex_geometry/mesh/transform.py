"""Vector helpers and the quaternion used to orient meshes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from hex_geometry.config import NORMAL_EPSILON

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def scale(v: Vec3, s: float) -> Vec3:
    return (v[0] * s, v[1] * s, v[2] * s)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(v: Vec3) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: Vec3) -> Vec3:
    """Unit vector of ``v``; raises ``ValueError`` for a zero-length vector."""

    ln = length(v)
    if ln < NORMAL_EPSILON:
        raise ValueError(f"cannot normalize zero-length vector {v}")
    return (v[0] / ln, v[1] / ln, v[2] / ln)


def normalize_or_zero(v: Vec3) -> Vec3:
    ln = length(v)
    if ln < NORMAL_EPSILON:
        return (0.0, 0.0, 0.0)
    return (v[0] / ln, v[1] / ln, v[2] / ln)


@dataclass(frozen=True)
class Quat:
    """Unit quaternion ``(x, y, z, w)`` describing a 3D rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar[Quat]

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        ax, ay, az = normalize(axis)
        s = math.sin(angle / 2.0)
        return cls(ax * s, ay * s, az * s, math.cos(angle / 2.0))

    @classmethod
    def from_rotation_arc(cls, start: Vec3, end: Vec3) -> Quat:
        """Shortest rotation turning the unit vector ``start`` onto the unit vector ``end``."""

        d = dot(start, end)
        if d >= 1.0 - NORMAL_EPSILON:
            return cls.IDENTITY
        if d <= -1.0 + NORMAL_EPSILON:
            # Opposite vectors: half turn around any axis orthogonal to start
            axis = cross(start, (1.0, 0.0, 0.0))
            if length(axis) < NORMAL_EPSILON:
                axis = cross(start, (0.0, 0.0, 1.0))
            return cls.from_axis_angle(axis, math.pi)
        cx, cy, cz = cross(start, end)
        return cls(cx, cy, cz, 1.0 + d).normalized()

    def normalized(self) -> Quat:
        norm = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)
        return Quat(self.x / norm, self.y / norm, self.z / norm, self.w / norm)

    def __mul__(self, other: Quat) -> Quat:
        """Composition: ``(a * b)`` rotates by ``b`` first, then by ``a``."""

        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    def mul_vec3(self, v: Vec3) -> Vec3:
        q = (self.x, self.y, self.z)
        t = scale(cross(q, v), 2.0)
        return add(add(v, scale(t, self.w)), cross(q, t))

    def to_matrix(self) -> np.ndarray:
        """3x3 rotation matrix, applied to column vectors."""

        x, y, z, w = self.x, self.y, self.z, self.w
        return np.array(
            [
                [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y)],
                [2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x)],
                [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y)],
            ],
            dtype=np.float64,
        )


Quat.IDENTITY = Quat()


__all__ = [
    "Vec2",
    "Vec3",
    "Quat",
    "add",
    "scale",
    "dot",
    "cross",
    "length",
    "normalize",
    "normalize_or_zero",
]
