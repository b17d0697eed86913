"""Procedural mesh generation for hexagonal tiles."""

from .column import ColumnMeshBuilder
from .info import BASE_FACING, MeshInfo
from .options import InsetMode, InsetOptions, UVOptions
from .outline import OutlineMeshBuilder
from .plane import PlaneMeshBuilder
from .primitives import Face, Hexagon, Quad
from .transform import Quat

__all__ = [
    "BASE_FACING",
    "MeshInfo",
    "Face",
    "Quad",
    "Hexagon",
    "Quat",
    "UVOptions",
    "InsetMode",
    "InsetOptions",
    "ColumnMeshBuilder",
    "PlaneMeshBuilder",
    "OutlineMeshBuilder",
]
