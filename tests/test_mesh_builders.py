import numpy as np
import numpy.testing as npt
import pytest

from hex_geometry import Hex, HexLayout, HexOrientation
from hex_geometry.config import OUTLINE_SCALE
from hex_geometry.mesh import ColumnMeshBuilder, InsetOptions, OutlineMeshBuilder, PlaneMeshBuilder, Quat, UVOptions


def _centroid(mesh):
    return mesh.vertices.astype(np.float64).mean(axis=0)


def test_column_vertex_counts():
    layout = HexLayout()
    full = ColumnMeshBuilder(layout, 2.0).build()
    assert full.vertex_count == 24 + 6 + 6
    full.validate()

    no_bottom = ColumnMeshBuilder(layout, 2.0).without_bottom_face().build()
    assert no_bottom.vertex_count == 24 + 6
    assert int(no_bottom.indices.max()) < no_bottom.vertex_count

    sides_only = ColumnMeshBuilder(layout, 2.0).without_top_face().without_bottom_face().build()
    assert sides_only.vertex_count == 24
    assert sides_only.triangle_count == 12

    subdivided = ColumnMeshBuilder(layout, 2.0).with_subdivisions(3).build()
    assert subdivided.vertex_count == 24 * 3 + 12
    subdivided.validate()

    assert ColumnMeshBuilder(layout, 2.0).with_subdivisions(0).build().vertex_count == 36


def test_column_caps_and_sides():
    mesh = ColumnMeshBuilder(HexLayout(), 3.0).with_subdivisions(2).build()
    sides = slice(0, 48)
    top = slice(48, 54)
    bottom = slice(54, 60)

    npt.assert_allclose(mesh.vertices[top, 1], 3.0, atol=1e-6)
    npt.assert_allclose(mesh.normals[top], [(0.0, 1.0, 0.0)] * 6, atol=1e-6)
    npt.assert_allclose(mesh.vertices[bottom, 1], 0.0, atol=1e-6)
    npt.assert_allclose(mesh.normals[bottom], [(0.0, -1.0, 0.0)] * 6, atol=1e-6)

    side_normals = mesh.normals[sides]
    npt.assert_allclose(side_normals[:, 1], 0.0, atol=1e-6)
    npt.assert_allclose(np.linalg.norm(side_normals, axis=1), 1.0, atol=1e-6)
    assert mesh.vertices[sides, 1].min() == pytest.approx(0.0)
    assert mesh.vertices[sides, 1].max() == pytest.approx(3.0)

    first_ring_v = mesh.uvs[0:24, 1]
    second_ring_v = mesh.uvs[24:48, 1]
    assert first_ring_v.min() == pytest.approx(0.0)
    assert first_ring_v.max() == pytest.approx(0.5)
    assert second_ring_v.min() == pytest.approx(0.5)
    assert second_ring_v.max() == pytest.approx(1.0)


def test_side_normals_point_outward():
    mesh = ColumnMeshBuilder(HexLayout(), 1.0).without_top_face().without_bottom_face().build()
    for quad in range(6):
        vertices = mesh.vertices[quad * 4:(quad + 1) * 4].astype(np.float64)
        normal = mesh.normals[quad * 4]
        center = vertices.mean(axis=0)
        assert np.dot(normal, center) > 0
        a, b, c = vertices[2], vertices[1], vertices[0]
        assert np.dot(np.cross(b - a, c - a), normal) > 0


def test_column_caps_inset():
    mesh = ColumnMeshBuilder(HexLayout(), 1.0).with_caps_inset_options(InsetOptions.scale(0.3)).build()
    assert mesh.vertex_count == 24 + 12 + 12
    mesh.validate()


def test_zero_height_column_is_degenerate_but_valid():
    mesh = ColumnMeshBuilder(HexLayout(), 0.0).build()
    mesh.validate()
    assert not np.isnan(mesh.normals).any()


def test_builders_are_reusable_copies():
    base = PlaneMeshBuilder(HexLayout())
    moved = base.at(Hex(2, -1))
    assert base.pos == Hex.ZERO
    assert moved.pos == Hex(2, -1)
    first = moved.build()
    second = moved.build()
    npt.assert_array_equal(first.vertices, second.vertices)
    npt.assert_array_equal(first.indices, second.indices)


def test_facing_rejects_zero_vector():
    with pytest.raises(ValueError):
        PlaneMeshBuilder(HexLayout()).facing((0.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        ColumnMeshBuilder(HexLayout(), 1.0).facing((0.0, 0.0, 0.0))


def test_scale_rotate_translate_order():
    layout = HexLayout(orientation=HexOrientation.FLAT, origin=(3.0, 1.0))
    coord = Hex(1, 2)
    x, y = layout.hex_to_world_pos(coord)

    plane = PlaneMeshBuilder(layout).at(coord).with_scale(2.0).facing((1.0, 0.0, 0.0)).build()
    npt.assert_allclose(_centroid(plane), (x, 0.0, y), atol=1e-5)
    npt.assert_allclose(plane.normals, [(1.0, 0.0, 0.0)] * 6, atol=1e-6)
    radii = np.linalg.norm(plane.vertices.astype(np.float64) - (x, 0.0, y), axis=1)
    npt.assert_allclose(radii, 2.0, atol=1e-5)

    offset = PlaneMeshBuilder(layout).at(coord).with_offset((0.0, 5.0, 0.0)).build()
    npt.assert_allclose(_centroid(offset), (x, 5.0, y), atol=1e-5)


def test_column_rotation_tips_top_cap():
    layout = HexLayout()
    mesh = ColumnMeshBuilder(layout, 4.0).with_rotation(Quat.from_axis_angle((0.0, 0.0, 1.0), -np.pi / 2)).build()
    top = mesh.vertices[24:30].astype(np.float64)
    npt.assert_allclose(top[:, 0], 4.0, atol=1e-5)


def test_center_aligned_ignores_origin():
    layout = HexLayout(origin=(5.0, 5.0))
    placed = PlaneMeshBuilder(layout).build()
    centered = PlaneMeshBuilder(layout).center_aligned().build()
    npt.assert_allclose(_centroid(placed), (5.0, 0.0, 5.0), atol=1e-5)
    npt.assert_allclose(_centroid(centered), (0.0, 0.0, 0.0), atol=1e-5)


def test_plane_inset_and_uv_options():
    layout = HexLayout()
    plain = PlaneMeshBuilder(layout).build()
    assert plain.vertex_count == 6
    assert plain.triangle_count == 4

    inset = PlaneMeshBuilder(layout).with_inset_options(InsetOptions.scale(0.2)).build()
    assert inset.vertex_count == 12
    assert len(inset.indices) == 48

    flipped = PlaneMeshBuilder(layout).with_uv_options(UVOptions().with_flip_u()).build()
    npt.assert_allclose(flipped.uvs[:, 0], 1.0 - plain.uvs[:, 0], atol=1e-6)
    npt.assert_allclose(flipped.uvs[:, 1], plain.uvs[:, 1], atol=1e-6)


def test_outline():
    layout = HexLayout(hex_size=(2.0, 2.0))
    mesh = OutlineMeshBuilder(layout).build()
    assert mesh.vertex_count == 12
    assert len(mesh.indices) == 36
    mesh.validate()
    radii = np.linalg.norm(mesh.vertices.astype(np.float64), axis=1)
    npt.assert_allclose(radii[:6], 2.0 * OUTLINE_SCALE, atol=1e-5)
    npt.assert_allclose(radii[6:], 2.0, atol=1e-5)

    vertices = mesh.vertices.astype(np.float64)
    tris = mesh.triangles()
    normals = np.cross(vertices[tris[:, 1]] - vertices[tris[:, 0]], vertices[tris[:, 2]] - vertices[tris[:, 0]])
    assert np.all(normals[:, 1] > 0)


def test_repeated_builds_are_equal():
    layout = HexLayout(orientation=HexOrientation.FLAT, origin=(2.0, -1.0))
    builders = [
        PlaneMeshBuilder(layout).at(Hex(1, 1)).with_inset_options(InsetOptions.distance(0.1)),
        ColumnMeshBuilder(layout, 2.5).with_subdivisions(2).facing((0.0, 0.0, 1.0)),
        OutlineMeshBuilder(layout).with_scale(1.5),
    ]
    for builder in builders:
        assert builder.build() == builder.build()
    assert builders[0].build() != builders[0].at(Hex(0, 1)).build()


def test_numpy_scalar_scale():
    mesh = PlaneMeshBuilder(HexLayout()).with_scale(np.float32(2.0)).build()
    npt.assert_allclose(np.linalg.norm(mesh.vertices.astype(np.float64), axis=1), 2.0, atol=1e-5)


def test_bottom_cap_mirrors_top_cap_along_z():
    mesh = ColumnMeshBuilder(HexLayout(), 1.0).build()
    top = mesh.vertices[24:30].astype(np.float64)
    bottom = mesh.vertices[30:36].astype(np.float64)
    npt.assert_allclose(bottom[:, 0], top[:, 0], atol=1e-6)
    npt.assert_allclose(bottom[:, 2], -top[:, 2], atol=1e-6)
    npt.assert_allclose(mesh.uvs[30:36], mesh.uvs[24:30], atol=1e-6)
