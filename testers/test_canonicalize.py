# -*- coding: utf-8 -*-
import logging

import numpy as np
import pytest

from conftest import assert_valid_geometry
from meshkit.geometry import Geometry, GeometryError
from meshkit.mesh.canonicalize import canonicalize, remove_degenerate_faces, remove_unused_vertices
from meshkit.primitives import PlaneOptions, create_plane


def test_unused_vertices_remapped():
    geometry = Geometry(
        name="gaps",
        positions=[9, 9, 9, 0, 0, 0, 1, 0, 0, 9, 9, 9, 0, 1, 0],
        indices=[1, 2, 4],
        tex_coords=[5, 5, 0, 0, 1, 0, 5, 5, 0, 1],
    )
    result = remove_unused_vertices(geometry)
    assert result is geometry
    assert geometry.vertex_count == 3
    assert geometry.indices.tolist() == [0, 1, 2]
    assert geometry.positions.tolist() == [0, 0, 0, 1, 0, 0, 0, 1, 0]
    assert geometry.tex_coords.tolist() == [0, 0, 1, 0, 0, 1]
    # отсутствующие атрибуты остаются пустыми
    assert len(geometry.normals) == 0


def test_unused_vertices_noop(quad, caplog):
    before = quad.positions.copy()
    with caplog.at_level(logging.INFO, logger="meshkit"):
        remove_unused_vertices(quad)
    assert np.array_equal(quad.positions, before)
    assert quad.indices.tolist() == [0, 1, 2, 0, 2, 3]
    assert "unused vertices" not in caplog.text


def test_degenerate_faces_removed_positions_kept(caplog):
    geometry = Geometry(
        name="sliver",
        positions=[0, 0, 0, 1, 0, 0, 0, 1, 0, 2, 0, 0],
        indices=[0, 1, 2, 0, 1, 3, 2, 2, 1],
    )
    with caplog.at_level(logging.INFO, logger="meshkit"):
        remove_degenerate_faces(geometry)
    assert geometry.indices.tolist() == [0, 1, 2]
    assert geometry.vertex_count == 4
    assert "Removed 2 degenerate faces" in caplog.text


def test_degenerate_threshold_scales_with_mesh():
    plane = create_plane("tiny", PlaneOptions(width=1e-4, height=1e-4, width_segments=4, height_segments=4))
    faces = plane.face_count
    remove_degenerate_faces(plane)
    assert plane.face_count == faces


def test_degenerate_epsilon_override():
    plane = create_plane("plane", PlaneOptions())
    remove_degenerate_faces(plane, epsilon=10.0)
    assert plane.face_count == 0


def test_degenerate_2d_positions():
    geometry = Geometry(
        name="flat",
        positions=[0, 0, 1, 0, 1, 1, 2, 2],
        indices=[0, 1, 2, 0, 2, 3],
        position_size=2,
    )
    remove_degenerate_faces(geometry)
    # вторая грань лежит на одной прямой
    assert geometry.indices.tolist() == [0, 1, 2]


def test_canonicalize_is_idempotent():
    geometry = Geometry(
        name="mixed",
        positions=[0, 0, 0, 1, 0, 0, 0, 1, 0, 5, 5, 5, 2, 0, 0],
        indices=[0, 1, 2, 0, 1, 4],
        normals=[0, 0, 1] * 5,
    )
    canonicalize(geometry)
    assert geometry.vertex_count == 3
    assert geometry.indices.tolist() == [0, 1, 2]
    assert len(geometry.normals) == 9

    snapshot = (geometry.positions.copy(), geometry.indices.copy())
    canonicalize(geometry)
    assert np.array_equal(geometry.positions, snapshot[0])
    assert np.array_equal(geometry.indices, snapshot[1])


def test_canonicalize_keeps_valid_mesh(quad):
    canonicalize(quad)
    assert_valid_geometry(quad)
    assert quad.face_count == 2
    assert quad.vertex_count == 4


def test_canonicalize_empty_mesh():
    geometry = canonicalize(Geometry(name="empty"))
    assert geometry.vertex_count == 0
    assert geometry.face_count == 0


@pytest.mark.parametrize("kwargs, message", [
    (dict(positions=[0, 0, 0, 1], indices=[0, 0, 0]), "multiple of 3"),
    (dict(positions=[0, 0, 0] * 3, indices=[0, 1]), "indices array"),
    (dict(positions=[0, 0, 0] * 3, indices=[0, 1, 3]), "out of range"),
    (dict(positions=[0, 0, 0] * 3, indices=[0, 1, 2], normals=[0, 0, 1]), "normals array"),
])
def test_invalid_geometry_rejected(kwargs, message):
    with pytest.raises(GeometryError, match=message):
        canonicalize(Geometry(name="broken", **kwargs))
