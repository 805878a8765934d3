# -*- coding: utf-8 -*-
import logging

import numpy as np
import pytest

from meshkit.geometry import Geometry, GeometryError, check_unit_length, validate_geometry


def test_buffers_are_coerced(quad):
    assert quad.positions.dtype == np.float32
    assert quad.indices.dtype == np.uint32
    assert quad.positions.ndim == 1
    assert quad.vertex_count == 4
    assert quad.face_count == 2


def test_empty_geometry_defaults():
    geometry = Geometry(name="empty")
    assert geometry.vertex_count == 0
    assert validate_geometry(geometry) == 0
    assert len(geometry.tex_coords) == 0


def test_negative_index_rejected():
    with pytest.raises(GeometryError, match="negative"):
        Geometry(name="neg", positions=[0, 0, 0] * 3, indices=[0, -1, 2])


def test_position_size_checked():
    with pytest.raises(GeometryError, match="must be 2 or 3"):
        Geometry(name="odd", positions=[0, 0, 0, 0], position_size=4)


def test_gpu_arrays(quad):
    arrays = quad.as_gpu_arrays()
    assert arrays["name"] == "quad"
    assert arrays["indices"].dtype == np.uint32
    for key in ("positions", "tex_coords", "normals", "tangents"):
        assert arrays[key].dtype == np.float32
        assert arrays[key].flags["C_CONTIGUOUS"]


def test_gpu_arrays_validate(quad):
    quad.indices = np.array([0, 1, 7], dtype=np.uint32)
    with pytest.raises(GeometryError, match="out of range"):
        quad.as_gpu_arrays()


def test_bounding_sphere(quad):
    centre, radius = quad.bounding_sphere()
    assert np.allclose(centre, [0.5, 0.5, 0])
    assert radius == pytest.approx(np.sqrt(0.5), abs=1e-6)
    assert Geometry(name="empty").bounding_sphere()[1] == 0.0


def test_copy_is_independent(quad):
    clone = quad.copy()
    clone.positions[0] = 42
    clone.indices[0] = 3
    assert quad.positions[0] == 0
    assert quad.indices[0] == 0
    assert clone.name == quad.name


def test_repr(quad):
    assert repr(quad) == "Geometry('quad', vertices=4, faces=2)"


def test_check_unit_length(quad, caplog):
    quad.normals[3:6] = [0, 0, 2]
    quad.normals[6:9] = [0, 0, 0]
    with caplog.at_level(logging.WARNING, logger="meshkit"):
        bad = check_unit_length(quad)
    assert bad.tolist() == [1]
    assert "not unit length" in caplog.text
