# -*- coding: utf-8 -*-
import numpy as np
import pytest
from meshkit.math.vec3 import Vec3
from meshkit.math.mat3 import Mat3
from meshkit.math.quat import Quat

def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert a.dot(b) == 2.0

def test_vec3_cross_and_normalize():
    x = Vec3(1, 0, 0)
    y = Vec3(0, 1, 0)
    assert x.cross(y) == Vec3(0, 0, 1)
    assert Vec3(0, 3, 4).normalized().length() == pytest.approx(1.0)
    # нулевой вектор не нормализуется
    assert Vec3().normalized() == Vec3()

def test_vec3_from_array():
    flat = [0, 0, 0, 7, 8, 9]
    assert Vec3.from_array(flat, 3).to_list() == [7, 8, 9]

def test_mat3_identity():
    uvs = np.array([[0.25, 0.75]])
    assert Mat3.identity().is_identity()
    assert np.allclose(Mat3.identity().apply_to_uvs(uvs), uvs)

def test_mat3_compose():
    m = Mat3.translate(1, 0) @ Mat3.scale(2, 2)
    assert np.allclose(m.apply_to_uvs([[1, 1]]), [[3, 2]])
    assert np.allclose(Mat3.rotate(90).apply_to_uvs([[1, 0]]), [[0, 1]])

def test_quat_rotation():
    q = Quat.from_axis_angle(Vec3(0, 1, 0).to_list(), 90)
    rotated = q.rotate_vector([1, 0, 0])
    assert np.allclose(rotated, [0, 0, -1], atol=1e-7), rotated

def test_quat_matrix_matches_vector_rotation():
    q = Quat.from_axis_angle([1, 1, 0], 37)
    points = np.array([[1, 2, 3], [-4, 0.5, 2]])
    by_matrix = q.rotate_points(points)
    by_vector = np.array([q.rotate_vector(p) for p in points])
    assert np.allclose(by_matrix, by_vector)

def test_quat_zero_axis():
    with pytest.raises(ValueError):
        Quat.from_axis_angle([0, 0, 0], 45)

def test_vec3_components_read_only():
    v = Vec3(1, 2, 3)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5
