# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: изолированная конфигурация, OBJ‑тексты
и маленькие сетки, на которых удобно проверять проходы канонизации.
"""

import numpy as np
import pytest

from meshkit.geometry import Geometry, validate_geometry
from meshkit.utils.config import Config, CONFIG_ENV


# ----------------------------------------------------------------------
# Конфигурация никогда не читается из рабочей директории
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "meshkit.json"))
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def triangle_obj() -> str:
    return "\n".join([
        "o tri",
        "v 0 0 0",
        "v 1 0 0",
        "v 0 1 0",
        "vt 0 0",
        "vt 1 0",
        "vt 0 1",
        "vn 0 0 1",
        "f 1/1/1 2/2/1 3/3/1",
    ])


@pytest.fixture
def quad_obj() -> str:
    return "\n".join([
        "# квадрат из двух треугольников",
        "mtllib quad.mtl",
        "o quad",
        "v 0 0 0",
        "v 1 0 0",
        "v 1 1 0",
        "v 0 1 0",
        "vt 0 0",
        "vt 1 0",
        "vt 1 1",
        "vt 0 1",
        "vn 0 0 1",
        "usemtl default",
        "s off",
        "f 1/1/1 2/2/1 3/3/1",
        "f 1/1/1 3/3/1 4/4/1",
        "",
    ])


@pytest.fixture
def quad() -> Geometry:
    """Квадрат 1×1 в плоскости XY, две грани с общей диагональю."""
    return Geometry(
        name="quad",
        positions=[0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0],
        indices=[0, 1, 2, 0, 2, 3],
        tex_coords=[0, 0, 1, 0, 1, 1, 0, 1],
        normals=[0, 0, 1] * 4,
        tangents=[1, 0, 0] * 4,
    )


def face_normals(geometry: Geometry) -> np.ndarray:
    verts = geometry.positions.astype(np.float64).reshape((-1, 3))
    tris = geometry.indices.astype(np.int64).reshape((-1, 3))
    v0 = verts[tris[:, 0]]
    return np.cross(verts[tris[:, 1]] - v0, verts[tris[:, 2]] - v0)


def assert_valid_geometry(geometry: Geometry, tolerance: float = 1e-4) -> None:
    """Общие инварианты любого результата генератора/загрузчика."""
    vertex_count = validate_geometry(geometry)
    assert len(geometry.indices) % 3 == 0
    if len(geometry.indices):
        assert int(geometry.indices.max()) < vertex_count
    for attr in ("normals", "tangents"):
        pool = getattr(geometry, attr)
        if len(pool):
            lengths = np.linalg.norm(pool.reshape((-1, 3)), axis=1)
            assert np.allclose(lengths, 1.0, atol=tolerance), (attr, lengths.min(), lengths.max())
