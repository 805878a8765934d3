# meshkit/mesh/uniquify.py
"""
Уникальные вершины (одна вершина – один угол треугольника) и
барицентрические координаты для wireframe‑шейдинга.
"""

import numpy as np

from meshkit.geometry import Geometry, GeometryError, validate_geometry
from meshkit.utils.logger import logger


def uniquify_vertices(geometry: Geometry) -> Geometry:
    """
    Гарантировать, что каждая вершина используется только одним углом.

    Первое вхождение индекса остаётся как есть, каждое следующее получает
    копию вершины, добавленную в конец всех буферов.
    """
    vertex_count = validate_geometry(geometry)
    indices = geometry.indices.astype(np.int64)
    if not len(indices):
        return geometry

    _, first = np.unique(indices, return_index=True)
    repeated = np.ones(len(indices), dtype=bool)
    repeated[first] = False
    slots = np.nonzero(repeated)[0]
    if not slots.size:
        return geometry

    sources = indices[slots]
    for attr, stride in geometry.pools():
        pool = getattr(geometry, attr)
        if len(pool):
            copies = pool.reshape((-1, stride))[sources]
            setattr(geometry, attr, np.concatenate([pool, copies.ravel()]))

    indices[slots] = vertex_count + np.arange(slots.size)
    geometry.indices = indices.astype(np.uint32)
    logger.info(f"[Uniquify] Uniquified {slots.size} vertices of \"{geometry.name}\".")
    return geometry


def get_barycentric_coordinates(geometry: Geometry) -> np.ndarray:
    """
    Барицентрические координаты: по 3 float на вершину.
    Первый/второй/третий угол каждой грани получает (1,0,0)/(0,1,0)/(0,0,1).
    Геометрия должна быть предварительно обработана uniquify_vertices().
    """
    vertex_count = validate_geometry(geometry)
    indices = geometry.indices.astype(np.int64)
    if len(np.unique(indices)) != len(indices):
        raise GeometryError(
            f"The geometry \"{geometry.name}\" must have unique vertices to "
            f"generate barycentric coordinates.")

    result = np.zeros((vertex_count, 3), dtype=np.float32)
    tris = indices.reshape((-1, 3))
    for corner in range(3):
        result[tris[:, corner], corner] = 1.0
    return result.ravel()
