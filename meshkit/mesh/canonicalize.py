# meshkit/mesh/canonicalize.py
"""
Канонизация сетки: удаление вырожденных граней и неиспользуемых вершин
с согласованной перенумерацией индексов. Все функции меняют Geometry
на месте и возвращают её же.
"""

import numpy as np

from meshkit.geometry import Geometry, validate_geometry
from meshkit.utils.config import Config
from meshkit.utils.logger import logger


def remove_degenerate_faces(geometry: Geometry, epsilon: float = None) -> Geometry:
    """
    Удалить треугольники нулевой площади.

    Грань считается вырожденной, если |e1 × e2|² <= (epsilon · L²)²,
    где L – диагональ ограничивающего бокса сетки. Порог масштабируется
    вместе с сеткой, поэтому мелкие, но настоящие грани у полюсов сферы
    не удаляются. Позиции не трогаем – вершины могут использоваться
    другими гранями.
    """
    validate_geometry(geometry)
    if not len(geometry.indices):
        return geometry
    if epsilon is None:
        epsilon = float(Config()["degenerate_face_epsilon"])

    size = geometry.position_size
    verts = geometry.positions.astype(np.float64).reshape((-1, size))
    if size == 2:
        verts = np.column_stack([verts, np.zeros(len(verts))])
    tris = geometry.indices.astype(np.int64).reshape((-1, 3))

    extent = float(np.linalg.norm(verts.max(axis=0) - verts.min(axis=0)))
    threshold = (epsilon * extent * extent) ** 2

    v0 = verts[tris[:, 0]]
    cross = np.cross(verts[tris[:, 1]] - v0, verts[tris[:, 2]] - v0)
    keep = np.einsum("ij,ij->i", cross, cross) > threshold

    removed = int(np.count_nonzero(~keep))
    if removed:
        geometry.indices = tris[keep].ravel().astype(np.uint32)
        logger.info(f"[Canonicalize] Removed {removed} degenerate faces from \"{geometry.name}\".")
    return geometry


def remove_unused_vertices(geometry: Geometry) -> Geometry:
    """
    Удалить вершины, на которые не ссылается ни одна грань.

    Схема «пометить, уплотнить, перенумеровать»: после удаления каждая
    следующая вершина сдвигается, поэтому индекс уменьшается на число
    удалённых вершин строго меньше него.
    """
    vertex_count = validate_geometry(geometry)

    used = np.zeros(vertex_count, dtype=bool)
    used[geometry.indices.astype(np.int64)] = True
    if used.all():
        return geometry

    unused = ~used
    for attr, stride in geometry.pools():
        pool = getattr(geometry, attr)
        if len(pool):
            setattr(geometry, attr, pool.reshape((-1, stride))[used].ravel())

    offsets = np.cumsum(unused) - unused
    old = geometry.indices.astype(np.int64)
    geometry.indices = (old - offsets[old]).astype(np.uint32)

    logger.info(
        f"[Canonicalize] Removed {int(unused.sum())} unused vertices from \"{geometry.name}\".")
    return geometry


def canonicalize(geometry: Geometry) -> Geometry:
    """Вырожденные грани, затем неиспользуемые вершины."""
    remove_degenerate_faces(geometry)
    return remove_unused_vertices(geometry)
