# meshkit/mesh/attributes.py
"""
Вычисление производных атрибутов вершин: нормалей и тангенсов.

compute_normals / compute_tangents – чистые функции над плоскими
буферами (возвращают новый float32‑массив); synthesize_attributes
заполняет недостающие буферы прямо в Geometry.
"""

import numpy as np

from meshkit.geometry import Geometry, GeometryError, validate_geometry
from meshkit.utils.config import Config
from meshkit.utils.logger import logger


def _as_triangles(indices, vertex_count: int) -> np.ndarray:
    tris = np.asarray(indices, dtype=np.int64).ravel()
    if tris.size % 3 != 0:
        raise GeometryError("The indices array must be a multiple of 3.")
    tris = tris.reshape((-1, 3))
    if tris.size and (tris.min() < 0 or tris.max() >= vertex_count):
        raise GeometryError(
            f"Vertex index out of range [0, {vertex_count}) in the indices array.")
    return tris


def _as_vectors(values, stride: int, what: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64).ravel()
    if arr.size % stride != 0:
        raise GeometryError(f"The {what} array must be a multiple of {stride}.")
    return arr.reshape((-1, stride))


def _normalize_rows(vectors: np.ndarray):
    """Нормализовать строки; нулевые строки остаются нулевыми."""
    lengths = np.linalg.norm(vectors, axis=1)
    zero = lengths == 0.0
    result = np.zeros_like(vectors)
    result[~zero] = vectors[~zero] / lengths[~zero, None]
    return result, np.nonzero(zero)[0]


def _accumulate(per_face: np.ndarray, tris: np.ndarray, vertex_count: int) -> np.ndarray:
    acc = np.zeros((vertex_count, 3), dtype=np.float64)
    for corner in range(3):
        np.add.at(acc, tris[:, corner], per_face)
    return acc


def _edges(verts: np.ndarray, tris: np.ndarray):
    v0 = verts[tris[:, 0]]
    return verts[tris[:, 1]] - v0, verts[tris[:, 2]] - v0


def compute_normals(positions, indices) -> np.ndarray:
    """
    Сглаженные нормали, взвешенные по площади.

    Ненормированная нормаль грани (e1 × e2) пропорциональна её площади,
    поэтому её суммирование в каждую из трёх вершин с последующей
    нормализацией даёт area‑weighted нормаль.
    """
    positions = np.asarray(positions, dtype=np.float64).ravel()
    indices = np.asarray(indices).ravel()
    if positions.size == 0 or indices.size == 0:
        logger.warning("[Attributes] Skipping computation of normals for an empty mesh.")
        return np.zeros(0, dtype=np.float32)

    verts = _as_vectors(positions, 3, "positions")
    tris = _as_triangles(indices, len(verts))

    e1, e2 = _edges(verts, tris)
    normals, zero = _normalize_rows(_accumulate(np.cross(e1, e2), tris, len(verts)))
    if zero.size:
        logger.warning(
            f"[Attributes] Cannot generate normals for {zero.size} vertices that are "
            f"not part of a face (first: {zero[:8].tolist()}); left at zero.")
    return normals.astype(np.float32).ravel()


def compute_tangents(positions, tex_coords, indices, normals=None, epsilon=None) -> np.ndarray:
    """
    Тангенсы по UV‑градиенту.

    Для каждой грани решается система 2×2, связывающая рёбра в объектном
    пространстве с рёбрами в UV. Грани с |det| <= epsilon·|duv1|·|duv2|
    (почти коллинеарные рёбра развёртки) пропускаются. Если нормали
    заданы, накопленный тангенс ортогонализуется относительно нормали
    перед нормализацией.
    """
    positions = np.asarray(positions, dtype=np.float64).ravel()
    tex_coords = np.asarray(tex_coords, dtype=np.float64).ravel()
    indices = np.asarray(indices).ravel()
    if positions.size == 0 or tex_coords.size == 0 or indices.size == 0:
        logger.warning("[Attributes] Skipping computation of tangents for an empty mesh.")
        return np.zeros(0, dtype=np.float32)

    if epsilon is None:
        epsilon = float(Config()["tangent_det_epsilon"])

    verts = _as_vectors(positions, 3, "positions")
    uvs = _as_vectors(tex_coords, 2, "UVs")
    if len(uvs) != len(verts):
        raise GeometryError(
            "The UVs array must have the same number of elements as the positions array.")
    if normals is not None and len(normals) == 0:
        normals = None
    if normals is not None:
        normals = _as_vectors(normals, 3, "normals")
        if len(normals) != len(verts):
            raise GeometryError(
                "The normals array must have the same number of elements as the positions array.")
    tris = _as_triangles(indices, len(verts))

    e1, e2 = _edges(verts, tris)
    duv1, duv2 = _edges(uvs, tris)
    det = duv1[:, 0] * duv2[:, 1] - duv2[:, 0] * duv1[:, 1]
    # |det| = |duv1|·|duv2|·sin(угла между рёбрами UV)
    scale = np.linalg.norm(duv1, axis=1) * np.linalg.norm(duv2, axis=1)
    solvable = np.abs(det) > epsilon * scale
    skipped = int(np.count_nonzero(~solvable))
    if skipped:
        logger.warning(
            f"[Attributes] Skipped {skipped} faces with a singular UV mapping "
            f"while computing tangents.")

    inv_det = np.zeros_like(det)
    inv_det[solvable] = 1.0 / det[solvable]
    face_tangents = (duv2[:, 1:2] * e1 - duv1[:, 1:2] * e2) * inv_det[:, None]

    tangents = _accumulate(face_tangents, tris, len(verts))
    if normals is not None:
        # Грам–Шмидт: убрать проекцию на нормаль
        tangents -= np.sum(tangents * normals, axis=1)[:, None] * normals
    tangents, zero = _normalize_rows(tangents)
    if zero.size:
        logger.debug(f"[Attributes] {zero.size} vertices have no tangent; left at zero.")
    return tangents.astype(np.float32).ravel()


def synthesize_attributes(geometry: Geometry) -> Geometry:
    """Дополнить отсутствующие нормали и тангенсы (in place)."""
    validate_geometry(geometry)
    if geometry.position_size != 3:
        logger.debug(f"[Attributes] \"{geometry.name}\" is 2-D, nothing to synthesize.")
        return geometry

    if not len(geometry.normals):
        logger.info(f"[Attributes] Calculating normals for \"{geometry.name}\"")
        geometry.normals = compute_normals(geometry.positions, geometry.indices)

    if not len(geometry.tangents):
        if not len(geometry.tex_coords):
            logger.warning(
                f"[Attributes] \"{geometry.name}\" has no texture coordinates, "
                f"tangents are not generated.")
        else:
            geometry.tangents = compute_tangents(
                geometry.positions, geometry.tex_coords, geometry.indices,
                geometry.normals if len(geometry.normals) else None)
    return geometry
