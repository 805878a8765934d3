"""
Пакет mesh – проходы над готовой Geometry: канонизация, нормали/тангенсы,
уникализация вершин, барицентрические координаты.
"""

from meshkit.mesh.canonicalize import (
    remove_degenerate_faces, remove_unused_vertices, canonicalize,
)
from meshkit.mesh.attributes import (
    compute_normals, compute_tangents, synthesize_attributes,
)
from meshkit.mesh.uniquify import uniquify_vertices, get_barycentric_coordinates

__all__ = [
    "remove_degenerate_faces",
    "remove_unused_vertices",
    "canonicalize",
    "compute_normals",
    "compute_tangents",
    "synthesize_attributes",
    "uniquify_vertices",
    "get_barycentric_coordinates",
]
