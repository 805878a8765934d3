"""
UV‑сфера.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from meshkit.geometry import Geometry
from meshkit.math.mat3 import Mat3
from meshkit.mesh.attributes import compute_tangents
from meshkit.mesh.canonicalize import canonicalize
from meshkit.primitives._common import apply_texture_xform, clamp_segments, grid_cells


@dataclass
class SphereOptions:
    """
    radius          – радиус сферы, по‑умолчанию 1.
    width_segments  – сегменты по долготе, [3...), по‑умолчанию 32.
    height_segments – сегменты по широте, [2...), по‑умолчанию 16.
    texture_xform   – преобразование UV, по‑умолчанию единичное.
    """
    radius: float = 1.0
    width_segments: int = 32
    height_segments: int = 16
    texture_xform: Optional[Mat3] = None

    def __post_init__(self):
        self.radius = abs(float(self.radius))
        self.width_segments = clamp_segments(self.width_segments, 3, floor=True)
        self.height_segments = clamp_segments(self.height_segments, 2, floor=True)


def create_sphere(name: str = "Sphere", options: SphereOptions = None) -> Geometry:
    """
    Широта [0, π] × долгота [0, 2π]. Полюса дают вырожденные грани и
    лишние вершины – они убираются канонизацией, после чего считаются
    тангенсы.
    """
    opts = options or SphereOptions()
    ws, hs = opts.width_segments, opts.height_segments

    lat, lon = np.meshgrid(np.arange(hs + 1), np.arange(ws + 1), indexing="ij")
    lat, lon = lat.ravel(), lon.ravel()
    theta = lat * np.pi / hs
    phi = lon * 2 * np.pi / ws

    unit = np.column_stack([
        np.cos(phi) * np.sin(theta),
        np.cos(theta),
        np.sin(phi) * np.sin(theta),
    ])

    # сдвиг на полтекселя у полюсов против шва текстуры
    u_offset = np.zeros(len(lat))
    u_offset[lat == 0] = 0.5 / ws
    u_offset[lat == hs] = -0.5 / ws
    uvs = np.column_stack([1.0 - lon / ws + u_offset, 1.0 - lat / hs])

    a, b, c, d = grid_cells(ws, hs)
    geometry = Geometry(
        name=name,
        positions=unit * opts.radius,
        indices=np.column_stack([a, b, d, d, b, c]),
        tex_coords=apply_texture_xform(uvs, opts.texture_xform),
        normals=unit,
    )
    canonicalize(geometry)
    geometry.tangents = compute_tangents(
        geometry.positions, geometry.tex_coords, geometry.indices, geometry.normals)
    return geometry
