"""
Плоские примитивы в плоскости XY: прямоугольник и круг.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from meshkit.geometry import Geometry
from meshkit.math.mat3 import Mat3
from meshkit.mesh.canonicalize import canonicalize
from meshkit.primitives._common import (
    apply_texture_xform, clamp_segments, grid_cells, repeat_vector,
)


@dataclass
class PlaneOptions:
    """
    width, height     – полуразмеры плоскости (плоскость занимает
                        [-width, width] × [-height, height]), по‑умолчанию 1.
    width_segments    – число сегментов по X, [1...), по‑умолчанию 1.
    height_segments   – число сегментов по Y, [1...), по‑умолчанию 1.
    texture_xform     – преобразование UV, по‑умолчанию единичное.
    """
    width: float = 1.0
    height: float = 1.0
    width_segments: int = 1
    height_segments: int = 1
    texture_xform: Optional[Mat3] = None

    def __post_init__(self):
        self.width = abs(float(self.width))
        self.height = abs(float(self.height))
        self.width_segments = clamp_segments(self.width_segments, 1)
        self.height_segments = clamp_segments(self.height_segments, 1)


@dataclass
class CircularPlaneOptions:
    """
    radius            – радиус круга, по‑умолчанию 1.
    segments          – сегменты по окружности, [3...), по‑умолчанию 32.
    internal_segments – число колец, [1...), по‑умолчанию 1.
    texture_xform     – преобразование UV, по‑умолчанию единичное.

    Результат проходит канонизацию: вырожденные грани у схлопнутого
    центрального кольца и его первая (неиспользуемая) вершина удаляются,
    поэтому вершин (internal_segments+1)·(segments+1) − 1, а при radius=0
    сетка получается пустой.
    """
    radius: float = 1.0
    segments: int = 32
    internal_segments: int = 1
    texture_xform: Optional[Mat3] = None

    def __post_init__(self):
        self.radius = abs(float(self.radius))
        self.segments = clamp_segments(self.segments, 3)
        self.internal_segments = clamp_segments(self.internal_segments, 1)


def create_plane(name: str = "Plane", options: PlaneOptions = None) -> Geometry:
    """Прямоугольная сетка вершин, по два треугольника на ячейку."""
    opts = options or PlaneOptions()
    ws, hs = opts.width_segments, opts.height_segments

    v, u = np.meshgrid(np.arange(hs + 1) / hs, np.arange(ws + 1) / ws, indexing="ij")
    u, v = u.ravel(), v.ravel()
    count = len(u)

    positions = np.column_stack([(2 * u - 1) * opts.width,
                                 (2 * v - 1) * opts.height,
                                 np.zeros(count)])
    a, b, c, d = grid_cells(ws, hs)
    indices = np.column_stack([a, b, d, b, c, d])

    return Geometry(
        name=name,
        positions=positions,
        indices=indices,
        tex_coords=apply_texture_xform(np.column_stack([u, v]), opts.texture_xform),
        normals=repeat_vector((0, 0, 1), count),
        tangents=repeat_vector((1, 0, 0), count),
    )


def create_circular_plane(name: str = "CircularPlane", options: CircularPlaneOptions = None) -> Geometry:
    """
    Полярная сетка: internal_segments+1 колец по segments+1 вершин.
    Центральное кольцо схлопнуто в точку, поэтому его вырожденные
    треугольники и лишние вершины удаляются канонизацией.
    """
    opts = options or CircularPlaneOptions()
    segs, rings = opts.segments, opts.internal_segments

    ring, step = np.meshgrid(np.arange(rings + 1), np.arange(segs + 1), indexing="ij")
    r = (opts.radius * ring / rings).ravel()
    theta = (2 * np.pi * step / segs).ravel()
    x = -r * np.cos(theta)
    y = r * np.sin(theta)
    count = len(x)

    # UV‑круг вписан в [0, 1]²; при нулевом радиусе все точки в центре
    scale = opts.radius if opts.radius > 0 else 1.0
    uvs = np.column_stack([(x / scale + 1) / 2, (y / scale + 1) / 2])

    a, b, c, d = grid_cells(segs, rings)
    geometry = Geometry(
        name=name,
        positions=np.column_stack([x, y, np.zeros(count)]),
        indices=np.column_stack([a, b, d, b, c, d]),
        tex_coords=apply_texture_xform(uvs, opts.texture_xform),
        normals=repeat_vector((0, 0, 1), count),
        tangents=repeat_vector((1, 0, 0), count),
    )
    return canonicalize(geometry)
