"""
Коробка из шести независимых граней‑плоскостей с общим пулом вершин.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from meshkit.geometry import Geometry
from meshkit.math.mat3 import Mat3
from meshkit.math.quat import Quat
from meshkit.primitives._common import (
    apply_texture_xform, clamp_segments, grid_cells, repeat_vector,
)


@dataclass
class BoxOptions:
    """
    width, height, depth – полные размеры коробки, по‑умолчанию 1.
    *_segments           – число сегментов вдоль оси, [1...), по‑умолчанию 1.
    texture_xform        – преобразование UV каждой грани.
    """
    width: float = 1.0
    height: float = 1.0
    depth: float = 1.0
    width_segments: int = 1
    height_segments: int = 1
    depth_segments: int = 1
    texture_xform: Optional[Mat3] = None

    def __post_init__(self):
        self.width = abs(float(self.width))
        self.height = abs(float(self.height))
        self.depth = abs(float(self.depth))
        self.width_segments = clamp_segments(self.width_segments, 1)
        self.height_segments = clamp_segments(self.height_segments, 1)
        self.depth_segments = clamp_segments(self.depth_segments, 1)


class _BoxBuilder:
    """Накопитель буферов; каждая грань дописывает свои вершины в конец."""

    def __init__(self, texture_xform):
        self.texture_xform = texture_xform
        self.positions = []
        self.indices = []
        self.tex_coords = []
        self.normals = []
        self.tangents = []
        self.vertex_count = 0

    def build_plane(self, width, height, depth, width_segs, height_segs, rotation: Quat):
        """
        Плоскость width×height на расстоянии depth/2 по +Z, повёрнутая
        кватернионом `rotation`. Нормаль (0,0,1) и тангенс (1,0,0)
        поворачиваются вместе с ней.
        """
        iy, ix = np.meshgrid(np.arange(height_segs + 1), np.arange(width_segs + 1), indexing="ij")
        ix, iy = ix.ravel(), iy.ravel()
        count = len(ix)

        local = np.column_stack([
            ix * (width / width_segs) - width / 2,
            iy * (height / height_segs) - height / 2,
            np.full(count, depth / 2),
        ])
        self.positions.append(rotation.rotate_points(local))

        uvs = np.column_stack([ix / width_segs, iy / height_segs])
        self.tex_coords.append(apply_texture_xform(uvs, self.texture_xform))

        self.normals.append(repeat_vector(rotation.rotate_vector((0, 0, 1)), count))
        self.tangents.append(repeat_vector(rotation.rotate_vector((1, 0, 0)), count))

        a, b, c, d = grid_cells(width_segs, height_segs)
        self.indices.append(np.column_stack([a, b, d, d, b, c]) + self.vertex_count)
        self.vertex_count += count

    def finish(self, name) -> Geometry:
        return Geometry(
            name=name,
            positions=np.concatenate([p.ravel() for p in self.positions]),
            indices=np.concatenate([i.ravel() for i in self.indices]),
            tex_coords=np.concatenate([t.ravel() for t in self.tex_coords]),
            normals=np.concatenate(self.normals),
            tangents=np.concatenate(self.tangents),
        )


def create_box(name: str = "Box", options: BoxOptions = None) -> Geometry:
    opts = options or BoxOptions()
    w, h, d = opts.width, opts.height, opts.depth
    ws, hs, ds = opts.width_segments, opts.height_segments, opts.depth_segments

    builder = _BoxBuilder(opts.texture_xform)
    y_axis, x_axis = (0, 1, 0), (1, 0, 0)
    builder.build_plane(d, h, w, ds, hs, Quat.from_axis_angle(y_axis, -90))  # -x
    builder.build_plane(d, h, w, ds, hs, Quat.from_axis_angle(y_axis, 90))   # +x
    builder.build_plane(w, d, h, ws, ds, Quat.from_axis_angle(x_axis, 90))   # -y
    builder.build_plane(w, d, h, ws, ds, Quat.from_axis_angle(x_axis, -90))  # +y
    builder.build_plane(w, h, d, ws, hs, Quat.from_axis_angle(y_axis, 180))  # -z
    builder.build_plane(w, h, d, ws, hs, Quat.from_axis_angle(y_axis, 0))    # +z
    return builder.finish(name)
