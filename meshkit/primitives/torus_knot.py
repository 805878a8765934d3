"""
Torus knot: труба, выдавленная вдоль замкнутой (p, q)‑кривой на торе.
"""

from dataclasses import dataclass
from math import cos, sin, pi

import numpy as np

from meshkit.geometry import Geometry
from meshkit.math.vec3 import Vec3
from meshkit.mesh.attributes import compute_tangents
from meshkit.primitives._common import clamp_segments, grid_cells
from meshkit.utils.config import Config


@dataclass
class TorusKnotOptions:
    """
    knot_radius      – радиус тора, по‑умолчанию 1.
    tube_radius      – радиус трубы, по‑умолчанию 0.4.
    tubular_segments – сегменты вдоль кривой, [3...), по‑умолчанию 64.
    radial_segments  – сегменты вокруг трубы, [3...), по‑умолчанию 8.
    p                – число оборотов вокруг оси тора, [1...), по‑умолчанию 2.
    q                – число оборотов вокруг трубы тора, [1...), по‑умолчанию 3.
    """
    knot_radius: float = 1.0
    tube_radius: float = 0.4
    tubular_segments: int = 64
    radial_segments: int = 8
    p: int = 2
    q: int = 3

    def __post_init__(self):
        self.knot_radius = abs(float(self.knot_radius))
        self.tube_radius = abs(float(self.tube_radius))
        self.tubular_segments = clamp_segments(self.tubular_segments, 3, floor=True)
        self.radial_segments = clamp_segments(self.radial_segments, 3, floor=True)
        self.p = clamp_segments(self.p, 1, floor=True)
        self.q = clamp_segments(self.q, 1, floor=True)


def curve_point(u: float, p: int, q: int, radius: float) -> Vec3:
    """Точка (p, q)‑кривой на торе для параметра u."""
    qu_over_p = q / p * u
    cs = cos(qu_over_p)
    return Vec3(
        radius * (2 + cs) * 0.5 * cos(u),
        radius * (2 + cs) * 0.5 * sin(u),
        radius * sin(qu_over_p) * 0.5,
    )


def curve_frame(u: float, p: int, q: int, radius: float, step: float):
    """
    Базис экструзии в точке u: (точка, нормаль N, бинормаль B).
    Касательная приближается разностью T = C(u+step) − C(u),
    затем B = T × C(u+step), N = B × T.
    """
    p1 = curve_point(u, p, q, radius)
    p2 = curve_point(u + step, p, q, radius)
    t = p2 - p1
    b = t.cross(p2)
    n = b.cross(t)
    return p1, n.normalized(), b.normalized()


def create_torus_knot(name: str = "TorusKnot", options: TorusKnotOptions = None) -> Geometry:
    opts = options or TorusKnotOptions()
    tubular, radial = opts.tubular_segments, opts.radial_segments
    step = float(Config()["curve_step"])

    v = np.arange(radial + 1) / radial * pi * 2
    cx = -opts.tube_radius * np.cos(v)
    cy = opts.tube_radius * np.sin(v)

    positions = []
    normals = []
    for tube_idx in range(tubular + 1):
        u = tube_idx / tubular * opts.p * pi * 2
        centre, n, b = curve_frame(u, opts.p, opts.q, opts.knot_radius, step)

        offset = np.outer(cx, n.as_np()) + np.outer(cy, b.as_np())
        positions.append(centre.as_np() + offset)

        # нормаль – направление от центра сечения к вершине
        length = np.linalg.norm(offset, axis=1)
        safe = np.where(length > 0.0, length, 1.0)
        normals.append(offset / safe[:, None])

    tube_idx, rad_idx = np.meshgrid(np.arange(tubular + 1), np.arange(radial + 1), indexing="ij")
    uvs = np.column_stack([tube_idx.ravel() / tubular, rad_idx.ravel() / radial])

    a, b, c, d = grid_cells(radial, tubular)
    geometry = Geometry(
        name=name,
        positions=np.concatenate(positions).ravel(),
        indices=np.column_stack([a, d, b, d, c, b]),
        tex_coords=uvs,
        normals=np.concatenate(normals).ravel(),
    )
    geometry.tangents = compute_tangents(
        geometry.positions, geometry.tex_coords, geometry.indices, geometry.normals)
    return geometry
