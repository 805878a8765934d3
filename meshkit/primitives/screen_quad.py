"""
Полноэкранный квад в NDC.
"""

from dataclasses import dataclass

from meshkit.geometry import Geometry


@dataclass
class ScreenQuadOptions:
    """
    in_2d                    – 2‑D позиции, без нормалей и тангенсов.
    left, right, top, bottom – края квада в NDC (по‑умолчанию весь экран).
    """
    in_2d: bool = False
    left: float = -1.0
    right: float = 1.0
    top: float = 1.0
    bottom: float = -1.0


def create_screen_quad(name: str = "ScreenQuad", options: ScreenQuadOptions = None) -> Geometry:
    opts = options or ScreenQuadOptions()
    l, r, t, b = opts.left, opts.right, opts.top, opts.bottom

    if opts.in_2d:
        return Geometry(
            name=name,
            positions=[l, b, l, t, r, t, r, b],
            indices=[0, 2, 1, 0, 3, 2],
            tex_coords=[0, 0, 0, 1, 1, 1, 1, 0],
            position_size=2,
        )
    return Geometry(
        name=name,
        positions=[l, b, 0, l, t, 0, r, t, 0, r, b, 0],
        indices=[0, 2, 1, 0, 3, 2],
        tex_coords=[0, 0, 0, 1, 1, 1, 1, 0],
        normals=[0, 0, 1] * 4,
        tangents=[1, 0, 0] * 4,
    )
