"""
Параметрические примитивы: каждый генератор принимает имя и
dataclass с параметрами и возвращает готовую Geometry.
"""

from meshkit.primitives.plane import (
    PlaneOptions, CircularPlaneOptions, create_plane, create_circular_plane,
)
from meshkit.primitives.box import BoxOptions, create_box
from meshkit.primitives.sphere import SphereOptions, create_sphere
from meshkit.primitives.screen_quad import ScreenQuadOptions, create_screen_quad
from meshkit.primitives.torus_knot import TorusKnotOptions, create_torus_knot

__all__ = [
    "PlaneOptions", "create_plane",
    "CircularPlaneOptions", "create_circular_plane",
    "BoxOptions", "create_box",
    "SphereOptions", "create_sphere",
    "ScreenQuadOptions", "create_screen_quad",
    "TorusKnotOptions", "create_torus_knot",
]
