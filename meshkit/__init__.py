"""
meshkit – построение и канонизация треугольных сеток для рендера.
Параметрические примитивы и OBJ‑загрузчик выдают единый формат Geometry:
плоские буферы атрибутов + индексный буфер треугольников.
"""

from meshkit.utils import logger, Config
from meshkit.geometry import (
    Geometry, RawObjData, GeometryError, ObjParseError, validate_geometry,
)
from meshkit.math import Vec3, Quat, Mat3
from meshkit.primitives import (
    PlaneOptions, CircularPlaneOptions, BoxOptions, SphereOptions,
    ScreenQuadOptions, TorusKnotOptions,
    create_plane, create_circular_plane, create_box, create_sphere,
    create_screen_quad, create_torus_knot,
)
from meshkit.mesh import (
    remove_degenerate_faces, remove_unused_vertices, canonicalize,
    compute_normals, compute_tangents, synthesize_attributes,
    uniquify_vertices, get_barycentric_coordinates,
)
from meshkit.utils.loader import parse_obj, expand_obj, load_obj_text, load_obj

__version__ = "1.0.0"

__all__ = [
    "Geometry",
    "RawObjData",
    "GeometryError",
    "ObjParseError",
    "validate_geometry",
    "Vec3",
    "Quat",
    "Mat3",
    "PlaneOptions",
    "CircularPlaneOptions",
    "BoxOptions",
    "SphereOptions",
    "ScreenQuadOptions",
    "TorusKnotOptions",
    "create_plane",
    "create_circular_plane",
    "create_box",
    "create_sphere",
    "create_screen_quad",
    "create_torus_knot",
    "remove_degenerate_faces",
    "remove_unused_vertices",
    "canonicalize",
    "compute_normals",
    "compute_tangents",
    "synthesize_attributes",
    "uniquify_vertices",
    "get_barycentric_coordinates",
    "parse_obj",
    "expand_obj",
    "load_obj_text",
    "load_obj",
    "Config",
    "logger",
]
