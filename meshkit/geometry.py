"""
Каноническое представление геометрии: плоские буферы атрибутов + индексы.

Все буферы – одномерные numpy‑массивы с фиксированным шагом:
позиции – 3 (или 2 для 2‑D квада), UV – 2, нормали и тангенсы – 3.
Пустой буфер означает «атрибут отсутствует».
"""

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from meshkit.utils.logger import logger


class GeometryError(ValueError):
    """Нарушен структурный инвариант геометрии (ошибка выше по конвейеру)."""


class ObjParseError(GeometryError):
    """OBJ‑текст не соответствует поддерживаемому подмножеству формата."""


def _floats(values) -> np.ndarray:
    return np.asarray(values if values is not None else [], dtype=np.float32).ravel()


def _indices(values) -> np.ndarray:
    arr = np.asarray(values if values is not None else [], dtype=np.int64).ravel()
    if arr.size and arr.min() < 0:
        raise GeometryError("Vertex indices must not be negative")
    return arr.astype(np.uint32)


@dataclass(eq=False)
class Geometry:
    """Треугольная сетка, готовая к передаче в GPU‑буферы."""

    name: str
    positions: np.ndarray = field(default_factory=lambda: np.zeros(0, np.float32))
    indices: np.ndarray = field(default_factory=lambda: np.zeros(0, np.uint32))
    tex_coords: np.ndarray = field(default_factory=lambda: np.zeros(0, np.float32))
    normals: np.ndarray = field(default_factory=lambda: np.zeros(0, np.float32))
    tangents: np.ndarray = field(default_factory=lambda: np.zeros(0, np.float32))
    position_size: int = 3

    def __post_init__(self):
        if self.position_size not in (2, 3):
            raise GeometryError(
                f"Position size of \"{self.name}\" must be 2 or 3, got {self.position_size}")
        self.positions = _floats(self.positions)
        self.indices = _indices(self.indices)
        self.tex_coords = _floats(self.tex_coords)
        self.normals = _floats(self.normals)
        self.tangents = _floats(self.tangents)

    # -----------------------------------------------------------------
    @property
    def vertex_count(self) -> int:
        return len(self.positions) // self.position_size

    @property
    def face_count(self) -> int:
        return len(self.indices) // 3

    def pools(self) -> List[Tuple[str, int]]:
        """(имя атрибута, шаг) для всех буферов вершин."""
        return [
            ("positions", self.position_size),
            ("tex_coords", 2),
            ("normals", 3),
            ("tangents", 3),
        ]

    # -----------------------------------------------------------------
    def copy(self) -> "Geometry":
        return Geometry(
            name=self.name,
            positions=self.positions.copy(),
            indices=self.indices.copy(),
            tex_coords=self.tex_coords.copy(),
            normals=self.normals.copy(),
            tangents=self.tangents.copy(),
            position_size=self.position_size,
        )

    def as_gpu_arrays(self) -> dict:
        """Непрерывные float32/uint32 массивы для построения GPU‑буферов."""
        validate_geometry(self)
        return {
            "name": self.name,
            "positions": np.ascontiguousarray(self.positions, dtype=np.float32),
            "indices": np.ascontiguousarray(self.indices, dtype=np.uint32),
            "tex_coords": np.ascontiguousarray(self.tex_coords, dtype=np.float32),
            "normals": np.ascontiguousarray(self.normals, dtype=np.float32),
            "tangents": np.ascontiguousarray(self.tangents, dtype=np.float32),
        }

    def bounding_sphere(self) -> Tuple[np.ndarray, float]:
        """(центр, радиус) в локальных координатах; для пустой сетки – (0, 0)."""
        if self.vertex_count == 0:
            return np.zeros(self.position_size, dtype=np.float32), 0.0
        verts = self.positions.reshape((-1, self.position_size))
        centre = verts.mean(axis=0).astype(np.float32)
        radius = float(np.linalg.norm(verts - centre, axis=1).max())
        return centre, radius

    def __repr__(self):
        return (f"Geometry({self.name!r}, vertices={self.vertex_count}, "
                f"faces={self.face_count})")


@dataclass(eq=False)
class RawObjData:
    """Результат разбора OBJ до «сварки» вершин: отдельные пулы и углы."""

    name: str
    positions: List[float] = field(default_factory=list)
    tex_coords: List[float] = field(default_factory=list)
    normals: List[float] = field(default_factory=list)
    # (position, uv, normal) – 0‑based, по 3 угла на грань
    corners: List[Tuple[int, int, int]] = field(default_factory=list)


def validate_geometry(geometry: Geometry) -> int:
    """
    Проверить шаги буферов, совпадение числа вершин и диапазон индексов.
    Возвращает количество вершин; при нарушении бросает GeometryError.
    """
    name = geometry.name
    for attr, stride in geometry.pools():
        length = len(getattr(geometry, attr))
        if length % stride != 0:
            raise GeometryError(
                f"The {attr} array of \"{name}\" must have a length that is "
                f"a multiple of {stride}, but it is {length}.")
    if len(geometry.indices) % 3 != 0:
        raise GeometryError(
            f"The indices array of \"{name}\" must have a length that is "
            f"a multiple of 3, but it is {len(geometry.indices)}.")

    vertex_count = geometry.vertex_count
    for attr, stride in geometry.pools()[1:]:
        pool = getattr(geometry, attr)
        if len(pool) and len(pool) // stride != vertex_count:
            raise GeometryError(
                f"The {attr} array of \"{name}\" describes {len(pool) // stride} "
                f"vertices, but the positions array describes {vertex_count}.")

    if len(geometry.indices) and int(geometry.indices.max()) >= vertex_count:
        raise GeometryError(
            f"Index {int(geometry.indices.max())} of \"{name}\" is out of range "
            f"for {vertex_count} vertices.")
    return vertex_count


def check_unit_length(geometry: Geometry, attr: str = "normals", tolerance: float = 1e-4) -> np.ndarray:
    """
    Индексы вершин, у которых `attr` не единичной длины.
    Нулевые векторы (вершина без граней) в результат не попадают.
    """
    pool = getattr(geometry, attr)
    if not len(pool):
        return np.zeros(0, dtype=np.int64)
    lengths = np.linalg.norm(pool.reshape((-1, 3)), axis=1)
    bad = np.nonzero((lengths > 0.0) & (np.abs(lengths - 1.0) > tolerance))[0]
    if bad.size:
        logger.warning(f"[Geometry] {bad.size} {attr} of \"{geometry.name}\" are not unit length")
    return bad
