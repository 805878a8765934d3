"""
Общие помощники генераторов: валидация параметров, сетка ячеек, UV.
"""

import math

import numpy as np

from meshkit.math.mat3 import Mat3


def clamp_segments(value, minimum: int, floor: bool = False) -> int:
    """Округлить число сегментов (или взять floor) и ограничить снизу."""
    value = float(value)
    count = math.floor(value) if floor else math.floor(value + 0.5)
    return max(int(count), minimum)


def grid_cells(columns: int, rows: int):
    """
    Углы всех ячеек регулярной сетки (columns+1)×(rows+1) вершин,
    пронумерованной построчно.  Возвращает (a, b, c, d):
    a=(x, y), b=(x+1, y), c=(x+1, y+1), d=(x, y+1).
    """
    row = columns + 1
    y, x = np.meshgrid(np.arange(rows), np.arange(columns), indexing="ij")
    a = (y * row + x).ravel()
    return a, a + 1, a + row + 1, a + row


def apply_texture_xform(uvs: np.ndarray, xform: Mat3 = None) -> np.ndarray:
    if xform is None or xform.is_identity():
        return np.asarray(uvs, dtype=np.float64).reshape((-1, 2))
    return xform.apply_to_uvs(uvs)


def repeat_vector(vector, count: int) -> np.ndarray:
    """Один и тот же вектор для `count` вершин (плоский буфер)."""
    return np.tile(np.asarray(vector, dtype=np.float64), count)
