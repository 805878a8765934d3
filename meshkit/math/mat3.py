# meshkit/math/mat3.py
"""
Аффинное 2‑D преобразование в виде 3×3 матрицы.
Используется для трансформации текстурных координат генераторов.
"""
import numpy as np
from math import radians, sin, cos


class Mat3:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(3, dtype=np.float64)
        else:
            self.m = np.array(array, dtype=np.float64).reshape((3, 3))

    @staticmethod
    def identity():
        return Mat3(np.identity(3, dtype=np.float64))

    @staticmethod
    def translate(tx: float, ty: float):
        m = np.identity(3, dtype=np.float64)
        m[0, 2] = tx
        m[1, 2] = ty
        return Mat3(m)

    @staticmethod
    def scale(sx: float, sy: float):
        m = np.identity(3, dtype=np.float64)
        m[0, 0] = sx
        m[1, 1] = sy
        return Mat3(m)

    @staticmethod
    def rotate(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(3, dtype=np.float64)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return Mat3(m)

    def is_identity(self) -> bool:
        return bool(np.array_equal(self.m, np.identity(3)))

    def apply_to_uvs(self, uvs: np.ndarray) -> np.ndarray:
        """Применить к массиву UV формы (N, 2); возвращает новый массив."""
        pts = np.asarray(uvs, dtype=np.float64).reshape((-1, 2))
        return pts @ self.m[:2, :2].T + self.m[:2, 2]

    def __matmul__(self, other: "Mat3") -> "Mat3":
        return Mat3(np.dot(self.m, other.m))

    def __repr__(self):
        return f"Mat3({self.m})"
