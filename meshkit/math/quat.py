# meshkit/math/quat.py
# ---------------------------------------------------------------
# Кватернион поворота (x, y, z, w):
# - создание из оси/угла,
# - умножение,
# - преобразование в 3×3 матрицу,
# - поворот одного вектора и целого буфера точек.
# ---------------------------------------------------------------

import numpy as np
from math import sin, cos, radians


class Quat:
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @staticmethod
    def from_axis_angle(axis, angle_deg):
        """axis – 3‑элементный iterable (нормализуется), angle – в градусах."""
        a = radians(angle_deg) / 2.0
        s = sin(a)
        ax = np.array(list(axis), dtype=np.float64)
        n = np.linalg.norm(ax)
        if n == 0.0:
            raise ValueError("Rotation axis must not be a zero vector")
        ax = ax / n
        return Quat(ax[0] * s, ax[1] * s, ax[2] * s, cos(a))

    def __mul__(self, other: "Quat") -> "Quat":
        """Произведение Гамильтона."""
        x = self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y
        y = self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x
        z = self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w
        w = self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z
        return Quat(x, y, z, w)

    def conjugate(self):
        return Quat(-self.x, -self.y, -self.z, self.w)

    # -----------------------------------------------------------
    #  Преобразования
    # -----------------------------------------------------------
    def to_mat3(self) -> np.ndarray:
        """3×3 матрица поворота (для единичного кватерниона)."""
        x, y, z, w = self.x, self.y, self.z, self.w
        xx, yy, zz = x*x, y*y, z*z
        xy, xz, yz = x*y, x*z, y*z
        wx, wy, wz = w*x, w*y, w*z

        return np.array([
            [1 - 2*(yy + zz), 2*(xy - wz),     2*(xz + wy)],
            [2*(xy + wz),     1 - 2*(xx + zz), 2*(yz - wx)],
            [2*(xz - wy),     2*(yz + wx),     1 - 2*(xx + yy)],
        ], dtype=np.float64)

    def rotate_vector(self, vec) -> np.ndarray:
        """Вращает один 3‑D вектор (iterable длины 3)."""
        v = list(vec)
        qvec = Quat(v[0], v[1], v[2], 0.0)
        res = self * qvec * self.conjugate()
        return np.array([res.x, res.y, res.z], dtype=np.float64)

    def rotate_points(self, points: np.ndarray) -> np.ndarray:
        """Вращает массив точек формы (N, 3)."""
        pts = np.asarray(points, dtype=np.float64).reshape((-1, 3))
        return pts @ self.to_mat3().T

    def __repr__(self):
        return f"Quat({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"
