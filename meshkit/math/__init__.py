"""
Математический суб‑пакет: Vec3, Quat, Mat3.
"""

from meshkit.math.vec3 import Vec3
from meshkit.math.quat import Quat
from meshkit.math.mat3 import Mat3

__all__ = ["Vec3", "Quat", "Mat3"]
