"""
Value-типы vmath

Все типы — immutable Pydantic модели:
- Векторы: Vec2f, Vec3f, Vec4f, Vec2i, Vec3i, Vec4i
- Матрицы (column-major): Mat2f, Mat3f, Mat4f
- Кватернион: Quat
- Прямоугольники (AABB): Rectf, Recti
"""

from vmath.core.domain.base import ValueModel
from vmath.core.domain.vector import (
    FloatVector,
    IntVector,
    Vec2f,
    Vec2i,
    Vec3f,
    Vec3i,
    Vec4f,
    Vec4i,
)
from vmath.core.domain.matrix import Mat2f, Mat3f, Mat4f, SquareMatrix
from vmath.core.domain.quat import SLERP_LINEAR_THRESHOLD, Quat
from vmath.core.domain.rect import Rectf, Recti

__all__ = [
    # Base
    "ValueModel",
    # Vectors
    "FloatVector",
    "IntVector",
    "Vec2f",
    "Vec3f",
    "Vec4f",
    "Vec2i",
    "Vec3i",
    "Vec4i",
    # Matrices
    "SquareMatrix",
    "Mat2f",
    "Mat3f",
    "Mat4f",
    # Quaternion
    "Quat",
    "SLERP_LINEAR_THRESHOLD",
    # Rectangles
    "Rectf",
    "Recti",
]
