"""
vmath — примитивы линейной алгебры для графики, игр и симуляций

Векторы 2D/3D/4D (float и int), квадратные матрицы 2x2/3x3/4x4,
кватернионы, AABB-прямоугольники, стек матриц и скалярные утилиты
(epsilon-сравнение, clamp/wrap, углы, интерполяция, проекции).
"""

from vmath.core.domain import (
    Mat2f,
    Mat3f,
    Mat4f,
    Quat,
    Rectf,
    Recti,
    Vec2f,
    Vec2i,
    Vec3f,
    Vec3i,
    Vec4f,
    Vec4i,
)
from vmath.core.math import (
    EPSILON,
    MIN_NORMAL,
    angle_diff,
    clamp,
    clamp_int,
    degrees,
    equal,
    equal_eps,
    lerp,
    normalize_degrees,
    normalize_radians,
    radians,
    wrap,
    wrap_int,
)
from vmath.core.math.geometry import (
    angle_to_vector,
    cartesian_to_spherical,
    is_point_on_left,
    is_point_on_line,
    point_to_line_distance_2d,
    point_to_line_segment_distance_2d,
    polar_to_cartesian_2d,
    spherical_to_cartesian,
)
from vmath.core.math.projection import frustum, look_at, ortho, perspective, un_ortho
from vmath.stack import MatrixStackUnderflow, MatStack4f

__version__ = "1.0.0"

__all__ = [
    # Vectors
    "Vec2f",
    "Vec3f",
    "Vec4f",
    "Vec2i",
    "Vec3i",
    "Vec4i",
    # Matrices
    "Mat2f",
    "Mat3f",
    "Mat4f",
    # Quaternion
    "Quat",
    # Rectangles
    "Rectf",
    "Recti",
    # Matrix stack
    "MatStack4f",
    "MatrixStackUnderflow",
    # Scalar: Epsilon
    "EPSILON",
    "MIN_NORMAL",
    "equal",
    "equal_eps",
    # Scalar: Clamp / wrap
    "clamp",
    "clamp_int",
    "wrap",
    "wrap_int",
    # Scalar: Angles / interpolation
    "angle_diff",
    "degrees",
    "lerp",
    "normalize_degrees",
    "normalize_radians",
    "radians",
    # Geometry
    "angle_to_vector",
    "cartesian_to_spherical",
    "is_point_on_left",
    "is_point_on_line",
    "point_to_line_distance_2d",
    "point_to_line_segment_distance_2d",
    "polar_to_cartesian_2d",
    "spherical_to_cartesian",
    # Projection
    "frustum",
    "look_at",
    "ortho",
    "perspective",
    "un_ortho",
]
