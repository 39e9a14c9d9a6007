"""
Geometry helpers — координатные преобразования и 2D-геометрия линий

Сферические координаты: (radius, azimuth, inclination), где azimuth —
угол в плоскости XY от оси X, inclination — угол от оси Z.
"""

import math

from vmath.core.domain.vector import Vec2f, Vec3f
from vmath.core.math.numerical_safeguards import EPSILON, clamp, equal_eps

# =============================================================================
# КООРДИНАТНЫЕ ПРЕОБРАЗОВАНИЯ
# =============================================================================


def cartesian_to_spherical(pos: Vec3f) -> tuple[float, float, float]:
    """
    Декартовы координаты → сферические.

    Args:
        pos: Точка в 3D

    Returns:
        (radius, azimuth, inclination); для начала координат inclination = 0
    """
    radius = pos.length()
    azimuth = math.atan2(pos.y, pos.x)
    if radius == 0:
        return radius, azimuth, 0.0
    inclination = math.acos(clamp(pos.z / radius, -1.0, 1.0))
    return radius, azimuth, inclination


def spherical_to_cartesian(radius: float, azimuth: float, inclination: float) -> Vec3f:
    """Сферические координаты → декартовы."""
    sin_az, cos_az = math.sin(azimuth), math.cos(azimuth)
    sin_inc, cos_inc = math.sin(inclination), math.cos(inclination)
    return Vec3f(
        radius * sin_inc * cos_az,
        radius * sin_inc * sin_az,
        radius * cos_inc,
    )


def angle_to_vector(rad: float, length: float) -> Vec2f:
    """2D вектор длины length под углом rad к оси X."""
    return Vec2f(math.cos(rad), math.sin(rad)).normalize().mul_scalar(length)


def polar_to_cartesian_2d(distance: float, rad: float) -> Vec2f:
    return Vec2f(math.cos(rad) * distance, math.sin(rad) * distance)


# =============================================================================
# ТОЧКА И ЛИНИЯ (2D)
# =============================================================================


def point_to_line_distance_2d(a: Vec2f, b: Vec2f, point: Vec2f) -> float:
    """
    Расстояние от точки до бесконечной прямой через a и b.

    Вектор a→point проецируется на a→b; результат — расстояние от
    точки до основания перпендикуляра.
    """
    line_vec = b.sub(a)
    point_vec = point.sub(a)
    base = a.add(point_vec.project(line_vec))
    return point.sub(base).length()


def point_to_line_segment_distance_2d(a: Vec2f, b: Vec2f, point: Vec2f) -> float:
    """
    Расстояние от точки до отрезка [a, b].

    Если основание перпендикуляра лежит за пределами отрезка,
    возвращается расстояние до ближайшего конца.
    """
    line_vec = b.sub(a)
    point_vec = point.sub(a)

    c1 = point_vec.dot(line_vec)
    if c1 <= 0:  # до a
        return point.sub(a).length()

    c2 = line_vec.dot(line_vec)
    if c2 <= c1:  # после b
        return point.sub(b).length()

    base = a.add(line_vec.mul_scalar(c1 / c2))
    return point.sub(base).length()


def is_point_on_line(a: Vec2f, b: Vec2f, point: Vec2f, eps: float = EPSILON) -> bool:
    """True если точка лежит на прямой a→b (с относительной толерантностью eps)."""
    return equal_eps(b.sub(a).mag_cross(point.sub(a)), 0.0, eps)


def is_point_on_left(a: Vec2f, b: Vec2f, point: Vec2f) -> bool:
    """
    True если точка строго слева от прямой a→b.

    Точка на прямой слева не считается.
    """
    return b.sub(a).mag_cross(point.sub(a)) > 0
