"""
Projection — матрицы проекции и вида (конвенции OpenGL)

Все функции возвращают Mat4f в column-major порядке. Камера смотрит
вдоль -Z, NDC по глубине — [-1, 1].
"""

import math

from vmath.core.domain.matrix import Mat4f
from vmath.core.domain.vector import Vec3f


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4f:
    """Ортографическая проекция."""
    return Mat4f(
        2.0 / (right - left), 0.0, 0.0, 0.0,
        0.0, 2.0 / (top - bottom), 0.0, 0.0,
        0.0, 0.0, -2.0 / (far - near), 0.0,
        -(right + left) / (right - left),
        -(top + bottom) / (top - bottom),
        -(far + near) / (far - near),
        1.0,
    )  # fmt: skip


def un_ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4f:
    """Обратная ортографическая проекция (NDC → пространство вида)."""
    return Mat4f(
        (right - left) / 2.0, 0.0, 0.0, 0.0,
        0.0, (top - bottom) / 2.0, 0.0, 0.0,
        0.0, 0.0, (far - near) / -2.0, 0.0,
        (left + right) / 2.0,
        (top + bottom) / 2.0,
        (far + near) / -2.0,
        1.0,
    )  # fmt: skip


def frustum(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4f:
    """Перспективная проекция по плоскостям усечённой пирамиды."""
    inv_x = 1.0 / (right - left)
    inv_y = 1.0 / (top - bottom)
    inv_z = 1.0 / (near - far)
    return Mat4f(
        near * 2.0 * inv_x, 0.0, 0.0, 0.0,
        0.0, near * 2.0 * inv_y, 0.0, 0.0,
        (right + left) * inv_x, (bottom + top) * inv_y, (near + far) * inv_z, -1.0,
        0.0, 0.0, far * near * 2.0 * inv_z, 0.0,
    )  # fmt: skip


def perspective(fov_y: float, aspect_ratio: float, near: float, far: float) -> Mat4f:
    """
    Симметричная перспективная проекция.

    Args:
        fov_y: Вертикальный угол обзора (радианы)
        aspect_ratio: Ширина / высота
        near: Ближняя плоскость (> 0)
        far: Дальняя плоскость
    """
    half_height = math.tan(fov_y / 2.0) * near
    half_width = half_height * aspect_ratio
    return frustum(-half_width, half_width, -half_height, half_height, near, far)


def look_at(eye: Vec3f, target: Vec3f, up: Vec3f) -> Mat4f:
    """Матрица вида: наблюдатель в eye смотрит на target, up задаёт верх."""
    forward = target.sub(eye).normalize()
    right = forward.cross(up).normalize()
    up = right.cross(forward)

    rotation = Mat4f(
        right.x, up.x, -forward.x, 0.0,
        right.y, up.y, -forward.y, 0.0,
        right.z, up.z, -forward.z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )  # fmt: skip
    return rotation.mul(Mat4f.from_translation(eye.negate()))
