"""
Тесты для матриц проекции и вида

Проверяет:
1. ortho/un_ortho взаимно обратны
2. perspective отображает near/far в NDC -1/+1
3. look_at переносит наблюдателя в начало координат, взгляд вдоль -Z
"""

import math

import pytest

from vmath.core.domain.matrix import Mat4f
from vmath.core.domain.vector import Vec3f, Vec4f
from vmath.core.math.projection import frustum, look_at, ortho, perspective, un_ortho

ORTHO_ARGS = (-4.0, 6.0, -2.0, 3.0, 0.5, 50.0)


def ndc(m: Mat4f, point: Vec3f) -> Vec3f:
    """Однородное деление после проекции"""
    clip = m @ point.vec4(1.0)
    return clip.xyz().div_scalar(clip.w)


class TestOrtho:
    """Тесты ortho/un_ortho"""

    def test_inverse_pair(self) -> None:
        product = ortho(*ORTHO_ARGS) @ un_ortho(*ORTHO_ARGS)
        assert product.m == pytest.approx(Mat4f.ident().m, abs=1e-12)

    def test_matches_general_inverse(self) -> None:
        inv, ok = ortho(*ORTHO_ARGS).inverse()
        assert ok
        assert inv.m == pytest.approx(un_ortho(*ORTHO_ARGS).m, abs=1e-12)

    def test_corners_map_to_ndc(self) -> None:
        m = ortho(*ORTHO_ARGS)
        left, right, bottom, top, near, far = ORTHO_ARGS
        assert ndc(m, Vec3f(left, bottom, -near)).split() == pytest.approx((-1, -1, -1))
        assert ndc(m, Vec3f(right, top, -far)).split() == pytest.approx((1, 1, 1))

    def test_is_affine(self) -> None:
        assert ortho(*ORTHO_ARGS).is_affine()


class TestPerspective:
    """Тесты frustum/perspective"""

    def test_near_far_planes(self) -> None:
        m = perspective(math.radians(90), 1.5, 0.1, 100.0)
        assert ndc(m, Vec3f(0, 0, -0.1)).z == pytest.approx(-1.0)
        assert ndc(m, Vec3f(0, 0, -100.0)).z == pytest.approx(1.0)

    def test_field_of_view_edges(self) -> None:
        """На границе угла обзора y_ndc = ±1, x учитывает aspect"""
        m = perspective(math.radians(90), 2.0, 1.0, 10.0)
        top = ndc(m, Vec3f(0, 5, -5))
        assert top.y == pytest.approx(1.0)
        side = ndc(m, Vec3f(10, 0, -5))
        assert side.x == pytest.approx(1.0)

    def test_w_is_view_depth(self) -> None:
        m = perspective(1.0, 1.0, 0.1, 10.0)
        assert (m @ Vec4f(0, 0, -7, 1)).w == pytest.approx(7.0)

    def test_perspective_is_symmetric_frustum(self) -> None:
        fov, aspect, near, far = 0.8, 1.6, 0.5, 20.0
        h = math.tan(fov / 2) * near
        w = h * aspect
        assert perspective(fov, aspect, near, far) == frustum(-w, w, -h, h, near, far)


class TestLookAt:
    """Тесты look_at"""

    def test_eye_to_origin(self) -> None:
        m = look_at(Vec3f(0, 0, 5), Vec3f(0, 0, 0), Vec3f(0, 1, 0))
        eye = m @ Vec4f(0, 0, 5, 1)
        assert eye.split() == pytest.approx((0, 0, 0, 1), abs=1e-12)
        target = m @ Vec4f(0, 0, 0, 1)
        assert target.split() == pytest.approx((0, 0, -5, 1), abs=1e-12)

    def test_target_on_negative_z(self) -> None:
        eye, target = Vec3f(3, 4, -2), Vec3f(-1, 0.5, 6)
        m = look_at(eye, target, Vec3f(0, 1, 0))
        p = (m @ target.vec4(1.0)).xyz()
        assert p.split() == pytest.approx((0, 0, -eye.distance(target)), abs=1e-9)

    def test_up_stays_up(self) -> None:
        m = look_at(Vec3f(0, 0, 5), Vec3f(0, 0, 0), Vec3f(0, 1, 0))
        up = (m @ Vec4f(0, 1, 5, 1)).xyz()
        assert up.split() == pytest.approx((0, 1, 0), abs=1e-12)

    def test_rotation_is_orthonormal(self) -> None:
        m = look_at(Vec3f(1, 2, 3), Vec3f(-4, 0, 1), Vec3f(0, 1, 0))
        r = m.mat3()
        assert (r @ r.transpose()).m == pytest.approx(
            (1, 0, 0, 0, 1, 0, 0, 0, 1), abs=1e-12
        )
