"""
Тесты для векторов Vec2f/Vec3f/Vec4f и Vec2i/Vec3i/Vec4i

Проверяет:
1. Создание (позиционное/именованное), валидацию и неизменяемость
2. Строковое представление
3. Покомпонентную арифметику и операторы
4. Единую политику normalize/lerp для всех размерностей
5. Размерностно-специфичные операции (cross, mag_cross, повороты)
6. Целочисленное деление с усечением к нулю
"""

import math

import pytest
from pydantic import ValidationError

from vmath.core.domain.quat import Quat
from vmath.core.domain.vector import IntVector, Vec2f, Vec2i, Vec3f, Vec3i, Vec4f, Vec4i


def assert_vec_approx(actual, expected, abs_tol: float = 1e-9) -> None:
    assert actual.split() == pytest.approx(expected.split(), abs=abs_tol)


# =============================================================================
# СОЗДАНИЕ И ВАЛИДАЦИЯ
# =============================================================================


class TestVectorConstruction:
    """Тесты создания векторов"""

    def test_positional_and_keyword_equivalent(self) -> None:
        assert Vec3f(1, 2, 3) == Vec3f(x=1, y=2, z=3)
        assert Vec4i(1, 2, 3, 4) == Vec4i(1, 2, z=3, w=4)

    def test_omitted_components_default_to_zero(self) -> None:
        assert Vec3f() == Vec3f(0, 0, 0)
        assert Vec2i(5) == Vec2i(5, 0)

    def test_too_many_components_raises(self) -> None:
        with pytest.raises(TypeError, match="at most 3"):
            Vec3f(1, 2, 3, 4)

    def test_duplicate_component_raises(self) -> None:
        with pytest.raises(TypeError, match="multiple values"):
            Vec2f(1, 2, x=3)

    def test_non_numeric_component_raises(self) -> None:
        with pytest.raises(ValidationError):
            Vec2f("abc", 1)

    def test_fractional_int_component_raises(self) -> None:
        """Целочисленные векторы не принимают дробные значения"""
        with pytest.raises(ValidationError):
            Vec2i(1.5, 2)

    def test_immutable(self) -> None:
        v = Vec2f(1, 2)
        with pytest.raises(ValidationError):
            v.x = 5.0  # type: ignore[misc]

    def test_split_index_len(self) -> None:
        v = Vec4f(1, 2, 3, 4)
        assert v.split() == (1.0, 2.0, 3.0, 4.0)
        assert v[0] == 1.0
        assert v[-1] == 4.0
        assert len(v) == 4
        with pytest.raises(IndexError):
            v[4]

    def test_unpacking_yields_components(self) -> None:
        """Итерация идёт по компонентам, согласованно с split() и индексами"""
        x, y, z = Vec3f(1, 2, 3)
        assert (x, y, z) == (1.0, 2.0, 3.0)
        assert tuple(Vec4i(1, 2, 3, 4)) == Vec4i(1, 2, 3, 4).split()
        assert sum(Vec2f(0.5, 2)) == 2.5
        assert list(Quat.ident()) == [1.0, 0.0, 0.0, 0.0]

    def test_int_vector_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            IntVector()


class TestVectorString:
    """Тесты строкового представления"""

    def test_float_vectors(self) -> None:
        assert str(Vec2f(1, 2)) == "Vec2f[1.000000 x 2.000000]"
        assert str(Vec3f(-1.5, 0, 2)) == "Vec3f[-1.500000 x 0.000000 x 2.000000]"
        assert str(Vec4f(1, 2, 3, 4)) == "Vec4f[1.000000 x 2.000000 x 3.000000 x 4.000000]"

    def test_int_vectors(self) -> None:
        assert str(Vec2i(1, 2)) == "Vec2i[1 x 2]"
        assert str(Vec3i(-1, 0, 7)) == "Vec3i[-1 x 0 x 7]"

    def test_format(self) -> None:
        assert Vec2f(1, 2).format("{:.1f}/{:.1f}") == "1.0/2.0"
        assert Vec3i(1, 2, 3).format("{}-{}-{}") == "1-2-3"


# =============================================================================
# ОБЩАЯ АРИФМЕТИКА
# =============================================================================


class TestFloatVectorArithmetic:
    """Тесты покомпонентной арифметики float-векторов"""

    def test_add_sub(self) -> None:
        assert Vec2f(1, 2).add(Vec2f(3, 4)) == Vec2f(4, 6)
        assert Vec3f(1, 2, 3).sub(Vec3f(3, 2, 1)) == Vec3f(-2, 0, 2)
        assert Vec2f(1, 2).add_scalar(1) == Vec2f(2, 3)
        assert Vec2f(1, 2).sub_scalar(1) == Vec2f(0, 1)

    def test_mul_div(self) -> None:
        assert Vec3f(1, 2, 3).mul(Vec3f(2, 3, 4)) == Vec3f(2, 6, 12)
        assert Vec3f(2, 6, 12).div(Vec3f(2, 3, 4)) == Vec3f(1, 2, 3)
        assert Vec4f(1, 2, 3, 4).mul_scalar(2) == Vec4f(2, 4, 6, 8)
        assert Vec4f(2, 4, 6, 8).div_scalar(2) == Vec4f(1, 2, 3, 4)

    def test_operators(self) -> None:
        a, b = Vec2f(1, 2), Vec2f(3, 4)
        assert a + b == Vec2f(4, 6)
        assert b - a == Vec2f(2, 2)
        assert -a == Vec2f(-1, -2)
        assert a * 2 == Vec2f(2, 4)
        assert 2 * a == Vec2f(2, 4)
        assert b / 2 == Vec2f(1.5, 2)
        assert a * b == Vec2f(3, 8)

    def test_abs_negate_clamp(self) -> None:
        assert Vec3f(-1, 2, -3).abs() == Vec3f(1, 2, 3)
        assert Vec3f(-1, 2, -3).negate() == Vec3f(1, -2, 3)
        assert Vec3f(-5, 0.5, 5).clamp(-1, 1) == Vec3f(-1, 0.5, 1)

    def test_dot_length_distance(self) -> None:
        assert Vec3f(1, 2, 3).dot(Vec3f(4, 5, 6)) == 32.0
        assert Vec2f(3, 4).length() == 5.0
        assert Vec2f(3, 4).square_length() == 25.0
        assert Vec2f(0, 0).distance(Vec2f(3, 4)) == 5.0
        assert Vec2f(1, 1).square_distance(Vec2f(4, 5)) == 25.0

    def test_equal_uses_epsilon(self) -> None:
        assert Vec3f(1, 2, 3).equal(Vec3f(1, 2, 3 + 1e-12))
        assert not Vec3f(1, 2, 3).equal(Vec3f(1, 2, 3.001))
        assert Vec3f(1, 2, 3).equal(Vec3f(1, 2, 3.001), eps=1e-3)

    def test_is_zero(self) -> None:
        assert Vec3f().is_zero()
        assert not Vec3f(0, 0, 1e-3).is_zero()


class TestDimensionMismatch:
    """Операции над векторами разной размерности — ошибка, а не усечение"""

    @pytest.mark.parametrize(
        "op",
        [
            lambda a, b: a.add(b),
            lambda a, b: a.sub(b),
            lambda a, b: a.mul(b),
            lambda a, b: a.div(b),
            lambda a, b: a.dot(b),
            lambda a, b: a.equal(b),
            lambda a, b: a.lerp(b, 0.5),
        ],
    )
    def test_float_vectors(self, op) -> None:
        with pytest.raises(ValueError):
            op(Vec3f(1, 2, 3), Vec2f(10, 20))
        with pytest.raises(ValueError):
            op(Vec2f(10, 20), Vec4f(1, 2, 3, 4))

    def test_int_vectors(self) -> None:
        with pytest.raises(ValueError):
            Vec3i(1, 2, 3).add(Vec2i(10, 20))
        with pytest.raises(ValueError):
            Vec2i(1, 2).dot(Vec3i(1, 2, 3))
        with pytest.raises(ValueError):
            Vec4i(4, 4, 4, 4).div(Vec2i(2, 2))

    def test_operators(self) -> None:
        with pytest.raises(ValueError):
            Vec3f(1, 2, 3) + Vec2f(1, 1)

    def test_same_dimension_unaffected(self) -> None:
        assert Vec3f(1, 2, 3).add(Vec3f(10, 20, 30)) == Vec3f(11, 22, 33)


class TestNormalize:
    """Тесты normalize: единая политика для всех размерностей"""

    def test_unit_length(self) -> None:
        assert Vec3f(3, 0, 4).normalize().equal(Vec3f(0.6, 0, 0.8))
        assert Vec2f(0, -7).normalize() == Vec2f(0, -1)
        assert Vec4f(2, 2, 2, 2).normalize().length() == pytest.approx(1.0)

    @pytest.mark.parametrize("zero", [Vec2f(), Vec3f(), Vec4f()])
    def test_zero_vector_stays_zero(self, zero) -> None:
        """Нормализация нулевого вектора — нулевой вектор без NaN"""
        result = zero.normalize()
        assert result == zero
        assert all(math.isfinite(c) for c in result.split())


class TestLerpProject:
    """Тесты lerp и project"""

    @pytest.mark.parametrize(
        "a, b",
        [
            (Vec2f(0, 0), Vec2f(10, 20)),
            (Vec3f(0, 0, 0), Vec3f(10, 20, 30)),
            (Vec4f(0, 0, 0, 0), Vec4f(10, 20, 30, 40)),
        ],
    )
    def test_lerp_canonical_for_all_dimensions(self, a, b) -> None:
        """lerp(other, t) = self * (1 - t) + other * t"""
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b
        assert a.lerp(b, 0.5) == b.mul_scalar(0.5)

    def test_project(self) -> None:
        assert Vec2f(2, 3).project(Vec2f(1, 0)) == Vec2f(2, 0)
        assert Vec3f(1, 1, 0).project(Vec3f(0, 2, 0)) == Vec3f(0, 1, 0)

    def test_project_onto_zero_vector(self) -> None:
        assert Vec2f(2, 3).project(Vec2f()) == Vec2f()


class TestConversions:
    """Тесты конверсий float ↔ int"""

    def test_to_int_truncates(self) -> None:
        assert Vec2f(-3.7, 4.5).to_int() == Vec2i(-3, 4)
        assert Vec3f(1.9, -1.9, 0.1).to_int() == Vec3i(1, -1, 0)

    def test_round_half_away_from_zero(self) -> None:
        assert Vec2f(-3.7, 4.5).round() == Vec2i(-4, 5)
        assert Vec2f(-2.5, 2.5).round() == Vec2i(-3, 3)
        assert Vec4f(0.4, -0.4, 1.5, -1.5).round() == Vec4i(0, 0, 2, -2)

    def test_to_float(self) -> None:
        assert Vec2i(1, -2).to_float() == Vec2f(1.0, -2.0)
        assert Vec4i(1, 2, 3, 4).to_float() == Vec4f(1, 2, 3, 4)

    def test_dimension_changes(self) -> None:
        assert Vec2f(1, 2).vec3(3) == Vec3f(1, 2, 3)
        assert Vec2f(1, 2).vec4(3, 4) == Vec4f(1, 2, 3, 4)
        assert Vec3f(1, 2, 3).vec4(4) == Vec4f(1, 2, 3, 4)
        assert Vec3f(1, 2, 3).xy() == Vec2f(1, 2)
        assert Vec4f(1, 2, 3, 4).xyz() == Vec3f(1, 2, 3)
        assert Vec4i(1, 2, 3, 4).xy() == Vec2i(1, 2)


# =============================================================================
# 2D
# =============================================================================


class TestVec2f:
    """Тесты 2D-специфичных операций"""

    def test_mag_cross(self) -> None:
        assert Vec2f(1, 0).mag_cross(Vec2f(0, 1)) == 1.0
        assert Vec2f(0, 1).mag_cross(Vec2f(1, 0)) == -1.0

    def test_parallel_and_collinear(self) -> None:
        """Противоположные векторы параллельны, но не коллинеарны"""
        assert Vec2f(1, 2).is_parallel(Vec2f(-2, -4))
        assert not Vec2f(1, 2).is_collinear(Vec2f(-2, -4))
        assert Vec2f(1, 2).is_collinear(Vec2f(2, 4))
        assert not Vec2f(1, 2).is_parallel(Vec2f(2, 1))

    def test_is_orthogonal(self) -> None:
        assert Vec2f(0, 3).is_orthogonal()
        assert not Vec2f(1, 3).is_orthogonal()

    def test_normal_vec(self) -> None:
        assert Vec2f(1, 0).normal_vec(on_left=True) == Vec2f(0, 1)
        assert Vec2f(1, 0).normal_vec(on_left=False) == Vec2f(0, -1)

    def test_angles(self) -> None:
        assert Vec2f(1, 0).angle(Vec2f(0, 1)) == pytest.approx(math.pi / 2)
        assert Vec2f(0, 1).angle(Vec2f(1, 0)) == pytest.approx(-math.pi / 2)
        assert Vec2f(-1, 0).flat_angle() == pytest.approx(math.pi)

    def test_rotate(self) -> None:
        assert_vec_approx(Vec2f(1, 0).rotate(math.pi / 2), Vec2f(0, 1))
        assert_vec_approx(Vec2f(2, 0).rotate(math.pi), Vec2f(-2, 0))


# =============================================================================
# 3D
# =============================================================================


class TestVec3f:
    """Тесты 3D-специфичных операций"""

    def test_unit_axes(self) -> None:
        assert Vec3f.unit_x() == Vec3f(1, 0, 0)
        assert Vec3f.unit_y() == Vec3f(0, 1, 0)
        assert Vec3f.unit_z() == Vec3f(0, 0, 1)

    def test_cross(self) -> None:
        assert Vec3f.unit_x().cross(Vec3f.unit_y()) == Vec3f.unit_z()
        assert Vec3f.unit_y().cross(Vec3f.unit_x()) == Vec3f(0, 0, -1)

    def test_parallel_and_collinear(self) -> None:
        assert Vec3f(1, 2, 3).is_parallel(Vec3f(-2, -4, -6))
        assert not Vec3f(1, 2, 3).is_collinear(Vec3f(-2, -4, -6))
        assert Vec3f(1, 2, 3).is_collinear(Vec3f(2, 4, 6))

    def test_angle_is_unsigned(self) -> None:
        assert Vec3f.unit_x().angle(Vec3f.unit_y()) == pytest.approx(math.pi / 2)
        assert Vec3f.unit_y().angle(Vec3f.unit_x()) == pytest.approx(math.pi / 2)
        assert Vec3f(1, 1, 1).angle(Vec3f(1, 1, 1)) == pytest.approx(0.0, abs=1e-7)
        assert Vec3f(1, 0, 0).angle(Vec3f(-3, 0, 0)) == pytest.approx(math.pi)

    def test_rotate_around_origin(self) -> None:
        origin = Vec3f()
        assert_vec_approx(Vec3f(1, 0, 0).rotate_z(origin, math.pi / 2), Vec3f(0, 1, 0))
        assert_vec_approx(Vec3f(0, 1, 0).rotate_x(origin, math.pi / 2), Vec3f(0, 0, 1))
        assert_vec_approx(Vec3f(0, 0, 1).rotate_y(origin, math.pi / 2), Vec3f(1, 0, 0))

    def test_rotate_around_pivot(self) -> None:
        pivot = Vec3f(1, 1, 0)
        assert_vec_approx(Vec3f(2, 1, 0).rotate_z(pivot, math.pi / 2), Vec3f(1, 2, 0))
        assert pivot.rotate_x(pivot, 1.0) == pivot


class TestRotationTo:
    """Тесты rotation_to (кратчайший поворот между направлениями)"""

    @pytest.mark.parametrize(
        "src, dest",
        [
            (Vec3f(1, 0, 0), Vec3f(0, 1, 0)),
            (Vec3f(1, 2, 3), Vec3f(-3, 0.5, 2)),
            (Vec3f(0, 0, 5), Vec3f(1, 1, 0)),
        ],
    )
    def test_maps_source_onto_destination(self, src: Vec3f, dest: Vec3f) -> None:
        q = src.rotation_to(dest)
        assert_vec_approx(q.rotate_vec(src.normalize()), dest.normalize())

    def test_same_direction_is_identity(self) -> None:
        assert Vec3f(2, 0, 0).rotation_to(Vec3f(5, 0, 0)) == Quat.ident()

    @pytest.mark.parametrize("src", [Vec3f(1, 0, 0), Vec3f(0, 1, 0), Vec3f(1, 2, 3)])
    def test_opposite_direction(self, src: Vec3f) -> None:
        """Противоположные векторы: поворот на π вокруг перпендикулярной оси"""
        q = src.rotation_to(src.negate())
        assert_vec_approx(q.rotate_vec(src), src.negate())
        assert q.angle() == pytest.approx(math.pi)


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ВЕКТОРЫ
# =============================================================================


class TestIntVectors:
    """Тесты Vec2i/Vec3i/Vec4i"""

    def test_arithmetic(self) -> None:
        assert Vec2i(1, 2) + Vec2i(3, 4) == Vec2i(4, 6)
        assert Vec3i(1, 2, 3) - Vec3i(1, 1, 1) == Vec3i(0, 1, 2)
        assert Vec2i(1, -2) * 3 == Vec2i(3, -6)
        assert -Vec2i(1, -2) == Vec2i(-1, 2)
        assert Vec2i(-1, 2).abs() == Vec2i(1, 2)
        assert Vec3i(1, 2, 3).dot(Vec3i(1, 1, 1)) == 6

    def test_div_truncates_toward_zero(self) -> None:
        assert Vec2i(7, -7).div_scalar(2) == Vec2i(3, -3)
        assert Vec2i(7, 7).div(Vec2i(-2, 2)) == Vec2i(-3, 3)

    def test_div_by_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Vec2i(1, 2).div_scalar(0)

    def test_float_scalar_ops(self) -> None:
        assert Vec2i(1, 2).mul_scalar_f(0.5) == Vec2f(0.5, 1.0)
        assert Vec2i(1, 2).div_scalar_f(4) == Vec2f(0.25, 0.5)
        assert Vec3i(1, 2, 3).add_scalar_f(0.5) == Vec3f(1.5, 2.5, 3.5)
        assert Vec3i(1, 2, 3).sub_scalar_f(0.5) == Vec3f(0.5, 1.5, 2.5)

    def test_equal_is_exact(self) -> None:
        assert Vec3i(1, 2, 3).equal(Vec3i(1, 2, 3))
        assert not Vec3i(1, 2, 3).equal(Vec3i(1, 2, 4))

    def test_length(self) -> None:
        assert Vec2i(3, 4).length() == 5.0
        assert Vec2i(3, 4).square_length() == 25
        assert Vec2i(0, 0).distance(Vec2i(3, 4)) == 5.0

    def test_clamp(self) -> None:
        assert Vec4i(-5, 0, 5, 2).clamp(-1, 1) == Vec4i(-1, 0, 1, 1)

    def test_project_returns_float(self) -> None:
        assert Vec2i(3, 4).project(Vec2i(2, 0)) == Vec2f(3, 0)

    def test_vec2i_geometry(self) -> None:
        assert Vec2i(1, 0).mag_cross(Vec2i(0, 1)) == 1
        assert Vec2i(1, 2).is_parallel(Vec2i(-1, -2))
        assert not Vec2i(1, 2).is_collinear(Vec2i(-1, -2))
        assert Vec2i(1, 2).is_collinear(Vec2i(2, 4))
        assert Vec2i(1, 0).normal_vec(on_left=True) == Vec2i(0, 1)

    def test_vec3i_cross(self) -> None:
        assert Vec3i.unit_x().cross(Vec3i.unit_y()) == Vec3i.unit_z()
        assert Vec3i(1, 2, 3).is_parallel(Vec3i(2, 4, 6))
        assert Vec3i(1, 2, 3).is_collinear(Vec3i(2, 4, 6))
