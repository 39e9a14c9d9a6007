"""
Vectors — векторы фиксированной размерности (2D/3D/4D, float и int)

Immutable Pydantic модели. Общая покомпонентная арифметика реализована
один раз в FloatVector/IntVector и не дублируется по размерностям;
размерностно-специфичные операции (cross, mag_cross, повороты) живут
в конкретных классах.

ПОЛИТИКИ:
1. normalize() нулевого вектора возвращает нулевой вектор (все размерности)
2. lerp(other, t) = self * (1 - t) + other * t (все размерности)
3. equal() для float-векторов — покомпонентное epsilon-сравнение (логическое И)
4. Целочисленное деление усекает к нулю
"""

import math
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Iterable, TypeVar

from vmath.core.domain.base import ValueModel
from vmath.core.math.intmath import abs_int, div_trunc
from vmath.core.math.numerical_safeguards import (
    EPSILON,
    clamp,
    clamp_int,
    equal,
    equal_eps,
)

if TYPE_CHECKING:
    from vmath.core.domain.quat import Quat

FV = TypeVar("FV", bound="FloatVector")
IV = TypeVar("IV", bound="IntVector")


def _signbit(value: float) -> bool:
    """True для отрицательных значений, включая -0.0."""
    return math.copysign(1.0, value) < 0


def _round_half_away(value: float) -> int:
    """Округление половин от нуля (в отличие от банковского round())."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


# =============================================================================
# FLOAT VECTORS
# =============================================================================


class FloatVector(ValueModel):
    """Покомпонентные операции, общие для Vec2f/Vec3f/Vec4f."""

    def _new(self: FV, values: Iterable[float]) -> FV:
        return type(self)(*values)

    def __str__(self) -> str:
        body = " x ".join(f"{c:f}" for c in self.split())
        return f"{type(self).__name__}[{body}]"

    def format(self, fmt: str) -> str:
        """Форматирование компонент по шаблону str.format."""
        return fmt.format(*self.split())

    # --- арифметика ---------------------------------------------------------

    def abs(self: FV) -> FV:
        return self._new(abs(c) for c in self.split())

    def add(self: FV, other: FV) -> FV:
        return self._new(a + b for a, b in zip(self.split(), other.split(), strict=True))

    def add_scalar(self: FV, s: float) -> FV:
        return self._new(c + s for c in self.split())

    def sub(self: FV, other: FV) -> FV:
        return self._new(a - b for a, b in zip(self.split(), other.split(), strict=True))

    def sub_scalar(self: FV, s: float) -> FV:
        return self._new(c - s for c in self.split())

    def mul(self: FV, other: FV) -> FV:
        """Покомпонентное умножение."""
        return self._new(a * b for a, b in zip(self.split(), other.split(), strict=True))

    def mul_scalar(self: FV, s: float) -> FV:
        return self._new(c * s for c in self.split())

    def div(self: FV, other: FV) -> FV:
        """Покомпонентное деление."""
        return self._new(a / b for a, b in zip(self.split(), other.split(), strict=True))

    def div_scalar(self: FV, s: float) -> FV:
        return self._new(c / s for c in self.split())

    def negate(self: FV) -> FV:
        return self._new(-c for c in self.split())

    def clamp(self: FV, min_value: float, max_value: float) -> FV:
        """Ограничение каждой компоненты диапазоном [min_value, max_value]."""
        return self._new(clamp(c, min_value, max_value) for c in self.split())

    def dot(self: FV, other: FV) -> float:
        return sum(a * b for a, b in zip(self.split(), other.split(), strict=True))

    # --- длина и расстояние -------------------------------------------------

    def length(self) -> float:
        return math.hypot(*self.split())

    def square_length(self) -> float:
        return sum(c * c for c in self.split())

    def distance(self: FV, other: FV) -> float:
        """Евклидово расстояние до другой точки."""
        return other.sub(self).length()

    def square_distance(self: FV, other: FV) -> float:
        return other.sub(self).square_length()

    def normalize(self: FV) -> FV:
        """
        Нормализация вектора до единичной длины.

        Нулевой вектор (длина равна 0 с учётом EPSILON) возвращается
        как нулевой вектор, без NaN/Inf.
        """
        length = self.length()
        if equal(length, 0.0):
            return self._new(0.0 for _ in self.split())
        return self._new(c / length for c in self.split())

    # --- сравнения ----------------------------------------------------------

    def equal(self: FV, other: FV, eps: float = EPSILON) -> bool:
        """Покомпонентное сравнение с относительной толерантностью eps."""
        return all(equal_eps(a, b, eps) for a, b in zip(self.split(), other.split(), strict=True))

    def is_zero(self, eps: float = EPSILON) -> bool:
        return all(equal_eps(c, 0.0, eps) for c in self.split())

    # --- проекция и интерполяция --------------------------------------------

    def project(self: FV, other: FV) -> FV:
        """
        Проекция вектора на other.

        Проекция на нулевой вектор — нулевой вектор.
        """
        square_length = other.square_length()
        if square_length == 0:
            return self._new(0.0 for _ in self.split())
        return other.mul_scalar(self.dot(other) / square_length)

    def lerp(self: FV, other: FV, t: float) -> FV:
        """
        Линейная интерполяция к other.

        Параметр t обычно лежит в [0, 1].
        """
        return self._new(a * (1.0 - t) + b * t for a, b in zip(self.split(), other.split(), strict=True))

    # --- операторы ----------------------------------------------------------

    def __add__(self: FV, other: FV) -> FV:
        return self.add(other)

    def __sub__(self: FV, other: FV) -> FV:
        return self.sub(other)

    def __neg__(self: FV) -> FV:
        return self.negate()

    def __mul__(self: FV, other: Any) -> FV:
        if isinstance(other, FloatVector):
            return self.mul(other)
        return self.mul_scalar(other)

    def __rmul__(self: FV, other: float) -> FV:
        return self.mul_scalar(other)

    def __truediv__(self: FV, other: Any) -> FV:
        if isinstance(other, FloatVector):
            return self.div(other)
        return self.div_scalar(other)


class Vec2f(FloatVector):
    """2D float вектор."""

    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y")

    x: float = 0.0
    y: float = 0.0

    def to_int(self) -> "Vec2i":
        """Целочисленное представление (дробная часть отбрасывается)."""
        return Vec2i(int(self.x), int(self.y))

    def round(self) -> "Vec2i":
        """Целочисленное представление (округление половин от нуля)."""
        return Vec2i(_round_half_away(self.x), _round_half_away(self.y))

    def vec3(self, z: float) -> "Vec3f":
        return Vec3f(self.x, self.y, z)

    def vec4(self, z: float, w: float) -> "Vec4f":
        return Vec4f(self.x, self.y, z, w)

    def is_orthogonal(self) -> bool:
        """True если вектор горизонтален или вертикален (одна из компонент равна 0)."""
        return self.x == 0 or self.y == 0

    def mag_cross(self, other: "Vec2f") -> float:
        """
        Z-компонента 3D cross product при z = 0.

        Равна удвоенной знаковой площади между векторами.
        """
        return self.x * other.y - self.y * other.x

    def is_parallel(self, other: "Vec2f", eps: float = EPSILON) -> bool:
        """Параллельность (противоположно направленные векторы тоже параллельны)."""
        return equal_eps(self.x * other.y, self.y * other.x, eps)

    def is_collinear(self, other: "Vec2f", eps: float = EPSILON) -> bool:
        """
        Коллинеарность: параллельны и направлены в одну сторону.

        Почти нулевые векторы с разными знаками компонент коллинеарными
        не считаются, даже если их длина в пределах eps.
        """
        return (
            self.is_parallel(other, eps)
            and _signbit(self.x) == _signbit(other.x)
            and _signbit(self.y) == _signbit(other.y)
        )

    def normal_vec(self, on_left: bool) -> "Vec2f":
        """Нормаль в плоскости слева или справа от вектора."""
        if on_left:
            return Vec2f(-self.y, self.x)
        return Vec2f(self.y, -self.x)

    def angle(self, other: "Vec2f") -> float:
        """Знаковый угол от self к other (радианы)."""
        return math.atan2(other.y, other.x) - math.atan2(self.y, self.x)

    def flat_angle(self) -> float:
        """Угол между вектором и осью X (радианы)."""
        return math.atan2(self.y, self.x)

    def rotate(self, rad: float) -> "Vec2f":
        """Поворот в плоскости на rad радиан против часовой стрелки."""
        sin, cos = math.sin(rad), math.cos(rad)
        return Vec2f(self.x * cos - self.y * sin, self.x * sin + self.y * cos)


class Vec3f(FloatVector):
    """3D float вектор."""

    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def unit_x(cls) -> "Vec3f":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vec3f":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> "Vec3f":
        return cls(0.0, 0.0, 1.0)

    def to_int(self) -> "Vec3i":
        return Vec3i(int(self.x), int(self.y), int(self.z))

    def round(self) -> "Vec3i":
        return Vec3i(
            _round_half_away(self.x), _round_half_away(self.y), _round_half_away(self.z)
        )

    def vec4(self, w: float) -> "Vec4f":
        return Vec4f(self.x, self.y, self.z, w)

    def xy(self) -> Vec2f:
        return Vec2f(self.x, self.y)

    def is_orthogonal(self) -> bool:
        """True если вектор параллелен одной из координатных плоскостей."""
        return self.x == 0 or self.y == 0 or self.z == 0

    def cross(self, other: "Vec3f") -> "Vec3f":
        return Vec3f(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def is_parallel(self, other: "Vec3f", eps: float = EPSILON) -> bool:
        """Параллельность (противоположно направленные векторы тоже параллельны)."""
        return equal_eps(self.cross(other).square_length(), 0.0, eps)

    def is_collinear(self, other: "Vec3f", eps: float = EPSILON) -> bool:
        """Коллинеарность: параллельны и направлены в одну сторону."""
        return (
            self.is_parallel(other, eps)
            and _signbit(self.x) == _signbit(other.x)
            and _signbit(self.y) == _signbit(other.y)
            and _signbit(self.z) == _signbit(other.z)
        )

    def angle(self, other: "Vec3f") -> float:
        """Беззнаковый угол между векторами в радианах, [0, π]."""
        cos = self.normalize().dot(other.normalize())
        return math.acos(clamp(cos, -1.0, 1.0))

    def rotation_to(self, dest: "Vec3f") -> "Quat":
        """
        Кратчайший поворот, переводящий направление self в направление dest.

        Для противоположных векторов выбирается поворот на π вокруг
        произвольной перпендикулярной оси.
        """
        from vmath.core.domain.quat import Quat

        src = self.normalize()
        dest = dest.normalize()
        dot = src.dot(dest)

        if dot < -1.0 + EPSILON:
            axis = Vec3f.unit_x().cross(src)
            if axis.length() < EPSILON:
                axis = Vec3f.unit_y().cross(src)
            return Quat.from_axis_angle(axis.normalize(), math.pi)

        if dot > 1.0 - EPSILON:
            return Quat.ident()

        axis = src.cross(dest)
        return Quat(1.0 + dot, axis.x, axis.y, axis.z).normalize()

    def rotate_x(self, origin: "Vec3f", rad: float) -> "Vec3f":
        """Поворот точки вокруг оси X, проходящей через origin."""
        v = self.sub(origin)
        sin, cos = math.sin(rad), math.cos(rad)
        p = Vec3f(v.x, v.y * cos - v.z * sin, v.y * sin + v.z * cos)
        return p.add(origin)

    def rotate_y(self, origin: "Vec3f", rad: float) -> "Vec3f":
        """Поворот точки вокруг оси Y, проходящей через origin."""
        v = self.sub(origin)
        sin, cos = math.sin(rad), math.cos(rad)
        p = Vec3f(v.z * sin + v.x * cos, v.y, v.z * cos - v.x * sin)
        return p.add(origin)

    def rotate_z(self, origin: "Vec3f", rad: float) -> "Vec3f":
        """Поворот точки вокруг оси Z, проходящей через origin."""
        v = self.sub(origin)
        sin, cos = math.sin(rad), math.cos(rad)
        p = Vec3f(v.x * cos - v.y * sin, v.x * sin + v.y * cos, v.z)
        return p.add(origin)


class Vec4f(FloatVector):
    """4D float вектор."""

    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def to_int(self) -> "Vec4i":
        return Vec4i(int(self.x), int(self.y), int(self.z), int(self.w))

    def round(self) -> "Vec4i":
        return Vec4i(*(_round_half_away(c) for c in self.split()))

    def xy(self) -> Vec2f:
        return Vec2f(self.x, self.y)

    def xyz(self) -> Vec3f:
        return Vec3f(self.x, self.y, self.z)


# =============================================================================
# INTEGER VECTORS
# =============================================================================


class IntVector(ValueModel):
    """Покомпонентные операции, общие для Vec2i/Vec3i/Vec4i."""

    def _new(self: IV, values: Iterable[int]) -> IV:
        return type(self)(*values)

    def __str__(self) -> str:
        body = " x ".join(f"{c:d}" for c in self.split())
        return f"{type(self).__name__}[{body}]"

    def format(self, fmt: str) -> str:
        return fmt.format(*self.split())

    @abstractmethod
    def to_float(self) -> FloatVector:
        """Float-вектор той же размерности."""

    def abs(self: IV) -> IV:
        return self._new(abs_int(c) for c in self.split())

    def add(self: IV, other: IV) -> IV:
        return self._new(a + b for a, b in zip(self.split(), other.split(), strict=True))

    def add_scalar(self: IV, s: int) -> IV:
        return self._new(c + s for c in self.split())

    def add_scalar_f(self, s: float) -> Any:
        """Скалярное сложение во float-пространстве."""
        return self.to_float().add_scalar(s)

    def sub(self: IV, other: IV) -> IV:
        return self._new(a - b for a, b in zip(self.split(), other.split(), strict=True))

    def sub_scalar(self: IV, s: int) -> IV:
        return self._new(c - s for c in self.split())

    def sub_scalar_f(self, s: float) -> Any:
        return self.to_float().sub_scalar(s)

    def mul(self: IV, other: IV) -> IV:
        return self._new(a * b for a, b in zip(self.split(), other.split(), strict=True))

    def mul_scalar(self: IV, s: int) -> IV:
        return self._new(c * s for c in self.split())

    def mul_scalar_f(self, s: float) -> Any:
        return self.to_float().mul_scalar(s)

    def div(self: IV, other: IV) -> IV:
        """Покомпонентное деление с усечением к нулю."""
        return self._new(div_trunc(a, b) for a, b in zip(self.split(), other.split(), strict=True))

    def div_scalar(self: IV, s: int) -> IV:
        """Скалярное деление с усечением к нулю."""
        return self._new(div_trunc(c, s) for c in self.split())

    def div_scalar_f(self, s: float) -> Any:
        return self.to_float().div_scalar(s)

    def negate(self: IV) -> IV:
        return self._new(-c for c in self.split())

    def clamp(self: IV, min_value: int, max_value: int) -> IV:
        return self._new(clamp_int(c, min_value, max_value) for c in self.split())

    def dot(self: IV, other: IV) -> int:
        return sum(a * b for a, b in zip(self.split(), other.split(), strict=True))

    def length(self) -> float:
        return math.hypot(*self.split())

    def square_length(self) -> int:
        return sum(c * c for c in self.split())

    def distance(self: IV, other: IV) -> float:
        return other.sub(self).length()

    def square_distance(self: IV, other: IV) -> int:
        return other.sub(self).square_length()

    def is_zero(self) -> bool:
        return all(c == 0 for c in self.split())

    def equal(self: IV, other: IV) -> bool:
        """Точное покомпонентное сравнение."""
        return self.split() == other.split()

    def project(self, other: Any) -> Any:
        """Проекция на other во float-пространстве."""
        return self.to_float().project(other.to_float())

    def __add__(self: IV, other: IV) -> IV:
        return self.add(other)

    def __sub__(self: IV, other: IV) -> IV:
        return self.sub(other)

    def __neg__(self: IV) -> IV:
        return self.negate()

    def __mul__(self: IV, other: Any) -> IV:
        if isinstance(other, IntVector):
            return self.mul(other)
        return self.mul_scalar(other)

    def __rmul__(self: IV, other: int) -> IV:
        return self.mul_scalar(other)


class Vec2i(IntVector):
    """2D целочисленный вектор."""

    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y")

    x: int = 0
    y: int = 0

    def to_float(self) -> Vec2f:
        return Vec2f(float(self.x), float(self.y))

    def vec3(self, z: int) -> "Vec3i":
        return Vec3i(self.x, self.y, z)

    def vec4(self, z: int, w: int) -> "Vec4i":
        return Vec4i(self.x, self.y, z, w)

    def is_orthogonal(self) -> bool:
        return self.x == 0 or self.y == 0

    def mag_cross(self, other: "Vec2i") -> int:
        """Z-компонента 3D cross product при z = 0."""
        return self.x * other.y - self.y * other.x

    def is_parallel(self, other: "Vec2i") -> bool:
        """Параллельность (противоположно направленные тоже параллельны, но не коллинеарны)."""
        return self.mag_cross(other) == 0

    def is_collinear(self, other: "Vec2i") -> bool:
        return (
            self.mag_cross(other) == 0
            and (self.x >= 0) == (other.x >= 0)
            and (self.y >= 0) == (other.y >= 0)
        )

    def normal_vec(self, on_left: bool) -> "Vec2i":
        if on_left:
            return Vec2i(-self.y, self.x)
        return Vec2i(self.y, -self.x)


class Vec3i(IntVector):
    """3D целочисленный вектор."""

    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    x: int = 0
    y: int = 0
    z: int = 0

    @classmethod
    def unit_x(cls) -> "Vec3i":
        return cls(1, 0, 0)

    @classmethod
    def unit_y(cls) -> "Vec3i":
        return cls(0, 1, 0)

    @classmethod
    def unit_z(cls) -> "Vec3i":
        return cls(0, 0, 1)

    def to_float(self) -> Vec3f:
        return Vec3f(float(self.x), float(self.y), float(self.z))

    def vec4(self, w: int) -> "Vec4i":
        return Vec4i(self.x, self.y, self.z, w)

    def xy(self) -> Vec2i:
        return Vec2i(self.x, self.y)

    def cross(self, other: "Vec3i") -> "Vec3i":
        return Vec3i(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def is_parallel(self, other: "Vec3i") -> bool:
        return self.cross(other).square_length() == 0

    def is_collinear(self, other: "Vec3i", eps: float = EPSILON) -> bool:
        return self.to_float().is_collinear(other.to_float(), eps)


class Vec4i(IntVector):
    """4D целочисленный вектор."""

    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0

    def to_float(self) -> Vec4f:
        return Vec4f(*(float(c) for c in self.split()))

    def xy(self) -> Vec2i:
        return Vec2i(self.x, self.y)

    def xyz(self) -> Vec3i:
        return Vec3i(self.x, self.y, self.z)
