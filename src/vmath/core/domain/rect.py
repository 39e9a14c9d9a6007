"""
Rect — 2D прямоугольники, выровненные по осям (AABB)

Прямоугольник задаётся парой углов (min, max). Прямое создание
Rectf(min, max) НЕ нормализует углы: инвариант min <= max поддерживают
только конструкторы from_corners/from_pos_size/from_edges и normalize().

Граничные случаи предикатов:
- overlaps: касающиеся прямоугольники НЕ перекрываются
- overlaps_or_touches, contains_point, contains_rect: границы включены
"""

import math
from typing import Any, ClassVar, TypeVar

from vmath.core.domain.base import ValueModel
from vmath.core.domain.vector import Vec2f, Vec2i

R = TypeVar("R", bound="_Rect")


class _Rect(ValueModel):
    """Общая часть Rectf/Recti."""

    COMPONENTS: ClassVar[tuple[str, ...]] = ("min", "max")
    VECTOR: ClassVar[Any] = None
    COMPONENT_FORMAT: ClassVar[str] = ""

    min: Any
    max: Any

    # =========================================================================
    # НОРМАЛИЗУЮЩИЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_corners(cls: type[R], c1: Any, c2: Any) -> R:
        """Прямоугольник по двум противоположным углам (с перестановкой координат)."""
        x1, x2 = sorted((c1.x, c2.x))
        y1, y2 = sorted((c1.y, c2.y))
        return cls(cls.VECTOR(x1, y1), cls.VECTOR(x2, y2))

    @classmethod
    def from_pos_size(cls: type[R], pos: Any, size: Any) -> R:
        """
        Прямоугольник по позиции и размеру.

        Отрицательный размер инвертируется, позиция сдвигается так,
        чтобы прямоугольник покрывал ту же область.
        """
        x, w = pos.x, size.x
        y, h = pos.y, size.y
        if w < 0:
            w = -w
            x -= w
        if h < 0:
            h = -h
            y -= h
        origin = cls.VECTOR(x, y)
        return cls(origin, origin.add(cls.VECTOR(w, h)))

    @classmethod
    def from_edges(cls: type[R], left: Any, right: Any, bottom: Any, top: Any) -> R:
        return cls.from_corners(cls.VECTOR(left, bottom), cls.VECTOR(right, top))

    def normalize(self: R) -> R:
        """Перестановка координат так, чтобы min <= max по каждой оси."""
        return type(self).from_corners(self.min, self.max)

    def __str__(self) -> str:
        fmt = self.COMPONENT_FORMAT
        return (
            f"{type(self).__name__}("
            f"[{self.min.x:{fmt}} x {self.min.y:{fmt}}]-"
            f"[{self.max.x:{fmt}} x {self.max.y:{fmt}}])"
        )

    # =========================================================================
    # РАЗМЕРЫ И ГРАНИЦЫ
    # =========================================================================

    def size(self) -> Any:
        return self.max.sub(self.min)

    def area(self) -> Any:
        size = self.size()
        return size.x * size.y

    def left(self) -> Any:
        """Меньшая координата X."""
        return self.min.x

    def right(self) -> Any:
        """Большая координата X."""
        return self.max.x

    def bottom(self) -> Any:
        """Меньшая координата Y."""
        return self.min.y

    def top(self) -> Any:
        """Большая координата Y."""
        return self.max.y

    def set_pos(self: R, pos: Any) -> R:
        """Перемещение min в pos с сохранением размера."""
        return type(self)(pos, pos.add(self.size()))

    def set_size(self: R, size: Any) -> R:
        """Изменение размера с сохранением min."""
        return type(self)(self.min, self.min.add(size))

    def add(self: R, v: Any) -> R:
        """Сдвиг на вектор v."""
        return type(self)(self.min.add(v), self.max.add(v))

    def sub(self: R, v: Any) -> R:
        return type(self)(self.min.sub(v), self.max.sub(v))

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    def overlaps(self: R, other: R) -> bool:
        """Строгое перекрытие: касание границами не считается."""
        return (
            self.min.x < other.max.x
            and self.max.x > other.min.x
            and self.max.y > other.min.y
            and self.min.y < other.max.y
        )

    def overlaps_or_touches(self: R, other: R) -> bool:
        return (
            self.min.x <= other.max.x
            and self.max.x >= other.min.x
            and self.max.y >= other.min.y
            and self.min.y <= other.max.y
        )

    def contains_point(self, point: Any) -> bool:
        """Точка на границе считается содержащейся."""
        return self.min.x <= point.x <= self.max.x and self.min.y <= point.y <= self.max.y

    def contains_rect(self: R, other: R) -> bool:
        """True если other полностью внутри self (границы включены)."""
        return (
            self.min.x <= other.min.x
            and self.max.x >= other.max.x
            and self.min.y <= other.min.y
            and self.max.y >= other.max.y
        )

    def merge(self: R, other: R) -> R:
        """Наименьший прямоугольник, содержащий оба."""
        vector = type(self).VECTOR
        return type(self)(
            vector(min(self.min.x, other.min.x), min(self.min.y, other.min.y)),
            vector(max(self.max.x, other.max.x), max(self.max.y, other.max.y)),
        )

    # =========================================================================
    # РАССТОЯНИЕ ДО ТОЧКИ
    # =========================================================================

    def square_point_distance(self, pos: Any) -> Any:
        """
        Квадрат расстояния от точки до прямоугольника.

        По каждой оси берётся расстояние до интервала [min, max]
        (0 внутри), квадраты суммируются. Точка внутри → 0.
        """
        total = 0
        for val, lo, hi in zip(pos.split(), self.min.split(), self.max.split(), strict=True):
            if val < lo:
                d = val - lo
                total += d * d
            elif val > hi:
                d = val - hi
                total += d * d
        return total

    def point_distance(self, pos: Any) -> float:
        return math.sqrt(self.square_point_distance(pos))


class Rectf(_Rect):
    """Float прямоугольник."""

    VECTOR: ClassVar[Any] = Vec2f
    COMPONENT_FORMAT: ClassVar[str] = "f"

    min: Vec2f = Vec2f()
    max: Vec2f = Vec2f()

    def to_int(self) -> "Recti":
        """Целочисленный прямоугольник (дробная часть отбрасывается)."""
        return Recti(self.min.to_int(), self.max.to_int())

    def round(self) -> "Recti":
        """Целочисленный прямоугольник (округление половин от нуля)."""
        return Recti(self.min.round(), self.max.round())


class Recti(_Rect):
    """Целочисленный прямоугольник."""

    VECTOR: ClassVar[Any] = Vec2i
    COMPONENT_FORMAT: ClassVar[str] = "d"

    min: Vec2i = Vec2i()
    max: Vec2i = Vec2i()

    def to_float(self) -> Rectf:
        return Rectf(self.min.to_float(), self.max.to_float())
