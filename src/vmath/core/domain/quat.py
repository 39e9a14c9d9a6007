"""
Quat — кватернион поворота (w, x, y, z)

Для чистых поворотов кватернион должен быть единичной длины; это
соглашение, а не проверяемый инвариант. normalize() и slerp()
восстанавливают/предполагают единичную длину.

Конвенции:
- mul(other) — произведение Гамильтона self * other
- rotate(other) — other * self (поворот other применяется после self)
- forward-вектор системы координат кватерниона — -Z
- Эйлеровы углы: yaw — ось Z, pitch — ось Y, roll — ось X
"""

import math
from typing import ClassVar, Final

from vmath.core.domain.base import ValueModel
from vmath.core.domain.matrix import Mat3f, Mat4f
from vmath.core.domain.vector import Vec3f, Vec4f
from vmath.core.math.numerical_safeguards import EPSILON, clamp, equal, equal_eps

# Порог dot-произведения, выше которого slerp переходит на линейную смесь
SLERP_LINEAR_THRESHOLD: Final[float] = 0.9999


class Quat(ValueModel):
    """
    Кватернион (w, x, y, z).

    Создание:
        Quat(1, 0, 0, 0) == Quat.ident()
        Quat.from_axis_angle(Vec3f(0, 0, 1), math.pi / 2)
    """

    COMPONENTS: ClassVar[tuple[str, ...]] = ("w", "x", "y", "z")

    w: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"Quat[{self.w:f}, {self.x:f} x {self.y:f} x {self.z:f}]"

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def ident(cls) -> "Quat":
        """Единичный кватернион (нет поворота)."""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Vec3f, rad: float) -> "Quat":
        """Поворот на rad радиан вокруг оси axis (нормализуется)."""
        axis = axis.normalize()
        sin, cos = math.sin(rad * 0.5), math.cos(rad * 0.5)
        return cls(cos, axis.x * sin, axis.y * sin, axis.z * sin)

    @classmethod
    def from_euler(cls, yaw: float, pitch: float, roll: float) -> "Quat":
        """
        Кватернион из углов Эйлера.

        Args:
            yaw: Поворот вокруг Z (радианы)
            pitch: Поворот вокруг Y (радианы)
            roll: Поворот вокруг X (радианы)
        """
        sin_y, cos_y = math.sin(yaw * 0.5), math.cos(yaw * 0.5)
        sin_p, cos_p = math.sin(pitch * 0.5), math.cos(pitch * 0.5)
        sin_r, cos_r = math.sin(roll * 0.5), math.cos(roll * 0.5)
        return cls(
            cos_r * cos_p * cos_y + sin_r * sin_p * sin_y,
            sin_r * cos_p * cos_y - cos_r * sin_p * sin_y,
            cos_r * sin_p * cos_y + sin_r * cos_p * sin_y,
            cos_r * cos_p * sin_y - sin_r * sin_p * cos_y,
        )

    def to_euler(self) -> tuple[float, float, float]:
        """
        Углы Эйлера (yaw, pitch, roll).

        При |sin(pitch)| >= 1 (gimbal lock) pitch фиксируется в ±π/2.
        """
        w, x, y, z = self.split()

        roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))

        sp = 2.0 * (w * y - z * x)
        if abs(sp) >= 1.0:
            pitch = math.copysign(math.pi / 2.0, sp)
        else:
            pitch = math.asin(sp)

        yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
        return yaw, pitch, roll

    # =========================================================================
    # СРАВНЕНИЕ И ПРЕДСТАВЛЕНИЯ
    # =========================================================================

    def equal(self, other: "Quat", eps: float = EPSILON) -> bool:
        return all(equal_eps(a, b, eps) for a, b in zip(self.split(), other.split(), strict=True))

    def vec4(self) -> Vec4f:
        """Вектор (w, x, y, z)."""
        return Vec4f(self.w, self.x, self.y, self.z)

    def mat4(self) -> Mat4f:
        """Однородная матрица поворота 4x4."""
        w, x, y, z = self.split()
        return Mat4f(
            1 - 2 * y * y - 2 * z * z, 2 * x * y + 2 * w * z, 2 * x * z - 2 * w * y, 0.0,
            2 * x * y - 2 * w * z, 1 - 2 * x * x - 2 * z * z, 2 * y * z + 2 * w * x, 0.0,
            2 * x * z + 2 * w * y, 2 * y * z - 2 * w * x, 1 - 2 * x * x - 2 * y * y, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )  # fmt: skip

    def mat3(self) -> Mat3f:
        """Матрица поворота 3x3."""
        return self.mat4().mat3()

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Quat") -> "Quat":
        return Quat(*(a + b for a, b in zip(self.split(), other.split(), strict=True)))

    def add_scalar(self, s: float) -> "Quat":
        return Quat(*(a + s for a in self.split()))

    def sub(self, other: "Quat") -> "Quat":
        return Quat(*(a - b for a, b in zip(self.split(), other.split(), strict=True)))

    def sub_scalar(self, s: float) -> "Quat":
        return Quat(*(a - s for a in self.split()))

    def mul(self, other: "Quat") -> "Quat":
        """Произведение Гамильтона self * other."""
        qw, qx, qy, qz = self.split()
        ow, ox, oy, oz = other.split()
        return Quat(
            qw * ow - qx * ox - qy * oy - qz * oz,
            qw * ox + qx * ow + qy * oz - qz * oy,
            qw * oy - qx * oz + qy * ow + qz * ox,
            qw * oz + qx * oy - qy * ox + qz * ow,
        )

    def mul_scalar(self, s: float) -> "Quat":
        return Quat(*(a * s for a in self.split()))

    def div(self, other: "Quat") -> "Quat":
        """Покомпонентное деление."""
        return Quat(*(a / b for a, b in zip(self.split(), other.split(), strict=True)))

    def div_scalar(self, s: float) -> "Quat":
        return Quat(*(a / s for a in self.split()))

    def dot(self, other: "Quat") -> float:
        return sum(a * b for a, b in zip(self.split(), other.split(), strict=True))

    def __add__(self, other: "Quat") -> "Quat":
        return self.add(other)

    def __sub__(self, other: "Quat") -> "Quat":
        return self.sub(other)

    def __neg__(self) -> "Quat":
        return self.mul_scalar(-1.0)

    def __mul__(self, other: "Quat | float") -> "Quat":
        if isinstance(other, Quat):
            return self.mul(other)
        return self.mul_scalar(other)

    def __rmul__(self, s: float) -> "Quat":
        return self.mul_scalar(s)

    # =========================================================================
    # ПОВОРОТЫ
    # =========================================================================

    def rotate(self, other: "Quat") -> "Quat":
        """Применение поворота other после self: other * self."""
        return other.mul(self)

    def rotate_x(self, rad: float) -> "Quat":
        """Поворот вокруг собственной оси X."""
        sin, cos = math.sin(rad * 0.5), math.cos(rad * 0.5)
        w, x, y, z = self.split()
        return Quat(w * cos - x * sin, x * cos + w * sin, y * cos + z * sin, z * cos - y * sin)

    def rotate_y(self, rad: float) -> "Quat":
        """Поворот вокруг собственной оси Y."""
        sin, cos = math.sin(rad * 0.5), math.cos(rad * 0.5)
        w, x, y, z = self.split()
        return Quat(w * cos - y * sin, x * cos - z * sin, y * cos + w * sin, z * cos + x * sin)

    def rotate_z(self, rad: float) -> "Quat":
        """Поворот вокруг собственной оси Z."""
        sin, cos = math.sin(rad * 0.5), math.cos(rad * 0.5)
        w, x, y, z = self.split()
        return Quat(w * cos - z * sin, x * cos + y * sin, y * cos - x * sin, z * cos + w * sin)

    def rotate_vec(self, v: Vec3f) -> Vec3f:
        """Поворот вектора единичным кватернионом."""
        s = self.w
        u = Vec3f(self.x, self.y, self.z)

        a = u.mul_scalar(2.0 * u.dot(v))
        b = v.mul_scalar(s * s - u.dot(u))
        c = u.cross(v).mul_scalar(2.0 * s)
        return a.add(b).add(c)

    # =========================================================================
    # ДЛИНА, СОПРЯЖЕНИЕ, ОБРАЩЕНИЕ
    # =========================================================================

    def conjugate(self) -> "Quat":
        return Quat(self.w, -self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.square_length())

    def square_length(self) -> float:
        return self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z

    def inverse(self) -> "Quat":
        """
        Обратный кватернион: conjugate / |q|².

        Для единичного кватерниона совпадает с conjugate().
        Нулевой кватернион возвращается без изменений.
        """
        square_length = self.square_length()
        if square_length == 0:
            return self
        return self.conjugate().div_scalar(square_length)

    def normalize(self) -> "Quat":
        """
        Нормализация до единичной длины.

        Уже единичный кватернион возвращается как есть; нулевой тоже.
        """
        length = self.length()
        if equal(length, 1.0) or length == 0:
            return self
        return self.div_scalar(length)

    # =========================================================================
    # ОСИ И УГЛЫ
    # =========================================================================

    def up(self) -> Vec3f:
        return self.rotate_vec(Vec3f(0.0, 1.0, 0.0))

    def forward(self) -> Vec3f:
        return self.rotate_vec(Vec3f(0.0, 0.0, -1.0))

    def right(self) -> Vec3f:
        return self.rotate_vec(Vec3f(1.0, 0.0, 0.0))

    def axis(self) -> Vec3f:
        """Ось поворота (не нормализованная)."""
        return Vec3f(self.x, self.y, self.z)

    def angle(self) -> float:
        """Угол поворота вокруг оси, [0, 2π]."""
        q = self.normalize()
        return math.acos(clamp(q.w, -1.0, 1.0)) * 2.0

    def axis_rotation(self) -> tuple[Vec3f, float]:
        """
        Ось и угол поворота.

        Без поворота (sin(angle/2) < EPSILON) возвращается ось X.
        """
        rad = self.angle()
        s = math.sin(rad * 0.5)
        if s < EPSILON:
            return Vec3f(1.0, 0.0, 0.0), rad
        return Vec3f(self.x / s, self.y / s, self.z / s), rad

    def angle_to(self, other: "Quat") -> float:
        """Угол между forward-векторами двух кватернионов."""
        return self.forward().angle(other.forward())

    # =========================================================================
    # ИНТЕРПОЛЯЦИЯ
    # =========================================================================

    def lerp(self, other: "Quat", t: float) -> "Quat":
        """
        Линейная интерполяция: self * (1 - t) + other * t.

        Результат не нормализуется.
        """
        return Quat(*(a * (1.0 - t) + b * t for a, b in zip(self.split(), other.split(), strict=True)))

    def slerp(self, other: "Quat", t: float) -> "Quat":
        """
        Сферическая линейная интерполяция к other.

        При отрицательном dot other инвертируется (кратчайший путь).
        Почти параллельные кватернионы (dot > SLERP_LINEAR_THRESHOLD)
        смешиваются линейно.
        """
        dot = self.dot(other)
        if dot < 0.0:
            dot = -dot
            other = other.mul_scalar(-1.0)

        if dot > SLERP_LINEAR_THRESHOLD:
            return self.lerp(other, t)

        omega = math.acos(clamp(dot, -1.0, 1.0))
        sin_omega = math.sin(omega)
        scale0 = math.sin((1.0 - t) * omega) / sin_omega
        scale1 = math.sin(t * omega) / sin_omega
        return Quat(*(scale0 * a + scale1 * b for a, b in zip(self.split(), other.split(), strict=True)))
