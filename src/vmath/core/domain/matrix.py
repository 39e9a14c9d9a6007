"""
Matrices — квадратные матрицы 2x2, 3x3, 4x4 (float)

Значения хранятся в column-major порядке: индекс ячейки = col * N + row.
Для Mat3f:

    0, 3, 6
    1, 4, 7
    2, 5, 8

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Матрица всегда квадратная: ровно N² значений (проверяется при создании)
2. Строки и столбцы — копии (Vec*f), а не ссылки на хранилище
3. inverse() никогда не бросает исключение: вырожденная матрица
   (det == 0 с учётом EPSILON) → (единичная матрица, False)
4. A.mul(B) применяет B первым (конвенция column-vector): результат = A * B
5. Mat4f.rotate_x/y/z, translate, scale — правое умножение (self * T)
"""

import logging
import math
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from pydantic import BaseModel, model_validator

from vmath.core.domain.vector import FloatVector, Vec2f, Vec3f, Vec4f
from vmath.core.math.numerical_safeguards import EPSILON, equal, equal_eps

if TYPE_CHECKING:
    from vmath.core.domain.quat import Quat

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="SquareMatrix")


def _check_operand(expected: int, actual: int, operand: Any) -> None:
    """Операнд умножения должен иметь согласованную размерность."""
    if actual != expected:
        raise ValueError(
            f"dimension mismatch: expected {expected} values, "
            f"got {actual} from {type(operand).__name__}"
        )


def det2x2(v00: float, v01: float, v10: float, v11: float) -> float:
    """Определитель 2x2 матрицы."""
    return v00 * v11 - v10 * v01


class SquareMatrix(BaseModel):
    """
    Общая часть Mat2f/Mat3f/Mat4f.

    Наследники задают SIZE и VECTOR (тип строки/столбца), а также
    closed-form формулы det() и inverse() своей размерности.
    """

    SIZE: ClassVar[int] = 0
    VECTOR: ClassVar[type[FloatVector]] = FloatVector

    m: tuple[float, ...]

    model_config = {"frozen": True}  # Immutable

    def __init__(self, *values: float, **data: Any) -> None:
        if values:
            if "m" in data:
                raise TypeError(f"{type(self).__name__} got both positional values and 'm'")
            data["m"] = values
        elif "m" not in data:
            data["m"] = (0.0,) * (type(self).SIZE**2)
        super().__init__(**data)

    @model_validator(mode="after")
    def validate_size(self) -> "SquareMatrix":
        """Матрица NxN хранит ровно N² значений."""
        expected = type(self).SIZE**2
        if len(self.m) != expected:
            raise ValueError(
                f"{type(self).__name__} requires {expected} values, got {len(self.m)}"
            )
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def ident(cls: type[M]) -> M:
        """Единичная матрица."""
        n = cls.SIZE
        return cls(*(1.0 if col == row else 0.0 for col in range(n) for row in range(n)))

    @classmethod
    def from_rows(cls: type[M], *rows: FloatVector) -> M:
        """Матрица из векторов-строк."""
        n = cls.SIZE
        if len(rows) != n:
            raise TypeError(f"{cls.__name__}.from_rows() takes {n} rows ({len(rows)} given)")
        return cls(*(rows[row][col] for col in range(n) for row in range(n)))

    @classmethod
    def from_cols(cls: type[M], *cols: FloatVector) -> M:
        """Матрица из векторов-столбцов."""
        n = cls.SIZE
        if len(cols) != n:
            raise TypeError(f"{cls.__name__}.from_cols() takes {n} columns ({len(cols)} given)")
        return cls(*(c for col in cols for c in col.split()))

    # =========================================================================
    # ДОСТУП К ЯЧЕЙКАМ
    # =========================================================================

    def _check_index(self, i: int, what: str) -> None:
        if not 0 <= i < self.SIZE:
            raise IndexError(f"{what} index {i} out of range for {type(self).__name__}")

    def index(self, row: int, col: int) -> int:
        """Индекс ячейки (row, col) в хранилище."""
        self._check_index(row, "row")
        self._check_index(col, "column")
        return col * self.SIZE + row

    def cell(self, row: int, col: int) -> float:
        return self.m[self.index(row, col)]

    def row(self, row: int) -> Any:
        self._check_index(row, "row")
        n = self.SIZE
        return self.VECTOR(*(self.m[col * n + row] for col in range(n)))

    def rows(self) -> tuple[Any, ...]:
        return tuple(self.row(i) for i in range(self.SIZE))

    def col(self, col: int) -> Any:
        self._check_index(col, "column")
        n = self.SIZE
        return self.VECTOR(*self.m[col * n : col * n + n])

    def cols(self) -> tuple[Any, ...]:
        return tuple(self.col(i) for i in range(self.SIZE))

    def diag(self) -> Any:
        n = self.SIZE
        return self.VECTOR(*(self.m[i * n + i] for i in range(n)))

    def set(self: M, row: int, col: int, value: float) -> M:
        """Новая матрица с изменённой ячейкой (row, col)."""
        values = list(self.m)
        values[self.index(row, col)] = value
        return type(self)(*values)

    def set_row(self: M, row: int, v: FloatVector) -> M:
        self._check_index(row, "row")
        n = self.SIZE
        values = list(self.m)
        for col, c in enumerate(v.split()):
            values[col * n + row] = c
        return type(self)(*values)

    def set_col(self: M, col: int, v: FloatVector) -> M:
        self._check_index(col, "column")
        n = self.SIZE
        values = list(self.m)
        values[col * n : col * n + n] = v.split()
        return type(self)(*values)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def transpose(self: M) -> M:
        """
        Транспонированная матрица.

        Транспонирование переводит между column-major и row-major порядком.
        """
        n = self.SIZE
        return type(self)(*(self.m[row * n + col] for col in range(n) for row in range(n)))

    @abstractmethod
    def det(self) -> float:
        ...

    @abstractmethod
    def inverse(self: M) -> tuple[M, bool]:
        ...

    def _singular(self: M, det: float) -> tuple[M, bool]:
        logger.debug("%s is singular (det=%g), returning identity", type(self).__name__, det)
        return type(self).ident(), False

    def add(self: M, other: M) -> M:
        return type(self)(*(a + b for a, b in zip(self.m, other.m, strict=True)))

    def add_scalar(self: M, s: float) -> M:
        return type(self)(*(a + s for a in self.m))

    def sub(self: M, other: M) -> M:
        return type(self)(*(a - b for a, b in zip(self.m, other.m, strict=True)))

    def sub_scalar(self: M, s: float) -> M:
        return type(self)(*(a - s for a in self.m))

    def mul(self: M, other: M) -> M:
        """
        Матричное умножение self * other.

        other применяется первым (конвенция column-vector).
        """
        n = self.SIZE
        _check_operand(n * n, len(other.m), other)
        a, b = self.m, other.m
        return type(self)(
            *(
                sum(a[k * n + row] * b[col * n + k] for k in range(n))
                for col in range(n)
                for row in range(n)
            )
        )

    def mul_scalar(self: M, s: float) -> M:
        return type(self)(*(a * s for a in self.m))

    def mul_vec(self, v: Any) -> Any:
        """Произведение матрицы на вектор-столбец: M * v."""
        n = self.SIZE
        comps = v.split()
        _check_operand(n, len(comps), v)
        return self.VECTOR(
            *(sum(self.m[k * n + row] * comps[k] for k in range(n)) for row in range(n))
        )

    def equal(self: M, other: M, eps: float = EPSILON) -> bool:
        """Покомпонентное сравнение с относительной толерантностью eps."""
        return all(equal_eps(a, b, eps) for a, b in zip(self.m, other.m, strict=True))

    def __str__(self) -> str:
        rows = (
            "(" + " x ".join(f"{c:f}" for c in self.row(i).split()) + ")"
            for i in range(self.SIZE)
        )
        return f"{type(self).__name__}[{'/'.join(rows)}]"

    # --- операторы ----------------------------------------------------------

    def __add__(self: M, other: M) -> M:
        return self.add(other)

    def __sub__(self: M, other: M) -> M:
        return self.sub(other)

    def __neg__(self: M) -> M:
        return self.mul_scalar(-1.0)

    def __mul__(self: M, s: float) -> M:
        return self.mul_scalar(s)

    def __rmul__(self: M, s: float) -> M:
        return self.mul_scalar(s)

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, SquareMatrix):
            return self.mul(other)
        return self.mul_vec(other)


# =============================================================================
# 2x2
# =============================================================================


class Mat2f(SquareMatrix):
    """2x2 float матрица."""

    SIZE: ClassVar[int] = 2
    VECTOR: ClassVar[type[FloatVector]] = Vec2f

    def mat3(self) -> "Mat3f":
        """Расширение до 3x3: новая диагональная ячейка равна 1, остальные 0."""
        col0, col1 = self.cols()
        return Mat3f.from_cols(col0.vec3(0.0), col1.vec3(0.0), Vec3f(0.0, 0.0, 1.0))

    def mat4(self) -> "Mat4f":
        col0, col1 = self.cols()
        return Mat4f.from_cols(
            col0.vec4(0.0, 0.0),
            col1.vec4(0.0, 0.0),
            Vec4f(0.0, 0.0, 1.0, 0.0),
            Vec4f(0.0, 0.0, 0.0, 1.0),
        )

    def det(self) -> float:
        m = self.m
        return m[0] * m[3] - m[1] * m[2]

    def inverse(self) -> tuple["Mat2f", bool]:
        """
        Обратная матрица.

        Returns:
            (inverse, True) или (ident, False) для вырожденной матрицы
        """
        det = self.det()
        if equal(det, 0.0):
            return self._singular(det)

        m = self.m
        inv_det = 1.0 / det
        return Mat2f(inv_det * m[3], -inv_det * m[1], -inv_det * m[2], inv_det * m[0]), True


# =============================================================================
# 3x3
# =============================================================================


class Mat3f(SquareMatrix):
    """3x3 float матрица."""

    SIZE: ClassVar[int] = 3
    VECTOR: ClassVar[type[FloatVector]] = Vec3f

    def mat2(self) -> Mat2f:
        """Сжатие до 2x2: правый столбец и нижняя строка отбрасываются."""
        col0, col1, _ = self.cols()
        return Mat2f.from_cols(col0.xy(), col1.xy())

    def mat4(self) -> "Mat4f":
        col0, col1, col2 = self.cols()
        return Mat4f.from_cols(
            col0.vec4(0.0), col1.vec4(0.0), col2.vec4(0.0), Vec4f(0.0, 0.0, 0.0, 1.0)
        )

    def det(self) -> float:
        m = self.m
        return (
            m[0] * m[4] * m[8]
            + m[2] * m[3] * m[7]
            + m[1] * m[5] * m[6]
            - m[0] * m[5] * m[7]
            - m[1] * m[3] * m[8]
            - m[2] * m[4] * m[6]
        )

    def inverse(self) -> tuple["Mat3f", bool]:
        """
        Обратная матрица через присоединённую (adjugate) / det.

        Returns:
            (inverse, True) или (ident, False) для вырожденной матрицы
        """
        det = self.det()
        if equal(det, 0.0):
            return self._singular(det)

        m = self.m
        inv_det = 1.0 / det
        return (
            Mat3f(
                inv_det * det2x2(m[4], m[7], m[5], m[8]),
                -inv_det * det2x2(m[1], m[7], m[2], m[8]),
                inv_det * det2x2(m[1], m[4], m[2], m[5]),
                -inv_det * det2x2(m[3], m[6], m[5], m[8]),
                inv_det * det2x2(m[0], m[6], m[2], m[8]),
                -inv_det * det2x2(m[0], m[3], m[2], m[5]),
                inv_det * det2x2(m[3], m[6], m[4], m[7]),
                -inv_det * det2x2(m[0], m[6], m[1], m[7]),
                inv_det * det2x2(m[0], m[3], m[1], m[4]),
            ),
            True,
        )

    def inverse_transpose(self) -> tuple["Mat3f", bool]:
        """
        Обращение и транспонирование за один шаг.

        Результат побитово совпадает с inverse() + transpose().
        """
        det = self.det()
        if equal(det, 0.0):
            return self._singular(det)

        m = self.m
        inv_det = 1.0 / det
        return (
            Mat3f(
                inv_det * det2x2(m[4], m[7], m[5], m[8]),
                -inv_det * det2x2(m[3], m[6], m[5], m[8]),
                inv_det * det2x2(m[3], m[6], m[4], m[7]),
                -inv_det * det2x2(m[1], m[7], m[2], m[8]),
                inv_det * det2x2(m[0], m[6], m[2], m[8]),
                -inv_det * det2x2(m[0], m[6], m[1], m[7]),
                inv_det * det2x2(m[1], m[4], m[2], m[5]),
                -inv_det * det2x2(m[0], m[3], m[2], m[5]),
                inv_det * det2x2(m[0], m[3], m[1], m[4]),
            ),
            True,
        )


# =============================================================================
# 4x4
# =============================================================================


class Mat4f(SquareMatrix):
    """
    4x4 float матрица (однородные 3D преобразования).

    Хранение:

        0, 4,  8, 12
        1, 5,  9, 13
        2, 6, 10, 14
        3, 7, 11, 15

    Трансляция — ячейки 12, 13, 14.
    """

    SIZE: ClassVar[int] = 4
    VECTOR: ClassVar[type[FloatVector]] = Vec4f

    # --- конструкторы преобразований ---------------------------------------

    @classmethod
    def from_translation(cls, translation: Vec3f) -> "Mat4f":
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            translation.x, translation.y, translation.z, 1.0,
        )  # fmt: skip

    @classmethod
    def from_scaling(cls, scaling: Vec3f) -> "Mat4f":
        return cls(
            scaling.x, 0.0, 0.0, 0.0,
            0.0, scaling.y, 0.0, 0.0,
            0.0, 0.0, scaling.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )  # fmt: skip

    @classmethod
    def from_rotation(cls, axis: Vec3f, rad: float) -> "Mat4f":
        """
        Поворот на rad радиан вокруг произвольной оси.

        Нулевая ось → единичная матрица.
        """
        length = axis.length()
        if equal(length, 0.0):
            return cls.ident()

        x, y, z = axis.div_scalar(length).split()
        sin, cos = math.sin(rad), math.cos(rad)
        icos = 1.0 - cos

        return cls(
            x * x * icos + cos, y * x * icos + z * sin, z * x * icos - y * sin, 0.0,
            x * y * icos - z * sin, y * y * icos + cos, z * y * icos + x * sin, 0.0,
            x * z * icos + y * sin, y * z * icos - x * sin, z * z * icos + cos, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )  # fmt: skip

    @classmethod
    def from_x_rotation(cls, rad: float) -> "Mat4f":
        sin, cos = math.sin(rad), math.cos(rad)
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, cos, sin, 0.0,
            0.0, -sin, cos, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )  # fmt: skip

    @classmethod
    def from_y_rotation(cls, rad: float) -> "Mat4f":
        sin, cos = math.sin(rad), math.cos(rad)
        return cls(
            cos, 0.0, -sin, 0.0,
            0.0, 1.0, 0.0, 0.0,
            sin, 0.0, cos, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )  # fmt: skip

    @classmethod
    def from_z_rotation(cls, rad: float) -> "Mat4f":
        sin, cos = math.sin(rad), math.cos(rad)
        return cls(
            cos, sin, 0.0, 0.0,
            -sin, cos, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )  # fmt: skip

    @classmethod
    def from_rotation_translation(cls, rot: "Quat", trans: Vec3f) -> "Mat4f":
        """Поворот, затем трансляция."""
        return cls.from_rotation_translation_scale(rot, trans, Vec3f(1.0, 1.0, 1.0))

    @classmethod
    def from_rotation_translation_scale(
        cls, rot: "Quat", trans: Vec3f, scale: Vec3f
    ) -> "Mat4f":
        """
        TRS-матрица: масштаб → поворот → трансляция.

        Эквивалентно T * R * S.
        """
        return cls.from_rotation_translation_scale_origin(
            rot, trans, scale, Vec3f(0.0, 0.0, 0.0)
        )

    @classmethod
    def from_rotation_translation_scale_origin(
        cls, rot: "Quat", trans: Vec3f, scale: Vec3f, origin: Vec3f
    ) -> "Mat4f":
        """
        TRS-матрица с масштабом и поворотом относительно точки origin.

        Эквивалентно T * O * R * S * O⁻¹, где O — трансляция на origin.
        """
        xx = rot.x * 2.0 * rot.x
        xy = rot.y * 2.0 * rot.x
        xz = rot.z * 2.0 * rot.x
        yy = rot.y * 2.0 * rot.y
        yz = rot.z * 2.0 * rot.y
        zz = rot.z * 2.0 * rot.z
        wx = rot.x * 2.0 * rot.w
        wy = rot.y * 2.0 * rot.w
        wz = rot.z * 2.0 * rot.w

        o0 = (1.0 - (yy + zz)) * scale.x
        o1 = (xy + wz) * scale.x
        o2 = (xz - wy) * scale.x

        o4 = (xy - wz) * scale.y
        o5 = (1.0 - (xx + zz)) * scale.y
        o6 = (yz + wx) * scale.y

        o8 = (xz + wy) * scale.z
        o9 = (yz - wx) * scale.z
        o10 = (1.0 - (xx + yy)) * scale.z

        ox, oy, oz = origin.split()
        return cls(
            o0, o1, o2, 0.0,
            o4, o5, o6, 0.0,
            o8, o9, o10, 0.0,
            trans.x + ox - (o0 * ox + o4 * oy + o8 * oz),
            trans.y + oy - (o1 * ox + o5 * oy + o9 * oz),
            trans.z + oz - (o2 * ox + o6 * oy + o10 * oz),
            1.0,
        )  # fmt: skip

    # --- изменение размерности ---------------------------------------------

    def mat2(self) -> Mat2f:
        col0, col1, _, _ = self.cols()
        return Mat2f.from_cols(col0.xy(), col1.xy())

    def mat3(self) -> Mat3f:
        """Левый верхний блок 3x3."""
        col0, col1, col2, _ = self.cols()
        return Mat3f.from_cols(col0.xyz(), col1.xyz(), col2.xyz())

    def set_mat3(self, other: Mat3f) -> "Mat4f":
        """Новая матрица с заменённым левым верхним блоком 3x3."""
        values = list(self.m)
        for col in range(3):
            values[col * 4 : col * 4 + 3] = other.m[col * 3 : col * 3 + 3]
        return Mat4f(*values)

    # --- определитель и обращение ------------------------------------------

    def is_affine(self) -> bool:
        """True если нижняя строка равна [0, 0, 0, 1] (с учётом EPSILON)."""
        m = self.m
        return equal(m[3], 0.0) and equal(m[7], 0.0) and equal(m[11], 0.0) and equal(m[15], 1.0)

    def inverse_affine(self) -> tuple["Mat4f", bool]:
        """
        Обращение аффинной матрицы.

        Обращается блок 3x3 (R⁻¹), трансляция вычисляется как -(R⁻¹ · t).
        Вызывающий гарантирует аффинность (см. is_affine()).
        """
        rot = self.mat3()
        det = rot.det()
        if equal(det, 0.0):
            return self._singular(det)

        inv3, _ = rot.inverse()

        r = inv3.mat4().m
        tx, ty, tz = self.m[12], self.m[13], self.m[14]
        values = list(r)
        values[12] = -(r[0] * tx + r[4] * ty + r[8] * tz)
        values[13] = -(r[1] * tx + r[5] * ty + r[9] * tz)
        values[14] = -(r[2] * tx + r[6] * ty + r[10] * tz)
        return Mat4f(*values), True

    def det(self) -> float:
        m = self.m
        return (
            m[3] * m[6] * m[9] * m[12] - m[2] * m[7] * m[9] * m[12]
            - m[3] * m[5] * m[10] * m[12] + m[1] * m[7] * m[10] * m[12]
            + m[2] * m[5] * m[11] * m[12] - m[1] * m[6] * m[11] * m[12]
            - m[3] * m[6] * m[8] * m[13] + m[2] * m[7] * m[8] * m[13]
            + m[3] * m[4] * m[10] * m[13] - m[0] * m[7] * m[10] * m[13]
            - m[2] * m[4] * m[11] * m[13] + m[0] * m[6] * m[11] * m[13]
            + m[3] * m[5] * m[8] * m[14] - m[1] * m[7] * m[8] * m[14]
            - m[3] * m[4] * m[9] * m[14] + m[0] * m[7] * m[9] * m[14]
            + m[1] * m[4] * m[11] * m[14] - m[0] * m[5] * m[11] * m[14]
            - m[2] * m[5] * m[8] * m[15] + m[1] * m[6] * m[8] * m[15]
            + m[2] * m[4] * m[9] * m[15] - m[0] * m[6] * m[9] * m[15]
            - m[1] * m[4] * m[10] * m[15] + m[0] * m[5] * m[10] * m[15]
        )  # fmt: skip

    def inverse(self) -> tuple["Mat4f", bool]:
        """
        Обратная матрица.

        Аффинные матрицы обращаются через блок 3x3 (inverse_affine),
        остальные — разложением по кофакторам.

        Returns:
            (inverse, True) или (ident, False) для вырожденной матрицы
        """
        if self.is_affine():
            return self.inverse_affine()

        det = self.det()
        if equal(det, 0.0):
            return self._singular(det)

        m = self.m
        adj = Mat4f(
            -m[7] * m[10] * m[13] + m[6] * m[11] * m[13] + m[7] * m[9] * m[14]
            - m[5] * m[11] * m[14] - m[6] * m[9] * m[15] + m[5] * m[10] * m[15],
            m[3] * m[10] * m[13] - m[2] * m[11] * m[13] - m[3] * m[9] * m[14]
            + m[1] * m[11] * m[14] + m[2] * m[9] * m[15] - m[1] * m[10] * m[15],
            -m[3] * m[6] * m[13] + m[2] * m[7] * m[13] + m[3] * m[5] * m[14]
            - m[1] * m[7] * m[14] - m[2] * m[5] * m[15] + m[1] * m[6] * m[15],
            m[3] * m[6] * m[9] - m[2] * m[7] * m[9] - m[3] * m[5] * m[10]
            + m[1] * m[7] * m[10] + m[2] * m[5] * m[11] - m[1] * m[6] * m[11],

            m[7] * m[10] * m[12] - m[6] * m[11] * m[12] - m[7] * m[8] * m[14]
            + m[4] * m[11] * m[14] + m[6] * m[8] * m[15] - m[4] * m[10] * m[15],
            -m[3] * m[10] * m[12] + m[2] * m[11] * m[12] + m[3] * m[8] * m[14]
            - m[0] * m[11] * m[14] - m[2] * m[8] * m[15] + m[0] * m[10] * m[15],
            m[3] * m[6] * m[12] - m[2] * m[7] * m[12] - m[3] * m[4] * m[14]
            + m[0] * m[7] * m[14] + m[2] * m[4] * m[15] - m[0] * m[6] * m[15],
            -m[3] * m[6] * m[8] + m[2] * m[7] * m[8] + m[3] * m[4] * m[10]
            - m[0] * m[7] * m[10] - m[2] * m[4] * m[11] + m[0] * m[6] * m[11],

            -m[7] * m[9] * m[12] + m[5] * m[11] * m[12] + m[7] * m[8] * m[13]
            - m[4] * m[11] * m[13] - m[5] * m[8] * m[15] + m[4] * m[9] * m[15],
            m[3] * m[9] * m[12] - m[1] * m[11] * m[12] - m[3] * m[8] * m[13]
            + m[0] * m[11] * m[13] + m[1] * m[8] * m[15] - m[0] * m[9] * m[15],
            -m[3] * m[5] * m[12] + m[1] * m[7] * m[12] + m[3] * m[4] * m[13]
            - m[0] * m[7] * m[13] - m[1] * m[4] * m[15] + m[0] * m[5] * m[15],
            m[3] * m[5] * m[8] - m[1] * m[7] * m[8] - m[3] * m[4] * m[9]
            + m[0] * m[7] * m[9] + m[1] * m[4] * m[11] - m[0] * m[5] * m[11],

            m[6] * m[9] * m[12] - m[5] * m[10] * m[12] - m[6] * m[8] * m[13]
            + m[4] * m[10] * m[13] + m[5] * m[8] * m[14] - m[4] * m[9] * m[14],
            -m[2] * m[9] * m[12] + m[1] * m[10] * m[12] + m[2] * m[8] * m[13]
            - m[0] * m[10] * m[13] - m[1] * m[8] * m[14] + m[0] * m[9] * m[14],
            m[2] * m[5] * m[12] - m[1] * m[6] * m[12] - m[2] * m[4] * m[13]
            + m[0] * m[6] * m[13] + m[1] * m[4] * m[14] - m[0] * m[5] * m[14],
            -m[2] * m[5] * m[8] + m[1] * m[6] * m[8] + m[2] * m[4] * m[9]
            - m[0] * m[6] * m[9] - m[1] * m[4] * m[10] + m[0] * m[5] * m[10],
        )  # fmt: skip
        return adj.mul_scalar(1.0 / det), True

    def inverse_transpose(self) -> tuple["Mat4f", bool]:
        """Обращение и транспонирование (матрица нормалей)."""
        inv, ok = self.inverse()
        if not ok:
            return inv, False
        return inv.transpose(), True

    # --- разложение TRS -----------------------------------------------------

    def translation(self) -> Vec3f:
        return Vec3f(self.m[12], self.m[13], self.m[14])

    def set_translation(self, translation: Vec3f) -> "Mat4f":
        values = list(self.m)
        values[12:15] = translation.split()
        return Mat4f(*values)

    def scaling(self) -> Vec3f:
        """Масштаб по осям: длины первых трёх столбцов блока 3x3."""
        m = self.m
        return Vec3f(
            math.hypot(m[0], m[1], m[2]),
            math.hypot(m[4], m[5], m[6]),
            math.hypot(m[8], m[9], m[10]),
        )

    def set_scaling(self, scaling: Vec3f) -> "Mat4f":
        """Новая матрица с заменённой диагональю блока 3x3."""
        values = list(self.m)
        values[0], values[5], values[10] = scaling.split()
        return Mat4f(*values)

    def rotation(self) -> "Quat":
        """
        Поворот матрицы в виде кватерниона.

        Масштаб делится из каждого столбца; кватернион выбирается по
        методу Шеппарда: trace > 0, иначе по наибольшему диагональному
        элементу (sm11, затем sm22, затем sm33).
        """
        from vmath.core.domain.quat import Quat

        m = self.m
        inv = [1.0 / s if s != 0 else 0.0 for s in self.scaling().split()]

        # smIJ: столбец I, строка J
        sm11, sm12, sm13 = m[0] * inv[0], m[1] * inv[0], m[2] * inv[0]
        sm21, sm22, sm23 = m[4] * inv[1], m[5] * inv[1], m[6] * inv[1]
        sm31, sm32, sm33 = m[8] * inv[2], m[9] * inv[2], m[10] * inv[2]

        trace = sm11 + sm22 + sm33
        if trace > 0:
            s = math.sqrt(trace + 1.0) * 2.0
            return Quat(0.25 * s, (sm23 - sm32) / s, (sm31 - sm13) / s, (sm12 - sm21) / s)
        if sm11 > sm22 and sm11 > sm33:
            s = math.sqrt(1.0 + sm11 - sm22 - sm33) * 2.0
            return Quat((sm23 - sm32) / s, 0.25 * s, (sm12 + sm21) / s, (sm31 + sm13) / s)
        if sm22 > sm33:
            s = math.sqrt(1.0 + sm22 - sm11 - sm33) * 2.0
            return Quat((sm31 - sm13) / s, (sm12 + sm21) / s, 0.25 * s, (sm23 + sm32) / s)
        s = math.sqrt(1.0 + sm33 - sm11 - sm22) * 2.0
        return Quat((sm12 - sm21) / s, (sm31 + sm13) / s, (sm23 + sm32) / s, 0.25 * s)

    # --- правое умножение на элементарные преобразования --------------------

    def translate(self, translation: Vec3f) -> "Mat4f":
        """self * T(translation)."""
        m = self.m
        tx, ty, tz = translation.split()
        values = list(m)
        for row in range(4):
            values[12 + row] = m[row] * tx + m[4 + row] * ty + m[8 + row] * tz + m[12 + row]
        return Mat4f(*values)

    def scale(self, scaling: Vec3f) -> "Mat4f":
        """self * S(scaling): столбцы 0..2 умножаются на компоненты масштаба."""
        values = list(self.m)
        for col, s in enumerate(scaling.split()):
            for row in range(4):
                values[col * 4 + row] *= s
        return Mat4f(*values)

    def rotate_x(self, rad: float) -> "Mat4f":
        """self * Rx(rad)."""
        m = self.m
        sin, cos = math.sin(rad), math.cos(rad)
        return Mat4f(
            *m[0:4],
            *(m[4 + r] * cos + m[8 + r] * sin for r in range(4)),
            *(m[8 + r] * cos - m[4 + r] * sin for r in range(4)),
            *m[12:16],
        )

    def rotate_y(self, rad: float) -> "Mat4f":
        """self * Ry(rad)."""
        m = self.m
        sin, cos = math.sin(rad), math.cos(rad)
        return Mat4f(
            *(m[r] * cos - m[8 + r] * sin for r in range(4)),
            *m[4:8],
            *(m[r] * sin + m[8 + r] * cos for r in range(4)),
            *m[12:16],
        )

    def rotate_z(self, rad: float) -> "Mat4f":
        """self * Rz(rad)."""
        m = self.m
        sin, cos = math.sin(rad), math.cos(rad)
        return Mat4f(
            *(m[r] * cos + m[4 + r] * sin for r in range(4)),
            *(m[4 + r] * cos - m[r] * sin for r in range(4)),
            *m[8:16],
        )
