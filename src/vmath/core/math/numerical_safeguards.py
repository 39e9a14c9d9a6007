"""
Numerical Safeguards — скалярные примитивы с epsilon-защитой

Модуль обеспечивает базовые скалярные операции, на которых построены все
векторные, матричные и кватернионные типы библиотеки:
- Относительное epsilon-сравнение float (с отдельной веткой около нуля)
- Clamp и wrap для float и int
- Конверсия градусов/радиан и нормализация углов
- Линейная интерполяция

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. equal_eps симметрична: equal_eps(a, b, e) == equal_eps(b, a, e)
2. equal_eps(a, a, e) == True для любого конечного a, в том числе при e == 0
3. Сравнения составных типов выполняются покомпонентно (логическое И)
4. Все операции детерминированы и не имеют побочных эффектов
"""

import math
import sys
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность по умолчанию для всех equal()-методов
EPSILON: Final[float] = 1e-8

# Наименьшее нормализованное число float64 (2^-1022).
# Не путать с наименьшим субнормальным (5e-324): у MIN_NORMAL есть
# неявная ведущая единица мантиссы.
MIN_NORMAL: Final[float] = sys.float_info.min


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def equal_eps(a: float, b: float, eps: float) -> bool:
    """
    Сравнение float с относительной толерантностью.

    Алгоритм:
        1. a == b → True (включая +Inf == +Inf)
        2. a == 0, b == 0 или |a-b| < MIN_NORMAL → абсолютное сравнение:
           |a-b| < eps * MIN_NORMAL
        3. Иначе относительное: |a-b| / (|a|+|b|) < eps

    Args:
        a: Первое значение
        b: Второе значение
        eps: Относительная толерантность

    Returns:
        True если значения равны с учётом толерантности

    Examples:
        >>> equal_eps(-4.0, -4.001, 0.001)
        True
        >>> equal_eps(1e6, 1e6 + 1, 1e-7)
        False
    """
    if a == b:
        return True

    diff = abs(a - b)
    if a == 0 or b == 0 or diff < MIN_NORMAL:
        return diff < eps * MIN_NORMAL

    return diff / (abs(a) + abs(b)) < eps


def equal(a: float, b: float) -> bool:
    """Сравнение float с толерантностью EPSILON по умолчанию."""
    return equal_eps(a, b, EPSILON)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


# =============================================================================
# CLAMP / WRAP
# =============================================================================


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Examples:
        >>> clamp(2.0, 3.0, 5.0)
        3.0
        >>> clamp(6.0, 3.0, 5.0)
        5.0
    """
    if value <= min_value:
        return min_value
    if value >= max_value:
        return max_value
    return value


def clamp_int(value: int, min_value: int, max_value: int) -> int:
    """Целочисленный вариант clamp."""
    if value <= min_value:
        return min_value
    if value >= max_value:
        return max_value
    return value


def wrap(value: float, min_value: float, max_value: float) -> float:
    """
    Циклический перенос значения в диапазон [min_value, max_value).

    Формула:
        min + (v - min) - (max - min) * floor((v - min) / (max - min))

    Examples:
        >>> wrap(-4.0, 0.0, 10.0)
        6.0
        >>> wrap(12.0, 5.0, 10.0)
        7.0
    """
    diff = max_value - min_value
    value -= min_value
    return min_value + value - diff * math.floor(value / diff)


def wrap_int(value: int, min_value: int, max_value: int) -> int:
    """Целочисленный вариант wrap (без промежуточного перехода во float)."""
    diff = max_value - min_value
    return min_value + (value - min_value) % diff


# =============================================================================
# УГЛЫ
# =============================================================================


def radians(deg: float) -> float:
    """Конверсия градусов в радианы."""
    return math.pi * deg / 180.0


def degrees(rad: float) -> float:
    """Конверсия радиан в градусы."""
    return rad * (180.0 / math.pi)


def normalize_radians(rad: float) -> float:
    """
    Нормализация угла в диапазон [0, 2π).
    """
    pi2 = 2.0 * math.pi
    rad += pi2 * float(int(rad / -pi2) + 1)
    rad -= pi2 * float(int(rad / pi2))
    return rad


def normalize_degrees(deg: float) -> float:
    """
    Нормализация угла в диапазон [0, 360).

    Examples:
        >>> normalize_degrees(-45.0)
        315.0
    """
    deg += 360.0 * (int(deg / -360.0) + 1)
    deg -= 360.0 * int(deg / 360.0)
    return deg


def angle_diff(from_rad: float, to_rad: float) -> float:
    """
    Знаковая разница двух углов в диапазоне (-π, π].

    Args:
        from_rad: Исходный угол (радианы)
        to_rad: Целевой угол (радианы)

    Returns:
        Кратчайший поворот от from_rad к to_rad
    """
    angle = normalize_radians(to_rad - from_rad)
    if angle > math.pi:
        angle -= 2.0 * math.pi
    return angle


# =============================================================================
# ИНТЕРПОЛЯЦИЯ
# =============================================================================


def lerp(a: float, b: float, t: float) -> float:
    """
    Линейная интерполяция между a и b.

    Параметр t обычно лежит в [0, 1]; значения вне диапазона
    экстраполируют.

    Examples:
        >>> lerp(-5.0, 5.0, 0.75)
        2.5
    """
    return a * (1.0 - t) + b * t
