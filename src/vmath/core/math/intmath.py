"""
Integer helpers для целочисленных векторов и прямоугольников.

Целочисленное деление в векторных типах усекает к нулю (как в
целых фиксированной ширины), а не округляет вниз как оператор `//`.
"""


def abs_int(value: int) -> int:
    """Абсолютное значение целого."""
    if value < 0:
        return -value
    return value


def min_int(a: int, b: int) -> int:
    """Меньшее из двух целых."""
    if a < b:
        return a
    return b


def max_int(a: int, b: int) -> int:
    """Большее из двух целых."""
    if a < b:
        return b
    return a


def div_trunc(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        Частное, усечённое к нулю

    Raises:
        ZeroDivisionError: Если b == 0

    Examples:
        >>> div_trunc(7, 2)
        3
        >>> div_trunc(-7, 2)
        -3
    """
    quotient = abs_int(a) // abs_int(b)
    if (a < 0) != (b < 0):
        return -quotient
    return quotient
