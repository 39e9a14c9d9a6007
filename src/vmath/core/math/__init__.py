"""
Core math modules для vmath

Скалярные примитивы с epsilon-защитой и целочисленные помощники.
Модули geometry и projection зависят от value-типов (vmath.core.domain)
и импортируются напрямую либо через пакет vmath.
"""

# Numerical Safeguards
from vmath.core.math.numerical_safeguards import (
    # Epsilon constants
    EPSILON,
    MIN_NORMAL,
    # Epsilon comparisons
    equal,
    equal_eps,
    is_valid_float,
    # Clamp / wrap
    clamp,
    clamp_int,
    wrap,
    wrap_int,
    # Angles
    angle_diff,
    degrees,
    normalize_degrees,
    normalize_radians,
    radians,
    # Interpolation
    lerp,
)

# Integer helpers
from vmath.core.math.intmath import abs_int, div_trunc, max_int, min_int

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPSILON",
    "MIN_NORMAL",
    # Numerical Safeguards: Epsilon comparisons
    "equal",
    "equal_eps",
    "is_valid_float",
    # Numerical Safeguards: Clamp / wrap
    "clamp",
    "clamp_int",
    "wrap",
    "wrap_int",
    # Numerical Safeguards: Angles
    "angle_diff",
    "degrees",
    "normalize_degrees",
    "normalize_radians",
    "radians",
    # Numerical Safeguards: Interpolation
    "lerp",
    # Integer helpers
    "abs_int",
    "div_trunc",
    "max_int",
    "min_int",
]
