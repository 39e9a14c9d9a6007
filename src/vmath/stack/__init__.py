"""Matrix stack — единственный изменяемый тип библиотеки.

Стек 4x4 матриц преобразований, принадлежащий вызывающему коду.
"""

from .matrix_stack import MatrixStackUnderflow, MatStack4f

__all__ = [
    "MatStack4f",
    "MatrixStackUnderflow",
]
