"""MatStack4f — стек матриц преобразований 4x4.

Классический стек трансформаций retained-mode графики:
- Стек никогда не пуст: нижний элемент (индекс 0) можно заменить, но не снять
- push() дублирует текущую вершину (копия, не ссылка)
- pop() при единственном элементе — ошибка, стек не изменяется
- set/set_ident/mul_right/mul_left изменяют вершину на месте

Единственный изменяемый тип библиотеки. Не потокобезопасен:
синхронизация при совместном использовании — на стороне вызывающего.
"""

import logging
from typing import List

from vmath.core.domain.matrix import Mat4f

logger = logging.getLogger(__name__)


class MatrixStackUnderflow(Exception):
    """Попытка снять последний (базовый) элемент стека."""


class MatStack4f:
    """Стек 4x4 матриц, изначально содержащий единичную матрицу."""

    def __init__(self) -> None:
        self._stack: List[Mat4f] = [Mat4f.ident()]

    def __len__(self) -> int:
        return len(self._stack)

    def size(self) -> int:
        """Текущее количество элементов (>= 1)."""
        return len(self._stack)

    def top(self) -> Mat4f:
        """Вершина стека без изменения стека."""
        return self._stack[-1]

    def push(self) -> None:
        """Сохранение текущей вершины: вершина дублируется."""
        self._stack.append(self.top())

    def pop(self) -> None:
        """Снятие вершины.

        Raises:
            MatrixStackUnderflow: если в стеке остался только базовый элемент
        """
        if not self.try_pop():
            raise MatrixStackUnderflow("cannot pop last element from matrix stack")

    def try_pop(self) -> bool:
        """Снятие вершины без исключения.

        Returns:
            False если в стеке только базовый элемент (стек не изменён)
        """
        if len(self._stack) == 1:
            logger.debug("Matrix stack underflow: base element cannot be popped")
            return False
        self._stack.pop()
        return True

    def set(self, mat: Mat4f) -> None:
        """Замена вершины."""
        self._stack[-1] = mat

    def set_ident(self) -> None:
        self.set(Mat4f.ident())

    def mul_right(self, mat: Mat4f) -> None:
        """top := top * mat"""
        self.set(self.top().mul(mat))

    def mul_left(self, mat: Mat4f) -> None:
        """top := mat * top"""
        self.set(mat.mul(self.top()))
