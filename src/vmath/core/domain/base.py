"""
ValueModel — базовая immutable модель для всех value-типов библиотеки.

Pydantic модель с frozen=True: любые изменения создают новый экземпляр.
Поддерживает позиционное создание в порядке компонент COMPONENTS,
например Vec3f(1, 2, 3) эквивалентно Vec3f(x=1, y=2, z=3).
"""

from typing import Any, ClassVar, Iterator

from pydantic import BaseModel


class ValueModel(BaseModel):
    """
    Immutable value-тип с позиционным конструктором.

    Наследники перечисляют имена полей в COMPONENTS в порядке,
    в котором принимаются позиционные аргументы и возвращает split().
    """

    COMPONENTS: ClassVar[tuple[str, ...]] = ()

    model_config = {"frozen": True}  # Immutable

    def __init__(self, *components: Any, **data: Any) -> None:
        names = type(self).COMPONENTS
        if len(components) > len(names):
            raise TypeError(
                f"{type(self).__name__} takes at most {len(names)} positional "
                f"arguments ({len(components)} given)"
            )
        for name, value in zip(names, components):
            if name in data:
                raise TypeError(
                    f"{type(self).__name__} got multiple values for argument '{name}'"
                )
            data[name] = value
        super().__init__(**data)

    def split(self) -> tuple[Any, ...]:
        """Компоненты в порядке COMPONENTS."""
        return tuple(getattr(self, name) for name in type(self).COMPONENTS)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        """Итерация по компонентам (а не по парам имя-значение BaseModel)."""
        return iter(self.split())

    def __getitem__(self, index: int) -> Any:
        return getattr(self, type(self).COMPONENTS[index])

    def __len__(self) -> int:
        return len(type(self).COMPONENTS)
