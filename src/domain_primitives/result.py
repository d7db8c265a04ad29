"""
Result — тотальный (без исключений) результат валидации

Valid / Invalid — помеченные варианты. Вызывающий код обязан обработать
оба варианта явно, вместо того чтобы ловить исключение.
"""

from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar, Union

from domain_primitives.errors import DomainValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Успешная валидация: содержит готовый примитив."""

    value: T

    is_valid: Literal[True] = field(default=True, init=False)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Invalid:
    """Отклонённое значение с описанием нарушенного правила."""

    primitive: str
    reason: str

    is_valid: Literal[False] = field(default=False, init=False)

    def unwrap(self):
        """
        Переход из тотального режима в fail-fast.

        Raises:
            DomainValidationError: Всегда
        """
        raise DomainValidationError(self.primitive, self.reason)


Validation = Union[Valid[T], Invalid]
