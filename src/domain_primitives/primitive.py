"""
DomainPrimitive — базовый тип валидированного значения

Оборачивает сырое значение (str, int, ...) и гарантирует, что каждый
существующий экземпляр удовлетворяет правилу домена.

Два способа создания, отклоняющие ровно одни и те же значения:
- create(raw) — fail-fast, бросает DomainValidationError
- parse(raw) — тотальный, возвращает Valid / Invalid

Экземпляры immutable (frozen=True) и strict: int не превращается
молча в str и наоборот.
"""

import logging
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from domain_primitives.errors import DomainValidationError
from domain_primitives.result import Invalid, Valid, Validation

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="DomainPrimitive")


def describe_validation_error(error: ValidationError) -> str:
    """
    Сжатое описание нарушенных правил из pydantic ValidationError.

    Args:
        error: Исходная ошибка pydantic

    Returns:
        Сообщения всех ошибок через '; '
    """
    return "; ".join(str(err["msg"]) for err in error.errors())


class DomainPrimitive(BaseModel):
    """
    Базовый класс доменного примитива.

    Наследник объявляет единственное поле `value` с нужным типом и
    ограничениями (Field / field_validator). Проверка выполняется pydantic
    при любом способе создания, поэтому невалидный экземпляр получить нельзя.
    """

    # Без объявленного value (сам базовый класс) любой вызов create отклоняется
    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def create(cls: Type[P], raw: Any) -> P:
        """
        Fail-fast создание примитива.

        Args:
            raw: Сырое значение

        Returns:
            Валидный экземпляр

        Raises:
            DomainValidationError: Если значение нарушает правило примитива
        """
        try:
            return cls(value=raw)
        except ValidationError as e:
            raise DomainValidationError(cls.__name__, describe_validation_error(e), raw) from e

    @classmethod
    def parse(cls: Type[P], raw: Any) -> Validation[P]:
        """
        Тотальное создание примитива (без исключений).

        Args:
            raw: Сырое значение

        Returns:
            Valid с экземпляром или Invalid с причиной отказа
        """
        try:
            return Valid(cls(value=raw))
        except ValidationError as e:
            reason = describe_validation_error(e)
            logger.debug("%s rejected: %s", cls.__name__, reason)
            return Invalid(primitive=cls.__name__, reason=reason)

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        """Проверка сырого значения без создания примитива."""
        return cls.parse(raw).is_valid

    def __str__(self) -> str:
        return str(self.value)
