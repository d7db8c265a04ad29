"""
OrderNumber — номер заказа как доменный примитив

Номер заказа — строка ровно из ORDER_NUMBER_LENGTH символов.
Order принимает только OrderNumber, поэтому произвольную строку
(или число) передать вместо номера невозможно.

Функции is_valid_order_number / check_order_number — проверка "сырой"
строки без примитива. Оставлены для сравнения: результат проверки
нигде не сохраняется, и каждый потребитель вынужден повторять её сам.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from domain_primitives.errors import DomainValidationError
from domain_primitives.primitive import DomainPrimitive


# Длина номера заказа (символы)
ORDER_NUMBER_LENGTH: Final[int] = 10


class OrderNumber(DomainPrimitive):
    """Номер заказа (строка ровно из 10 символов)."""

    value: str = Field(..., strict=True, description="Номер заказа, например '0980810031'")

    @field_validator("value")
    @classmethod
    def validate_length(cls, v: str) -> str:
        if len(v) != ORDER_NUMBER_LENGTH:
            raise ValueError(
                f"order number must be exactly {ORDER_NUMBER_LENGTH} characters, got {len(v)}"
            )
        return v


class Order(BaseModel):
    """Заказ. Создаётся только из валидного OrderNumber."""

    order_number: OrderNumber = Field(..., description="Номер заказа")

    model_config = {"frozen": True}


def is_valid_order_number(raw: Any) -> bool:
    """
    Проверка сырой строки на формат номера заказа.

    Args:
        raw: Проверяемое значение

    Returns:
        True если это строка длиной ORDER_NUMBER_LENGTH
    """
    return isinstance(raw, str) and len(raw) == ORDER_NUMBER_LENGTH


def check_order_number(raw: Any) -> str:
    """
    Проверка сырой строки с исключением.

    Args:
        raw: Проверяемое значение

    Returns:
        Исходная строка без изменений

    Raises:
        DomainValidationError: Если формат номера неверен
    """
    if not is_valid_order_number(raw):
        raise DomainValidationError(
            "OrderNumber",
            f"order number must be a string of exactly {ORDER_NUMBER_LENGTH} characters",
            raw,
        )
    return raw
