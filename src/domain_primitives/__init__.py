"""
Domain primitives — валидированные обёртки над примитивными значениями.

Содержит:
- DomainPrimitive (fail-fast create / тотальный parse)
- SingleReadValue (однократное чтение секретов)
- Конверсию Celsius ↔ Fahrenheit
- Составной Range из независимо проверенных индексов
"""

from domain_primitives.credentials import PASSWORD_MASK, Credentials, Password, Username
from domain_primitives.credit_card import CREDIT_CARD_VISIBLE_DIGITS, CreditCardNumber
from domain_primitives.errors import AlreadyConsumedError, DomainValidationError
from domain_primitives.order import (
    ORDER_NUMBER_LENGTH,
    Order,
    OrderNumber,
    check_order_number,
    is_valid_order_number,
)
from domain_primitives.primitive import DomainPrimitive, describe_validation_error
from domain_primitives.ranges import EndIndex, Length, Measurements, Range, StartIndex
from domain_primitives.result import Invalid, Valid, Validation
from domain_primitives.single_read import SingleReadValue
from domain_primitives.temperature import (
    Celsius,
    Fahrenheit,
    Temperature,
    TemperatureUnit,
    describe,
    parse_temperature,
    to_celsius,
    to_fahrenheit,
)

__all__ = [
    # Errors
    "DomainValidationError",
    "AlreadyConsumedError",
    # Result
    "Valid",
    "Invalid",
    "Validation",
    # Validated value
    "DomainPrimitive",
    "describe_validation_error",
    # Order
    "ORDER_NUMBER_LENGTH",
    "OrderNumber",
    "Order",
    "is_valid_order_number",
    "check_order_number",
    # Single-read value
    "SingleReadValue",
    "PASSWORD_MASK",
    "Username",
    "Password",
    "Credentials",
    "CREDIT_CARD_VISIBLE_DIGITS",
    "CreditCardNumber",
    # Temperature
    "to_celsius",
    "to_fahrenheit",
    "TemperatureUnit",
    "Celsius",
    "Fahrenheit",
    "Temperature",
    "parse_temperature",
    "describe",
    # Range
    "StartIndex",
    "EndIndex",
    "Length",
    "Range",
    "Measurements",
]
