"""
Contract Validation Module

Валидация JSON-представления доменных примитивов по JSON Schema.
"""

from .validators import (
    ContractValidator,
    OrderNumberValidator,
    RangeValidator,
    SchemaLoader,
    TemperatureValidator,
    validate_order_number,
    validate_range,
    validate_temperature,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderNumberValidator",
    "TemperatureValidator",
    "RangeValidator",
    # Functions
    "validate_order_number",
    "validate_temperature",
    "validate_range",
]
