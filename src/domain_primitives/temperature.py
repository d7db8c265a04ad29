"""
Temperature — конверсия Celsius ↔ Fahrenheit

Два уровня:
1. Чистые функции to_celsius / to_fahrenheit (без валидации и отказов)
2. Помеченное объединение Temperature = Celsius | Fahrenheit

Каждый вариант помнит свою единицу (поле unit) и умеет конвертироваться
в любую из двух. Конверсия в свою же единицу возвращает тот же экземпляр,
в другую — новый экземпляр запрошенного варианта.

Формулы:
    c = (f - 32) * 5 / 9
    f = c * 9 / 5 + 32
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from domain_primitives.errors import DomainValidationError
from domain_primitives.primitive import describe_validation_error


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def to_celsius(fahrenheit: float) -> float:
    """
    Конверсия: °F → °C

    Args:
        fahrenheit: Температура в градусах Фаренгейта

    Returns:
        Температура в градусах Цельсия
    """
    return (fahrenheit - 32.0) * 5.0 / 9.0


def to_fahrenheit(celsius: float) -> float:
    """
    Конверсия: °C → °F

    Args:
        celsius: Температура в градусах Цельсия

    Returns:
        Температура в градусах Фаренгейта
    """
    return celsius * 9.0 / 5.0 + 32.0


# =============================================================================
# ENUMS
# =============================================================================


class TemperatureUnit(str, Enum):
    """Единица измерения (тег варианта Temperature)"""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


# =============================================================================
# ВАРИАНТЫ
# =============================================================================


class Celsius(BaseModel):
    """Температура в градусах Цельсия."""

    unit: Literal["celsius"] = TemperatureUnit.CELSIUS.value
    value: float = Field(..., strict=True, description="Градусы Цельсия")

    model_config = {"frozen": True}

    def to_celsius(self) -> "Celsius":
        return self

    def to_fahrenheit(self) -> "Fahrenheit":
        return Fahrenheit(value=to_fahrenheit(self.value))


class Fahrenheit(BaseModel):
    """Температура в градусах Фаренгейта."""

    unit: Literal["fahrenheit"] = TemperatureUnit.FAHRENHEIT.value
    value: float = Field(..., strict=True, description="Градусы Фаренгейта")

    model_config = {"frozen": True}

    def to_celsius(self) -> Celsius:
        return Celsius(value=to_celsius(self.value))

    def to_fahrenheit(self) -> "Fahrenheit":
        return self


Temperature = Annotated[Union[Celsius, Fahrenheit], Field(discriminator="unit")]

_TEMPERATURE_ADAPTER: TypeAdapter = TypeAdapter(Temperature)


# =============================================================================
# ПОТРЕБИТЕЛИ
# =============================================================================


def parse_temperature(data: Any) -> Union[Celsius, Fahrenheit]:
    """
    Создание нужного варианта по тегу unit.

    Args:
        data: Mapping вида {"unit": "celsius", "value": 21.5}

    Returns:
        Celsius или Fahrenheit

    Raises:
        DomainValidationError: Неизвестный тег или невалидное значение
    """
    try:
        return _TEMPERATURE_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise DomainValidationError("Temperature", describe_validation_error(e), data) from e


def describe(temperature: Union[Celsius, Fahrenheit]) -> str:
    """
    Человекочитаемое представление. Оба варианта обрабатываются явно.

    Raises:
        TypeError: Если передан не вариант Temperature
    """
    if isinstance(temperature, Celsius):
        return f"{temperature.value:.1f} °C"
    if isinstance(temperature, Fahrenheit):
        return f"{temperature.value:.1f} °F"
    raise TypeError(f"Not a Temperature variant: {type(temperature).__name__}")
