"""
Range — составной примитив из двух индексов

Каждый скаляр (StartIndex, EndIndex, Length) проверяется независимо
(>= 0). Отношение между ними (start <= end) проверяется только при
создании Range и в скаляры не дублируется.

Конструкторы:
- Range.from_endpoints(start, end) — отказ при start > end
- Range.from_length(start, length) — всегда успешен, end = start + length
- Range.parse_endpoints(start, end) — тотальный вариант (Valid / Invalid)
"""

from decimal import Decimal

from pydantic import BaseModel, Field, ValidationError, field_validator

from domain_primitives.errors import DomainValidationError
from domain_primitives.primitive import DomainPrimitive, describe_validation_error
from domain_primitives.result import Invalid, Valid, Validation


def _ensure_non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


# =============================================================================
# СКАЛЯРЫ
# =============================================================================


class Length(DomainPrimitive):
    """Длина диапазона (>= 0)."""

    value: int = Field(..., strict=True, description="Количество элементов")

    @field_validator("value")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        return _ensure_non_negative(v, "length")


class EndIndex(DomainPrimitive):
    """Конечный индекс диапазона, не включается (>= 0)."""

    value: int = Field(..., strict=True, description="Индекс конца (exclusive)")

    @field_validator("value")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        return _ensure_non_negative(v, "end index")


class StartIndex(DomainPrimitive):
    """Начальный индекс диапазона (>= 0)."""

    value: int = Field(..., strict=True, description="Индекс начала (inclusive)")

    @field_validator("value")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        return _ensure_non_negative(v, "start index")

    def end_index(self, length: Length) -> EndIndex:
        """Конечный индекс на расстоянии length от начала."""
        return EndIndex.create(self.value + length.value)


# =============================================================================
# RANGE
# =============================================================================


class Range(BaseModel):
    """
    Полуоткрытый диапазон [start, end).

    Immutable модель (frozen=True). Инвариант start <= end проверяется
    валидатором модели, поэтому model_validate его тоже не обходит.
    """

    start: StartIndex = Field(..., description="Начало (inclusive)")
    end: EndIndex = Field(..., description="Конец (exclusive)")

    model_config = {"frozen": True}

    @field_validator("end")
    @classmethod
    def validate_end_not_before_start(cls, v: EndIndex, info) -> EndIndex:
        """Проверка, что end >= start"""
        if "start" in info.data:
            start = info.data["start"]
            if start.value > v.value:
                raise ValueError(f"start index {start.value} must be <= end index {v.value}")
        return v

    @classmethod
    def from_endpoints(cls, start: StartIndex, end: EndIndex) -> "Range":
        """
        Диапазон по двум концам.

        Raises:
            DomainValidationError: Если start > end
        """
        try:
            return cls(start=start, end=end)
        except ValidationError as e:
            raise DomainValidationError(
                cls.__name__, describe_validation_error(e), (start.value, end.value)
            ) from e

    @classmethod
    def from_length(cls, start: StartIndex, length: Length) -> "Range":
        """Диапазон по началу и длине. Для валидных аргументов не падает."""
        return cls.from_endpoints(start, start.end_index(length))

    @classmethod
    def parse_endpoints(cls, start: StartIndex, end: EndIndex) -> Validation["Range"]:
        """Тотальный вариант from_endpoints."""
        try:
            return Valid(cls(start=start, end=end))
        except ValidationError as e:
            return Invalid(primitive=cls.__name__, reason=describe_validation_error(e))

    @property
    def length(self) -> Length:
        return Length.create(self.end.value - self.start.value)


# =============================================================================
# MEASUREMENTS
# =============================================================================


class Measurements(BaseModel):
    """Последовательность измерений (Decimal), поддерживает срез по Range."""

    elements: tuple[Decimal, ...] = Field(default=(), description="Значения измерений")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.elements)

    def slice(self, a_range: Range) -> "Measurements":
        """
        Срез [start, end).

        Raises:
            DomainValidationError: Если end выходит за число измерений
        """
        if a_range.end.value > len(self.elements):
            raise DomainValidationError(
                "Range",
                f"end index {a_range.end.value} exceeds {len(self.elements)} measurements",
                (a_range.start.value, a_range.end.value),
            )
        return Measurements(elements=self.elements[a_range.start.value : a_range.end.value])
