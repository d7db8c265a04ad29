"""
Тесты для StartIndex, EndIndex, Length, Range, Measurements

Проверяет:
1. Независимую валидацию скаляров (>= 0)
2. Инвариант Range: start <= end (только на уровне Range)
3. Range.from_length: end = start + length, всегда валиден
4. Срез Measurements по Range
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from domain_primitives import (
    DomainValidationError,
    EndIndex,
    Invalid,
    Length,
    Measurements,
    Range,
    StartIndex,
    Valid,
)


# =============================================================================
# СКАЛЯРЫ
# =============================================================================


class TestScalars:
    """Тесты скалярных индексов"""

    @pytest.mark.parametrize("primitive", [StartIndex, EndIndex, Length])
    @pytest.mark.parametrize("raw", [0, 1, 2, 10, 2**40])
    def test_non_negative_accepted(self, primitive, raw: int) -> None:
        assert primitive.create(raw).value == raw

    @pytest.mark.parametrize(
        "primitive, name",
        [(StartIndex, "start index"), (EndIndex, "end index"), (Length, "length")],
    )
    @pytest.mark.parametrize("raw", [-1, -2, -(2**40)])
    def test_negative_rejected(self, primitive, name: str, raw: int) -> None:
        with pytest.raises(DomainValidationError, match=f"{name} must be >= 0"):
            primitive.create(raw)

    @pytest.mark.parametrize("raw", ["1", 1.0, None])
    def test_non_int_rejected(self, raw) -> None:
        """Strict: строки и float не превращаются в индекс"""
        with pytest.raises(DomainValidationError):
            StartIndex.create(raw)

    def test_parse_negative(self) -> None:
        result = Length.parse(-1)
        assert isinstance(result, Invalid)
        assert result.primitive == "Length"

    def test_scalar_types_are_distinct(self) -> None:
        """Индексы одного значения, но разного смысла не равны"""
        assert StartIndex.create(1) != EndIndex.create(1)

    def test_end_index(self) -> None:
        end = StartIndex.create(1).end_index(Length.create(2))
        assert isinstance(end, EndIndex)
        assert end.value == 3


# =============================================================================
# RANGE
# =============================================================================


class TestRange:
    """Тесты для Range"""

    def test_from_length(self) -> None:
        a_range = Range.from_length(StartIndex.create(1), Length.create(2))
        assert a_range.start.value == 1
        assert a_range.end.value == 3
        assert a_range.length == Length.create(2)

    @pytest.mark.parametrize("start", [0, 1, 7, 1000])
    @pytest.mark.parametrize("length", [0, 1, 5, 1000])
    def test_from_length_always_valid(self, start: int, length: int) -> None:
        a_range = Range.from_length(StartIndex.create(start), Length.create(length))
        assert a_range.end.value == start + length
        assert a_range.start.value <= a_range.end.value

    @pytest.mark.parametrize("start, end", [(0, 0), (1, 3), (5, 5), (0, 100)])
    def test_from_endpoints_valid(self, start: int, end: int) -> None:
        a_range = Range.from_endpoints(StartIndex.create(start), EndIndex.create(end))
        assert (a_range.start.value, a_range.end.value) == (start, end)

    @pytest.mark.parametrize("start, end", [(1, 0), (3, 1), (100, 99)])
    def test_from_endpoints_start_after_end(self, start: int, end: int) -> None:
        with pytest.raises(DomainValidationError, match="must be <= end index") as exc_info:
            Range.from_endpoints(StartIndex.create(start), EndIndex.create(end))
        assert exc_info.value.primitive == "Range"
        assert exc_info.value.raw == (start, end)

    def test_parse_endpoints(self) -> None:
        ok = Range.parse_endpoints(StartIndex.create(1), EndIndex.create(3))
        assert isinstance(ok, Valid)
        assert ok.value.end.value == 3

        bad = Range.parse_endpoints(StartIndex.create(3), EndIndex.create(1))
        assert isinstance(bad, Invalid)
        assert "must be <= end index" in bad.reason

    def test_model_validate_enforces_order(self) -> None:
        """Инвариант не обходится через model_validate"""
        with pytest.raises(ValidationError):
            Range.model_validate({"start": {"value": 3}, "end": {"value": 1}})

    def test_model_validate_valid(self) -> None:
        a_range = Range.model_validate({"start": {"value": 1}, "end": {"value": 3}})
        assert a_range == Range.from_length(StartIndex.create(1), Length.create(2))

    def test_swapped_scalar_types_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Range(start=EndIndex.create(1), end=StartIndex.create(3))  # type: ignore

    def test_immutable(self) -> None:
        a_range = Range.from_length(StartIndex.create(1), Length.create(2))
        with pytest.raises(ValidationError):
            a_range.end = EndIndex.create(10)  # type: ignore


# =============================================================================
# MEASUREMENTS
# =============================================================================


class TestMeasurements:
    """Тесты среза измерений"""

    @pytest.fixture
    def measurements(self) -> Measurements:
        return Measurements(elements=(Decimal("12.34"), Decimal("5.67"), Decimal("8.9")))

    def test_slice(self, measurements: Measurements) -> None:
        sliced = measurements.slice(Range.from_length(StartIndex.create(1), Length.create(2)))
        assert sliced.elements == (Decimal("5.67"), Decimal("8.9"))
        assert len(sliced) == 2

    def test_empty_slice(self, measurements: Measurements) -> None:
        sliced = measurements.slice(Range.from_length(StartIndex.create(2), Length.create(0)))
        assert len(sliced) == 0

    def test_slice_out_of_bounds(self, measurements: Measurements) -> None:
        with pytest.raises(DomainValidationError, match="exceeds 3 measurements"):
            measurements.slice(Range.from_length(StartIndex.create(2), Length.create(2)))

    def test_original_unchanged(self, measurements: Measurements) -> None:
        measurements.slice(Range.from_length(StartIndex.create(0), Length.create(1)))
        assert len(measurements) == 3
