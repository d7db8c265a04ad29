"""
SingleReadValue — значение, которое можно прочитать ровно один раз

Применяется для секретов (пароли, номера карт): первое read() возвращает
значение и атомарно помечает обёртку как прочитанную, все следующие
read() падают с AlreadyConsumedError.

Проверка и установка флага выполняются под одним threading.Lock, поэтому
при конкурентных читателях успешным будет ровно одно чтение.

Отображение (str, repr, format, сериализация pydantic) выводит только маску,
не является чтением и не меняет флаг.

ОГРАНИЧЕНИЕ: после успешного read() вызывающий код держит сырое значение
у себя. Защитить эту копию обёртка уже не может.
"""

import logging
import threading
from typing import Any, Generic, TypeVar

from pydantic_core import core_schema

from domain_primitives.errors import AlreadyConsumedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Маска по умолчанию для наследников без собственного формата
DEFAULT_MASK = "--(masked)--"


class SingleReadValue(Generic[T]):
    """
    Обёртка, разрешающая одно успешное чтение.

    Наследники переопределяют _mask() для собственного формата маски.
    Маска вычисляется при создании, после чтения обёртка не хранит значение.
    """

    __slots__ = ("_value", "_masked", "_consumed", "_lock")

    def __init__(self, value: T):
        self._masked = self._mask(value)
        self._value = value
        self._consumed = False
        self._lock = threading.Lock()

    @classmethod
    def _mask(cls, value: T) -> str:
        return DEFAULT_MASK

    def read(self) -> T:
        """
        Единственное чтение значения.

        Returns:
            Исходное значение (только при первом вызове)

        Raises:
            AlreadyConsumedError: Если значение уже было прочитано
        """
        with self._lock:
            if not self._consumed:
                self._consumed = True
                value, self._value = self._value, None
                return value

        logger.warning("%s read rejected: value already consumed", type(self).__name__)
        raise AlreadyConsumedError(type(self).__name__)

    @property
    def consumed(self) -> bool:
        """Было ли значение уже прочитано (не является чтением)."""
        return self._consumed

    def masked(self) -> str:
        return self._masked

    def __str__(self) -> str:
        return self._masked

    def __repr__(self) -> str:
        return self._masked

    def __format__(self, format_spec: str) -> str:
        return format(self._masked, format_spec)

    # Клон обошёл бы единственное чтение
    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __reduce_ex__(self, protocol):
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        """
        Поле pydantic-модели: принимается только готовый экземпляр,
        при любом дампе (python/json) выводится маска.
        """
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.masked(),
                return_schema=core_schema.str_schema(),
                when_used="always",
            ),
        )
