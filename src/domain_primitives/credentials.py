"""
Credentials — учётные данные без утечки пароля

Password — single-read значение с маской PASSWORD_MASK. Случайный вывод
Credentials в лог (print, repr, JSON-дамп) показывает только маску
и не расходует единственное чтение пароля.
"""

from typing import Final

from pydantic import BaseModel, Field

from domain_primitives.primitive import DomainPrimitive
from domain_primitives.single_read import SingleReadValue


PASSWORD_MASK: Final[str] = "--(masked password)--"


class Username(DomainPrimitive):
    """Имя пользователя (непустая строка)."""

    value: str = Field(..., strict=True, min_length=1, description="Имя пользователя")


class Password(SingleReadValue[str]):
    """Пароль, читается один раз."""

    __slots__ = ()

    @classmethod
    def _mask(cls, value: str) -> str:
        return PASSWORD_MASK


class Credentials(BaseModel):
    """Пара имя пользователя / пароль."""

    username: Username = Field(..., description="Имя пользователя")
    password: Password = Field(..., description="Пароль (single-read)")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, username: str, password: str) -> "Credentials":
        """
        Создание из сырых строк.

        Raises:
            DomainValidationError: Если имя пользователя невалидно
        """
        return cls(username=Username.create(username), password=Password(password))

    def __str__(self) -> str:
        return f"Credentials(username={self.username}, password={self.password})"
