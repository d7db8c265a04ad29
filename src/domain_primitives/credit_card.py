"""
CreditCardNumber — номер карты, читается один раз

При отображении видны только последние CREDIT_CARD_VISIBLE_DIGITS цифр:
5555555555555555 -> 'xxxx-xxxx-xxxx-5555'.

Принимается только int. Строка или float отклоняются при создании
DomainValidationError, отклонённое значение в ошибку не попадает.
"""

from typing import Final

from domain_primitives.errors import DomainValidationError
from domain_primitives.single_read import SingleReadValue


CREDIT_CARD_VISIBLE_DIGITS: Final[int] = 4


class CreditCardNumber(SingleReadValue[int]):
    """Номер кредитной карты с маской последних цифр."""

    __slots__ = ()

    @classmethod
    def _mask(cls, value: int) -> str:
        if not isinstance(value, int) or isinstance(value, bool):
            raise DomainValidationError(
                cls.__name__, f"credit card number must be an int, got {type(value).__name__}"
            )
        last_digits = abs(value) % 10**CREDIT_CARD_VISIBLE_DIGITS
        return f"xxxx-xxxx-xxxx-{last_digits:0{CREDIT_CARD_VISIBLE_DIGITS}d}"
