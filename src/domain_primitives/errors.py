"""
Ошибки доменных примитивов

Всего два вида ошибок на всю библиотеку:
- DomainValidationError — сырое значение не прошло проверку при создании
- AlreadyConsumedError — повторное чтение single-read значения

Ошибки всегда пробрасываются непосредственному вызывающему коду.
Автоматических повторов и внутреннего "проглатывания" нет.
"""

from typing import Any


class DomainValidationError(ValueError):
    """
    Сырое значение нарушает правило доменного примитива.

    Единственный способ восстановления — передать исправленное значение
    и создать примитив заново.
    """

    def __init__(self, primitive: str, constraint: str, raw: Any = None):
        """
        Args:
            primitive: Имя типа примитива (например, 'OrderNumber')
            constraint: Описание нарушенного правила
            raw: Отклонённое значение (None для секретов)
        """
        self.primitive = primitive
        self.constraint = constraint
        self.raw = raw
        super().__init__(f"Invalid {primitive}: {constraint}")


class AlreadyConsumedError(RuntimeError):
    """
    Single-read значение уже было прочитано.

    Повтор детерминированно упадёт снова. Правильное исправление на стороне
    вызывающего кода — прочитать один раз и хранить результат локально.
    """

    def __init__(self, primitive: str):
        self.primitive = primitive
        super().__init__(f"{primitive} was already consumed")
