"""
Errors — типизированная таксономия ошибок codec'а

Каждая ошибка разбора несёт NumeralErrorKind, чтобы вызывающий код мог
ветвиться по виду ошибки, а не по тексту сообщения. Для кода, которому
исключения не подходят, есть ParseResult (см. try_parse_numeral).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# ENUMS
# =============================================================================


class NumeralErrorKind(str, Enum):
    """Вид ошибки разбора"""

    INVALID_SYMBOL = "invalid_symbol"
    INVALID_VINCULUM = "invalid_vinculum"
    INVALID_VINCULUM_ORDER = "invalid_vinculum_order"
    NOT_STRICT = "not_strict"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumeralError(ValueError):
    """
    Базовая ошибка разбора римского числа.

    Наследует ValueError: невалидный текст — это невалидное значение аргумента.
    """

    kind: NumeralErrorKind

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class InvalidSymbolError(NumeralError):
    """Символ не является римской цифрой (и не ведущим '-')."""

    kind = NumeralErrorKind.INVALID_SYMBOL

    def __init__(self, text: str, symbol: str, position: int) -> None:
        super().__init__(
            f"Invalid roman numeral symbol {symbol!r} at position {position} in {text!r}",
            text,
        )
        self.symbol = symbol
        self.position = position


class InvalidVinculumError(NumeralError):
    """Part перед vinculum не помещается в одну base-1000 группу (> 999)."""

    kind = NumeralErrorKind.INVALID_VINCULUM

    def __init__(self, text: str, part: str, part_value: int) -> None:
        super().__init__(
            f"Vinculum part {part!r} represents {part_value}, "
            f"parts in vinculum notation cannot exceed 999",
            text,
        )
        self.part = part
        self.part_value = part_value


class InvalidVinculumOrderError(NumeralError):
    """Уровни vinculum не убывают строго слева направо."""

    kind = NumeralErrorKind.INVALID_VINCULUM_ORDER

    def __init__(self, text: str, level: int, previous_level: int) -> None:
        super().__init__(
            f"Incorrect use of vinculum in {text!r}: level {level} "
            f"follows level {previous_level}",
            text,
        )
        self.level = level
        self.previous_level = previous_level


class NotStrictError(NumeralError):
    """Текст интерпретируем, но не является strict каноническим написанием."""

    kind = NumeralErrorKind.NOT_STRICT

    def __init__(self, text: str, canonical: str) -> None:
        super().__init__(
            f"{text!r} is not in strict roman numeral notation "
            f"(canonical form: {canonical!r})",
            text,
        )
        self.canonical = canonical


class NumeralRangeError(ValueError):
    """Целое вне signed 64-bit диапазона."""

    pass


# =============================================================================
# RESULT TYPE
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """
    Результат разбора без исключений.

    Ровно одно из полей заполнено: value при успехе, error при ошибке.
    """

    value: Optional[int] = None
    error: Optional[NumeralError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[NumeralErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> int:
        """Значение либо повторный raise сохранённой ошибки."""
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value
