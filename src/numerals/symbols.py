"""
Symbols — таблица римских цифр

Семь базовых символов и их веса. Листовая зависимость всех остальных
модулей codec'а.
"""

from enum import Enum
from typing import Final

from src.numerals.errors import InvalidSymbolError


class Symbol(Enum):
    """Римская цифра; порядок членов совпадает с порядком по весу."""

    I = 1
    V = 5
    X = 10
    L = 50
    C = 100
    D = 500
    M = 1000

    @property
    def weight(self) -> int:
        return self.value

    @classmethod
    def from_char(cls, char: str, text: str = "", position: int = 0) -> "Symbol":
        """
        Case-insensitive lookup символа.

        Args:
            char: Один символ
            text: Исходная строка (для сообщения об ошибке)
            position: Позиция символа в исходной строке

        Raises:
            InvalidSymbolError: Если символ не является римской цифрой
        """
        symbol = _BY_CHAR.get(char.upper()) if len(char) == 1 else None
        if symbol is None:
            raise InvalidSymbolError(text or char, char, position)
        return symbol

    def __lt__(self, other: "Symbol") -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.weight < other.weight


_BY_CHAR: Final[dict[str, Symbol]] = {s.name: s for s in Symbol}


# Канонические токены для greedy encode, по убыванию веса
SUBTRACTIVE_TABLE: Final[tuple[tuple[str, int], ...]] = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)
