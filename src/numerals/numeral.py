"""
RomanNumeral — immutable value type поверх VinculumCodec

Immutable Pydantic модель: пара (value, numeral), где numeral всегда
каноническая форма value. Исходная строка при разборе не сохраняется:
RomanNumeral.from_string("IIII").numeral == "IV".

Арифметика (plus/minus) возвращает новый экземпляр; переполнение int64
заворачивается, как в нативной long-арифметике.
"""

import struct
from typing import Any, Dict, Union, overload

from pydantic import BaseModel, Field, model_validator

from src.numerals.constants import INT64_MAX, INT64_MIN, STRICT_MAX, STRICT_MIN
from src.numerals.contracts import validate_roman_numeral
from src.numerals.errors import NotStrictError, ParseResult
from src.numerals.strict import is_strict_value
from src.numerals.vinculum import (
    format_numeral,
    parse_numeral,
    try_parse_numeral,
    wrap_int64,
)


# =============================================================================
# ROMAN NUMERAL MODEL
# =============================================================================


class RomanNumeral(BaseModel):
    """
    Римское число как значение.

    Инвариант: numeral == format_numeral(value). Равенство и hash — по
    канонической строке, порядок — по value.
    """

    value: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="int64 значение")
    numeral: str = Field(..., min_length=1, description="Каноническая римская запись")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def derive_numeral(cls, data: Any) -> Any:
        """Недостающий numeral выводится из value."""
        if isinstance(data, dict) and "numeral" not in data:
            value = data.get("value")
            if isinstance(value, int) and not isinstance(value, bool):
                if INT64_MIN <= value <= INT64_MAX:
                    return {**data, "numeral": format_numeral(value)}
        return data

    @model_validator(mode="after")
    def check_canonical(self) -> "RomanNumeral":
        """numeral обязан быть канонической формой value."""
        canonical = format_numeral(self.value)
        if self.numeral != canonical:
            raise ValueError(
                f"numeral {self.numeral!r} is not the canonical form of "
                f"{self.value} ({canonical!r})"
            )
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_integer(cls, value: int) -> "RomanNumeral":
        """Экземпляр для int64 значения."""
        return cls(value=value, numeral=format_numeral(value))

    @classmethod
    def from_string(cls, text: str) -> "RomanNumeral":
        """
        Экземпляр по интерпретируемой (не обязательно strict) записи.

        Хранится каноническая форма, а не text.

        Raises:
            InvalidSymbolError, InvalidVinculumError, InvalidVinculumOrderError
        """
        return cls.from_integer(parse_numeral(text))

    @classmethod
    def from_strict_string(cls, text: str) -> "RomanNumeral":
        """
        Экземпляр только для strict канонической записи.

        Регистр не важен: "xiv" допустим, "IIII", "VV", "-V", "X'" — нет.

        Raises:
            NotStrictError: Значение вне [1, 3999] или text не каноничен
            InvalidSymbolError, InvalidVinculumError, InvalidVinculumOrderError
        """
        numeral = cls.from_string(text)
        if not numeral.is_strict() or numeral.uppercase() != text.upper():
            raise NotStrictError(text, numeral.numeral)
        return numeral

    @classmethod
    def try_from_string(cls, text: str) -> ParseResult:
        """
        from_string без исключений.

        Returns:
            ParseResult, где value — int значение при успехе
        """
        return try_parse_numeral(text)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "RomanNumeral":
        """
        Экземпляр из JSON payload после проверки контракта.

        Raises:
            jsonschema.ValidationError: Payload не соответствует схеме
            pydantic.ValidationError: numeral не является канонической формой value
        """
        validate_roman_numeral(data)
        return cls.model_validate(data)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-совместимый dict {"value": ..., "numeral": ...}."""
        return self.model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_strict(self) -> bool:
        """True, если value в [1, 3999] (независимо от исходной записи)."""
        return is_strict_value(self.value)

    def length(self) -> int:
        """Длина канонической записи."""
        return len(self.numeral)

    def __len__(self) -> int:
        return self.length()

    def uppercase(self) -> str:
        return self.numeral

    def lowercase(self) -> str:
        return self.numeral.lower()

    def __str__(self) -> str:
        return self.uppercase()

    def __repr__(self) -> str:
        return f"RomanNumeral({self.numeral!r}, value={self.value})"

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus(self, other: "RomanNumeral") -> "RomanNumeral":
        """Сумма как новый экземпляр (int64 wrap при переполнении)."""
        return RomanNumeral.from_integer(wrap_int64(self.value + other.value))

    def minus(self, other: "RomanNumeral") -> "RomanNumeral":
        """Разность как новый экземпляр (int64 wrap при переполнении)."""
        return RomanNumeral.from_integer(wrap_int64(self.value - other.value))

    def __add__(self, other: object) -> "RomanNumeral":
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> "RomanNumeral":
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> "RomanNumeral":
        return RomanNumeral.from_integer(wrap_int64(-self.value))

    def __abs__(self) -> "RomanNumeral":
        return RomanNumeral.from_integer(wrap_int64(abs(self.value)))

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare_to(self, other: "RomanNumeral") -> int:
        """-1, 0 или 1 по value."""
        return (self.value > other.value) - (self.value < other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.numeral == other.numeral

    def __hash__(self) -> int:
        return hash(self.numeral)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value >= other.value

    # -------------------------------------------------------------------------
    # Numeric coercions
    # -------------------------------------------------------------------------

    def to_int32(self) -> int:
        """Младшие 32 бита value как signed int (narrowing)."""
        return (self.value + 2**31) % 2**32 - 2**31

    def to_int64(self) -> int:
        return self.value

    def to_float(self) -> float:
        """value, округлённое до IEEE 754 single precision."""
        return struct.unpack("f", struct.pack("f", float(self.value)))[0]

    def to_double(self) -> float:
        return float(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __float__(self) -> float:
        return self.to_double()


# =============================================================================
# BINARY FUNCTIONS
# =============================================================================


@overload
def numeral_sum(a: RomanNumeral, b: RomanNumeral) -> RomanNumeral: ...


@overload
def numeral_sum(a: str, b: str) -> str: ...


def numeral_sum(
    a: Union[RomanNumeral, str], b: Union[RomanNumeral, str]
) -> Union[RomanNumeral, str]:
    """
    Сумма двух значений.

    Для двух строк возвращается каноническая строка суммы
    (ошибки разбора пробрасываются), для двух RomanNumeral — RomanNumeral.

    Examples:
        >>> numeral_sum("IIII", "I")
        'V'
    """
    if isinstance(a, str) and isinstance(b, str):
        return RomanNumeral.from_string(a).plus(RomanNumeral.from_string(b)).uppercase()
    if isinstance(a, RomanNumeral) and isinstance(b, RomanNumeral):
        return a.plus(b)
    raise TypeError(
        f"numeral_sum expects two RomanNumeral or two str, got "
        f"{type(a).__name__} and {type(b).__name__}"
    )


def numeral_max(a: RomanNumeral, b: RomanNumeral) -> RomanNumeral:
    """Большее из двух; при равенстве — a."""
    return a if a.value >= b.value else b


def numeral_min(a: RomanNumeral, b: RomanNumeral) -> RomanNumeral:
    """Меньшее из двух; при равенстве — a."""
    return a if a.value <= b.value else b


# =============================================================================
# CONSTANTS
# =============================================================================

MAX_VALUE: RomanNumeral = RomanNumeral.from_integer(INT64_MAX)
MIN_VALUE: RomanNumeral = RomanNumeral.from_integer(INT64_MIN)
ZERO: RomanNumeral = RomanNumeral.from_integer(0)
STRICT_MAX_VALUE: RomanNumeral = RomanNumeral.from_integer(STRICT_MAX)
STRICT_MIN_VALUE: RomanNumeral = RomanNumeral.from_integer(STRICT_MIN)
