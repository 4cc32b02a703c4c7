"""
Roman numerals с vinculum-нотацией для signed 64-bit диапазона.

Codec между int64 и расширенной римской записью:
- format_numeral / parse_numeral — каноническое кодирование и permissive разбор
- is_strict_string — классическая strict-грамматика
- RomanNumeral — immutable value type
"""

# Constants
from src.numerals.constants import (
    INT64_MAX,
    INT64_MIN,
    MAX_VINCULUM_LEVEL,
    SIGNUM,
    STRICT_MAX,
    STRICT_MIN,
    VINCULUM,
)

# Errors
from src.numerals.errors import (
    InvalidSymbolError,
    InvalidVinculumError,
    InvalidVinculumOrderError,
    NotStrictError,
    NumeralError,
    NumeralErrorKind,
    NumeralRangeError,
    ParseResult,
)

# Symbols & part codec
from src.numerals.symbols import SUBTRACTIVE_TABLE, Symbol
from src.numerals.part_codec import decode_part, encode_part

# Vinculum codec
from src.numerals.vinculum import (
    format_numeral,
    parse_numeral,
    try_parse_numeral,
    wrap_int64,
)

# Strict grammar
from src.numerals.strict import (
    is_strict_string,
    is_strict_tier,
    is_strict_value,
    split_tiers,
)

# Value type
from src.numerals.numeral import (
    MAX_VALUE,
    MIN_VALUE,
    STRICT_MAX_VALUE,
    STRICT_MIN_VALUE,
    ZERO,
    RomanNumeral,
    numeral_max,
    numeral_min,
    numeral_sum,
)

__all__ = [
    # Constants
    "INT64_MAX",
    "INT64_MIN",
    "MAX_VINCULUM_LEVEL",
    "SIGNUM",
    "STRICT_MAX",
    "STRICT_MIN",
    "VINCULUM",
    # Errors
    "NumeralError",
    "NumeralErrorKind",
    "NumeralRangeError",
    "InvalidSymbolError",
    "InvalidVinculumError",
    "InvalidVinculumOrderError",
    "NotStrictError",
    "ParseResult",
    # Symbols & part codec
    "Symbol",
    "SUBTRACTIVE_TABLE",
    "decode_part",
    "encode_part",
    # Vinculum codec
    "format_numeral",
    "parse_numeral",
    "try_parse_numeral",
    "wrap_int64",
    # Strict grammar
    "is_strict_string",
    "is_strict_tier",
    "is_strict_value",
    "split_tiers",
    # Value type
    "RomanNumeral",
    "numeral_sum",
    "numeral_max",
    "numeral_min",
    "MAX_VALUE",
    "MIN_VALUE",
    "ZERO",
    "STRICT_MAX_VALUE",
    "STRICT_MIN_VALUE",
]
