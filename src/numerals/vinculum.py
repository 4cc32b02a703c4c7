"""
VinculumCodec — полный signed 64-bit диапазон через vinculum-нотацию

Magnitude разбивается на base-1000 группы (parts). Каждый ненулевой part
кодируется классической формой и получает суффикс из апострофов: число
апострофов равно числу групп ниже него (уровень vinculum).

    4000        → IV'
    10200       → X'CC
    3999999     → III''CMXCIX'CMXCIX
    0           → '            (0 x 1000 + 0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. parse_numeral(format_numeral(n)) == n для любого int64 n
2. format_numeral(n) единственна для каждого n (каноническая форма)
3. Уровни vinculum при разборе строго убывают слева направо
4. Part под vinculum не превышает 999
"""

import logging

from src.numerals.constants import (
    CLASSICAL_LIMIT,
    INT64_MAX,
    INT64_MIN,
    PART_MAX,
    SIGNUM,
    VINCULUM,
    VINCULUM_BASE,
    VINCULUM_LEVEL_SENTINEL,
)
from src.numerals.errors import (
    InvalidSymbolError,
    InvalidVinculumError,
    InvalidVinculumOrderError,
    NumeralError,
    NumeralRangeError,
    ParseResult,
)
from src.numerals.part_codec import decode_part, encode_part

logger = logging.getLogger(__name__)


# =============================================================================
# INT64 HELPERS
# =============================================================================


def check_int64(n: int) -> int:
    """
    Проверка, что n — целое в signed 64-bit диапазоне.

    Raises:
        TypeError: Если n не int
        NumeralRangeError: Если n вне [INT64_MIN, INT64_MAX]
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Expected int, got {type(n).__name__}")
    if n < INT64_MIN or n > INT64_MAX:
        raise NumeralRangeError(f"Value {n} outside signed 64-bit range")
    return n


def wrap_int64(n: int) -> int:
    """
    Two's-complement сужение до int64 (как нативная long-арифметика).

    Examples:
        >>> wrap_int64(2**63)
        -9223372036854775808
        >>> wrap_int64(-1)
        -1
    """
    return (n - INT64_MIN) % 2**64 + INT64_MIN


def _split_groups(magnitude: int) -> list[int]:
    """Base-1000 группы, старшая первой ("1234567" → [1, 234, 567])."""
    digits = str(magnitude)
    digits = "0" * (-len(digits) % 3) + digits
    return [int(digits[i:i + 3]) for i in range(0, len(digits), 3)]


# =============================================================================
# FORMAT
# =============================================================================


def format_numeral(n: int) -> str:
    """
    Каноническая римская запись int64 значения.

    Тотальная функция на signed 64-bit диапазоне.

    Args:
        n: Целое в [INT64_MIN, INT64_MAX]

    Returns:
        Каноническая строка (uppercase); "'" для нуля

    Raises:
        NumeralRangeError: Если n вне int64

    Examples:
        >>> format_numeral(1999)
        'MCMXCIX'
        >>> format_numeral(-4000)
        "-IV'"
        >>> format_numeral(0)
        "'"
    """
    check_int64(n)
    if n == 0:
        return VINCULUM

    signum = SIGNUM if n < 0 else ""

    # abs(INT64_MIN) не помещается в int64: кодируем abs(n + 1),
    # единица возвращается в младшей ненулевой группе
    borrow = 0
    if n == INT64_MIN:
        borrow = 1
        n += borrow
    magnitude = abs(n)

    if magnitude < CLASSICAL_LIMIT:
        return signum + encode_part(magnitude, borrow)

    groups = _split_groups(magnitude)
    least_significant = max(i for i, group in enumerate(groups) if group)

    parts: list[str] = []
    for index, group in enumerate(groups):
        if group == 0:
            continue
        level = len(groups) - index - 1
        group_borrow = borrow if index == least_significant else 0
        parts.append(encode_part(group, group_borrow) + VINCULUM * level)

    return signum + "".join(parts)


# =============================================================================
# PARSE
# =============================================================================


def _decode_segment(text: str, start: int, end: int) -> int:
    try:
        return decode_part(text[start:end])
    except InvalidSymbolError as e:
        raise InvalidSymbolError(text, e.symbol, start + e.position) from None


def parse_numeral(text: str) -> int:
    """
    Значение римской записи (permissive, с vinculum).

    Алгоритм:
    1. Каждый ведущий '-' инвертирует знак ("--V" == "V")
    2. Пока есть vinculum: part до первого апострофа декодируется
       (должен быть <= 999), длина серии апострофов — уровень,
       |part| * 1000^level прибавляется к сумме
    3. Остаток без vinculum декодируется и прибавляется как есть
    4. Применяется знак; результат сужается до int64

    Args:
        text: Римская запись (регистр не важен)

    Returns:
        int64 значение; 0 для пустой строки

    Raises:
        InvalidSymbolError: Неизвестный символ
        InvalidVinculumError: Part под vinculum > 999
        InvalidVinculumOrderError: Уровни vinculum не убывают строго

    Examples:
        >>> parse_numeral("IIII")
        4
        >>> parse_numeral("X'CC")
        10200
        >>> parse_numeral("-IV'I")
        -4001
    """
    position = 0
    sign = 1
    while text.startswith(SIGNUM, position):
        position += 1
        sign = -sign

    total = 0
    previous_level = VINCULUM_LEVEL_SENTINEL

    marker = text.find(VINCULUM, position)
    while marker != -1:
        part_value = _decode_segment(text, position, marker)
        if part_value > PART_MAX:
            logger.debug("Vinculum part too large in %r: %d", text, part_value)
            raise InvalidVinculumError(text, text[position:marker], part_value)

        level = 0
        position = marker
        while text.startswith(VINCULUM, position):
            level += 1
            position += 1

        if level >= previous_level:
            logger.debug("Vinculum order violated in %r: %d after %d", text, level, previous_level)
            raise InvalidVinculumOrderError(text, level, previous_level)
        previous_level = level

        total += abs(part_value * VINCULUM_BASE**level)
        marker = text.find(VINCULUM, position)

    if position < len(text):
        total += _decode_segment(text, position, len(text))

    return wrap_int64(sign * total)


def try_parse_numeral(text: str) -> ParseResult:
    """
    parse_numeral без исключений.

    Returns:
        ParseResult(value=...) при успехе, ParseResult(error=...) иначе;
        вид ошибки доступен через result.kind
    """
    try:
        return ParseResult(value=parse_numeral(text))
    except NumeralError as e:
        logger.debug("Rejected numeral %r: %s", text, e)
        return ParseResult(error=e)
