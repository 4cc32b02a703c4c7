"""
PartCodec — кодирование одного part без vinculum

decode_part — permissive: любая последовательность валидных символов
интерпретируется через распространение знака справа налево.
encode_part — canonical: всегда классическая greedy subtractive форма.

ПРАВИЛО DECODE (справа налево, previous стартует с I и знаком +1):
    symbol == previous  → знак сохраняется
    symbol <  previous  → знак -1
    symbol >  previous  → знак +1

    "IIII" → 4, "IL" → 49, "VVVX" → -5 (-V-V-V+X), "VVX" → 0
"""

from src.numerals.constants import CLASSICAL_LIMIT, SIGNUM
from src.numerals.errors import InvalidSymbolError
from src.numerals.symbols import SUBTRACTIVE_TABLE, Symbol


def decode_part(text: str) -> int:
    """
    Permissive decode символов одного part.

    Ведущие '-' допускаются и каждый инвертирует накопленное значение.

    Args:
        text: Римские цифры без vinculum (регистр не важен)

    Returns:
        Значение part (может быть отрицательным для неканонических записей)

    Raises:
        InvalidSymbolError: Если встречен символ, не являющийся римской цифрой,
            или '-' не в начале part

    Examples:
        >>> decode_part("XIV")
        14
        >>> decode_part("iiii")
        4
        >>> decode_part("")
        0
    """
    body = text.lstrip(SIGNUM)
    negations = len(text) - len(body)
    offset = negations

    value = 0
    previous = Symbol.I
    sign = 1

    for index in range(len(body) - 1, -1, -1):
        char = body[index]
        if char == SIGNUM:
            raise InvalidSymbolError(text, char, offset + index)
        symbol = Symbol.from_char(char, text, offset + index)
        if symbol is not previous:
            sign = -1 if symbol < previous else 1
        value += symbol.weight * sign
        previous = symbol

    if negations % 2:
        value = -value
    return value


def encode_part(n: int, borrow: int = 0) -> str:
    """
    Canonical encode magnitude в классическую subtractive форму.

    Greedy: на каждом шаге берётся наибольший токен из SUBTRACTIVE_TABLE,
    вес которого не превышает остатка.

    Args:
        n: Magnitude в [0, 3999]; для групп под vinculum — в [0, 999]
        borrow: Единицы, снятые с magnitude до разбиения на группы
            (асимметрия INT64_MIN). Возвращаются на первом шаге greedy.

    Returns:
        Римская запись; "" для 0 (ноль на уровне значения кодирует vinculum)

    Raises:
        ValueError: Если n + borrow вне [0, 3999]

    Examples:
        >>> encode_part(1999)
        'MCMXCIX'
        >>> encode_part(807, borrow=1)
        'DCCCVIII'
    """
    remaining = n
    if remaining < 0 or remaining + borrow >= CLASSICAL_LIMIT:
        raise ValueError(f"Part magnitude out of range [0, 3999]: {n} (borrow={borrow})")

    tokens: list[str] = []
    while remaining + borrow > 0:
        for token, weight in SUBTRACTIVE_TABLE:
            if remaining + borrow >= weight:
                tokens.append(token)
                remaining = remaining + borrow - weight
                # borrow возвращается ровно один раз
                borrow = 0
                break

    return "".join(tokens)
