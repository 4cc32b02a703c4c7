"""
Strict — классическая грамматика римских чисел

Строка strict, если каждый из разрядов (тысячи, сотни, десятки, единицы)
записан одним из канонических написаний цифры 0-9:

    тысячи:   M{0,3}
    сотни:    CM | CD | D?C{0,3}
    десятки:  XC | XL | L?X{0,3}
    единицы:  IX | IV | V?I{0,3}

Разряды выделяются по классам символов, затем каждый проверяется
независимо. Знак и vinculum strict-запись не допускают.
"""

from typing import Final, Optional

from src.numerals.constants import STRICT_MAX, STRICT_MIN
from src.numerals.part_codec import encode_part

# (scale, символы разряда) от старшего к младшему
_TIERS: Final[tuple[tuple[int, frozenset[str]], ...]] = (
    (1000, frozenset("M")),
    (100, frozenset("CDM")),
    (10, frozenset("XLC")),
    (1, frozenset("IVX")),
)

# Допустимые написания каждого разряда: канонические формы цифр 0..9
_TIER_SPELLINGS: Final[tuple[frozenset[str], ...]] = tuple(
    frozenset(encode_part(digit * scale) for digit in range(10 if scale < 1000 else 4))
    for scale, _ in _TIERS
)


def split_tiers(text: str) -> Optional[tuple[str, str, str, str]]:
    """
    Разбиение строки на серии символов по разрядам.

    Каждый разряд забирает максимальную серию своих символов. Если после
    единиц что-то осталось, строка не раскладывается по разрядам.

    Returns:
        (thousands, hundreds, tens, units) или None

    Examples:
        >>> split_tiers("MCMXCIX")
        ('M', 'CM', 'XC', 'IX')
        >>> split_tiers("XIV")
        ('', '', 'X', 'IV')
        >>> split_tiers("IM") is None
        True
    """
    position = 0
    tiers: list[str] = []
    for _, symbols in _TIERS:
        start = position
        while position < len(text) and text[position] in symbols:
            position += 1
        tiers.append(text[start:position])

    if position != len(text):
        return None
    return tiers[0], tiers[1], tiers[2], tiers[3]


def is_strict_tier(tier: str, scale: int) -> bool:
    """Является ли tier каноническим написанием цифры разряда scale."""
    for (tier_scale, _), spellings in zip(_TIERS, _TIER_SPELLINGS):
        if tier_scale == scale:
            return tier in spellings
    raise ValueError(f"Unknown tier scale: {scale}")


def is_strict_string(text: Optional[str]) -> bool:
    """
    Соответствует ли строка классической strict-грамматике.

    Регистр значим: допускаются только заглавные буквы.

    Args:
        text: Проверяемая строка (None допустим)

    Returns:
        False для None, пустой строки, знака, vinculum и любых
        неканонических серий ("IIII", "MMMM", "VX")

    Examples:
        >>> is_strict_string("IV")
        True
        >>> is_strict_string("IIII")
        False
        >>> is_strict_string("IV'")
        False
    """
    if not text:
        return False

    tiers = split_tiers(text)
    if tiers is None:
        return False

    return all(
        tier in spellings for tier, spellings in zip(tiers, _TIER_SPELLINGS)
    )


def is_strict_value(value: int) -> bool:
    """Лежит ли значение в strict-диапазоне [1, 3999]."""
    return STRICT_MIN <= value <= STRICT_MAX
