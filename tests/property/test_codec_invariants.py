"""
Property-Based Tests for the numeral codec

Инварианты канонизации на всём int64 диапазоне и устойчивость
разбора к произвольному вводу.
"""

from hypothesis import example, given, settings
from hypothesis import strategies as st

from src.numerals import (
    INT64_MAX,
    INT64_MIN,
    NumeralError,
    RomanNumeral,
    format_numeral,
    is_strict_string,
    parse_numeral,
    try_parse_numeral,
)

int64s = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)
numeral_text = st.text(alphabet="IVXLCDMivxlcdm'-", max_size=24)


class TestCanonicalization:
    """format_numeral — биекция на int64, parse_numeral — её обратная."""

    @given(int64s)
    @settings(max_examples=500)
    @example(INT64_MIN)
    @example(INT64_MAX)
    @example(0)
    @example(-1)
    @example(4000)
    def test_round_trip(self, n):
        assert parse_numeral(format_numeral(n)) == n

    @given(int64s)
    def test_idempotence(self, n):
        canonical = format_numeral(n)
        assert format_numeral(parse_numeral(canonical)) == canonical

    @given(int64s)
    def test_canonical_form_uses_uppercase_alphabet(self, n):
        canonical = format_numeral(n)
        assert set(canonical) <= set("IVXLCDM'-")
        assert canonical.count("-") == (1 if n < 0 else 0)

    @given(int64s)
    def test_strict_string_iff_classical_positive(self, n):
        assert is_strict_string(format_numeral(n)) is (1 <= n <= 3999)

    @given(int64s, int64s)
    def test_ordering_matches_integers(self, a, b):
        left, right = RomanNumeral.from_integer(a), RomanNumeral.from_integer(b)
        assert (left < right) is (a < b)
        assert (left == right) is (a == b)


class TestPermissiveParsing:
    """Произвольный ввод из алфавита нотации: значение либо типизированная ошибка."""

    @given(numeral_text)
    @settings(max_examples=500)
    def test_parse_is_total_over_alphabet(self, text):
        result = try_parse_numeral(text)
        if result.ok:
            assert INT64_MIN <= result.value <= INT64_MAX
            canonical = RomanNumeral.from_integer(result.value).numeral
            assert parse_numeral(canonical) == result.value
        else:
            assert isinstance(result.error, NumeralError)

    @given(numeral_text)
    def test_case_insensitive(self, text):
        lower, upper = try_parse_numeral(text.lower()), try_parse_numeral(text.upper())
        assert lower.value == upper.value
        assert lower.kind == upper.kind
