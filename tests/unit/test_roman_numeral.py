"""
Тесты для RomanNumeral — immutable value type

Проверяет:
1. Создание из int, из permissive строки и из strict строки
2. Каноническая форма хранится всегда (исходная строка отбрасывается)
3. Immutability (frozen=True), инвариант numeral == format_numeral(value)
4. Арифметику без мутации, сравнение, hash, числовые конверсии
5. Константы и бинарные функции sum/max/min
"""

import pytest
from pydantic import ValidationError

from src.numerals import (
    INT64_MAX,
    INT64_MIN,
    MAX_VALUE,
    MIN_VALUE,
    STRICT_MAX_VALUE,
    STRICT_MIN_VALUE,
    ZERO,
    InvalidSymbolError,
    InvalidVinculumError,
    InvalidVinculumOrderError,
    NotStrictError,
    NumeralErrorKind,
    RomanNumeral,
    numeral_max,
    numeral_min,
    numeral_sum,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def four() -> RomanNumeral:
    """4, созданное из неканонической записи"""
    return RomanNumeral.from_string("IIII")


@pytest.fixture
def ten() -> RomanNumeral:
    return RomanNumeral.from_integer(10)


# =============================================================================
# CONSTRUCTION TESTS
# =============================================================================


class TestConstruction:
    """Тесты создания RomanNumeral"""

    def test_from_integer(self):
        numeral = RomanNumeral.from_integer(1999)
        assert numeral.value == 1999
        assert numeral.numeral == "MCMXCIX"

    def test_from_string_keeps_canonical(self, four: RomanNumeral):
        """Исходная строка не сохраняется"""
        assert four.value == 4
        assert four.numeral == "IV"

    @pytest.mark.parametrize(
        "text,value,canonical",
        [
            ("I'I", 1001, "MI"),
            ("VVVX", -5, "-V"),
            ("IVVX", -1, "-I"),
            ("MMMM", 4000, "IV'"),
            ("", 0, "'"),
            ("VVX", 0, "'"),
            ("xiv", 14, "XIV"),
        ],
    )
    def test_from_string_canonicalizes(self, text, value, canonical):
        numeral = RomanNumeral.from_string(text)
        assert numeral.value == value
        assert numeral.numeral == canonical

    @pytest.mark.parametrize(
        "text,error",
        [
            ("Y'", InvalidSymbolError),
            ("X'V'", InvalidVinculumOrderError),
            ("X'V''", InvalidVinculumOrderError),
            ("MMMCMXCIX'", InvalidVinculumError),
        ],
    )
    def test_from_string_errors(self, text, error):
        with pytest.raises(error):
            RomanNumeral.from_string(text)

    @pytest.mark.parametrize("text", ["XIV", "xiv", "MMMCMXCIX", "I"])
    def test_from_strict_string(self, text):
        numeral = RomanNumeral.from_strict_string(text)
        assert numeral.numeral == text.upper()

    @pytest.mark.parametrize("text", ["VV", "-V", "X'", "IIII", "'", "IV'"])
    def test_from_strict_string_rejects(self, text):
        with pytest.raises(NotStrictError) as exc_info:
            RomanNumeral.from_strict_string(text)
        assert exc_info.value.kind is NumeralErrorKind.NOT_STRICT

    def test_from_strict_string_invalid_symbol(self):
        """Ошибка разбора приоритетнее проверки strict"""
        with pytest.raises(InvalidSymbolError):
            RomanNumeral.from_strict_string("Y'")

    def test_try_from_string(self):
        assert RomanNumeral.try_from_string("IV'").value == 4000
        result = RomanNumeral.try_from_string("X'V'")
        assert result.kind is NumeralErrorKind.INVALID_VINCULUM_ORDER

    def test_direct_construction_derives_numeral(self):
        assert RomanNumeral(value=4).numeral == "IV"

    def test_direct_construction_rejects_non_canonical(self):
        with pytest.raises(ValidationError):
            RomanNumeral(value=4, numeral="IIII")

    @pytest.mark.parametrize("value", [INT64_MAX + 1, INT64_MIN - 1])
    def test_direct_construction_rejects_out_of_range(self, value):
        with pytest.raises(ValidationError):
            RomanNumeral(value=value)

    def test_immutable(self, four: RomanNumeral):
        """RomanNumeral должен быть immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            four.value = 5  # type: ignore


# =============================================================================
# QUERY TESTS
# =============================================================================


class TestQueries:
    """Тесты strict-признака, длины и строковых представлений"""

    def test_is_strict_value_level(self, four: RomanNumeral):
        """Strict по значению, даже если исходная строка неканонична"""
        assert four.is_strict()
        assert RomanNumeral.from_string("VX").is_strict()
        assert RomanNumeral.from_string("V").is_strict()

    @pytest.mark.parametrize("text", ["-V", "'", "IV'"])
    def test_not_strict(self, text):
        assert not RomanNumeral.from_string(text).is_strict()

    def test_length(self):
        assert RomanNumeral.from_integer(1).length() == 1
        assert RomanNumeral.from_string("I").length() == 1
        assert RomanNumeral.from_string("IIIIV").length() == 1
        assert len(RomanNumeral.from_integer(3999999)) == len("III''CMXCIX'CMXCIX")

    def test_case_views(self):
        numeral = RomanNumeral.from_integer(4001)
        assert numeral.uppercase() == "IV'I"
        assert numeral.lowercase() == "iv'i"
        assert str(numeral) == "IV'I"
        assert "4001" in repr(numeral)

    def test_zero(self):
        assert str(ZERO) == "'"
        assert ZERO.uppercase() == "'"
        assert ZERO.lowercase() == "'"
        assert ZERO == RomanNumeral.from_integer(0)
        assert ZERO == RomanNumeral.from_string("'")
        assert ZERO == RomanNumeral.from_string("")
        assert ZERO == RomanNumeral.from_string("VVX")


# =============================================================================
# ARITHMETIC TESTS
# =============================================================================


class TestArithmetic:
    """plus/minus возвращают новый экземпляр"""

    def test_plus(self):
        one = RomanNumeral.from_string("I")
        assert one.plus(one) == RomanNumeral.from_string("II")

    def test_plus_does_not_mutate(self, four: RomanNumeral, ten: RomanNumeral):
        total = four.plus(ten)
        assert total.value == 14
        assert four.value == 4
        assert ten.value == 10

    def test_minus(self, four: RomanNumeral, ten: RomanNumeral):
        assert four.minus(ten) == RomanNumeral.from_integer(-6)
        assert ten.minus(ten) == ZERO

    def test_chaining(self, four: RomanNumeral, ten: RomanNumeral):
        assert four.plus(ten).minus(four).plus(ten).numeral == "XX"

    def test_operators(self, four: RomanNumeral, ten: RomanNumeral):
        assert (four + ten).value == 14
        assert (four - ten).value == -6
        assert (-four).numeral == "-IV"
        assert abs(RomanNumeral.from_integer(-4000)).numeral == "IV'"

    def test_operators_reject_other_types(self, four: RomanNumeral):
        with pytest.raises(TypeError):
            four + 1  # type: ignore

    def test_int64_wrap(self):
        one = RomanNumeral.from_integer(1)
        assert MAX_VALUE.plus(one) == MIN_VALUE
        assert MIN_VALUE.minus(one) == MAX_VALUE
        assert -MIN_VALUE == MIN_VALUE


# =============================================================================
# COMPARISON TESTS
# =============================================================================


class TestComparison:
    """Равенство по канонической строке, порядок по value"""

    def test_equality(self, four: RomanNumeral):
        assert four == RomanNumeral.from_integer(4)
        assert four == RomanNumeral.from_string("IV")
        assert four != RomanNumeral.from_integer(5)
        assert four != "IV"

    def test_hash(self, four: RomanNumeral):
        assert hash(four) == hash(RomanNumeral.from_integer(4))
        assert len({four, RomanNumeral.from_string("IV"), RomanNumeral.from_integer(5)}) == 2

    def test_compare_to(self, four: RomanNumeral, ten: RomanNumeral):
        assert four.compare_to(ten) == -1
        assert ten.compare_to(four) == 1
        assert four.compare_to(RomanNumeral.from_integer(4)) == 0

    def test_ordering(self, four: RomanNumeral, ten: RomanNumeral):
        assert four < ten
        assert four <= ten
        assert ten > four
        assert ten >= four
        assert MIN_VALUE < ZERO < MAX_VALUE
        values = [RomanNumeral.from_integer(n) for n in (5000, -3, 0, 1999)]
        assert [n.value for n in sorted(values)] == [-3, 0, 1999, 5000]


# =============================================================================
# COERCION TESTS
# =============================================================================


class TestCoercions:
    def test_int64(self):
        assert MAX_VALUE.to_int64() == INT64_MAX
        assert int(MIN_VALUE) == INT64_MIN

    def test_int32_truncation(self):
        assert RomanNumeral.from_integer(2**31).to_int32() == -(2**31)
        assert RomanNumeral.from_integer(-1).to_int32() == -1
        assert RomanNumeral.from_integer(4000).to_int32() == 4000
        assert MAX_VALUE.to_int32() == -1

    def test_float(self):
        assert RomanNumeral.from_integer(16777217).to_float() == 16777216.0
        assert RomanNumeral.from_integer(16777217).to_double() == 16777217.0
        assert float(RomanNumeral.from_integer(-5)) == -5.0

    def test_index(self, four: RomanNumeral):
        assert [0, 1, 2, 3, 4][four] == 4


# =============================================================================
# BINARY FUNCTIONS & CONSTANTS
# =============================================================================


class TestBinaryFunctions:
    def test_sum_numerals(self, four: RomanNumeral, ten: RomanNumeral):
        assert numeral_sum(four, ten) == RomanNumeral.from_integer(14)

    def test_sum_strings(self):
        assert numeral_sum("I", "I") == "II"
        assert numeral_sum("IIII", "I") == "V"
        assert numeral_sum("MMM", "M") == "IV'"

    def test_sum_strings_propagates_errors(self):
        with pytest.raises(InvalidSymbolError):
            numeral_sum("I", "Z")

    def test_sum_mixed_types(self, four: RomanNumeral):
        with pytest.raises(TypeError):
            numeral_sum(four, "I")  # type: ignore

    def test_max_min(self, four: RomanNumeral, ten: RomanNumeral):
        assert numeral_max(four, ten) is ten
        assert numeral_min(four, ten) is four

    def test_ties_resolve_to_first(self, four: RomanNumeral):
        other = RomanNumeral.from_integer(4)
        assert numeral_max(four, other) is four
        assert numeral_min(other, four) is other


class TestConstants:
    def test_values(self):
        assert MAX_VALUE.value == INT64_MAX
        assert MIN_VALUE.value == INT64_MIN
        assert ZERO.value == 0
        assert STRICT_MAX_VALUE.numeral == "MMMCMXCIX"
        assert STRICT_MIN_VALUE.numeral == "I"

    def test_strict_bounds(self):
        assert STRICT_MAX_VALUE.is_strict()
        assert STRICT_MIN_VALUE.is_strict()
        assert not STRICT_MAX_VALUE.plus(STRICT_MIN_VALUE).is_strict()
        assert not STRICT_MIN_VALUE.minus(STRICT_MIN_VALUE).is_strict()
