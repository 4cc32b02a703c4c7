"""
Contract Validation Module

Валидация JSON контрактов для RomanNumeral.
"""

from .validators import (
    ContractValidator,
    RomanNumeralValidator,
    SchemaLoader,
    validate_roman_numeral,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RomanNumeralValidator",
    # Functions
    "validate_roman_numeral",
]
