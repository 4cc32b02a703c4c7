"""
Constants — параметры нотации и границы диапазонов

Единый источник констант для codec'а римских чисел:
- Границы signed 64-bit диапазона (value domain)
- Символ vinculum и максимальный уровень vinculum
- Границы part (base-1000 группы)
- Границы strict-диапазона классической нотации
"""

from typing import Final

# =============================================================================
# INT64 ДИАПАЗОН
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# VINCULUM
# =============================================================================

# Апостроф после part: умножение на 1000 за каждое повторение
VINCULUM: Final[str] = "'"

SIGNUM: Final[str] = "-"

# Множитель одного уровня vinculum
VINCULUM_BASE: Final[int] = 1000

# Максимальный уровень для int64 равен 6 (10^18). Sentinel на единицу выше,
# чтобы первый part не ограничивался сверху.
MAX_VINCULUM_LEVEL: Final[int] = 6
VINCULUM_LEVEL_SENTINEL: Final[int] = MAX_VINCULUM_LEVEL + 1


# =============================================================================
# PART / STRICT ДИАПАЗОНЫ
# =============================================================================

# Part под vinculum занимает ровно одну base-1000 группу
PART_MAX: Final[int] = 999

# Без vinculum кодируются magnitudes строго меньше этого порога
CLASSICAL_LIMIT: Final[int] = 4000

STRICT_MIN: Final[int] = 1
STRICT_MAX: Final[int] = 3999
