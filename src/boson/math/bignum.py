"""
BigNumber — Разбор больших беззнаковых целых

Поля контрактов типа uint256 не помещаются в float без потери точности,
поэтому внутри сущностей они хранятся как десятичные строки.

Модуль содержит:
- Тотальный (никогда не бросающий исключений) разбор значения в int
- Нормализацию значения из wire struct в каноническую десятичную строку

ИНВАРИАНТЫ:
1. parse_big_uint никогда не бросает исключений, результат всегда BigNumberParse
2. Каноническая форма — только ASCII цифры 0-9, без знака, пробелов и префиксов
3. Строки длиннее MAX_DECIMAL_DIGITS цифр отклоняются (ok=False), а не бросают ValueError
"""

import operator
import re
from dataclasses import dataclass
from typing import Final, Optional


# =============================================================================
# CONSTANTS
# =============================================================================

# Только ASCII цифры: str.isdigit() принимает также "٣" и "²"
DECIMAL_UINT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

# Предел преобразования int <-> str в CPython (sys.int_info.default_max_str_digits)
MAX_DECIMAL_DIGITS: Final[int] = 4300
_DECIMAL_LIMIT: Final[int] = 10**MAX_DECIMAL_DIGITS


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class BigNumberParse:
    """Результат разбора большого целого."""

    ok: bool
    value: Optional[int]
    reason: str


# =============================================================================
# PARSING
# =============================================================================


def parse_big_uint(value: object) -> BigNumberParse:
    """
    Разбор значения как беззнакового целого произвольной точности.

    Принимает:
    - str из ASCII цифр ("0", "86400", "115792089237316195423570985008687907853269984665640564039457584007913129639935")
    - int >= 0 (кроме bool)

    Args:
        value: Произвольное значение

    Returns:
        BigNumberParse с ok=True и value=int, либо ok=False и причиной

    Examples:
        >>> parse_big_uint("42").value
        42
        >>> parse_big_uint("abc").ok
        False
    """
    if isinstance(value, bool):
        return BigNumberParse(ok=False, value=None, reason="bool is not a big number")

    if isinstance(value, int):
        if value < 0:
            return BigNumberParse(ok=False, value=None, reason="negative value")
        if value >= _DECIMAL_LIMIT:
            return BigNumberParse(
                ok=False, value=None, reason=f"more than {MAX_DECIMAL_DIGITS} digits"
            )
        return BigNumberParse(ok=True, value=value, reason="")

    if isinstance(value, str):
        if DECIMAL_UINT_PATTERN.fullmatch(value) is None:
            return BigNumberParse(
                ok=False, value=None, reason=f"not a decimal unsigned integer: {value!r}"
            )
        if len(value) > MAX_DECIMAL_DIGITS:
            return BigNumberParse(
                ok=False, value=None, reason=f"more than {MAX_DECIMAL_DIGITS} digits"
            )
        try:
            parsed = int(value)
        except ValueError as e:
            # sys.set_int_max_str_digits() мог понизить предел
            return BigNumberParse(ok=False, value=None, reason=str(e))
        return BigNumberParse(ok=True, value=parsed, reason="")

    return BigNumberParse(
        ok=False, value=None, reason=f"unsupported type {type(value).__name__}"
    )


def is_big_uint_string(value: object) -> bool:
    """Строка, которая разбирается как беззнаковое большое целое."""
    return isinstance(value, str) and parse_big_uint(value).ok


# =============================================================================
# NORMALIZATION
# =============================================================================


def to_decimal_string(value: object) -> str:
    """
    Каноническая десятичная строка для элемента wire struct.

    Строки возвращаются как есть (валидность проверяется позже через
    is_valid()). Целые (int, numpy.int64 и всё, что поддерживает __index__)
    переводятся в десятичную запись.

    Args:
        value: Элемент struct, возвращённый контрактом

    Returns:
        Десятичная строка

    Raises:
        TypeError: Если значение None, bool, не является целым или длиннее
            MAX_DECIMAL_DIGITS цифр
    """
    if isinstance(value, str):
        return value

    if value is None or isinstance(value, bool):
        raise TypeError(f"cannot convert {value!r} to a decimal string")

    try:
        number = operator.index(value)
    except TypeError:
        raise TypeError(
            f"cannot convert {type(value).__name__} value {value!r} to a decimal string"
        ) from None

    # str() бросает ValueError и ниже MAX_DECIMAL_DIGITS, если предел понижен
    # через sys.set_int_max_str_digits()
    try:
        if abs(number) >= _DECIMAL_LIMIT:
            raise ValueError(number.bit_length())
        return str(number)
    except ValueError:
        raise TypeError(
            f"integer of {number.bit_length()} bits exceeds {MAX_DECIMAL_DIGITS} decimal digits"
        ) from None
