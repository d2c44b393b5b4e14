"""
Math primitives — большие целые для полей uint256.

Экспортирует:
- parse_big_uint: тотальный разбор беззнакового целого
- is_big_uint_string: проверка десятичной строки (формат big-uint)
- to_decimal_string: нормализация элемента wire struct
"""

from .bignum import (
    DECIMAL_UINT_PATTERN,
    MAX_DECIMAL_DIGITS,
    BigNumberParse,
    is_big_uint_string,
    parse_big_uint,
    to_decimal_string,
)

__all__ = [
    "DECIMAL_UINT_PATTERN",
    "MAX_DECIMAL_DIGITS",
    "BigNumberParse",
    "parse_big_uint",
    "is_big_uint_string",
    "to_decimal_string",
]
