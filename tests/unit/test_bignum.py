"""
Тесты для больших беззнаковых целых и FieldSpec

Проверяет:
1. Тотальность parse_big_uint (никогда не бросает)
2. Нормализацию элементов wire struct
3. FieldSpec: immutability и нормализацию по виду поля
"""

import sys

import pytest
from pydantic import ValidationError

from src.boson.domain import FieldKind, FieldSpec
from src.boson.math import (
    MAX_DECIMAL_DIGITS,
    BigNumberParse,
    is_big_uint_string,
    parse_big_uint,
    to_decimal_string,
)


class FakeUint:
    """Целое из стороннего ABI декодера (поддерживает __index__)"""

    def __init__(self, value: int):
        self._value = value

    def __index__(self) -> int:
        return self._value


# =============================================================================
# PARSE
# =============================================================================


class TestParseBigUint:
    """Тесты для parse_big_uint"""

    def test_decimal_string(self) -> None:
        """Десятичная строка разбирается"""
        assert parse_big_uint("86400") == BigNumberParse(ok=True, value=86400, reason="")

    def test_huge_string_exact(self) -> None:
        """Без потери точности за пределами float"""
        value = 2**256 - 1
        assert parse_big_uint(str(value)).value == value

    def test_native_int(self) -> None:
        """Нативный int >= 0"""
        assert parse_big_uint(0).ok
        assert parse_big_uint(2**70).value == 2**70

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "-5", "+5", " 5", "5 ", "5\n", "0x1f", "1.0", "²", -1, True, False, 1.0, None, [1]],
    )
    def test_rejected_without_raising(self, value) -> None:
        """Невалидные значения дают ok=False, а не исключение"""
        result = parse_big_uint(value)
        assert result.ok is False
        assert result.value is None
        assert result.reason

    def test_is_big_uint_string_requires_str(self) -> None:
        """Строковая форма обязательна"""
        assert is_big_uint_string("5")
        assert not is_big_uint_string(5)

    def test_too_many_digits_rejected(self) -> None:
        """Строка длиннее MAX_DECIMAL_DIGITS цифр даёт ok=False"""
        result = parse_big_uint("1" * 5000)
        assert result.ok is False
        assert result.value is None
        assert "digits" in result.reason
        assert not is_big_uint_string("1" * 5000)

    def test_max_digits_accepted(self) -> None:
        """Ровно MAX_DECIMAL_DIGITS цифр"""
        assert parse_big_uint("9" * MAX_DECIMAL_DIGITS).value == 10**MAX_DECIMAL_DIGITS - 1

    def test_too_large_native_int_rejected(self) -> None:
        """Нативный int с более чем MAX_DECIMAL_DIGITS цифрами"""
        assert parse_big_uint(10**MAX_DECIMAL_DIGITS).ok is False

    @pytest.mark.skipif(
        not hasattr(sys, "set_int_max_str_digits"), reason="предел int <-> str с Python 3.11"
    )
    def test_lowered_interpreter_limit(self) -> None:
        """Пониженный sys.set_int_max_str_digits не приводит к исключению"""
        previous = sys.get_int_max_str_digits()
        sys.set_int_max_str_digits(640)
        try:
            result = parse_big_uint("1" * 1000)
        finally:
            sys.set_int_max_str_digits(previous)
        assert result.ok is False
        assert result.value is None


# =============================================================================
# NORMALIZATION
# =============================================================================


class TestToDecimalString:
    """Тесты для to_decimal_string"""

    def test_int(self) -> None:
        """int в десятичную строку"""
        assert to_decimal_string(604800) == "604800"

    def test_index_protocol(self) -> None:
        """Объекты с __index__ поддерживаются"""
        assert to_decimal_string(FakeUint(2**200)) == str(2**200)

    def test_string_passthrough(self) -> None:
        """Строки возвращаются как есть"""
        assert to_decimal_string("abc") == "abc"

    @pytest.mark.parametrize("value", [None, True, 1.5, object()])
    def test_unconvertible(self, value) -> None:
        """None, bool и нецелые отклоняются"""
        with pytest.raises(TypeError):
            to_decimal_string(value)

    def test_too_many_digits(self) -> None:
        """Целое длиннее MAX_DECIMAL_DIGITS цифр — TypeError, а не ValueError"""
        with pytest.raises(TypeError, match="decimal digits"):
            to_decimal_string(10**5000)

    def test_max_digits(self) -> None:
        """Ровно MAX_DECIMAL_DIGITS цифр переводятся"""
        assert to_decimal_string(10**MAX_DECIMAL_DIGITS - 1) == "9" * MAX_DECIMAL_DIGITS


# =============================================================================
# FIELD SPEC
# =============================================================================


class TestFieldSpec:
    """Тесты для FieldSpec"""

    def test_big_number_normalized(self) -> None:
        """BIG_NUMBER приводится к строке"""
        spec = FieldSpec(name="exchange_id", key="exchangeId", kind=FieldKind.BIG_NUMBER)
        assert spec.normalize_wire(7) == "7"

    @pytest.mark.parametrize("kind", [FieldKind.STRING, FieldKind.NUMBER])
    def test_other_kinds_passthrough(self, kind: FieldKind) -> None:
        """Остальные виды без изменений"""
        spec = FieldSpec(name="state", key="state", kind=kind)
        marker = object()
        assert spec.normalize_wire(marker) is marker

    def test_frozen(self) -> None:
        """FieldSpec immutable"""
        spec = FieldSpec(name="state", key="state", kind=FieldKind.NUMBER)
        with pytest.raises(ValidationError):
            spec.key = "status"  # type: ignore

    def test_empty_name_rejected(self) -> None:
        """Пустое имя поля"""
        with pytest.raises(ValidationError):
            FieldSpec(name="", key="state", kind=FieldKind.NUMBER)

    def test_kind_from_string(self) -> None:
        """Вид можно задать строкой"""
        spec = FieldSpec(name="complaint", key="complaint", kind="string")
        assert spec.kind is FieldKind.STRING
