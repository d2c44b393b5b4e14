"""
Dispute — Спор по обмену

Доменная сущность для BosonTypes.Dispute:

    struct Dispute {
        uint256 exchangeId;
        string complaint;
        DisputeState state;
    }

exchangeId хранится как десятичная строка, state — как нативный int
(код enum'а DisputeState, без проверки принадлежности enum'у).
"""

from typing import Any, ClassVar, Tuple

from pydantic import Field

from .entity import DomainEntity
from .fields import FieldKind, FieldSpec


class Dispute(DomainEntity):
    """
    Спор по обмену.

    Mutable модель: конструктор сохраняет значения как есть.
    Перед отправкой struct в контракт вызывать is_valid().
    """

    exchange_id: Any = Field(..., alias="exchangeId", description="uint256 десятичной строкой")
    complaint: Any = Field(..., alias="complaint", description="Текст жалобы покупателя")
    state: Any = Field(..., alias="state", description="Код DisputeState")

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec(name="exchange_id", key="exchangeId", kind=FieldKind.BIG_NUMBER),
        FieldSpec(name="complaint", key="complaint", kind=FieldKind.STRING),
        FieldSpec(name="state", key="state", kind=FieldKind.NUMBER),
    )
    SCHEMA: ClassVar[str] = "dispute"

    def exchange_id_is_valid(self) -> bool:
        """
        Валиден ли exchange_id?

        Должен быть строкой с десятичным беззнаковым целым.
        """
        return self._field_is_valid("exchange_id")

    def complaint_is_valid(self) -> bool:
        """Должна быть строкой (пустая допустима)."""
        return self._field_is_valid("complaint")

    def state_is_valid(self) -> bool:
        """
        Валиден ли state?

        Должен быть нативным целым числом (не строкой, не bool, не NaN)
        в пределах безопасного диапазона JSON числа: |state| < 2**53.
        """
        return self._field_is_valid("state")
