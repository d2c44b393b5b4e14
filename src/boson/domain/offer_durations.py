"""
OfferDurations — Длительности периодов оффера

Доменная сущность для BosonTypes.OfferDurations:

    struct OfferDurations {
        uint256 fulfillmentPeriod;
        uint256 voucherValid;
        uint256 resolutionPeriod;
    }

Все поля — секунды, хранятся как десятичные строки.
"""

from typing import Any, ClassVar, Tuple

from pydantic import Field

from .entity import DomainEntity
from .fields import FieldKind, FieldSpec


class OfferDurations(DomainEntity):
    """Длительности fulfillment / voucher / resolution периодов оффера."""

    fulfillment_period: Any = Field(..., alias="fulfillmentPeriod", description="Секунды на исполнение")
    voucher_valid: Any = Field(..., alias="voucherValid", description="Срок действия ваучера, секунды")
    resolution_period: Any = Field(..., alias="resolutionPeriod", description="Секунды на разрешение спора")

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec(name="fulfillment_period", key="fulfillmentPeriod", kind=FieldKind.BIG_NUMBER),
        FieldSpec(name="voucher_valid", key="voucherValid", kind=FieldKind.BIG_NUMBER),
        FieldSpec(name="resolution_period", key="resolutionPeriod", kind=FieldKind.BIG_NUMBER),
    )
    SCHEMA: ClassVar[str] = "offer_durations"

    def fulfillment_period_is_valid(self) -> bool:
        """Должен быть строкой с десятичным беззнаковым целым."""
        return self._field_is_valid("fulfillment_period")

    # TODO: ограничить voucher_valid и resolution_period разумным диапазоном секунд
    # после согласования лимитов с конфигом протокола (OFFER_PERIOD_INVALID)
    def voucher_valid_is_valid(self) -> bool:
        """Должен быть строкой с десятичным беззнаковым целым."""
        return self._field_is_valid("voucher_valid")

    def resolution_period_is_valid(self) -> bool:
        """Должен быть строкой с десятичным беззнаковым целым."""
        return self._field_is_valid("resolution_period")
