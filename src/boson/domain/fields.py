"""
FieldSpec — Декларативное описание полей сущности

Каждая сущность объявляет свои поля один раз: имя атрибута, ключ в keyed
record (как в ABI контракта) и вид значения. Порядок объявления совпадает
с порядком полей в struct контракта.

Правила формы для каждого вида описаны в JSON Schema сущности
(contracts/schema/<entity>.json), здесь хранится только то, что нужно для
конверсий.
"""

from enum import Enum

from pydantic import BaseModel, Field

from src.boson.math.bignum import to_decimal_string


# =============================================================================
# ENUMS
# =============================================================================


class FieldKind(str, Enum):
    """Вид значения поля"""

    BIG_NUMBER = "big_number"  # десятичная строка, uint256 в контракте
    STRING = "string"
    NUMBER = "number"  # нативный int (enum-коды контракта)


# =============================================================================
# FIELD SPEC MODEL
# =============================================================================


class FieldSpec(BaseModel):
    """
    Описание одного поля сущности.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Имя атрибута (snake_case)")
    key: str = Field(..., min_length=1, description="Ключ в keyed record (camelCase)")
    kind: FieldKind = Field(..., description="Вид значения")

    model_config = {"frozen": True}

    def normalize_wire(self, value: object) -> object:
        """
        Нормализация элемента wire struct.

        BIG_NUMBER приводится к десятичной строке, остальные виды
        передаются без изменений.

        Raises:
            TypeError: Если значение для BIG_NUMBER нельзя привести к строке
        """
        if self.kind is FieldKind.BIG_NUMBER:
            return to_decimal_string(value)
        return value
