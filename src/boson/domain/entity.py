"""
DomainEntity — Базовый класс доменных сущностей Boson Protocol

Каждая сущность существует в трёх формах:
- keyed record: dict с ключами из ABI контракта (camelCase)
- wire struct: список значений в порядке полей struct контракта
- каноническая строка: компактный JSON keyed record

Подкласс — pydantic модель: поля объявляются с alias = ключ record, в
порядке struct. Дополнительно объявляются FIELDS (та же раскладка плюс вид
поля для нормализации struct) и SCHEMA (имя JSON Schema в contracts/schema/).
Конверсии и проверка полей общие.

ИНВАРИАНТЫ:
1. Конструкторы не валидируют — перед доверием данным вызывается is_valid()
2. Предикаты <field>_is_valid() никогда не бросают исключений
3. from_struct проверяет длину struct до деструктуризации
4. Равенство структурное (BaseModel eq по значениям полей)
5. NaN и Infinity сериализуются как null: каноническая строка — строгий JSON
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Dict, List, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic_core import from_json

from src.boson.contracts.validators import ContractValidator, get_validator

from .errors import CanonicalFormError, StructShapeError
from .fields import FieldSpec

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound="DomainEntity")


class DomainEntity(BaseModel):
    """
    Базовый класс сущностей.

    Mutable модель с Any полями: значения хранятся как есть, без приведения
    типов. Позиционный конструктор раскладывает значения по FIELDS.
    """

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
        "validate_assignment": False,
    }

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = ()
    SCHEMA: ClassVar[str] = ""

    def __init__(self, *values: Any, **data: Any) -> None:
        if len(values) > len(self.FIELDS):
            raise TypeError(
                f"{type(self).__name__} takes {len(self.FIELDS)} positional values, "
                f"got {len(values)}"
            )
        data.update({spec.key: value for spec, value in zip(self.FIELDS, values)})
        super().__init__(**data)

    # =========================================================================
    # DECLARED LAYOUT
    # =========================================================================

    @classmethod
    def field_names(cls) -> List[str]:
        """Имена атрибутов в порядке struct."""
        return [spec.name for spec in cls.FIELDS]

    @classmethod
    def record_keys(cls) -> List[str]:
        """Ключи keyed record в порядке struct."""
        return [spec.key for spec in cls.FIELDS]

    @classmethod
    def contract_validator(cls) -> ContractValidator:
        """JSON Schema валидатор сущности (один на схему)."""
        return get_validator(cls.SCHEMA)

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_object(cls: Type[EntityT], record: Mapping[str, Any]) -> EntityT:
        """
        Новая сущность из keyed record.

        Лишние ключи игнорируются, отсутствующие становятся None.
        Валидация не выполняется.

        Args:
            record: Mapping с ключами из ABI (например, {'exchangeId': '5', ...})

        Returns:
            Новый экземпляр
        """
        return cls.model_construct(**{spec.key: record.get(spec.key) for spec in cls.FIELDS})

    @classmethod
    def from_struct(cls: Type[EntityT], struct: Sequence[Any]) -> EntityT:
        """
        Новая сущность из wire struct, возвращённого контрактом.

        Большие целые приводятся к десятичной строке, остальные поля
        передаются как есть.

        Args:
            struct: Последовательность значений в порядке полей struct

        Returns:
            Новый экземпляр

        Raises:
            StructShapeError: Если struct не последовательность, длина не
                совпадает с раскладкой или большое целое не приводится к строке
        """
        name = cls.__name__

        if isinstance(struct, (str, bytes, Mapping)) or not isinstance(struct, Sequence):
            logger.warning("%s.from_struct: expected a sequence, got %s", name, type(struct).__name__)
            raise StructShapeError(name, f"expected a sequence, got {type(struct).__name__}")

        if len(struct) != len(cls.FIELDS):
            logger.warning(
                "%s.from_struct: expected %d fields, got %d", name, len(cls.FIELDS), len(struct)
            )
            raise StructShapeError(
                name, f"expected {len(cls.FIELDS)} fields {cls.record_keys()}, got {len(struct)}"
            )

        record: Dict[str, Any] = {}
        for spec, value in zip(cls.FIELDS, struct):
            try:
                record[spec.key] = spec.normalize_wire(value)
            except TypeError as e:
                logger.warning(
                    "%s.from_struct: field %s is not convertible: %s", name, spec.key, e
                )
                raise StructShapeError(name, f"field {spec.key}: {e}") from e

        return cls.from_object(record)

    @classmethod
    def from_string(cls: Type[EntityT], text: str) -> EntityT:
        """
        Новая сущность из канонической строки.

        Raises:
            CanonicalFormError: Если строка не JSON или JSON не объект
        """
        try:
            record = from_json(text)
        except ValueError as e:
            raise CanonicalFormError(f"{cls.__name__}: invalid JSON: {e}") from e
        if not isinstance(record, dict):
            raise CanonicalFormError(
                f"{cls.__name__}: canonical form must be a JSON object, "
                f"got {type(record).__name__}"
            )
        return cls.from_object(record)

    # =========================================================================
    # REPRESENTATIONS
    # =========================================================================

    def to_string(self) -> str:
        """
        Каноническая строка: компактный JSON, ключи в порядке struct.

        Raises:
            PydanticSerializationError: Если значение поля не сериализуется в JSON
        """
        return self.model_dump_json(by_alias=True)

    def __str__(self) -> str:
        return self.to_string()

    def to_object(self) -> Dict[str, Any]:
        """
        Plain dict, эквивалентный разбору канонической строки.

        Содержит только объявленные ключи.
        """
        return self.model_dump(mode="json", by_alias=True)

    def to_struct(self) -> List[Any]:
        """Значения полей в порядке struct, без нормализации."""
        return [getattr(self, spec.name) for spec in self.FIELDS]

    def clone(self: EntityT) -> EntityT:
        """Независимая копия с теми же значениями полей."""
        return self.model_copy(deep=True)

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def _field_is_valid(self, name: str) -> bool:
        spec = next(spec for spec in self.FIELDS if spec.name == name)
        value = getattr(self, name)
        valid = self.contract_validator().field_is_valid(spec.key, value)
        if not valid:
            logger.debug("%s.%s invalid: %s value", type(self).__name__, spec.key, type(value).__name__)
        return valid

    def is_valid(self) -> bool:
        """Все предикаты <field>_is_valid() истинны."""
        return all(getattr(self, f"{spec.name}_is_valid")() for spec in self.FIELDS)
