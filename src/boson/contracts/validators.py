"""
JSON Schema Contract Validators

Модуль для валидации keyed records доменных сущностей согласно JSON Schema
контрактам. Использует библиотеку jsonschema.

Схемы (contracts/schema/):
- dispute.json (BosonTypes.Dispute)
- offer_durations.json (BosonTypes.OfferDurations)

Формат "big-uint" — десятичная строка беззнакового целого произвольной
точности. Проверяется общим FormatChecker через is_big_uint_string.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator, FormatChecker

from src.boson.math.bignum import is_big_uint_string

logger = logging.getLogger(__name__)


# =============================================================================
# FORMAT CHECKER
# =============================================================================

FORMAT_CHECKER = FormatChecker()


@FORMAT_CHECKER.checks("big-uint")
def is_big_uint(instance: object) -> bool:
    """Формат big-uint. Не-строки пропускаются: их отсекает ключ type."""
    if not isinstance(instance, str):
        return True
    return is_big_uint_string(instance)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем и поставляются
    вместе с пакетом.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'dispute')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Валидирует как keyed record целиком, так и отдельные поля по
    подсхемам из properties.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        """
        Инициализация валидатора.

        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (по умолчанию общий для пакета)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema, format_checker=FORMAT_CHECKER)

        # Подсхемы полей не содержат $ref, поэтому валидируются автономно
        self._field_validators: Dict[str, Draft202012Validator] = {
            key: Draft202012Validator(subschema, format_checker=FORMAT_CHECKER)
            for key, subschema in self.schema.get("properties", {}).items()
        }

    @property
    def field_keys(self) -> List[str]:
        """Ключи полей в порядке объявления в схеме."""
        return list(self._field_validators)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: Данные для валидации (dict)

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """
        Проверка валидности данных без exception.

        Args:
            data: Данные для валидации

        Returns:
            True если данные валидны, False иначе
        """
        return self.validator.is_valid(data)

    def field_is_valid(self, key: str, value: Any) -> bool:
        """
        Проверка одного поля по его подсхеме.

        Args:
            key: Ключ поля в keyed record (например, 'exchangeId')
            value: Значение поля

        Returns:
            True если значение проходит правило поля

        Raises:
            KeyError: Если поле не объявлено в схеме
        """
        return self._field_validators[key].is_valid(value)

    def get_errors(self, data: Dict[str, Any]) -> List[str]:
        """
        Получение списка ошибок валидации.

        Args:
            data: Данные для валидации

        Returns:
            Список сообщений об ошибках (пустой если данные валидны)
        """
        errors = sorted(self.validator.iter_errors(data), key=lambda e: list(e.path))
        return [
            f"{'.'.join(str(p) for p in error.path) or '<root>'}: {error.message}"
            for error in errors
        ]


class DisputeValidator(ContractValidator):
    """Валидатор для Dispute контракта."""

    def __init__(self):
        super().__init__("dispute")


class OfferDurationsValidator(ContractValidator):
    """Валидатор для OfferDurations контракта."""

    def __init__(self):
        super().__init__("offer_durations")


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """
    Кэшированный валидатор по имени схемы.

    Доменные сущности используют один экземпляр на схему.
    """
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_dispute(data: Dict[str, Any]) -> None:
    """
    Валидация Dispute данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("dispute").validate(data)


def validate_offer_durations(data: Dict[str, Any]) -> None:
    """
    Валидация OfferDurations данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("offer_durations").validate(data)
