"""
Contract Validation Module

Модуль для валидации keyed records доменных сущностей по JSON Schema.
"""

from jsonschema import ValidationError

from .validators import (
    FORMAT_CHECKER,
    ContractValidator,
    DisputeValidator,
    OfferDurationsValidator,
    SchemaLoader,
    get_validator,
    validate_dispute,
    validate_offer_durations,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DisputeValidator",
    "OfferDurationsValidator",
    "ValidationError",
    # Functions
    "get_validator",
    "validate_dispute",
    "validate_offer_durations",
    # Format checking
    "FORMAT_CHECKER",
]
