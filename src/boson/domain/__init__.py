"""
Domain entities and value objects.

Contains Boson Protocol entities (Dispute, OfferDurations) with conversions
between keyed records, wire structs and the canonical string form.
"""

from src.boson.domain.dispute import Dispute
from src.boson.domain.entity import DomainEntity
from src.boson.domain.errors import CanonicalFormError, EntityError, StructShapeError
from src.boson.domain.fields import FieldKind, FieldSpec
from src.boson.domain.offer_durations import OfferDurations

__all__ = [
    # Base
    "DomainEntity",
    "FieldKind",
    "FieldSpec",
    # Entities
    "Dispute",
    "OfferDurations",
    # Errors
    "EntityError",
    "StructShapeError",
    "CanonicalFormError",
]
