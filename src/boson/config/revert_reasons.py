"""
RevertReasons — Причины revert транзакций Boson Protocol

Плоская таблица: символическое имя → текст причины, который контракт
возвращает при revert. Используется тестами и клиентами для сопоставления
внешне полученных сообщений об ошибках. Доменные сущности эти строки не
используют.
"""

from enum import Enum
from typing import Optional


class RevertReasons(str, Enum):
    """Причины revert транзакций"""

    # General
    INVALID_ADDRESS = "Invalid Address"

    # Facet initializer related
    ALREADY_INITIALIZED = "Already initialized"

    # Offer related
    NOT_OPERATOR = "Not seller's operator"
    NO_SUCH_OFFER = "No such offer"
    OFFER_ALREADY_VOIDED = "Offer already voided"
    OFFER_PERIOD_INVALID = "Offer period invalid"


def match_revert_reason(message: str) -> Optional[RevertReasons]:
    """
    Известная причина revert в сообщении от узла/провайдера.

    Сообщения обычно обёрнуты, например:
    "VM Exception while processing transaction: reverted with reason string 'No such offer'"

    При нескольких совпадениях выбирается самая длинная причина.

    Args:
        message: Сообщение об ошибке транзакции

    Returns:
        RevertReasons или None, если причина неизвестна
    """
    matches = [reason for reason in RevertReasons if reason.value in message]
    if not matches:
        return None
    return max(matches, key=lambda reason: len(reason.value))
