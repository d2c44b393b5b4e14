"""
Исключения доменного слоя.

Ошибки формы полей исключениями НЕ являются: они выражаются только через
<field>_is_valid() / is_valid(). Исключения бросаются лишь при структурных
нарушениях на входе конверсий.
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EntityError(Exception):
    """Базовая ошибка доменных сущностей."""


class StructShapeError(EntityError, ValueError):
    """
    Wire struct не соответствует объявленной раскладке сущности.

    Бросается из from_struct, если:
    1. Вход не является последовательностью (str, bytes, Mapping отклоняются)
    2. Длина не совпадает с количеством объявленных полей
    3. Элемент для большого целого нельзя привести к десятичной строке
    """

    def __init__(self, entity: str, message: str):
        self.entity = entity
        super().__init__(f"{entity}: {message}")


class CanonicalFormError(EntityError, ValueError):
    """Каноническая строка разобрана, но это не JSON объект."""
