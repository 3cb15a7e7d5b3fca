"""
Общее ядро (Shared Kernel) системы бронирования номеров.

Содержит общие типы данных и утилиты, используемые в контексте бронирования.
"""

from .domain import (
    DEFAULT_CURRENCY,
    # Базовые типы
    BookingId,
    # Основные классы
    DateRange,
    # Исключения
    DomainException,
    DuplicateEntityException,
    Money,
    # Перечисления
    RoomCategory,
    # Утилиты
    generate_id,
    normalize_category,
)

__all__ = [
    # Базовые типы
    "BookingId",
    "DEFAULT_CURRENCY",
    "generate_id",
    # Основные классы
    "Money",
    "DateRange",
    # Перечисления
    "RoomCategory",
    # Исключения
    "DomainException",
    "DuplicateEntityException",
    # Утилиты
    "normalize_category",
]
