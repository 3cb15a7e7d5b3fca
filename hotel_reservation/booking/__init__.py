"""
Модуль контекста бронирования (Booking Context).

Отвечает за размещение гостей по номерам отеля, включая:
- Поиск номеров по категории и датам
- Создание и отмену бронирований без пересечения периодов
- Расчет стоимости проживания и выгрузку активных бронирований
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
