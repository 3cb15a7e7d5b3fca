"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol, Sequence

from ..shared_kernel import BookingId, DateRange
from .domain import Booking, Room

# Генератор идентификаторов бронирований: любой вызываемый объект без аргументов
IdGenerator = Callable[[], BookingId]


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IRoomCatalog(Protocol):
    """Интерфейс каталога номеров."""

    def add(self, room: Room) -> None: ...
    def get(self, room_number: int) -> Optional[Room]: ...
    def find_by_category(self, category: str) -> List[Room]: ...
    def all(self) -> List[Room]: ...


class IBookingLedger(Protocol):
    """Интерфейс журнала активных бронирований."""

    def insert(self, booking: Booking) -> None: ...
    def remove_by_id(self, booking_id: BookingId) -> bool: ...
    def find_by_id(self, booking_id: BookingId) -> Optional[Booking]: ...
    def all_for_room(self, room_number: int) -> List[Booking]: ...
    def all(self) -> List[Booking]: ...
    def __len__(self) -> int: ...


class IAllocationStrategy(Protocol):
    """Политика выбора номера среди свободных кандидатов."""

    def pick_room(
        self, candidates: Sequence[Room], period: DateRange
    ) -> Optional[Room]: ...
