"""
Общие фикстуры для тестов движка бронирования.
"""

from decimal import Decimal
from typing import Any, Dict, List, Tuple

import pytest

from hotel_reservation.booking.application import ReservationEngine
from hotel_reservation.booking.domain import Room
from hotel_reservation.booking.infrastructure import (
    InMemoryBookingLedger,
    InMemoryRoomCatalog,
    SequentialIdGenerator,
)
from hotel_reservation.shared_kernel import Money


class RecordingLogger:
    """Логгер, запоминающий сообщения вместо вывода в консоль."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("DEBUG", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("INFO", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("WARNING", message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.records.append(("ERROR", message, kwargs))

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


def make_room(number: int, category: str, rate: str) -> Room:
    return Room(
        number=number, category=category, nightly_rate=Money(amount=Decimal(rate))
    )


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def rooms() -> List[Room]:
    """Каталог по умолчанию: по одному номеру каждой категории."""
    return [
        make_room(101, "Standard", "1000"),
        make_room(102, "Deluxe", "1500"),
        make_room(103, "Suite", "2000"),
    ]


@pytest.fixture
def catalog(rooms: List[Room]) -> InMemoryRoomCatalog:
    return InMemoryRoomCatalog(rooms)


@pytest.fixture
def ledger() -> InMemoryBookingLedger:
    return InMemoryBookingLedger()


@pytest.fixture
def engine(
    catalog: InMemoryRoomCatalog,
    ledger: InMemoryBookingLedger,
    logger: RecordingLogger,
) -> ReservationEngine:
    """Движок с детерминированными идентификаторами BK-0001, BK-0002, ..."""
    return ReservationEngine(
        catalog=catalog,
        ledger=ledger,
        id_generator=SequentialIdGenerator(),
        logger=logger,
    )
