"""
Прикладной слой контекста бронирования.

Содержит движок бронирования, который координирует каталог номеров
и журнал бронирований, а также DTO для передачи данных наружу.
"""

import threading
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel

from ..shared_kernel import BookingId, DateRange, Money, generate_id
from . import interfaces as ports
from .domain import Booking, FirstAvailableStrategy, Guest, Room
from .infrastructure import ConsoleLogger

# DTO для исходящих данных


class BookingError(str, Enum):
    """Ожидаемые причины отказа в бронировании."""

    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_GUEST = "invalid_guest"
    NO_AVAILABILITY = "no_availability"


class BookingResult(BaseModel):
    """Результат попытки бронирования: идентификатор либо причина отказа."""

    booking_id: Optional[BookingId] = None
    error: Optional[BookingError] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, booking_id: BookingId) -> "BookingResult":
        return cls(booking_id=booking_id)

    @classmethod
    def failure(cls, error: BookingError, message: str) -> "BookingResult":
        return cls(error=error, message=message)


class BookingView(BaseModel):
    """Представление бронирования только для чтения."""

    booking_id: BookingId
    guest_name: str
    guest_email: str
    room_number: int
    room_category: str
    nightly_rate: Money
    check_in: date
    check_out: date
    nights: int
    total_cost: Money

    @classmethod
    def from_domain(cls, booking: Booking, room: Room) -> "BookingView":
        """Создает представление из доменной модели."""
        return cls(
            booking_id=booking.id,
            guest_name=booking.guest.name,
            guest_email=booking.guest.email,
            room_number=room.number,
            room_category=room.category,
            nightly_rate=room.nightly_rate,
            check_in=booking.period.check_in,
            check_out=booking.period.check_out,
            nights=booking.nights,
            total_cost=booking.total_cost(room.nightly_rate),
        )


class BookingRecord(BaseModel):
    """Плоская запись для выгрузки бронирования."""

    booking_id: BookingId
    guest_name: str
    guest_email: str
    room_number: int
    room_category: str
    nightly_rate: str
    check_in: date
    check_out: date

    @classmethod
    def from_domain(cls, booking: Booking, room: Room) -> "BookingRecord":
        return cls(
            booking_id=booking.id,
            guest_name=booking.guest.name,
            guest_email=booking.guest.email,
            room_number=room.number,
            room_category=room.category,
            nightly_rate=str(room.nightly_rate.amount),
            check_in=booking.period.check_in,
            check_out=booking.period.check_out,
        )

    def as_row(self) -> Tuple[str, ...]:
        """Поля в фиксированном порядке выгрузки."""
        return (
            self.booking_id,
            self.guest_name,
            self.guest_email,
            str(self.room_number),
            self.room_category,
            self.nightly_rate,
            self.check_in.isoformat(),
            self.check_out.isoformat(),
        )


# Сервисы приложения


class ReservationEngine:
    """Движок бронирования номеров.

    Владеет каталогом и журналом бронирований и гарантирует, что два активных
    бронирования одного номера никогда не пересекаются по датам.
    Проверка доступности и вставка в журнал выполняются под одной блокировкой.
    """

    def __init__(
        self,
        catalog: ports.IRoomCatalog,
        ledger: ports.IBookingLedger,
        id_generator: ports.IdGenerator = generate_id,
        allocation: Optional[ports.IAllocationStrategy] = None,
        logger: Optional[ports.ILogger] = None,
    ):
        """Инициализирует движок."""
        self._catalog = catalog
        self._ledger = ledger
        self._id_generator = id_generator
        self._allocation = allocation or FirstAvailableStrategy()
        self._logger = logger or ConsoleLogger()
        self._lock = threading.RLock()

    @property
    def catalog(self) -> ports.IRoomCatalog:
        return self._catalog

    @property
    def ledger(self) -> ports.IBookingLedger:
        return self._ledger

    def search(self, category: str) -> List[Room]:
        """Возвращает номера категории в порядке каталога."""
        rooms = self._catalog.find_by_category(category)
        self._logger.debug("Поиск номеров", category=category, found=len(rooms))
        return rooms

    def available_rooms(
        self, category: str, check_in: date, check_out: date
    ) -> List[Room]:
        """Возвращает номера категории, свободные на указанный период."""
        if check_out <= check_in:
            return []
        period = DateRange(check_in=check_in, check_out=check_out)
        with self._lock:
            return self._free_rooms(category, period)

    def book(
        self,
        guest_name: str,
        guest_email: str,
        category: str,
        check_in: date,
        check_out: date,
    ) -> BookingResult:
        """Бронирует первый подходящий свободный номер категории."""
        if not guest_name or not guest_name.strip():
            return self._reject(BookingError.INVALID_GUEST, "Не указано имя гостя")
        if not guest_email or not guest_email.strip():
            return self._reject(BookingError.INVALID_GUEST, "Не указан email гостя")
        if check_out <= check_in:
            return self._reject(
                BookingError.INVALID_DATE_RANGE,
                "Дата выезда должна быть позже даты заезда",
                check_in=check_in,
                check_out=check_out,
            )

        period = DateRange(check_in=check_in, check_out=check_out)
        guest = Guest(name=guest_name, email=guest_email)

        with self._lock:
            room = self._allocation.pick_room(
                self._free_rooms(category, period), period
            )
            if room is None:
                return self._reject(
                    BookingError.NO_AVAILABILITY,
                    "Нет свободных номеров выбранной категории на эти даты",
                    category=category,
                    check_in=check_in,
                    check_out=check_out,
                )

            booking = Booking.create(
                booking_id=self._id_generator(), room=room, guest=guest, period=period
            )
            self._ledger.insert(booking)

        self._logger.info(
            "Бронирование создано",
            booking_id=booking.id,
            room_number=room.number,
            nights=booking.nights,
        )
        return BookingResult.success(booking.id)

    def cancel(self, booking_id: BookingId) -> bool:
        """Отменяет бронирование. Повторная отмена безопасна."""
        with self._lock:
            removed = self._ledger.remove_by_id(booking_id)
        if removed:
            self._logger.info("Бронирование отменено", booking_id=booking_id)
        else:
            self._logger.debug("Бронирование не найдено", booking_id=booking_id)
        return removed

    def get_details(self, booking_id: BookingId) -> Optional[BookingView]:
        """Возвращает информацию о бронировании или None."""
        with self._lock:
            booking = self._ledger.find_by_id(booking_id)
            if booking is None:
                self._logger.debug("Бронирование не найдено", booking_id=booking_id)
                return None
            return BookingView.from_domain(booking, self._room_of(booking))

    def list_bookings(self) -> List[BookingView]:
        """Возвращает все активные бронирования в порядке создания."""
        with self._lock:
            return [
                BookingView.from_domain(booking, self._room_of(booking))
                for booking in self._ledger.all()
            ]

    def export_records(self) -> List[BookingRecord]:
        """Формирует записи для выгрузки активных бронирований."""
        with self._lock:
            return [
                BookingRecord.from_domain(booking, self._room_of(booking))
                for booking in self._ledger.all()
            ]

    def _free_rooms(self, category: str, period: DateRange) -> List[Room]:
        return [
            room for room in self._catalog.find_by_category(category)
            if not any(
                booking.overlaps(period)
                for booking in self._ledger.all_for_room(room.number)
            )
        ]

    def _room_of(self, booking: Booking) -> Room:
        room = self._catalog.get(booking.room_number)
        # Номера не удаляются из каталога во время работы
        assert room is not None, f"Номер {booking.room_number} отсутствует в каталоге"
        return room

    def _reject(self, error: BookingError, message: str, **context) -> BookingResult:
        self._logger.warning(message, reason=error.value, **context)
        return BookingResult.failure(error, message)
