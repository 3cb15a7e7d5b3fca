"""
Инфраструктурный слой контекста бронирования.

Содержит реализации каталога и журнала бронирований в памяти,
генераторы идентификаторов, консольный логгер и выгрузку в CSV.
"""

from __future__ import annotations

import csv
import io
import itertools
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence

from ..shared_kernel import BookingId, DuplicateEntityException, normalize_category
from . import interfaces as ports
from .domain import Booking, Room

if TYPE_CHECKING:
    from .application import BookingRecord


class InMemoryRoomCatalog(ports.IRoomCatalog):
    """Каталог номеров в памяти. Сохраняет порядок добавления."""

    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: Dict[int, Room] = {}
        for room in rooms:
            self.add(room)

    def add(self, room: Room) -> None:
        if room.number in self._rooms:
            raise DuplicateEntityException(f"Номер {room.number} уже есть в каталоге")
        self._rooms[room.number] = room

    def get(self, room_number: int) -> Optional[Room]:
        return self._rooms.get(room_number)

    def find_by_category(self, category: str) -> List[Room]:
        key = normalize_category(category)
        return [
            room for room in self._rooms.values()
            if normalize_category(room.category) == key
        ]

    def all(self) -> List[Room]:
        return list(self._rooms.values())


class InMemoryBookingLedger(ports.IBookingLedger):
    """Журнал активных бронирований в памяти.

    Отмененные бронирования удаляются целиком, без следов.
    """

    def __init__(self):
        self._bookings: Dict[BookingId, Booking] = {}

    def insert(self, booking: Booking) -> None:
        if booking.id in self._bookings:
            raise DuplicateEntityException(
                f"Бронирование с id {booking.id} уже существует"
            )
        self._bookings[booking.id] = booking

    def remove_by_id(self, booking_id: BookingId) -> bool:
        return self._bookings.pop(booking_id, None) is not None

    def find_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def all_for_room(self, room_number: int) -> List[Booking]:
        return [
            booking for booking in self._bookings.values()
            if booking.room_number == room_number
        ]

    def all(self) -> List[Booking]:
        return list(self._bookings.values())

    def __len__(self) -> int:
        return len(self._bookings)


class SequentialIdGenerator:
    """Детерминированный генератор идентификаторов: BK-0001, BK-0002, ..."""

    def __init__(self, prefix: str = "BK", start: int = 1):
        self._prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> BookingId:
        return f"{self._prefix}-{next(self._counter):04d}"


class ConsoleLogger(ports.ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

    def __init__(self, level: str = "INFO"):
        self._threshold = self.LEVELS[level.upper()]

    def _emit(self, level: str, message: str, stream, context: dict) -> None:
        if self.LEVELS[level] < self._threshold:
            return
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )

    def debug(self, message: str, **kwargs) -> None:
        self._emit("DEBUG", message, sys.stdout, kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._emit("INFO", message, sys.stdout, kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._emit("WARNING", message, sys.stderr, kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._emit("ERROR", message, sys.stderr, kwargs)


class CsvBookingExporter:
    """Выгружает активные бронирования в CSV-файл.

    Одна строка на бронирование, поля разделены запятыми, даты в ISO-8601.
    Заголовок не пишется. Обратная загрузка не поддерживается.
    """

    def __init__(self, file_path: str, logger: Optional[ports.ILogger] = None):
        """
        Инициализирует экспортер.

        Args:
            file_path: Путь к CSV-файлу
            logger: Логгер для сообщений о выгрузке
        """
        self._file_path = Path(file_path)
        self._logger = logger or ConsoleLogger()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @staticmethod
    def render(records: Sequence["BookingRecord"]) -> str:
        """Формирует текст CSV без записи на диск."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        for record in records:
            writer.writerow(record.as_row())
        return buffer.getvalue()

    def save(self, records: Sequence["BookingRecord"]) -> Path:
        """Сохраняет записи в файл, перезаписывая его."""
        # Создаем директорию, если она не существует
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._file_path, "w", encoding="utf-8", newline="") as f:
                f.write(self.render(records))
        except OSError as e:
            self._logger.error(
                "Не удалось сохранить бронирования",
                path=str(self._file_path),
                error=str(e),
            )
            raise

        self._logger.info(
            "Бронирования сохранены", path=str(self._file_path), count=len(records)
        )
        return self._file_path
