"""
Доменная модель контекста бронирования.

Содержит основные сущности, агрегат бронирования и доменные политики
выбора номера при размещении гостя.
"""

from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..shared_kernel import BookingId, DateRange, Money, RoomCategory


class Room(BaseModel):
    """Номер в отеле. Неизменяем после создания каталога."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., gt=0)  # Номер комнаты (например, 101)
    category: str
    nightly_rate: Money

    @field_validator("category", mode="before")
    @classmethod
    def category_label(cls, v):
        if isinstance(v, RoomCategory):
            v = v.value
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Категория номера не может быть пустой")
        return v.strip()

    @field_validator("nightly_rate")
    @classmethod
    def rate_is_positive(cls, v: Money) -> Money:
        if v.amount <= 0:
            raise ValueError("Стоимость ночи должна быть положительной")
        return v


class Guest(BaseModel):
    """Гость отеля. Принадлежит ровно одному бронированию."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str

    @field_validator("name", "email")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Поле не может быть пустым")
        return v.strip()


class Booking(BaseModel):
    """Бронирование номера в отеле.

    Хранит только номер комнаты: данные номера берутся из каталога.
    После создания бронирование не изменяется, его можно только удалить.
    """

    model_config = ConfigDict(frozen=True)

    id: BookingId
    guest: Guest
    room_number: int
    period: DateRange

    @property
    def nights(self) -> int:
        return self.period.nights

    def total_cost(self, nightly_rate: Money) -> Money:
        """Стоимость проживания: количество ночей x стоимость ночи."""
        return nightly_rate * self.nights

    def overlaps(self, period: DateRange) -> bool:
        return self.period.overlaps(period)

    @classmethod
    def create(
        cls, booking_id: BookingId, room: Room, guest: Guest, period: DateRange
    ) -> "Booking":
        """Создает новое бронирование для выбранного номера."""
        return cls(id=booking_id, guest=guest, room_number=room.number, period=period)


class FirstAvailableStrategy:
    """Выбирает первый свободный номер в порядке каталога."""

    name = "first_available"

    def pick_room(
        self, candidates: Sequence[Room], period: DateRange
    ) -> Optional[Room]:
        return candidates[0] if candidates else None


class LowestRateStrategy:
    """Выбирает самый дешевый свободный номер.

    При равной цене побеждает номер, стоящий раньше в каталоге.
    """

    name = "lowest_rate"

    def pick_room(
        self, candidates: Sequence[Room], period: DateRange
    ) -> Optional[Room]:
        if not candidates:
            return None
        return min(candidates, key=lambda room: room.nightly_rate.amount)


ALLOCATION_STRATEGIES = {
    FirstAvailableStrategy.name: FirstAvailableStrategy,
    LowestRateStrategy.name: LowestRateStrategy,
}
