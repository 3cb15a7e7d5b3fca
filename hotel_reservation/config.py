"""
Настройки движка бронирования.

Загружаются из JSON-файла или создаются со значениями по умолчанию.
Переменные окружения не используются.
"""

import json
from decimal import Decimal
from pathlib import Path
from typing import List, Literal, Union

from pydantic import BaseModel, Field, field_validator

from .booking.domain import Room
from .shared_kernel import DEFAULT_CURRENCY, Money, RoomCategory


class RoomSeed(BaseModel):
    """Описание номера для начального заполнения каталога."""

    number: int = Field(..., gt=0)
    category: str
    nightly_rate: Decimal = Field(..., gt=0)

    @field_validator("category", mode="before")
    @classmethod
    def category_label(cls, v):
        return v.value if isinstance(v, RoomCategory) else v

    def to_room(self, currency: str) -> Room:
        return Room(
            number=self.number,
            category=self.category,
            nightly_rate=Money(amount=self.nightly_rate, currency=currency),
        )


def default_rooms() -> List[RoomSeed]:
    """Каталог по умолчанию: по одному номеру каждой категории."""
    return [
        RoomSeed(number=101, category=RoomCategory.STANDARD, nightly_rate=Decimal("1000")),
        RoomSeed(number=102, category=RoomCategory.DELUXE, nightly_rate=Decimal("1500")),
        RoomSeed(number=103, category=RoomCategory.SUITE, nightly_rate=Decimal("2000")),
    ]


class ReservationSettings(BaseModel):
    """Настройки приложения."""

    rooms: List[RoomSeed] = Field(default_factory=default_rooms)
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)
    export_path: Path = Path("bookings.csv")
    allocation: Literal["first_available", "lowest_rate"] = "first_available"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    def build_rooms(self) -> List[Room]:
        return [seed.to_room(self.currency) for seed in self.rooms]

    @classmethod
    def from_json_file(cls, file_path: Union[str, Path]) -> "ReservationSettings":
        """Загружает настройки из JSON-файла. Если файла нет, берутся значения по умолчанию."""
        path = Path(file_path)
        if not path.exists():
            return cls()

        with open(path, "r", encoding="utf-8") as f:
            raw_data = f.read()

        if not raw_data.strip():
            return cls()

        return cls.model_validate(json.loads(raw_data))
