"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Идентификатор бронирования - строковый токен (по умолчанию UUID)
BookingId = str

DEFAULT_CURRENCY = "INR"


def generate_id() -> BookingId:
    """Генерирует новый идентификатор бронирования."""
    return str(uuid4())


class Money(BaseModel):
    """Денежная сумма с валютой."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., ge=0, description="Сумма денег")
    currency: str = Field(
        default=DEFAULT_CURRENCY,
        min_length=3,
        max_length=3,
        description="Код валюты (ISO 4217)",
    )

    @field_validator("currency")
    @classmethod
    def currency_is_upper(cls, v: str) -> str:
        if not v.isalpha() or not v.isupper():
            raise ValueError("Код валюты должен состоять из 3 заглавных букв")
        return v

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            raise TypeError("Можно складывать только объекты Money")
        if self.currency != other.currency:
            raise ValueError("Нельзя складывать разные валюты")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, multiplier: Union[int, Decimal]) -> "Money":
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, Decimal)):
            raise TypeError("Множитель должен быть целым числом или Decimal")
        if multiplier < 0:
            raise ValueError("Множитель не может быть отрицательным")
        return Money(amount=self.amount * multiplier, currency=self.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


class DateRange(BaseModel):
    """Полуоткрытый диапазон дат [check_in, check_out).

    День выезда не считается занятым: новое проживание может начаться
    в тот же день, когда заканчивается предыдущее.
    """

    model_config = ConfigDict(frozen=True)

    check_in: date
    check_out: date

    @model_validator(mode="after")
    def check_out_after_check_in(self) -> "DateRange":
        if self.check_out <= self.check_in:
            raise ValueError("Дата выезда должна быть позже даты заезда")
        return self

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании."""
        return (self.check_out - self.check_in).days

    def overlaps(self, other: "DateRange") -> bool:
        """Проверяет пересечение двух периодов."""
        return self.check_in < other.check_out and other.check_in < self.check_out


class RoomCategory(str, Enum):
    """Стандартные категории номеров.

    Набор расширяемый: каталог сравнивает категории как строки без учета регистра.
    """

    STANDARD = "Standard"
    DELUXE = "Deluxe"
    SUITE = "Suite"


def normalize_category(category: Union[str, RoomCategory]) -> str:
    """Приводит категорию к ключу для сравнения."""
    if isinstance(category, RoomCategory):
        category = category.value
    return category.strip().casefold()


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class DuplicateEntityException(DomainException):
    """Исключение при повторном добавлении сущности с тем же идентификатором."""

    pass
