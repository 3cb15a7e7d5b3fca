"""
Тесты для доменной модели контекста бронирования.
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from hotel_reservation.booking.domain import (
    ALLOCATION_STRATEGIES,
    Booking,
    FirstAvailableStrategy,
    Guest,
    LowestRateStrategy,
    Room,
)
from hotel_reservation.shared_kernel import DateRange, Money, RoomCategory


@pytest.fixture
def period() -> DateRange:
    return DateRange(check_in=date(2024, 1, 1), check_out=date(2024, 1, 4))


@pytest.fixture
def standard_room() -> Room:
    return Room(
        number=101, category="Standard", nightly_rate=Money(amount=Decimal("1000"))
    )


class TestRoom:
    """Тесты для сущности Room."""

    def test_category_enum_stored_as_label(self):
        room = Room(
            number=201,
            category=RoomCategory.SUITE,
            nightly_rate=Money(amount=Decimal("2000")),
        )
        assert room.category == "Suite"

    def test_custom_category_allowed(self):
        room = Room(
            number=301, category="Penthouse", nightly_rate=Money(amount=Decimal("9000"))
        )
        assert room.category == "Penthouse"

    @pytest.mark.parametrize("number", [0, -5])
    def test_room_number_must_be_positive(self, number):
        with pytest.raises(ValidationError):
            Room(number=number, category="Standard", nightly_rate=Money(amount=Decimal("1")))

    def test_rate_must_be_positive(self):
        with pytest.raises(ValidationError, match="Стоимость ночи"):
            Room(number=1, category="Standard", nightly_rate=Money(amount=Decimal("0")))

    def test_blank_category_rejected(self):
        with pytest.raises(ValidationError):
            Room(number=1, category="  ", nightly_rate=Money(amount=Decimal("1")))


class TestGuest:
    """Тесты для Guest."""

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            Guest(name=" ", email="guest@example.com")

    def test_email_is_not_validated_beyond_non_empty(self):
        assert Guest(name="Анна", email="anna").email == "anna"


class TestBooking:
    """Тесты для агрегата Booking."""

    def test_create_references_room_by_number(self, standard_room, period):
        guest = Guest(name="Иван", email="ivan@example.com")
        booking = Booking.create("BK-1", standard_room, guest, period)

        assert booking.room_number == 101
        assert booking.guest == guest
        assert booking.period == period

    def test_total_cost_is_nights_times_rate(self, standard_room, period):
        booking = Booking.create(
            "BK-1", standard_room, Guest(name="Иван", email="ivan@example.com"), period
        )

        assert booking.nights == 3
        assert booking.total_cost(standard_room.nightly_rate) == Money(
            amount=Decimal("3000")
        )

    def test_booking_is_read_only(self, standard_room, period):
        booking = Booking.create(
            "BK-1", standard_room, Guest(name="Иван", email="ivan@example.com"), period
        )
        with pytest.raises(ValidationError):
            booking.room_number = 102


class TestAllocationStrategies:
    """Тесты для политик выбора номера."""

    @pytest.fixture
    def candidates(self):
        return [
            Room(number=11, category="Deluxe", nightly_rate=Money(amount=Decimal("1800"))),
            Room(number=12, category="Deluxe", nightly_rate=Money(amount=Decimal("1500"))),
            Room(number=13, category="Deluxe", nightly_rate=Money(amount=Decimal("1500"))),
        ]

    def test_first_available_keeps_catalog_order(self, candidates, period):
        assert FirstAvailableStrategy().pick_room(candidates, period).number == 11

    def test_lowest_rate_breaks_ties_by_catalog_order(self, candidates, period):
        assert LowestRateStrategy().pick_room(candidates, period).number == 12

    @pytest.mark.parametrize("strategy", list(ALLOCATION_STRATEGIES.values()))
    def test_no_candidates_yields_none(self, strategy, period):
        assert strategy().pick_room([], period) is None
