"""
Движок бронирования номеров отеля.
"""

from .bootstrap import bootstrap_app
from .booking.application import (
    BookingError,
    BookingRecord,
    BookingResult,
    BookingView,
    ReservationEngine,
)
from .config import ReservationSettings, RoomSeed

__all__ = [
    "bootstrap_app",
    "BookingError",
    "BookingRecord",
    "BookingResult",
    "BookingView",
    "ReservationEngine",
    "ReservationSettings",
    "RoomSeed",
]
