from typing import Optional

from .booking.application import ReservationEngine
from .booking.domain import ALLOCATION_STRATEGIES
from .booking.infrastructure import (
    ConsoleLogger,
    CsvBookingExporter,
    InMemoryBookingLedger,
    InMemoryRoomCatalog,
)
from .booking.interfaces import IdGenerator, ILogger
from .config import ReservationSettings
from .shared_kernel import generate_id


def bootstrap_app(
    settings: Optional[ReservationSettings] = None,
    id_generator: IdGenerator = generate_id,
    logger: Optional[ILogger] = None,
):
    """Создает и настраивает все компоненты приложения."""
    settings = settings or ReservationSettings()
    logger = logger or ConsoleLogger(level=settings.log_level)

    # 1. Каталог номеров и пустой журнал бронирований
    catalog = InMemoryRoomCatalog(settings.build_rooms())
    ledger = InMemoryBookingLedger()

    # 2. Движок, владеющий каталогом и журналом
    engine = ReservationEngine(
        catalog=catalog,
        ledger=ledger,
        id_generator=id_generator,
        allocation=ALLOCATION_STRATEGIES[settings.allocation](),
        logger=logger,
    )

    # 3. Выгрузка активных бронирований (например, при выходе из приложения)
    exporter = CsvBookingExporter(str(settings.export_path), logger=logger)

    return {
        "engine": engine,
        "exporter": exporter,
        "settings": settings,
    }
