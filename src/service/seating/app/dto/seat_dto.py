from datetime import datetime
from enum import StrEnum
from typing import Optional

import attrs

from src.service.seating.domain.enum.seat_status import SeatStatus


class SeatFormat(StrEnum):
    STORAGE = 'storage'
    VENUE = 'venue'
    UI = 'ui'


@attrs.frozen
class SeatStatusUpdate:
    seat_id: str
    status: SeatStatus = attrs.field(converter=SeatStatus)
    hold_expiry: Optional[datetime] = None


@attrs.define
class SeatStatistics:
    """Availability and revenue summary of a seat list."""

    total: int = 0
    available: int = 0
    selected: int = 0
    sold: int = 0
    held: int = 0
    reserved: int = 0
    total_revenue: float = 0.0
    average_price: float = 0.0

    def count(self, status: SeatStatus) -> int:
        return getattr(self, status.value)
