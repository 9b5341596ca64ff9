from datetime import datetime
import re
from typing import Any, Optional

import attrs

from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.table_type import TableType
from src.service.seating.domain.enum.view_quality import ViewQuality


_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_seat_number(label: Optional[str]) -> Optional[int]:
    """Leading integer of a seat label ('12', '12B' -> 12); None when there is none."""
    if not label:
        return None
    match = _LEADING_INT.match(label)
    return int(match.group(1)) if match else None


@attrs.define
class SeatCoordinates:
    """Position as percentages (0-100) of the venue image width and height."""

    x: float
    y: float
    rotation: Optional[float] = None


@attrs.define
class SeatPricing:
    base_price: float
    category: str
    category_color: str
    current_price: Optional[float] = None

    @property
    def effective_price(self) -> float:
        return self.current_price if self.current_price is not None else self.base_price


@attrs.define
class SeatAvailability:
    is_available: bool = True
    hold_expiry: Optional[datetime] = None
    session_id: Optional[str] = None


@attrs.define
class SeatFeatures:
    is_ada: bool = False
    is_premium: bool = False
    amenities: Optional[list[str]] = None
    view_quality: Optional[ViewQuality] = None


@attrs.define
class SeatGrouping:
    table_id: Optional[str] = None
    table_type: Optional[TableType] = None
    table_capacity: Optional[int] = None
    group_size: Optional[int] = None


@attrs.define
class SeatMetadata:
    notes: Optional[str] = None
    custom_properties: dict[str, Any] = attrs.field(factory=dict)


@attrs.define
class SeatEntity:
    id: str
    identifier: str
    coordinates: SeatCoordinates
    seat_number: str
    pricing: SeatPricing
    status: SeatStatus = SeatStatus.AVAILABLE
    availability: SeatAvailability = attrs.field(factory=SeatAvailability)
    features: SeatFeatures = attrs.field(factory=SeatFeatures)
    section: Optional[str] = None
    row: Optional[str] = None
    grouping: Optional[SeatGrouping] = None
    metadata: Optional[SeatMetadata] = None

    @property
    def seat_number_value(self) -> Optional[int]:
        return parse_seat_number(self.seat_number)

    @property
    def active_hold_expiry(self) -> Optional[datetime]:
        # A hold expiry only means something while the seat is held or reserved
        return self.availability.hold_expiry if self.status.carries_hold else None
