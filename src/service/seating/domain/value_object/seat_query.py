from typing import Optional

import attrs

from src.service.seating.domain.enum.seat_status import SeatStatus


@attrs.frozen
class PriceModifiers:
    dynamic_pricing: Optional[float] = None  # Multiplier
    discounts: Optional[float] = None  # Flat amount subtracted after the multiplier


@attrs.frozen
class PriceRange:
    min_price: float
    max_price: float

    def contains(self, price: float) -> bool:
        return self.min_price <= price <= self.max_price


@attrs.frozen
class SeatSearchCriteria:
    """Filters for ``SeatDomain.find_seats``; every supplied field must match."""

    status: Optional[SeatStatus] = attrs.field(
        default=None, converter=attrs.converters.optional(SeatStatus)
    )
    section: Optional[str] = None
    price_range: Optional[PriceRange] = None
    is_ada: Optional[bool] = None
    is_premium: Optional[bool] = None
    is_available: Optional[bool] = None


@attrs.frozen
class AdjacencyPreferences:
    section: Optional[str] = None
    max_price: Optional[float] = None
    require_ada: bool = False
