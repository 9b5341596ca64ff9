"""
Seat Domain
Pure seat business rules - no storage, transport or rendering concerns.
"""

from datetime import datetime, timezone
import math
from typing import Any, List, Mapping, Optional, Sequence

import attrs

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.entity.seat_category_entity import SeatCategoryEntity
from src.service.seating.domain.entity.seat_entity import (
    SeatCoordinates,
    SeatEntity,
    SeatPricing,
)
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.value_object.seat_query import (
    PriceModifiers,
    SeatSearchCriteria,
)


def as_utc(moment: datetime) -> datetime:
    """Naive timestamps are treated as UTC so they compare with aware ones."""
    return moment.replace(tzinfo=timezone.utc) if moment.tzinfo is None else moment


class SeatDomain:
    """
    Seat domain service

    Every rule works on the snapshot of seats it is handed. Hold expiry is
    evaluated here, never enforced: claiming a seat belongs to the inventory
    service that owns the data.
    """

    @staticmethod
    def create_seat(
        *,
        id: str,
        identifier: str,
        coordinates: SeatCoordinates,
        pricing: SeatPricing,
        seat_number: str,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> SeatEntity:
        seat = SeatEntity(
            id=id,
            identifier=identifier,
            coordinates=coordinates,
            seat_number=seat_number,
            pricing=pricing,
        )
        return attrs.evolve(seat, **overrides) if overrides else seat

    @staticmethod
    def pricing_for_category(category: SeatCategoryEntity) -> SeatPricing:
        return SeatPricing(
            base_price=category.effective_price,
            category=category.id,
            category_color=category.color,
        )

    @staticmethod
    def calculate_price(seat: SeatEntity, modifiers: Optional[PriceModifiers] = None) -> float:
        price = seat.pricing.effective_price

        if modifiers is not None:
            if modifiers.dynamic_pricing is not None:
                price *= modifiers.dynamic_pricing
            if modifiers.discounts is not None:
                price -= modifiers.discounts

        return max(0.0, price)

    @staticmethod
    def can_select(seat: SeatEntity, now: Optional[datetime] = None) -> bool:
        if seat.status != SeatStatus.AVAILABLE or not seat.availability.is_available:
            return False

        hold_expiry = seat.availability.hold_expiry
        if hold_expiry is None:
            return True

        now = as_utc(now) if now is not None else datetime.now(timezone.utc)
        return as_utc(hold_expiry) > now

    @staticmethod
    def are_adjacent(
        seat_a: SeatEntity, seat_b: SeatEntity, distance_threshold: Optional[float] = None
    ) -> bool:
        """
        Two seats sit next to each other when

        1. they share section and row and their seat numbers differ by one, or
        2. their percentage coordinates are within ``distance_threshold``.
        """
        if seat_a.section == seat_b.section and seat_a.row == seat_b.row:
            number_a = seat_a.seat_number_value
            number_b = seat_b.seat_number_value
            if number_a is not None and number_b is not None and abs(number_a - number_b) == 1:
                return True

        if distance_threshold is None:
            distance_threshold = settings.SEAT_ADJACENCY_DISTANCE_THRESHOLD

        distance = math.hypot(
            seat_a.coordinates.x - seat_b.coordinates.x,
            seat_a.coordinates.y - seat_b.coordinates.y,
        )
        return distance <= distance_threshold

    @staticmethod
    def matches(seat: SeatEntity, criteria: SeatSearchCriteria) -> bool:
        if criteria.status is not None and seat.status != criteria.status:
            return False
        if criteria.section is not None and seat.section != criteria.section:
            return False
        if criteria.is_ada is not None and seat.features.is_ada != criteria.is_ada:
            return False
        if criteria.is_premium is not None and seat.features.is_premium != criteria.is_premium:
            return False
        if (
            criteria.is_available is not None
            and seat.availability.is_available != criteria.is_available
        ):
            return False
        if criteria.price_range is not None and not criteria.price_range.contains(
            seat.pricing.effective_price
        ):
            return False
        return True

    @staticmethod
    @Logger.io
    def find_seats(seats: Sequence[SeatEntity], criteria: SeatSearchCriteria) -> List[SeatEntity]:
        return [seat for seat in seats if SeatDomain.matches(seat, criteria)]
