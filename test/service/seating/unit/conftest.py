"""
Conftest for seating unit tests - pure functions, no external dependencies.

Factories are exposed as fixtures so test modules build seats and raw
records without importing each other.
"""

from datetime import datetime
from typing import Any, Optional

import pytest

from src.service.seating.domain.entity.seat_entity import (
    SeatAvailability,
    SeatCoordinates,
    SeatEntity,
    SeatFeatures,
    SeatPricing,
)
from src.service.seating.domain.enum.seat_status import SeatStatus


def make_seat(
    seat_id: str = 'seat-1',
    *,
    seat_number: str = '1',
    section: Optional[str] = 'A',
    row: Optional[str] = '1',
    x: float = 10.0,
    y: float = 10.0,
    base_price: float = 50.0,
    current_price: Optional[float] = None,
    category: str = 'standard',
    status: SeatStatus = SeatStatus.AVAILABLE,
    is_available: Optional[bool] = None,
    hold_expiry: Optional[datetime] = None,
    is_ada: bool = False,
    is_premium: bool = False,
    **overrides: Any,
) -> SeatEntity:
    """Build a canonical seat; availability follows status unless given."""
    return SeatEntity(
        id=seat_id,
        identifier=f'{row or ""}{seat_number}',
        coordinates=SeatCoordinates(x=x, y=y),
        seat_number=seat_number,
        section=section,
        row=row,
        pricing=SeatPricing(
            base_price=base_price,
            current_price=current_price,
            category=category,
            category_color='#3B82F6',
        ),
        status=status,
        availability=SeatAvailability(
            is_available=status == SeatStatus.AVAILABLE if is_available is None else is_available,
            hold_expiry=hold_expiry,
        ),
        features=SeatFeatures(is_ada=is_ada, is_premium=is_premium),
        **overrides,
    )


def make_view_record(seat_id: str = 'seat-1', **fields: Any) -> dict[str, Any]:
    """Raw UI record as the selection UI sends it (camelCase keys)."""
    record: dict[str, Any] = {
        'id': seat_id,
        'x': 10.0,
        'y': 10.0,
        'seatNumber': '1',
        'row': '1',
        'section': 'A',
        'price': 50.0,
        'category': 'standard',
        'categoryColor': '#3B82F6',
        'isADA': False,
        'status': 'available',
    }
    record.update(fields)
    return record


def make_storage_record(seat_id: str = 'seat-1', **fields: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        'id': seat_id,
        'seating_chart_id': 'chart-1',
        'seat_category_id': 'vip',
        'section': 'A',
        'row_label': '1',
        'seat_number': '1',
        'seat_identifier': 'A1',
        'x_position': 25.0,
        'y_position': 40.0,
        'rotation': 0,
        'base_price': 100.0,
        'is_available': True,
        'is_accessible': False,
        'is_premium': False,
        'metadata': {},
    }
    record.update(fields)
    return record


def make_venue_record(seat_id: str = 'seat-1', **fields: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        'id': seat_id,
        'x': 30.0,
        'y': 70.0,
        'seatNumber': '5',
        'priceCategory': 'premium',
        'isADA': False,
        'price': 80.0,
    }
    record.update(fields)
    return record


@pytest.fixture
def seat_factory():
    return make_seat


@pytest.fixture
def view_record_factory():
    return make_view_record


@pytest.fixture
def storage_record_factory():
    return make_storage_record


@pytest.fixture
def venue_record_factory():
    return make_venue_record
