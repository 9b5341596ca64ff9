"""
Venue Layout Seat Adapter

Authoring records carry only what a layout author sets when placing a
seat on the venue image. They have no sale state, so every seat read from
one is available, and the category color is looked up by category name.
"""

from src.service.seating.app.interface.i_seat_format_adapter import ISeatFormatAdapter
from src.service.seating.domain.category_palette import CategoryPalette, category_palette
from src.service.seating.domain.entity.seat_entity import (
    SeatAvailability,
    SeatCoordinates,
    SeatEntity,
    SeatFeatures,
    SeatPricing,
)
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.driven_adapter.schema.seat_record_schema import VenueLayoutSeatRecord


class VenueLayoutSeatAdapter(ISeatFormatAdapter[VenueLayoutSeatRecord]):
    record_type = VenueLayoutSeatRecord

    def __init__(self, *, palette: CategoryPalette = category_palette) -> None:
        self.palette = palette

    def from_domain(self, seat: SeatEntity) -> VenueLayoutSeatRecord:
        return VenueLayoutSeatRecord(
            id=seat.id,
            x=seat.coordinates.x,
            y=seat.coordinates.y,
            seat_number=seat.seat_number,
            price_category=seat.pricing.category,
            is_ada=seat.features.is_ada,
            price=seat.pricing.base_price,
            row=seat.row,
            section=seat.section,
            is_premium=seat.features.is_premium,
        )

    def to_domain(self, record: VenueLayoutSeatRecord) -> SeatEntity:
        return SeatEntity(
            id=record.id,
            identifier=record.seat_number,
            coordinates=SeatCoordinates(x=record.x, y=record.y),
            seat_number=record.seat_number,
            section=record.section,
            row=record.row,
            pricing=SeatPricing(
                base_price=record.price,
                category=record.price_category,
                category_color=self.palette.color_for(record.price_category),
            ),
            status=SeatStatus.AVAILABLE,
            availability=SeatAvailability(is_available=True),
            features=SeatFeatures(is_ada=record.is_ada, is_premium=record.is_premium),
        )


venue_layout_seat_adapter = VenueLayoutSeatAdapter()
