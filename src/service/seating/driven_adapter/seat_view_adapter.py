"""
Seat View Adapter

Records consumed by the interactive seat-selection UI. Besides the
conversions it carries the record-level operations the UI needs: status
changes, pointer placement and adjacent-group search.
"""

from typing import Collection, List, Optional, Sequence

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seat_format_adapter import ISeatFormatAdapter, RawSeat
from src.service.seating.domain.entity.seat_entity import (
    SeatAvailability,
    SeatCoordinates,
    SeatEntity,
    SeatFeatures,
    SeatGrouping,
    SeatPricing,
)
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.seat_group_finder import SeatGroupFinder
from src.service.seating.domain.value_object.canvas_geometry import OUT_OF_BOUNDS, Point
from src.service.seating.domain.value_object.seat_query import AdjacencyPreferences
from src.service.seating.driven_adapter.schema.seat_record_schema import SeatViewRecord


class SeatViewAdapter(ISeatFormatAdapter[SeatViewRecord]):
    record_type = SeatViewRecord

    def __init__(self, *, group_finder: Optional[SeatGroupFinder] = None) -> None:
        self.group_finder = group_finder or SeatGroupFinder()

    def from_domain(self, seat: SeatEntity) -> SeatViewRecord:
        grouping = seat.grouping
        return SeatViewRecord(
            id=seat.id,
            x=seat.coordinates.x,
            y=seat.coordinates.y,
            seat_number=seat.seat_number,
            row=seat.row,
            section=seat.section,
            price=seat.pricing.effective_price,
            base_price=seat.pricing.base_price,
            category=seat.pricing.category,
            category_color=seat.pricing.category_color,
            is_ada=seat.features.is_ada,
            status=seat.status,
            hold_expiry=seat.active_hold_expiry,
            amenities=seat.features.amenities,
            view_quality=seat.features.view_quality,
            table_id=grouping.table_id if grouping else None,
            table_type=grouping.table_type if grouping else None,
            table_capacity=grouping.table_capacity if grouping else None,
            group_size=grouping.group_size if grouping else None,
            is_premium=seat.features.is_premium,
        )

    def to_domain(self, record: SeatViewRecord) -> SeatEntity:
        base_price = record.base_price if record.base_price is not None else record.price
        return SeatEntity(
            id=record.id,
            identifier=record.seat_number,
            coordinates=SeatCoordinates(x=record.x, y=record.y),
            seat_number=record.seat_number,
            row=record.row,
            section=record.section,
            pricing=SeatPricing(
                base_price=base_price,
                # Price differing from base price is an override
                current_price=record.price if record.price != base_price else None,
                category=record.category,
                category_color=record.category_color,
            ),
            status=record.status,
            availability=SeatAvailability(
                is_available=record.status == SeatStatus.AVAILABLE,
                hold_expiry=record.hold_expiry,
            ),
            features=SeatFeatures(
                is_ada=record.is_ada,
                is_premium=record.is_premium,
                amenities=record.amenities,
                view_quality=record.view_quality,
            ),
            grouping=SeatGrouping(
                table_id=record.table_id,
                table_type=record.table_type,
                table_capacity=record.table_capacity,
                group_size=record.group_size,
            )
            if record.table_id
            else None,
        )

    def update_seat_status(self, record: SeatViewRecord, new_status: SeatStatus) -> SeatViewRecord:
        return record.model_copy(update={'status': SeatStatus(new_status)})

    def update_multiple_seat_status(
        self,
        records: Sequence[SeatViewRecord],
        seat_ids: Collection[str],
        new_status: SeatStatus,
    ) -> List[SeatViewRecord]:
        seat_ids = set(seat_ids)
        return [
            self.update_seat_status(record, new_status) if record.id in seat_ids else record
            for record in records
        ]

    def place_seat(self, record: SeatViewRecord, point: Point) -> SeatViewRecord:
        """Move a seat to a pointer-derived position; out-of-bounds points leave it unchanged."""
        if point == OUT_OF_BOUNDS:
            return record
        return record.model_copy(update={'x': point.x, 'y': point.y})

    @Logger.io
    def find_available_adjacent_seats(
        self,
        raws: Sequence[RawSeat],
        group_size: int,
        preferences: Optional[AdjacencyPreferences] = None,
    ) -> List[List[SeatViewRecord]]:
        records_by_seat: dict[int, SeatViewRecord] = {}
        seats: List[SeatEntity] = []
        for raw in raws:
            record = self.parse(raw)
            if record is None:
                continue
            seat = self.to_domain(record)
            records_by_seat[id(seat)] = record
            seats.append(seat)

        groups = self.group_finder.find_available_adjacent_seats(seats, group_size, preferences)
        return [[records_by_seat[id(seat)] for seat in group] for group in groups]


seat_view_adapter = SeatViewAdapter()
