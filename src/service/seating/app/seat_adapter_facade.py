"""
Seat Adapter Facade

Single entry point for seat format conversions. Every conversion goes
through the canonical SeatEntity (source adapter -> domain -> target
adapter), so no pair of formats knows about the other.
"""

from typing import Collection, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.seat_dto import SeatFormat, SeatStatistics, SeatStatusUpdate
from src.service.seating.app.interface.i_seat_format_adapter import ISeatFormatAdapter, RawSeat
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.seat_domain import SeatDomain
from src.service.seating.domain.seating_exception import UnknownSeatFormatError
from src.service.seating.domain.value_object.seat_query import (
    AdjacencyPreferences,
    PriceModifiers,
    SeatSearchCriteria,
)
from src.service.seating.driven_adapter.schema.seat_record_schema import (
    SeatViewRecord,
    StorageSeatRecord,
    VenueLayoutSeatRecord,
)
from src.service.seating.driven_adapter.seat_view_adapter import SeatViewAdapter, seat_view_adapter
from src.service.seating.driven_adapter.storage_seat_adapter import (
    StorageSeatAdapter,
    storage_seat_adapter,
)
from src.service.seating.driven_adapter.venue_layout_seat_adapter import (
    VenueLayoutSeatAdapter,
    venue_layout_seat_adapter,
)


class SeatAdapterFacade:
    def __init__(
        self,
        *,
        storage_adapter: StorageSeatAdapter = storage_seat_adapter,
        venue_adapter: VenueLayoutSeatAdapter = venue_layout_seat_adapter,
        view_adapter: SeatViewAdapter = seat_view_adapter,
    ) -> None:
        self.storage_adapter = storage_adapter
        self.venue_adapter = venue_adapter
        self.view_adapter = view_adapter
        self._adapters: Mapping[SeatFormat, ISeatFormatAdapter] = {
            SeatFormat.STORAGE: storage_adapter,
            SeatFormat.VENUE: venue_adapter,
            SeatFormat.UI: view_adapter,
        }

    def get_adapter(self, seat_format: SeatFormat | str) -> ISeatFormatAdapter:
        try:
            return self._adapters[SeatFormat(seat_format)]
        except (ValueError, TypeError, KeyError):
            raise UnknownSeatFormatError(seat_format)

    # ===== Format conversions =====

    def convert(
        self, seats: Sequence[RawSeat], source: SeatFormat | str, target: SeatFormat | str
    ) -> List[BaseModel]:
        source_adapter = self.get_adapter(source)
        target_adapter = self.get_adapter(target)
        return target_adapter.from_domain_array(source_adapter.to_domain_array(seats))

    def venue_to_ui(self, seats: Sequence[RawSeat]) -> List[SeatViewRecord]:
        return self.view_adapter.from_domain_array(self.venue_adapter.to_domain_array(seats))

    def ui_to_venue(self, seats: Sequence[RawSeat]) -> List[VenueLayoutSeatRecord]:
        return self.venue_adapter.from_domain_array(self.view_adapter.to_domain_array(seats))

    def storage_to_ui(self, seats: Sequence[RawSeat]) -> List[SeatViewRecord]:
        return self.view_adapter.from_domain_array(self.storage_adapter.to_domain_array(seats))

    def ui_to_storage(self, seats: Sequence[RawSeat]) -> List[StorageSeatRecord]:
        return self.storage_adapter.from_domain_array(self.view_adapter.to_domain_array(seats))

    def venue_to_storage(self, seats: Sequence[RawSeat]) -> List[StorageSeatRecord]:
        return self.storage_adapter.from_domain_array(self.venue_adapter.to_domain_array(seats))

    def storage_to_venue(self, seats: Sequence[RawSeat]) -> List[VenueLayoutSeatRecord]:
        return self.venue_adapter.from_domain_array(self.storage_adapter.to_domain_array(seats))

    # ===== Domain operations over UI seats =====

    @Logger.io
    def validate_and_clean_seats(
        self, seats: Sequence[RawSeat], source_format: SeatFormat | str
    ) -> List[SeatViewRecord]:
        """Keep only the seats that convert cleanly, returned in UI shape."""
        try:
            source_adapter = self.get_adapter(source_format)
        except UnknownSeatFormatError as e:
            Logger.base.warning(f'[SEAT_FACADE] {e.message}, returning no seats')
            return []

        domain_seats = source_adapter.to_domain_array(seats)
        if len(domain_seats) != len(seats):
            Logger.base.info(
                f'[SEAT_FACADE] Dropped {len(seats) - len(domain_seats)} of {len(seats)} '
                f'{source_format} seats failing validation'
            )
        return self.view_adapter.from_domain_array(domain_seats)

    @Logger.io
    def find_seats(
        self, seats: Sequence[RawSeat], criteria: SeatSearchCriteria
    ) -> List[SeatViewRecord]:
        domain_seats = self.view_adapter.to_domain_array(seats)
        return self.view_adapter.from_domain_array(SeatDomain.find_seats(domain_seats, criteria))

    @Logger.io
    def calculate_total_price(
        self,
        seats: Sequence[RawSeat],
        selected_seat_ids: Collection[str],
        modifiers: Optional[PriceModifiers] = None,
    ) -> float:
        selected_seat_ids = set(selected_seat_ids)
        return sum(
            (
                SeatDomain.calculate_price(seat, modifiers)
                for seat in self.view_adapter.to_domain_array(seats)
                if seat.id in selected_seat_ids
            ),
            0.0,
        )

    def find_adjacent_seats(
        self,
        seats: Sequence[RawSeat],
        group_size: int,
        preferences: Optional[AdjacencyPreferences] = None,
    ) -> List[List[SeatViewRecord]]:
        return self.view_adapter.find_available_adjacent_seats(seats, group_size, preferences)

    @Logger.io
    def update_seat_statuses(
        self, seats: Sequence[SeatViewRecord], updates: Sequence[SeatStatusUpdate]
    ) -> List[SeatViewRecord]:
        updates_by_id: dict[str, SeatStatusUpdate] = {}
        for update in updates:
            # First update for a seat wins
            updates_by_id.setdefault(update.seat_id, update)

        result = []
        for seat in seats:
            update = updates_by_id.get(seat.id)
            if update is None:
                result.append(seat)
                continue
            result.append(
                seat.model_copy(update={'status': update.status, 'hold_expiry': update.hold_expiry})
            )
        return result

    @Logger.io
    def get_seat_statistics(self, seats: Sequence[SeatViewRecord]) -> SeatStatistics:
        stats = SeatStatistics(total=len(seats))
        if not seats:
            return stats

        total_price = 0.0
        for seat in seats:
            status = SeatStatus(seat.status)
            setattr(stats, status.value, stats.count(status) + 1)
            if status == SeatStatus.SOLD:
                stats.total_revenue += seat.price
            total_price += seat.price

        stats.average_price = total_price / stats.total
        return stats


seat_adapter_facade = SeatAdapterFacade()
