"""
Seat Group Finder

Finds runs of consecutively numbered available seats for group bookings.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.entity.seat_entity import SeatEntity
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.value_object.seat_query import AdjacencyPreferences


RowKey = Tuple[Optional[str], Optional[str]]


class SeatGroupFinder:
    @Logger.io
    def find_available_adjacent_seats(
        self,
        seats: Sequence[SeatEntity],
        group_size: int,
        preferences: Optional[AdjacencyPreferences] = None,
    ) -> List[List[SeatEntity]]:
        """
        Return every window of ``group_size`` available seats that share a
        (section, row) and carry strictly consecutive seat numbers.

        Overlapping windows are all returned; the caller picks one.
        """
        if group_size < 1:
            return []

        candidates = [seat for seat in seats if self._is_candidate(seat, preferences)]
        rows = self._group_by_row(candidates)

        adjacent_groups: List[List[SeatEntity]] = []
        for row_seats in rows.values():
            if len(row_seats) < group_size:
                continue

            # Candidates are always numbered
            row_seats.sort(key=lambda s: s.seat_number_value or 0)

            for i in range(len(row_seats) - group_size + 1):
                window = row_seats[i : i + group_size]
                if self._is_continuous_sequence(window):
                    adjacent_groups.append(window)

        Logger.base.debug(
            f'[SEAT_GROUP] {len(adjacent_groups)} runs of {group_size} across {len(rows)} rows'
        )
        return adjacent_groups

    @staticmethod
    def _is_candidate(seat: SeatEntity, preferences: Optional[AdjacencyPreferences]) -> bool:
        if seat.status != SeatStatus.AVAILABLE:
            return False
        # Unnumbered seats cannot be part of a numbered run
        if seat.seat_number_value is None:
            return False
        if preferences is None:
            return True
        if preferences.section is not None and seat.section != preferences.section:
            return False
        if (
            preferences.max_price is not None
            and seat.pricing.effective_price > preferences.max_price
        ):
            return False
        if preferences.require_ada and not seat.features.is_ada:
            return False
        return True

    @staticmethod
    def _group_by_row(seats: Sequence[SeatEntity]) -> Dict[RowKey, List[SeatEntity]]:
        rows: Dict[RowKey, List[SeatEntity]] = {}
        for seat in seats:
            rows.setdefault((seat.section, seat.row), []).append(seat)
        return rows

    @staticmethod
    def _is_continuous_sequence(seats: Sequence[SeatEntity]) -> bool:
        numbers = [seat.seat_number_value or 0 for seat in seats]
        return all(curr == prev + 1 for prev, curr in zip(numbers, numbers[1:]))
