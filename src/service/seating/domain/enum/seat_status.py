"""
Seat Status Enum - Domain Value Object

Closed set of sale states a seat can be in. The availability boolean carried
by storage records is derived from this, never the other way round.
"""

from enum import StrEnum


class SeatStatus(StrEnum):
    AVAILABLE = 'available'
    SELECTED = 'selected'
    SOLD = 'sold'
    RESERVED = 'reserved'
    HELD = 'held'

    @classmethod
    def parse(cls, value: object) -> 'SeatStatus | None':
        """Return the matching status, or None for anything outside the set."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None

    @property
    def carries_hold(self) -> bool:
        return self in (SeatStatus.HELD, SeatStatus.RESERVED)
