"""Seating Domain Enums"""

from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.table_type import TableType
from src.service.seating.domain.enum.view_quality import ViewQuality

__all__ = ['SeatStatus', 'TableType', 'ViewQuality']
