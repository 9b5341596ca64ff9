"""
Seating core: canonical seat model, format adapters and canvas coordinates.
"""

from src.service.seating.app.dto.seat_dto import SeatFormat, SeatStatistics, SeatStatusUpdate
from src.service.seating.app.seat_adapter_facade import SeatAdapterFacade, seat_adapter_facade
from src.service.seating.domain import canvas_coordinate
from src.service.seating.domain.entity.seat_category_entity import SeatCategoryEntity
from src.service.seating.domain.entity.seat_entity import SeatEntity
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.seat_domain import SeatDomain
from src.service.seating.domain.seat_group_finder import SeatGroupFinder

__all__ = [
    'SeatAdapterFacade',
    'SeatCategoryEntity',
    'SeatDomain',
    'SeatEntity',
    'SeatFormat',
    'SeatGroupFinder',
    'SeatStatistics',
    'SeatStatus',
    'SeatStatusUpdate',
    'canvas_coordinate',
    'seat_adapter_facade',
]
