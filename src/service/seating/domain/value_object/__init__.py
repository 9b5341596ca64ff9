"""Seating Domain Value Objects"""

from src.service.seating.domain.value_object.canvas_geometry import (
    OUT_OF_BOUNDS,
    CanvasTransform,
    ClientRect,
    CoordinateValidation,
    ImageFit,
    Point,
    Size,
)
from src.service.seating.domain.value_object.seat_query import (
    AdjacencyPreferences,
    PriceModifiers,
    PriceRange,
    SeatSearchCriteria,
)

__all__ = [
    'OUT_OF_BOUNDS',
    'AdjacencyPreferences',
    'CanvasTransform',
    'ClientRect',
    'CoordinateValidation',
    'ImageFit',
    'Point',
    'PriceModifiers',
    'PriceRange',
    'SeatSearchCriteria',
    'Size',
]
