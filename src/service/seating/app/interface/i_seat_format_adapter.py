"""
Seat Format Adapter Port

Converts between the canonical SeatEntity and one external record shape.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Iterable, List, Mapping, Optional, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.entity.seat_entity import SeatEntity


T = TypeVar('T', bound=BaseModel)

RawSeat = Mapping[str, Any] | BaseModel


class ISeatFormatAdapter(ABC, Generic[T]):
    """
    Subclasses implement the two single-record conversions. ``to_domain``
    assumes a record that already passed validation; the array helpers
    validate first and drop whatever fails, they never raise.
    """

    record_type: ClassVar[type[BaseModel]]

    @abstractmethod
    def from_domain(self, seat: SeatEntity) -> T:
        pass

    @abstractmethod
    def to_domain(self, record: T) -> SeatEntity:
        pass

    def parse(self, raw: RawSeat) -> Optional[T]:
        """Validated record, or None when ``raw`` does not fit this shape."""
        try:
            return self.record_type.model_validate(raw)  # type: ignore[return-value]
        except ValidationError as e:
            Logger.base.debug(
                f'[SEAT_ADAPTER] {type(self).__name__} dropped record: {e.error_count()} errors'
            )
            return None

    def validate_conversion(self, raw: RawSeat) -> bool:
        return self.parse(raw) is not None

    def from_domain_array(self, seats: Iterable[SeatEntity]) -> List[T]:
        return [self.from_domain(seat) for seat in seats]

    def to_domain_array(self, raws: Sequence[RawSeat]) -> List[SeatEntity]:
        seats = []
        for raw in raws:
            record = self.parse(raw)
            if record is not None:
                seats.append(self.to_domain(record))
        return seats
