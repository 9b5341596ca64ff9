"""
Storage Seat Adapter

Flat seating-chart rows: one column per scalar, plus a metadata map for
everything without a column of its own. The map is split into canonical
fields on read and merged back on write; keys this adapter does not own
round-trip untouched as custom properties.
"""

from datetime import datetime
from enum import StrEnum
from typing import Any, Optional

from src.platform.config.core_setting import settings
from src.service.seating.app.interface.i_seat_format_adapter import ISeatFormatAdapter
from src.service.seating.domain.category_palette import CategoryPalette, category_palette
from src.service.seating.domain.entity.seat_entity import (
    SeatAvailability,
    SeatCoordinates,
    SeatEntity,
    SeatFeatures,
    SeatGrouping,
    SeatMetadata,
    SeatPricing,
)
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.table_type import TableType
from src.service.seating.domain.enum.view_quality import ViewQuality
from src.service.seating.domain.seat_domain import as_utc
from src.service.seating.driven_adapter.schema.seat_record_schema import StorageSeatRecord


class MetadataKey:
    AMENITIES = 'amenities'
    VIEW_QUALITY = 'viewQuality'
    TABLE_ID = 'tableId'
    TABLE_TYPE = 'tableType'
    TABLE_CAPACITY = 'tableCapacity'
    GROUP_SIZE = 'groupSize'
    STATUS = 'status'
    HOLD_EXPIRY = 'holdExpiry'
    SESSION_ID = 'sessionId'


KNOWN_METADATA_KEYS = frozenset(
    value for name, value in vars(MetadataKey).items() if not name.startswith('_')
)


class StorageSeatAdapter(ISeatFormatAdapter[StorageSeatRecord]):
    record_type = StorageSeatRecord

    def __init__(
        self, *, seating_chart_id: str = '', palette: CategoryPalette = category_palette
    ) -> None:
        self.seating_chart_id = seating_chart_id
        self.palette = palette

    def from_domain(self, seat: SeatEntity) -> StorageSeatRecord:
        return StorageSeatRecord(
            id=seat.id,
            seating_chart_id=self.seating_chart_id,
            seat_category_id=seat.pricing.category,
            section=seat.section,
            row_label=seat.row,
            seat_number=seat.seat_number,
            seat_identifier=seat.identifier,
            x_position=seat.coordinates.x,
            y_position=seat.coordinates.y,
            rotation=seat.coordinates.rotation or 0,
            base_price=seat.pricing.base_price,
            current_price=seat.pricing.current_price,
            is_available=seat.availability.is_available,
            is_accessible=seat.features.is_ada,
            is_premium=seat.features.is_premium,
            notes=seat.metadata.notes if seat.metadata else None,
            metadata=self._merge_metadata(seat),
        )

    def to_domain(self, record: StorageSeatRecord) -> SeatEntity:
        metadata = record.metadata
        status = self._map_status(metadata.get(MetadataKey.STATUS), record.is_available)
        category = record.seat_category_id or settings.DEFAULT_SEAT_CATEGORY

        return SeatEntity(
            id=record.id,
            identifier=record.seat_identifier,
            coordinates=SeatCoordinates(
                x=record.x_position, y=record.y_position, rotation=record.rotation
            ),
            section=record.section,
            row=record.row_label,
            seat_number=record.seat_number or record.seat_identifier,
            pricing=SeatPricing(
                base_price=record.base_price,
                current_price=record.current_price,
                category=category,
                category_color=self.palette.color_for(category),
            ),
            status=status,
            availability=SeatAvailability(
                # A sold seat is never available, whatever the column says
                is_available=record.is_available and status != SeatStatus.SOLD,
                hold_expiry=self._parse_timestamp(metadata.get(MetadataKey.HOLD_EXPIRY)),
                session_id=metadata.get(MetadataKey.SESSION_ID),
            ),
            features=SeatFeatures(
                is_ada=record.is_accessible,
                is_premium=record.is_premium,
                amenities=metadata.get(MetadataKey.AMENITIES),
                view_quality=self._parse_enum(ViewQuality, metadata.get(MetadataKey.VIEW_QUALITY)),
            ),
            grouping=self._split_grouping(metadata),
            metadata=SeatMetadata(
                notes=record.notes,
                custom_properties={
                    key: value for key, value in metadata.items() if key not in KNOWN_METADATA_KEYS
                },
            ),
        )

    @staticmethod
    def _merge_metadata(seat: SeatEntity) -> dict[str, Any]:
        metadata: dict[str, Any] = dict(seat.metadata.custom_properties) if seat.metadata else {}
        grouping = seat.grouping
        hold_expiry = seat.active_hold_expiry

        owned = {
            MetadataKey.AMENITIES: seat.features.amenities,
            MetadataKey.VIEW_QUALITY: seat.features.view_quality,
            MetadataKey.TABLE_ID: grouping.table_id if grouping else None,
            MetadataKey.TABLE_TYPE: grouping.table_type if grouping else None,
            MetadataKey.TABLE_CAPACITY: grouping.table_capacity if grouping else None,
            MetadataKey.GROUP_SIZE: grouping.group_size if grouping else None,
            MetadataKey.STATUS: seat.status,
            MetadataKey.HOLD_EXPIRY: as_utc(hold_expiry).isoformat() if hold_expiry else None,
            MetadataKey.SESSION_ID: seat.availability.session_id,
        }
        for key, value in owned.items():
            if value is None:
                metadata.pop(key, None)
            else:
                metadata[key] = value.value if isinstance(value, StrEnum) else value
        return metadata

    def _split_grouping(self, metadata: dict[str, Any]) -> Optional[SeatGrouping]:
        table_id = metadata.get(MetadataKey.TABLE_ID)
        if not table_id:
            return None
        return SeatGrouping(
            table_id=table_id,
            table_type=self._parse_enum(TableType, metadata.get(MetadataKey.TABLE_TYPE)),
            table_capacity=metadata.get(MetadataKey.TABLE_CAPACITY),
            group_size=metadata.get(MetadataKey.GROUP_SIZE),
        )

    @staticmethod
    def _map_status(metadata_status: Any, is_available: bool) -> SeatStatus:
        status = SeatStatus.parse(metadata_status)
        if status is not None:
            return status
        return SeatStatus.AVAILABLE if is_available else SeatStatus.SOLD

    @staticmethod
    def _parse_enum(enum_type: Any, value: Any) -> Any:
        try:
            return enum_type(value) if value is not None else None
        except (ValueError, TypeError):
            return None

    @staticmethod
    def _parse_timestamp(value: Any) -> Optional[datetime]:
        if not isinstance(value, str):
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None


storage_seat_adapter = StorageSeatAdapter()
