"""
External seat record shapes.

- StorageSeatRecord: seating-chart row as persisted by the inventory store
- VenueLayoutSeatRecord: point placed by the venue-layout authoring tool
- SeatViewRecord: seat as consumed by the interactive selection UI

Records re-validate on every ``model_validate`` so an instance built with
``model_construct`` cannot slip past an adapter's validation.
"""

from datetime import datetime
from typing import Annotated, Any, List, Optional

import orjson
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.table_type import TableType
from src.service.seating.domain.enum.view_quality import ViewQuality


Percentage = Annotated[float, Field(ge=0, le=100, strict=True)]
Price = Annotated[float, Field(ge=0, strict=True)]
NonEmptyStr = Annotated[str, Field(min_length=1)]


class StorageSeatMetadata(BaseModel):
    """
    Shape of the metadata keys the storage adapter maps onto seat fields.

    Only value types are checked: an unknown status, view quality or table
    type string, or an unparseable hold expiry, is read back as absent.
    Keys not listed here are custom properties and are not checked.
    """

    model_config = ConfigDict(extra='allow')

    amenities: Optional[List[StrictStr]] = None
    view_quality: Optional[StrictStr] = Field(default=None, alias='viewQuality')
    table_id: Optional[StrictStr] = Field(default=None, alias='tableId')
    table_type: Optional[StrictStr] = Field(default=None, alias='tableType')
    table_capacity: Optional[StrictInt] = Field(default=None, alias='tableCapacity')
    group_size: Optional[StrictInt] = Field(default=None, alias='groupSize')
    status: Optional[StrictStr] = None
    hold_expiry: Optional[StrictStr] = Field(default=None, alias='holdExpiry')
    session_id: Optional[StrictStr] = Field(default=None, alias='sessionId')


class StorageSeatRecord(BaseModel):
    model_config = ConfigDict(extra='ignore', revalidate_instances='always')

    id: NonEmptyStr
    seating_chart_id: str = ''
    seat_category_id: Optional[str] = None
    section: Optional[str] = None
    row_label: Optional[str] = None
    seat_number: Optional[str] = None
    seat_identifier: NonEmptyStr
    x_position: Percentage
    y_position: Percentage
    rotation: float = 0
    base_price: Price
    current_price: Optional[Price] = None
    is_available: StrictBool
    is_accessible: StrictBool
    is_premium: StrictBool
    notes: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator('metadata', mode='before')
    @classmethod
    def decode_metadata(cls, v: Any) -> Any:
        # JSON columns come back as text from some drivers
        if v is None:
            return {}
        if isinstance(v, (str, bytes)):
            try:
                return orjson.loads(v)
            except orjson.JSONDecodeError as e:
                raise ValueError(f'metadata is not valid JSON: {e}') from e
        return v

    @field_validator('metadata')
    @classmethod
    def check_seat_metadata(cls, v: dict[str, Any]) -> dict[str, Any]:
        try:
            StorageSeatMetadata.model_validate(v)
        except ValidationError as e:
            fields = ', '.join(str(err['loc'][0]) for err in e.errors())
            raise ValueError(f'metadata has invalid seat fields: {fields}') from e
        return v


class VenueLayoutSeatRecord(BaseModel):
    model_config = ConfigDict(
        extra='ignore',
        populate_by_name=True,
        revalidate_instances='always',
        json_schema_extra={
            'example': {
                'id': 'seat-1',
                'x': 42.5,
                'y': 61.0,
                'seatNumber': '12',
                'priceCategory': 'vip',
                'isADA': False,
                'price': 120.0,
            }
        },
    )

    id: NonEmptyStr
    x: Percentage
    y: Percentage
    seat_number: NonEmptyStr = Field(alias='seatNumber')
    price_category: NonEmptyStr = Field(alias='priceCategory')
    is_ada: StrictBool = Field(alias='isADA')
    price: Price
    row: Optional[str] = None
    section: Optional[str] = None
    is_premium: StrictBool = Field(default=False, alias='isPremium')


class SeatViewRecord(BaseModel):
    model_config = ConfigDict(
        extra='ignore',
        populate_by_name=True,
        revalidate_instances='always',
        json_schema_extra={
            'example': {
                'id': 'seat-1',
                'x': 42.5,
                'y': 61.0,
                'seatNumber': '12',
                'row': 'C',
                'section': 'Orchestra',
                'price': 95.0,
                'basePrice': 120.0,
                'category': 'vip',
                'categoryColor': '#FFD700',
                'isADA': False,
                'status': 'available',
                'isPremium': True,
            }
        },
    )

    id: NonEmptyStr
    x: Percentage
    y: Percentage
    seat_number: NonEmptyStr = Field(alias='seatNumber')
    row: Optional[str] = None
    section: Optional[str] = None
    price: Price
    base_price: Optional[Price] = Field(default=None, alias='basePrice')
    category: NonEmptyStr
    category_color: NonEmptyStr = Field(alias='categoryColor')
    is_ada: StrictBool = Field(alias='isADA')
    status: SeatStatus
    hold_expiry: Optional[datetime] = Field(default=None, alias='holdExpiry')
    amenities: Optional[List[str]] = None
    view_quality: Optional[ViewQuality] = Field(default=None, alias='viewQuality')
    table_id: Optional[str] = Field(default=None, alias='tableId')
    table_type: Optional[TableType] = Field(default=None, alias='tableType')
    table_capacity: Optional[int] = Field(default=None, alias='tableCapacity')
    group_size: Optional[int] = Field(default=None, alias='groupSize')
    is_premium: StrictBool = Field(default=False, alias='isPremium')
