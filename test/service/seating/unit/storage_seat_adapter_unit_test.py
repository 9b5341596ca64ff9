"""
Unit tests for StorageSeatAdapter

Test Focus:
1. Status derivation: metadata status wins, availability flag is the fallback
2. Metadata split/merge: owned keys become canonical fields, the rest round-trips
3. Validation: malformed rows are dropped by the array helpers, never raised
"""

from datetime import datetime, timezone

import pytest

from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.table_type import TableType
from src.service.seating.domain.enum.view_quality import ViewQuality
from src.service.seating.driven_adapter.schema.seat_record_schema import StorageSeatRecord
from src.service.seating.driven_adapter.storage_seat_adapter import StorageSeatAdapter


@pytest.fixture
def adapter() -> StorageSeatAdapter:
    return StorageSeatAdapter(seating_chart_id='chart-9')


# ==============================================================================
# to_domain
# ==============================================================================


@pytest.mark.unit
class TestStorageToDomain:
    def test_plain_row(self, adapter, storage_record_factory) -> None:
        [seat] = adapter.to_domain_array([storage_record_factory()])

        assert seat.id == 'seat-1'
        assert seat.identifier == 'A1'
        assert (seat.coordinates.x, seat.coordinates.y, seat.coordinates.rotation) == (25, 40, 0)
        assert seat.section == 'A'
        assert seat.row == '1'
        assert seat.pricing.base_price == 100
        assert seat.pricing.category == 'vip'
        assert seat.pricing.category_color == '#FFD700'
        assert seat.status == SeatStatus.AVAILABLE
        assert seat.availability.is_available is True
        assert seat.grouping is None

    def test_unavailable_row_without_status_is_sold(self, adapter, storage_record_factory) -> None:
        [seat] = adapter.to_domain_array([storage_record_factory(is_available=False)])

        assert seat.status == SeatStatus.SOLD
        assert seat.availability.is_available is False

    def test_metadata_status_wins(self, adapter, storage_record_factory) -> None:
        raw = storage_record_factory(
            is_available=True,
            metadata={'status': 'held', 'holdExpiry': '2025-06-01T12:00:00+00:00'},
        )

        [seat] = adapter.to_domain_array([raw])

        assert seat.status == SeatStatus.HELD
        assert seat.availability.hold_expiry == datetime(2025, 6, 1, 12, tzinfo=timezone.utc)

    def test_sold_status_forces_unavailable(self, adapter, storage_record_factory) -> None:
        raw = storage_record_factory(is_available=True, metadata={'status': 'sold'})

        [seat] = adapter.to_domain_array([raw])

        assert seat.status == SeatStatus.SOLD
        assert seat.availability.is_available is False

    def test_unknown_metadata_status_falls_back_to_flag(
        self, adapter, storage_record_factory
    ) -> None:
        raw = storage_record_factory(is_available=False, metadata={'status': 'lost'})

        [seat] = adapter.to_domain_array([raw])

        assert seat.status == SeatStatus.SOLD

    def test_missing_category_uses_default(self, adapter, storage_record_factory) -> None:
        [seat] = adapter.to_domain_array([storage_record_factory(seat_category_id=None)])

        assert seat.pricing.category == 'General'
        assert seat.pricing.category_color == '#6B7280'

    def test_missing_seat_number_uses_identifier(self, adapter, storage_record_factory) -> None:
        [seat] = adapter.to_domain_array([storage_record_factory(seat_number=None)])

        assert seat.seat_number == 'A1'

    def test_metadata_split(self, adapter, storage_record_factory) -> None:
        raw = storage_record_factory(
            metadata={
                'amenities': ['cupholder'],
                'viewQuality': 'excellent',
                'tableId': 't-4',
                'tableType': 'round',
                'tableCapacity': 8,
                'groupSize': 2,
                'sessionId': 'sess-1',
                'sponsor': 'ACME',
            }
        )

        [seat] = adapter.to_domain_array([raw])

        assert seat.features.amenities == ['cupholder']
        assert seat.features.view_quality == ViewQuality.EXCELLENT
        assert seat.grouping.table_id == 't-4'
        assert seat.grouping.table_type == TableType.ROUND
        assert seat.grouping.table_capacity == 8
        assert seat.grouping.group_size == 2
        assert seat.availability.session_id == 'sess-1'
        assert seat.metadata.custom_properties == {'sponsor': 'ACME'}

    def test_unknown_enum_values_are_dropped(self, adapter, storage_record_factory) -> None:
        raw = storage_record_factory(
            metadata={'viewQuality': 'superb', 'tableId': 't-1', 'tableType': 'oval'}
        )

        [seat] = adapter.to_domain_array([raw])

        assert seat.features.view_quality is None
        assert seat.grouping.table_type is None

    def test_metadata_as_json_text(self, adapter, storage_record_factory) -> None:
        raw = storage_record_factory(metadata='{"status": "reserved", "sponsor": "ACME"}')

        [seat] = adapter.to_domain_array([raw])

        assert seat.status == SeatStatus.RESERVED
        assert seat.metadata.custom_properties == {'sponsor': 'ACME'}

    def test_null_metadata(self, adapter, storage_record_factory) -> None:
        [seat] = adapter.to_domain_array([storage_record_factory(metadata=None)])

        assert seat.metadata.custom_properties == {}


# ==============================================================================
# from_domain
# ==============================================================================


@pytest.mark.unit
class TestStorageFromDomain:
    def test_writes_adapter_chart_id(self, adapter, seat_factory) -> None:
        record = adapter.from_domain(seat_factory())

        assert isinstance(record, StorageSeatRecord)
        assert record.seating_chart_id == 'chart-9'
        assert record.seat_category_id == 'standard'
        assert record.row_label == '1'
        assert record.rotation == 0
        assert record.metadata == {'status': 'available'}

    def test_hold_expiry_written_only_while_held(self, adapter, seat_factory) -> None:
        expiry = datetime(2025, 6, 1, 12, tzinfo=timezone.utc)

        held = adapter.from_domain(seat_factory(status=SeatStatus.HELD, hold_expiry=expiry))
        sold = adapter.from_domain(seat_factory(status=SeatStatus.SOLD, hold_expiry=expiry))

        assert held.metadata['holdExpiry'] == '2025-06-01T12:00:00+00:00'
        assert 'holdExpiry' not in sold.metadata

    def test_round_trip_preserves_metadata(self, adapter, storage_record_factory) -> None:
        metadata = {
            'status': 'held',
            'tableId': 't-4',
            'tableType': 'square',
            'viewQuality': 'good',
            'sponsor': {'name': 'ACME', 'tier': 2},
        }
        raw = storage_record_factory(metadata=metadata, current_price=90.0, notes='aisle')

        [seat] = adapter.to_domain_array([raw])
        record = adapter.from_domain(seat)

        assert record.metadata == metadata
        assert record.current_price == 90
        assert record.notes == 'aisle'
        assert record.is_available is True

    def test_from_domain_does_not_mutate_custom_properties(
        self, adapter, storage_record_factory
    ) -> None:
        [seat] = adapter.to_domain_array([storage_record_factory(metadata={'sponsor': 'ACME'})])

        adapter.from_domain(seat)

        assert seat.metadata.custom_properties == {'sponsor': 'ACME'}


# ==============================================================================
# Validation
# ==============================================================================


@pytest.mark.unit
class TestStorageValidation:
    @pytest.mark.parametrize(
        'overrides',
        [
            {'id': ''},
            {'x_position': 120.0},
            {'y_position': -0.5},
            {'base_price': -1.0},
            {'is_available': 'yes'},
            {'is_accessible': None},
            {'seat_identifier': ''},
            {'metadata': '{not json'},
            {'x_position': '25'},
        ],
    )
    def test_malformed_rows_are_dropped(self, adapter, storage_record_factory, overrides) -> None:
        raw = storage_record_factory(**overrides)

        assert adapter.validate_conversion(raw) is False
        assert adapter.to_domain_array([raw]) == []

    @pytest.mark.parametrize(
        'metadata',
        [
            {'amenities': 'wifi'},
            {'amenities': [1, 2]},
            {'tableId': 5},
            {'tableId': 't1', 'tableCapacity': 'four'},
            {'groupSize': True},
            {'viewQuality': 3},
            {'holdExpiry': 1717243200},
            {'sessionId': ['a']},
            '{"amenities": "wifi"}',
        ],
    )
    def test_mistyped_seat_metadata_is_dropped(
        self, adapter, storage_record_factory, metadata
    ) -> None:
        """
        Given: a row whose owned metadata keys carry the wrong value types
        Then: the row fails validation like any other malformed row
        """
        raws = [storage_record_factory('good'), storage_record_factory('bad', metadata=metadata)]

        assert adapter.validate_conversion(raws[1]) is False
        assert [seat.id for seat in adapter.to_domain_array(raws)] == ['good']

    def test_custom_properties_are_not_type_checked(
        self, adapter, storage_record_factory
    ) -> None:
        raw = storage_record_factory(metadata={'sponsor': 5, 'table_id': [1]})

        assert adapter.validate_conversion(raw) is True

    def test_missing_required_field(self, adapter, storage_record_factory) -> None:
        raw = storage_record_factory()
        del raw['is_premium']

        assert adapter.validate_conversion(raw) is False

    def test_valid_rows_survive_next_to_invalid_ones(
        self, adapter, storage_record_factory
    ) -> None:
        raws = [
            storage_record_factory('good-1'),
            storage_record_factory('bad', x_position=150.0),
            storage_record_factory('good-2'),
        ]

        assert [seat.id for seat in adapter.to_domain_array(raws)] == ['good-1', 'good-2']
