"""
Unit tests for SeatGroupFinder

Test Focus:
1. Every strictly consecutive window of the requested size is returned
2. Only available, numbered seats are candidates
3. Rows never mix: (section, row) is the grouping key
4. Preferences narrow the candidate set
"""

import pytest

from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.seat_group_finder import SeatGroupFinder
from src.service.seating.domain.value_object.seat_query import AdjacencyPreferences


def _ids(groups):
    return [[seat.id for seat in group] for group in groups]


@pytest.mark.unit
class TestFindAvailableAdjacentSeats:
    @pytest.fixture
    def finder(self) -> SeatGroupFinder:
        return SeatGroupFinder()

    def test_all_overlapping_windows(self, finder, seat_factory) -> None:
        """
        Given: row A1 seats 1..4 all available
        When: searching for pairs
        Then: [1,2], [2,3], [3,4]
        """
        seats = [seat_factory(f's{n}', seat_number=str(n)) for n in (3, 1, 4, 2)]

        groups = finder.find_available_adjacent_seats(seats, 2)

        assert _ids(groups) == [['s1', 's2'], ['s2', 's3'], ['s3', 's4']]

    def test_sold_seat_breaks_the_run(self, finder, seat_factory) -> None:
        """
        Given: seats 1..4 with seat 2 sold
        When: searching for pairs
        Then: only [3,4]
        """
        seats = [
            seat_factory('s1', seat_number='1'),
            seat_factory('s2', seat_number='2', status=SeatStatus.SOLD),
            seat_factory('s3', seat_number='3'),
            seat_factory('s4', seat_number='4'),
        ]

        groups = finder.find_available_adjacent_seats(seats, 2)

        assert _ids(groups) == [['s3', 's4']]

    def test_gap_in_numbering_breaks_the_run(self, finder, seat_factory) -> None:
        seats = [seat_factory(f's{n}', seat_number=str(n)) for n in (1, 2, 4, 5)]

        groups = finder.find_available_adjacent_seats(seats, 3)

        assert groups == []

    def test_rows_do_not_mix(self, finder, seat_factory) -> None:
        seats = [
            seat_factory('a1', seat_number='1', row='A'),
            seat_factory('b2', seat_number='2', row='B'),
        ]

        assert finder.find_available_adjacent_seats(seats, 2) == []

    def test_unnumbered_seats_are_skipped(self, finder, seat_factory) -> None:
        seats = [
            seat_factory('s1', seat_number='1'),
            seat_factory('box', seat_number='Box'),
            seat_factory('s2', seat_number='2'),
        ]

        groups = finder.find_available_adjacent_seats(seats, 2)

        assert _ids(groups) == [['s1', 's2']]

    def test_labels_with_suffix_use_leading_number(self, finder, seat_factory) -> None:
        seats = [seat_factory('s1', seat_number='1A'), seat_factory('s2', seat_number='2A')]

        assert _ids(finder.find_available_adjacent_seats(seats, 2)) == [['s1', 's2']]

    @pytest.mark.parametrize('group_size', [0, -1])
    def test_non_positive_group_size(self, finder, seat_factory, group_size) -> None:
        seats = [seat_factory('s1', seat_number='1'), seat_factory('s2', seat_number='2')]

        assert finder.find_available_adjacent_seats(seats, group_size) == []

    def test_group_of_one_returns_each_available_seat(self, finder, seat_factory) -> None:
        seats = [
            seat_factory('s1', seat_number='1'),
            seat_factory('s2', seat_number='2', status=SeatStatus.HELD),
        ]

        assert _ids(finder.find_available_adjacent_seats(seats, 1)) == [['s1']]

    def test_group_larger_than_row(self, finder, seat_factory) -> None:
        seats = [seat_factory('s1', seat_number='1')]

        assert finder.find_available_adjacent_seats(seats, 2) == []

    def test_empty_input(self, finder) -> None:
        assert finder.find_available_adjacent_seats([], 2) == []


@pytest.mark.unit
class TestAdjacencyPreferences:
    @pytest.fixture
    def finder(self) -> SeatGroupFinder:
        return SeatGroupFinder()

    def test_section_preference(self, finder, seat_factory) -> None:
        seats = [
            seat_factory('a1', seat_number='1', section='A'),
            seat_factory('a2', seat_number='2', section='A'),
            seat_factory('b1', seat_number='1', section='B'),
            seat_factory('b2', seat_number='2', section='B'),
        ]

        groups = finder.find_available_adjacent_seats(
            seats, 2, AdjacencyPreferences(section='B')
        )

        assert _ids(groups) == [['b1', 'b2']]

    def test_max_price_preference_uses_effective_price(self, finder, seat_factory) -> None:
        seats = [
            seat_factory('s1', seat_number='1', base_price=100, current_price=40),
            seat_factory('s2', seat_number='2', base_price=40),
            seat_factory('s3', seat_number='3', base_price=60),
        ]

        groups = finder.find_available_adjacent_seats(
            seats, 2, AdjacencyPreferences(max_price=50)
        )

        assert _ids(groups) == [['s1', 's2']]

    def test_require_ada(self, finder, seat_factory) -> None:
        seats = [
            seat_factory('s1', seat_number='1', is_ada=True),
            seat_factory('s2', seat_number='2', is_ada=True),
            seat_factory('s3', seat_number='3'),
        ]

        groups = finder.find_available_adjacent_seats(
            seats, 2, AdjacencyPreferences(require_ada=True)
        )

        assert _ids(groups) == [['s1', 's2']]
