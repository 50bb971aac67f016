"""Unit tests for availability computation."""

import uuid
from datetime import date

from nakanostay.services.availability import DateRange, compute_availability

ROOM_ID = uuid.uuid4()


def _days(*days: int) -> list[date]:
    return [date(2025, 6, day) for day in days]


class TestComputeAvailability:
    def test_no_stays_everything_free(self):
        result = compute_availability(ROOM_ID, [], date(2025, 6, 1), date(2025, 6, 3))
        assert result.room_id == ROOM_ID
        assert result.available_dates == _days(1, 2, 3)
        assert result.occupied_ranges == []

    def test_check_out_day_is_free(self):
        result = compute_availability(
            ROOM_ID,
            [(date(2025, 6, 3), date(2025, 6, 7))],
            date(2025, 6, 1),
            date(2025, 6, 10),
        )
        assert result.occupied_ranges == [DateRange(date(2025, 6, 3), date(2025, 6, 6))]
        assert result.available_dates == _days(1, 2, 7, 8, 9, 10)

    def test_ranges_are_clipped_to_window(self):
        result = compute_availability(
            ROOM_ID,
            [(date(2025, 5, 28), date(2025, 6, 3)), (date(2025, 6, 9), date(2025, 6, 20))],
            date(2025, 6, 1),
            date(2025, 6, 10),
        )
        assert result.occupied_ranges == [
            DateRange(date(2025, 6, 1), date(2025, 6, 2)),
            DateRange(date(2025, 6, 9), date(2025, 6, 10)),
        ]
        assert result.available_dates == _days(3, 4, 5, 6, 7, 8)

    def test_ranges_sorted_by_start(self):
        result = compute_availability(
            ROOM_ID,
            [(date(2025, 6, 8), date(2025, 6, 9)), (date(2025, 6, 2), date(2025, 6, 4))],
            date(2025, 6, 1),
            date(2025, 6, 10),
        )
        assert [r.start for r in result.occupied_ranges] == [date(2025, 6, 2), date(2025, 6, 8)]

    def test_stay_ending_on_window_start_occupies_nothing(self):
        result = compute_availability(
            ROOM_ID,
            [(date(2025, 5, 28), date(2025, 6, 1))],
            date(2025, 6, 1),
            date(2025, 6, 3),
        )
        # Degenerate range: end before start
        assert result.occupied_ranges == [DateRange(date(2025, 6, 1), date(2025, 5, 31))]
        assert result.available_dates == _days(1, 2, 3)

    def test_single_day_window(self):
        result = compute_availability(
            ROOM_ID,
            [(date(2025, 6, 5), date(2025, 6, 6))],
            date(2025, 6, 5),
            date(2025, 6, 5),
        )
        assert result.available_dates == []
        assert result.occupied_ranges == [DateRange(date(2025, 6, 5), date(2025, 6, 5))]

    def test_overlapping_stays_not_merged(self):
        result = compute_availability(
            ROOM_ID,
            [(date(2025, 6, 2), date(2025, 6, 5)), (date(2025, 6, 4), date(2025, 6, 6))],
            date(2025, 6, 1),
            date(2025, 6, 7),
        )
        assert len(result.occupied_ranges) == 2
        assert result.available_dates == _days(1, 6, 7)


class TestDateRange:
    def test_contains_is_inclusive(self):
        occupied = DateRange(date(2025, 6, 3), date(2025, 6, 6))
        assert date(2025, 6, 3) in occupied
        assert date(2025, 6, 6) in occupied
        assert date(2025, 6, 7) not in occupied
