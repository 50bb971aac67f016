"""Per-room availability: which dates in a window are free or occupied."""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta

from sqlalchemy import not_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.exceptions import ValidationError
from nakanostay.models.booking import Booking, BookingDetail, BookingStatus
from nakanostay.services.room_service import get_room


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of occupied nights."""

    start: date
    end: date

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class RoomAvailability:
    room_id: uuid.UUID
    available_dates: list[date] = field(default_factory=list)
    occupied_ranges: list[DateRange] = field(default_factory=list)


def compute_availability(
    room_id: uuid.UUID,
    stays: Iterable[tuple[date, date]],
    start_date: date,
    end_date: date,
) -> RoomAvailability:
    """Partition ``[start_date, end_date]`` into occupied ranges and free dates.

    Each stay is a ``(check_in, check_out)`` pair already known to touch the
    window. The check-out day is not occupied. Ranges are clipped to the
    window and sorted by start; overlapping ranges are not merged.
    """
    occupied_ranges = sorted(
        (
            DateRange(
                start=max(check_in, start_date),
                end=min(check_out - timedelta(days=1), end_date),
            )
            for check_in, check_out in stays
        ),
        key=lambda occupied: occupied.start,
    )

    available_dates = []
    day = start_date
    while day <= end_date:
        if not any(day in occupied for occupied in occupied_ranges):
            available_dates.append(day)
        day += timedelta(days=1)

    return RoomAvailability(
        room_id=room_id,
        available_dates=available_dates,
        occupied_ranges=occupied_ranges,
    )


async def find_stays_for_room(
    db: AsyncSession,
    room_id: uuid.UUID,
    start_date: date,
    end_date: date,
) -> list[tuple[date, date]]:
    """Return ``(check_in, check_out)`` of non-cancelled bookings touching the window."""
    query = (
        select(Booking.id, Booking.check_in, Booking.check_out)
        .join(BookingDetail, BookingDetail.booking_id == Booking.id)
        .where(
            BookingDetail.room_id == room_id,
            Booking.status != BookingStatus.CANCELLED.value,
            not_(or_(Booking.check_out < start_date, Booking.check_in > end_date)),
        )
        .distinct()
    )
    result = await db.execute(query)
    return [(row.check_in, row.check_out) for row in result.all()]


async def get_room_availability(
    db: AsyncSession,
    room_id: uuid.UUID,
    start_date: date,
    end_date: date,
    today: date | None = None,
) -> RoomAvailability:
    """Availability of one room over ``[start_date, end_date]``, both inclusive.

    Raises:
        NotFoundError: If the room does not exist.
        ValidationError: If the window is inverted or starts in the past.
    """
    await get_room(db, room_id)
    today = today or date.today()

    if start_date > end_date:
        raise ValidationError("La fecha de inicio debe ser anterior a la fecha de fin")
    if start_date < today:
        raise ValidationError("La fecha de inicio no puede ser en el pasado")

    stays = await find_stays_for_room(db, room_id, start_date, end_date)
    return compute_availability(room_id, stays, start_date, end_date)
