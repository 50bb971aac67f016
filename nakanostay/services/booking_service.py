"""Booking service: creation, guest lookups and status transitions."""

import logging
import random
import uuid
from dataclasses import dataclass
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.exceptions import NotFoundError
from nakanostay.models.booking import Booking, BookingDetail, BookingStatus
from nakanostay.services.booking_code import generate_unique_booking_code
from nakanostay.services.booking_status import BookingAction, next_status
from nakanostay.services.booking_validation import validate_booking
from nakanostay.services.notifications import NotificationEvent, send_booking_notification
from nakanostay.services.room_service import get_rooms

logger = logging.getLogger(__name__)

_EVENTS = {
    BookingAction.CANCEL: NotificationEvent.CANCELLED,
    BookingAction.CONFIRM: NotificationEvent.CONFIRMED,
    BookingAction.COMPLETE: NotificationEvent.COMPLETED,
}


@dataclass(frozen=True)
class RoomRequest:
    """A room asked for in a new booking, with how many guests will use it."""

    room_id: uuid.UUID
    guests: int


async def list_bookings(
    db: AsyncSession,
    skip: int = 0,
    limit: int = 20,
    status: BookingStatus | None = None,
) -> tuple[list[Booking], int]:
    filters = []
    if status is not None:
        filters.append(Booking.status == status.value)

    total = (await db.execute(select(func.count()).select_from(Booking).where(*filters))).scalar_one()
    result = await db.execute(
        select(Booking).where(*filters).order_by(Booking.booking_date.desc()).offset(skip).limit(limit)
    )
    return list(result.scalars().all()), total


async def get_booking(db: AsyncSession, booking_id: uuid.UUID) -> Booking:
    booking = await db.get(Booking, booking_id)
    if booking is None:
        raise NotFoundError(f"Reserva con id {booking_id} no encontrada")
    return booking


async def get_booking_by_code_and_dni(
    db: AsyncSession,
    booking_code: str,
    guest_dni: str,
    lock: bool = False,
) -> Booking:
    """Look a booking up by the pair a guest holds: code and DNI.

    Raises:
        NotFoundError: If no booking matches both values.
    """
    query = select(Booking).where(Booking.booking_code == booking_code, Booking.guest_dni == guest_dni)
    if lock:
        query = query.with_for_update()
    booking = (await db.execute(query)).scalar_one_or_none()
    if booking is None:
        raise NotFoundError("Reserva no encontrada o datos incorrectos")
    return booking


async def create_booking(
    db: AsyncSession,
    *,
    guest_name: str,
    guest_dni: str,
    guest_email: str,
    check_in: date,
    check_out: date,
    rooms: list[RoomRequest],
    guest_phone: str | None = None,
    rng: random.Random | None = None,
    today: date | None = None,
) -> Booking:
    """Create a PENDING booking with a fresh code and per-room prices.

    Each room's price is its nightly rate times the number of nights,
    fixed at this moment. The requested rooms are row-locked until the
    transaction ends, so two requests for the same room cannot both pass
    the overlap check.

    Raises:
        NotFoundError: If a requested room does not exist.
        ValidationError: If guest data, guest counts or dates are invalid.
        ConflictError: If a room is taken for those dates or closed.
        BookingCodeGenerationError: If no unused code could be generated.
    """
    booking_code = await generate_unique_booking_code(db, rng=rng)
    resolved_rooms = await get_rooms(db, [request.room_id for request in rooms], lock=True)

    nights = (check_out - check_in).days
    booking = Booking(
        booking_code=booking_code,
        guest_name=guest_name,
        guest_dni=guest_dni,
        guest_email=guest_email,
        guest_phone=guest_phone,
        check_in=check_in,
        check_out=check_out,
        status=BookingStatus.PENDING.value,
        booking_details=[
            BookingDetail(
                room=room,
                room_id=room.id,
                guests=request.guests,
                price_at_booking=room.price_per_night * nights,
            )
            for room, request in zip(resolved_rooms, rooms)
        ],
    )

    await validate_booking(db, booking, today)

    db.add(booking)
    await db.flush()
    await db.refresh(booking)
    logger.info(
        "Created booking %s (%s) for %d room(s), %s to %s",
        booking.id,
        booking.booking_code,
        len(booking.booking_details),
        booking.check_in,
        booking.check_out,
    )

    send_booking_notification(NotificationEvent.CREATED, booking)
    return booking


async def transition_booking(
    db: AsyncSession,
    booking_code: str,
    guest_dni: str,
    action: BookingAction,
) -> Booking:
    """Apply a status transition to the booking identified by code and DNI.

    The booking keeps its id, guest data, stay and rooms; only the status
    changes. The row stays locked until the transaction ends.

    Raises:
        NotFoundError: If no booking matches the code and DNI.
        ConflictError: If ``action`` is not allowed from the current status.
    """
    booking = await get_booking_by_code_and_dni(db, booking_code, guest_dni, lock=True)
    previous = booking.status
    booking.status = next_status(previous, action).value

    await db.flush()
    await db.refresh(booking)
    logger.info("Booking %s: %s -> %s", booking.booking_code, previous, booking.status)

    send_booking_notification(_EVENTS[action], booking)
    return booking


async def cancel_booking(db: AsyncSession, booking_code: str, guest_dni: str) -> Booking:
    return await transition_booking(db, booking_code, guest_dni, BookingAction.CANCEL)


async def confirm_booking(db: AsyncSession, booking_code: str, guest_dni: str) -> Booking:
    return await transition_booking(db, booking_code, guest_dni, BookingAction.CONFIRM)


async def complete_booking(db: AsyncSession, booking_code: str, guest_dni: str) -> Booking:
    return await transition_booking(db, booking_code, guest_dni, BookingAction.COMPLETE)


async def delete_booking(db: AsyncSession, booking_id: uuid.UUID) -> None:
    booking = await get_booking(db, booking_id)
    await db.delete(booking)
    await db.flush()
    logger.info("Deleted booking %s", booking_id)
