"""Booking validation: field rules, stay dates and room conflicts.

Checks run in a fixed order and the first failure wins, so a given invalid
booking always produces the same message. Field and date problems raise
``ValidationError``; clashes with other bookings or closed rooms raise
``ConflictError``.
"""

import re
import uuid
from collections.abc import Iterable, Sequence
from datetime import date

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.exceptions import ConflictError, ValidationError
from nakanostay.models.booking import Booking, BookingDetail, BookingStatus
from nakanostay.services.dni import is_valid_ecuadorian_dni
from nakanostay.services.formats import is_valid_email

MAX_CODE_LENGTH = 16
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 100
MIN_PHONE_LENGTH = 9
MAX_PHONE_LENGTH = 15
MIN_PHONE_DIGITS = 9
MIN_GUESTS_PER_ROOM = 1
MAX_GUESTS_PER_ROOM = 10
MAX_STAY_NIGHTS = 30

_PHONE_PATTERN = re.compile(r"[+0-9\s-]+", re.ASCII)
_NON_DIGITS = re.compile(r"[^0-9]")


def validate_guest_phone(phone: str | None) -> None:
    """Validate an optional phone number; blank or missing is accepted."""
    if phone is None or not phone.strip():
        return
    if len(phone) < MIN_PHONE_LENGTH or len(phone) > MAX_PHONE_LENGTH:
        raise ValidationError("El teléfono debe ser valido")
    if not _PHONE_PATTERN.fullmatch(phone):
        raise ValidationError("El teléfono debe ser valido")
    if len(_NON_DIGITS.sub("", phone)) < MIN_PHONE_DIGITS:
        raise ValidationError("El teléfono debe contener al menos 9 dígitos")


def validate_booking_detail(detail: BookingDetail) -> None:
    if detail.guests < MIN_GUESTS_PER_ROOM:
        raise ValidationError("El número de huéspedes debe ser mayor a 0")
    if detail.guests > MAX_GUESTS_PER_ROOM:
        raise ValidationError("El número de huéspedes no puede ser mayor a 10 por habitación")


def validate_booking_fields(booking: Booking) -> None:
    """Code, guest identity and contact data, then the room lines."""
    if not booking.booking_code.strip():
        raise ValidationError("El código de reserva es requerido")
    if len(booking.booking_code) > MAX_CODE_LENGTH:
        raise ValidationError("El código de reserva no puede tener más de 16 caracteres")

    if not booking.guest_name.strip():
        raise ValidationError("El nombre del huésped es requerido")
    if len(booking.guest_name) < MIN_NAME_LENGTH:
        raise ValidationError("El nombre del huésped debe tener al menos 2 caracteres")
    if len(booking.guest_name) > MAX_NAME_LENGTH:
        raise ValidationError("El nombre del huésped no puede tener más de 100 caracteres")

    if not booking.guest_dni.strip():
        raise ValidationError("El DNI del huésped es requerido")
    if not is_valid_ecuadorian_dni(booking.guest_dni):
        raise ValidationError("La cédula debe ser valida")

    if not booking.guest_email.strip():
        raise ValidationError("El email del huésped es requerido")
    if not is_valid_email(booking.guest_email):
        raise ValidationError("El formato del email es inválido")
    if len(booking.guest_email) > MAX_EMAIL_LENGTH:
        raise ValidationError("El email no puede tener más de 100 caracteres")

    validate_guest_phone(booking.guest_phone)

    if not booking.booking_details:
        raise ValidationError("La reserva debe tener al menos una habitación")
    for detail in booking.booking_details:
        validate_booking_detail(detail)

    room_ids = [detail.room_id for detail in booking.booking_details]
    if len(set(room_ids)) != len(room_ids):
        raise ValidationError("Una habitación no puede aparecer más de una vez en la reserva")


def validate_booking_dates(booking: Booking, today: date | None = None) -> None:
    """Check-in not in the past, check-out after check-in, at most 30 nights."""
    today = today or date.today()

    if booking.check_in < today:
        raise ValidationError("La fecha de check-in no puede ser en el pasado")
    if booking.check_out <= booking.check_in:
        raise ValidationError("La fecha de check-out debe ser posterior a la fecha de check-in")
    if (booking.check_out - booking.check_in).days > MAX_STAY_NIGHTS:
        raise ValidationError("La estadía no puede ser mayor a 30 días")


async def exists_conflicting_booking(
    db: AsyncSession,
    room_ids: Sequence[uuid.UUID],
    check_in: date,
    check_out: date,
    excluded_statuses: Iterable[BookingStatus] = (BookingStatus.CANCELLED,),
    exclude_booking_id: uuid.UUID | None = None,
) -> bool:
    """True if another booking holds any of ``room_ids`` during ``[check_in, check_out)``."""
    conditions = [
        BookingDetail.booking_id == Booking.id,
        BookingDetail.room_id.in_(room_ids),
        Booking.status.not_in([status.value for status in excluded_statuses]),
        Booking.check_in < check_out,
        Booking.check_out > check_in,
    ]
    if exclude_booking_id is not None:
        conditions.append(Booking.id != exclude_booking_id)

    result = await db.execute(select(exists().where(*conditions)))
    return bool(result.scalar())


async def validate_room_availability(db: AsyncSession, booking: Booking) -> None:
    """Reject overlaps with live bookings, then rooms closed for booking."""
    room_ids = [detail.room.id for detail in booking.booking_details]

    if await exists_conflicting_booking(
        db,
        room_ids,
        booking.check_in,
        booking.check_out,
        exclude_booking_id=booking.id,
    ):
        raise ConflictError(
            "Una o más habitaciones no están disponibles para las fechas seleccionadas. "
            f"Ya existe una reserva que se solapa con el período {booking.check_in} - {booking.check_out}"
        )

    for detail in booking.booking_details:
        if not detail.room.is_available:
            raise ConflictError(f"La habitación {detail.room.room_number} no está disponible")


async def validate_booking(db: AsyncSession, booking: Booking, today: date | None = None) -> None:
    """Run every booking check in order, raising on the first failure."""
    validate_booking_fields(booking)
    validate_booking_dates(booking, today)
    await validate_room_availability(db, booking)
