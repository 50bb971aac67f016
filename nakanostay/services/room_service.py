"""Room service: CRUD, validation and the available/unavailable toggles."""

import logging
import uuid
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.exceptions import ConflictError, NotFoundError, ValidationError
from nakanostay.models.booking import BookingDetail
from nakanostay.models.room import Room

logger = logging.getLogger(__name__)

ROOM_FIELDS = ("hotel_id", "room_number", "room_type", "price_per_night", "is_available")
NULLABLE_ROOM_FIELDS = ("room_type",)

MAX_PRICE_SCALE = 2
MAX_PRICE_PRECISION = 10


def validate_room(room_number: str, room_type: str | None, price_per_night: Decimal) -> None:
    """Raise ``ValidationError`` on the first invalid room field."""
    if not room_number.strip():
        raise ValidationError("El número de habitación es requerido")
    if len(room_number) > 10:
        raise ValidationError("El número de habitación no puede tener más de 10 caracteres")

    if room_type is not None:
        if not room_type.strip():
            raise ValidationError("El tipo de habitación no puede estar vacío")
        if len(room_type) > 50:
            raise ValidationError("El tipo de habitación no puede tener más de 50 caracteres")

    if price_per_night < 0:
        raise ValidationError("El precio por noche no puede ser negativo")
    _, digits, exponent = price_per_night.as_tuple()
    if isinstance(exponent, int) and -exponent > MAX_PRICE_SCALE:
        raise ValidationError("El precio por noche no puede tener más de 2 decimales")
    if len(digits) > MAX_PRICE_PRECISION:
        raise ValidationError("El precio por noche es demasiado grande")


async def _check_unique_number(
    db: AsyncSession,
    hotel_id: uuid.UUID,
    room_number: str,
    exclude_id: uuid.UUID | None = None,
) -> None:
    conditions = [Room.hotel_id == hotel_id, Room.room_number == room_number]
    if exclude_id is not None:
        conditions.append(Room.id != exclude_id)
    if (await db.execute(select(exists().where(*conditions)))).scalar():
        if exclude_id is None:
            raise ConflictError(f"Ya existe una habitación con el número '{room_number}' en este hotel")
        raise ConflictError(f"Ya existe otra habitación con el número '{room_number}' en este hotel")


async def list_rooms(db: AsyncSession, skip: int = 0, limit: int = 20) -> tuple[list[Room], int]:
    total = (await db.execute(select(func.count()).select_from(Room))).scalar_one()
    result = await db.execute(select(Room).order_by(Room.room_number).offset(skip).limit(limit))
    return list(result.scalars().all()), total


async def list_rooms_by_hotel(db: AsyncSession, hotel_id: uuid.UUID) -> list[Room]:
    result = await db.execute(select(Room).where(Room.hotel_id == hotel_id).order_by(Room.room_number))
    return list(result.scalars().all())


async def get_room(db: AsyncSession, room_id: uuid.UUID, lock: bool = False) -> Room:
    """Fetch a room by id, optionally taking a row lock for the transaction.

    Raises:
        NotFoundError: If no room has this id.
    """
    query = select(Room).where(Room.id == room_id)
    if lock:
        query = query.with_for_update()
    room = (await db.execute(query)).scalar_one_or_none()
    if room is None:
        raise NotFoundError(f"Habitación con id {room_id} no encontrada")
    return room


async def get_rooms(db: AsyncSession, room_ids: Sequence[uuid.UUID], lock: bool = False) -> list[Room]:
    """Fetch rooms in the given order; raises ``NotFoundError`` on the first unknown id."""
    return [await get_room(db, room_id, lock=lock) for room_id in room_ids]


async def create_room(db: AsyncSession, room: Room) -> Room:
    """Validate and persist a new room. The caller resolves the hotel first."""
    validate_room(room.room_number, room.room_type, room.price_per_night)
    await _check_unique_number(db, room.hotel_id, room.room_number)

    db.add(room)
    await db.flush()
    await db.refresh(room)
    logger.info("Created room %s (%s) in hotel %s", room.id, room.room_number, room.hotel_id)
    return room


async def update_room(db: AsyncSession, room_id: uuid.UUID, changes: dict[str, Any]) -> Room:
    """Apply ``changes`` to a room after validating the resulting record."""
    room = await get_room(db, room_id)

    values = {field: getattr(room, field) for field in ROOM_FIELDS}
    values.update(
        {k: v for k, v in changes.items() if k in ROOM_FIELDS and (v is not None or k in NULLABLE_ROOM_FIELDS)}
    )

    validate_room(values["room_number"], values["room_type"], values["price_per_night"])
    await _check_unique_number(db, values["hotel_id"], values["room_number"], exclude_id=room_id)

    for field, value in values.items():
        setattr(room, field, value)
    await db.flush()
    await db.refresh(room)
    logger.info("Updated room %s", room.id)
    return room


async def set_room_availability(db: AsyncSession, room_id: uuid.UUID, available: bool) -> Room:
    """Open or close a room for new bookings.

    Raises:
        ConflictError: If the room is already in the requested state.
    """
    room = await get_room(db, room_id, lock=True)

    if available and room.is_available:
        raise ConflictError("La habitación ya está disponible")
    if not available and not room.is_available:
        raise ConflictError("La habitación no está disponible")

    room.is_available = available
    await db.flush()
    await db.refresh(room)
    logger.info("Room %s marked %s", room.id, "available" if available else "unavailable")
    return room


async def delete_room(db: AsyncSession, room_id: uuid.UUID) -> None:
    """Delete a room that no booking refers to."""
    room = await get_room(db, room_id)

    if (await db.execute(select(exists().where(BookingDetail.room_id == room_id)))).scalar():
        raise ConflictError("No se puede eliminar la habitación porque tiene reservas asociadas")

    await db.delete(room)
    await db.flush()
    logger.info("Deleted room %s", room_id)
