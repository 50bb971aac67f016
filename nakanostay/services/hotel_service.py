"""Hotel service: CRUD with field validation and uniqueness checks."""

import logging
import uuid
from typing import Any

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.exceptions import ConflictError, NotFoundError, ValidationError
from nakanostay.models.booking import BookingDetail
from nakanostay.models.hotel import Hotel
from nakanostay.models.room import Room
from nakanostay.services.formats import is_valid_email

logger = logging.getLogger(__name__)

HOTEL_FIELDS = ("name", "address", "city", "stars", "email")
NULLABLE_HOTEL_FIELDS = ("city", "stars")


def validate_hotel(
    name: str,
    address: str,
    email: str,
    city: str | None = None,
    stars: int | None = None,
) -> None:
    """Raise ``ValidationError`` on the first invalid hotel field."""
    if not name.strip():
        raise ValidationError("El nombre del hotel es requerido")
    if len(name) > 100:
        raise ValidationError("El nombre del hotel no puede tener más de 100 caracteres")

    if not address.strip():
        raise ValidationError("La dirección del hotel es requerida")

    if not email.strip():
        raise ValidationError("El email del hotel es requerido")
    if not is_valid_email(email):
        raise ValidationError("El formato del email es inválido")
    if len(email) > 100:
        raise ValidationError("El email no puede tener más de 100 caracteres")

    if city is not None and len(city) > 100:
        raise ValidationError("La ciudad no puede tener más de 100 caracteres")

    if stars is not None:
        if stars < 0:
            raise ValidationError("Las estrellas del hotel no pueden ser negativas")
        if stars > 5:
            raise ValidationError("Las estrellas del hotel no pueden ser más de 5")


async def _check_unique(
    db: AsyncSession,
    name: str,
    address: str,
    email: str,
    exclude_id: uuid.UUID | None = None,
) -> None:
    """Raise ``ConflictError`` if the name+address pair or the email is taken."""
    same_place = [Hotel.name == name, Hotel.address == address]
    same_email = [Hotel.email == email]
    if exclude_id is not None:
        same_place.append(Hotel.id != exclude_id)
        same_email.append(Hotel.id != exclude_id)

    # Updates clash with "otro" hotel, creations with "un" hotel
    other = "otro " if exclude_id is not None else "un "
    if (await db.execute(select(exists().where(*same_place)))).scalar():
        raise ConflictError(f"Ya existe {other}hotel con el nombre '{name}' en la dirección '{address}'")
    if (await db.execute(select(exists().where(*same_email)))).scalar():
        raise ConflictError(f"Ya existe {other}hotel registrado con el email '{email}'")


async def list_hotels(db: AsyncSession, skip: int = 0, limit: int = 20) -> tuple[list[Hotel], int]:
    total = (await db.execute(select(func.count()).select_from(Hotel))).scalar_one()
    result = await db.execute(select(Hotel).order_by(Hotel.name).offset(skip).limit(limit))
    return list(result.scalars().all()), total


async def get_hotel(db: AsyncSession, hotel_id: uuid.UUID) -> Hotel:
    hotel = await db.get(Hotel, hotel_id)
    if hotel is None:
        raise NotFoundError(f"Hotel con id {hotel_id} no encontrado")
    return hotel


async def create_hotel(db: AsyncSession, hotel: Hotel) -> Hotel:
    """Validate and persist a new hotel."""
    validate_hotel(hotel.name, hotel.address, hotel.email, hotel.city, hotel.stars)
    await _check_unique(db, hotel.name, hotel.address, hotel.email)

    db.add(hotel)
    await db.flush()
    await db.refresh(hotel)
    logger.info("Created hotel %s (%s)", hotel.id, hotel.name)
    return hotel


async def update_hotel(db: AsyncSession, hotel_id: uuid.UUID, changes: dict[str, Any]) -> Hotel:
    """Apply ``changes`` to a hotel after validating the resulting record."""
    hotel = await get_hotel(db, hotel_id)

    values = {field: getattr(hotel, field) for field in HOTEL_FIELDS}
    values.update(
        {k: v for k, v in changes.items() if k in HOTEL_FIELDS and (v is not None or k in NULLABLE_HOTEL_FIELDS)}
    )

    validate_hotel(**values)
    await _check_unique(db, values["name"], values["address"], values["email"], exclude_id=hotel_id)

    for field, value in values.items():
        setattr(hotel, field, value)
    await db.flush()
    await db.refresh(hotel)
    logger.info("Updated hotel %s", hotel.id)
    return hotel


async def delete_hotel(db: AsyncSession, hotel_id: uuid.UUID) -> None:
    """Delete a hotel and its rooms, unless any of those rooms has bookings."""
    hotel = await get_hotel(db, hotel_id)

    has_bookings = await db.execute(
        select(exists().where(BookingDetail.room_id == Room.id, Room.hotel_id == hotel_id))
    )
    if has_bookings.scalar():
        raise ConflictError("No se puede eliminar el hotel porque tiene habitaciones con reservas")

    await db.delete(hotel)
    await db.flush()
    logger.info("Deleted hotel %s", hotel_id)
