"""User service: CRUD with DNI checks and uniqueness on DNI and email."""

import logging
import uuid
from typing import Any

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.exceptions import ConflictError, NotFoundError, ValidationError
from nakanostay.models.user import User
from nakanostay.services.dni import is_valid_ecuadorian_dni

logger = logging.getLogger(__name__)

USER_FIELDS = ("name", "dni", "email", "phone")
NULLABLE_USER_FIELDS = ("phone",)


async def _check_user(db: AsyncSession, dni: str, email: str, exclude_id: uuid.UUID | None = None) -> None:
    if not is_valid_ecuadorian_dni(dni):
        raise ValidationError("La cédula debe ser valida")
    if len(email) > 100:
        raise ValidationError("El email no puede tener más de 100 caracteres")

    same_dni = [User.dni == dni]
    same_email = [User.email == email]
    if exclude_id is not None:
        same_dni.append(User.id != exclude_id)
        same_email.append(User.id != exclude_id)

    if (await db.execute(select(exists().where(*same_dni)))).scalar():
        raise ConflictError(f"Ya existe un usuario registrado con la cédula '{dni}'")
    if (await db.execute(select(exists().where(*same_email)))).scalar():
        raise ConflictError(f"Ya existe un usuario registrado con el email '{email}'")


async def list_users(db: AsyncSession, skip: int = 0, limit: int = 20) -> tuple[list[User], int]:
    total = (await db.execute(select(func.count()).select_from(User))).scalar_one()
    result = await db.execute(select(User).order_by(User.created_at.desc()).offset(skip).limit(limit))
    return list(result.scalars().all()), total


async def get_user(db: AsyncSession, user_id: uuid.UUID) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError(f"Usuario con id {user_id} no encontrado")
    return user


async def create_user(db: AsyncSession, user: User) -> User:
    await _check_user(db, user.dni, user.email)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    logger.info("Created user %s", user.id)
    return user


async def update_user(db: AsyncSession, user_id: uuid.UUID, changes: dict[str, Any]) -> User:
    user = await get_user(db, user_id)

    values = {field: getattr(user, field) for field in USER_FIELDS}
    values.update(
        {k: v for k, v in changes.items() if k in USER_FIELDS and (v is not None or k in NULLABLE_USER_FIELDS)}
    )
    await _check_user(db, values["dni"], values["email"], exclude_id=user_id)

    for field, value in values.items():
        setattr(user, field, value)
    await db.flush()
    await db.refresh(user)
    logger.info("Updated user %s", user.id)
    return user


async def delete_user(db: AsyncSession, user_id: uuid.UUID) -> None:
    user = await get_user(db, user_id)
    await db.delete(user)
    await db.flush()
    logger.info("Deleted user %s", user_id)
