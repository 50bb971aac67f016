"""Users CRUD API router (admin-only)."""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from nakanostay.api.deps import get_current_admin, get_db
from nakanostay.models.user import User
from nakanostay.schemas.common import MessageResponse
from nakanostay.schemas.user import UserCreate, UserListResponse, UserResponse, UserUpdate
from nakanostay.services import user_service

router = APIRouter(
    prefix="/api/v1/users",
    tags=["users"],
    dependencies=[Depends(get_current_admin)],
)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)) -> User:
    """Register a user. Returns 409 if the DNI or email is already registered."""
    return await user_service.create_user(db, User(**body.model_dump()))


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users",
)
async def list_users(
    skip: int = Query(0, ge=0, description="Pagination offset"),
    limit: int = Query(20, ge=1, le=100, description="Pagination limit"),
    db: AsyncSession = Depends(get_db),
) -> dict:
    items, total = await user_service.list_users(db, skip=skip, limit=limit)
    return {"items": items, "total": total}


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
)
async def get_user(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> User:
    return await user_service.get_user(db, user_id)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
)
async def update_user(user_id: uuid.UUID, body: UserUpdate, db: AsyncSession = Depends(get_db)) -> User:
    return await user_service.update_user(db, user_id, body.model_dump(exclude_unset=True))


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete a user",
)
async def delete_user(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    await user_service.delete_user(db, user_id)
    return MessageResponse(message="User deleted")
