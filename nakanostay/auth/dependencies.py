"""FastAPI authentication dependencies for admin-only routes.

Guests never authenticate: they identify a booking with its code and
their DNI. Everything that manages hotels, rooms, users, or moves a
booking forward requires an admin bearer token.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from nakanostay.auth.jwt import ADMIN_TOKEN_TYPE, read_admin_token

# Missing credentials are reported as 401 here rather than by the scheme
_bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> str:
    """Validate the Bearer token and return the admin subject.

    Raises:
        HTTPException 401: If the token is missing, invalid, expired, of the
            wrong type, or has no subject.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = read_admin_token(credentials.credentials)
    except JWTError:
        raise credentials_exception from None

    if payload.get("type") != ADMIN_TOKEN_TYPE:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
            headers={"WWW-Authenticate": "Bearer"},
        )

    sub: str | None = payload.get("sub")
    if not sub:
        raise credentials_exception

    return sub
