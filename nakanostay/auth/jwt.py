"""Signed bearer tokens for the back-office admin routes.

Admins have no password login. An operator issues a token (the seed
script prints one) and the admin routes accept it while it is correctly
signed, unexpired and marked as an admin token.
"""

from datetime import datetime, timedelta, timezone

from jose import jwt

from nakanostay.config import settings

ADMIN_TOKEN_TYPE = "admin"


def create_admin_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """Issue an admin token for ``subject``.

    The token lives ``settings.jwt_admin_token_expire_minutes`` unless
    ``expires_delta`` says otherwise.
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_delta or timedelta(minutes=settings.jwt_admin_token_expire_minutes)
    claims = {
        "sub": subject,
        "type": ADMIN_TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def read_admin_token(token: str) -> dict:
    """Return the claims of ``token`` after checking signature and expiry.

    Raises:
        jose.JWTError: If the token does not verify.
    """
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
