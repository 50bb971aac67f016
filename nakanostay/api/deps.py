"""Shared API dependencies: single import point for all routers.

Re-exports the database session and the admin gate so that router modules
can import everything they need from one place::

    from nakanostay.api.deps import get_current_admin, get_db
"""

from nakanostay.auth.dependencies import get_current_admin
from nakanostay.database import get_db

__all__ = [
    "get_db",
    "get_current_admin",
]
