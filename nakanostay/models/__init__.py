"""SQLAlchemy models for NakanoStay.

All models are imported here so that Alembic's autogenerate can discover
them via Base.metadata. If you add a new model, import it in this file.
"""

from nakanostay.models.booking import Booking, BookingDetail, BookingStatus
from nakanostay.models.hotel import Hotel
from nakanostay.models.room import Room
from nakanostay.models.user import User

__all__ = [
    "Booking",
    "BookingDetail",
    "BookingStatus",
    "Hotel",
    "Room",
    "User",
]
