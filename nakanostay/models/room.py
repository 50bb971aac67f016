"""Room model: bookable units belonging to a hotel."""

import uuid
from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nakanostay.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Room(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A room with a nightly price and an availability flag."""

    __tablename__ = "rooms"

    hotel_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_number: Mapped[str] = mapped_column(String(10), nullable=False)
    room_type: Mapped[str | None] = mapped_column(String(50), default=None)
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    hotel: Mapped["Hotel"] = relationship(back_populates="rooms", lazy="selectin")  # type: ignore[name-defined]  # noqa: F821

    # Room numbers are unique per hotel, not globally
    __table_args__ = (UniqueConstraint("hotel_id", "room_number", name="uq_rooms_hotel_room_number"),)

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, hotel_id={self.hotel_id}, room_number={self.room_number!r})>"
