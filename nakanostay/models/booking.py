"""Booking aggregate: a reservation and the rooms it holds."""

import enum
import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Integer, Numeric, String, func
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nakanostay.database import Base, UUIDPrimaryKeyMixin


class BookingStatus(str, enum.Enum):
    """Lifecycle states of a booking."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class Booking(UUIDPrimaryKeyMixin, Base):
    """A guest's reservation of one or more rooms for a date range.

    ``check_out`` is exclusive: the guest leaves that morning, so the room
    is free again on the check-out date.
    """

    __tablename__ = "bookings"

    booking_code: Mapped[str] = mapped_column(String(16), unique=True, nullable=False)
    guest_name: Mapped[str] = mapped_column(String(100), nullable=False)
    guest_dni: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    guest_email: Mapped[str] = mapped_column(String(100), nullable=False)
    guest_phone: Mapped[str | None] = mapped_column(String(20), default=None)
    booking_date: Mapped[datetime] = mapped_column(server_default=func.now())
    check_in: Mapped[date] = mapped_column(Date, nullable=False)
    check_out: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        default=BookingStatus.PENDING.value,
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    booking_details: Mapped[list["BookingDetail"]] = relationship(
        back_populates="booking",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="BookingDetail.line_number",
        collection_class=ordering_list("line_number"),
    )

    __table_args__ = (Index("ix_bookings_check_in_check_out", "check_in", "check_out"),)

    @property
    def total(self) -> Decimal:
        """Sum of the prices charged for every room in the booking."""
        return sum((detail.price_at_booking for detail in self.booking_details), Decimal("0"))

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, code={self.booking_code!r}, status={self.status})>"


class BookingDetail(UUIDPrimaryKeyMixin, Base):
    """One room within a booking, with the price fixed when it was booked."""

    __tablename__ = "booking_details"

    booking_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("rooms.id"),
        nullable=False,
        index=True,
    )
    line_number: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    guests: Mapped[int] = mapped_column(Integer, nullable=False)
    price_at_booking: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    # Relationships
    booking: Mapped["Booking"] = relationship(back_populates="booking_details")
    room: Mapped["Room"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821

    def __repr__(self) -> str:
        return f"<BookingDetail(booking_id={self.booking_id}, room_id={self.room_id}, guests={self.guests})>"
