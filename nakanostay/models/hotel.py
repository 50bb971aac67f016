"""Hotel model: the establishments that own rooms."""

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nakanostay.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Hotel(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A hotel listed in the back office."""

    __tablename__ = "hotels"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str | None] = mapped_column(String(100), default=None)
    stars: Mapped[int | None] = mapped_column(default=None)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    # Relationships
    rooms: Mapped[list["Room"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="hotel", lazy="selectin", cascade="all, delete-orphan"
    )

    __table_args__ = (UniqueConstraint("name", "address", name="uq_hotels_name_address"),)

    def __repr__(self) -> str:
        return f"<Hotel(id={self.id}, name={self.name!r})>"
