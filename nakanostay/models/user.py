"""User model: registered people known to the back office."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from nakanostay.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A registered user identified by national DNI and email."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    dni: Mapped[str] = mapped_column(String(10), unique=True, index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), default=None)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
