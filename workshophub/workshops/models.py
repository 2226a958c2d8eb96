"""Workshop catalog model."""

import datetime
import uuid

from sqlalchemy import Date, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workshophub.models.base import SoftDeleteMixin, TimestampedUUIDModel
from workshophub.models.user import User


class Workshop(SoftDeleteMixin, TimestampedUUIDModel):
    """A scheduled workshop with a fixed number of seats."""

    __tablename__ = "workshops"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    time: Mapped[str | None] = mapped_column(String(20), nullable=True)
    venue: Mapped[str | None] = mapped_column(String(200), nullable=True)
    seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    instructor_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    instructor: Mapped[User | None] = relationship(User, lazy="joined")
