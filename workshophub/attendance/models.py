import uuid

from sqlalchemy import Boolean, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workshophub.models.base import TimestampedUUIDModel
from workshophub.registrations.models import Registration


class Attendance(TimestampedUUIDModel):
    __tablename__ = "attendance"

    registration_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("registrations.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    attended: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    marked_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id"), nullable=True)

    registration: Mapped[Registration] = relationship(Registration, lazy="joined")
