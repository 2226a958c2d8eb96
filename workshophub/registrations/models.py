"""Registration ledger model."""

import datetime
import enum
import uuid

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Uuid, func, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workshophub.models.base import TimestampedUUIDModel
from workshophub.models.user import User
from workshophub.workshops.models import Workshop


class RegistrationStatus(str, enum.Enum):
    REGISTERED = "registered"
    CANCELLED = "cancelled"


class Registration(TimestampedUUIDModel):
    """A participant's seat in a workshop. Cancelled rather than deleted."""

    __tablename__ = "registrations"
    __table_args__ = (
        # At most one active registration per (workshop, user)
        Index(
            "uq_registrations_active_workshop_user",
            "workshop_id",
            "user_id",
            unique=True,
            postgresql_where=text("status = 'registered'"),
            sqlite_where=text("status = 'registered'"),
        ),
    )

    workshop_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workshops.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[RegistrationStatus] = mapped_column(
        Enum(
            RegistrationStatus,
            name="registration_status",
            values_callable=lambda e: [s.value for s in e],
        ),
        nullable=False,
        default=RegistrationStatus.REGISTERED,
    )
    registration_date: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    workshop: Mapped[Workshop] = relationship(Workshop, lazy="joined")
    user: Mapped[User] = relationship(User, lazy="joined")
