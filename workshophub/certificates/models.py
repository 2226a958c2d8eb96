import datetime
import uuid

from sqlalchemy import DateTime, ForeignKey, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workshophub.models.base import TimestampedUUIDModel
from workshophub.models.user import User
from workshophub.workshops.models import Workshop


class Certificate(TimestampedUUIDModel):
    __tablename__ = "certificates"

    workshop_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workshops.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    certificate_url: Mapped[str] = mapped_column(String(1000), nullable=False)
    issued_date: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    workshop: Mapped[Workshop] = relationship(Workshop, lazy="joined")
    user: Mapped[User] = relationship(User, lazy="joined")
