from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from workshophub.core.roles import Role

from .base import TimestampedUUIDModel


class User(TimestampedUUIDModel):
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role", values_callable=lambda e: [r.value for r in e]),
        nullable=False,
        default=Role.PARTICIPANT,
    )
