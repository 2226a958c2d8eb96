"""CRUD operations for user accounts (the identity store)."""

import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from workshophub.core import messages
from workshophub.core.config import settings
from workshophub.core.exceptions import Conflict, Forbidden, ValidationFailed
from workshophub.core.roles import Role
from workshophub.core.security import get_password_hash, verify_password
from workshophub.models.user import User


logger = logging.getLogger("workshophub.users.crud")


class UserCRUD:
    """CRUD operations for users."""

    @staticmethod
    def get_by_id(db: Session, user_id: uuid.UUID) -> Optional[User]:
        return db.get(User, user_id)

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email.lower()).first()

    @staticmethod
    def list(db: Session, role: Optional[Role] = None) -> List[User]:
        query = db.query(User)
        if role is not None:
            query = query.filter(User.role == role)
        return query.order_by(User.name).all()

    @staticmethod
    def create(
        db: Session,
        name: str,
        email: str,
        password: str,
        role: Role = Role.PARTICIPANT,
        allow_admin: Optional[bool] = None,
    ) -> User:
        """Create a user account. Admin accounts need ``allow_admin`` or ALLOW_ADMIN_SIGNUP."""
        if allow_admin is None:
            allow_admin = settings.ALLOW_ADMIN_SIGNUP
        if role == Role.ADMIN and not allow_admin:
            raise Forbidden(messages.REG_ADMIN_SIGNUP_DISABLED)

        email = email.lower()
        if UserCRUD.get_by_email(db, email):
            raise Conflict(messages.REG_EMAIL_EXISTS)

        try:
            password_hash = get_password_hash(password)
        except ValueError as e:
            raise ValidationFailed(str(e)) from e

        user = User(name=name, email=email, password_hash=password_hash, role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Created %s account %s", role.value, user.id)
        return user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> Optional[User]:
        """Return the user if the credentials match, else None."""
        user = UserCRUD.get_by_email(db, email)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user
