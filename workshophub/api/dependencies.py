"""Access guard: resolve the caller from the session token and enforce route roles."""

from __future__ import annotations

import logging
from typing import Annotated, Callable, Iterable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from workshophub.core import messages
from workshophub.core.config import settings
from workshophub.core.database import get_db
from workshophub.core.exceptions import Forbidden, InvalidToken, Unauthenticated
from workshophub.core.roles import Role
from workshophub.core.security import verify_access_token
from workshophub.models.user import User
from workshophub.users.crud import UserCRUD


logger = logging.getLogger("workshophub.dependencies")

bearer_scheme = HTTPBearer(auto_error=False)


def get_token(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str:
    """Read the session token; the cookie wins over the Authorization header."""
    cookie_token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if cookie_token:
        return cookie_token
    if credentials and credentials.credentials:
        return credentials.credentials
    raise Unauthenticated(messages.AUTH_NO_TOKEN)


def get_current_user(
    request: Request,
    token: Annotated[str, Depends(get_token)],
    db: Session = Depends(get_db),
) -> User:
    user_id = verify_access_token(token)

    user = UserCRUD.get_by_id(db, user_id)
    if not user:
        logger.warning("Valid token for missing user %s", user_id)
        raise InvalidToken(messages.AUTH_USER_NOT_FOUND)
    request.state.user_id = str(user.id)
    return user


def authorize(user: User, allowed_roles: Iterable[Role]) -> User:
    if user.role not in allowed_roles:
        logger.warning(
            "User %s with role %s denied (requires %s)",
            user.id,
            user.role.value,
            sorted(r.value for r in allowed_roles),
        )
        raise Forbidden(messages.AUTH_INSUFFICIENT_ROLE)
    return user


def require_roles(allowed_roles: frozenset[Role]) -> Callable[[User], User]:
    def dependency(current_user: Annotated[User, Depends(get_current_user)]) -> User:
        return authorize(current_user, allowed_roles)

    return dependency
