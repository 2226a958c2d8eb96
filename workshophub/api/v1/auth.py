import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from workshophub.api.dependencies import get_current_user, get_token
from workshophub.core import messages
from workshophub.core.config import settings
from workshophub.core.database import get_db
from workshophub.core.exceptions import Unauthenticated
from workshophub.core.security import create_access_token, revoke_token
from workshophub.models.user import User
from workshophub.services.audit_service import log_auth_event
from workshophub.users.crud import UserCRUD
from workshophub.users.schemas import LoginRequest, LoginResponse, SignupRequest, UserResponse


logger = logging.getLogger("workshophub.auth")

router = APIRouter(prefix="/auth", tags=["auth"])


def _set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
def signup(
    request: Request,
    payload: SignupRequest,
    db: Session = Depends(get_db),
):
    """Create an account. Does not log the new user in."""
    user = UserCRUD.create(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )
    log_auth_event(
        db,
        request,
        user_id=user.id,
        action_type="AUTH_SIGNUP",
        success=True,
        details={"role": user.role.value},
    )
    return user


@router.post("/login", response_model=LoginResponse)
def login(
    request: Request,
    response: Response,
    payload: LoginRequest,
    db: Session = Depends(get_db),
):
    user = UserCRUD.authenticate(db, payload.email, payload.password)
    if not user:
        logger.warning("Failed login for %s", payload.email)
        log_auth_event(
            db,
            request,
            user_id=None,
            action_type="AUTH_LOGIN",
            success=False,
            details={"email": payload.email},
        )
        raise Unauthenticated(messages.AUTH_INVALID_CREDENTIALS)

    token = create_access_token(subject=user.id)
    _set_auth_cookie(response, token)

    log_auth_event(db, request, user_id=user.id, action_type="AUTH_LOGIN", success=True)
    return {"token": token, "user": user}


@router.post("/logout")
def logout(
    request: Request,
    response: Response,
    token: str = Depends(get_token),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    revoke_token(token)
    response.delete_cookie(settings.AUTH_COOKIE_NAME)

    log_auth_event(db, request, user_id=current_user.id, action_type="AUTH_LOGOUT", success=True)
    return {"message": messages.AUTH_LOGOUT_SUCCESS}
