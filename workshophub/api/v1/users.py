from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from workshophub.api.dependencies import get_current_user, require_roles
from workshophub.core.database import get_db
from workshophub.core.roles import ADMIN_ONLY, Role
from workshophub.models.user import User
from workshophub.users.crud import UserCRUD
from workshophub.users.schemas import UserResponse


router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.get("", response_model=List[UserResponse])
def list_users(
    role: Optional[Role] = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_roles(ADMIN_ONLY)),
):
    """List accounts, optionally only one role (e.g. instructors for assignment)."""
    return UserCRUD.list(db, role=role)
