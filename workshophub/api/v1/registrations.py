import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from workshophub.api.dependencies import get_current_user, require_roles
from workshophub.core.database import get_db
from workshophub.core.roles import PARTICIPANT_ONLY
from workshophub.models.user import User
from workshophub.registrations.crud import RegistrationCRUD
from workshophub.registrations.schemas import RegistrationCreate, RegistrationResponse


router = APIRouter(prefix="/registrations", tags=["registrations"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RegistrationResponse)
def register_for_workshop(
    payload: RegistrationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(PARTICIPANT_ONLY)),
):
    return RegistrationCRUD.register(db, current_user, payload.workshop_id)


@router.get("", response_model=List[RegistrationResponse])
def list_registrations(
    workshop: Optional[uuid.UUID] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Participants get their own registrations; staff get everyone's."""
    return RegistrationCRUD.list(db, current_user, workshop_id=workshop)


@router.get("/{registration_id}", response_model=RegistrationResponse)
def get_registration(
    registration_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return RegistrationCRUD.get_visible(db, current_user, registration_id)


@router.put("/{registration_id}/unregister", response_model=RegistrationResponse)
def unregister_from_workshop(
    registration_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(PARTICIPANT_ONLY)),
):
    return RegistrationCRUD.cancel(db, current_user, registration_id)
