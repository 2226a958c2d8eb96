"""Workshop catalog endpoints. Reads are public, mutations are admin-only."""

import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from workshophub.api.dependencies import require_roles
from workshophub.core import messages
from workshophub.core.database import get_db
from workshophub.core.roles import ADMIN_ONLY, INSTRUCTOR_ONLY
from workshophub.models.user import User
from workshophub.workshops.crud import WorkshopCRUD
from workshophub.workshops.schemas import (
    WorkshopCreate,
    WorkshopDetail,
    WorkshopResponse,
    WorkshopUpdate,
)


router = APIRouter(prefix="/workshops", tags=["workshops"])


@router.get("", response_model=List[WorkshopResponse])
def list_workshops(db: Session = Depends(get_db)):
    return WorkshopCRUD.list(db)


@router.get("/my", response_model=List[WorkshopResponse])
def list_my_workshops(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(INSTRUCTOR_ONLY)),
):
    """Workshops the calling instructor is assigned to."""
    return WorkshopCRUD.list(db, instructor_id=current_user.id)


@router.get("/{workshop_id}", response_model=WorkshopDetail)
def get_workshop(workshop_id: uuid.UUID, db: Session = Depends(get_db)):
    workshop = WorkshopCRUD.get_or_404(db, workshop_id)
    taken = WorkshopCRUD.active_registration_count(db, workshop_id)
    return {
        "workshop": workshop,
        "registrations": taken,
        "seats_left": max(workshop.seats - taken, 0),
    }


@router.post("", status_code=status.HTTP_201_CREATED, response_model=WorkshopResponse)
def create_workshop(
    payload: WorkshopCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN_ONLY)),
):
    return WorkshopCRUD.create(db, created_by=current_user.id, **payload.model_dump())


@router.put("/{workshop_id}", response_model=WorkshopResponse)
def update_workshop(
    workshop_id: uuid.UUID,
    payload: WorkshopUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN_ONLY)),
):
    return WorkshopCRUD.update(
        db,
        workshop_id,
        updated_by=current_user.id,
        **payload.model_dump(exclude_unset=True),
    )


@router.delete("/{workshop_id}")
def delete_workshop(
    workshop_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN_ONLY)),
):
    WorkshopCRUD.delete(db, workshop_id, deleted_by=current_user.id)
    return {"message": messages.WORKSHOP_DELETED}
