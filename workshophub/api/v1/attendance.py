import uuid
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from workshophub.api.dependencies import require_roles
from workshophub.attendance.crud import AttendanceCRUD
from workshophub.attendance.schemas import AttendanceMark, AttendanceResponse
from workshophub.core.database import get_db
from workshophub.core.roles import STAFF
from workshophub.models.user import User


router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.post("/mark", response_model=AttendanceResponse)
def mark_attendance(
    payload: AttendanceMark,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(STAFF)),
):
    return AttendanceCRUD.mark(db, current_user, payload.registration_id, payload.attended)


@router.get("/workshop/{workshop_id}", response_model=List[AttendanceResponse])
def list_workshop_attendance(
    workshop_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(STAFF)),
):
    return AttendanceCRUD.list_by_workshop(db, current_user, workshop_id)
