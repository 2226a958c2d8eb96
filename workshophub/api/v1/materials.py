import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from workshophub.api.dependencies import get_current_user, require_roles
from workshophub.core.database import get_db
from workshophub.core.roles import STAFF
from workshophub.materials.crud import MaterialCRUD
from workshophub.materials.schemas import MaterialCreate, MaterialResponse
from workshophub.models.user import User


router = APIRouter(prefix="/materials", tags=["materials"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MaterialResponse)
def add_material(
    payload: MaterialCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(STAFF)),
):
    return MaterialCRUD.add(
        db,
        current_user,
        workshop_id=payload.workshop,
        title=payload.title,
        file_url=payload.file_url,
    )


@router.get("", response_model=List[MaterialResponse])
def list_materials(
    workshop: Optional[uuid.UUID] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return MaterialCRUD.list(db, current_user, workshop_id=workshop)
