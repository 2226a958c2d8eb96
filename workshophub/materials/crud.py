import logging
import uuid
from typing import List, Optional

from sqlalchemy import ColumnElement, true
from sqlalchemy.orm import Session

from workshophub.core import messages
from workshophub.core.exceptions import ValidationFailed
from workshophub.models.user import User
from workshophub.workshops.crud import WorkshopCRUD
from .models import Material


logger = logging.getLogger("workshophub.materials.crud")


class MaterialCRUD:

    @staticmethod
    def visible_to(user: User) -> ColumnElement[bool]:
        # Every authenticated user may read every material
        return true()

    @staticmethod
    def add(
        db: Session,
        user: User,
        workshop_id: Optional[uuid.UUID],
        title: Optional[str],
        file_url: Optional[str],
    ) -> Material:
        if workshop_id is None or not title or not file_url:
            raise ValidationFailed(messages.MATERIAL_FIELDS_REQUIRED)
        WorkshopCRUD.get_or_404(db, workshop_id)

        material = Material(
            workshop_id=workshop_id,
            title=title,
            file_url=file_url,
            uploaded_by=user.id,
            created_by=str(user.id),
        )
        db.add(material)
        db.commit()
        db.refresh(material)
        logger.info("Material %s added to workshop %s by %s", material.id, workshop_id, user.id)
        return material

    @staticmethod
    def list(
        db: Session,
        user: User,
        workshop_id: Optional[uuid.UUID] = None,
    ) -> List[Material]:
        query = db.query(Material).filter(MaterialCRUD.visible_to(user))
        if workshop_id is not None:
            query = query.filter(Material.workshop_id == workshop_id)
        return query.order_by(Material.created_at.desc()).all()
