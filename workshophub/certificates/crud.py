"""Certificate issuing, listing and download authorization."""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import ColumnElement, true
from sqlalchemy.orm import Session

from workshophub.core import messages
from workshophub.core.exceptions import Forbidden, NotFound, ValidationFailed
from workshophub.core.roles import Role
from workshophub.models.user import User
from workshophub.users.crud import UserCRUD
from workshophub.workshops.crud import WorkshopCRUD
from .models import Certificate


logger = logging.getLogger("workshophub.certificates.crud")


class CertificateCRUD:

    @staticmethod
    def visible_to(user: User) -> ColumnElement[bool]:
        """Admins see every certificate; everyone else only their own."""
        if user.role == Role.ADMIN:
            return true()
        return Certificate.user_id == user.id

    @staticmethod
    def issue(
        db: Session,
        issued_by: User,
        workshop_id: Optional[uuid.UUID],
        user_id: Optional[uuid.UUID],
        certificate_url: Optional[str],
    ) -> Certificate:
        if workshop_id is None or user_id is None or not certificate_url:
            raise ValidationFailed(messages.CERTIFICATE_FIELDS_REQUIRED)
        WorkshopCRUD.get_or_404(db, workshop_id)
        if not UserCRUD.get_by_id(db, user_id):
            raise NotFound(messages.USER_NOT_FOUND)

        certificate = Certificate(
            workshop_id=workshop_id,
            user_id=user_id,
            certificate_url=certificate_url,
            created_by=str(issued_by.id),
        )
        db.add(certificate)
        db.commit()
        db.refresh(certificate)
        logger.info("Certificate %s issued to %s for workshop %s", certificate.id, user_id, workshop_id)
        return certificate

    @staticmethod
    def list(db: Session, user: User) -> List[Certificate]:
        return (
            db.query(Certificate)
            .filter(CertificateCRUD.visible_to(user))
            .order_by(Certificate.issued_date.desc())
            .all()
        )

    @staticmethod
    def get_for_download(db: Session, user: User, certificate_id: uuid.UUID) -> Certificate:
        """Return the certificate if ``user`` may download it.

        Unknown ids are 404 for everyone; existing certificates owned by
        somebody else are 403.
        """
        certificate = db.get(Certificate, certificate_id)
        if not certificate:
            raise NotFound(messages.CERTIFICATE_NOT_FOUND)
        visible = (
            db.query(Certificate.id)
            .filter(Certificate.id == certificate_id, CertificateCRUD.visible_to(user))
            .first()
        )
        if not visible:
            logger.warning("User %s denied download of certificate %s", user.id, certificate_id)
            raise Forbidden(messages.CERTIFICATE_NOT_OWNER)
        return certificate
