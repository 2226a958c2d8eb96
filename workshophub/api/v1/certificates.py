import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from workshophub.api.dependencies import get_current_user, require_roles
from workshophub.certificates.crud import CertificateCRUD
from workshophub.certificates.schemas import CertificateCreate, CertificateResponse
from workshophub.core.database import get_db
from workshophub.core.roles import ADMIN_ONLY
from workshophub.models.user import User


router = APIRouter(prefix="/certificates", tags=["certificates"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CertificateResponse)
def issue_certificate(
    payload: CertificateCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN_ONLY)),
):
    return CertificateCRUD.issue(
        db,
        current_user,
        workshop_id=payload.workshop,
        user_id=payload.user_id,
        certificate_url=payload.certificate_url,
    )


@router.get("", response_model=List[CertificateResponse])
def list_certificates(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return CertificateCRUD.list(db, current_user)


@router.get("/download/{certificate_id}")
def download_certificate(
    certificate_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Redirect the owner (or an admin) to the stored certificate file."""
    certificate = CertificateCRUD.get_for_download(db, current_user, certificate_id)
    return RedirectResponse(certificate.certificate_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
