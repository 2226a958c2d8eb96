from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from fastapi import Request
from sqlalchemy.orm import Session

from workshophub.models.audit_log import AuditLog

logger = logging.getLogger("workshophub.audit")


def log_auth_event(
    db: Session,
    request: Request,
    *,
    user_id: Optional[uuid.UUID],
    action_type: str,
    success: bool,
    details: Optional[dict[str, Any]] = None,
) -> None:
    """Persist an authentication event (signup, login, logout)."""
    log = AuditLog(
        user_id=user_id,
        action_type=action_type,
        resource_type="auth",
        details={"success": success, **(details or {})},
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    db.add(log)
    db.commit()
    logger.info("%s user=%s success=%s", action_type, user_id, success)
