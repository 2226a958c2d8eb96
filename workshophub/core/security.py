from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import logging
import uuid

import bcrypt
from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import settings
from .exceptions import InvalidToken
from .redis import get_redis_client

logger = logging.getLogger("workshophub.security")

MIN_PASSWORD_LENGTH = 8

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def _bcrypt_bytes(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes
    return password.encode("utf-8")[:72]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except Exception:
        # passlib's bcrypt backend probe fails on newer bcrypt releases
        logger.debug("passlib verify failed, using bcrypt directly")
    try:
        return bcrypt.checkpw(_bcrypt_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def get_password_hash(password: str) -> str:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")

    try:
        return pwd_context.hash(password)
    except Exception:
        logger.debug("passlib hash failed, using bcrypt directly")

    return bcrypt.hashpw(_bcrypt_bytes(password), bcrypt.gensalt()).decode("utf-8")


def create_token(
    subject: str | Any,
    expires_delta: Optional[timedelta],
    token_type: str = "access",
    jti: Optional[str] = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload: dict[str, Any] = {
        "sub": str(subject),
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
        "type": token_type,
        "jti": jti or uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(subject: str | Any) -> str:
    """Issue a session token bound to ``subject`` (the user id)."""
    expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return create_token(subject, expires, token_type="access")


def decode_token(token: str, expected_type: str = "access") -> dict[str, Any]:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError as exc:
        raise InvalidToken("Token invalid or expired") from exc
    if payload.get("type") != expected_type:
        raise InvalidToken("Token invalid or expired")
    return payload


def verify_access_token(token: str) -> uuid.UUID:
    """Return the user id bound to ``token``.

    Raises InvalidToken when the token is malformed, expired, signed with a
    different key, carries a bad subject, or was revoked at logout.
    """
    payload = decode_token(token, expected_type="access")

    try:
        user_id = uuid.UUID(payload.get("sub") or "")
    except ValueError as exc:
        raise InvalidToken("Invalid token payload") from exc

    jti = payload.get("jti")
    if jti and is_token_revoked(jti):
        raise InvalidToken("Token has been revoked")
    return user_id


def _revocation_key(jti: str) -> str:
    return f"auth:revoked:{jti}"


def revoke_token(token: str) -> None:
    """Deny-list the token's jti until it would expire. No-op without Redis."""
    r = get_redis_client()
    if r is None:
        return
    try:
        payload = decode_token(token)
    except InvalidToken:
        return
    ttl = int(payload["exp"] - datetime.now(timezone.utc).timestamp())
    if ttl > 0:
        r.set(_revocation_key(payload["jti"]), "1", ex=ttl)
        logger.info("Revoked token %s for user %s", payload["jti"], payload.get("sub"))


def is_token_revoked(jti: str) -> bool:
    r = get_redis_client()
    if r is None:
        return False
    return r.exists(_revocation_key(jti)) == 1
