"""Email confirmation tokens."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from core.config import settings


def create_confirmation_token(
    user_id: UUID,
    secret_key: str = settings.jwt_secret_key,
    algorithm: str = settings.jwt_algorithm,
    expire_minutes: int = settings.confirmation_token_expire_minutes,
) -> str:
    """Create a signed token proving ownership of a user's email address."""
    now = datetime.utcnow()
    payload: dict = {
        "uid": str(user_id),
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def decode_confirmation_token(
    token: str,
    secret_key: str = settings.jwt_secret_key,
    algorithm: str = settings.jwt_algorithm,
) -> Optional[UUID]:
    """Return the user ID from a confirmation token, or None if invalid or expired."""
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError:
        return None

    uid = payload.get("uid")
    if not uid:
        return None

    try:
        return UUID(uid)
    except ValueError:
        return None
