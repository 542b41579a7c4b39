"""Acting identity and authorization checks.

Tokens are issued elsewhere; this module only reads the ``sub`` and ``role``
claims of a Bearer JWT. A missing or invalid token means an anonymous caller.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from api.config import JWT_ALGORITHM, JWT_EXPIRATION_DAYS, JWT_SECRET_KEY
from domain.model.user import Role

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Actor:
    """Identity performing the request."""
    id: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def create_access_token(user_id: str, role: Role | str = Role.USER) -> str:
    """Create JWT access token for an actor."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "role": Role(role).value,
        "exp": now + timedelta(days=JWT_EXPIRATION_DAYS),
        "iat": now,
    }
    return jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_token(token: str) -> Optional[Actor]:
    """Verify JWT token and extract the actor."""
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        return None

    user_id = payload.get("sub")
    if user_id is None:
        return None
    try:
        role = Role(payload.get("role", Role.USER))
    except ValueError:
        logger.debug("JWT carries unknown role", extra={"userId": user_id})
        return None
    return Actor(id=user_id, role=role)


def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Actor]:
    """Get the acting identity (optional). Returns None if no valid token."""
    if not credentials:
        return None
    return verify_token(credentials.credentials)


def can_access_user(actor: Optional[Actor], user_id: str) -> bool:
    """Self or admin may read, update or delete an account."""
    if actor is None:
        return False
    return actor.id == user_id or actor.is_admin


def can_list_users(actor: Optional[Actor]) -> bool:
    return actor is not None and actor.is_admin
