"""User account routes.

Endpoints:
- POST /users: Create an account (public)
- GET /users: List accounts with pagination (admin only)
- GET /users/{id}: Get an account (self or admin)
- PUT /users/{id}: Update an account (self or admin)
- DELETE /users/{id}: Delete an account (self or admin)

The store returns a ``Result`` for every call; handlers render failures
through ``error_response`` instead of letting exceptions unwind.
"""

import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, status

from api.dependencies import get_user_store
from api.models import UserCreateRequest, UserUpdateRequest
from api.responses import error_response, page_response, success_response, user_payload
from api.security import Actor, can_access_user, can_list_users, get_current_actor
from domain.model.errors import PermissionDeniedError
from port.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_INT_PREFIX = re.compile(r'\s*([+-]?\d+)')


def _parse_int(raw: Optional[str], default: int) -> int:
    """Parse a leading integer like JavaScript's ``parseInt(raw) || default``."""
    if raw is None:
        return default
    match = _INT_PREFIX.match(raw)
    if not match:
        return default
    return int(match.group(1)) or default


def _unauthorized():
    return error_response(PermissionDeniedError("Unauthorized"))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreateRequest,
    actor: Optional[Actor] = Depends(get_current_actor),
    store: UserStore = Depends(get_user_store),
):
    """Create a new account. Only admins may choose the role."""
    user_data = request.model_dump(exclude_unset=True)
    if 'role' in user_data and not (actor and actor.is_admin):
        user_data.pop('role')

    result = store.create_user(user_data)
    if not result.ok:
        return error_response(result.error)

    user = result.value
    logger.info("User created", extra={"userId": user['id']})
    return success_response(user_payload(user), status_code=status.HTTP_201_CREATED)


@router.get("")
async def list_users(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    actor: Optional[Actor] = Depends(get_current_actor),
    store: UserStore = Depends(get_user_store),
):
    """List accounts in creation order (admin only)."""
    if not can_list_users(actor):
        return _unauthorized()

    result = store.get_all_users(
        page=_parse_int(page, DEFAULT_PAGE),
        limit=_parse_int(limit, DEFAULT_LIMIT),
    )
    if not result.ok:
        return error_response(result.error)
    return page_response(result.value)


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    store: UserStore = Depends(get_user_store),
):
    """Get an account by ID."""
    if not can_access_user(actor, user_id):
        return _unauthorized()

    result = store.get_user_by_id(user_id)
    if not result.ok:
        return error_response(result.error)
    return success_response(user_payload(result.value))


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    request: UserUpdateRequest,
    actor: Optional[Actor] = Depends(get_current_actor),
    store: UserStore = Depends(get_user_store),
):
    """Update an account. id, password and role cannot be changed here."""
    if not can_access_user(actor, user_id):
        return _unauthorized()

    result = store.update_user(user_id, request.model_dump(exclude_unset=True))
    if not result.ok:
        return error_response(result.error)

    logger.info("User updated", extra={"userId": user_id})
    return success_response(user_payload(result.value))


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    store: UserStore = Depends(get_user_store),
):
    """Delete an account permanently."""
    if not can_access_user(actor, user_id):
        return _unauthorized()

    result = store.delete_user(user_id)
    if not result.ok:
        return error_response(result.error)

    logger.info("User deleted", extra={"userId": user_id})
    return {"success": True, "message": "User deleted successfully"}
