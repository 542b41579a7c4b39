"""JSON envelope helpers shared by the route handlers.

Success: ``{"success": true, "data": ...}`` (plus ``meta`` for lists).
Failure: ``{"success": false, "message": ...}`` (plus ``errors`` for field validation).
"""

from typing import Any

from fastapi.responses import JSONResponse

from api.models import PaginationMeta, UserResponse
from domain.model.errors import DomainError, ValidationError
from domain.model.user import UserPage


def user_payload(view: dict) -> dict:
    """Render a safe user view in the camelCase wire format."""
    return UserResponse.model_validate(view).model_dump(by_alias=True, mode='json')


def success_response(data: Any, status_code: int = 200, meta: dict | None = None) -> JSONResponse:
    content = {"success": True, "data": data}
    if meta is not None:
        content["meta"] = meta
    return JSONResponse(status_code=status_code, content=content)


def page_response(page: UserPage) -> JSONResponse:
    meta = PaginationMeta(
        total=page.total,
        page=page.page,
        limit=page.limit,
        total_pages=page.total_pages,
    )
    return success_response(
        [user_payload(u) for u in page.users],
        meta=meta.model_dump(by_alias=True),
    )


def error_response(error: DomainError) -> JSONResponse:
    return failure_response(
        error.status_code,
        error.message,
        errors=error.errors if isinstance(error, ValidationError) else None,
    )


def failure_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    content = {"success": False, "message": message}
    content.update({k: v for k, v in extra.items() if v})
    return JSONResponse(status_code=status_code, content=content)
