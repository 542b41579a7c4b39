"""Pydantic models for API request/response.

The wire format is camelCase; ``model_dump()`` hands the store snake_case keys.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.model.user import Role


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreateRequest(CamelModel):
    """Request model for account creation.

    Every field is optional here so the store can report missing required
    fields itself.
    """
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None


class UserUpdateRequest(CamelModel):
    """Request model for account update.

    id, password and role are accepted on the wire and ignored by the store.
    """
    id: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None


class UserResponse(CamelModel):
    """Safe view of an account (never carries the password).

    Profile fields are optional because updates are not re-validated.
    """
    id: str = Field(..., description="User ID")
    email: Optional[str] = Field(None, description="User email")
    username: Optional[str] = Field(None, description="Unique username")
    first_name: Optional[str] = Field("", description="First name")
    last_name: Optional[str] = Field("", description="Last name")
    role: Role = Field(Role.USER, description="Role: user or admin")
    created_at: datetime = Field(..., description="Account creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class PaginationMeta(CamelModel):
    """Pagination block attached to list responses."""
    total: int = Field(..., description="Total number of users")
    page: int
    limit: int
    total_pages: int = Field(..., description="ceil(total / limit)")
