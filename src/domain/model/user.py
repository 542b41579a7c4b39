import math
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class Role(str, Enum):
    """Account roles. ``ADMIN`` may act on any account."""
    USER = 'user'
    ADMIN = 'admin'


@dataclass
class User:
    """Domain model representing a stored account."""
    id: str
    email: str
    username: str
    password: str
    created_at: datetime
    updated_at: datetime
    first_name: str = ''
    last_name: str = ''
    role: Role = Role.USER

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()

    def to_safe_object(self) -> dict[str, Any]:
        """Every field except ``password``, values unchanged."""
        return {k: v for k, v in asdict(self).items() if k != 'password'}


@dataclass
class UserPage:
    """One page of safe user views plus the unfiltered total."""
    users: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10

    @property
    def total_pages(self) -> int:
        if not self.limit:
            return 0
        return math.ceil(self.total / self.limit)
