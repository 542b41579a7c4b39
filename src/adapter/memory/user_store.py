"""In-memory implementation of UserStore.

Holds the account collection for the lifetime of the process. Each operation
runs its whole read-modify-write under one lock, so an existence check and the
insert that follows it can never interleave with another call.
"""

import threading
import uuid
from datetime import datetime, timedelta, timezone
from logging import getLogger
from typing import Any, Callable, Mapping

from domain.model.errors import ConflictError, NotFoundError, ValidationError
from domain.model.result import Result
from domain.model.user import Role, User, UserPage
from utils.passwords import hash_password
from utils.validation import validate_new_user

logger = getLogger(__name__)

REQUIRED_FIELDS = ('email', 'username', 'password')

# Fields update_user may overwrite. id, password, role and the timestamps
# are owned by the store.
UPDATABLE_FIELDS = ('email', 'username', 'first_name', 'last_name')


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryUserStore:
    def __init__(
        self,
        password_hasher: Callable[[str], str] = hash_password,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._users: dict[str, User] = {}
        self._issued_ids: set[str] = set()
        self._hash_password = password_hasher
        self._clock = clock
        self._lock = threading.RLock()

    # ── write operations ─────────────────────────────────────

    def create_user(self, user_data: Mapping[str, Any]) -> Result[dict]:
        if not all(user_data.get(name) for name in REQUIRED_FIELDS):
            return Result.failure(ValidationError('Email, username and password are required'))

        validation = validate_new_user(user_data)
        if not validation.is_valid:
            return Result.failure(ValidationError('Invalid user data', validation.errors))

        try:
            role = Role(user_data.get('role') or Role.USER)
        except ValueError:
            return Result.failure(ValidationError(
                'Invalid user data',
                {'role': f"Role must be one of: {', '.join(r.value for r in Role)}"},
            ))

        email = user_data['email']
        username = user_data['username']
        # hashing runs outside the lock
        password = self._hash_password(user_data['password'])

        with self._lock:
            if any(u.email == email or u.username == username for u in self._users.values()):
                logger.debug("User creation rejected: duplicate", extra={"email": email, "username": username})
                return Result.failure(ConflictError('User with this email or username already exists'))

            now = self._clock()
            user = User(
                id=self._new_id(),
                email=email,
                username=username,
                password=password,
                first_name=user_data.get('first_name') or '',
                last_name=user_data.get('last_name') or '',
                role=role,
                created_at=now,
                updated_at=now,
            )
            self._users[user.id] = user
            return Result.success(user.to_safe_object())

    def update_user(self, user_id: str, updates: Mapping[str, Any]) -> Result[dict]:
        with self._lock:
            user = self._users.get(user_id)
            if not user:
                return Result.failure(_not_found_by_id(user_id))

            # id, password, role (and unknown keys) are dropped silently
            for name in UPDATABLE_FIELDS:
                if name in updates:
                    setattr(user, name, updates[name])
            user.updated_at = self._next_timestamp(user.updated_at)
            return Result.success(user.to_safe_object())

    def delete_user(self, user_id: str) -> Result[bool]:
        with self._lock:
            if user_id not in self._users:
                return Result.failure(_not_found_by_id(user_id))
            del self._users[user_id]
            return Result.success(True)

    # ── read operations ──────────────────────────────────────

    def get_user_by_id(self, user_id: str) -> Result[dict]:
        with self._lock:
            user = self._users.get(user_id)
            if not user:
                return Result.failure(_not_found_by_id(user_id))
            return Result.success(user.to_safe_object())

    def get_user_by_email(self, email: str) -> Result[dict]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return Result.success(user.to_safe_object())
        return Result.failure(NotFoundError(f'User with email {email} not found'))

    def get_all_users(self, page: int = 1, limit: int = 10) -> Result[UserPage]:
        with self._lock:
            users = list(self._users.values())
        start = (page - 1) * limit
        end = page * limit
        return Result.success(UserPage(
            users=[u.to_safe_object() for u in users[start:end]],
            total=len(users),
            page=page,
            limit=limit,
        ))

    def count(self) -> int:
        return len(self._users)

    # ── internals ────────────────────────────────────────────

    def _new_id(self) -> str:
        user_id = uuid.uuid4().hex
        while user_id in self._issued_ids:
            user_id = uuid.uuid4().hex
        self._issued_ids.add(user_id)
        return user_id

    def _next_timestamp(self, previous: datetime) -> datetime:
        now = self._clock()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now


def _not_found_by_id(user_id: str) -> NotFoundError:
    return NotFoundError(f'User with ID {user_id} not found')
