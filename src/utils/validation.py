"""Validation utilities.

Pure predicates over primitive values plus a tiny schema combinator.
The user store runs these before any mutation; nothing here touches state.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')

# min 8 chars, at least one letter and one number
PASSWORD_PATTERN = re.compile(r'(?=.*[A-Za-z])(?=.*[0-9])[A-Za-z0-9@$!%*#?&]{8,}')

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20


@dataclass(frozen=True)
class FieldResult:
    """Outcome of a single field validator."""
    is_valid: bool
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a schema validator: overall flag plus failing fields."""
    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)


FieldValidator = Callable[[Any], FieldResult]


def is_valid_email(email: Any) -> bool:
    if not email or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_password(password: Any) -> bool:
    if not password or not isinstance(password, str):
        return False
    return PASSWORD_PATTERN.fullmatch(password) is not None


def is_valid_username(username: Any) -> bool:
    if not username or not isinstance(username, str):
        return False
    return USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH


def field_validator(predicate: Callable[[Any], bool], message: str) -> FieldValidator:
    """Adapt a boolean predicate into a field validator."""
    def validate(value: Any) -> FieldResult:
        return FieldResult(is_valid=bool(predicate(value)), message=message)
    return validate


def create_validator(
    schema: Mapping[str, FieldValidator],
) -> Callable[[Mapping[str, Any]], ValidationResult]:
    """Build a record validator from a mapping of field name -> field validator.

    Every field in the schema is checked against ``record.get(field)``;
    fields in the record but not in the schema are ignored.
    """
    def validate(record: Mapping[str, Any]) -> ValidationResult:
        errors = {}
        for name, validator in schema.items():
            result = validator(record.get(name))
            if not result.is_valid:
                errors[name] = result.message
        return ValidationResult(is_valid=not errors, errors=errors)
    return validate


validate_new_user = create_validator({
    'email': field_validator(is_valid_email, 'Invalid email address'),
    'username': field_validator(
        is_valid_username,
        f'Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters',
    ),
    'password': field_validator(
        is_valid_password,
        'Password must be at least 8 characters and contain a letter and a number',
    ),
})
