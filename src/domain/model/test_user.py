"""Unit tests for the User domain model, Result and the error taxonomy.

Tests focus on behavior other components rely on:
- to_safe_object() drops only the password (store and routes return it)
- Role string-enum conversion (tokens and request bodies carry plain strings)
- UserPage.total_pages (pagination meta)
- Result.unwrap() and error status codes (route rendering)
"""

import dataclasses
import unittest
from datetime import datetime, timezone

from domain.model.errors import (
    ConflictError,
    DomainError,
    ErrorKind,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from domain.model.result import Result
from domain.model.user import Role, User, UserPage

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _make_user(**kwargs) -> User:
    defaults = {
        'id': 'user-1',
        'email': 'alice@example.com',
        'username': 'alice',
        'password': 'hashed-secret',
        'created_at': NOW,
        'updated_at': NOW,
    }
    defaults.update(kwargs)
    return User(**defaults)


class TestUser(unittest.TestCase):

    def test_defaults(self):
        user = _make_user()

        self.assertEqual(user.first_name, '')
        self.assertEqual(user.last_name, '')
        self.assertEqual(user.role, Role.USER)

    def test_safe_object_has_no_password(self):
        self.assertNotIn('password', _make_user().to_safe_object())

    def test_safe_object_keeps_every_other_field_unchanged(self):
        user = _make_user(first_name='Alice', last_name='Liddell', role=Role.ADMIN)
        safe = user.to_safe_object()

        expected = {f.name for f in dataclasses.fields(User)} - {'password'}
        self.assertEqual(set(safe), expected)
        for name in expected:
            self.assertEqual(safe[name], getattr(user, name))

    def test_safe_object_is_a_copy(self):
        user = _make_user()
        safe = user.to_safe_object()
        safe['email'] = 'changed@example.com'

        self.assertEqual(user.email, 'alice@example.com')

    def test_full_name(self):
        self.assertEqual(_make_user(first_name='Alice', last_name='Liddell').full_name, 'Alice Liddell')
        self.assertEqual(_make_user(first_name='Alice').full_name, 'Alice')
        self.assertEqual(_make_user().full_name, '')


class TestRole(unittest.TestCase):

    def test_role_is_string_enum(self):
        self.assertEqual(Role.USER, 'user')
        self.assertEqual(Role.ADMIN, 'admin')
        self.assertEqual(Role('admin'), Role.ADMIN)

    def test_unknown_role_raises(self):
        with self.assertRaises(ValueError):
            Role('root')


class TestUserPage(unittest.TestCase):

    def test_total_pages_rounds_up(self):
        self.assertEqual(UserPage(total=5, page=1, limit=2).total_pages, 3)
        self.assertEqual(UserPage(total=4, page=1, limit=2).total_pages, 2)
        self.assertEqual(UserPage(total=0, page=1, limit=10).total_pages, 0)

    def test_total_pages_with_zero_limit(self):
        self.assertEqual(UserPage(total=5, page=1, limit=0).total_pages, 0)


class TestResult(unittest.TestCase):

    def test_success(self):
        result = Result.success({'id': 'x'})

        self.assertTrue(result.ok)
        self.assertIsNone(result.error)
        self.assertEqual(result.unwrap(), {'id': 'x'})

    def test_failure_unwrap_raises_carried_error(self):
        error = NotFoundError('User with ID x not found')
        result = Result.failure(error)

        self.assertFalse(result.ok)
        with self.assertRaises(NotFoundError) as context:
            result.unwrap()
        self.assertIs(context.exception, error)

    def test_success_with_falsy_value_is_ok(self):
        self.assertTrue(Result.success(False).ok)


class TestErrors(unittest.TestCase):

    def test_kinds_and_status_codes(self):
        cases = [
            (ValidationError('bad'), ErrorKind.INVALID_INPUT, 400),
            (ConflictError('dup'), ErrorKind.CONFLICT, 409),
            (NotFoundError('missing'), ErrorKind.NOT_FOUND, 404),
            (PermissionDeniedError('Unauthorized'), ErrorKind.UNAUTHORIZED, 403),
        ]
        for error, kind, status_code in cases:
            with self.subTest(error=type(error).__name__):
                self.assertIsInstance(error, DomainError)
                self.assertEqual(error.kind, kind)
                self.assertEqual(error.status_code, status_code)

    def test_validation_error_carries_field_errors(self):
        error = ValidationError('Invalid user data', {'email': 'Invalid email address'})

        self.assertEqual(error.message, 'Invalid user data')
        self.assertEqual(str(error), 'Invalid user data')
        self.assertEqual(error.errors, {'email': 'Invalid email address'})
        self.assertEqual(ValidationError('x').errors, {})


if __name__ == '__main__':
    unittest.main()
