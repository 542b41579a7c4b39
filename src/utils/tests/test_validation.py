"""Unit tests for validation predicates and the schema combinator."""

import unittest

from utils.validation import (
    FieldResult,
    ValidationResult,
    create_validator,
    field_validator,
    is_valid_email,
    is_valid_password,
    is_valid_username,
    validate_new_user,
)


class TestIsValidEmail(unittest.TestCase):

    def test_accepts_standard_addresses(self):
        for email in ('a@b.co', 'john.doe+tag@mail.example.org', 'x_y%z-1@sub-domain.io'):
            with self.subTest(email=email):
                self.assertTrue(is_valid_email(email))

    def test_rejects_malformed_addresses(self):
        for email in ('plain', 'no-at.example.com', 'a@b', 'a@b.c', 'a b@c.com', 'a@b.c0m', '@b.com'):
            with self.subTest(email=email):
                self.assertFalse(is_valid_email(email))

    def test_rejects_empty_and_non_string(self):
        self.assertFalse(is_valid_email(''))
        self.assertFalse(is_valid_email(None))
        self.assertFalse(is_valid_email(42))

    def test_rejects_trailing_garbage(self):
        """The whole string must match, not just a prefix."""
        self.assertFalse(is_valid_email('a@b.com\nextra'))


class TestIsValidPassword(unittest.TestCase):

    def test_accepts_letters_digits_and_symbols(self):
        for password in ('abcdefg1', 'Passw0rd!', '1234567a', 'a1@$!%*#?&'):
            with self.subTest(password=password):
                self.assertTrue(is_valid_password(password))

    def test_rejects_short_password(self):
        self.assertFalse(is_valid_password('abc1234'))

    def test_requires_letter_and_digit(self):
        self.assertFalse(is_valid_password('abcdefgh'))
        self.assertFalse(is_valid_password('12345678'))

    def test_rejects_disallowed_characters(self):
        self.assertFalse(is_valid_password('abcd 1234'))
        self.assertFalse(is_valid_password('abcd-1234'))

    def test_rejects_empty_and_non_string(self):
        self.assertFalse(is_valid_password(''))
        self.assertFalse(is_valid_password(None))
        self.assertFalse(is_valid_password(12345678))


class TestIsValidUsername(unittest.TestCase):

    def test_length_bounds_are_inclusive(self):
        self.assertTrue(is_valid_username('abc'))
        self.assertTrue(is_valid_username('a' * 20))

    def test_rejects_out_of_range_lengths(self):
        self.assertFalse(is_valid_username('ab'))
        self.assertFalse(is_valid_username('a' * 21))

    def test_rejects_empty_and_non_string(self):
        self.assertFalse(is_valid_username(''))
        self.assertFalse(is_valid_username(None))
        self.assertFalse(is_valid_username(['abc']))


class TestFieldValidator(unittest.TestCase):

    def test_wraps_predicate_and_message(self):
        check = field_validator(lambda v: v == 'ok', 'must be ok')

        self.assertEqual(check('ok'), FieldResult(is_valid=True, message='must be ok'))
        self.assertEqual(check('no'), FieldResult(is_valid=False, message='must be ok'))


class TestCreateValidator(unittest.TestCase):

    def setUp(self):
        self.validate = create_validator({
            'email': field_validator(is_valid_email, 'bad email'),
            'username': field_validator(is_valid_username, 'bad username'),
        })

    def test_valid_record(self):
        result = self.validate({'email': 'a@b.com', 'username': 'alice'})

        self.assertEqual(result, ValidationResult(is_valid=True, errors={}))

    def test_collects_every_failing_field(self):
        result = self.validate({'email': 'nope', 'username': 'x'})

        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, {'email': 'bad email', 'username': 'bad username'})

    def test_missing_field_is_validated_as_none(self):
        result = self.validate({'email': 'a@b.com'})

        self.assertEqual(result.errors, {'username': 'bad username'})

    def test_fields_outside_schema_are_ignored(self):
        result = self.validate({'email': 'a@b.com', 'username': 'alice', 'role': 'anything'})

        self.assertTrue(result.is_valid)

    def test_deterministic(self):
        record = {'email': 'nope', 'username': 'alice'}
        self.assertEqual(self.validate(record), self.validate(record))


class TestValidateNewUser(unittest.TestCase):

    def test_accepts_valid_registration(self):
        result = validate_new_user({'email': 'a@b.com', 'username': 'alice', 'password': 'secret123'})
        self.assertTrue(result.is_valid)

    def test_reports_weak_password(self):
        result = validate_new_user({'email': 'a@b.com', 'username': 'alice', 'password': 'secret'})
        self.assertEqual(list(result.errors), ['password'])


if __name__ == '__main__':
    unittest.main()
