"""Unit tests for user_validator module."""

import unittest

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DuplicateError, IdentifierNotAllowedError, ValidationError
from services.user_validator import check_unique_email, reject_identifier_field


class TestRejectIdentifierField(unittest.TestCase):

    def test_body_without_identifier_passes(self):
        reject_identifier_field({'email': 'a@b.com', 'displayName': 'admin'})

    def test_underscore_id_rejected(self):
        with self.assertRaises(IdentifierNotAllowedError) as ctx:
            reject_identifier_field({'_id': 1, 'email': 'a@b.com'})
        self.assertEqual(str(ctx.exception), 'No id allowed')
        self.assertEqual(ctx.exception.field, '_id')

    def test_plain_id_rejected(self):
        with self.assertRaises(IdentifierNotAllowedError):
            reject_identifier_field({'id': 'abc'})

    def test_null_identifier_still_rejected(self):
        """Presence of the key is enough, whatever its value."""
        with self.assertRaises(IdentifierNotAllowedError):
            reject_identifier_field({'_id': None})

    def test_is_a_validation_error(self):
        with self.assertRaises(ValidationError):
            reject_identifier_field({'_id': 1})


class TestCheckUniqueEmail(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()
        self.existing = self.repo.create(email='a@b.com', display_name='admin')

    def test_unused_email_passes(self):
        check_unique_email('new@b.com', None, self.repo)

    def test_taken_email_raises(self):
        with self.assertRaises(DuplicateError):
            check_unique_email('a@b.com', None, self.repo)

    def test_own_email_allowed_when_excluded(self):
        check_unique_email('a@b.com', self.existing.id, self.repo)

    def test_taken_by_other_user_raises_even_with_exclude(self):
        other = self.repo.create(email='c@d.com', display_name='other')

        with self.assertRaises(DuplicateError):
            check_unique_email('a@b.com', other.id, self.repo)

    def test_comparison_is_case_sensitive(self):
        check_unique_email('A@B.com', None, self.repo)


if __name__ == '__main__':
    unittest.main()
