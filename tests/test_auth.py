import unittest
from unittest import mock

from models import CredentialTable
from services.auth import (
    login,
    INVALID_CREDENTIALS_MESSAGE,
    MISSING_FIELDS_MESSAGE,
)
from config import parse_chat_users


class TestLogin(unittest.TestCase):
    def setUp(self):
        self.table = CredentialTable(
            [{"email": "user@example.com", "password": "mypassword"}]
        )

    def test_valid_pair(self):
        self.assertEqual(
            login(self.table, "user@example.com", "mypassword"),
            {"success": True},
        )

    def test_invalid_pair(self):
        self.assertEqual(
            login(self.table, "user@example.com", "wrong"),
            {"success": False, "message": INVALID_CREDENTIALS_MESSAGE},
        )

    def test_missing_field_does_not_consult_table(self):
        table = mock.Mock()
        result = login(table, "user@example.com", None)
        self.assertEqual(
            result, {"success": False, "message": MISSING_FIELDS_MESSAGE}
        )
        table.verify.assert_not_called()

    def test_parse_chat_users(self):
        users = parse_chat_users("a@x.com:one, b@x.com:two,broken,:nope")
        self.assertEqual(
            users,
            [
                {"email": "a@x.com", "password": "one"},
                {"email": "b@x.com", "password": "two"},
            ],
        )
        self.assertEqual(parse_chat_users(None), [])


if __name__ == "__main__":
    unittest.main()
