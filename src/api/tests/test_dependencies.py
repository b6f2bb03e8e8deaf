"""Unit tests for API dependencies: get_user_repo() dependency injection.

Tests focus on the wiring logic inside get_user_repo():
- 503 when MongoDB client is None
- Correct database name is used
- MongoUserRepository receives the database instance
"""

import unittest
from unittest.mock import patch, MagicMock

from fastapi import HTTPException

from api.dependencies import get_user_repo, DATABASE_NAME
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.mongodb import USERS_COLLECTION_NAME


class TestGetUserRepo(unittest.TestCase):
    """Test cases for get_user_repo() dependency injection function."""

    @patch('api.dependencies.get_mongodb_client')
    def test_returns_mongo_repository_when_connected(self, mock_get_client):
        mock_client = MagicMock()
        mock_client.__getitem__.return_value = MagicMock()
        mock_get_client.return_value = mock_client

        repo = get_user_repo()

        self.assertIsInstance(repo, MongoUserRepository)
        mock_get_client.assert_called_once()

    @patch('api.dependencies.get_mongodb_client')
    def test_raises_503_when_mongodb_unavailable(self, mock_get_client):
        mock_get_client.return_value = None

        with self.assertRaises(HTTPException) as context:
            get_user_repo()

        self.assertEqual(context.exception.status_code, 503)
        self.assertEqual(context.exception.detail, "Database unavailable")

    @patch('api.dependencies.get_mongodb_client')
    def test_uses_configured_database_and_users_collection(self, mock_get_client):
        mock_db = MagicMock()
        mock_client = MagicMock()
        mock_client.__getitem__.return_value = mock_db
        mock_get_client.return_value = mock_client

        repo = get_user_repo()

        mock_client.__getitem__.assert_called_with(DATABASE_NAME)
        mock_db.__getitem__.assert_called_with(USERS_COLLECTION_NAME)
        self.assertIs(repo.collection, mock_db.__getitem__.return_value)


if __name__ == '__main__':
    unittest.main()
