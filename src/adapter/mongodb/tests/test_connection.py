"""Tests for MongoDB client caching in get_mongodb_client()."""

import unittest
from unittest.mock import patch, MagicMock

from pymongo.errors import ConnectionFailure

from adapter.mongodb import connection


class TestGetMongodbClient(unittest.TestCase):

    def setUp(self):
        connection.reset_client()

    def tearDown(self):
        connection.reset_client()

    @patch.object(connection, 'MONGO_URL', None)
    def test_returns_none_without_url(self):
        self.assertIsNone(connection.get_mongodb_client())

    @patch.object(connection, 'MONGO_URL', 'mongodb://localhost:27017')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_caches_client(self, mock_client_cls):
        client = connection.get_mongodb_client()

        self.assertIs(client, mock_client_cls.return_value)
        self.assertIs(connection.get_mongodb_client(), client)
        mock_client_cls.assert_called_once()

    @patch.object(connection, 'MONGO_URL', 'mongodb://localhost:27017')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_initial_failure_is_not_retried(self, mock_client_cls):
        mock_client_cls.return_value.admin.command.side_effect = ConnectionFailure("refused")

        self.assertIsNone(connection.get_mongodb_client())
        self.assertIsNone(connection.get_mongodb_client())
        mock_client_cls.assert_called_once()

    @patch.object(connection, 'MONGO_URL', 'mongodb://localhost:27017')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_reconnects_when_cached_client_fails_ping(self, mock_client_cls):
        first, second = MagicMock(), MagicMock()
        mock_client_cls.side_effect = [first, second]
        connection.get_mongodb_client()
        first.admin.command.side_effect = ConnectionFailure("gone")

        self.assertIs(connection.get_mongodb_client(), second)


if __name__ == '__main__':
    unittest.main()
