"""Unit tests for ConnectionSource."""

from unittest.mock import MagicMock, patch

import psycopg2
import pytest

from config import Settings
from db.connection import ConnectionSource
from repositories.exceptions import StoreError


def _settings(**overrides) -> Settings:
    values = {
        "database_url": "postgresql://localhost:5432/test",
        "user": "tester",
        "password": "secret",
    }
    values.update(overrides)
    return Settings(**values)


class TestScopedConnection:
    """Tests for the connection() context manager."""

    def test_commits_and_releases(self, source, mock_pool, mock_connection):
        with source.connection() as conn:
            assert conn is mock_connection

        mock_connection.commit.assert_called_once()
        mock_connection.rollback.assert_not_called()
        mock_pool.putconn.assert_called_once_with(mock_connection)

    def test_rolls_back_and_releases_on_error(self, source, mock_pool, mock_connection):
        with pytest.raises(RuntimeError):
            with source.connection():
                raise RuntimeError("boom")

        mock_connection.rollback.assert_called_once()
        mock_connection.commit.assert_not_called()
        mock_pool.putconn.assert_called_once_with(mock_connection)

    def test_failed_rollback_reraises_original_error(self, source, mock_pool, mock_connection):
        mock_connection.rollback.side_effect = psycopg2.InterfaceError("connection already closed")

        with pytest.raises(RuntimeError, match="boom"):
            with source.connection():
                raise RuntimeError("boom")

        mock_pool.putconn.assert_called_once_with(mock_connection)

    def test_close_closes_pool_once(self, source, mock_pool):
        source.close()
        mock_pool.closeall.assert_called_once()

        mock_pool.closed = True
        source.close()
        mock_pool.closeall.assert_called_once()


class TestFromSettings:
    """Tests for building a source from Settings."""

    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_opens_threaded_pool(self, pool_cls):
        source = ConnectionSource.from_settings(_settings(pool_min=2, pool_max=8))

        assert isinstance(source, ConnectionSource)
        pool_cls.assert_called_once_with(
            2, 8, "postgresql://localhost:5432/test", user="tester", password="secret"
        )

    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_schema_sets_search_path(self, pool_cls):
        ConnectionSource.from_settings(_settings(schema="taxi"))

        assert pool_cls.call_args.kwargs["options"] == "-c search_path=taxi"

    @patch("db.connection.run_init_script")
    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_runs_init_script_when_configured(self, pool_cls, run_script):
        source = ConnectionSource.from_settings(_settings(init_script="init_db.sql"))

        run_script.assert_called_once_with(source, "init_db.sql")

    @patch("db.connection.run_init_script")
    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_skips_init_script_when_not_configured(self, pool_cls, run_script):
        ConnectionSource.from_settings(_settings())

        run_script.assert_not_called()

    @patch("db.connection.run_init_script")
    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_failed_init_script_closes_pool(self, pool_cls, run_script):
        pool_cls.return_value = MagicMock(closed=False)
        run_script.side_effect = StoreError("Invalid DB_INIT_SCRIPT setting")

        with pytest.raises(StoreError):
            ConnectionSource.from_settings(_settings(init_script="missing.sql"))
        pool_cls.return_value.closeall.assert_called_once()

    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_unreachable_database_propagates(self, pool_cls):
        pool_cls.side_effect = psycopg2.OperationalError("could not connect")

        with pytest.raises(psycopg2.OperationalError):
            ConnectionSource.from_settings(_settings())
