"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from db.connection import ConnectionSource
from repositories.manufacturer_repo import ManufacturerRepository


@pytest.fixture
def mock_cursor():
    """Mock psycopg2 cursor returned from ``with conn.cursor() as cur``."""
    cur = MagicMock()
    cur.fetchone.return_value = None
    cur.fetchall.return_value = []
    cur.rowcount = 0
    return cur


@pytest.fixture
def mock_connection(mock_cursor):
    """Mock psycopg2 connection handing out ``mock_cursor``."""
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = mock_cursor
    conn.cursor.return_value.__exit__.return_value = False
    return conn


@pytest.fixture
def mock_pool(mock_connection):
    """Mock psycopg2 pool lending out ``mock_connection``."""
    conn_pool = MagicMock()
    conn_pool.getconn.return_value = mock_connection
    conn_pool.closed = False
    return conn_pool


@pytest.fixture
def source(mock_pool):
    """ConnectionSource over the mock pool."""
    return ConnectionSource(mock_pool)


@pytest.fixture
def repo(source):
    """ManufacturerRepository without a schema."""
    return ManufacturerRepository(source)
