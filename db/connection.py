"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so one source can be shared by
repositories called from several threads.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import pool

from config import Settings
from db.init_db import run_init_script
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionSource:
    """Hands out pooled connections, one per repository operation."""

    def __init__(self, conn_pool: pool.AbstractConnectionPool):
        self._pool = conn_pool

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionSource":
        """
        Open a connection pool and bootstrap the schema if configured.

        Args:
            settings: Process settings from ``config.load_settings``.

        Returns:
            A ready-to-use ConnectionSource.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
            StoreError: If the configured init script is missing or fails.
        """
        kwargs = {"user": settings.user, "password": settings.password}
        if settings.schema:
            kwargs["options"] = f"-c search_path={settings.schema}"
        try:
            conn_pool = pool.ThreadedConnectionPool(
                settings.pool_min, settings.pool_max, settings.database_url, **kwargs
            )
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

        source = cls(conn_pool)
        if settings.init_script:
            try:
                run_init_script(source, settings.init_script)
            except Exception:
                source.close()
                raise
        return source

    def get_connection(self):
        """
        Get a connection from the pool.

        Raises:
            psycopg2.pool.PoolError: If the pool is closed or exhausted.
        """
        return self._pool.getconn()

    def release_connection(self, conn) -> None:
        """Return a connection back to the pool."""
        self._pool.putconn(conn)

    @contextmanager
    def connection(self) -> Iterator:
        """
        Borrow a connection for the duration of a ``with`` block.

        Commits when the block exits normally, rolls back when it raises,
        and always returns the connection to the pool.
        """
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            try:
                conn.rollback()
            except psycopg2.Error as e:
                logger.warning(f"Rollback failed, keeping the original error: {e}")
            raise
        finally:
            self.release_connection(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if not self._pool.closed:
            self._pool.closeall()
            logger.info("Database connection pool closed.")
