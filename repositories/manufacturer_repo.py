"""
repositories/manufacturer_repo.py
----------------------------------
Data access layer for manufacturers.
All SQL queries related to the `manufacturers` table live here. Rows are
soft-deleted: delete flips `is_deleted` and every read skips flagged rows.
"""

from typing import Callable, Optional, TypeVar

import psycopg2
from psycopg2 import extras

from models.manufacturer import Manufacturer
from repositories.base import Dao
from repositories.exceptions import StoreError
from utils.logger import get_logger
from utils.naming import qualify_table

logger = get_logger(__name__)

R = TypeVar("R")

TABLE_NAME = "manufacturers"


class ManufacturerRepository(Dao[Manufacturer]):
    """Repository for CRUD operations on the manufacturers table."""

    def __init__(self, source, schema: Optional[str] = None):
        """
        Args:
            source: A ConnectionSource handing out pooled connections.
            schema: Optional schema qualifying the table name.
        """
        self._source = source
        table = qualify_table(schema, TABLE_NAME)
        self._insert_sql = f"INSERT INTO {table} (name, country) VALUES (%s, %s) RETURNING id;"
        self._select_by_id_sql = f"SELECT * FROM {table} WHERE id = %s AND is_deleted = FALSE;"
        self._select_all_sql = f"SELECT * FROM {table} WHERE is_deleted = FALSE ORDER BY id;"
        self._update_sql = (
            f"UPDATE {table} SET name = %s, country = %s "
            f"WHERE id = %s AND is_deleted = FALSE;"
        )
        self._delete_sql = f"UPDATE {table} SET is_deleted = TRUE WHERE id = %s;"

    # ── CREATE ────────────────────────────────────────────

    def create(self, entity: Manufacturer) -> Manufacturer:
        """
        Insert a new manufacturer.

        Returns:
            The same object with its `id` populated.

        Raises:
            ValueError: If the entity is None or already has an id.
            StoreError: If the insert fails or no id is returned.
        """
        if entity is None:
            raise ValueError("entity must not be None")
        if entity.has_id():
            raise ValueError(f"Cannot create a manufacturer that already has an id: {entity}")

        def insert(conn) -> Manufacturer:
            with conn.cursor() as cur:
                cur.execute(self._insert_sql, (entity.name, entity.country))
                row = cur.fetchone()
            if row is None:
                raise StoreError("Cannot obtain id")
            entity.id = row[0]
            return entity

        created = self._execute(insert, f"Error when creating a manufacturer: {entity}")
        logger.info(f"Created manufacturer {created}")
        return created

    # ── READ ──────────────────────────────────────────────

    def get(self, id: int) -> Optional[Manufacturer]:
        """Fetch a single live manufacturer by ID."""
        if id is None:
            raise ValueError("id must not be None")

        def find_one(conn) -> Optional[Manufacturer]:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(self._select_by_id_sql, (id,))
                row = cur.fetchone()
            return self._row_to_manufacturer(row) if row else None

        return self._execute(find_one, f"Error when searching for a manufacturer with id: {id}")

    def get_all(self) -> list[Manufacturer]:
        """Fetch every live manufacturer ordered by ID."""

        def find_all(conn) -> list[Manufacturer]:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(self._select_all_sql)
                return [self._row_to_manufacturer(r) for r in cur.fetchall()]

        return self._execute(find_all, "Error when searching for all manufacturers")

    # ── UPDATE ────────────────────────────────────────────

    def update(self, entity: Manufacturer) -> Optional[Manufacturer]:
        """
        Overwrite name and country of a live manufacturer.

        Returns:
            The entity, or None when no live row has its id.

        Raises:
            ValueError: If the entity is None.
            StoreError: If the entity has no id, or the update fails.
        """
        if entity is None:
            raise ValueError("entity must not be None")
        if not entity.has_id():
            raise StoreError("Id cannot be null")

        def update_row(conn) -> bool:
            with conn.cursor() as cur:
                cur.execute(self._update_sql, (entity.name, entity.country, entity.id))
                return cur.rowcount > 0

        updated = self._execute(update_row, f"Error when updating a manufacturer: {entity}")
        if not updated:
            logger.warning(f"No live manufacturer #{entity.id} to update")
            return None
        logger.info(f"Updated manufacturer {entity}")
        return entity

    # ── DELETE ────────────────────────────────────────────

    def delete(self, id: int) -> bool:
        """
        Soft-delete a manufacturer by ID.

        The flag is set unconditionally, so deleting an already deleted
        row reports True again.
        """
        if id is None:
            raise ValueError("id must not be None")

        def mark_deleted(conn) -> bool:
            with conn.cursor() as cur:
                cur.execute(self._delete_sql, (id,))
                return cur.rowcount > 0

        deleted = self._execute(mark_deleted, f"Error when deleting a manufacturer with id: {id}")
        if deleted:
            logger.info(f"Deleted manufacturer #{id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    def _execute(self, operation: Callable[..., R], error_message: str) -> R:
        """
        Run ``operation`` over one pooled connection.

        psycopg2 errors from acquiring the connection, executing or
        committing are re-raised as StoreError with ``error_message``.
        """
        try:
            with self._source.connection() as conn:
                return operation(conn)
        except psycopg2.Error as e:
            logger.error(f"{error_message}: {e}")
            raise StoreError(error_message, e) from e

    @staticmethod
    def _row_to_manufacturer(row) -> Manufacturer:
        """Convert a RealDictCursor row to a Manufacturer domain object."""
        try:
            return Manufacturer(
                id=row["id"],
                name=row["name"],
                country=row["country"],
            )
        except KeyError as e:
            raise StoreError("Cannot parse row to create instance", e) from e
