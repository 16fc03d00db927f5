"""
repositories/base.py
--------------------
Generic CRUD contract every entity repository implements.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Dao(ABC, Generic[T]):
    """CRUD operations over one entity type keyed by an integer id."""

    @abstractmethod
    def create(self, entity: T) -> T:
        """
        Insert a new row.

        Args:
            entity: Business fields only; its id must not be set yet.

        Returns:
            The same entity with its store-assigned id populated.
        """

    @abstractmethod
    def get(self, id: int) -> Optional[T]:
        """Return the live entity with this id, or None if there is none."""

    @abstractmethod
    def get_all(self) -> list[T]:
        """Return every live entity."""

    @abstractmethod
    def update(self, entity: T) -> Optional[T]:
        """
        Overwrite the mutable fields of the live row matching ``entity.id``.

        Returns:
            The entity if a row was updated, None if no live row matched.
        """

    @abstractmethod
    def delete(self, id: int) -> bool:
        """
        Soft-delete the row with this id.

        Returns:
            True if a row with this id exists (already deleted rows
            included), False otherwise.
        """
