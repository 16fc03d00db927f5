"""
models/manufacturer.py
----------------------
Domain model for car manufacturers.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Manufacturer:
    """
    Represents a single manufacturer.

    Attributes:
        name: Manufacturer name (e.g., 'Ford').
        country: Country of origin.
        id: Database primary key (None until the store assigns one).
    """
    name: str
    country: str
    id: Optional[int] = None

    def has_id(self) -> bool:
        """Returns True once the store has assigned an identity."""
        return self.id is not None

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({self.country})"
