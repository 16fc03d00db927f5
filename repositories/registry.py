"""
repositories/registry.py
------------------------
Maps repository contracts to their concrete instances.
Built once at startup; callers look repositories up by contract type.
"""

from typing import Optional, TypeVar

from repositories.base import Dao
from repositories.manufacturer_repo import ManufacturerRepository

C = TypeVar("C")


class RepositoryRegistry:
    """Holds one repository instance per contract type."""

    def __init__(self):
        self._instances: dict[type, object] = {}

    def register(self, contract: type, instance: object) -> None:
        """
        Bind ``contract`` to ``instance``, replacing any earlier binding.

        Raises:
            TypeError: If the instance does not implement the contract.
        """
        if not isinstance(instance, contract):
            raise TypeError(
                f"{type(instance).__name__} does not implement {contract.__name__}"
            )
        self._instances[contract] = instance

    def get(self, contract: type[C]) -> C:
        """
        Look up the instance bound to ``contract``.

        Raises:
            LookupError: If nothing is registered for the contract.
        """
        try:
            return self._instances[contract]
        except KeyError:
            raise LookupError(f"No repository registered for {contract.__name__}") from None

    def __contains__(self, contract: type) -> bool:
        return contract in self._instances


def build_registry(source, schema: Optional[str] = None) -> RepositoryRegistry:
    """
    Create the application's repositories over one connection source.

    Args:
        source: A ConnectionSource.
        schema: Optional schema qualifying table names.
    """
    registry = RepositoryRegistry()
    manufacturers = ManufacturerRepository(source, schema)
    registry.register(Dao, manufacturers)
    registry.register(ManufacturerRepository, manufacturers)
    return registry
