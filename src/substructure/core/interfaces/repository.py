"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic read-only repository interface.

    Structure loaders implement it so that identifiers can fetch the full
    structure they refer to without knowing where it comes from.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve an entity by ID."""
        pass

    @abstractmethod
    def list(self) -> List[str]:
        """List the IDs of all available entities."""
        pass
