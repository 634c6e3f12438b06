"""Interface for spatial contact queries between sets of atoms."""

from abc import ABC, abstractmethod
from typing import Any, Iterable


class ContactGrid(ABC):
    """Abstract base class for spatial indexes with a fixed contact cutoff."""

    def __init__(self, cutoff: float):
        """
        Initialize an empty grid.

        Args:
            cutoff: Contact distance in Angstroms
        """
        if cutoff <= 0:
            raise ValueError(f"Contact cutoff must be positive, got {cutoff}")
        self.cutoff = cutoff

    @abstractmethod
    def add_atoms(self, atoms: Iterable[Any]) -> None:
        """Insert atoms (objects exposing ``coord``) into the grid."""
        pass

    @abstractmethod
    def has_any_contact(self, atoms: Iterable[Any]) -> bool:
        """
        Check whether any of the given atoms touches an inserted atom.

        Args:
            atoms: Query atoms exposing ``coord``

        Returns:
            True if at least one query atom lies within the cutoff
            (inclusive) of at least one inserted atom
        """
        pass
