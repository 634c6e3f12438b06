"""Interface for residues and small molecules held by a chain."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np

from ..models.residue_number import ResidueNumber


class Group(ABC):
    """
    Abstract base class for one residue, nucleotide, ligand or water.

    Structure backends wrap their own residue objects in a Group so that the
    reducer and the ligand attacher never depend on a concrete hierarchy.
    Groups are shared between a full structure and its reductions and must be
    treated as read-only.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Chemical component name, e.g. ``ALA`` or ``HEM``."""
        pass

    @property
    @abstractmethod
    def chain_id(self) -> str:
        """Identifier of the chain the group belongs to."""
        pass

    @property
    @abstractmethod
    def residue_number(self) -> ResidueNumber:
        """Author residue number of the group."""
        pass

    @abstractmethod
    def get_atoms(self) -> Sequence[Any]:
        """Return the atoms of the group; each exposes a ``coord`` array."""
        pass

    @abstractmethod
    def is_water(self) -> bool:
        """True for solvent water molecules."""
        pass

    @abstractmethod
    def is_standard(self) -> bool:
        """True for standard amino acids and nucleotides."""
        pass

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms in the group.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return np.array([atom.coord for atom in self.get_atoms()], dtype=float).reshape(
            -1, 3
        )
