"""Contact grid backed by Biopython's KD-tree neighbour search."""

from typing import Any, Iterable, List, Optional

from Bio.PDB.NeighborSearch import NeighborSearch

from ..interfaces.contact_grid import ContactGrid


class NeighborSearchGrid(ContactGrid):
    """ContactGrid answering contact queries with ``Bio.PDB.NeighborSearch``."""

    def __init__(self, cutoff: float):
        super().__init__(cutoff)
        self._atoms: List[Any] = []
        self._search: Optional[NeighborSearch] = None

    def add_atoms(self, atoms: Iterable[Any]) -> None:
        self._atoms.extend(atoms)
        self._search = None

    def has_any_contact(self, atoms: Iterable[Any]) -> bool:
        if not self._atoms:
            return False
        if self._search is None:
            self._search = NeighborSearch(self._atoms)

        for atom in atoms:
            if self._search.search(atom.coord, self.cutoff):
                return True
        return False
