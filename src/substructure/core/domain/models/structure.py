#!/usr/bin/env python3
# src/substructure/core/domain/models/structure.py

"""
Domain models for the structure / model / chain hierarchy.

Chains hold references to backend groups; the groups themselves are never
copied, so a reduced structure shares its residues with the full one.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, List, Optional

import numpy as np

from ..errors import StructureError
from .residue_number import ResidueNumber

if TYPE_CHECKING:
    from ..interfaces.group import Group
    from .substructure_identifier import SubstructureIdentifier


@dataclass
class StructureHeader:
    """Descriptive header information for a structure."""

    description: str = ""
    classification: str = ""
    id_code: str = ""
    deposition_date: str = ""
    resolution: Optional[float] = None
    method: str = ""
    keywords: str = ""


class Chain:
    """Ordered collection of groups sharing a chain identifier."""

    def __init__(
        self,
        chain_id: str,
        name: Optional[str] = None,
        seqres_groups: Optional[List[Any]] = None,
        seq_mismatches: Optional[List[Any]] = None,
    ):
        """
        Initialize an empty chain.

        Args:
            chain_id: Internal chain identifier
            name: Author chain name, defaults to chain_id
            seqres_groups: Reference (SEQRES) sequence entries
            seq_mismatches: Differences between reference and observed sequence
        """
        self.chain_id = chain_id
        self.name = name if name is not None else chain_id
        self.groups: List["Group"] = []
        self.seqres_groups = seqres_groups if seqres_groups is not None else []
        self.seq_mismatches = seq_mismatches if seq_mismatches is not None else []

    def add_group(self, group: "Group") -> None:
        self.groups.append(group)

    def find_group(self, residue_number: ResidueNumber) -> Optional["Group"]:
        """Return the first group with the given residue number, if any."""
        for group in self.groups:
            if group.residue_number == residue_number:
                return group
        return None

    def groups_between(
        self, start: Optional[ResidueNumber], end: Optional[ResidueNumber]
    ) -> List["Group"]:
        """
        Get the contiguous run of groups from start to end, inclusive.

        The run follows the chain's own group order, not numeric order, so
        insertion codes and non-monotonic numbering are handled naturally.

        Args:
            start: First residue, or None to begin at the first group
            end: Last residue, or None to continue to the last group

        Returns:
            List of groups in chain order

        Raises:
            StructureError: If a bound is not present in the chain
        """
        start_index = 0
        if start is not None:
            start_index = self._index_of(start, 0)

        end_index = len(self.groups) - 1
        if end is not None:
            end_index = self._index_of(end, start_index)

        return self.groups[start_index : end_index + 1]

    def _index_of(self, residue_number: ResidueNumber, offset: int) -> int:
        for index in range(offset, len(self.groups)):
            if self.groups[index].residue_number == residue_number:
                return index
        raise StructureError(
            f"Residue {residue_number} not found in chain {self.name}"
        )

    def __iter__(self) -> Iterator["Group"]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __repr__(self) -> str:
        return f"<Chain id={self.chain_id} name={self.name} groups={len(self.groups)}>"


class Model:
    """One conformational copy of a structure: an ordered list of chains."""

    def __init__(self, chains: Optional[List[Chain]] = None):
        self.chains: List[Chain] = chains if chains is not None else []

    def add_chain(self, chain: Chain) -> None:
        self.chains.append(chain)

    def chain_by_name(self, name: str) -> Optional[Chain]:
        return next((c for c in self.chains if c.name == name), None)

    def chain_by_id(self, chain_id: str) -> Optional[Chain]:
        return next((c for c in self.chains if c.chain_id == chain_id), None)

    def chain_by_index(self, index: int) -> Optional[Chain]:
        if 0 <= index < len(self.chains):
            return self.chains[index]
        return None

    def iter_groups(self) -> Iterator["Group"]:
        for chain in self.chains:
            yield from chain.groups

    def __iter__(self) -> Iterator[Chain]:
        return iter(self.chains)

    def __len__(self) -> int:
        return len(self.chains)


@dataclass
class Structure:
    """Structure entry with metadata and one or more models."""

    entry_code: str = ""
    name: str = ""
    header: StructureHeader = field(default_factory=StructureHeader)
    db_refs: List[Any] = field(default_factory=list)
    biological_assembly: bool = False
    entity_infos: List[Any] = field(default_factory=list)
    ss_bonds: List[Any] = field(default_factory=list)
    sites: List[Any] = field(default_factory=list)
    identifier: Optional["SubstructureIdentifier"] = None
    models: List[Model] = field(default_factory=list)

    def add_model(self, model: Optional[Model] = None) -> Model:
        """Append a model, creating an empty one if none is given."""
        model = model if model is not None else Model()
        self.models.append(model)
        return model

    def get_model(self, index: int = 0) -> Model:
        return self.models[index]

    @property
    def nr_models(self) -> int:
        return len(self.models)

    def find_chain(self, chain_id: str, model: int = 0) -> Optional[Chain]:
        """Find a chain by its identifier in the given model."""
        return self.models[model].chain_by_id(chain_id)

    def find_group(
        self, chain_id: str, residue_number: ResidueNumber, model: int = 0
    ) -> Optional["Group"]:
        """Find a group by chain identifier and residue number."""
        for chain in self.models[model]:
            if chain.chain_id != chain_id:
                continue
            group = chain.find_group(residue_number)
            if group is not None:
                return group
        return None

    def get_atoms(self, model: int = 0) -> List[Any]:
        """Get all atoms of a model in chain and group order."""
        return [
            atom for group in self.models[model].iter_groups() for atom in group.get_atoms()
        ]

    def get_coordinates(self, model: int = 0) -> np.ndarray:
        """Get coordinates of all atoms in a model.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return np.array([atom.coord for atom in self.get_atoms(model)], dtype=float).reshape(
            -1, 3
        )
