#!/usr/bin/env python3
# src/substructure/core/domain/models/substructure_identifier.py

"""
Canonical identifier for a part of a structure.

Identifiers name a set of residues from an entry::

    1TIM                              whole structure
    1tim                              same as above
    4HHB.C                            single chain
    3AA0.A,B                          two chains
    4GCR.A_1-40                       substructure
    3iek.A_17-28,A_56-294,A_320-377   substructure of 3 disjoint parts
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..errors import MalformedIdentifierError, NullRangesError, StructureError
from .residue_range import ResidueRange

if TYPE_CHECKING:
    from ...interfaces.repository import Repository
    from .structure import Structure

logger = logging.getLogger(__name__)

ENTRY_CODE_LENGTH = 4


@dataclass(frozen=True)
class SubstructureIdentifier:
    """Entry code plus an ordered list of residue ranges.

    An empty list of ranges selects the whole structure.
    """

    entry_code: str
    ranges: Optional[Sequence[ResidueRange]] = None

    def __post_init__(self):
        """Validate ranges and freeze them into a tuple."""
        if self.ranges is None:
            raise NullRangesError("Null ranges list")
        object.__setattr__(self, "ranges", tuple(self.ranges))

    @classmethod
    def parse(cls, text: str) -> "SubstructureIdentifier":
        """
        Create an identifier from its string form.

        Args:
            text: Identifier such as ``3iek.A_17-28,A_56-294``

        Returns:
            Parsed SubstructureIdentifier

        Raises:
            MalformedIdentifierError: If the text has more than one ``.``
            MalformedRangeError: If a range token is malformed
        """
        parts = text.split(".")
        if len(parts) > 2:
            raise MalformedIdentifierError(
                f"Malformed {cls.__name__}: {text}"
            )

        entry_code = parts[0]
        if len(entry_code) != ENTRY_CODE_LENGTH:
            # Accepted so that file names can stand in for entry codes
            logger.warning(f"Unrecognized PDB code {entry_code}")
        else:
            entry_code = entry_code.upper()

        ranges: List[ResidueRange] = []
        if len(parts) == 2 and parts[1].strip():
            ranges = ResidueRange.parse_multiple(parts[1].strip())
        return cls(entry_code, ranges)

    @property
    def residue_ranges(self) -> Tuple[ResidueRange, ...]:
        return self.ranges

    @property
    def identifier(self) -> str:
        """Canonical string form, e.g. ``3IEK.A_17-28,A_56-294``."""
        if not self.ranges:
            return self.entry_code
        return f"{self.entry_code}.{ResidueRange.to_text(self.ranges)}"

    def to_canonical(self) -> "SubstructureIdentifier":
        """Return itself; substructure identifiers are already canonical."""
        return self

    def reduce(self, full: "Structure") -> "Structure":
        """Reduce a full structure to the residues named by this identifier."""
        from ...services.structure_reducer import StructureReducer

        return StructureReducer(self).reduce(full)

    def load_structure(self, repository: "Repository") -> Optional["Structure"]:
        """
        Load the complete structure for this identifier's entry code.

        Args:
            repository: Source of full structures

        Returns:
            The full structure, or None if no entry code is set

        Raises:
            StructureError: If the repository has no such entry
        """
        if not self.entry_code:
            return None
        structure = repository.get(self.entry_code)
        if structure is None:
            raise StructureError(f"Unable to load structure {self.entry_code}")
        return structure

    def __str__(self) -> str:
        return self.identifier
