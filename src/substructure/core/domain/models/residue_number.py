#!/usr/bin/env python3
# src/substructure/core/domain/models/residue_number.py

"""
Domain model for an author residue number with optional insertion code.
"""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple

from ..errors import MalformedRangeError

RESIDUE_NUMBER_PATTERN = r"[-+]?[0-9]+[A-Za-z]?"

_RESIDUE_NUMBER_RE = re.compile(r"^([-+]?[0-9]+)([A-Za-z]?)$")


@total_ordering
@dataclass(frozen=True)
class ResidueNumber:
    """Residue position inside a chain, e.g. ``17`` or ``52A``."""

    seq_num: int
    ins_code: Optional[str] = None

    def __post_init__(self):
        """Normalize blank insertion codes to None."""
        ins_code = self.ins_code.strip() if self.ins_code else ""
        object.__setattr__(self, "ins_code", ins_code or None)

    @classmethod
    def parse(cls, text: str) -> "ResidueNumber":
        """
        Parse a residue number such as ``-3``, ``+12`` or ``100B``.

        Args:
            text: Residue number in PDB author numbering

        Returns:
            Parsed ResidueNumber

        Raises:
            MalformedRangeError: If the text is not a residue number
        """
        match = _RESIDUE_NUMBER_RE.match(text.strip())
        if not match:
            raise MalformedRangeError(text, "invalid residue number")
        return cls(int(match.group(1)), match.group(2) or None)

    def _sort_key(self) -> Tuple[int, str]:
        return self.seq_num, self.ins_code or ""

    def __lt__(self, other: "ResidueNumber") -> bool:
        if not isinstance(other, ResidueNumber):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.seq_num}{self.ins_code or ''}"
