#!/usr/bin/env python3
# src/substructure/core/domain/models/residue_range.py

"""
Domain model and text grammar for chain/residue ranges.

A range token is either a whole chain (``A``), the single-chain wildcard
(``_``), or a bounded run of residues (``A_17-28``, ``B_-5-10A``). Tokens are
joined with commas to select several, possibly disjoint, parts of a structure.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..errors import MalformedRangeError
from .residue_number import RESIDUE_NUMBER_PATTERN, ResidueNumber

WILDCARD_CHAIN = "_"

_RANGE_RE = re.compile(
    r"^(?P<chain>[A-Za-z0-9]+|_)"
    r"(?:_(?P<start>{num})?-(?P<end>{num})?)?$".format(num=RESIDUE_NUMBER_PATTERN)
)


@dataclass(frozen=True)
class ResidueRange:
    """A chain, optionally restricted to the residues between two bounds."""

    chain_name: str
    start: Optional[ResidueNumber] = None
    end: Optional[ResidueNumber] = None

    @property
    def is_whole_chain(self) -> bool:
        """True when no residue bounds are set."""
        return self.start is None and self.end is None

    @property
    def is_wildcard(self) -> bool:
        """True for the ``_`` single-chain wildcard."""
        return self.chain_name == WILDCARD_CHAIN

    @classmethod
    def parse(cls, token: str) -> "ResidueRange":
        """
        Parse a single range token.

        Args:
            token: Range such as ``A``, ``_`` or ``A_17-28``

        Returns:
            Parsed ResidueRange

        Raises:
            MalformedRangeError: If the token does not follow the range grammar
        """
        token = token.strip()
        if token == WILDCARD_CHAIN:
            return cls(WILDCARD_CHAIN)

        match = _RANGE_RE.match(token)
        if not match:
            raise MalformedRangeError(token)

        chain_name = match.group("chain")
        if "_" not in token[len(chain_name):]:
            return cls(chain_name)

        start, end = match.group("start"), match.group("end")
        if start is None and end is None:
            raise MalformedRangeError(token, "missing residue bounds")
        return cls(
            chain_name,
            ResidueNumber.parse(start) if start is not None else None,
            ResidueNumber.parse(end) if end is not None else None,
        )

    @classmethod
    def parse_multiple(cls, text: str) -> List["ResidueRange"]:
        """
        Parse a comma separated list of range tokens, keeping their order.

        Args:
            text: Ranges such as ``A_17-28,A_56-294,B``

        Returns:
            List of ResidueRange objects, one per token

        Raises:
            MalformedRangeError: If any token is malformed
        """
        return [cls.parse(token) for token in text.split(",")]

    @staticmethod
    def to_text(ranges: Iterable["ResidueRange"]) -> str:
        """Render ranges in their canonical comma separated form."""
        return ",".join(str(r) for r in ranges)

    def __str__(self) -> str:
        if self.is_whole_chain:
            return self.chain_name
        # An absent bound renders as an empty field, e.g. "A_-40"
        start = str(self.start) if self.start is not None else ""
        end = str(self.end) if self.end is not None else ""
        return f"{self.chain_name}_{start}-{end}"
