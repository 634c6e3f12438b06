"""Domain model classes."""

from .residue_number import ResidueNumber
from .residue_range import WILDCARD_CHAIN, ResidueRange
from .structure import Chain, Model, Structure, StructureHeader
from .substructure_identifier import SubstructureIdentifier

__all__ = [
    "WILDCARD_CHAIN",
    "Chain",
    "Model",
    "ResidueNumber",
    "ResidueRange",
    "Structure",
    "StructureHeader",
    "SubstructureIdentifier",
]
