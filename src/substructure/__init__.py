"""Extract substructures from molecular structures by chain and residue range."""

from .core import (
    DEFAULT_LIGAND_PROXIMITY_CUTOFF,
    Chain,
    ContactGrid,
    Group,
    LigandProximityAttacher,
    MalformedIdentifierError,
    MalformedRangeError,
    Model,
    NullRangesError,
    ResidueNumber,
    ResidueRange,
    Structure,
    StructureError,
    StructureHeader,
    StructureReducer,
    SubstructureError,
    SubstructureIdentifier,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_LIGAND_PROXIMITY_CUTOFF",
    "Chain",
    "ContactGrid",
    "Group",
    "LigandProximityAttacher",
    "MalformedIdentifierError",
    "MalformedRangeError",
    "Model",
    "NullRangesError",
    "ResidueNumber",
    "ResidueRange",
    "Structure",
    "StructureError",
    "StructureHeader",
    "StructureReducer",
    "SubstructureError",
    "SubstructureIdentifier",
]
