"""Services operating on identifiers and structures."""

from .ligand_proximity import DEFAULT_LIGAND_PROXIMITY_CUTOFF, LigandProximityAttacher
from .structure_reducer import StructureReducer

__all__ = [
    "DEFAULT_LIGAND_PROXIMITY_CUTOFF",
    "LigandProximityAttacher",
    "StructureReducer",
]
