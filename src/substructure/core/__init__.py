"""Core domain models, interfaces and services for substructure extraction."""

from .domain.errors import (
    MalformedIdentifierError,
    MalformedRangeError,
    NullRangesError,
    StructureError,
    SubstructureError,
)
from .domain.interfaces.contact_grid import ContactGrid
from .domain.interfaces.group import Group
from .domain.models.residue_number import ResidueNumber
from .domain.models.residue_range import ResidueRange
from .domain.models.structure import Chain, Model, Structure, StructureHeader
from .domain.models.substructure_identifier import SubstructureIdentifier
from .services.ligand_proximity import (
    DEFAULT_LIGAND_PROXIMITY_CUTOFF,
    LigandProximityAttacher,
)
from .services.structure_reducer import StructureReducer

__all__ = [
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
