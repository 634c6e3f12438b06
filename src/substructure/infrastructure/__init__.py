"""Infrastructure implementations of core interfaces and adapters."""

from .adapters.biopython_adapter import BiopythonGroup, from_biopython, to_biopython
from .repositories.structure_repository import StructureRepository

__all__ = [
    "BiopythonGroup",
    "StructureRepository",
    "from_biopython",
    "to_biopython",
]
