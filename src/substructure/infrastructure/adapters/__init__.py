"""Adapters for external libraries and services."""

from .biopython_adapter import BiopythonGroup, from_biopython, to_biopython, write_structure

__all__ = [
    "BiopythonGroup",
    "from_biopython",
    "to_biopython",
    "write_structure",
]
