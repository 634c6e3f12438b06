"""Command-line interfaces and other presentation layer components."""

from .cli.reduce_structure import main as reduce_structure_main

__all__ = [
    "reduce_structure_main",
]
