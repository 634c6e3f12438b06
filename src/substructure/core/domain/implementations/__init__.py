"""Default implementations of domain interfaces."""

from .neighbor_search_grid import NeighborSearchGrid

__all__ = [
    "NeighborSearchGrid",
]
