"""Domain interfaces."""

from .contact_grid import ContactGrid
from .group import Group

__all__ = [
    "ContactGrid",
    "Group",
]
