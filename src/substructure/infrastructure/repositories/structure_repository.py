# src/substructure/infrastructure/repositories/structure_repository.py
"""Repository implementation for full molecular structures."""

import logging
import os
from typing import Dict, List, Optional

from Bio.PDB.MMCIFParser import MMCIFParser
from Bio.PDB.PDBList import PDBList
from Bio.PDB.PDBParser import PDBParser

from ...core.domain.models.structure import Structure
from ...core.interfaces.repository import Repository
from ..adapters.biopython_adapter import from_biopython

logger = logging.getLogger(__name__)

_CIF_SUFFIXES = (".cif",)
_PDB_SUFFIXES = (".pdb", ".ent")


class StructureRepository(Repository[Structure]):
    """Repository loading structures from a local directory, fetching from the PDB."""

    def __init__(self, data_dir: str, file_format: str = "mmCif", fetch: bool = True):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing structure files
            file_format: Download format, ``mmCif`` or ``pdb``
            fetch: Download entries missing from data_dir
        """
        self._data_dir = data_dir
        self._file_format = file_format
        self._fetch = fetch
        self._pdb_parser = PDBParser(QUIET=True)
        self._cif_parser = MMCIFParser(QUIET=True)
        self._cache: Dict[str, Structure] = {}

    def get(self, id: str) -> Optional[Structure]:
        """
        Retrieve the full structure for an entry code.

        Args:
            id: Entry code or file stem

        Returns:
            Structure, or None if it is neither on disk nor downloadable
        """
        key = id.upper() if len(id) == 4 else id
        if key in self._cache:
            return self._cache[key]

        file_path = self._find_file(id)
        if file_path is None and self._fetch:
            file_path = self._download(id)
        if file_path is None:
            return None

        logger.info(f"Loading structure {id} from {file_path}")
        if file_path.endswith(_CIF_SUFFIXES):
            bio_structure = self._cif_parser.get_structure(key, file_path)
        else:
            bio_structure = self._pdb_parser.get_structure(key, file_path)

        structure = from_biopython(bio_structure, entry_code=key)
        self._cache[key] = structure
        return structure

    def list(self) -> List[str]:
        """
        List entry codes of the structure files in the data directory.

        Returns:
            Sorted list of entry codes
        """
        if not os.path.isdir(self._data_dir):
            return []

        codes = set()
        for file_name in os.listdir(self._data_dir):
            stem, suffix = os.path.splitext(file_name)
            if suffix.lower() not in _CIF_SUFFIXES + _PDB_SUFFIXES:
                continue
            if suffix.lower() == ".ent" and stem.lower().startswith("pdb"):
                stem = stem[3:]
            codes.add(stem.upper() if len(stem) == 4 else stem)
        return sorted(codes)

    def _find_file(self, id: str) -> Optional[str]:
        """Look for the entry in the data directory under the usual names."""
        candidates = []
        for code in dict.fromkeys([id, id.lower(), id.upper()]):
            candidates.extend(
                [f"{code}.cif", f"{code}.pdb", f"pdb{code}.ent", f"{code}.ent"]
            )

        for file_name in candidates:
            file_path = os.path.join(self._data_dir, file_name)
            if os.path.exists(file_path):
                return file_path
        return None

    def _download(self, id: str) -> Optional[str]:
        """Download an entry into the data directory."""
        os.makedirs(self._data_dir, exist_ok=True)
        file_path = PDBList(verbose=False).retrieve_pdb_file(
            id, pdir=self._data_dir, file_format=self._file_format
        )
        if file_path and os.path.exists(file_path):
            return file_path
        logger.warning(f"Could not download structure {id}")
        return None
