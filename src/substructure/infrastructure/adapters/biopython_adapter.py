# src/substructure/infrastructure/adapters/biopython_adapter.py
"""Adapter between Biopython's Bio.PDB hierarchy and the domain structure model."""

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from Bio.PDB.Chain import Chain as BioChain
from Bio.PDB.mmcifio import MMCIFIO
from Bio.PDB.Model import Model as BioModel
from Bio.PDB.PDBIO import PDBIO
from Bio.PDB.Polypeptide import is_aa
from Bio.PDB.Residue import Residue
from Bio.PDB.Structure import Structure as BioStructure

from ...core.domain.interfaces.group import Group
from ...core.domain.models.residue_number import ResidueNumber
from ...core.domain.models.structure import Chain, Model, Structure, StructureHeader

logger = logging.getLogger(__name__)

WATER_NAMES = {"HOH", "WAT", "H2O", "DOD", "D2O"}
STANDARD_NUCLEOTIDES = {"A", "C", "G", "U", "I", "DA", "DC", "DG", "DT", "DI"}


class BiopythonGroup(Group):
    """Group wrapping a ``Bio.PDB.Residue.Residue`` without copying it."""

    def __init__(self, residue: Residue, chain_id: str):
        """
        Args:
            residue: Wrapped Biopython residue
            chain_id: Identifier of the residue's chain
        """
        self._residue = residue
        self._chain_id = chain_id
        hetflag, seq_num, ins_code = residue.id
        self._residue_number = ResidueNumber(seq_num, ins_code)
        self._hetflag = hetflag

    @property
    def residue(self) -> Residue:
        return self._residue

    @property
    def name(self) -> str:
        return self._residue.get_resname().strip()

    @property
    def chain_id(self) -> str:
        return self._chain_id

    @property
    def residue_number(self) -> ResidueNumber:
        return self._residue_number

    def get_atoms(self) -> List[Any]:
        return list(self._residue.get_atoms())

    def is_water(self) -> bool:
        return self._hetflag == "W" or self.name.upper() in WATER_NAMES

    def is_standard(self) -> bool:
        if is_aa(self._residue, standard=True):
            return True
        return self.name.upper() in STANDARD_NUCLEOTIDES

    def __repr__(self) -> str:
        return f"<BiopythonGroup {self.name} {self._chain_id}:{self._residue_number}>"


def _header_from_dict(header: dict) -> StructureHeader:
    return StructureHeader(
        description=header.get("name", "") or "",
        classification=header.get("head", "") or "",
        id_code=header.get("idcode", "") or "",
        deposition_date=header.get("deposition_date", "") or "",
        resolution=header.get("resolution"),
        method=header.get("structure_method", "") or "",
        keywords=header.get("keywords", "") or "",
    )


def from_biopython(
    bio_structure: BioStructure, entry_code: Optional[str] = None
) -> Structure:
    """
    Wrap a Biopython structure in the domain structure model.

    Args:
        bio_structure: Structure as returned by a Bio.PDB parser
        entry_code: Entry code; defaults to the header id code or structure id

    Returns:
        Structure sharing its residues with ``bio_structure``
    """
    header = getattr(bio_structure, "header", None) or {}
    structure_header = _header_from_dict(header)
    code = entry_code or structure_header.id_code or str(bio_structure.id)

    structure = Structure(
        entry_code=code.upper() if len(code) == 4 else code,
        name=code,
        header=structure_header,
        entity_infos=list((header.get("compound") or {}).values()),
    )

    for bio_model in bio_structure:
        model = Model()
        for bio_chain in bio_model:
            chain = Chain(bio_chain.id)
            for residue in bio_chain:
                chain.add_group(BiopythonGroup(residue, bio_chain.id))
            model.add_chain(chain)
        structure.add_model(model)

    return structure


def _unwrap(group: Group) -> Residue:
    if not isinstance(group, BiopythonGroup):
        raise TypeError(f"Cannot export non-Biopython group {group!r}")
    return group.residue


def to_biopython(structure: Structure, structure_id: Optional[str] = None) -> BioStructure:
    """
    Build a writable Biopython structure from a (reduced) structure.

    Residues are copied so the source hierarchy keeps its parents. A residue
    id that already exists in the target chain cannot be represented and is
    skipped with a warning.

    Args:
        structure: Structure whose groups are BiopythonGroup instances
        structure_id: Id of the new structure, defaults to its name

    Returns:
        New Bio.PDB structure
    """
    bio_structure = BioStructure(structure_id or structure.name or structure.entry_code)
    bio_structure.header = {
        "name": structure.header.description,
        "head": structure.header.classification,
        "idcode": structure.header.id_code,
    }

    for model_nr, model in enumerate(structure.models):
        bio_model = BioModel(model_nr)
        bio_structure.add(bio_model)
        for chain in model:
            if chain.chain_id in bio_model:
                bio_chain = bio_model[chain.chain_id]
            else:
                bio_chain = BioChain(chain.chain_id)
                bio_model.add(bio_chain)

            for group in chain:
                residue = _unwrap(group)
                if residue.id in bio_chain:
                    logger.warning(
                        f"Skipping duplicate residue {group.name} {group.residue_number} "
                        f"in chain {chain.chain_id}"
                    )
                    continue
                bio_chain.add(residue.copy())

    return bio_structure


def write_structure(
    structure: Structure, path: Union[str, Path], file_format: str = "pdb"
) -> None:
    """
    Write a structure to disk.

    Args:
        structure: Structure to write
        path: Output file path
        file_format: ``pdb`` or ``cif``
    """
    if file_format == "pdb":
        writer = PDBIO()
    elif file_format == "cif":
        writer = MMCIFIO()
    else:
        raise ValueError(f"Unsupported output format {file_format}")

    writer.set_structure(to_biopython(structure))
    writer.save(str(path))
