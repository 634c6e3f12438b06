"""Shared fixtures building small in-memory structures."""

from typing import Dict, List, Sequence, Tuple

import numpy as np
import pytest
from Bio.PDB.Atom import Atom
from Bio.PDB.Chain import Chain as BioChain
from Bio.PDB.Model import Model as BioModel
from Bio.PDB.PDBIO import PDBIO
from Bio.PDB.Residue import Residue
from Bio.PDB.Structure import Structure as BioStructure

from substructure.infrastructure.adapters.biopython_adapter import from_biopython

SPACING = 3.8

# (resname, seq_num, icode, hetflag, atom coordinates)
ResidueSpec = Tuple[str, int, str, str, Sequence[Tuple[float, float, float]]]


def make_residue(
    resname: str,
    seq_num: int,
    coords: Sequence[Tuple[float, float, float]],
    hetflag: str = " ",
    icode: str = " ",
) -> Residue:
    """Build a Biopython residue with one atom per coordinate."""
    if hetflag == "H":
        hetflag = f"H_{resname}"
    residue = Residue((hetflag, seq_num, icode), resname, "    ")
    for i, coord in enumerate(coords):
        if hetflag == " ":
            name, element = ("CA", "C") if i == 0 else (f"C{i}", "C")
        elif hetflag == "W":
            name, element = "O", "O"
        else:
            name, element = f"C{i + 1}", "C"
        residue.add(
            Atom(
                name,
                np.array(coord, dtype=float),
                0.0,
                1.0,
                " ",
                f" {name:<3}",
                i + 1,
                element=element,
            )
        )
    return residue


def build_bio_structure(
    structure_id: str, chains: Dict[str, List[ResidueSpec]], n_models: int = 1
) -> BioStructure:
    """Build a Biopython structure, one fresh set of residues per model."""
    structure = BioStructure(structure_id)
    for model_nr in range(n_models):
        model = BioModel(model_nr)
        structure.add(model)
        for chain_id, residues in chains.items():
            chain = BioChain(chain_id)
            model.add(chain)
            for resname, seq_num, icode, hetflag, coords in residues:
                chain.add(make_residue(resname, seq_num, coords, hetflag, icode))
    structure.header = {
        "name": "test protein",
        "head": "transferase",
        "idcode": structure_id,
        "compound": {"1": {"molecule": "test protein"}},
    }
    return structure


def protein_chain(length: int, y: float = 0.0, insert_after: int = 0) -> List[ResidueSpec]:
    """Straight chain of alanines along x, optionally with one ``A`` insertion."""
    residues = []
    for i in range(1, length + 1):
        residues.append(("ALA", i, " ", " ", [(SPACING * i, y, 0.0)]))
        if i == insert_after:
            residues.append(("ALA", i, "A", " ", [(SPACING * i + 1.9, y + 1.0, 0.0)]))
    return residues


def default_chains() -> Dict[str, List[ResidueSpec]]:
    """
    Chains of the default test entry.

    A: ALA 1-40 with insertion 20A, HEM 501 next to residue 10, HOH 601 next
       to residue 10 and a distant ZN 701.
    B: ALA 1-20 fifty Angstroms away from A, SO4 301 next to B5.
    L: NAG 1 next to A30.
    """
    chain_a = protein_chain(40, insert_after=20)
    chain_a += [
        ("HEM", 501, " ", "H", [(SPACING * 10, 5.0, 0.0), (SPACING * 10, 6.0, 0.0)]),
        ("HOH", 601, " ", "W", [(SPACING * 10, -3.0, 0.0)]),
        ("ZN", 701, " ", "H", [(0.0, 0.0, 100.0)]),
    ]
    chain_b = protein_chain(20, y=50.0)
    chain_b.append(("SO4", 301, " ", "H", [(SPACING * 5, 53.0, 0.0)]))
    chain_l = [("NAG", 1, " ", "H", [(SPACING * 30, 4.0, 0.0)])]
    return {"A": chain_a, "B": chain_b, "L": chain_l}


@pytest.fixture
def bio_structure():
    return build_bio_structure("1abc", default_chains())


@pytest.fixture
def full_structure(bio_structure):
    return from_biopython(bio_structure)


@pytest.fixture
def multi_model_structure():
    return from_biopython(build_bio_structure("1abc", default_chains(), n_models=2))


@pytest.fixture
def single_chain_structure():
    chains = {"A": protein_chain(10)}
    return from_biopython(build_bio_structure("2xyz", chains))


@pytest.fixture
def boundary_structure():
    """GLY 1 at the origin with ligands just inside and just outside 7 A."""
    chains = {
        "A": [
            ("GLY", 1, " ", " ", [(0.0, 0.0, 0.0)]),
            ("LIG", 2, " ", "H", [(0.0, 6.999, 0.0)]),
            ("LIG", 3, " ", "H", [(0.0, -7.001, 0.0)]),
        ]
    }
    return from_biopython(build_bio_structure("3bnd", chains))


@pytest.fixture
def data_dir(tmp_path, bio_structure):
    """Directory holding the default entry as ``1abc.pdb``."""
    directory = tmp_path / "structures"
    directory.mkdir()
    writer = PDBIO()
    writer.set_structure(bio_structure)
    writer.save(str(directory / "1abc.pdb"))
    return directory


def group_labels(chain) -> List[str]:
    """Residue numbers of a chain's groups as strings."""
    return [str(group.residue_number) for group in chain.groups]


def polymer_labels(chain) -> List[str]:
    """Residue numbers of a chain's standard residues as strings."""
    return [str(g.residue_number) for g in chain.groups if g.is_standard()]
