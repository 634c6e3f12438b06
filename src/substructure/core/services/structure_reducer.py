# src/substructure/core/services/structure_reducer.py
"""Service for reducing a full structure to the residues of an identifier."""

import logging
from dataclasses import replace
from typing import Optional

from ..domain.errors import StructureError
from ..domain.models.residue_range import ResidueRange
from ..domain.models.structure import Chain, Model, Structure
from ..domain.models.substructure_identifier import SubstructureIdentifier
from .ligand_proximity import LigandProximityAttacher

logger = logging.getLogger(__name__)


class StructureReducer:
    """Builds a reduced copy of a structure from a SubstructureIdentifier."""

    def __init__(
        self,
        identifier: SubstructureIdentifier,
        ligand_attacher: Optional[LigandProximityAttacher] = None,
        cutoff: Optional[float] = None,
    ):
        """
        Initialize the reducer.

        Args:
            identifier: Ranges to keep
            ligand_attacher: Attacher used to add nearby ligands per model
            cutoff: Ligand proximity cutoff in Angstroms, defaults to the
                attacher's own cutoff
        """
        self._identifier = identifier
        self._ligand_attacher = ligand_attacher or LigandProximityAttacher()
        self._cutoff = cutoff

    def reduce(self, full: Structure) -> Structure:
        """
        Reduce a full structure to the residues named by the identifier.

        The result is a shallow copy: chains are new but the groups are the
        ones of ``full``, which is never modified.

        An identifier without ranges is the exception. Its models hold the
        very Chain objects of ``full``, so adding groups to a chain of the
        result also adds them to ``full``. Reduce with explicit whole-chain
        ranges (``1ABC.A,B``) to get independent chains.

        Args:
            full: Complete structure, e.g. as loaded by a repository

        Returns:
            New structure holding the selected groups plus nearby ligands

        Raises:
            StructureError: If a chain or residue bound cannot be resolved
        """
        ranges = self._identifier.ranges
        reduced = Structure(
            entry_code=full.entry_code,
            name=str(self._identifier),
            header=replace(
                full.header,
                description=f"sub-range {ResidueRange.to_text(ranges)} of "
                f"{full.entry_code} {full.header.description}",
            ),
            db_refs=list(full.db_refs),
            biological_assembly=full.biological_assembly,
            # TODO: restrict entity infos, SS bonds and sites to the selected residues
            entity_infos=list(full.entity_infos),
            ss_bonds=list(full.ss_bonds),
            sites=list(full.sites),
            identifier=self._identifier,
        )

        for model_nr, model in enumerate(full.models):
            if not ranges:
                reduced.add_model(Model(list(model.chains)))
            else:
                reduced.add_model(self._reduce_model(model))

            self._ligand_attacher.attach(
                full, reduced, self._cutoff, model_nr, model_nr
            )

        return reduced

    @staticmethod
    def _new_chain(chain: Chain) -> Chain:
        """Empty chain carrying the identity and sequence data of ``chain``."""
        return Chain(
            chain.chain_id,
            chain.name,
            seqres_groups=chain.seqres_groups,
            seq_mismatches=chain.seq_mismatches,
        )

    def _reduce_model(self, model: Model) -> Model:
        """Collect the groups of every range into new chains of one model."""
        new_model = Model()
        prev_chain_name: Optional[str] = None
        prev_chain: Optional[Chain] = None

        for residue_range in self._identifier.ranges:
            chain = self._resolve_chain(model, residue_range)

            if residue_range.is_whole_chain:
                groups = list(chain.groups)
            else:
                groups = chain.groups_between(residue_range.start, residue_range.end)

            if prev_chain is not None and prev_chain_name == chain.name:
                new_chain = prev_chain
            else:
                new_chain = new_model.chain_by_name(chain.name)
            if new_chain is None:
                new_chain = self._new_chain(chain)
                new_model.add_chain(new_chain)

            for group in groups:
                new_chain.add_group(group)

            prev_chain_name = chain.name
            prev_chain = new_chain

        return new_model

    def _resolve_chain(self, model: Model, residue_range: ResidueRange) -> Chain:
        """Find the chain a range refers to by wildcard, name or index."""
        chain_name = residue_range.chain_name

        if residue_range.is_wildcard:
            # "_" stands for the only chain of single-chain entries
            chain = model.chain_by_index(0)
            if chain is None:
                raise StructureError(
                    f"No chains available for '_' in {self._identifier}"
                )
            if len(model) != 1:
                logger.warning(
                    f"Multiple possible chains match '_'. Using chain {chain.chain_id}"
                )
            return chain

        chain = model.chain_by_name(chain_name)
        if chain is not None:
            return chain

        # Maybe it was a chain index masquerading as a chain name
        index_chain = None
        if chain_name.isdigit():
            index_chain = model.chain_by_index(int(chain_name))
        if index_chain is None:
            raise StructureError(
                f"Unrecognized chain {chain_name} in {self._identifier}"
            )
        logger.warning(
            f"No chain found for {chain_name}. Interpreting it as an index, "
            f"using chain {index_chain.chain_id} instead"
        )
        return index_chain
