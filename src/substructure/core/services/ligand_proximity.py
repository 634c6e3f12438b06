# src/substructure/core/services/ligand_proximity.py
"""Service for re-attaching nearby ligands to a reduced structure."""

import logging
from typing import Callable, Optional

from ..domain.interfaces.contact_grid import ContactGrid
from ..domain.models.structure import Chain, Structure

logger = logging.getLogger(__name__)

# Threshold for plausible binding of a ligand to the selected substructure
DEFAULT_LIGAND_PROXIMITY_CUTOFF = 7.0


class LigandProximityAttacher:
    """Adds ligands from a full structure that sit close to a reduced one."""

    def __init__(
        self,
        cutoff: float = DEFAULT_LIGAND_PROXIMITY_CUTOFF,
        grid_factory: Optional[Callable[[float], ContactGrid]] = None,
    ):
        """
        Initialize the attacher.

        Args:
            cutoff: Default contact distance in Angstroms
            grid_factory: Builds an empty ContactGrid for a cutoff
        """
        if grid_factory is None:
            from ..domain.implementations.neighbor_search_grid import (
                NeighborSearchGrid,
            )

            grid_factory = NeighborSearchGrid

        self.cutoff = cutoff
        self._grid_factory = grid_factory

    def attach(
        self,
        full: Structure,
        reduced: Structure,
        cutoff: Optional[float] = None,
        from_model: int = 0,
        to_model: int = 0,
    ) -> int:
        """
        Copy ligands of one model of ``full`` into one model of ``reduced``.

        A group is copied when it is neither water nor a standard residue,
        at least one of its atoms lies within ``cutoff`` of an atom already in
        the reduced model, and no group with the same chain id and residue
        number is present yet. Existing groups are never removed or moved.

        Args:
            full: Complete structure, read only
            reduced: Structure to extend in place
            cutoff: Contact distance, defaults to the attacher's cutoff
            from_model: Model index in the full structure
            to_model: Model index in the reduced structure

        Returns:
            Number of groups added
        """
        grid = self._grid_factory(self.cutoff if cutoff is None else cutoff)
        grid.add_atoms(reduced.get_atoms(to_model))

        target_model = reduced.get_model(to_model)
        added = 0
        for full_chain in full.get_model(from_model):
            reduced_chain: Optional[Chain] = None

            for group in full_chain.groups:
                if group.is_water():
                    continue
                # Polymers aren't ligands
                if group.is_standard():
                    continue
                if not grid.has_any_contact(group.get_atoms()):
                    continue
                if (
                    reduced.find_group(group.chain_id, group.residue_number, to_model)
                    is not None
                ):
                    continue

                if reduced_chain is None:
                    reduced_chain = reduced.find_chain(full_chain.chain_id, to_model)
                if reduced_chain is None:
                    reduced_chain = Chain(
                        full_chain.chain_id,
                        full_chain.name,
                        seqres_groups=full_chain.seqres_groups,
                        seq_mismatches=full_chain.seq_mismatches,
                    )
                    target_model.add_chain(reduced_chain)

                logger.info(
                    f"Adding ligand group {group.name} {group.residue_number} by proximity"
                )
                reduced_chain.add_group(group)
                added += 1
        return added

    def attach_all(
        self, full: Structure, reduced: Structure, cutoff: Optional[float] = None
    ) -> int:
        """
        Copy nearby ligands for every model of the reduced structure.

        Returns:
            Total number of groups added
        """
        if full.nr_models < reduced.nr_models:
            raise ValueError(
                f"Full structure has {full.nr_models} models, "
                f"reduced structure has {reduced.nr_models}"
            )
        return sum(
            self.attach(full, reduced, cutoff, model, model)
            for model in range(reduced.nr_models)
        )
