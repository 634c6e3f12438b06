import logging

import pytest

from conftest import group_labels, polymer_labels
from substructure.core.domain.errors import StructureError
from substructure.core.domain.models.substructure_identifier import SubstructureIdentifier
from substructure.core.services.ligand_proximity import LigandProximityAttacher
from substructure.core.services.structure_reducer import StructureReducer


def reduce(text, structure, **kwargs):
    return StructureReducer(SubstructureIdentifier.parse(text), **kwargs).reduce(structure)


class TestWholeStructure:
    """Tests for identifiers without ranges."""

    @pytest.mark.parametrize("fixture", ["full_structure", "multi_model_structure"])
    def test_same_chains_and_groups(self, fixture, request):
        full = request.getfixturevalue(fixture)
        reduced = reduce("1abc", full)
        assert reduced.nr_models == full.nr_models
        for full_model, reduced_model in zip(full.models, reduced.models):
            assert len(reduced_model) == len(full_model)
            for full_chain, reduced_chain in zip(full_model, reduced_model):
                assert reduced_chain is full_chain
                assert reduced_chain.groups == full_chain.groups

    def test_full_structure_untouched(self, full_structure):
        before = [len(c) for c in full_structure.get_model(0)]
        reduce("1abc", full_structure)
        assert [len(c) for c in full_structure.get_model(0)] == before

    def test_chains_shared_with_full_structure(self, full_structure):
        reduced = reduce("1abc", full_structure)
        full_chain = full_structure.get_model(0).chain_by_name("A")
        before = len(full_chain)
        reduced.get_model(0).chains[0].add_group(full_structure.get_model(0).chains[2].groups[0])
        assert len(full_chain) == before + 1

    def test_whole_chain_ranges_are_independent(self, full_structure):
        reduced = reduce("1abc.A,B,L", full_structure)
        full_chain = full_structure.get_model(0).chain_by_name("A")
        before = len(full_chain)
        reduced_chain = reduced.get_model(0).chain_by_name("A")
        assert reduced_chain is not full_chain
        reduced_chain.add_group(full_structure.get_model(0).chains[2].groups[0])
        assert len(full_chain) == before


class TestRanges:
    """Tests for range selection."""

    def test_disjoint_ranges(self, full_structure):
        reduced = reduce("1abc.A_1-40,B_1-20", full_structure)
        model = reduced.get_model(0)
        # L only holds the NAG picked up next to A30
        assert [c.name for c in model] == ["A", "B", "L"]

        chain_a, chain_b, _ = model.chains
        expected_a = [str(i) for i in range(1, 21)] + ["20A"] + [
            str(i) for i in range(21, 41)
        ]
        assert polymer_labels(chain_a) == expected_a
        assert polymer_labels(chain_b) == [str(i) for i in range(1, 21)]

    def test_groups_are_shared(self, full_structure):
        reduced = reduce("1abc.A_3-4", full_structure)
        full_chain = full_structure.get_model(0).chain_by_name("A")
        assert reduced.get_model(0).chains[0].groups[0] is full_chain.groups[2]

    def test_whole_chain(self, full_structure):
        reduced = reduce("1abc.B", full_structure)
        chain_b = reduced.get_model(0).chain_by_name("B")
        assert group_labels(chain_b) == [str(i) for i in range(1, 21)] + ["301"]

    def test_insertion_codes_follow_chain_order(self, full_structure):
        reduced = reduce("1abc.A_20-21", full_structure)
        assert polymer_labels(reduced.get_model(0).chains[0]) == ["20", "20A", "21"]

    def test_range_starting_at_insertion_code(self, full_structure):
        reduced = reduce("1abc.A_20A-22", full_structure)
        assert polymer_labels(reduced.get_model(0).chains[0]) == ["20A", "21", "22"]

    def test_open_ended_range(self, full_structure):
        reduced = reduce("1abc.B_18-", full_structure)
        assert group_labels(reduced.get_model(0).chains[0]) == ["18", "19", "20", "301"]

    def test_consecutive_ranges_share_chain(self, full_structure):
        reduced = reduce("1abc.A_1-5,A_10-12", full_structure)
        model = reduced.get_model(0)
        assert len(model) == 1
        assert polymer_labels(model.chains[0]) == ["1", "2", "3", "4", "5", "10", "11", "12"]

    def test_revisited_chain_is_reused(self, full_structure):
        reduced = reduce("1abc.A_1-2,B_1-2,A_5-6", full_structure)
        model = reduced.get_model(0)
        assert [c.name for c in model] == ["A", "B"]
        assert polymer_labels(model.chain_by_name("A")) == ["1", "2", "5", "6"]

    def test_duplicate_ranges_duplicate_groups(self, full_structure):
        reduced = reduce("1abc.A_1-5,A_1-5", full_structure)
        assert group_labels(reduced.get_model(0).chains[0]) == ["1", "2", "3", "4", "5"] * 2

    def test_missing_residue_bound(self, full_structure):
        with pytest.raises(StructureError):
            reduce("1abc.A_1-99", full_structure)

    def test_reversed_bounds(self, full_structure):
        with pytest.raises(StructureError):
            reduce("1abc.A_10-5", full_structure)


class TestChainResolution:
    """Tests for wildcard and index chain lookup."""

    def test_wildcard_single_chain(self, single_chain_structure, caplog):
        with caplog.at_level(logging.WARNING):
            reduced = reduce("2xyz._", single_chain_structure)
        assert polymer_labels(reduced.get_model(0).chains[0]) == [
            str(i) for i in range(1, 11)
        ]
        assert caplog.records == []

    def test_wildcard_multiple_chains_warns(self, full_structure, caplog):
        with caplog.at_level(logging.WARNING):
            reduced = reduce("1abc._", full_structure)
        model = reduced.get_model(0)
        assert model.chains[0].name == "A"
        assert "Multiple possible chains match '_'" in caplog.text

    def test_wildcard_with_bounds(self, single_chain_structure):
        reduced = reduce("2xyz.__2-4", single_chain_structure)
        assert polymer_labels(reduced.get_model(0).chains[0]) == ["2", "3", "4"]

    def test_chain_index_fallback(self, full_structure, caplog):
        with caplog.at_level(logging.WARNING):
            reduced = reduce("1abc.1_1-3", full_structure)
        chain = reduced.get_model(0).chains[0]
        assert chain.name == "B"
        assert polymer_labels(chain) == ["1", "2", "3"]
        assert "Interpreting it as an index" in caplog.text

    def test_chain_index_out_of_range(self, full_structure):
        with pytest.raises(StructureError):
            reduce("1abc.5", full_structure)

    def test_unknown_chain(self, full_structure):
        with pytest.raises(StructureError, match="Unrecognized chain X"):
            reduce("1abc.X", full_structure)


class TestMetadata:
    """Tests for structure-level properties of the reduced copy."""

    def test_header_and_name(self, full_structure):
        reduced = reduce("1abc.A_1-20", full_structure)
        assert reduced.entry_code == "1ABC"
        assert reduced.name == "1ABC.A_1-20"
        assert reduced.header.description == "sub-range A_1-20 of 1ABC test protein"
        assert full_structure.header.description == "test protein"

    def test_source_identifier(self, full_structure):
        identifier = SubstructureIdentifier.parse("1abc.A")
        reduced = StructureReducer(identifier).reduce(full_structure)
        assert reduced.identifier is identifier

    def test_metadata_copied_wholesale(self, full_structure):
        full_structure.ss_bonds.append(("A", 3, "B", 7))
        reduced = reduce("1abc.A_1-2", full_structure)
        assert reduced.entity_infos == full_structure.entity_infos
        assert reduced.ss_bonds == [("A", 3, "B", 7)]
        assert reduced.biological_assembly == full_structure.biological_assembly

    def test_every_model_reduced(self, multi_model_structure):
        reduced = reduce("1abc.A_1-20", multi_model_structure)
        assert reduced.nr_models == 2
        for model_nr in range(2):
            chain = reduced.get_model(model_nr).chains[0]
            assert polymer_labels(chain) == [str(i) for i in range(1, 21)]
            assert chain.groups[0] is multi_model_structure.get_model(model_nr).chains[0].groups[0]


class TestLigands:
    """Tests for ligands picked up while reducing."""

    def test_nearby_ligand_added(self, full_structure):
        reduced = reduce("1abc.A_1-20", full_structure)
        chain_a = reduced.get_model(0).chain_by_name("A")
        assert [g.name for g in chain_a.groups if not g.is_standard()] == ["HEM"]

    def test_water_and_distant_ligands_skipped(self, full_structure):
        reduced = reduce("1abc.A_1-20", full_structure)
        names = {g.name for g in reduced.get_model(0).iter_groups()}
        assert "HOH" not in names
        assert "ZN" not in names
        assert "SO4" not in names

    def test_adjacent_polymer_residues_not_added(self, full_structure):
        reduced = reduce("1abc.A_1-20", full_structure)
        labels = polymer_labels(reduced.get_model(0).chains[0])
        assert "20A" not in labels
        assert "21" not in labels

    def test_ligand_chain_created(self, full_structure):
        reduced = reduce("1abc.A_25-35", full_structure)
        model = reduced.get_model(0)
        assert [c.name for c in model] == ["A", "L"]
        assert [g.name for g in model.chain_by_name("L").groups] == ["NAG"]

    def test_custom_cutoff(self, full_structure):
        reduced = reduce("1abc.A_1-20", full_structure, cutoff=3.0)
        names = {g.name for g in reduced.get_model(0).iter_groups()}
        assert "HEM" not in names

    def test_injected_attacher(self, full_structure):
        calls = []

        class RecordingAttacher(LigandProximityAttacher):
            def attach(self, full, reduced, cutoff=None, from_model=0, to_model=0):
                calls.append((cutoff, from_model, to_model))
                return 0

        reduce("1abc.A_1-2", full_structure, ligand_attacher=RecordingAttacher(), cutoff=4.5)
        assert calls == [(4.5, 0, 0)]

    def test_attacher_cutoff_used_by_default(self, full_structure):
        attacher = LigandProximityAttacher(cutoff=3.0)
        reduced = reduce("1abc.A_1-20", full_structure, ligand_attacher=attacher)
        names = {g.name for g in reduced.get_model(0).iter_groups()}
        assert "HEM" not in names

    def test_reducer_cutoff_overrides_attacher(self, full_structure):
        attacher = LigandProximityAttacher(cutoff=3.0)
        reduced = reduce("1abc.A_1-20", full_structure, ligand_attacher=attacher, cutoff=5.5)
        names = {g.name for g in reduced.get_model(0).iter_groups()}
        assert "HEM" in names
