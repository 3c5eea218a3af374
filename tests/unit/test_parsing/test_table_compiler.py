"""Unit tests for compiling records into lookup tables."""

import numpy as np
import pytest
from pyptable.core.typedefs import GroupBlock, StateOfMatter
from pyptable.parsing.api import compile_document
from pyptable.parsing.processors.record_normalizer import normalize_document
from pyptable.parsing.processors.table_compiler import (
    compile_records, build_index_table, build_oxidation_runs, map_standard_state, map_group_block
)
from pyptable.parsing.validation.errors import (
    DocumentStructureError, ElectronConfigurationError, UnknownCategoryError
)


class TestBuildIndexTable:
    """Test sorted (key, id) tables."""

    def test_sorted_by_key(self):
        """Test that entries are sorted by key and keep their original ids."""
        assert build_index_table(["H", "He", "Cl", "C"]) == (("C", 3), ("Cl", 2), ("H", 0), ("He", 1))

    def test_byte_order(self):
        """Test that upper-case letters sort before lower-case ones."""
        assert [key for key, _ in build_index_table(["b", "B", "a"])] == ["B", "a", "b"]

    def test_empty(self):
        """Test that no keys give an empty table."""
        assert build_index_table([]) == ()


class TestBuildOxidationRuns:
    """Test the flat oxidation-state array and its runs."""

    def test_runs_are_contiguous(self):
        """Test offsets and counts for several elements including an empty one."""
        data, runs = build_oxidation_runs([[1, -1], [], [7, 5, 1, -1]])
        assert data.tolist() == [1, -1, 7, 5, 1, -1]
        assert runs.tolist() == [[0, 2], [2, 0], [2, 4]]
        assert data.dtype == np.int8

    def test_arrays_are_read_only(self):
        """Test that both arrays are frozen."""
        data, runs = build_oxidation_runs([[2]])
        with pytest.raises(ValueError):
            data[0] = 3
        with pytest.raises(ValueError):
            runs[0, 0] = 1

    def test_int8_limits_accepted(self):
        """Test that the extreme storable states compile."""
        data, _ = build_oxidation_runs([[127, -128]])
        assert data.tolist() == [127, -128]

    @pytest.mark.parametrize("state", [128, 200, -129])
    def test_state_out_of_range(self, state):
        """Test that a state outside int8 is a structural error naming the element."""
        with pytest.raises(DocumentStructureError, match="OxidationStates.*element 2 is out of range"):
            build_oxidation_runs([[1], [state]])


class TestCategoryMapping:
    """Test mapping of standard states and group blocks."""

    @pytest.mark.parametrize("text,expected", [
        ("Solid", StateOfMatter.SOLID),
        ("Liquid", StateOfMatter.LIQUID),
        ("Gas", StateOfMatter.GAS),
        ("GAS", StateOfMatter.GAS),
        ("Expected to be a Solid", StateOfMatter.SOLID),
        ("Expected to be a Liquid", StateOfMatter.LIQUID),
        ("Expected to be a Gas", StateOfMatter.GAS),
    ])
    def test_standard_states(self, text, expected):
        """Test every accepted standard-state spelling."""
        assert map_standard_state(text) is expected

    def test_unknown_state(self):
        """Test that an unknown state is rejected."""
        with pytest.raises(UnknownCategoryError, match="Unknown state: Plasma") as exc_info:
            map_standard_state("Plasma")
        assert exc_info.value.category == "StandardState"
        assert exc_info.value.value == "Plasma"

    @pytest.mark.parametrize("text,expected", [
        ("Alkali metal", GroupBlock.ALKALI_METAL),
        ("Alkaline earth metal", GroupBlock.ALKALINE_EARTH_METAL),
        ("Alkaline-earth metal", GroupBlock.ALKALINE_EARTH_METAL),
        ("Lanthanide", GroupBlock.LANTHANIDE),
        ("Actinide", GroupBlock.ACTINIDE),
        ("Transition metal", GroupBlock.TRANSITION_METAL),
        ("Post-transition metal", GroupBlock.POST_TRANSITION_METAL),
        ("Metalloid", GroupBlock.METALLOID),
        ("Nonmetal", GroupBlock.NON_METAL),
        ("Non-metal", GroupBlock.NON_METAL),
        ("Halogen", GroupBlock.HALOGEN),
        ("Noble gas", GroupBlock.NOBLE_GAS),
    ])
    def test_group_blocks(self, text, expected):
        """Test every accepted group-block spelling."""
        assert map_group_block(text) is expected

    def test_unknown_group_block(self):
        """Test that an unknown group block is rejected."""
        with pytest.raises(UnknownCategoryError, match="Unknown group block: Superheavy"):
            map_group_block("Superheavy")


class TestCompileBundledDataset:
    """Test the tables compiled from the bundled dataset."""

    def test_all_tables_have_118_entries(self, tables):
        """Test the per-element table lengths."""
        assert len(tables) == 118
        assert tables.atomic_masses.shape == (118,)
        assert tables.cpk_colors.shape == (118, 3)
        assert tables.oxidation_state_runs.shape == (118, 2)
        assert len(tables.electronic_configurations) == 118

    def test_dtypes(self, tables):
        """Test the numeric dtypes of the arrays."""
        assert tables.atomic_masses.dtype == np.float64
        assert tables.electronegativities.dtype == np.float32
        assert tables.cpk_colors.dtype == np.uint8
        assert tables.atomic_radii.dtype == np.uint16
        assert tables.years_discovered.dtype == np.uint16
        assert tables.oxidation_state_data.dtype == np.int8

    def test_arrays_are_read_only(self, tables):
        """Test that compiled arrays cannot be modified."""
        for array in (tables.atomic_masses, tables.cpk_colors, tables.densities, tables.oxidation_state_data):
            assert not array.flags.writeable

    def test_symbol_index_sorted_and_complete(self, tables):
        """Test that the symbol index is strictly ascending and covers every id once."""
        keys = [key for key, _ in tables.symbol_index]
        assert keys == sorted(keys)
        assert len(set(keys)) == 118
        assert sorted(element_id for _, element_id in tables.symbol_index) == list(range(118))

    def test_symbol_index_round_trip(self, tables):
        """Test that every index entry points at the element with that symbol."""
        for symbol, element_id in tables.symbol_index:
            assert tables.symbols[element_id] == symbol

    def test_name_index_is_lowercase(self, tables):
        """Test that name keys are the lower-cased element names."""
        for name, element_id in tables.name_index:
            assert name == tables.names[element_id].lower()
        keys = [key for key, _ in tables.name_index]
        assert keys == sorted(keys)

    def test_oxidation_runs_cover_flat_array(self, tables):
        """Test that the runs tile the flat array in atomic-number order."""
        offset = 0
        for run_offset, count in tables.oxidation_state_runs.tolist():
            assert run_offset == offset
            offset += count
        assert offset == len(tables.oxidation_state_data)

    def test_hydrogen(self, tables):
        """Test hydrogen's compiled values."""
        assert tables.symbols[0] == "H"
        assert tables.atomic_masses[0] == pytest.approx(1.008)
        assert tables.cpk_colors[0].tolist() == [255, 255, 255]
        assert tables.standard_states[0] is StateOfMatter.GAS
        assert tables.group_blocks[0] is GroupBlock.NON_METAL
        assert tables.years_discovered[0] == 1766

    def test_integer_mass_reads_as_float(self, tables):
        """Test that lead's mass '207' compiles to 207.0."""
        assert tables.atomic_masses[81] == 207.0

    def test_missing_values_compile_to_zero(self, tables):
        """Test that empty cells give zero measurements and black colours."""
        assert tables.boiling_points[86] == 0.0
        assert tables.densities[86] == 0.0
        assert tables.cpk_colors[117].tolist() == [0, 0, 0]
        offset, count = tables.oxidation_state_runs[112].tolist()
        assert count == 0

    def test_ancient_year_is_zero(self, tables):
        """Test that elements known since antiquity have year 0."""
        assert tables.years_discovered[25] == 0
        assert tables.years_discovered[78] == 0

    def test_configurations_sum_to_atomic_number(self, tables):
        """Test that every resolved configuration holds as many electrons as protons."""
        for element_id, configuration in enumerate(tables.electronic_configurations):
            assert configuration.total_electrons() == element_id + 1

    def test_category_counts(self, tables):
        """Test the number of noble gases and elements liquid at standard conditions."""
        assert tables.group_blocks.count(GroupBlock.NOBLE_GAS) == 7
        assert tables.standard_states.count(StateOfMatter.LIQUID) == 3


class TestCompileRecordsErrors:
    """Test that bad data aborts the whole compilation."""

    def test_records_in_any_order(self, bundled_document):
        """Test that records are ordered by atomic number before compiling."""
        records = list(reversed(normalize_document(bundled_document)))
        tables = compile_records(records)
        assert tables.symbols[0] == "H"
        assert tables.symbols[117] == "Og"

    def test_missing_element(self, bundled_document):
        """Test that fewer than 118 elements is a structural error."""
        records = normalize_document(bundled_document)[:-1]
        with pytest.raises(DocumentStructureError, match="missing=\\[118\\]"):
            compile_records(records)

    def test_duplicate_atomic_number(self, bundled_document):
        """Test that a repeated atomic number is a structural error."""
        records = normalize_document(bundled_document)
        records[1].atomic_number = 1
        with pytest.raises(DocumentStructureError, match="duplicated=\\[1\\]"):
            compile_records(records)

    def test_atomic_number_out_of_range(self, bundled_document):
        """Test that an atomic number above 118 is a structural error."""
        records = normalize_document(bundled_document)
        records[-1].atomic_number = 119
        with pytest.raises(DocumentStructureError, match="unexpected=\\[119\\]"):
            compile_records(records)

    def test_unknown_state(self, raw_document, set_cell):
        """Test that an unknown standard state aborts compilation."""
        set_cell(raw_document, 8, "StandardState", "Plasma")
        with pytest.raises(UnknownCategoryError):
            compile_document(raw_document)

    def test_unknown_group_block(self, raw_document, set_cell):
        """Test that an unknown group block aborts compilation."""
        set_cell(raw_document, 8, "GroupBlock", "Chalcogen")
        with pytest.raises(UnknownCategoryError):
            compile_document(raw_document)

    def test_bad_configuration(self, raw_document, set_cell):
        """Test that an out-of-range shell aborts compilation."""
        set_cell(raw_document, 8, "ElectronConfiguration", "[He]2s2 8p4")
        with pytest.raises(ElectronConfigurationError, match="out of range"):
            compile_document(raw_document)

    def test_bad_number(self, raw_document, set_cell):
        """Test that a non-numeric measurement aborts compilation."""
        set_cell(raw_document, 8, "Density", "n/a")
        with pytest.raises(DocumentStructureError, match="Density"):
            compile_document(raw_document)

    def test_oxidation_state_too_large(self, raw_document, set_cell):
        """Test that an oxidation state beyond int8 aborts compilation with a compile error."""
        set_cell(raw_document, 8, "OxidationStates", "+200")
        with pytest.raises(DocumentStructureError, match="OxidationStates.*element 8"):
            compile_document(raw_document)

    def test_atomic_radius_too_large(self, raw_document, set_cell):
        """Test that a radius beyond uint16 aborts compilation with a compile error."""
        set_cell(raw_document, 8, "AtomicRadius", "70000")
        with pytest.raises(DocumentStructureError, match="AtomicRadius.*element 8"):
            compile_document(raw_document)

    def test_exponent_measurement(self, raw_document, set_cell):
        """Test that a measurement in exponent notation compiles."""
        set_cell(raw_document, 1, "Density", "8.988e-5")
        tables = compile_document(raw_document)
        assert tables.densities[0] == pytest.approx(8.988e-5, rel=1e-6)

    def test_bad_cpk_color(self, raw_document, set_cell):
        """Test that a colour with non-hex digits aborts compilation."""
        set_cell(raw_document, 8, "CPKHexColor", "ZZ0D0D")
        with pytest.raises(DocumentStructureError, match="hex"):
            compile_document(raw_document)
