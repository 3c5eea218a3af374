import logging
from typing import Dict, List, Sequence, Tuple

import numpy as np

from pyptable.core.typedefs import CompiledTables, GroupBlock, IndexTable, OxidationRun, StateOfMatter
from pyptable.data.constants import ElementConstants, ErrorMessages
from pyptable.parsing.config.column_keys import (
    STANDARD_STATE_COLUMN, GROUP_BLOCK_COLUMN, ATOMIC_MASS_COLUMN, ELECTRONEGATIVITY_COLUMN,
    IONIZATION_ENERGY_COLUMN, ELECTRON_AFFINITY_COLUMN, MELTING_POINT_COLUMN, BOILING_POINT_COLUMN,
    DENSITY_COLUMN, ATOMIC_RADIUS_COLUMN, OXIDATION_STATES_COLUMN
)
from pyptable.parsing.processors.configuration_resolver import resolve_all
from pyptable.parsing.processors.record_normalizer import Record
from pyptable.parsing.utils.utilities import decode_cpk_color, parse_float_field, parse_unsigned, parse_year
from pyptable.parsing.validation.errors import DocumentStructureError, UnknownCategoryError
from pyptable.parsing.validation.table_validator import validate_tables

logger = logging.getLogger(__name__)

STANDARD_STATES: Dict[str, StateOfMatter] = {
    "solid": StateOfMatter.SOLID,
    "liquid": StateOfMatter.LIQUID,
    "gas": StateOfMatter.GAS,
    "expected to be a solid": StateOfMatter.SOLID,
    "expected to be a liquid": StateOfMatter.LIQUID,
    "expected to be a gas": StateOfMatter.GAS,
}

GROUP_BLOCKS: Dict[str, GroupBlock] = {
    "alkali metal": GroupBlock.ALKALI_METAL,
    "alkaline earth metal": GroupBlock.ALKALINE_EARTH_METAL,
    "alkaline-earth metal": GroupBlock.ALKALINE_EARTH_METAL,
    "lanthanide": GroupBlock.LANTHANIDE,
    "actinide": GroupBlock.ACTINIDE,
    "transition metal": GroupBlock.TRANSITION_METAL,
    "post-transition metal": GroupBlock.POST_TRANSITION_METAL,
    "metalloid": GroupBlock.METALLOID,
    "nonmetal": GroupBlock.NON_METAL,
    "non-metal": GroupBlock.NON_METAL,
    "halogen": GroupBlock.HALOGEN,
    "noble gas": GroupBlock.NOBLE_GAS,
}


# --- Public API ---
def compile_records(records: Sequence[Record], source: str = "") -> CompiledTables:
    """
    Compile normalised records into immutable lookup tables.

    Records are ordered by atomic number, which fixes the element id (atomic number - 1) of every
    entry in every table.
    Args:
        records: One Record per element, in any order.
        source: Description of where the records came from, kept on the result.
    Returns:
        CompiledTables with read-only numpy arrays.
    Raises:
        DocumentStructureError: If the atomic numbers are not exactly 1..118 or a numeric cell
            cannot be parsed or does not fit its array type.
        UnknownCategoryError: For an unrecognised standard state or group block.
        ElectronConfigurationError: For electron configurations that cannot be resolved.
        TableInvariantError: If a compiled table breaks an ordering or coverage invariant.
    """
    logger.info("Compiling tables from %d records", len(records))
    ordered = sorted(records, key=lambda r: r.atomic_number)
    _check_atomic_numbers(ordered)

    symbols = tuple(r.symbol for r in ordered)
    names = tuple(r.name for r in ordered)
    oxidation_data, oxidation_runs = build_oxidation_runs([r.oxidation_states for r in ordered])
    configurations = resolve_all(symbols, [r.electron_configuration for r in ordered])

    tables = CompiledTables(
        symbols=symbols,
        names=names,
        symbol_index=build_index_table(symbols),
        name_index=build_index_table([name.lower() for name in names]),
        atomic_masses=_float_array(ordered, "atomic_mass", ATOMIC_MASS_COLUMN, np.float64),
        cpk_colors=_freeze(np.array([decode_cpk_color(r.cpk) for r in ordered], dtype=np.uint8)
                           .reshape(len(ordered), ElementConstants.COLOR_CHANNELS)),
        electron_configuration_strings=tuple(r.electron_configuration for r in ordered),
        electronic_configurations=tuple(configurations),
        electronegativities=_float_array(ordered, "electronegativity", ELECTRONEGATIVITY_COLUMN),
        atomic_radii=_freeze(np.array(
            [parse_unsigned(r.atomic_radius, ATOMIC_RADIUS_COLUMN, r.atomic_number) for r in ordered],
            dtype=np.uint16)),
        ionization_energies=_float_array(ordered, "ionization_energy", IONIZATION_ENERGY_COLUMN),
        electron_affinities=_float_array(ordered, "electron_affinity", ELECTRON_AFFINITY_COLUMN),
        oxidation_state_data=oxidation_data,
        oxidation_state_runs=oxidation_runs,
        standard_states=tuple(map_standard_state(r.standard_state) for r in ordered),
        melting_points=_float_array(ordered, "melting_point", MELTING_POINT_COLUMN),
        boiling_points=_float_array(ordered, "boiling_point", BOILING_POINT_COLUMN),
        densities=_float_array(ordered, "density", DENSITY_COLUMN),
        group_blocks=tuple(map_group_block(r.group_block) for r in ordered),
        years_discovered=_freeze(np.array(
            [parse_year(r.year_discovered, r.atomic_number) for r in ordered], dtype=np.uint16)),
        source=source,
    )
    validate_tables(tables)
    logger.info("Compiled %d elements (%d oxidation states)", len(tables), len(oxidation_data))
    return tables


def build_index_table(keys: Sequence[str]) -> IndexTable:
    """Pair every key with its element id and sort by key (stable)."""
    return tuple(sorted(((key, element_id) for element_id, key in enumerate(keys)), key=lambda e: e[0]))


def build_oxidation_runs(states_per_element: Sequence[List[int]]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Concatenate per-element oxidation states into one flat array.

    Elements are taken in atomic-number order, so the n-th entry belongs to atomic number n + 1.
    Returns:
        (flat int8 array, uint16 array of shape (n, 2) holding (offset, count) per element)
    Raises:
        DocumentStructureError: If a state does not fit in int8 or the flat array outgrows the
            uint16 offsets.
    """
    flat: List[int] = []
    runs: List[OxidationRun] = []
    for element_id, states in enumerate(states_per_element):
        for state in states:
            if not ElementConstants.MIN_OXIDATION_STATE <= state <= ElementConstants.MAX_OXIDATION_STATE:
                raise DocumentStructureError(ErrorMessages.VALUE_OUT_OF_RANGE.format(
                    field=OXIDATION_STATES_COLUMN, atomic_number=element_id + 1,
                    minimum=ElementConstants.MIN_OXIDATION_STATE,
                    maximum=ElementConstants.MAX_OXIDATION_STATE, value=state))
        runs.append((len(flat), len(states)))
        flat.extend(states)
    if len(flat) > ElementConstants.MAX_UNSIGNED_FIELD:
        raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
            detail=f"{len(flat)} oxidation states exceed the run offset limit "
                   f"of {ElementConstants.MAX_UNSIGNED_FIELD}"))
    data = np.array(flat, dtype=np.int8)
    run_array = np.array(runs, dtype=np.uint16).reshape(len(runs), 2)
    return _freeze(data), _freeze(run_array)


def map_standard_state(text: str) -> StateOfMatter:
    state = STANDARD_STATES.get(text.lower())
    if state is None:
        raise UnknownCategoryError(STANDARD_STATE_COLUMN, text, ErrorMessages.UNKNOWN_STATE.format(value=text))
    return state


def map_group_block(text: str) -> GroupBlock:
    group = GROUP_BLOCKS.get(text.lower())
    if group is None:
        raise UnknownCategoryError(GROUP_BLOCK_COLUMN, text, ErrorMessages.UNKNOWN_GROUP_BLOCK.format(value=text))
    return group


# --- Helpers ---
def _check_atomic_numbers(ordered: Sequence[Record]) -> None:
    atomic_numbers = [r.atomic_number for r in ordered]
    expected = list(range(ElementConstants.MIN_ATOMIC_NUMBER, ElementConstants.MAX_ATOMIC_NUMBER + 1))
    if atomic_numbers != expected:
        missing = sorted(set(expected) - set(atomic_numbers))
        extra = sorted(set(atomic_numbers) - set(expected))
        duplicates = sorted({z for z in atomic_numbers if atomic_numbers.count(z) > 1})
        logger.error("Atomic numbers are not 1..%d: missing=%s, unexpected=%s, duplicated=%s",
                     ElementConstants.MAX_ATOMIC_NUMBER, missing, extra, duplicates)
        raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
            detail=f"expected atomic numbers 1..{ElementConstants.MAX_ATOMIC_NUMBER}, "
                   f"missing={missing}, unexpected={extra}, duplicated={duplicates}"))


def _float_array(records: Sequence[Record], attribute: str, column: str, dtype=np.float32) -> np.ndarray:
    values = [parse_float_field(getattr(r, attribute), column, r.atomic_number) for r in records]
    return _freeze(np.array(values, dtype=dtype))


def _freeze(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array
