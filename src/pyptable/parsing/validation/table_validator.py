"""Ordering and coverage checks for compiled element tables."""

import logging
from typing import Sequence

import numpy as np

from pyptable.core.typedefs import CompiledTables, IndexTable
from pyptable.data.constants import ElementConstants
from pyptable.parsing.validation.errors import TableInvariantError

logger = logging.getLogger(__name__)


def is_strictly_ascending(keys: Sequence[str], name: str = "Index", raise_error: bool = True) -> bool:
    """Check that keys are strictly ascending, which also rules out duplicates."""
    for i in range(1, len(keys)):
        if keys[i - 1] < keys[i]:
            continue
        start_idx = max(0, i - 2)
        end_idx = min(len(keys), i + 3)
        context = "\nSurrounding keys:\n"
        for j in range(start_idx, end_idx):
            context += f"Index {j}: {keys[j]!r}\n"
        error_msg = (
            f"{name} is not strictly ascending at index {i}:\n"
            f"Previous key ({i - 1}): {keys[i - 1]!r}\n"
            f"Current key ({i}): {keys[i]!r}\n"
            f"{context}"
        )
        if raise_error:
            raise TableInvariantError(error_msg)
        logger.warning("Warning: %s", error_msg)
        return False
    logger.debug("%s is strictly ascending", name)
    return True


def validate_index_table(table: IndexTable, name: str, element_count: int) -> None:
    """An index table must be strictly ascending by key and map onto every id exactly once."""
    is_strictly_ascending([key for key, _ in table], name)
    ids = sorted(element_id for _, element_id in table)
    if ids != list(range(element_count)):
        raise TableInvariantError(f"{name} does not cover element ids 0..{element_count - 1} exactly once")


def validate_oxidation_runs(data: np.ndarray, runs: np.ndarray) -> None:
    """Runs must be contiguous in atomic-number order and cover the flat array with no gap or overlap."""
    expected_offset = 0
    for element_id, (offset, count) in enumerate(runs.tolist()):
        if offset != expected_offset:
            raise TableInvariantError(
                f"Oxidation-state run of element {element_id} starts at {offset}, expected {expected_offset}")
        expected_offset += count
    if expected_offset != len(data):
        raise TableInvariantError(
            f"Oxidation-state runs cover {expected_offset} entries but the flat array holds {len(data)}")


def validate_tables(tables: CompiledTables) -> None:
    """Run every invariant check on a freshly compiled table set."""
    count = ElementConstants.ELEMENT_COUNT
    per_element = {
        "symbols": tables.symbols,
        "names": tables.names,
        "atomic_masses": tables.atomic_masses,
        "cpk_colors": tables.cpk_colors,
        "electronic_configurations": tables.electronic_configurations,
        "electronegativities": tables.electronegativities,
        "atomic_radii": tables.atomic_radii,
        "ionization_energies": tables.ionization_energies,
        "electron_affinities": tables.electron_affinities,
        "oxidation_state_runs": tables.oxidation_state_runs,
        "standard_states": tables.standard_states,
        "melting_points": tables.melting_points,
        "boiling_points": tables.boiling_points,
        "densities": tables.densities,
        "group_blocks": tables.group_blocks,
        "years_discovered": tables.years_discovered,
    }
    for field_name, values in per_element.items():
        if len(values) != count:
            raise TableInvariantError(f"Table '{field_name}' has {len(values)} entries, expected {count}")
    validate_index_table(tables.symbol_index, "Symbol index", count)
    validate_index_table(tables.name_index, "Name index", count)
    validate_oxidation_runs(tables.oxidation_state_data, tables.oxidation_state_runs)
    logger.info("Compiled tables passed all invariant checks")
