import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from pyptable.data.constants import ErrorMessages
from pyptable.parsing.config.column_keys import (
    TABLE_KEY, COLUMNS_KEY, COLUMN_KEY, ROW_KEY, CELL_KEY, COLUMN_FIELDS,
    ATOMIC_NUMBER_COLUMN, OXIDATION_STATES_COLUMN, ATOMIC_MASS_COLUMN, ELECTRONEGATIVITY_COLUMN,
    IONIZATION_ENERGY_COLUMN, ELECTRON_AFFINITY_COLUMN, MELTING_POINT_COLUMN, BOILING_POINT_COLUMN,
    DENSITY_COLUMN
)
from pyptable.parsing.utils.utilities import canonicalize_decimal
from pyptable.parsing.validation.errors import DocumentStructureError

logger = logging.getLogger(__name__)

# Columns whose cells are stored in canonical decimal form
DECIMAL_COLUMNS = frozenset({
    ATOMIC_MASS_COLUMN, ELECTRONEGATIVITY_COLUMN, IONIZATION_ENERGY_COLUMN, ELECTRON_AFFINITY_COLUMN,
    MELTING_POINT_COLUMN, BOILING_POINT_COLUMN, DENSITY_COLUMN,
})

_DECIMAL_DIGITS = "0123456789"


@dataclass
class Record:
    """
    One normalised row of the element document.

    Textual fields keep the cell text (numeric measurements in canonical decimal form) and default
    to the empty string; the table compiler turns them into typed values.
    """
    atomic_number: int = 0
    symbol: str = ""
    name: str = ""
    atomic_mass: str = ""
    cpk: str = ""
    electron_configuration: str = ""
    electronegativity: str = ""
    atomic_radius: str = ""
    ionization_energy: str = ""
    electron_affinity: str = ""
    oxidation_states: List[int] = field(default_factory=list)
    standard_state: str = ""
    melting_point: str = ""
    boiling_point: str = ""
    density: str = ""
    group_block: str = ""
    year_discovered: str = ""


# --- Public API ---
def normalize_document(document: Any) -> List[Record]:
    """
    Normalise every row of a column-oriented element document.
    Args:
        document: Mapping of the form
            {"Table": {"Columns": {"Column": [...]}, "Row": [{"Cell": [...]}, ...]}}
    Returns:
        One Record per row, in document order.
    Raises:
        DocumentStructureError: If the document does not have the expected shape or an
            atomic number is not an integer.
    """
    columns = _extract_columns(document)
    rows = _extract_rows(document)
    logger.info("Normalising %d rows against %d columns", len(rows), len(columns))
    unknown = [col for col in columns if col not in COLUMN_FIELDS]
    if unknown:
        logger.debug("Ignoring unrecognised columns: %s", unknown)
    records = [normalize_row(columns, cells, row_number) for row_number, cells in enumerate(rows)]
    logger.info("Normalised %d records", len(records))
    return records


def normalize_row(columns: Sequence[str], cells: Sequence[str], row_number: int = 0) -> Record:
    """Build one Record by matching each cell to the column at the same position."""
    if len(cells) > len(columns):
        raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
            detail=f"row {row_number} has {len(cells)} cells but only {len(columns)} columns"))
    record = Record()
    for column, value in zip(columns, cells):
        if not value:
            continue
        field_name = COLUMN_FIELDS.get(column)
        if field_name is None:
            continue
        if column == ATOMIC_NUMBER_COLUMN:
            record.atomic_number = _parse_atomic_number(value)
        elif column == OXIDATION_STATES_COLUMN:
            record.oxidation_states = parse_oxidation_states(value)
        elif column in DECIMAL_COLUMNS:
            setattr(record, field_name, canonicalize_decimal(value))
        else:
            setattr(record, field_name, value)
    logger.debug("Row %d -> %s (%s), Z=%d", row_number, record.symbol, record.name, record.atomic_number)
    return record


def parse_oxidation_states(cell: str) -> List[int]:
    """
    Parse a comma-separated oxidation-state cell such as "+7, +5, +1, -1".

    A token takes its sign from a leading '+' or '-'; a token that starts with a digit is an
    unsigned magnitude. Tokens starting with anything else are skipped, the rest of the cell is
    still parsed. Digits are read up to the first non-digit character.
    """
    states = []
    for token in cell.split(','):
        token = token.strip()
        if not token:
            continue
        lead = token[0]
        if lead == '-':
            sign, start = -1, 1
        elif lead == '+':
            sign, start = 1, 1
        elif lead in _DECIMAL_DIGITS:
            sign, start = 1, 0
        else:
            logger.debug("Skipping oxidation-state token '%s' in '%s'", token, cell)
            continue
        end = start
        while end < len(token) and token[end] in _DECIMAL_DIGITS:
            end += 1
        magnitude = int(token[start:end]) if end > start else 0
        states.append(sign * magnitude)
    return states


# --- Structure Validation ---
def _extract_columns(document: Any) -> List[str]:
    table = _extract_table(document)
    columns = table.get(COLUMNS_KEY)
    if not isinstance(columns, dict) or not isinstance(columns.get(COLUMN_KEY), list):
        raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
            detail=f"'{TABLE_KEY}.{COLUMNS_KEY}.{COLUMN_KEY}' must be a list of column names"))
    column_names = columns[COLUMN_KEY]
    for col in column_names:
        if not isinstance(col, str):
            raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
                detail=f"column name {col!r} is not a string"))
    return column_names


def _extract_rows(document: Any) -> List[List[str]]:
    table = _extract_table(document)
    rows = table.get(ROW_KEY)
    if not isinstance(rows, list):
        raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
            detail=f"'{TABLE_KEY}.{ROW_KEY}' must be a list of rows"))
    cell_lists = []
    for row_number, row in enumerate(rows):
        if not isinstance(row, dict) or not isinstance(row.get(CELL_KEY), list):
            raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
                detail=f"row {row_number} must be an object with a '{CELL_KEY}' list"))
        cells = row[CELL_KEY]
        for cell in cells:
            if not isinstance(cell, str):
                raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
                    detail=f"row {row_number} has a non-string cell {cell!r}"))
        cell_lists.append(cells)
    return cell_lists


def _extract_table(document: Any) -> Dict[str, Any]:
    if not isinstance(document, dict):
        raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
            detail="document root must be an object"))
    table = document.get(TABLE_KEY)
    if not isinstance(table, dict):
        raise DocumentStructureError(ErrorMessages.CORRUPTED_DOCUMENT.format(
            detail=f"missing '{TABLE_KEY}' object"))
    return table


def _parse_atomic_number(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise DocumentStructureError(ErrorMessages.INVALID_ATOMIC_NUMBER.format(value=value)) from e
