"""Shared pytest fixtures for pyptable tests."""
import copy
import pytest

from pyptable.data.elements import DEFAULT_DATASET_PATH
from pyptable.parsing.api import get_tables
from pyptable.parsing.config.column_keys import TABLE_KEY, COLUMNS_KEY, COLUMN_KEY, ROW_KEY, CELL_KEY
from pyptable.parsing.config.document_parser import load_document

# Chlorine row with unsigned oxidation-state tokens mixed with a signed one
CHLORINE_CELLS = [
    "17", "Cl", "Chlorine", "35.45", "1FF01F", "[Ne] 3s2 3p5", "3.16", "175", "12.968", "3.617",
    "-1, 1, 3, 5, 7", "Gas", "171.65", "239.11", "0.003214", "Halogen", "1774"
]


@pytest.fixture(scope="session")
def dataset_path():
    """Path to the bundled PubChem dataset."""
    return DEFAULT_DATASET_PATH


@pytest.fixture(scope="session")
def bundled_document(dataset_path):
    """The bundled dataset as loaded from disk (shared, do not mutate)."""
    return load_document(dataset_path)


@pytest.fixture
def raw_document(bundled_document):
    """A private copy of the bundled document that a test may modify."""
    return copy.deepcopy(bundled_document)


@pytest.fixture
def columns(bundled_document):
    """Column names of the bundled dataset."""
    return list(bundled_document[TABLE_KEY][COLUMNS_KEY][COLUMN_KEY])


@pytest.fixture(scope="session")
def tables():
    """Tables compiled from the bundled dataset."""
    return get_tables()


@pytest.fixture
def replace_row():
    """Replace the row of one atomic number in a document with new cells."""
    def _replace(document, atomic_number, cells):
        rows = document[TABLE_KEY][ROW_KEY]
        for row in rows:
            if row[CELL_KEY][0] == str(atomic_number):
                row[CELL_KEY] = list(cells)
                return document
        raise KeyError(f"No row with atomic number {atomic_number}")
    return _replace


@pytest.fixture
def set_cell(columns):
    """Overwrite a single cell, addressed by atomic number and column name."""
    def _set(document, atomic_number, column, value):
        position = columns.index(column)
        for row in document[TABLE_KEY][ROW_KEY]:
            if row[CELL_KEY][0] == str(atomic_number):
                row[CELL_KEY][position] = value
                return document
        raise KeyError(f"No row with atomic number {atomic_number}")
    return _set


@pytest.fixture
def write_csv(tmp_path, columns):
    """Write a document's rows to a CSV file with a header row and return the path."""
    def _write(document, name="elements.csv"):
        path = tmp_path / name
        lines = [",".join(columns)]
        for row in document[TABLE_KEY][ROW_KEY]:
            lines.append(",".join('"' + cell.replace('"', '""') + '"' for cell in row[CELL_KEY]))
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def chlorine_cells():
    """Chlorine row mixing unsigned and signed oxidation-state tokens."""
    return list(CHLORINE_CELLS)
