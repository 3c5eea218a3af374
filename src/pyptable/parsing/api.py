import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, List, Optional, Union

from pyptable.core.typedefs import CompiledTables
from pyptable.data.elements import DEFAULT_DATASET_PATH
from pyptable.parsing.config.column_keys import COLUMN_FIELDS
from pyptable.parsing.config.document_parser import load_document
from pyptable.parsing.processors.record_normalizer import normalize_document
from pyptable.parsing.processors.table_compiler import compile_records

logger = logging.getLogger(__name__)


def compile_document(document: Any, source: str = "<memory>") -> CompiledTables:
    """
    Compile an already-loaded element document.
    Args:
        document: Column-oriented mapping ({"Table": {"Columns": ..., "Row": ...}})
        source: Label stored on the result to identify where the data came from
    Returns:
        The compiled, immutable lookup tables
    Raises:
        DataCompilationError: Any structural or data error; no partial tables are returned
    """
    records = normalize_document(document)
    return compile_records(records, source=source)


def compile_tables(document_path: Optional[Union[str, Path]] = None) -> CompiledTables:
    """
    Load an element document from disk and compile it into lookup tables.

    This is the main entry point of the data compiler. With no path the bundled
    PubChem dataset is used.
    Args:
        document_path: Path to a .json, .yaml/.yml or .csv element document
    Returns:
        The compiled, immutable lookup tables
    Examples:
        # Compile the bundled dataset
        tables = compile_tables()

        # Compile a local export of the same table
        tables = compile_tables('PubChemElements_all.csv')
    """
    path = Path(document_path) if document_path is not None else DEFAULT_DATASET_PATH
    logger.info("Compiling element tables from: %s", path)
    try:
        tables = compile_document(load_document(path), source=str(path))
        logger.info("Successfully compiled %d elements from %s", len(tables), path)
        return tables
    except Exception as e:
        logger.error("Failed to compile element tables from %s: %s", path, e, exc_info=True)
        raise


@lru_cache(maxsize=1)
def get_tables() -> CompiledTables:
    """Tables compiled from the bundled dataset, compiled on first use and shared afterwards."""
    return compile_tables()


def get_supported_columns() -> List[str]:
    """
    Returns the column names the record normaliser recognises.
    Returns:
        List of column names; any other column in a document is ignored.
    """
    return list(COLUMN_FIELDS)


def validate_document(document_path: Union[str, Path]) -> bool:
    """
    Validate an element document by compiling it and discarding the result.
    Args:
        document_path: Path to the element document to validate
    Returns:
        True if the document compiles
    Raises:
        FileNotFoundError: If the file doesn't exist
        DataCompilationError: If the document content is invalid
        ValueError: If the file cannot be parsed
    """
    logger.info("Validating element document: %s", document_path)
    compile_tables(document_path)
    logger.info("Validation successful for: %s", document_path)
    return True
