import logging
from pathlib import Path
from typing import Any, Dict, Union

import pandas as pd
from ruamel.yaml import YAML, constructor, scanner

from pyptable.data.constants import FileConstants
from pyptable.parsing.config.column_keys import TABLE_KEY, COLUMNS_KEY, COLUMN_KEY, ROW_KEY, CELL_KEY

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for loading raw element documents."""

    def __init__(self, document_path: Union[str, Path]) -> None:
        self.document_path = Path(document_path)
        self._check_file()
        self.document = self._load_document()
        logger.info("Successfully loaded element document from: %s", self.document_path)

    def _check_file(self) -> None:
        if not self.document_path.exists():
            logger.error("Element document not found: %s", self.document_path)
            raise FileNotFoundError(f"Element document not found: {self.document_path}")
        if not self.document_path.is_file():
            raise ValueError(f"Path is not a file: {self.document_path}")
        file_size_mb = self.document_path.stat().st_size / (1024 * 1024)
        if file_size_mb > FileConstants.MAX_FILE_SIZE_MB:
            raise ValueError(f"File size ({file_size_mb:.2f} MB) exceeds the maximum limit "
                             f"of {FileConstants.MAX_FILE_SIZE_MB} MB.")

    def _load_document(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_document method")


class YAMLFileParser(BaseFileParser):
    """Parser for JSON and YAML element documents (JSON is read as YAML 1.2)."""

    def _load_document(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading document: %s", self.document_path)
            with open(self.document_path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
                document = yaml.load(f)
            logger.debug("Document loaded successfully, found %d top-level keys",
                         len(document) if isinstance(document, dict) else 0)
            return document
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in document %s: %s", self.document_path, e)
            raise ValueError(f"Duplicate key in {self.document_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("Syntax error in document %s: %s", self.document_path, e)
            raise ValueError(f"Syntax error in {self.document_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing document %s: %s", self.document_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.document_path}: {str(e)}") from e


class CSVFileParser(BaseFileParser):
    """Parser for the CSV export of the element table (header row holds the column names)."""

    def _load_document(self) -> Dict[str, Any]:
        try:
            logger.debug("Loading CSV document: %s", self.document_path)
            df = pd.read_csv(
                self.document_path,
                dtype=str,
                keep_default_na=False,
                encoding=FileConstants.DEFAULT_ENCODING
            )
        except PermissionError as e:
            raise PermissionError(f"Permission denied reading file {self.document_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing CSV %s: %s", self.document_path, e, exc_info=True)
            raise ValueError(f"Error reading file {self.document_path}: {str(e)}") from e
        logger.debug("CSV document has %d rows and %d columns", len(df), len(df.columns))
        return {
            TABLE_KEY: {
                COLUMNS_KEY: {COLUMN_KEY: [str(col) for col in df.columns]},
                ROW_KEY: [{CELL_KEY: list(row)} for row in df.itertuples(index=False, name=None)],
            }
        }


def load_document(document_path: Union[str, Path]) -> Dict[str, Any]:
    """Load a raw element document, choosing the parser from the file extension."""
    document_path = Path(document_path)
    file_extension = document_path.suffix.lower()
    if file_extension not in FileConstants.SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: '{file_extension}'. "
                         f"Supported types are: {FileConstants.SUPPORTED_EXTENSIONS}")
    if file_extension == '.csv':
        return CSVFileParser(document_path).document
    return YAMLFileParser(document_path).document
