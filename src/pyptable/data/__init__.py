"""
Element dataset and constants.

This package provides the bundled PubChem periodic-table document and the
constants that describe the shape of the compiled lookup tables.
"""

from .constants.processing_constants import ElementConstants, ErrorMessages, FileConstants
from .elements import DATA_DIR, DEFAULT_DATASET_PATH

__all__ = [
    "ElementConstants",
    "ErrorMessages",
    "FileConstants",
    "DATA_DIR",
    "DEFAULT_DATASET_PATH"
]
