"""Validation utilities for pyptable."""

from .errors import DocumentStructureError, UnknownCategoryError, ElectronConfigurationError, TableInvariantError
from .table_validator import is_strictly_ascending, validate_index_table, validate_oxidation_runs, validate_tables

__all__ = [
    "DocumentStructureError",
    "UnknownCategoryError",
    "ElectronConfigurationError",
    "TableInvariantError",
    "is_strictly_ascending",
    "validate_index_table",
    "validate_oxidation_runs",
    "validate_tables"
]
