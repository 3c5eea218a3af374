"""
Parsing and compilation modules for pyptable.

This package loads element documents, normalises their rows into records,
resolves electron configurations and compiles the immutable lookup tables.
"""

from .api import compile_document, compile_tables, get_tables, get_supported_columns, validate_document
from .config.document_parser import load_document
from .processors.record_normalizer import Record, normalize_document
from .processors.table_compiler import compile_records

__all__ = [
    'compile_document',
    'compile_tables',
    'get_tables',
    'get_supported_columns',
    'validate_document',
    'load_document',
    'Record',
    'normalize_document',
    'compile_records'
]
