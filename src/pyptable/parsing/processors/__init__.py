"""
Record processing modules for pyptable.

This package turns raw document rows into records, resolves shorthand
electron configurations and compiles records into lookup tables.
"""

from .record_normalizer import Record, normalize_document, normalize_row, parse_oxidation_states
from .configuration_resolver import parse_shorthand, resolve_configuration, resolve_all
from .table_compiler import (
    compile_records,
    build_index_table,
    build_oxidation_runs,
    map_standard_state,
    map_group_block
)

__all__ = [
    'Record',
    'normalize_document',
    'normalize_row',
    'parse_oxidation_states',
    'parse_shorthand',
    'resolve_configuration',
    'resolve_all',
    'compile_records',
    'build_index_table',
    'build_oxidation_runs',
    'map_standard_state',
    'map_group_block'
]
