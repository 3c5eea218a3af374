"""
pyptable - Compiled periodic-table data with fast element lookups.

This library compiles the PubChem periodic-table dataset into immutable,
id-indexed tables and exposes a small lookup facade on top of them.

Key Features:
- Element lookup by id, atomic number, symbol and name
- Electron configurations expanded from noble-gas shorthand
- Oxidation states, CPK colours and physical measurements per element
- Double-ended iteration over the whole table
- Compilation of JSON, YAML or CSV exports of the dataset

Main Components:
- Core: Element identifier, compiled table container and enumerations
- Parsing: Document loading, record normalisation and table compilation
- Data: Bundled dataset and processing constants
"""

try:
    from ._version import version as __version__
except ImportError:
    from importlib.metadata import PackageNotFoundError, version
    try:
        __version__ = version("pyptable")
    except PackageNotFoundError:
        __version__ = "0.1.0+unknown"  # Fallback version

# Core lookups
from .core.elements import Element, binary_search
from .core.periodic_table import PeriodicTableIterator, periodic_table
from .core.typedefs import CompiledTables, ElectronicConfiguration, GroupBlock, StateOfMatter

# Main API functions
from .parsing.api import (
    compile_document,
    compile_tables,
    get_tables,
    get_supported_columns,
    validate_document
)

# Errors
from .core.exceptions import DataCompilationError, InvalidElementError
from .parsing.validation.errors import (
    DocumentStructureError,
    UnknownCategoryError,
    ElectronConfigurationError,
    TableInvariantError
)

__all__ = [
    # Version
    '__version__',

    # Core
    'Element',
    'binary_search',
    'PeriodicTableIterator',
    'periodic_table',
    'CompiledTables',
    'ElectronicConfiguration',
    'GroupBlock',
    'StateOfMatter',

    # Main API
    'compile_document',
    'compile_tables',
    'get_tables',
    'get_supported_columns',
    'validate_document',

    # Errors
    'DataCompilationError',
    'InvalidElementError',
    'DocumentStructureError',
    'UnknownCategoryError',
    'ElectronConfigurationError',
    'TableInvariantError'
]

# Package metadata
__author__ = "pyptable developers"
__description__ = "Compiled periodic-table data with fast element lookups"
