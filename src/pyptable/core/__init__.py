"""
Core data structures and element lookups.

This module contains the element identifier type, the compiled table container,
the closed enumerations and the exception base class used throughout pyptable.
"""

from .elements import Element, binary_search
from .periodic_table import PeriodicTableIterator, periodic_table
from .typedefs import CompiledTables, ElectronicConfiguration, GroupBlock, StateOfMatter
from .exceptions import DataCompilationError, InvalidElementError

__all__ = [
    "Element",
    "binary_search",
    "PeriodicTableIterator",
    "periodic_table",
    "CompiledTables",
    "ElectronicConfiguration",
    "GroupBlock",
    "StateOfMatter",
    "DataCompilationError",
    "InvalidElementError"
]
