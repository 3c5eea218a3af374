"""Processing and table-shape constants for PyPTable."""

from .processing_constants import ElementConstants, ErrorMessages, FileConstants

__all__ = [
    "ElementConstants",
    "ErrorMessages",
    "FileConstants"
]
