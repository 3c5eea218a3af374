"""Document loading and column key definitions."""

from .document_parser import BaseFileParser, YAMLFileParser, CSVFileParser, load_document
from . import column_keys as _ck

# Re-export everything defined in column_keys.__all__
globals().update({k: getattr(_ck, k) for k in _ck.__all__})

__all__ = [
    "BaseFileParser",
    "YAMLFileParser",
    "CSVFileParser",
    "load_document",
    *_ck.__all__,
]
