"""Utility functions for parsing operations."""

from .utilities import (
    canonicalize_decimal,
    parse_float_field,
    parse_unsigned,
    parse_year,
    decode_cpk_color
)

__all__ = [
    "canonicalize_decimal",
    "parse_float_field",
    "parse_unsigned",
    "parse_year",
    "decode_cpk_color"
]
