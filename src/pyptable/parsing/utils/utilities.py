import logging
from typing import Tuple

from pyptable.data.constants import ElementConstants, ErrorMessages
from pyptable.parsing.validation.errors import DocumentStructureError

logger = logging.getLogger(__name__)

_HEX_DIGITS = "0123456789abcdef"


# --- Numeric Fields ---
def canonicalize_decimal(text: str) -> str:
    """
    Canonical decimal form of a numeric cell: a decimal point is appended when missing so
    integer-valued and fractional measurements both read as floating point ("20" -> "20.").
    Exponent notation ("6e-5") is already floating point and is left alone. Empty text stays
    empty and compiles to zero.
    """
    text = text.strip()
    if text and not any(c in text for c in ".eE"):
        return text + '.'
    return text


def parse_float_field(text: str, field_name: str = "value", atomic_number: int = 0) -> float:
    """Convert a numeric cell to float; empty cells compile to 0.0."""
    canonical = canonicalize_decimal(text)
    if not canonical:
        return 0.0
    try:
        return float(canonical)
    except ValueError as e:
        raise DocumentStructureError(ErrorMessages.INVALID_NUMERIC_FIELD.format(
            field=field_name, atomic_number=atomic_number, value=text)) from e


def parse_unsigned(text: str, field_name: str = "value", atomic_number: int = 0) -> int:
    """Convert an integer cell (atomic radius, year) to a non-negative int; empty cells compile to 0."""
    text = text.strip()
    if not text:
        return 0
    if not (text.isascii() and text.isdigit()):
        raise DocumentStructureError(
            f"Field '{field_name}' of element {atomic_number} is not an unsigned integer: '{text}'")
    value = int(text)
    if value > ElementConstants.MAX_UNSIGNED_FIELD:
        raise DocumentStructureError(ErrorMessages.VALUE_OUT_OF_RANGE.format(
            field=field_name, atomic_number=atomic_number, minimum=0,
            maximum=ElementConstants.MAX_UNSIGNED_FIELD, value=value))
    return value


def parse_year(text: str, atomic_number: int = 0) -> int:
    """Discovery year; an empty cell or the literal 'Ancient' compiles to 0."""
    text = text.strip()
    if not text or text == ElementConstants.ANCIENT_YEAR:
        return ElementConstants.UNKNOWN_YEAR
    return parse_unsigned(text, "YearDiscovered", atomic_number)


# --- CPK Colour ---
def _hex_digit(char: str, text: str) -> int:
    value = _HEX_DIGITS.find(char.lower())
    if value < 0:
        raise DocumentStructureError(f"Invalid hex digit '{char}' in CPK colour '{text}'")
    return value


def parse_hex_pair(text: str, offset: int) -> int:
    """Two hex digits starting at offset, combined as high * 16 + low."""
    return _hex_digit(text[offset], text) * 16 + _hex_digit(text[offset + 1], text)


def decode_cpk_color(text: str) -> Tuple[int, int, int]:
    """
    Decode a CPK hex string ("1FF01F") into an (r, g, b) triplet.

    Missing or too-short strings give black; a string with only red and green gives a zero blue
    channel. This is a best-effort decode, not validated against a palette.
    """
    text = text.strip().lstrip('#')
    if len(text) < 4:
        if text:
            logger.warning("CPK colour '%s' is too short, using black", text)
        return 0, 0, 0
    red = parse_hex_pair(text, 0)
    green = parse_hex_pair(text, 2)
    blue = parse_hex_pair(text, 4) if len(text) >= 6 else 0
    return red, green, blue
