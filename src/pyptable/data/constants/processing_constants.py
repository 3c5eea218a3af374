from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ElementConstants:
    """Constants describing the shape of the compiled element tables."""
    # Element set
    ELEMENT_COUNT: Final[int] = 118
    MIN_ATOMIC_NUMBER: Final[int] = 1
    MAX_ATOMIC_NUMBER: Final[int] = 118
    # Subshell slot counts (s: shells 1-7, p: 2-7, d: 3-6, f: 4-5)
    S_SLOTS: Final[int] = 7
    P_SLOTS: Final[int] = 6
    D_SLOTS: Final[int] = 4
    F_SLOTS: Final[int] = 2
    # Lowest shell allowed for each subshell
    S_MIN_SHELL: Final[int] = 1
    P_MIN_SHELL: Final[int] = 2
    D_MIN_SHELL: Final[int] = 3
    F_MIN_SHELL: Final[int] = 4
    MAX_OCCUPANCY: Final[int] = 14
    # Discovery year literal meaning "no specific year"
    ANCIENT_YEAR: Final[str] = "Ancient"
    UNKNOWN_YEAR: Final[int] = 0
    # Colour channel count (red, green, blue)
    COLOR_CHANNELS: Final[int] = 3
    # Storage limits of the compiled arrays (uint16 radius/year/runs, int8 oxidation states)
    MAX_UNSIGNED_FIELD: Final[int] = 65535
    MIN_OXIDATION_STATE: Final[int] = -128
    MAX_OXIDATION_STATE: Final[int] = 127


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    CORRUPTED_DOCUMENT: Final[str] = "Corrupted element document: {detail}"
    INVALID_ATOMIC_NUMBER: Final[str] = "Atomic number must be an integer, got '{value}'"
    INVALID_NUMERIC_FIELD: Final[str] = "Field '{field}' of element {atomic_number} is not numeric: '{value}'"
    UNKNOWN_STATE: Final[str] = "Unknown state: {value}"
    UNKNOWN_GROUP_BLOCK: Final[str] = "Unknown group block: {value}"
    SHELL_OUT_OF_RANGE: Final[str] = ("Shell {shell} is out of range for subshell '{subshell}' "
                                      "in configuration of '{symbol}': '{text}'")
    UNKNOWN_REFERENCE: Final[str] = "Configuration of '{symbol}' references unknown element '[{reference}]'"
    MALFORMED_TOKEN: Final[str] = "Malformed configuration token '{token}' for '{symbol}': '{text}'"
    VALUE_OUT_OF_RANGE: Final[str] = ("Field '{field}' of element {atomic_number} is out of range "
                                      "[{minimum}, {maximum}]: {value}")


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.json', '.yaml', '.yml', '.csv')
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    DEFAULT_DATASET: Final[str] = 'PubChemElements_all.json'
    MAX_FILE_SIZE_MB: Final[int] = 10
