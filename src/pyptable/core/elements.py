import logging
import operator
from typing import Optional, Tuple

from pyptable.core.exceptions import InvalidElementError
from pyptable.core.typedefs import CompiledTables, ElectronicConfiguration, GroupBlock, IndexTable, StateOfMatter
from pyptable.data.constants import ElementConstants

logger = logging.getLogger(__name__)


def _tables() -> CompiledTables:
    from pyptable.parsing.api import get_tables
    return get_tables()


def binary_search(table: IndexTable, key: str) -> Optional[int]:
    """
    Exact-match binary search over a (key, id) table sorted ascending by unique keys.
    Returns:
        The paired element id, or None when the key is absent.
    """
    low, high = 0, len(table) - 1
    while low <= high:
        mid = low + (high - low) // 2
        mid_key, element_id = table[mid]
        if mid_key == key:
            return element_id
        if mid_key < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


class Element(int):
    """
    A chemical element, identified by its id (atomic number - 1) in [0, 117].

    ``Element(id)`` rejects ids outside the range, so every instance indexes the compiled
    tables directly. The ``from_*`` constructors return None instead of raising when there is
    no match. Properties read the tables compiled from the bundled dataset.
    """
    __slots__ = ()

    def __new__(cls, element_id: int) -> "Element":
        value = operator.index(element_id)
        if not 0 <= value < ElementConstants.ELEMENT_COUNT:
            raise InvalidElementError(value)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Element({self.symbol})"

    def __str__(self) -> str:
        return self.name

    # --- Constructors ---
    @classmethod
    def from_id(cls, element_id: int) -> Optional["Element"]:
        """The id is the atomic number starting at zero."""
        if not 0 <= element_id < ElementConstants.ELEMENT_COUNT:
            return None
        return cls(element_id)

    @classmethod
    def from_atomic_number(cls, z: int) -> Optional["Element"]:
        if z < ElementConstants.MIN_ATOMIC_NUMBER or z > ElementConstants.MAX_ATOMIC_NUMBER:
            return None
        return cls(z - 1)

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["Element"]:
        """Case-sensitive: 'Cl' matches, 'cl' and 'CL' do not."""
        element_id = binary_search(_tables().symbol_index, symbol)
        if element_id is None:
            logger.debug("No element with symbol %r", symbol)
            return None
        return cls(element_id)

    @classmethod
    def from_name(cls, name: str) -> Optional["Element"]:
        """Name must be lowercase; use from_name_case_insensitive for any casing."""
        element_id = binary_search(_tables().name_index, name)
        if element_id is None:
            logger.debug("No element named %r", name)
            return None
        return cls(element_id)

    @classmethod
    def from_name_case_insensitive(cls, name: str) -> Optional["Element"]:
        return cls.from_name(name.lower())

    # --- Identity ---
    @property
    def id(self) -> int:
        return int(self)

    @property
    def atomic_number(self) -> int:
        return int(self) + 1

    @property
    def symbol(self) -> str:
        return _tables().symbols[self]

    @property
    def name(self) -> str:
        return _tables().names[self]

    # --- Measurements ---
    @property
    def atomic_mass(self) -> float:
        return float(_tables().atomic_masses[self])

    @property
    def electronegativity(self) -> float:
        return float(_tables().electronegativities[self])

    @property
    def atomic_radius(self) -> int:
        return int(_tables().atomic_radii[self])

    @property
    def ionization_energy(self) -> float:
        return float(_tables().ionization_energies[self])

    @property
    def electron_affinity(self) -> float:
        return float(_tables().electron_affinities[self])

    @property
    def melting_point(self) -> float:
        return float(_tables().melting_points[self])

    @property
    def boiling_point(self) -> float:
        return float(_tables().boiling_points[self])

    @property
    def density(self) -> float:
        return float(_tables().densities[self])

    @property
    def year_discovered(self) -> int:
        """Discovery year, 0 for elements known since antiquity or without a recorded year."""
        return int(_tables().years_discovered[self])

    # --- Descriptive fields ---
    @property
    def cpk(self) -> Tuple[int, int, int]:
        red, green, blue = _tables().cpk_colors[self].tolist()
        return red, green, blue

    @property
    def electron_configuration_str(self) -> str:
        return _tables().electron_configuration_strings[self]

    @property
    def electronic_configuration(self) -> ElectronicConfiguration:
        return _tables().electronic_configurations[self]

    @property
    def oxidation_states(self) -> Tuple[int, ...]:
        tables = _tables()
        offset, count = tables.oxidation_state_runs[self].tolist()
        return tuple(tables.oxidation_state_data[offset:offset + count].tolist())

    @property
    def standard_state(self) -> StateOfMatter:
        return _tables().standard_states[self]

    @property
    def group_block(self) -> GroupBlock:
        return _tables().group_blocks[self]
