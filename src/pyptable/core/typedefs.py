"""
typedefs.py

This module defines the closed enumerations and immutable containers shared by the data compiler
and the lookup facade.

Classes:
    StateOfMatter: Physical phase of an element under standard conditions.
    GroupBlock: Coarse chemical classification of an element (ten fixed categories).
    ElectronicConfiguration: Resolved per-subshell electron occupancy, one slot per valid shell.
    CompiledTables: The complete set of per-element arrays and sorted index tables produced by one
                    compilation pass.

Type Aliases:
    IndexTable: A tuple of (key, element id) pairs sorted ascending by key.
    OxidationRun: An (offset, count) pair pointing into the flat oxidation-state array.
"""

from dataclasses import dataclass
from enum import auto, Enum
from typing import Dict, Tuple

import numpy as np

from pyptable.data.constants import ElementConstants


class StateOfMatter(Enum):
    SOLID = auto()
    LIQUID = auto()
    GAS = auto()


class GroupBlock(Enum):
    ALKALI_METAL = auto()
    ALKALINE_EARTH_METAL = auto()
    LANTHANIDE = auto()
    ACTINIDE = auto()
    TRANSITION_METAL = auto()
    POST_TRANSITION_METAL = auto()
    METALLOID = auto()
    NON_METAL = auto()
    HALOGEN = auto()
    NOBLE_GAS = auto()


# Type aliases for the index and run structures
IndexTable = Tuple[Tuple[str, int], ...]
OxidationRun = Tuple[int, int]

# Subshell letter -> (lowest shell, slot count)
SUBSHELL_LAYOUT: Dict[str, Tuple[int, int]] = {
    's': (ElementConstants.S_MIN_SHELL, ElementConstants.S_SLOTS),
    'p': (ElementConstants.P_MIN_SHELL, ElementConstants.P_SLOTS),
    'd': (ElementConstants.D_MIN_SHELL, ElementConstants.D_SLOTS),
    'f': (ElementConstants.F_MIN_SHELL, ElementConstants.F_SLOTS),
}


@dataclass(frozen=True)
class ElectronicConfiguration:
    """
    Electron occupancy of every subshell, indexed by shell number offset from the subshell's
    lowest allowed shell.

    Attributes:
        s (Tuple[int, ...]): Occupancy of 1s..7s (7 slots).
        p (Tuple[int, ...]): Occupancy of 2p..7p (6 slots).
        d (Tuple[int, ...]): Occupancy of 3d..6d (4 slots).
        f (Tuple[int, ...]): Occupancy of 4f..5f (2 slots).
    """
    s: Tuple[int, ...] = (0,) * ElementConstants.S_SLOTS
    p: Tuple[int, ...] = (0,) * ElementConstants.P_SLOTS
    d: Tuple[int, ...] = (0,) * ElementConstants.D_SLOTS
    f: Tuple[int, ...] = (0,) * ElementConstants.F_SLOTS

    def __post_init__(self):
        for subshell, (_, slots) in SUBSHELL_LAYOUT.items():
            values = getattr(self, subshell)
            if len(values) != slots:
                raise ValueError(f"Subshell '{subshell}' needs {slots} slots, got {len(values)}")
            if any(v < 0 for v in values):
                raise ValueError(f"Negative occupancy in subshell '{subshell}': {values}")

    @classmethod
    def empty(cls) -> "ElectronicConfiguration":
        return cls()

    def occupancy(self, shell: int, subshell: str) -> int:
        """Electrons in one subshell, e.g. ``occupancy(3, 'p')`` for 3p. Unknown slots read as 0."""
        min_shell, slots = SUBSHELL_LAYOUT[subshell]
        index = shell - min_shell
        if 0 <= index < slots:
            return getattr(self, subshell)[index]
        return 0

    def total_electrons(self) -> int:
        return sum(self.s) + sum(self.p) + sum(self.d) + sum(self.f)


@dataclass(frozen=True, eq=False)
class CompiledTables:
    """
    Immutable lookup tables for all 118 elements, indexed by element id (atomic number - 1).

    The numpy arrays are flagged read-only when the tables are built; the tuples are immutable by
    construction. ``symbol_index`` and ``name_index`` are strictly ascending by key, which the
    lookup facade relies on for binary search.
    """
    symbols: Tuple[str, ...]
    names: Tuple[str, ...]
    symbol_index: IndexTable
    name_index: IndexTable
    atomic_masses: np.ndarray
    cpk_colors: np.ndarray
    electron_configuration_strings: Tuple[str, ...]
    electronic_configurations: Tuple[ElectronicConfiguration, ...]
    electronegativities: np.ndarray
    atomic_radii: np.ndarray
    ionization_energies: np.ndarray
    electron_affinities: np.ndarray
    oxidation_state_data: np.ndarray
    oxidation_state_runs: np.ndarray
    standard_states: Tuple[StateOfMatter, ...]
    melting_points: np.ndarray
    boiling_points: np.ndarray
    densities: np.ndarray
    group_blocks: Tuple[GroupBlock, ...]
    years_discovered: np.ndarray
    source: str = ""

    def __len__(self) -> int:
        return len(self.symbols)
