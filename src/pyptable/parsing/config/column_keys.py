"""Constants used for reading the column-oriented element document."""

# Document structure keys
TABLE_KEY = "Table"
COLUMNS_KEY = "Columns"
COLUMN_KEY = "Column"
ROW_KEY = "Row"
CELL_KEY = "Cell"

# Identity columns
ATOMIC_NUMBER_COLUMN = "AtomicNumber"
SYMBOL_COLUMN = "Symbol"
NAME_COLUMN = "Name"

# Measurement columns
ATOMIC_MASS_COLUMN = "AtomicMass"
ELECTRONEGATIVITY_COLUMN = "Electronegativity"
ATOMIC_RADIUS_COLUMN = "AtomicRadius"
IONIZATION_ENERGY_COLUMN = "IonizationEnergy"
ELECTRON_AFFINITY_COLUMN = "ElectronAffinity"
MELTING_POINT_COLUMN = "MeltingPoint"
BOILING_POINT_COLUMN = "BoilingPoint"
DENSITY_COLUMN = "Density"

# Descriptive columns
CPK_HEX_COLOR_COLUMN = "CPKHexColor"
ELECTRON_CONFIGURATION_COLUMN = "ElectronConfiguration"
OXIDATION_STATES_COLUMN = "OxidationStates"
STANDARD_STATE_COLUMN = "StandardState"
GROUP_BLOCK_COLUMN = "GroupBlock"
YEAR_DISCOVERED_COLUMN = "YearDiscovered"

# Recognised column name -> Record field name
COLUMN_FIELDS = {
    ATOMIC_NUMBER_COLUMN: "atomic_number",
    SYMBOL_COLUMN: "symbol",
    NAME_COLUMN: "name",
    ATOMIC_MASS_COLUMN: "atomic_mass",
    CPK_HEX_COLOR_COLUMN: "cpk",
    ELECTRON_CONFIGURATION_COLUMN: "electron_configuration",
    ELECTRONEGATIVITY_COLUMN: "electronegativity",
    ATOMIC_RADIUS_COLUMN: "atomic_radius",
    IONIZATION_ENERGY_COLUMN: "ionization_energy",
    ELECTRON_AFFINITY_COLUMN: "electron_affinity",
    OXIDATION_STATES_COLUMN: "oxidation_states",
    STANDARD_STATE_COLUMN: "standard_state",
    MELTING_POINT_COLUMN: "melting_point",
    BOILING_POINT_COLUMN: "boiling_point",
    DENSITY_COLUMN: "density",
    GROUP_BLOCK_COLUMN: "group_block",
    YEAR_DISCOVERED_COLUMN: "year_discovered",
}

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
