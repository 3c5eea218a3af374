from pyptable.core.exceptions import DataCompilationError


class DocumentStructureError(DataCompilationError):
    """Exception for raw documents that do not have the expected table shape."""
    pass


class UnknownCategoryError(DataCompilationError):
    """Exception for standard-state or group-block strings outside the closed enumeration."""

    def __init__(self, category: str, value: str, message: str):
        self.category = category
        self.value = value
        super().__init__(message)


class ElectronConfigurationError(DataCompilationError):
    """Exception for electron-configuration shorthand that cannot be resolved."""

    def __init__(self, symbol: str, text: str, message: str):
        self.symbol = symbol
        self.text = text
        super().__init__(message)


class TableInvariantError(DataCompilationError):
    """Exception for compiled tables that break an ordering or coverage invariant."""
    pass
