"""Custom exceptions for pyptable core functionality."""
import logging

logger = logging.getLogger(__name__)


class DataCompilationError(Exception):
    """Base exception for all errors that abort a table compilation."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("DataCompilationError raised: %s", message)


class InvalidElementError(ValueError):
    """Exception raised when an element identifier is outside [0, 117]."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Element id must be in [0, 117], got {value!r}")
