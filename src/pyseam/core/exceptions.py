"""Custom exceptions for pyseam."""
import logging

logger = logging.getLogger(__name__)


class PySeamError(Exception):
    """Base exception for all pyseam errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("PySeamError raised: %s", message)


class ManifestError(PySeamError):
    """Exception raised when the job manifest cannot be read."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("ManifestError raised: %s", message)


class SettingsError(PySeamError):
    """Exception raised when a resolver settings file is invalid."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("SettingsError raised: %s", message)
