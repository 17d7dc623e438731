"""Exception hierarchy shared across the codec."""
from __future__ import annotations


class OpaqueIdError(Exception):
    """Base class for all codec related failures."""


class ConfigurationError(OpaqueIdError, ValueError):
    """Raised when a codec cannot be built from the supplied settings."""


class InvalidAlphabetError(ConfigurationError):
    pass


class InvalidMinLengthError(ConfigurationError):
    pass


class InvalidConfigurationError(ConfigurationError):
    pass


class ConfigFileNotFound(OpaqueIdError):
    pass


class SchemaValidationError(OpaqueIdError):
    pass


class NumberOutOfRangeError(OpaqueIdError, ValueError):
    pass


class RegenerationExhaustedError(OpaqueIdError, RuntimeError):
    """Every rotation of the alphabet produced a blocked ID."""
