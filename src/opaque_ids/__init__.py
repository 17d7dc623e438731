"""Short, reversible, blocklist-aware IDs for non-negative integers."""
from __future__ import annotations

from .blocklist import default_blocklist
from .codec import IdCodec
from .domain.models import CodecOptions, EncodeResult
from .utils.constants import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH, MAX_NUMBER
from .utils.errors import (
    ConfigFileNotFound,
    ConfigurationError,
    InvalidAlphabetError,
    InvalidConfigurationError,
    InvalidMinLengthError,
    NumberOutOfRangeError,
    OpaqueIdError,
    RegenerationExhaustedError,
    SchemaValidationError,
)

__all__ = [
    "IdCodec",
    "CodecOptions",
    "EncodeResult",
    "default_blocklist",
    "DEFAULT_ALPHABET",
    "DEFAULT_MIN_LENGTH",
    "MAX_NUMBER",
    "OpaqueIdError",
    "ConfigurationError",
    "InvalidAlphabetError",
    "InvalidMinLengthError",
    "InvalidConfigurationError",
    "ConfigFileNotFound",
    "SchemaValidationError",
    "NumberOutOfRangeError",
    "RegenerationExhaustedError",
]
