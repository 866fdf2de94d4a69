"""Reusable type definitions for the multisig HMAC scheme."""

from .base import StrictBaseModel
from .byte_arrays import coerce_to_bytes
from .exceptions import (
    BitfieldError,
    ByteLengthError,
    CancellationError,
    EmptyCombinationError,
    KeysetTooSmallError,
    MultisigHmacError,
    MultisigHmacUsageError,
    SignerIndexError,
    ThresholdError,
    UnknownSuiteError,
)
from .uint import Uint32

__all__ = [
    # Core types
    "Uint32",
    "StrictBaseModel",
    "coerce_to_bytes",
    # Exceptions
    "MultisigHmacError",
    "MultisigHmacUsageError",
    "UnknownSuiteError",
    "SignerIndexError",
    "ByteLengthError",
    "ThresholdError",
    "BitfieldError",
    "KeysetTooSmallError",
    "EmptyCombinationError",
    "CancellationError",
]
