"""Threshold HMAC multisignatures: M-of-N partial tags XORed into one signature."""

from .scheme import (
    DEFAULT_SCHEME,
    SHA256_SCHEME,
    SHA384_SCHEME,
    SHA512_256_SCHEME,
    SHA512_SCHEME,
    CombinedSignature,
    HashSuite,
    Key,
    MasterSeed,
    MultisigHmacScheme,
    PartialSignature,
    get_scheme,
    get_suite,
)
from .types import MultisigHmacError, MultisigHmacUsageError

__all__ = [
    "MultisigHmacScheme",
    "HashSuite",
    "Key",
    "MasterSeed",
    "PartialSignature",
    "CombinedSignature",
    "SHA256_SCHEME",
    "SHA384_SCHEME",
    "SHA512_SCHEME",
    "SHA512_256_SCHEME",
    "DEFAULT_SCHEME",
    "get_scheme",
    "get_suite",
    "MultisigHmacError",
    "MultisigHmacUsageError",
]
