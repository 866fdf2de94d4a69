"""
This package provides the threshold HMAC multisignature scheme.

N parties each hold an HMAC key; any M of them produce partial tags that XOR
into one fixed-size signature, which a verifier holding the keyset (or the
master seed it was derived from) checks against a threshold.

It exposes the core data structures and the main interface.
"""

from .containers import CombinedSignature, Key, MasterSeed, PartialSignature
from .interface import (
    DEFAULT_SCHEME,
    SCHEMES,
    SHA256_SCHEME,
    SHA384_SCHEME,
    SHA512_256_SCHEME,
    SHA512_SCHEME,
    MultisigHmacScheme,
    get_scheme,
)
from .suites import (
    SHA256_SUITE,
    SHA384_SUITE,
    SHA512_256_SUITE,
    SHA512_SUITE,
    SUITES,
    HashSuite,
    get_suite,
)

__all__ = [
    "MultisigHmacScheme",
    "HashSuite",
    "Key",
    "MasterSeed",
    "PartialSignature",
    "CombinedSignature",
    "SHA256_SUITE",
    "SHA384_SUITE",
    "SHA512_SUITE",
    "SHA512_256_SUITE",
    "SUITES",
    "get_suite",
    "SHA256_SCHEME",
    "SHA384_SCHEME",
    "SHA512_SCHEME",
    "SHA512_256_SCHEME",
    "SCHEMES",
    "DEFAULT_SCHEME",
    "get_scheme",
]
