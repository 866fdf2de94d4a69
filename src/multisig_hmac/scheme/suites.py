"""
Defines the hash suites supported by the multisig HMAC scheme.

A suite fixes the HMAC hash function together with the length of keys and
tags. Suites are mutually incompatible: a key, seed or tag produced under
one suite has the wrong length for every other suite and is rejected.

| Suite        | KEY_BYTES | TAG_BYTES |
|--------------|-----------|-----------|
| `sha256`     | 64        | 32        |
| `sha384`     | 128       | 48        |
| `sha512`     | 128       | 64        |
| `sha512_256` | 128       | 32        |

`KEY_BYTES` is the block size of the underlying hash, so keys are used by
HMAC without being hashed down first.
"""

import hmac

from pydantic import BaseModel, ConfigDict
from typing_extensions import Final

from ..types.exceptions import UnknownSuiteError


class HashSuite(BaseModel):
    """A model holding the parameters of one hash suite."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    NAME: str
    """The identifier this suite is selected by."""

    HASH_NAME: str
    """The `hashlib` name of the underlying hash function."""

    KEY_BYTES: int
    """The length in bytes of every independent key, derived key and master seed."""

    TAG_BYTES: int
    """The length in bytes of an HMAC output under this suite."""

    def mac(self, key: bytes, message: bytes) -> bytes:
        """
        Compute `HMAC(key, message)` with this suite's hash function.

        This is the only cryptographic primitive the scheme relies on.
        """
        return hmac.digest(key, message, self.HASH_NAME)


SHA256_SUITE: Final = HashSuite(NAME="sha256", HASH_NAME="sha256", KEY_BYTES=64, TAG_BYTES=32)
"""HMAC-SHA-256: 64-byte keys, 32-byte tags."""

SHA384_SUITE: Final = HashSuite(NAME="sha384", HASH_NAME="sha384", KEY_BYTES=128, TAG_BYTES=48)
"""HMAC-SHA-384: 128-byte keys, 48-byte tags."""

SHA512_SUITE: Final = HashSuite(NAME="sha512", HASH_NAME="sha512", KEY_BYTES=128, TAG_BYTES=64)
"""HMAC-SHA-512: 128-byte keys, 64-byte tags."""

SHA512_256_SUITE: Final = HashSuite(
    NAME="sha512_256", HASH_NAME="sha512_256", KEY_BYTES=128, TAG_BYTES=32
)
"""HMAC-SHA-512/256: 128-byte keys, 32-byte tags."""

SUITES: Final[dict[str, HashSuite]] = {
    suite.NAME: suite for suite in (SHA256_SUITE, SHA384_SUITE, SHA512_SUITE, SHA512_256_SUITE)
}
"""The closed set of supported suites, keyed by name."""


def get_suite(name: str) -> HashSuite:
    """
    Look up a suite by name (case-insensitive).

    Raises:
        UnknownSuiteError: If `name` is not a supported suite.
    """
    try:
        return SUITES[name.lower()]
    except KeyError:
        raise UnknownSuiteError(name, list(SUITES)) from None
