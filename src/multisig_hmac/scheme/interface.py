"""
Defines the public interface of the multisig HMAC scheme.

A `MultisigHmacScheme` binds every operation to one hash suite:

- `key_gen`, `seed_gen`, `derive_key`: key management,
- `sign`: one party's partial signature,
- `combine`: XOR aggregation of partial signatures,
- `verify`, `verify_derived`: threshold verification.

Every operation is a pure function of its arguments apart from the random
source used by `key_gen` and `seed_gen`. Scheme instances hold no mutable
state and can be shared between threads; only caller-supplied `out` buffers
must not be shared between overlapping calls.
"""

from __future__ import annotations

from typing import Sequence

from typing_extensions import Final

from ..config import MULTISIG_HMAC_SUITE
from . import aggregation, signer, verifier
from .containers import CombinedSignature, Key, MasterSeed, PartialSignature
from .keys import KeyManager
from .rand import Rand
from .suites import (
    SHA256_SUITE,
    SHA384_SUITE,
    SHA512_256_SUITE,
    SHA512_SUITE,
    HashSuite,
    get_suite,
)


class MultisigHmacScheme:
    """Instance of the multisig HMAC scheme for a given suite."""

    def __init__(self, suite: HashSuite, key_manager: KeyManager):
        """Initializes the scheme with a specific suite."""
        if key_manager.suite != suite:
            raise ValueError("key_manager must be configured for the same suite")
        self.suite = suite
        self.key_manager = key_manager

    @classmethod
    def for_suite(cls, suite: HashSuite) -> "MultisigHmacScheme":
        """Build a scheme drawing randomness from the operating system."""
        return cls(suite, KeyManager(suite=suite, rand=Rand(suite=suite)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.suite.NAME})"

    def key_gen(self, index: int) -> Key:
        """
        Generates an independent random key for the signer at `index`.

        The key must be shared securely with the verifier.
        """
        return self.key_manager.independent_key(index)

    def seed_gen(self) -> MasterSeed:
        """
        Generates a master seed for a group of derived keys.

        The seed must never be shared with signers.
        """
        return self.key_manager.master_seed()

    def derive_key(self, seed: MasterSeed, index: int) -> Key:
        """Derives the key of the signer at `index` from `seed`."""
        return self.key_manager.derive_key(seed, index)

    def sign(self, key: Key, message: bytes, *, out: bytearray | None = None) -> PartialSignature:
        """Computes the partial signature of `key` over `message`."""
        return signer.sign(self.suite, key, message, out=out)

    def combine(
        self, partials: Sequence[PartialSignature], *, out: bytearray | None = None
    ) -> CombinedSignature:
        """Combines partial signatures, rejecting cancelled contributions."""
        return aggregation.combine(self.suite, partials, out=out)

    def verify(
        self,
        keys: Sequence[Key],
        signature: CombinedSignature,
        message: bytes,
        threshold: int,
        *,
        out: bytearray | None = None,
    ) -> bool:
        """
        Verifies that at least `threshold` signers of `keys` signed `message`.

        `keys[i]` must be the key of signer `i`. A mismatch returns `False`;
        malformed inputs raise.
        """
        return verifier.verify(self.suite, keys, signature, message, threshold, out=out)

    def verify_derived(
        self,
        seed: MasterSeed,
        signature: CombinedSignature,
        message: bytes,
        threshold: int,
        *,
        out: bytearray | None = None,
    ) -> bool:
        """
        Verifies that at least `threshold` signers derived from `seed` signed `message`.

        A mismatch returns `False`; malformed inputs raise.
        """
        return verifier.verify_derived(
            self.suite, self.derive_key, seed, signature, message, threshold, out=out
        )

    def decode_key(self, data: bytes) -> Key:
        """Parse a key encoded under this scheme's suite."""
        return Key.decode_bytes(data, self.suite)

    def decode_seed(self, data: bytes) -> MasterSeed:
        """Parse a master seed encoded under this scheme's suite."""
        return MasterSeed.decode_bytes(data, self.suite)

    def decode_partial(self, data: bytes) -> PartialSignature:
        """Parse a partial signature encoded under this scheme's suite."""
        return PartialSignature.decode_bytes(data, self.suite)

    def decode_signature(self, data: bytes) -> CombinedSignature:
        """Parse a combined signature encoded under this scheme's suite."""
        return CombinedSignature.decode_bytes(data, self.suite)


SHA256_SCHEME: Final = MultisigHmacScheme.for_suite(SHA256_SUITE)
"""HMAC-SHA-256 instance."""

SHA384_SCHEME: Final = MultisigHmacScheme.for_suite(SHA384_SUITE)
"""HMAC-SHA-384 instance."""

SHA512_SCHEME: Final = MultisigHmacScheme.for_suite(SHA512_SUITE)
"""HMAC-SHA-512 instance."""

SHA512_256_SCHEME: Final = MultisigHmacScheme.for_suite(SHA512_256_SUITE)
"""HMAC-SHA-512/256 instance."""

SCHEMES: Final[dict[str, MultisigHmacScheme]] = {
    scheme.suite.NAME: scheme
    for scheme in (SHA256_SCHEME, SHA384_SCHEME, SHA512_SCHEME, SHA512_256_SCHEME)
}
"""One scheme per supported suite, keyed by suite name."""


def get_scheme(name: str) -> MultisigHmacScheme:
    """
    Look up the scheme for a suite name (case-insensitive).

    Raises:
        UnknownSuiteError: If `name` is not a supported suite.
    """
    return SCHEMES[get_suite(name).NAME]


DEFAULT_SCHEME: Final = get_scheme(MULTISIG_HMAC_SUITE)
"""The scheme selected by the `MULTISIG_HMAC_SUITE` environment variable."""
