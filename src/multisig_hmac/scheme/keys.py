"""
Key management for the multisig HMAC scheme.

Two kinds of keys exist:

- **Independent keys** are filled with fresh randomness. Every key must be
  stored by its signer and shared with the verifier over a secure channel.
- **Derived keys** are computed from a single `MasterSeed` and a signer
  index. The verifier only needs to keep the seed and re-derives each key
  when it verifies.
"""

from __future__ import annotations

import logging

from pydantic import model_validator

from ..types import StrictBaseModel, Uint32
from ._validation import enforce_strict_types, require_index, require_length
from .containers import Key, MasterSeed
from .rand import Rand
from .suites import HashSuite

logger = logging.getLogger(__name__)

KDF_LABEL: bytes = b"derived"
"""
Label prefixed to the signer index when deriving a key.

Together with the 4-byte index it forms an 11-byte domain separator, so a
derived key can never coincide with a tag the seed might produce elsewhere.
"""


def kdf_info(index: int) -> bytes:
    """Return the 11-byte derivation label `"derived" || uint32_le(index)`."""
    return KDF_LABEL + Uint32(index).to_bytes()


class KeyManager(StrictBaseModel):
    """Key generation and derivation for a given suite."""

    suite: HashSuite
    """Suite fixing the key length and the HMAC used for derivation."""

    rand: Rand
    """Source of secure randomness for independent keys and seeds."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "KeyManager":
        """Reject subclasses to prevent type confusion attacks."""
        enforce_strict_types(self, suite=HashSuite, rand=Rand)
        if self.rand.suite != self.suite:
            raise ValueError("rand must be configured for the same suite")
        return self

    def independent_key(self, index: int) -> Key:
        """
        Generates a new random key for the signer at `index`.

        Args:
            index: The signer's position in the keyset, in `[0, 31]`.

        Returns:
            A key holding `KEY_BYTES` of fresh randomness.

        Raises:
            SignerIndexError: If `index` cannot be addressed by the bitfield.
        """
        index = require_index(index)
        logger.debug("Generating independent %s key for signer %d", self.suite.NAME, index)
        return Key(index=Uint32(index), secret=self.rand.key_bytes())

    def master_seed(self) -> MasterSeed:
        """Generates a new random master seed of `KEY_BYTES`."""
        logger.debug("Generating %s master seed", self.suite.NAME)
        return MasterSeed(seed=self.rand.key_bytes())

    def derive_key(self, seed: MasterSeed, index: int) -> Key:
        """
        Deterministically derives the key of the signer at `index` from `seed`.

        ### KDF Construction

        With `info = "derived" || uint32_le(index)`:

        - `block_0 = HMAC(seed, info || 0x00)`
        - `block_i = HMAC(seed, block_{i-1} || i)` for `i >= 1`

        Blocks are concatenated until `KEY_BYTES` are available and the result
        is truncated to `KEY_BYTES`. For `sha256` and `sha512` exactly two
        blocks are used; suites with shorter tags relative to their key length
        keep extending the chain.

        The trailing counter byte separates the blocks from each other, so no
        block can be recomputed from a later one or reused by another derivation.

        Args:
            seed: The group's master seed.
            index: The signer's position in the keyset, in `[0, 31]`.

        Returns:
            The derived key. Equal inputs always give equal keys.

        Raises:
            ByteLengthError: If the seed does not have `KEY_BYTES` bytes.
            SignerIndexError: If `index` cannot be addressed by the bitfield.
        """
        suite = self.suite
        require_length("MasterSeed", seed.seed, suite.KEY_BYTES)
        index = require_index(index)

        # Extend-and-expand: chain blocks until the key length is covered.
        block = suite.mac(seed.seed, kdf_info(index) + b"\x00")
        blocks = [block]
        counter = 1
        while len(blocks) * suite.TAG_BYTES < suite.KEY_BYTES:
            block = suite.mac(seed.seed, block + bytes([counter]))
            blocks.append(block)
            counter += 1

        secret = b"".join(blocks)[: suite.KEY_BYTES]
        return Key(index=Uint32(index), secret=secret)
