"""
Data containers for the multisig HMAC scheme.

This module defines the values exchanged between parties: Key, MasterSeed,
PartialSignature and CombinedSignature. All of them are immutable.

Wire layout (all integers little-endian):

- Key:               uint32 index    || secret (KEY_BYTES)
- MasterSeed:        seed (KEY_BYTES)
- PartialSignature:  uint32 bitfield || tag (TAG_BYTES)
- CombinedSignature: uint32 bitfield || tag (TAG_BYTES)

Byte lengths depend on the suite, so decoding always takes the suite the
bytes were produced under.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from typing_extensions import Self

from ..types import StrictBaseModel, Uint32, coerce_to_bytes
from ._validation import require_index, require_length, require_single_bit
from .bitfield import indices, popcount
from .suites import HashSuite

UINT32_BYTES: int = Uint32.BITS // 8
"""Width of the index/bitfield prefix on the wire."""


class _BytesFieldModel(StrictBaseModel):
    """Shared coercion of the byte-valued field of each container."""

    @field_validator("secret", "seed", "tag", mode="before", check_fields=False)
    @classmethod
    def _coerce_bytes(cls, v: Any) -> bytes:
        """Accept bytes-like values, iterables of ints and hex strings."""
        return coerce_to_bytes(v)


class Key(_BytesFieldModel):
    """
    A signer's secret key. **MUST BE KEPT CONFIDENTIAL.**

    Independent keys are random and must be shared with the verifier over a
    secure channel. Derived keys are recomputed from a `MasterSeed` on demand
    and never need to be stored.
    """

    index: Uint32
    """Position of the signer in the keyset, in `[0, 31]`."""

    secret: bytes = Field(repr=False)
    """`KEY_BYTES` of secret key material."""

    def encode_bytes(self) -> bytes:
        """Return `uint32_le(index) || secret`."""
        return self.index.to_bytes() + self.secret

    @classmethod
    def decode_bytes(cls, data: bytes, suite: HashSuite) -> Self:
        """
        Parse a key produced under `suite`.

        Raises:
            ByteLengthError: If `data` is not `4 + KEY_BYTES` long.
            SignerIndexError: If the encoded index is outside `[0, 31]`.
        """
        require_length("Key", data, UINT32_BYTES + suite.KEY_BYTES)
        index = Uint32.decode_bytes(data[:UINT32_BYTES])
        require_index(index)
        return cls(index=index, secret=data[UINT32_BYTES:])


class MasterSeed(_BytesFieldModel):
    """
    The root secret from which every derived key of a signer group follows.

    **MUST NEVER BE SHARED WITH SIGNERS.** Only the verifier (or an offline
    authority) holds it: leaking it leaks every derivable key.
    """

    seed: bytes = Field(repr=False)
    """`KEY_BYTES` of secret seed material."""

    def encode_bytes(self) -> bytes:
        """Return the raw seed bytes."""
        return self.seed

    @classmethod
    def decode_bytes(cls, data: bytes, suite: HashSuite) -> Self:
        """Parse a seed produced under `suite`."""
        require_length("MasterSeed", data, suite.KEY_BYTES)
        return cls(seed=data)


class PartialSignature(_BytesFieldModel):
    """
    One signer's tag over one message.

    The bitfield carries a single bit at the signer's index. The bitfield and
    tag are produced together and are only meaningful as a pair.
    """

    bitfield: Uint32
    """`1 << index` of the signer that produced `tag`."""

    tag: bytes
    """`HMAC(key.secret, message)`, `TAG_BYTES` long."""

    @property
    def index(self) -> int:
        """The signer index encoded by the bitfield."""
        return require_single_bit(self.bitfield)

    def encode_bytes(self) -> bytes:
        """Return `uint32_le(bitfield) || tag`."""
        return self.bitfield.to_bytes() + self.tag

    @classmethod
    def decode_bytes(cls, data: bytes, suite: HashSuite) -> Self:
        """
        Parse a partial signature produced under `suite`.

        Raises:
            ByteLengthError: If `data` is not `4 + TAG_BYTES` long.
            BitfieldError: If the bitfield does not have exactly one bit set.
        """
        require_length("PartialSignature", data, UINT32_BYTES + suite.TAG_BYTES)
        bitfield = Uint32.decode_bytes(data[:UINT32_BYTES])
        require_single_bit(bitfield)
        return cls(bitfield=bitfield, tag=data[UINT32_BYTES:])


class CombinedSignature(_BytesFieldModel):
    """
    The XOR of several partial signatures over the same message.

    It has the same size as a single partial signature regardless of how
    many signers contributed. The threshold is not part of the signature;
    the verifier supplies it.
    """

    bitfield: Uint32
    """OR (equivalently XOR) of the contributing signers' bitfields."""

    tag: bytes
    """Byte-wise XOR of the contributing tags, `TAG_BYTES` long."""

    @property
    def signers(self) -> list[int]:
        """Indices of the signers this signature claims, ascending."""
        return list(indices(self.bitfield))

    @property
    def num_signers(self) -> int:
        """Number of signers this signature claims."""
        return popcount(self.bitfield)

    def encode_bytes(self) -> bytes:
        """Return `uint32_le(bitfield) || tag`."""
        return self.bitfield.to_bytes() + self.tag

    @classmethod
    def decode_bytes(cls, data: bytes, suite: HashSuite) -> Self:
        """
        Parse a combined signature produced under `suite`.

        Raises:
            ByteLengthError: If `data` is not `4 + TAG_BYTES` long.
        """
        require_length("CombinedSignature", data, UINT32_BYTES + suite.TAG_BYTES)
        return cls(bitfield=Uint32.decode_bytes(data[:UINT32_BYTES]), tag=data[UINT32_BYTES:])
