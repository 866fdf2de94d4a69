"""
Signer bitfield helpers.

A bitfield is a `Uint32` in which bit `i` set means "the signer at index `i`
contributed". The 32-bit width bounds the scheme to 32 signers, so valid
signer indices are `[0, MAX_SIGNERS - 1]`.
"""

from __future__ import annotations

from typing import Iterator

from ..types import Uint32

MAX_SIGNERS: int = Uint32.BITS
"""Number of signers a bitfield can address."""

EMPTY_BITFIELD: Uint32 = Uint32(0)
"""The bitfield with no signer bits set."""


def single_bit(index: int) -> Uint32:
    """Return the bitfield holding only the bit for `index`."""
    return Uint32(1) << Uint32(index)


def popcount(bitfield: Uint32) -> int:
    """Number of signer bits set in `bitfield`."""
    return int(bitfield).bit_count()


def indices(bitfield: Uint32) -> Iterator[int]:
    """Yield the indices of the set bits in ascending order."""
    value = int(bitfield)
    index = 0
    while value:
        if value & 1:
            yield index
        value >>= 1
        index += 1


def highest_index(bitfield: Uint32) -> int:
    """
    Index of the highest set bit.

    Returns -1 for the empty bitfield so that `highest_index(b) + 1` is always
    the number of key slots `b` addresses.
    """
    return int(bitfield).bit_length() - 1
