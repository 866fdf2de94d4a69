"""Internal validation utilities for the multisig HMAC scheme."""

from __future__ import annotations

from typing import Any

from ..types import (
    BitfieldError,
    ByteLengthError,
    SignerIndexError,
    ThresholdError,
    Uint32,
)
from .bitfield import MAX_SIGNERS


def enforce_strict_types(instance: Any, **field_types: type) -> None:
    """
    Validate that specified fields are exact types, not subclasses.

    This is a helper function to be called from Pydantic model validators.

    Args:
        instance: The model instance being validated.
        **field_types: Mapping of field names to their exact expected types.

    Raises:
        TypeError: If any field is a subclass rather than the exact type.
    """
    for field_name, expected_type in field_types.items():
        value = getattr(instance, field_name)
        if type(value) is not expected_type:
            raise TypeError(
                f"{field_name} must be exactly {expected_type.__name__}, not a subclass"
            )


def require_index(index: Any) -> int:
    """Return `index` as an int if it addresses a bitfield slot, else raise."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise SignerIndexError(index, max_index=MAX_SIGNERS - 1)
    if not 0 <= int(index) < MAX_SIGNERS:
        raise SignerIndexError(index, max_index=MAX_SIGNERS - 1)
    return int(index)


def require_length(type_name: str, data: bytes | bytearray, expected: int) -> None:
    """Raise `ByteLengthError` unless `data` is exactly `expected` bytes long."""
    if len(data) != expected:
        raise ByteLengthError(type_name, expected=expected, actual=len(data))


def require_threshold(threshold: Any) -> int:
    """Return `threshold` as an int if it is a positive uint32, else raise."""
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise ThresholdError(threshold)
    if not 0 < int(threshold) <= Uint32.max_value():
        raise ThresholdError(threshold)
    return int(threshold)


def require_bitfield(bitfield: Any) -> Uint32:
    """Return `bitfield` as a `Uint32` if it is a valid 32-bit word, else raise."""
    if isinstance(bitfield, bool) or not isinstance(bitfield, int):
        raise BitfieldError(bitfield, "not an integer")
    if not 0 <= int(bitfield) <= Uint32.max_value():
        raise BitfieldError(bitfield, "not representable as uint32")
    return Uint32(int(bitfield))


def require_single_bit(bitfield: Uint32) -> int:
    """Return the index encoded by a one-hot bitfield, else raise."""
    if int(bitfield).bit_count() != 1:
        raise BitfieldError(bitfield, "a partial signature must carry exactly one signer bit")
    return int(bitfield).bit_length() - 1
