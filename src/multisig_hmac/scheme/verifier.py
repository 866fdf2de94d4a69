"""
Threshold verification of combined signatures.

Verification undoes the combination. For every signer the signature claims,
the verifier recomputes that signer's partial signature and XORs it back out
of the claimed bitfield and tag. The signature is valid exactly when both
return to zero: the bitfield cancels only if the claimed signer set is the
true one, and the tag cancels only if every recomputed tag matches.

No knowledge of which subset signed is needed; every claimed bit is checked.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from ..types import KeysetTooSmallError
from ..types.byte_arrays import is_zero, xor_into
from ._validation import require_bitfield, require_length, require_threshold
from .bitfield import highest_index, indices, popcount
from .containers import CombinedSignature, Key, MasterSeed
from .signer import sign
from .suites import HashSuite

logger = logging.getLogger(__name__)

KeySource = Callable[[int], Key]
"""Returns the key of the signer at a given index."""


def _verify_with(
    suite: HashSuite,
    key_for: KeySource,
    signature: CombinedSignature,
    message: bytes,
    out: bytearray | None,
) -> bool:
    """Shared reconstruction loop for `verify` and `verify_derived`."""
    if out is None:
        acc = bytearray(signature.tag)
    else:
        require_length("out", out, suite.TAG_BYTES)
        acc = out
        acc[:] = signature.tag

    bitfield = signature.bitfield
    for index in indices(signature.bitfield):
        partial = sign(suite, key_for(index), message)
        xor_into(acc, partial.tag)
        bitfield ^= partial.bitfield

    return int(bitfield) == 0 and is_zero(acc)


def _check_inputs(
    suite: HashSuite, signature: CombinedSignature, threshold: int
) -> tuple[int, int]:
    """Validate the parts common to both entry points; return (signers, threshold)."""
    threshold = require_threshold(threshold)
    require_bitfield(signature.bitfield)
    require_length("CombinedSignature.tag", signature.tag, suite.TAG_BYTES)
    return popcount(signature.bitfield), threshold


def verify(
    suite: HashSuite,
    keys: Sequence[Key],
    signature: CombinedSignature,
    message: bytes,
    threshold: int,
    *,
    out: bytearray | None = None,
) -> bool:
    """
    Verifies a combined signature against a stored keyset.

    ### Verification Algorithm

    1.  Count the signers `n` the bitfield claims.
    2.  Require a keyset covering every claimed index.
    3.  If `n < threshold`, reject without any cryptographic work.
    4.  For each claimed index `i` in ascending order, recompute the partial
        signature of `keys[i]` over `message` and XOR its bitfield and tag out
        of the claimed signature.
    5.  Accept if and only if both the bitfield and the tag are now zero.

    Args:
        suite: The active hash suite.
        keys: Keys indexed by position: `keys[i]` belongs to signer `i`.
        signature: The combined signature to check.
        message: The message that was supposedly signed.
        threshold: Minimum number of distinct signers required.
        out: Optional caller-owned accumulator of `TAG_BYTES`. It must not be
            shared with a concurrent call.

    Returns:
        `True` if at least `threshold` valid signers produced the signature,
        `False` otherwise.

    Raises:
        ThresholdError: If `threshold` is not a positive uint32.
        KeysetTooSmallError: If `keys` does not cover every claimed index.
        ByteLengthError: If a key, the tag or `out` has the wrong length.
    """
    signers, threshold = _check_inputs(suite, signature, threshold)

    required = max(signers, highest_index(signature.bitfield) + 1)
    if len(keys) < required:
        raise KeysetTooSmallError(required=required, actual=len(keys))

    if signers < threshold:
        logger.debug("Signature claims %d signers, below threshold %d", signers, threshold)
        return False

    valid = _verify_with(suite, lambda i: keys[i], signature, message, out)
    logger.debug("Verified %d-signer %s signature: %s", signers, suite.NAME, valid)
    return valid


def verify_derived(
    suite: HashSuite,
    derive: Callable[[MasterSeed, int], Key],
    seed: MasterSeed,
    signature: CombinedSignature,
    message: bytes,
    threshold: int,
    *,
    out: bytearray | None = None,
) -> bool:
    """
    Verifies a combined signature against keys derived from a master seed.

    Identical to `verify`, except that the key of each claimed signer is
    re-derived from `seed` instead of being looked up.

    Args:
        suite: The active hash suite.
        derive: The key derivation function, `derive(seed, index) -> Key`.
        seed: The group's master seed.
        signature: The combined signature to check.
        message: The message that was supposedly signed.
        threshold: Minimum number of distinct signers required.
        out: Optional caller-owned accumulator of `TAG_BYTES`.

    Returns:
        `True` if at least `threshold` valid signers produced the signature,
        `False` otherwise.

    Raises:
        ThresholdError: If `threshold` is not a positive uint32.
        ByteLengthError: If the seed, the tag or `out` has the wrong length.
    """
    signers, threshold = _check_inputs(suite, signature, threshold)
    require_length("MasterSeed", seed.seed, suite.KEY_BYTES)

    if signers < threshold:
        logger.debug("Signature claims %d signers, below threshold %d", signers, threshold)
        return False

    valid = _verify_with(suite, lambda i: derive(seed, i), signature, message, out)
    logger.debug("Verified %d-signer derived %s signature: %s", signers, suite.NAME, valid)
    return valid
