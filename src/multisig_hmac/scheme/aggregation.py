"""
Aggregation of partial signatures into a combined signature.

Combination is XOR-folding: bitfields are XORed together and tags are XORed
byte by byte. The order of the inputs does not matter.

XOR has one hazard: two inputs with the same signer index cancel each other.
Their bit clears and their tags annihilate, leaving a signature that claims
fewer signers than were combined. That condition is always rejected.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..types import CancellationError, EmptyCombinationError
from ..types.byte_arrays import is_zero, xor_into
from ._validation import require_bitfield, require_length, require_single_bit
from .bitfield import EMPTY_BITFIELD, popcount
from .containers import CombinedSignature, PartialSignature
from .suites import HashSuite

logger = logging.getLogger(__name__)


def combine(
    suite: HashSuite,
    partials: Sequence[PartialSignature],
    *,
    out: bytearray | None = None,
) -> CombinedSignature:
    """
    Combines partial signatures over the same message into one signature.

    ### Cancellation Checks

    1.  Every partial signature must carry exactly one signer bit, so no
        input can stand in for several signers or for none.
    2.  The number of bits in the folded bitfield must equal the number of
        partial signatures. Anything less means two inputs shared an index.
    3.  The folded tag must not be all zero. This is a weaker guard against
        total cancellation and is rejected even with a plausible bitfield.

    Args:
        suite: The active hash suite.
        partials: The partial signatures to combine.
        out: Optional caller-owned accumulator of `TAG_BYTES`. It is zeroed
            before use and holds the combined tag afterwards. It must not be
            shared with a concurrent call.

    Returns:
        The combined signature.

    Raises:
        EmptyCombinationError: If `partials` is empty.
        ByteLengthError: If a tag or `out` has the wrong length.
        BitfieldError: If a bitfield is not a valid uint32 or does not carry
            exactly one signer bit.
        CancellationError: If any contribution was cancelled.
    """
    if not partials:
        raise EmptyCombinationError()

    if out is None:
        acc = bytearray(suite.TAG_BYTES)
    else:
        require_length("out", out, suite.TAG_BYTES)
        acc = out
        acc[:] = bytes(suite.TAG_BYTES)

    bitfield = EMPTY_BITFIELD
    for partial in partials:
        require_length("PartialSignature.tag", partial.tag, suite.TAG_BYTES)
        bitfield ^= require_bitfield(partial.bitfield)
        require_single_bit(partial.bitfield)
        xor_into(acc, partial.tag)

    signers = popcount(bitfield)
    if signers != len(partials):
        logger.warning(
            "Rejected combination of %d partial signatures: only %d signer bits remain",
            len(partials),
            signers,
        )
        raise CancellationError(expected=len(partials), actual=signers)

    if is_zero(acc):
        logger.warning("Rejected combination of %d partial signatures: zero tag", len(partials))
        raise CancellationError(
            expected=len(partials), actual=signers, detail="combined tag is all zero"
        )

    logger.debug("Combined %d partial %s signatures", len(partials), suite.NAME)
    return CombinedSignature(bitfield=bitfield, tag=bytes(acc))
