"""
Partial signing.

A partial signature is a plain HMAC over the message plus the signer's bit.
There is no nonce: callers needing replay protection put one in the message.
"""

from __future__ import annotations

import logging

from ._validation import require_index, require_length
from .bitfield import single_bit
from .containers import Key, PartialSignature
from .suites import HashSuite

logger = logging.getLogger(__name__)


def sign(
    suite: HashSuite, key: Key, message: bytes, *, out: bytearray | None = None
) -> PartialSignature:
    """
    Computes the partial signature of `key` over `message`.

    `tag = HMAC(key.secret, message)` and `bitfield = 1 << key.index`.

    Args:
        suite: The active hash suite.
        key: The signer's key.
        message: Opaque bytes to authenticate.
        out: Optional caller-owned buffer of `TAG_BYTES` that receives the tag.
            It must not be shared with a concurrent call.

    Raises:
        SignerIndexError: If `key.index` is outside `[0, 31]`.
        ByteLengthError: If `key.secret` or `out` has the wrong length.
    """
    index = require_index(key.index)
    require_length("Key.secret", key.secret, suite.KEY_BYTES)

    tag = suite.mac(key.secret, bytes(message))
    if out is not None:
        require_length("out", out, suite.TAG_BYTES)
        out[:] = tag

    logger.debug("Signer %d produced partial %s signature", index, suite.NAME)
    return PartialSignature(bitfield=single_bit(index), tag=tag)

