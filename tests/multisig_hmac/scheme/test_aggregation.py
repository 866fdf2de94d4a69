"""Tests for combining partial signatures."""

import itertools
import logging

import pytest

from multisig_hmac.scheme.containers import Key, PartialSignature
from multisig_hmac.scheme.interface import SHA256_SCHEME, SHA512_SCHEME
from multisig_hmac.types import (
    BitfieldError,
    ByteLengthError,
    CancellationError,
    EmptyCombinationError,
    Uint32,
)

MESSAGE = b"hello world"


def test_combine_xors_bitfields_and_tags(sha256_keys: list[Key]) -> None:
    s0 = SHA256_SCHEME.sign(sha256_keys[0], MESSAGE)
    s2 = SHA256_SCHEME.sign(sha256_keys[2], MESSAGE)

    combined = SHA256_SCHEME.combine([s0, s2])

    assert combined.bitfield == Uint32(0b101)
    assert combined.tag == bytes(a ^ b for a, b in zip(s0.tag, s2.tag))


def test_single_partial_combines_to_itself(sha256_keys: list[Key]) -> None:
    s1 = SHA256_SCHEME.sign(sha256_keys[1], MESSAGE)
    combined = SHA256_SCHEME.combine([s1])
    assert combined.bitfield == s1.bitfield
    assert combined.tag == s1.tag


def test_combination_order_is_irrelevant(sha256_keys: list[Key]) -> None:
    partials = [SHA256_SCHEME.sign(key, MESSAGE) for key in sha256_keys]
    results = {SHA256_SCHEME.combine(list(p)) for p in itertools.permutations(partials)}
    assert len(results) == 1


def test_combine_into_out_buffer(sha256_keys: list[Key]) -> None:
    partials = [SHA256_SCHEME.sign(key, MESSAGE) for key in sha256_keys]
    out = bytearray(b"\xff" * 32)

    combined = SHA256_SCHEME.combine(partials, out=out)

    # Stale buffer contents are discarded before folding.
    assert bytes(out) == combined.tag
    assert combined == SHA256_SCHEME.combine(partials)


def test_combine_rejects_wrong_out_length(sha256_keys: list[Key]) -> None:
    s0 = SHA256_SCHEME.sign(sha256_keys[0], MESSAGE)
    with pytest.raises(ByteLengthError):
        SHA256_SCHEME.combine([s0], out=bytearray(64))


def test_duplicate_index_is_fatal(
    sha256_keys: list[Key], caplog: pytest.LogCaptureFixture
) -> None:
    s0 = SHA256_SCHEME.sign(sha256_keys[0], MESSAGE)
    with caplog.at_level(logging.WARNING), pytest.raises(CancellationError) as exc_info:
        SHA256_SCHEME.combine([s0, s0])

    assert (exc_info.value.expected, exc_info.value.actual) == (2, 0)
    assert "rejected combination" in caplog.text.lower()


def test_duplicate_index_with_other_signers_is_fatal(sha256_keys: list[Key]) -> None:
    """A crafted pair sharing an index is rejected even beside honest signers."""
    s0 = SHA256_SCHEME.sign(sha256_keys[0], MESSAGE)
    s1 = SHA256_SCHEME.sign(sha256_keys[1], MESSAGE)
    forged = PartialSignature(bitfield=s0.bitfield, tag=b"\x13" * 32)

    with pytest.raises(CancellationError) as exc_info:
        SHA256_SCHEME.combine([s0, s1, forged])
    assert (exc_info.value.expected, exc_info.value.actual) == (3, 1)


def test_zero_tag_is_rejected() -> None:
    """Distinct bits whose tags cancel to zero are treated as suspicious."""
    a = PartialSignature(bitfield=Uint32(1 << 0), tag=b"\x5a" * 32)
    b = PartialSignature(bitfield=Uint32(1 << 1), tag=b"\x5a" * 32)

    with pytest.raises(CancellationError, match="all zero"):
        SHA256_SCHEME.combine([a, b])


def test_empty_combination_is_fatal() -> None:
    with pytest.raises(EmptyCombinationError):
        SHA256_SCHEME.combine([])


def test_combine_rejects_mixed_suites(sha256_keys: list[Key]) -> None:
    s0 = SHA256_SCHEME.sign(sha256_keys[0], MESSAGE)
    s_other = SHA512_SCHEME.sign(SHA512_SCHEME.key_gen(1), MESSAGE)

    with pytest.raises(ByteLengthError):
        SHA256_SCHEME.combine([s0, s_other])


def test_combine_rejects_non_uint32_bitfield() -> None:
    partial = PartialSignature.model_construct(bitfield=-1, tag=b"\x01" * 32)
    with pytest.raises(BitfieldError):
        SHA256_SCHEME.combine([partial])


def test_multi_bit_partial_cannot_restore_cancelled_duplicate(sha256_keys: list[Key]) -> None:
    """A duplicate pair cancels to zero; a three-bit input must not make up the count."""
    s0 = SHA256_SCHEME.sign(sha256_keys[0], MESSAGE)
    padding = PartialSignature(bitfield=Uint32(0b111), tag=b"\x13" * 32)

    with pytest.raises(BitfieldError, match="exactly one signer bit"):
        SHA256_SCHEME.combine([s0, s0, padding])


def test_zero_bit_partial_is_rejected() -> None:
    empty = PartialSignature(bitfield=Uint32(0), tag=b"\x13" * 32)
    double = PartialSignature(bitfield=Uint32(0b11), tag=b"\x5a" * 32)

    with pytest.raises(BitfieldError, match="exactly one signer bit"):
        SHA256_SCHEME.combine([empty, double])
    with pytest.raises(BitfieldError):
        SHA256_SCHEME.combine([double])
