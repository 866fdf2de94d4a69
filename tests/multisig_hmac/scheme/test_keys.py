"""Tests for independent key generation and seed-based key derivation."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from multisig_hmac.scheme.containers import MasterSeed
from multisig_hmac.scheme.interface import SHA256_SCHEME, MultisigHmacScheme
from multisig_hmac.scheme.keys import KDF_LABEL, kdf_info
from multisig_hmac.scheme.suites import SHA256_SUITE
from multisig_hmac.types import ByteLengthError, SignerIndexError, Uint32


def test_kdf_info_is_eleven_bytes() -> None:
    assert KDF_LABEL == b"derived"
    assert kdf_info(0) == b"derived\x00\x00\x00\x00"
    assert kdf_info(0x1F) == b"derived\x1f\x00\x00\x00"
    assert len(kdf_info(31)) == 11


def test_independent_key_has_suite_length(scheme: MultisigHmacScheme) -> None:
    key = scheme.key_gen(3)
    assert key.index == Uint32(3)
    assert len(key.secret) == scheme.suite.KEY_BYTES


def test_independent_keys_are_random(scheme: MultisigHmacScheme) -> None:
    """
    Sanity check that key generation is not deterministic or trivial.

    Keys filled with a single repeated byte are astronomically unlikely.
    """
    num_trials = 10
    secrets = {scheme.key_gen(0).secret for _ in range(num_trials)}
    assert len(secrets) == num_trials
    assert all(len(set(secret)) > 1 for secret in secrets)


def test_master_seed_has_suite_length(scheme: MultisigHmacScheme) -> None:
    seed = scheme.seed_gen()
    assert len(seed.seed) == scheme.suite.KEY_BYTES
    assert scheme.seed_gen() != seed


@pytest.mark.parametrize("index", [-1, 32, 2**32, True, 1.0, "1"])
def test_independent_key_rejects_bad_index(index: object) -> None:
    with pytest.raises(SignerIndexError):
        SHA256_SCHEME.key_gen(index)  # type: ignore[arg-type]


@pytest.mark.parametrize("index", [0, 31])
def test_independent_key_accepts_boundary_indices(index: int) -> None:
    assert SHA256_SCHEME.key_gen(index).index == Uint32(index)


def test_derive_key_two_block_construction() -> None:
    """For SHA-256 the key is exactly `block0 || block1`."""
    seed = MasterSeed(seed=bytes(range(64)))
    key = SHA256_SCHEME.derive_key(seed, 5)

    block0 = SHA256_SUITE.mac(seed.seed, b"derived\x05\x00\x00\x00\x00")
    block1 = SHA256_SUITE.mac(seed.seed, block0 + b"\x01")
    assert key.index == Uint32(5)
    assert key.secret == block0 + block1


def test_derive_key_fills_key_length(scheme: MultisigHmacScheme) -> None:
    seed = scheme.seed_gen()
    key = scheme.derive_key(seed, 7)
    assert len(key.secret) == scheme.suite.KEY_BYTES

    # The first block always starts the key, whatever the suite.
    block0 = scheme.suite.mac(seed.seed, kdf_info(7) + b"\x00")
    assert key.secret.startswith(block0)


def test_derive_key_blocks_are_distinct(scheme: MultisigHmacScheme) -> None:
    seed = scheme.seed_gen()
    secret = scheme.derive_key(seed, 0).secret
    size = scheme.suite.TAG_BYTES
    blocks = [secret[i : i + size] for i in range(0, len(secret), size)]
    assert len(set(blocks)) == len(blocks)


@given(
    seed=st.binary(min_size=64, max_size=64),
    index=st.integers(min_value=0, max_value=31),
)
def test_derive_key_is_deterministic(seed: bytes, index: int) -> None:
    master = MasterSeed(seed=seed)
    assert SHA256_SCHEME.derive_key(master, index) == SHA256_SCHEME.derive_key(master, index)


def test_derive_key_is_sensitive_to_inputs() -> None:
    seed_a = MasterSeed(seed=b"\x11" * 64)
    seed_b = MasterSeed(seed=b"\x22" * 64)

    baseline = SHA256_SCHEME.derive_key(seed_a, 1).secret
    assert SHA256_SCHEME.derive_key(seed_a, 2).secret != baseline
    assert SHA256_SCHEME.derive_key(seed_b, 1).secret != baseline


@pytest.mark.parametrize("length", [0, 32, 63, 65, 128])
def test_derive_key_rejects_wrong_seed_length(length: int) -> None:
    with pytest.raises(ByteLengthError):
        SHA256_SCHEME.derive_key(MasterSeed(seed=b"\x01" * length), 0)


@pytest.mark.parametrize("index", [-1, 32])
def test_derive_key_rejects_bad_index(index: int) -> None:
    with pytest.raises(SignerIndexError):
        SHA256_SCHEME.derive_key(MasterSeed(seed=b"\x01" * 64), index)
