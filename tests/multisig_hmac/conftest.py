"""
Shared pytest fixtures for all multisig_hmac tests.

Provides one scheme per suite and a small keyset for the default suite.
"""

from __future__ import annotations

import pytest

from multisig_hmac.scheme import SCHEMES, SHA256_SCHEME, Key, MultisigHmacScheme


@pytest.fixture(params=sorted(SCHEMES), ids=lambda name: name)
def scheme(request: pytest.FixtureRequest) -> MultisigHmacScheme:
    """Every supported scheme, one test run each."""
    return SCHEMES[request.param]


@pytest.fixture
def sha256_keys() -> list[Key]:
    """Three independent SHA-256 keys at indices 0, 1 and 2."""
    return [SHA256_SCHEME.key_gen(i) for i in range(3)]
