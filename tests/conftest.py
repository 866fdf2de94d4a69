"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

if "MULTISIG_HMAC_SUITE" not in os.environ:
    os.environ["MULTISIG_HMAC_SUITE"] = "sha256"

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
