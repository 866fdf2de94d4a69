"""
Global configuration for the multisig HMAC scheme.

This module contains environment-specific settings that apply across the package.
"""

import os

_SUPPORTED_SUITES: list[str] = ["sha256", "sha384", "sha512", "sha512_256"]

MULTISIG_HMAC_SUITE = os.environ.get("MULTISIG_HMAC_SUITE", "sha256").lower()
"""The hash suite used by `DEFAULT_SCHEME`. Defaults to 'sha256'."""

if MULTISIG_HMAC_SUITE not in _SUPPORTED_SUITES:
    raise ValueError(
        f"Invalid MULTISIG_HMAC_SUITE environment variable: '{MULTISIG_HMAC_SUITE}'. "
        f"Supported values: {_SUPPORTED_SUITES}"
    )
