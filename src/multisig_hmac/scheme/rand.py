"""Secure random byte source for key and seed generation."""

import secrets

from pydantic import model_validator

from ..types import StrictBaseModel
from .suites import HashSuite


class Rand(StrictBaseModel):
    """An instance of the random byte generator for a given suite."""

    suite: HashSuite
    """Suite whose key length is produced."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "Rand":
        """Reject subclasses to prevent type confusion attacks."""
        if type(self.suite) is not HashSuite:
            raise TypeError("suite must be exactly HashSuite, not a subclass")
        return self

    def key_bytes(self) -> bytes:
        """
        Generates `KEY_BYTES` of cryptographically secure randomness.

        This function sources randomness from the operating system's
        entropy pool.
        """
        return secrets.token_bytes(self.suite.KEY_BYTES)
