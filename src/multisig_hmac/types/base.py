"""Reusable, strict base models for the multisig HMAC scheme."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Every value produced by the scheme (keys, seeds, signatures) is
    an immutable record once built. Unknown fields are rejected and no
    implicit coercion between types is performed.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )

