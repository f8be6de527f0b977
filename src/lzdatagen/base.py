"""Reusable, strict base model for configuration objects."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Unknown fields are rejected and values are not coerced between types,
    so a mistyped option name or a string where a number belongs fails loudly.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )
