"""Shared base for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Frozen, hashable pydantic model compared field by field."""

    model_config = ConfigDict(frozen=True, extra="forbid")
