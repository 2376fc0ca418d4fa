"""Shared base for entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model for entities.

    Entities are snapshots of a row plus whatever aggregates were asked
    for; changes go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
