"""User entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import UserId


class User(DomainModel):
    """Registered user.

    Credentials live outside the domain model.
    """

    id: UserId
    username: str = Field(min_length=1, max_length=64)
    email: Optional[str] = None
    registered_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
