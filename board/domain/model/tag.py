"""Tag entity."""

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import TagId


class Tag(DomainModel):
    """Tag used to categorize stories."""

    id: TagId
    name: str = Field(min_length=1, max_length=30)
    description: str = ""
