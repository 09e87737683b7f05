"""Category entity for grouping media."""

from pydantic import Field

from lounge.domain.model.common import DomainModel
from lounge.domain.value import CategoryId, CategoryType


class Category(DomainModel):
    """Media category (read-only view).

    A category holds movies, series, or both.
    """

    id: CategoryId
    name: str = Field(min_length=1, max_length=100)
    type: CategoryType
