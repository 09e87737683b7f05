"""Suggestion aggregate root.

Suggestions are guest proposals for new movies or series. Other guests vote
on them during the day and an admin resolves them once.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from lounge.domain.model.clock import utcnow
from lounge.domain.model.common import DomainModel
from lounge.domain.value import (
    CategoryId,
    ContentType,
    SuggestionId,
    SuggestionStatus,
    UserId,
)


class Suggestion(DomainModel):
    """Suggestion aggregate root.

    Business rules:
    - Title must contain non-whitespace text
    - Votes never go below zero and only grow while pending
    - resolved_at is set iff status is not pending
    """

    id: SuggestionId
    title: str = Field(min_length=1, max_length=300)
    type: ContentType
    category_id: CategoryId
    user_id: UserId
    votes: int = Field(default=0, ge=0)
    status: SuggestionStatus = SuggestionStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    resolved_at: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank titles."""
        v = v.strip()
        if not v:
            raise ValueError("Title must not be empty")
        return v

    @model_validator(mode="after")
    def validate_resolution(self) -> "Suggestion":
        """Validate that resolution timestamp matches status."""
        if not self.status.is_terminal and self.resolved_at is not None:
            raise ValueError("Pending suggestions cannot have a resolution time")
        if self.status.is_terminal and self.resolved_at is None:
            raise ValueError(f"{self.status.value} suggestions need a resolution time")
        return self

    @property
    def is_pending(self) -> bool:
        """Whether the suggestion still accepts votes and resolution."""
        return not self.status.is_terminal
