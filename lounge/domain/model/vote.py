"""Vote entity.

A vote is a single user's one-time endorsement of a suggestion.
"""

from datetime import datetime

from pydantic import Field

from lounge.domain.model.clock import utcnow
from lounge.domain.model.common import DomainModel
from lounge.domain.value import SuggestionId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per suggestion (enforced by database unique constraint)
    - Votes are never updated or removed
    """

    id: VoteId
    suggestion_id: SuggestionId
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
