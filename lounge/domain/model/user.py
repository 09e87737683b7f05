"""User entity (read-only view of portal accounts)."""

from datetime import datetime

from pydantic import Field

from lounge.domain.model.clock import utcnow
from lounge.domain.model.common import DomainModel
from lounge.domain.value import UserId, UserRole


class User(DomainModel):
    """Portal user.

    Accounts are managed by the portal; the voting API only reads them
    to show who proposed a suggestion.
    """

    id: UserId
    username: str = Field(min_length=1, max_length=255)
    display_name: str = Field(min_length=1, max_length=255)
    role: UserRole = UserRole.GUEST
    created_at: datetime = Field(default_factory=utcnow)
