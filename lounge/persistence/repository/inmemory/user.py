"""In-memory user repository for testing."""

from typing import Optional, Sequence

from lounge.domain.model.user import User
from lounge.domain.repository.user import UserRepository
from lounge.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find multiple users."""
        return [self._users[uid] for uid in dict.fromkeys(user_ids) if uid in self._users]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
