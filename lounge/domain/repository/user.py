"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lounge.domain.model.user import User
from lounge.domain.value import UserId


class UserRepository(ABC):
    """Read access to portal users."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find multiple users in a single query.

        Args:
            user_ids: User IDs to load

        Returns:
            Found users (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save or update a user (used by fixtures and seeding)."""
        pass
