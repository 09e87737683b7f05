"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lounge.domain.model.vote import Vote
from lounge.domain.value import SuggestionId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_suggestion(
        self, user_id: UserId, suggestion_id: SuggestionId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific suggestion.

        Args:
            user_id: The user's ID
            suggestion_id: The suggestion's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save_and_count(self, vote: Vote) -> bool:
        """Record a vote and increment its suggestion's counter as one unit.

        Either both writes happen or neither does. The increment only
        applies to pending suggestions.

        Args:
            vote: The vote to record

        Returns:
            True if recorded, False if the suggestion is missing or no
            longer pending (nothing is written)

        Raises:
            IntegrityError: If the user already voted for the suggestion
        """
        pass

    @abstractmethod
    async def count_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Count votes on a suggestion.

        Args:
            suggestion_id: The suggestion's ID

        Returns:
            Number of vote records
        """
        pass

    @abstractmethod
    async def find_by_user_and_suggestions(
        self, user_id: UserId, suggestion_ids: Sequence[SuggestionId]
    ) -> List[Vote]:
        """Find a user's votes on multiple suggestions (batch query).

        Args:
            user_id: The user's ID
            suggestion_ids: Suggestions to check

        Returns:
            Votes by the user on the given suggestions
        """
        pass
