"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from lounge.domain.model.vote import Vote
from lounge.domain.repository.suggestion import SuggestionRepository
from lounge.domain.repository.vote import VoteRepository
from lounge.domain.value import SuggestionId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, suggestion_repository: SuggestionRepository) -> None:
        self.suggestion_repository = suggestion_repository
        self._votes: dict[tuple[UserId, SuggestionId], Vote] = {}

    async def find_by_user_and_suggestion(
        self, user_id: UserId, suggestion_id: SuggestionId
    ) -> Optional[Vote]:
        """Find a vote by user and suggestion."""
        return self._votes.get((user_id, suggestion_id))

    async def save_and_count(self, vote: Vote) -> bool:
        """Record a vote and bump its suggestion's counter.

        The vote is stored only after the counter moved.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        key = (vote.user_id, vote.suggestion_id)
        if key in self._votes:
            raise IntegrityError(
                "INSERT INTO suggestion_votes",
                None,
                Exception(
                    'duplicate key value violates unique constraint "unique_suggestion_vote"'
                ),
            )
        if not await self.suggestion_repository.increment_votes(vote.suggestion_id):
            return False
        self._votes[key] = vote
        return True

    async def count_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Count votes for a suggestion."""
        return sum(1 for v in self._votes.values() if v.suggestion_id == suggestion_id)

    async def find_by_user_and_suggestions(
        self, user_id: UserId, suggestion_ids: Sequence[SuggestionId]
    ) -> list[Vote]:
        """Find a user's votes on multiple suggestions (batch query)."""
        if not suggestion_ids:
            return []
        wanted = set(suggestion_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id and v.suggestion_id in wanted
        ]
